from __future__ import annotations

import logging

from toylang import LispValue
from toylang.builtin.env_builtin import register
from toylang.config import Config, get_config
from toylang.evaluation.evaluator import evaluate
from toylang.reader.parser import Parser
from toylang.types.environment import Environment
from toylang.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates toylang code against a persistent root Environment.
    The root environment is bootstrapped with the builtin primitives.
    """

    def __init__(self, config: Config | None = None):
        self.config: Config = config or get_config()
        self.env: Environment = Environment()
        register(self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value."""
        result: LispValue = Nil
        for expr in Parser(code, self.config).parse_all():
            result = evaluate(expr, self.env, self.config)
            logger.debug("result %r", result)
        return result
