from __future__ import annotations

from typing import Callable

from toylang import SExpression, LispValue
from toylang.config import Config
from toylang.errors import EvalError
from toylang.types.environment import Environment
from toylang.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    config: Config,
    evaluate_fn: Callable[..., LispValue],
    depth: int,
) -> LispValue:
    """
    (let (name1 expr1) (name2 expr2) ... body)

    Each value expression is evaluated in the new scope, so later bindings
    see earlier ones (let* behaviour). The scope is dropped once the body
    has been evaluated.
    """
    if not tail:
        raise EvalError("malformed let: missing body")

    *bindings, body = tail
    scope = Environment.with_parent(env)
    for binding in bindings:
        if not (
            isinstance(binding, list)
            and len(binding) == 2
            and isinstance(binding[0], Symbol)
        ):
            raise EvalError(f"malformed let binding: {binding!r}")
        name, value_expr = binding
        scope.define(name, evaluate_fn(value_expr, scope, config, depth))
    return evaluate_fn(body, scope, config, depth)
