"""Core tree-walking evaluator for toylang.

Dispatches on the shape of the expression: atoms evaluate to themselves,
symbols are looked up, the empty list is Nil, special forms are routed
through SPECIAL_FORMS, and any other symbol-headed list applies the bound
native function to its evaluated arguments.
"""

from __future__ import annotations

import logging

from toylang import SExpression, LispValue
from toylang.config import Config, get_config
from toylang.errors import EvalError, UnboundSymbolError
from toylang.evaluation.special_forms import SPECIAL_FORMS
from toylang.types.environment import Environment
from toylang.types.nil import Nil, Unbound
from toylang.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Exceptions from native functions that are reported as evaluation errors.
_NATIVE_FAILURES = (TypeError, ValueError, ArithmeticError)


def evaluate(
    expr: SExpression, env: Environment, config: Config | None = None
) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if config is None:
        config = get_config()
    return evaluate0(expr, env, config, 0)


def _is_primitive(expr: SExpression) -> bool:
    return isinstance(expr, (int, float, str)) and not isinstance(expr, bool)


def _resolve(symbol: Symbol, env: Environment, config: Config) -> LispValue:
    value = env.lookup(symbol)
    if value is Unbound and config.strict_unbound:
        raise UnboundSymbolError(f"Cannot lookup unbound symbol {symbol}")
    return value


def evaluate0(
    expr: SExpression, env: Environment, config: Config, depth: int = 0
) -> LispValue:
    """Single evaluation step; `depth` counts nested evaluations so far."""
    if depth > config.max_depth:
        raise EvalError("maximum evaluation depth exceeded")

    if isinstance(expr, Symbol):
        return _resolve(expr, env, config)

    if not isinstance(expr, list):
        # Numbers, strings and any value used as data.
        return expr

    if not expr:
        return Nil

    logger.debug("evaluating %r", expr)
    head, *tail = expr

    if isinstance(head, Symbol):
        if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, config, evaluate0, depth + 1)

        fn = _resolve(head, env, config)
        if not callable(fn):
            # Non-callable head: its value is the result, arguments are ignored.
            return fn

        args = [evaluate0(arg, env, config, depth + 1) for arg in tail]
        try:
            return fn(*args)
        except _NATIVE_FAILURES as e:
            raise EvalError(f"{head}: {e}") from e

    if _is_primitive(head):
        if tail:
            raise EvalError(f"primitives are not callable: {head!r}")
        return head

    raise EvalError(f"unsupported construct: cannot apply {head!r}")
