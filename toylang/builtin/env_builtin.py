"""Built-in functions for the toylang root environment.

Each primitive receives its already-evaluated arguments positionally and
returns a single value.
"""
from __future__ import annotations

from functools import reduce

from toylang import LispValue
from toylang.errors import EvalError
from toylang.printer import to_display
from toylang.types.environment import Environment
from toylang.types.symbol import Symbol


def _numbers(name: str, args: tuple[LispValue, ...]) -> tuple[float, ...]:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise EvalError(f"All arguments to {name} must be numbers, got {a!r}")
    return args


def add(*args: LispValue) -> float:
    return float(sum(_numbers("+", args)))


def sub(*args: LispValue) -> float:
    if not args:
        raise EvalError("- requires at least 1 argument")
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -float(nums[0])
    return float(reduce(lambda a, b: a - b, nums))


def mul(*args: LispValue) -> float:
    return float(reduce(lambda a, b: a * b, _numbers("*", args), 1.0))


def div(*args: LispValue) -> float:
    if not args:
        raise EvalError("/ requires at least 1 argument")
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = (1.0,) + nums
    result = float(nums[0])
    for x in nums[1:]:
        if x == 0:
            raise EvalError("/ division by zero")
        result /= x
    return result


def _compare(name: str, args: tuple[LispValue, ...], op) -> float:
    if len(args) < 2:
        raise EvalError(f"{name} requires at least 2 arguments")
    nums = _numbers(name, args)
    return 1.0 if all(op(a, b) for a, b in zip(nums, nums[1:])) else 0.0


def num_eq(*args: LispValue) -> float:
    """(= a b ...) is 1 when all arguments are numerically equal, else 0."""
    return _compare("=", args, lambda a, b: a == b)


def lt(*args: LispValue) -> float:
    return _compare("<", args, lambda a, b: a < b)


def gt(*args: LispValue) -> float:
    return _compare(">", args, lambda a, b: a > b)


def list_builtin(*args: LispValue) -> list[LispValue]:
    return list(args)


def concat(*args: LispValue) -> str:
    """Join strings; numbers are rendered the way the printer renders them."""
    return "".join(to_display(a) for a in args)


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("="): num_eq,
            Symbol("<"): lt,
            Symbol(">"): gt,
            Symbol("list"): list_builtin,
            Symbol("concat"): concat,
        }
    )
