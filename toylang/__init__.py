# Core type aliases for the toylang data model.
# Expressions are plain Python values: float for numbers, str for text,
# Symbol for names and list for (possibly nested, possibly empty) lists.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values, which may
#   also be native callables, Nil or Unbound.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Host supplied primitive: receives already-evaluated values, returns one value.
NativeFn = Callable[..., LispValue]

__version__ = "0.1.0"
