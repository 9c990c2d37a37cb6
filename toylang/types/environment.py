"""Runtime environment for toylang.

An Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. A child never mutates its outer chain:
`define` only writes to the local frame, and lookups walk outward until the
first frame that binds the name.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from toylang import LispValue
from toylang.errors import InvalidSymbolError
from toylang.types.nil import Unbound
from toylang.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise InvalidSymbolError(f"Cannot bind {name!r}: not a symbol")


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def with_parent(cls, parent: Environment) -> Environment:
        """Create an empty environment whose lookups continue into `parent`."""
        return cls(outer=parent)

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting a local binding.

        Raises InvalidSymbolError if `name` is neither a Symbol nor a str.
        """
        self.vars[_as_symbol(name)] = value

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return the value bound to `name`, or Unbound if nothing binds it."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            return Unbound
        return env.vars[symbol]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (Symbol, str)):
            return False
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
