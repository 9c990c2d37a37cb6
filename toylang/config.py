from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

DEFAULT_MAX_DEPTH = 256


def _bool_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{var} must be a boolean flag, got {raw!r}")


def _int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Config:
    """Interpreter limits and behaviour switches.

    max_depth bounds both list nesting in the parser and recursive evaluation.
    strict_unbound makes lookups of unbound symbols raise instead of yielding
    the Unbound marker.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_unbound: bool = False

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            max_depth=_int_from_env("TOYLANG_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            strict_unbound=_bool_from_env("TOYLANG_STRICT_UNBOUND", False),
        )


def get_config() -> Config:
    return Config.from_env()
