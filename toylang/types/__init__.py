from toylang.types.symbol import Symbol
from toylang.types.nil import Nil, NilType, Unbound, UnboundType
from toylang.types.environment import Environment

__all__ = ["Symbol", "Nil", "NilType", "Unbound", "UnboundType", "Environment"]
