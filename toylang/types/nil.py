from __future__ import annotations


class NilType:
    """The value of an empty list: toylang's null/unit constant."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class UnboundType:
    """Returned by a lookup that no environment in the chain satisfies."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unbound>"
    def __bool__(self): return False


Nil = NilType()
Unbound = UnboundType()
