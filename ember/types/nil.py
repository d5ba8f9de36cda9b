from __future__ import annotations

from ember.types.symbol import FALSE


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_truthy(value) -> bool:
    """Lisp truthiness: anything not Nil or #f is true."""
    return not (value is Nil or value == FALSE)
