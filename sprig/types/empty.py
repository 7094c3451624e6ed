from __future__ import annotations


class EmptyType:
    """The unit value returned by `define`, `set!` and `display`."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Empty"
    def __str__(self): return ""
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(EmptyType)


Empty = EmptyType()
