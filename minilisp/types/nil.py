from __future__ import annotations


class NilType:
    """The empty list and the only false value. There is exactly one instance."""
    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __bool__(self): return False


class TrueType:
    """The canonical truth value. There is exactly one instance."""
    __slots__ = ()
    _instance: TrueType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "True"
    def __bool__(self): return True


Nil = NilType()
T = TrueType()


def truthy(value) -> bool:
    """Everything except Nil is true."""
    return value is not Nil


def from_bool(flag: bool):
    return T if flag else Nil
