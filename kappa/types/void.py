from __future__ import annotations


class VoidType:
    """Result of forms evaluated for effect (define, set!, empty begin)."""

    __slots__ = ()
    _instance: VoidType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<void>"
    def __reduce__(self): return (VoidType, ())


Void = VoidType()
