"""Kappa symbols.

Symbols are interned: there is exactly one Symbol object per name, so two
symbols are equal exactly when they are the same object, and frames can hash
them by identity.
"""

from __future__ import annotations

import sys
from typing import ClassVar


class Symbol:
    __slots__ = ("id",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.id = sys.intern(name)
            cls._table[symbol.id] = symbol
        return symbol

    def __reduce__(self):
        # copy and pickle go back through the table
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
