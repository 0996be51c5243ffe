"""Cons cells and the list helpers built on them.

Proper lists are right-nested chains of Cons ending in Nil. Improper (dotted)
lists end in any other value and are only produced by the reader or by
`cons` on a non-list tail.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from kappa import LispValue
from kappa.errors import KappaSyntaxError
from kappa.runtime_context import track
from kappa.types.nil import Nil


class Cons:
    """A two-slot pair (car . cdr)."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car: LispValue = car
        self.cdr: LispValue = cdr
        track(self)

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the cars of the chain; a dotted tail is not yielded."""
        node: LispValue = self
        while isinstance(node, Cons):
            yield node.car
            node = node.cdr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cons):
            return NotImplemented
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if type(a.car) is not type(b.car) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return type(a) is type(b) and a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from kappa.printer import to_string
        return to_string(self)


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain from `items`, terminated by `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Cons):
        value = value.cdr
    return value is Nil


def to_list(value: LispValue, what: str = "form") -> list[LispValue]:
    """Return the elements of a proper list as a Python list.

    Raises KappaSyntaxError naming `what` if `value` is not a proper list.
    """
    items: list[LispValue] = []
    while isinstance(value, Cons):
        items.append(value.car)
        value = value.cdr
    if value is not Nil:
        raise KappaSyntaxError(f"Improper list in {what}")
    return items
