"""Textual rendering of Kappa values.

`to_string` gives the external representation of any value; quoted data read
by the parser prints back as the text it was read from. `render` is what the
command line prints for a top-level result: Void results print nothing.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from kappa import LispValue
from kappa.types.cons import Cons
from kappa.types.lambda_fn import Closure
from kappa.types.nil import NilType
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol
from kappa.types.void import VoidType


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int() | float():
            buffer.write(repr(value))
        case str():
            buffer.write(f'"{value}"')
        case Symbol():
            buffer.write(value.id)
        case Cons():
            buffer.write("(")
            node: LispValue = value
            while True:
                _write(node.car, buffer)
                node = node.cdr
                if not isinstance(node, Cons):
                    break
                buffer.write(" ")
            if not isinstance(node, NilType):
                buffer.write(" . ")
                _write(node, buffer)
            buffer.write(")")
        case NilType():
            buffer.write("()")
        case Closure() | Primitive() | VoidType():
            buffer.write(str(value))
        case _:
            buffer.write(repr(value))


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def render(value: LispValue) -> Optional[str]:
    """Top-level rendering; None when there is nothing to print."""
    if isinstance(value, VoidType):
        return None
    return to_string(value)
