from __future__ import annotations

from typing import Callable

from kappa import LispValue
from kappa.types.environment import Frame

PrimitiveFn = Callable[[Frame, list[LispValue]], LispValue]


class Primitive:
    """A built-in procedure; `fn` receives the calling frame and evaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Frame, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"#<procedure:{self.name}>"

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
