"""Closure representation and argument binding for Kappa."""

from __future__ import annotations

from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.runtime_context import track
from kappa.types.environment import Frame
from kappa.types.symbol import Symbol


class Closure:
    """A user procedure: formal parameters, one body expression, defining frame."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Frame):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Frame = env
        track(self)

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        params = " ".join(str(f) for f in self.formals)
        return f"<Closure ({params})>"

    def extend_env(self, args: list[LispValue]) -> Frame:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new Frame for evaluating the body. The new frame's parent is
        the captured frame, never the caller's.
        """
        if len(args) != len(self.formals):
            raise KappaArityError(
                f"Procedure expects {len(self.formals)} argument(s), got {len(args)}"
            )
        local_env = Frame(parent=self.env)
        for formal, arg in zip(self.formals, args):
            local_env.define(formal, arg)
        return local_env
