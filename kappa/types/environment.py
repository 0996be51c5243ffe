"""Runtime frames for Kappa.

A Frame stores the bindings of one lexical scope and links to the frame of
the enclosing scope through `parent`. The global frame has no parent.
Closures keep a reference to the frame they were created in, so a frame
outlives the call that created it whenever a closure captured it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from kappa import LispValue
from kappa.errors import KappaSyntaxError, KappaUnboundSymbol
from kappa.runtime_context import track
from kappa.types.symbol import Symbol


class UnassignedType:
    """Placeholder held by letrec names until their initializers have run."""

    __slots__ = ()

    def __repr__(self): return "#<unassigned>"


Unassigned = UnassignedType()


class Frame:
    """One scope's bindings plus a link to the enclosing scope."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Frame] = None):
        # Insertion order is definition order, so the newest binding is last
        self.vars: dict[Symbol, LispValue] = {}
        self.parent: Frame | None = parent
        track(self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Redefining a name already bound here replaces that binding and makes
        it the most recent one; outer frames are never touched.

        Raises KappaSyntaxError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise KappaSyntaxError(f"Cannot define {name!r}: not a symbol")
        self.vars.pop(name, None)
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that binds `symbol`."""
        frame: Optional[Frame] = self
        while frame is not None:
            if symbol in frame.vars:
                return frame
            frame = frame.parent
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the frame chain.

        Raises KappaUnboundSymbol if the symbol is not found.
        """
        frame = self.find(name)
        if frame is None:
            raise KappaUnboundSymbol(f"Cannot set! unbound variable {name}")
        frame.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Value bound to `name` in the nearest frame.

        Raises KappaUnboundSymbol if not found, or if it names a letrec
        binding whose initializer has not been installed yet.
        """
        frame = self.find(name)
        if frame is None:
            raise KappaUnboundSymbol(f"Reference to unbound variable {name}")
        value = frame.vars[name]
        if value is Unassigned:
            raise KappaUnboundSymbol(f"Variable {name} used before its initialization")
        return value

    def bindings(self) -> Iterator[tuple[Symbol, LispValue]]:
        """This frame's own bindings, most recent first."""
        return reversed(list(self.vars.items()))

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.bindings()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        depth = 0
        frame = self.parent
        while frame is not None:
            depth += 1
            frame = frame.parent
        return f"<Frame {len(self.vars)} bindings, depth {depth}>"
