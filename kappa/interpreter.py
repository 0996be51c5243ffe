from __future__ import annotations

import logging
from typing import Iterator

from kappa import SExpression, LispValue
from kappa.errors import KappaError
from kappa.memory import AllocationTracker
from kappa.printer import to_string
from kappa.reader.parser import parse
from kappa.runtime_context import active_tracker
from kappa.types.environment import Frame
from kappa.types.void import Void
from kappa.builtin.env_builtin import register
from kappa.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Kappa programs against one shared global frame.

    Every object allocated on behalf of this interpreter is registered with
    its own AllocationTracker; `close()` (or leaving a `with` block) releases
    them all exactly once.
    """

    def __init__(self):
        self.tracker = AllocationTracker()
        with active_tracker(self.tracker):
            self.env: Frame = Frame()
            register(self.env)

    def _check_open(self) -> None:
        if self.tracker.released:
            raise KappaError("Interpreter has been closed")

    def parse(self, code: str) -> list[SExpression]:
        """Tokenize and parse `code` into its top-level forms."""
        self._check_open()
        with active_tracker(self.tracker):
            return parse(code)

    def run(self, code: str) -> Iterator[LispValue]:
        """Parse all of `code`, then evaluate its forms one by one, yielding each result.

        The whole program is parsed before anything is evaluated, so a syntax
        error anywhere means no form runs. An evaluation error stops the run at
        the failing form.
        """
        forms = self.parse(code)
        for expr in forms:
            yield self.evaluate(expr)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate one parsed form in the global frame."""
        self._check_open()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("eval %s", to_string(expr))
        with active_tracker(self.tracker):
            return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; returns the last result (Void if none)."""
        result: LispValue = Void
        for result in self.run(code):
            pass
        return result

    def close(self) -> None:
        if not self.tracker.released:
            released = self.tracker.release_all()
            logger.debug("Interpreter closed, released %d objects", released)

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
