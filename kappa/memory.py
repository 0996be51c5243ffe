"""Allocation tracking for one interpreter run.

Every Cons cell, Frame and Closure created while a tracker is active is
registered with it. Nothing is reclaimed mid-run; `release_all` drops the
whole set at once when the run ends, whether it ended normally or with an
error.
"""

from __future__ import annotations

import logging
from collections import Counter

from kappa.errors import KappaError

logger = logging.getLogger(__name__)


class AllocationTracker:
    """Grow-only registry of runtime objects with a single bulk release."""

    __slots__ = ("_objects", "released")

    def __init__(self):
        self._objects: list = []
        self.released: bool = False

    def track(self, obj):
        if self.released:
            raise KappaError("Cannot allocate after the tracker has been released")
        self._objects.append(obj)
        return obj

    def release_all(self) -> int:
        """Drop every tracked object; returns how many were released."""
        if self.released:
            raise KappaError("Allocations have already been released")
        count = len(self._objects)
        if logger.isEnabledFor(logging.DEBUG):
            kinds = Counter(type(o).__name__ for o in self._objects)
            logger.debug("Releasing %d tracked objects: %s", count, dict(kinds))
        self._objects.clear()
        self.released = True
        return count

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        state = "released" if self.released else f"{len(self._objects)} live"
        return f"<AllocationTracker {state}>"
