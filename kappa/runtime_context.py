from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator

from kappa.memory import AllocationTracker

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_default_tracker: AllocationTracker = AllocationTracker()
_current_tracker: AllocationTracker = _default_tracker


def set_current_tracker(tracker: AllocationTracker) -> None:
    global _current_tracker
    _current_tracker = tracker


def get_current_tracker() -> AllocationTracker:
    return _current_tracker


def track(obj):
    """Register `obj` with the active tracker and return it."""
    return _current_tracker.track(obj)


@contextmanager
def active_tracker(tracker: AllocationTracker) -> Iterator[AllocationTracker]:
    """Make `tracker` the allocation target for the duration of the block."""
    previous = get_current_tracker()
    set_current_tracker(tracker)
    try:
        yield tracker
    finally:
        set_current_tracker(previous)
