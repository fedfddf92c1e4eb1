"""Next-frame callback queue driven by the main loop."""

from __future__ import annotations
from typing import Callable


class ScheduledCall:
    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FrameScheduler:
    """Runs deferred callbacks on the next call to run_pending().

    Callbacks scheduled while run_pending() is executing wait for the
    following tick, so a deferral is always at least one full frame.
    """

    def __init__(self):
        self._queue: list[ScheduledCall] = []

    def call_next_tick(self, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback)
        self._queue.append(call)
        return call

    def run_pending(self) -> int:
        due, self._queue = self._queue, []
        ran = 0
        for call in due:
            if call.cancelled:
                continue
            call.callback()
            ran += 1
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for c in self._queue if not c.cancelled)
