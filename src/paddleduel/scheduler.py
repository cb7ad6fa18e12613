"""Frame scheduling backends for the session loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Something that can run a callback on the next display frame."""

    def request_next_frame(self, callback: FrameCallback, delay_ms: int = 0) -> None:
        """Run ``callback`` once, on the first frame at least ``delay_ms`` away.

        At most one callback is pending; a new request replaces it.
        """
        ...


@dataclass(slots=True)
class _Pending:
    callback: FrameCallback
    due_ms: int


class ClockFrameScheduler:
    """Scheduler pumped by a real main loop with a millisecond clock."""

    def __init__(self) -> None:
        self._pending: _Pending | None = None
        self._now_ms = 0

    def request_next_frame(self, callback: FrameCallback, delay_ms: int = 0) -> None:
        self._pending = _Pending(callback, self._now_ms + delay_ms)

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def run_due(self, now_ms: int) -> bool:
        """Run the pending callback if it is due; return whether one ran."""
        self._now_ms = now_ms
        pending = self._pending
        if pending is None or now_ms < pending.due_ms:
            return False
        self._pending = None
        pending.callback()
        return True


class ManualFrameScheduler:
    """Headless scheduler stepped explicitly, one frame per call.

    Delays are recorded but not waited for.
    """

    def __init__(self) -> None:
        self._pending: FrameCallback | None = None
        self.last_delay_ms = 0
        self.frames_run = 0

    def request_next_frame(self, callback: FrameCallback, delay_ms: int = 0) -> None:
        self._pending = callback
        self.last_delay_ms = delay_ms

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def step(self) -> bool:
        """Run the pending frame, if any."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        self.frames_run += 1
        callback()
        return True

    def run(self, max_frames: int) -> int:
        """Step until nothing is pending or ``max_frames`` ran; return the count."""
        count = 0
        while count < max_frames and self.step():
            count += 1
        return count
