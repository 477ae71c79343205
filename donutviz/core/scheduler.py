# donutviz/core/scheduler.py: headless frame scheduling (tests, exports, server)
from __future__ import annotations
import itertools
from typing import Dict

from .surface import FrameCallback

class ManualScheduler:
    """Frames are delivered only when run_frame() is called."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, FrameCallback] = {}

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._ids)
        self._pending[token] = callback
        return token

    def cancel(self, token: int) -> None:
        self._pending.pop(token, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self) -> int:
        # callbacks requested while running belong to the next frame
        due, self._pending = list(self._pending.items()), {}
        delivered = 0
        try:
            for _, callback in due:
                delivered += 1
                callback()
        finally:
            # a raising callback leaves the rest of this frame due next time
            if delivered < len(due):
                rest = dict(due[delivered:])
                rest.update(self._pending)
                self._pending = rest
        return len(due)

class VirtualClock:
    def __init__(self, start_ms: float = 0.0):
        self.now_ms = float(start_ms)

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> float:
        self.now_ms += ms
        return self.now_ms
