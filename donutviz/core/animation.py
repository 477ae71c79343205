# donutviz/core/animation.py: elapsed time -> draw progress, one frame at a time
from __future__ import annotations
import enum
import logging
import time
from typing import Callable, Hashable, Optional

from .surface import Scheduler

logger = logging.getLogger(__name__)

def monotonic_ms() -> float:
    return time.monotonic() * 1000.0

class AnimationState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETE = "complete"
    DETACHED = "detached"

class AnimationDriver:
    """
    NOT_STARTED -> RUNNING -> COMPLETE. teardown() before COMPLETE moves to
    DETACHED and cancels the pending frame; late frames are ignored.
    """

    def __init__(self, draw: Callable[[float], object], scheduler: Scheduler,
                 duration_ms: float, clock: Callable[[], float] = monotonic_ms):
        if duration_ms <= 0:
            raise ValueError("duration_ms must be > 0")
        self._draw = draw
        self._scheduler = scheduler
        self._clock = clock
        self.duration_ms = float(duration_ms)
        self.state = AnimationState.NOT_STARTED
        self.progress = 0.0
        self.frames = 0
        self._t0: Optional[float] = None
        self._token: Optional[Hashable] = None

    def start(self) -> None:
        if self.state is not AnimationState.NOT_STARTED:
            raise RuntimeError(f"animation already {self.state.value}")
        self._t0 = self._clock()
        self.state = AnimationState.RUNNING
        self._token = self._scheduler.request_frame(self._on_frame)

    def _on_frame(self) -> None:
        if self.state is not AnimationState.RUNNING:
            return
        self._token = None
        elapsed = self._clock() - self._t0
        progress = min(max(elapsed / self.duration_ms, 0.0), 1.0)
        self.progress = max(progress, self.progress)
        self.frames += 1
        if self.progress < 1:
            self._draw(self.progress)
            self._token = self._scheduler.request_frame(self._on_frame)
        else:
            self.progress = 1.0
            self.state = AnimationState.COMPLETE
            self._draw(1.0)
            logger.debug("animation complete after %d frames", self.frames)

    def teardown(self) -> None:
        if self._token is not None:
            self._scheduler.cancel(self._token)
            self._token = None
        if self.state in (AnimationState.NOT_STARTED, AnimationState.RUNNING):
            logger.debug("animation detached at progress %.3f", self.progress)
            self.state = AnimationState.DETACHED
