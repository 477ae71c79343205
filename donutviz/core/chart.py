# donutviz/core/chart.py: explicit init/start/teardown wiring of the chart core
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from donutviz.svl.pie_spec import PieSpec
from donutviz.svl.pie_verify import verify_pie
from .animation import AnimationDriver, AnimationState, monotonic_ms
from .arc_path import ArcSegment, check_series
from .engine import ChartEngine
from .interaction import HoverHandler, InteractionDispatcher
from .scheduler import ManualScheduler, VirtualClock
from .surface import RenderSurface, Scheduler

logger = logging.getLogger(__name__)

class PieChart:
    """
    Usage:
        chart = PieChart(surface, scheduler)
        chart.init({"values": [1, 1, 2, 4], "labels": ["a", "b"]})
        chart.subscribe(print)
        chart.start()
        ...
        chart.teardown()
    """

    def __init__(self, surface: RenderSurface, scheduler: Scheduler,
                 clock: Callable[[], float] = monotonic_ms):
        self.surface = surface
        self.scheduler = scheduler
        self.clock = clock
        self.spec: Optional[PieSpec] = None
        self.engine: Optional[ChartEngine] = None
        self.driver: Optional[AnimationDriver] = None
        self.interaction: Optional[InteractionDispatcher] = None

    def init(self, spec: Union[PieSpec, Mapping[str, Any]]) -> "PieChart":
        if self.spec is not None:
            raise RuntimeError("chart already initialized")
        self.spec = verify_pie(spec)
        self.engine = ChartEngine(self.spec.values, self.spec.colors, self.spec.labels,
                                  self.spec.gap, self.surface)
        self.interaction = InteractionDispatcher(self.engine.labels, self.surface)
        self.driver = AnimationDriver(self.engine.draw, self.scheduler,
                                      self.spec.duration_ms, clock=self.clock)
        bind = getattr(self.surface, "bind_pointer", None)
        if bind is not None:
            for handle in self.engine.paths:
                bind(handle, self.interaction.on_slice_hover_enter,
                     self.interaction.on_slice_hover_leave)
        return self

    def _require(self):
        if self.spec is None:
            raise RuntimeError("chart not initialized; call init() first")

    def start(self) -> None:
        self._require()
        # fail before the first frame rather than inside the scheduler
        check_series(self.spec.values)
        self.driver.start()

    def teardown(self) -> None:
        if self.driver is not None:
            self.driver.teardown()

    def subscribe(self, handler: HoverHandler) -> HoverHandler:
        self._require()
        return self.interaction.subscribe(handler)

    def unsubscribe(self, handler: HoverHandler) -> None:
        self._require()
        self.interaction.unsubscribe(handler)

    @property
    def state(self) -> AnimationState:
        self._require()
        return self.driver.state

    @property
    def segments(self) -> Tuple[ArcSegment, ...]:
        return self.engine.segments if self.engine is not None else ()

@dataclass
class Frame:
    progress: float
    segments: Tuple[ArcSegment, ...]

def sample_frames(spec: Union[PieSpec, Mapping[str, Any]], surface: RenderSurface,
                  fps: float = 60.0) -> Tuple[PieChart, List[Frame]]:
    """
    Play a full animation on a virtual clock, one frame every 1000/fps ms.
    Returns the finished chart and each drawn frame in order.
    """
    if fps <= 0:
        raise ValueError("fps must be > 0")
    clock = VirtualClock()
    scheduler = ManualScheduler()
    chart = PieChart(surface, scheduler, clock=clock).init(spec)
    chart.start()
    step = 1000.0 / fps
    frames: List[Frame] = []
    while scheduler.pending:
        clock.advance(step)
        scheduler.run_frame()
        frames.append(Frame(chart.driver.progress, chart.segments))
    logger.debug("sampled %d frames at %.1f fps", len(frames), fps)
    return chart, frames
