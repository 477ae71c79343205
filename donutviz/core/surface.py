# donutviz/core/surface.py: host capabilities consumed by the chart core
from __future__ import annotations
from typing import Any, Callable, Hashable, Protocol

from .geometry import Point

FrameCallback = Callable[[], None]

class RenderSurface(Protocol):
    def create_path_primitive(self, index: int, color: str) -> Any: ...
    def create_line_primitive(self, index: int, gap_width: float) -> Any: ...
    def create_label_primitive(self, index: int, text: str) -> Any: ...
    def update_path(self, handle: Any, path: str) -> None: ...
    def update_line(self, handle: Any, endpoint: Point) -> None: ...
    def set_label_position(self, handle: Any, left_pct: float, top_pct: float) -> None: ...
    def set_label_active(self, handle: Any, active: bool) -> None: ...

class Scheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> Hashable: ...
    def cancel(self, token: Hashable) -> None: ...
