# donutviz/core/engine.py
from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Tuple

from .arc_path import ArcSegment, build_segments, color_at
from .geometry import point_on_unit_circle, to_percent_position
from .surface import RenderSurface

logger = logging.getLogger(__name__)

def label_at(labels: Sequence[Any], index: int) -> Optional[Any]:
    if 0 <= index < len(labels):
        return labels[index]
    return None

class ChartEngine:
    """
    Owns the per-slice primitives on a RenderSurface and redraws them for a
    given progress. Inputs are read-only after construction.
    """

    def __init__(self, values: Sequence[float], colors: Sequence[str],
                 labels: Sequence[str], gap: float, surface: RenderSurface):
        self.values: Tuple[float, ...] = tuple(values)
        self.colors: Tuple[str, ...] = tuple(colors)
        self.surface = surface
        self.paths: List[Any] = [
            surface.create_path_primitive(i, color_at(self.colors, i))
            for i in range(len(self.values))
        ]
        self.lines: List[Any] = [
            surface.create_line_primitive(i, gap) for i in range(len(self.values))
        ]
        self.labels: List[Any] = [
            surface.create_label_primitive(i, text) for i, text in enumerate(labels)
        ]
        self.segments: Tuple[ArcSegment, ...] = ()

    def draw(self, progress: float = 1.0) -> Tuple[ArcSegment, ...]:
        # computed up front so a bad series leaves the surface untouched
        segments = build_segments(self.values, progress, self.colors)
        final = progress == 1
        for seg in segments:
            self.surface.update_path(self.paths[seg.index], seg.path)
            self.surface.update_line(self.lines[seg.index], seg.boundary_point)
            if final:
                self.position_label(seg.index, seg.label_angle)
        self.segments = segments
        if final:
            logger.debug("drew final frame: %d slices", len(segments))
        return segments

    def position_label(self, index: int, angle: Optional[float]) -> None:
        handle = label_at(self.labels, index)
        if handle is None or angle is None:
            return
        left, top = to_percent_position(point_on_unit_circle(angle))
        self.surface.set_label_position(handle, left, top)
