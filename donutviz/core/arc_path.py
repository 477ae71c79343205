# donutviz/core/arc_path.py: values -> contiguous wedge paths on the unit circle
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import math

from .errors import ComputationError
from .geometry import Point, point_on_unit_circle

TAU = 2 * math.pi
START_ANGLE = -math.pi / 2          # 12 o'clock
START_POINT = Point(0.0, -1.0)

@dataclass(frozen=True)
class ArcSegment:
    index: int
    start_angle: float
    end_angle: float
    ratio: float
    large_arc_flag: str
    color: str
    boundary_point: Point
    path: str

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def label_angle(self) -> Optional[float]:
        # middle of the wedge; None only when there is no wedge to label
        if not math.isfinite(self.start_angle) or not math.isfinite(self.ratio):
            return None
        return self.start_angle + self.ratio * math.pi

def large_arc_flag(ratio: float) -> str:
    return "1" if ratio > 0.5 else "0"

def check_series(values: Sequence[float]) -> float:
    """Return the series total, or raise ComputationError if it cannot be drawn."""
    for i, v in enumerate(values):
        if v < 0:
            raise ComputationError(f"values[{i}] is negative ({v}).")
    total = math.fsum(values)
    if not math.isfinite(total) or total <= 0:
        raise ComputationError(f"values must sum to > 0 (got {total}).")
    return total

def compute_slice(value: float, total: float, progress: float,
                  current_start_point: Point, current_angle: float) -> Tuple[str, float, Point]:
    if not (total > 0) or not math.isfinite(total):
        raise ComputationError(f"total must be a finite number > 0 (got {total}).")
    ratio = (value / total) * progress
    next_angle = current_angle + ratio * TAU
    end = point_on_unit_circle(next_angle)
    path = (
        f"M 0 0 L {current_start_point.to_svg_path()} "
        f"A 1 1 0 {large_arc_flag(ratio)} 1 {end.to_svg_path()} L 0 0"
    )
    return path, next_angle, end

def color_at(colors: Sequence[str], index: int) -> str:
    if not colors:
        raise ComputationError("palette is empty.")
    return colors[index % len(colors)]

def build_segments(values: Sequence[float], progress: float,
                   colors: Sequence[str]) -> Tuple[ArcSegment, ...]:
    """
    Walk the whole series once, chaining each slice from its predecessor's end.
    Raises ComputationError before any geometry is produced if the series or
    progress is unusable.
    """
    if not (0.0 <= progress <= 1.0):
        raise ComputationError(f"progress must be within [0, 1] (got {progress}).")
    total = check_series(values)

    segments: List[ArcSegment] = []
    angle, start = START_ANGLE, START_POINT
    for i, value in enumerate(values):
        path, next_angle, end = compute_slice(value, total, progress, start, angle)
        ratio = (value / total) * progress
        segments.append(ArcSegment(
            index=i,
            start_angle=angle,
            end_angle=next_angle,
            ratio=ratio,
            large_arc_flag=large_arc_flag(ratio),
            color=color_at(colors, i),
            boundary_point=end,
            path=path,
        ))
        angle, start = next_angle, end
    return tuple(segments)
