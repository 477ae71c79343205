# donutviz/core/geometry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math

LABEL_SCALE = 0.8

def svg_number(v: float) -> str:
    # 0.0 -> "0", -1.0 -> "-1", otherwise shortest round-trip repr
    v = float(v)
    if v == 0:
        return "0"
    if v.is_integer():
        return str(int(v))
    return repr(v)

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_svg_path(self) -> str:
        return f"{svg_number(self.x)} {svg_number(self.y)}"

def point_on_unit_circle(angle: float) -> Point:
    return Point(math.cos(angle), math.sin(angle))

def to_percent_position(point: Point, scale: float = LABEL_SCALE) -> Tuple[float, float]:
    """
    Map a unit-circle point to (left%, top%) inside the chart's bounding box.
    scale=0.8 places labels at 80% of the radius.
    """
    left = (point.x * scale * 0.5 + 0.5) * 100
    top = (point.y * scale * 0.5 + 0.5) * 100
    return left, top
