# donutviz/ve/svg_surface.py: in-memory RenderSurface that serializes to SVG/HTML
from __future__ import annotations
import html
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from donutviz.core.geometry import Point, svg_number

PointerCallback = Callable[[int], None]

@dataclass
class PathNode:
    index: int
    fill: str
    d: str = ""

@dataclass
class LineNode:
    index: int
    stroke_width: float
    x2: float = 0.0
    y2: float = 0.0

@dataclass
class LabelNode:
    index: int
    text: str
    left: Optional[float] = None
    top: Optional[float] = None
    active: bool = False

@dataclass
class SvgSurface:
    donut: float = 0.0
    paths: List[PathNode] = field(default_factory=list)
    lines: List[LineNode] = field(default_factory=list)
    labels: List[LabelNode] = field(default_factory=list)
    updates: int = 0
    _pointer: Dict[int, Tuple[PointerCallback, PointerCallback]] = field(default_factory=dict, repr=False)

    # ----- RenderSurface -----
    def create_path_primitive(self, index: int, color: str) -> PathNode:
        node = PathNode(index, color)
        self.paths.append(node)
        return node

    def create_line_primitive(self, index: int, gap_width: float) -> LineNode:
        node = LineNode(index, gap_width)
        self.lines.append(node)
        return node

    def create_label_primitive(self, index: int, text: str) -> LabelNode:
        node = LabelNode(index, text)
        self.labels.append(node)
        return node

    def update_path(self, handle: PathNode, path: str) -> None:
        handle.d = path
        self.updates += 1

    def update_line(self, handle: LineNode, endpoint: Point) -> None:
        handle.x2, handle.y2 = endpoint.x, endpoint.y
        self.updates += 1

    def set_label_position(self, handle: LabelNode, left_pct: float, top_pct: float) -> None:
        handle.left, handle.top = left_pct, top_pct
        self.updates += 1

    def set_label_active(self, handle: LabelNode, active: bool) -> None:
        handle.active = bool(active)

    # ----- pointer forwarding -----
    def bind_pointer(self, handle: PathNode, on_enter: PointerCallback, on_leave: PointerCallback) -> None:
        self._pointer[handle.index] = (on_enter, on_leave)

    def pointer_enter(self, index: int) -> None:
        if index in self._pointer:
            self._pointer[index][0](index)

    def pointer_leave(self, index: int) -> None:
        if index in self._pointer:
            self._pointer[index][1](index)

    @property
    def active_labels(self) -> List[int]:
        return [l.index for l in self.labels if l.active]

    # ----- markup -----
    def to_svg(self) -> str:
        out = ['<svg xmlns="http://www.w3.org/2000/svg" viewBox="-1 -1 2 2">',
               '<g mask="url(#graphMask)">']
        for p in self.paths:
            out.append(f'<path fill="{html.escape(p.fill)}" d="{p.d}"></path>')
        out.append('</g>')
        out.append('<mask id="graphMask">')
        out.append('<rect fill="#fff" x="-1" y="-1" width="2" height="2"></rect>')
        out.append(f'<circle fill="#000" r="{svg_number(self.donut)}"></circle>')
        for l in self.lines:
            out.append(
                f'<line stroke="#000" stroke-width="{svg_number(l.stroke_width)}" '
                f'x1="0" y1="0" x2="{svg_number(l.x2)}" y2="{svg_number(l.y2)}"></line>'
            )
        out.append('</mask>')
        out.append('</svg>')
        return "".join(out)

    def to_html(self) -> str:
        parts = ['<div class="pie-chart" style="position:relative">']
        for l in self.labels:
            cls = "label is-active" if l.active else "label"
            style = ""
            if l.left is not None and l.top is not None:
                style = f' style="left:{l.left}%;top:{l.top}%"'
            parts.append(f'<div class="{cls}" data-index="{l.index}"{style}>{html.escape(l.text)}</div>')
        parts.append(self.to_svg())
        parts.append('</div>')
        return "".join(parts)
