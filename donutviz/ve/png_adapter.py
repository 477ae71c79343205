# donutviz/ve/png_adapter.py
"""
Rasterize drawn ArcSegments with Matplotlib (for exports and the /pie/png route).

Segments are in SVG orientation (y down, positive angles clockwise), so every
angle is mirrored before it reaches Matplotlib's y-up axes.
"""

import io
import math

import matplotlib.pyplot as plt
from matplotlib.patches import Wedge

# Use a headless backend (safe for servers)
plt.switch_backend("Agg")

FIG_INCHES = 4.0
# the chart spans 2 units across FIG_INCHES; 72 points per inch
POINTS_PER_UNIT = FIG_INCHES / 2.0 * 72.0


def _png_bytes(fig) -> bytes:
    """Serialize a Matplotlib figure to PNG bytes and close it."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=150)
    plt.close(fig)
    return buf.getvalue()


def pie_png(segments, donut: float = 0.0, gap: float = 0.0) -> bytes:
    fig = plt.figure(figsize=(FIG_INCHES, FIG_INCHES))
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(-1, 1)
    ax.set_ylim(-1, 1)
    ax.set_aspect("equal")
    ax.axis("off")

    width = (1.0 - donut) if donut > 0 else None
    for seg in segments:
        if seg.sweep <= 0:
            continue
        ax.add_patch(Wedge(
            (0, 0), 1.0,
            math.degrees(-seg.end_angle), math.degrees(-seg.start_angle),
            width=width, facecolor=seg.color, edgecolor="none",
        ))

    if gap > 0:
        for seg in segments:
            p = seg.boundary_point
            ax.plot([0, p.x], [0, -p.y], color="white",
                    linewidth=gap * POINTS_PER_UNIT, solid_capstyle="butt")
    return _png_bytes(fig)
