# donutviz/server/pie_routes.py
from __future__ import annotations
import logging
import os
from typing import List

import numpy as np
from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse, Response

from donutviz.core.chart import PieChart, sample_frames
from donutviz.core.errors import ComputationError, ConfigurationError
from donutviz.core.scheduler import ManualScheduler
from donutviz.server.logging_utils import log_render_run
from donutviz.svl.pie_spec import PieSpec
from donutviz.svl.pie_verify import verify_pie
from donutviz.ve.png_adapter import pie_png
from donutviz.ve.svg_adapter import frames_payload, segments_payload
from donutviz.ve.svg_surface import SvgSurface

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pie", tags=["pie"])
RENDER_LOG = os.environ.get("DONUTVIZ_RENDER_LOG", "")
DEFAULT_FPS = float(os.environ.get("DONUTVIZ_FPS", "60"))

def _bad(errors: List[str], raw=None) -> JSONResponse:
    logger.info("rejected pie request: %s", "; ".join(errors))
    values = raw.get("values") if isinstance(raw, dict) else None
    n = len(values) if isinstance(values, (list, tuple)) else ""
    log_render_run(RENDER_LOG, n, None, "", 0, "rejected")
    return JSONResponse({"ok": False, "errors": errors}, status_code=400)

def _final_chart(spec: PieSpec):
    surface = SvgSurface(donut=spec.donut)
    chart = PieChart(surface, ManualScheduler()).init(spec)
    chart.engine.draw(1.0)
    return chart, surface

@router.post("/render")
def render(payload: dict = Body(...)):
    try:
        spec = verify_pie(payload)
        chart, surface = _final_chart(spec)
    except ConfigurationError as e:
        return _bad(e.errors, payload)
    except ComputationError as e:
        return _bad([str(e)], payload)
    log_render_run(RENDER_LOG, len(spec.values), sum(spec.values), spec.duration_ms, 1, "rendered")
    return {
        "ok": True,
        "svg": surface.to_svg(),
        "html": surface.to_html(),
        "segments": segments_payload(chart.segments),
    }

@router.post("/frames")
def frames(payload: dict = Body(...), fps: float = Query(DEFAULT_FPS, gt=0, le=240)):
    try:
        spec = verify_pie(payload)
        surface = SvgSurface(donut=spec.donut)
        _, drawn = sample_frames(spec, surface, fps=fps)
    except ConfigurationError as e:
        return _bad(e.errors, payload)
    except ComputationError as e:
        return _bad([str(e)], payload)
    times_ms = np.arange(1, len(drawn) + 1) * (1000.0 / fps)
    log_render_run(RENDER_LOG, len(spec.values), sum(spec.values), spec.duration_ms, len(drawn), "animated")
    return {
        "ok": True,
        "fps": fps,
        "times_ms": [round(float(t), 3) for t in times_ms],
        "frames": frames_payload(drawn),
        "svg": surface.to_svg(),
    }

@router.post("/png")
def png(payload: dict = Body(...)):
    try:
        spec = verify_pie(payload)
        chart, _ = _final_chart(spec)
    except ConfigurationError as e:
        return _bad(e.errors, payload)
    except ComputationError as e:
        return _bad([str(e)], payload)
    log_render_run(RENDER_LOG, len(spec.values), sum(spec.values), spec.duration_ms, 1, "png")
    return Response(content=pie_png(chart.segments, spec.donut, spec.gap), media_type="image/png")

@router.post("/hover")
def hover(payload: dict = Body(...)):
    raw = payload.get("spec") or {}
    index = payload.get("index")
    try:
        spec = verify_pie(raw)
        chart, surface = _final_chart(spec)
    except ConfigurationError as e:
        return _bad(e.errors, raw)
    except ComputationError as e:
        return _bad([str(e)], raw)
    if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(spec.values)):
        return JSONResponse({"ok": False, "errors": [f"index: must be a slice position in [0, {len(spec.values)})"]},
                            status_code=400)

    events: List[int] = []
    chart.subscribe(events.append)
    surface.pointer_enter(index)
    if payload.get("leave"):
        surface.pointer_leave(index)
    return {
        "ok": True,
        "index": index,
        "active_index": chart.interaction.active_index,
        "active_labels": surface.active_labels,
        "events": events,
    }
