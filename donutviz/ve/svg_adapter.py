# donutviz/ve/svg_adapter.py: JSON-ready payloads for segments and animation frames

def segment_dict(seg):
    return {
        "index": seg.index,
        "start_angle": seg.start_angle,
        "end_angle": seg.end_angle,
        "ratio": seg.ratio,
        "large_arc_flag": seg.large_arc_flag,
        "color": seg.color,
        "boundary": {"x": seg.boundary_point.x, "y": seg.boundary_point.y},
        "d": seg.path,
    }

def segments_payload(segments):
    return [segment_dict(s) for s in segments]

def frames_payload(frames):
    return [{"progress": f.progress, "segments": segments_payload(f.segments)} for f in frames]
