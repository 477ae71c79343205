import math
import numpy as np
import pytest

COLORS = ["#a", "#b", "#c"]


def test_example_series_end_angles():
    from donutviz.core.arc_path import build_segments
    segs = build_segments([1, 1, 2, 4], 1.0, COLORS)
    assert [s.ratio for s in segs] == [0.125, 0.125, 0.25, 0.5]
    assert segs[0].start_angle == -math.pi / 2
    ends = [s.end_angle for s in segs]
    assert ends == pytest.approx([-math.pi / 4, 0.0, math.pi / 2, 3 * math.pi / 2], abs=1e-12)
    # ratio exactly 0.5 stays on the small-arc flag
    assert segs[3].large_arc_flag == "0"


def test_large_arc_flag_threshold():
    from donutviz.core.arc_path import build_segments, large_arc_flag
    assert large_arc_flag(0.5) == "0"
    assert large_arc_flag(0.5000001) == "1"
    assert large_arc_flag(0.0) == "0"
    segs = build_segments([3, 1], 1.0, COLORS)
    assert [s.large_arc_flag for s in segs] == ["1", "0"]


def test_sweeps_sum_to_full_turn_and_are_contiguous():
    from donutviz.core.arc_path import build_segments, TAU
    rng = np.random.default_rng(7)
    for _ in range(25):
        values = rng.uniform(0, 100, size=rng.integers(1, 40)).tolist()
        segs = build_segments(values, 1.0, COLORS)
        assert sum(s.sweep for s in segs) == pytest.approx(TAU, rel=1e-12)
        for a, b in zip(segs, segs[1:]):
            assert b.start_angle == a.end_angle
            assert b.path.startswith(f"M 0 0 L {a.boundary_point.to_svg_path()} ")


def test_compute_slice_quarter_path():
    from donutviz.core.arc_path import compute_slice, START_ANGLE, START_POINT
    path, angle, point = compute_slice(1, 4, 1.0, START_POINT, START_ANGLE)
    assert path == "M 0 0 L 0 -1 A 1 1 0 0 1 1 0 L 0 0"
    assert angle == 0.0
    assert (point.x, point.y) == (1.0, 0.0)


def test_progress_scales_the_sweep():
    from donutviz.core.arc_path import build_segments, TAU
    segs = build_segments([1, 1, 2, 4], 0.5, COLORS)
    assert sum(s.sweep for s in segs) == pytest.approx(TAU / 2)
    assert [s.ratio for s in segs] == [0.0625, 0.0625, 0.125, 0.25]
    empty = build_segments([1, 2], 0.0, COLORS)
    assert all(s.sweep == 0 for s in empty)


def test_zero_total_is_rejected():
    from donutviz.core.arc_path import build_segments, compute_slice, START_ANGLE, START_POINT
    from donutviz.core.errors import ComputationError
    with pytest.raises(ComputationError):
        compute_slice(0, 0, 1.0, START_POINT, START_ANGLE)
    with pytest.raises(ComputationError):
        build_segments([0, 0, 0], 1.0, COLORS)


def test_negative_value_is_rejected():
    from donutviz.core.arc_path import check_series
    from donutviz.core.errors import ComputationError
    with pytest.raises(ComputationError, match=r"values\[1\]"):
        check_series([2, -1, 3])


def test_progress_out_of_range_is_rejected():
    from donutviz.core.arc_path import build_segments
    from donutviz.core.errors import ComputationError
    with pytest.raises(ComputationError):
        build_segments([1], 1.5, COLORS)


def test_colors_wrap_by_position():
    from donutviz.core.arc_path import build_segments, color_at
    segs = build_segments([1] * 7, 1.0, COLORS)
    assert [s.color for s in segs] == ["#a", "#b", "#c", "#a", "#b", "#c", "#a"]
    assert color_at(COLORS, 10) == "#b"


def test_label_angle_is_slice_middle():
    from donutviz.core.arc_path import build_segments
    segs = build_segments([1, 1, 2, 4], 1.0, COLORS)
    for s in segs:
        assert s.label_angle == pytest.approx((s.start_angle + s.end_angle) / 2)
