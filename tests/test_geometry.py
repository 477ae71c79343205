import math
import pytest


def test_point_on_unit_circle_axes():
    from donutviz.core.geometry import point_on_unit_circle
    p = point_on_unit_circle(0.0)
    assert (p.x, p.y) == (1.0, 0.0)
    q = point_on_unit_circle(math.pi / 2)
    assert q.x == pytest.approx(0.0, abs=1e-12)
    assert q.y == pytest.approx(1.0)


def test_percent_position_formula():
    from donutviz.core.geometry import point_on_unit_circle, to_percent_position
    for theta in [0.0, 0.3, math.pi / 2, 2.5, -math.pi / 4, 3 * math.pi / 2]:
        left, top = to_percent_position(point_on_unit_circle(theta))
        assert left == pytest.approx((math.cos(theta) * 0.4 + 0.5) * 100)
        assert top == pytest.approx((math.sin(theta) * 0.4 + 0.5) * 100)


def test_percent_position_center_and_scale():
    from donutviz.core.geometry import Point, to_percent_position
    assert to_percent_position(Point(0.0, 0.0)) == (50.0, 50.0)
    assert to_percent_position(Point(1.0, -1.0), scale=1.0) == (100.0, 0.0)


def test_svg_numbers_are_compact_and_exact():
    from donutviz.core.geometry import Point, svg_number
    assert svg_number(0.0) == "0"
    assert svg_number(-0.0) == "0"
    assert svg_number(-1.0) == "-1"
    assert svg_number(0.5) == "0.5"
    assert float(svg_number(math.sqrt(0.5))) == math.sqrt(0.5)
    assert Point(0.0, -1.0).to_svg_path() == "0 -1"
