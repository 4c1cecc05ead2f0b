"""Tests for connector path assembly."""

from __future__ import annotations

from dataclasses import replace

import pytest

from archer_svg.layout.routing import (
    SUPPRESSED,
    ConnectorSpec,
    DrawnPath,
    LabelBox,
    build_path,
    compute_connector,
    label_box,
    path_d,
)
from archer_svg.layout.routing.common import fmt_num
from archer_svg.layout.routing.path import corner_sweep_flags
from archer_svg.parser.model import AnchorSide, LineGroupType, LineStyle, Point


def _spec(
    source: Point,
    source_side: AnchorSide,
    target: Point,
    target_side: AnchorSide,
    **kwargs,
) -> ConnectorSpec:
    kwargs.setdefault("end_marker", False)
    return ConnectorSpec(
        source=source,
        source_side=source_side,
        target=target,
        target_side=target_side,
        **kwargs,
    )


def _angle(source: Point, target: Point, **kwargs) -> ConnectorSpec:
    """Left-to-right dogleg between a RIGHT anchor and a LEFT anchor."""
    kwargs.setdefault("line_style", LineStyle.ANGLE)
    return _spec(source, AnchorSide.RIGHT, target, AnchorSide.LEFT, **kwargs)


def _d(spec: ConnectorSpec) -> str:
    return path_d(compute_connector(spec).path)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_straight_scenario():
    spec = _spec(
        Point(0, 0), AnchorSide.NONE, Point(100, 0), AnchorSide.NONE,
        line_style=LineStyle.STRAIGHT,
    )
    geometry = compute_connector(spec)
    assert path_d(geometry.path) == "M0,0 100,0"
    assert geometry.label == LabelBox(x=0, y=0, width=100, height=1)


def test_curve_scenario():
    spec = _spec(
        Point(0, 0), AnchorSide.BOTTOM, Point(0, 100), AnchorSide.TOP,
        line_style=LineStyle.CURVE,
    )
    geometry = compute_connector(spec)
    assert geometry.control_start == Point(0, 50)
    assert geometry.control_end == Point(0, 50)
    assert path_d(geometry.path) == "M0,0 C0,50 0,50 0,100"


# ---------------------------------------------------------------------------
# Line styles
# ---------------------------------------------------------------------------


def test_angle_without_rounding():
    assert _d(_angle(Point(0, 0), Point(100, 50))) == "M0,0 50,0 50,50 100,50"


def test_curve_with_end_marker():
    spec = _spec(
        Point(0, 0), AnchorSide.RIGHT, Point(100, 0), AnchorSide.LEFT,
        line_style=LineStyle.CURVE, end_marker=True, marker_length=20, stroke_width=2,
    )
    assert _d(spec) == "M0,0 C40,0 40,0 80,0"


def test_straight_ignores_controls_in_path():
    spec = _spec(
        Point(0, 0), AnchorSide.BOTTOM, Point(60, 80), AnchorSide.TOP,
        line_style=LineStyle.STRAIGHT,
    )
    geometry = compute_connector(spec)
    assert path_d(geometry.path) == "M0,0 60,80"
    assert geometry.control_start == Point(0, 40)


def test_fractional_coordinates():
    assert _d(_angle(Point(0, 0), Point(25, 15))) == "M0,0 12.5,0 12.5,15 25,15"


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0"), (-0.0, "0"), (12.5, "12.5"), (-3.0, "-3"), (100, "100"), (0.25, "0.25")],
)
def test_fmt_num(value, expected):
    assert fmt_num(value) == expected


# ---------------------------------------------------------------------------
# Rounded corners
# ---------------------------------------------------------------------------


class TestRoundedCorners:
    def test_drop_rightward(self):
        spec = _angle(
            Point(0, 0), Point(100, 50), round_corner=5, group_type=LineGroupType.DROP
        )
        assert _d(spec) == (
            "M0,0 45,0 A5,5 0 0,1 50,5 L50,45 A5,5 0 0,0 55,50 L100,50"
        )

    def test_drop_leftward(self):
        spec = _spec(
            Point(100, 0), AnchorSide.LEFT, Point(0, 50), AnchorSide.RIGHT,
            line_style=LineStyle.ANGLE, round_corner=5, group_type=LineGroupType.DROP,
        )
        assert _d(spec) == (
            "M100,0 55,0 A5,5 0 0,0 50,5 L50,45 A5,5 0 0,1 45,50 L0,50"
        )

    def test_rise_rightward(self):
        spec = _angle(
            Point(0, 50), Point(100, 0), round_corner=5, group_type=LineGroupType.RISE
        )
        assert _d(spec) == (
            "M0,50 45,50 A5,5 0 0,0 50,45 L50,5 A5,5 0 0,1 55,0 L100,0"
        )

    def test_rise_leftward(self):
        spec = _spec(
            Point(100, 50), AnchorSide.LEFT, Point(0, 0), AnchorSide.RIGHT,
            line_style=LineStyle.ANGLE, round_corner=5, group_type=LineGroupType.RISE,
        )
        assert _d(spec) == (
            "M100,50 55,50 A5,5 0 0,1 50,45 L50,5 A5,5 0 0,0 45,0 L0,0"
        )

    def test_rise_member_going_down_is_suppressed(self):
        spec = _angle(
            Point(0, 0), Point(100, 50), round_corner=5, group_type=LineGroupType.RISE
        )
        geometry = compute_connector(spec)
        assert geometry.path is SUPPRESSED
        assert geometry.is_suppressed
        assert path_d(geometry.path) == ""

    def test_drop_member_going_up_is_suppressed(self):
        spec = _angle(
            Point(0, 50), Point(100, 0), round_corner=5, group_type=LineGroupType.DROP
        )
        assert compute_connector(spec).path is SUPPRESSED

    @pytest.mark.parametrize("group", [LineGroupType.RISE, LineGroupType.DROP])
    def test_level_member_falls_back_to_polyline(self, group):
        spec = _angle(Point(0, 20), Point(100, 20), round_corner=5, group_type=group)
        assert _d(spec) == "M0,20 50,20 50,20 100,20"

    @pytest.mark.parametrize(
        "group", [LineGroupType.NONE, LineGroupType.SHRINK, LineGroupType.EXPAND]
    )
    def test_other_groups_are_unrounded(self, group):
        spec = _angle(Point(0, 0), Point(100, 50), round_corner=5, group_type=group)
        assert _d(spec) == "M0,0 50,0 50,50 100,50"

    def test_zero_radius_is_unrounded(self):
        spec = _angle(
            Point(0, 0), Point(100, 50), round_corner=0, group_type=LineGroupType.DROP
        )
        assert compute_connector(spec).tangents is None
        assert _d(spec) == "M0,0 50,0 50,50 100,50"

    def test_build_path_without_tangents_is_unrounded(self):
        spec = _angle(
            Point(0, 0), Point(100, 50), round_corner=5, group_type=LineGroupType.DROP
        )
        result = build_path(
            spec, Point(0, 0), Point(100, 50), (Point(50, 0), Point(50, 50))
        )
        assert result == DrawnPath("M0,0 50,0 50,50 100,50")

    def test_rounding_ignored_for_curves(self):
        spec = _spec(
            Point(0, 0), AnchorSide.RIGHT, Point(100, 50), AnchorSide.LEFT,
            line_style=LineStyle.CURVE, round_corner=5, group_type=LineGroupType.DROP,
        )
        assert _d(spec) == "M0,0 C50,0 50,50 100,50"


@pytest.mark.parametrize(
    "group, start_x, end_x, expected",
    [
        (LineGroupType.DROP, 0, 100, (1, 0)),
        (LineGroupType.DROP, 100, 0, (0, 1)),
        (LineGroupType.RISE, 0, 100, (0, 1)),
        (LineGroupType.RISE, 100, 0, (1, 0)),
        (LineGroupType.DROP, 0, 0, (0, 1)),
        (LineGroupType.RISE, 0, 0, (1, 0)),
    ],
)
def test_sweep_flags(group, start_x, end_x, expected):
    assert corner_sweep_flags(group, start_x, end_x) == expected


class TestRoundedVerticalAnchors:
    def test_drop_rightward(self):
        spec = _spec(
            Point(0, 0), AnchorSide.BOTTOM, Point(100, 100), AnchorSide.TOP,
            line_style=LineStyle.ANGLE, round_corner=5, group_type=LineGroupType.DROP,
        )
        assert _d(spec) == (
            "M0,0 0,45 A5,5 0 0,1 5,50 L95,50 A5,5 0 0,0 100,45 L100,100"
        )

    def test_rise_rightward(self):
        spec = _spec(
            Point(0, 100), AnchorSide.TOP, Point(100, 0), AnchorSide.BOTTOM,
            line_style=LineStyle.ANGLE, round_corner=5, group_type=LineGroupType.RISE,
        )
        assert _d(spec) == (
            "M0,100 0,55 A5,5 0 0,0 5,50 L95,50 A5,5 0 0,1 100,45 L100,0"
        )


def test_equal_x_uses_leftward_flags():
    spec = _angle(
        Point(0, 0), Point(0, 100), round_corner=5, group_type=LineGroupType.DROP
    )
    assert _d(spec) == "M0,0 0,0 A5,5 0 0,0 0,5 L0,95 A5,5 0 0,1 0,100 L0,100"


def test_sweep_flags_use_offset_ends():
    """The offset can flip the horizontal direction used for the flags."""
    spec = _angle(
        Point(0, 0), Point(1, 100), round_corner=5, group_type=LineGroupType.DROP,
        offset=10,
    )
    assert _d(spec) == (
        "M10,0 -4.5,0 A5,5 0 0,0 0.5,5 L0.5,95 A5,5 0 0,1 5.5,100 L-9,100"
    )


# ---------------------------------------------------------------------------
# Offset
# ---------------------------------------------------------------------------


class TestOffset:
    @pytest.mark.parametrize("style", list(LineStyle))
    def test_zero_offset_is_byte_identical(self, style):
        spec = _angle(
            Point(3, 7), Point(120, 90), line_style=style, end_marker=True,
            marker_length=20, round_corner=5, group_type=LineGroupType.DROP,
        )
        assert _d(replace(spec, offset=0.0)) == _d(spec)
        assert _d(replace(spec, offset=0)) == _d(spec)

    def test_straight_keeps_start(self):
        spec = _spec(
            Point(0, 0), AnchorSide.NONE, Point(100, 0), AnchorSide.NONE,
            line_style=LineStyle.STRAIGHT, offset=10,
        )
        geometry = compute_connector(spec)
        assert path_d(geometry.path) == "M0,0 90,0"
        assert geometry.label == LabelBox(x=0, y=0, width=90, height=1)

    def test_curve_moves_both_ends(self):
        spec = _spec(
            Point(0, 0), AnchorSide.RIGHT, Point(100, 0), AnchorSide.LEFT,
            line_style=LineStyle.CURVE, offset=10,
        )
        geometry = compute_connector(spec)
        assert path_d(geometry.path) == "M10,0 C50,0 50,0 90,0"
        assert geometry.label == LabelBox(x=10, y=0, width=80, height=1)

    def test_angle_moves_both_ends(self):
        spec = _angle(Point(0, 0), Point(100, 50), offset=4)
        assert _d(spec) == "M4,0 50,0 50,50 96,50"

    def test_offset_does_not_move_controls(self):
        spec = _angle(Point(0, 0), Point(100, 50), offset=4)
        geometry = compute_connector(spec)
        assert geometry.start == Point(0, 0)
        assert geometry.control_start == Point(50, 0)


# ---------------------------------------------------------------------------
# Degenerate input and label boxes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("style", list(LineStyle))
def test_zero_length_is_direct_line(style):
    spec = _spec(
        Point(5, 5), AnchorSide.BOTTOM, Point(5, 5), AnchorSide.TOP,
        line_style=style, offset=3, round_corner=5, group_type=LineGroupType.DROP,
    )
    geometry = compute_connector(spec)
    assert path_d(geometry.path) == "M5,5 5,5"
    assert geometry.label == LabelBox(x=5, y=5, width=1, height=1)


class TestLabelBox:
    def test_origin_is_smaller_coordinate(self):
        box = label_box(Point(80, 10), Point(20, 70))
        assert box == LabelBox(x=20, y=10, width=60, height=60)

    @pytest.mark.parametrize(
        "start, end",
        [
            (Point(0, 0), Point(0, 0)),
            (Point(0, 0), Point(0.25, 0)),
            (Point(-4, 9), Point(-4, 300)),
            (Point(1e6, 1e6), Point(-1e6, 1e6)),
        ],
    )
    def test_never_smaller_than_one(self, start, end):
        box = label_box(start, end)
        assert box.width >= 1
        assert box.height >= 1

    def test_center(self):
        assert label_box(Point(0, 0), Point(100, 40)).center == Point(50, 20)
