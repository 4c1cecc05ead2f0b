"""Tests for marker-adjusted line endpoints."""

from __future__ import annotations

import math

import pytest

from archer_svg.layout.routing import ConnectorSpec, adjusted_endpoints, resolve_endpoint
from archer_svg.layout.routing.endpoints import direction_vector
from archer_svg.parser.model import AnchorSide, LineStyle, Point

ANCHOR = Point(10.0, 10.0)
FAR = Point(200.0, 300.0)


class TestResolveEndpoint:
    @pytest.mark.parametrize("side", list(AnchorSide))
    @pytest.mark.parametrize("style", list(LineStyle))
    def test_zero_marker_is_identity(self, side: AnchorSide, style: LineStyle):
        assert resolve_endpoint(ANCHOR, side, 0, 2.0, style, FAR) == ANCHOR

    @pytest.mark.parametrize(
        "side, expected",
        [
            (AnchorSide.TOP, Point(10.0, -10.0)),
            (AnchorSide.BOTTOM, Point(10.0, 30.0)),
            (AnchorSide.LEFT, Point(-10.0, 10.0)),
            (AnchorSide.RIGHT, Point(30.0, 10.0)),
            (AnchorSide.NONE, Point(10.0, 10.0)),
        ],
    )
    def test_fixed_side_vectors(self, side: AnchorSide, expected: Point):
        """marker_length * stroke_width / 2 = 20 units along the side."""
        assert resolve_endpoint(ANCHOR, side, 20, 2.0, LineStyle.CURVE, FAR) == expected

    def test_angle_style_uses_side_vector(self):
        p = resolve_endpoint(ANCHOR, AnchorSide.BOTTOM, 20, 2.0, LineStyle.ANGLE, FAR)
        assert p == Point(10.0, 30.0)

    def test_straight_follows_line_of_sight(self):
        """A 3-4-5 triangle: the 5 unit shift splits into (3, 4)."""
        p = resolve_endpoint(
            Point(0.0, 0.0), AnchorSide.TOP, 10, 1.0, LineStyle.STRAIGHT, Point(30.0, 40.0)
        )
        assert p.x == pytest.approx(3.0)
        assert p.y == pytest.approx(4.0)

    def test_straight_ignores_side(self):
        for side in AnchorSide:
            p = resolve_endpoint(
                Point(0.0, 0.0), side, 10, 2.0, LineStyle.STRAIGHT, Point(100.0, 0.0)
            )
            assert p.x == pytest.approx(10.0)
            assert p.y == pytest.approx(0.0)

    def test_shift_scales_with_stroke_width(self):
        thin = resolve_endpoint(ANCHOR, AnchorSide.RIGHT, 20, 1.0, LineStyle.CURVE, FAR)
        thick = resolve_endpoint(ANCHOR, AnchorSide.RIGHT, 20, 4.0, LineStyle.CURVE, FAR)
        assert thin.x - ANCHOR.x == 10.0
        assert thick.x - ANCHOR.x == 40.0

    def test_nan_propagates(self):
        p = resolve_endpoint(
            Point(math.nan, 0.0), AnchorSide.RIGHT, 20, 2.0, LineStyle.CURVE, FAR
        )
        assert math.isnan(p.x)


def test_direction_vectors_are_unit_or_zero():
    for side in AnchorSide:
        vx, vy = direction_vector(side)
        length = math.hypot(vx, vy)
        assert length == (0.0 if side is AnchorSide.NONE else 1.0)


class TestAdjustedEndpoints:
    def _spec(self, **kwargs) -> ConnectorSpec:
        base = dict(
            source=Point(0.0, 0.0),
            source_side=AnchorSide.RIGHT,
            target=Point(100.0, 0.0),
            target_side=AnchorSide.LEFT,
            stroke_width=2.0,
            marker_length=20.0,
        )
        base.update(kwargs)
        return ConnectorSpec(**base)

    def test_end_marker_only(self):
        start, end = adjusted_endpoints(self._spec())
        assert start == Point(0.0, 0.0)
        assert end == Point(80.0, 0.0)

    def test_both_markers(self):
        start, end = adjusted_endpoints(self._spec(start_marker=True))
        assert start == Point(20.0, 0.0)
        assert end == Point(80.0, 0.0)

    def test_no_markers(self):
        start, end = adjusted_endpoints(self._spec(end_marker=False))
        assert start == Point(0.0, 0.0)
        assert end == Point(100.0, 0.0)

    def test_straight_end_pulls_toward_source(self):
        spec = self._spec(
            line_style=LineStyle.STRAIGHT,
            target=Point(0.0, 100.0),
            target_side=AnchorSide.RIGHT,
        )
        _start, end = adjusted_endpoints(spec)
        assert end.x == pytest.approx(0.0)
        assert end.y == pytest.approx(80.0)
