"""Control points and corner tangents for curve and angle routing.

Every function here works on one axis selected by the anchor side:
top/bottom anchors leave their element vertically (the Y axis),
left/right anchors horizontally (the X axis).  An anchor with no side
has no axis and gets no adjustment at all.

For an angle route the control points are the two corners of the
dogleg.  When corners are rounded, each corner is bracketed by two
tangent points: one on the segment arriving at the corner, one on the
segment leaving it, both ``radius`` away from the corner.  Which way
is "arriving" follows the sign of ``end - start`` on each axis, so a
connector that runs right-to-left or bottom-to-top bends correctly.
The one exception is the last point of a top/bottom end corner; see
``end_corner_tangents``.
"""

from __future__ import annotations

from archer_svg.parser.model import AnchorSide, Point

SIDE_AXES: dict[AnchorSide, str | None] = {
    AnchorSide.TOP: "y",
    AnchorSide.BOTTOM: "y",
    AnchorSide.LEFT: "x",
    AnchorSide.RIGHT: "x",
    AnchorSide.NONE: None,
}


def _coord(p: Point, axis: str) -> float:
    return p.x if axis == "x" else p.y


def _moved(p: Point, axis: str, value: float) -> Point:
    if axis == "x":
        return Point(value, p.y)
    return Point(p.x, value)


def _cross(axis: str) -> str:
    return "y" if axis == "x" else "x"


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def start_control_point(start: Point, end: Point, side: AnchorSide) -> Point:
    """Halfway from start to end along the start anchor's axis."""
    axis = SIDE_AXES[side]
    if axis is None:
        return start
    delta = _coord(end, axis) - _coord(start, axis)
    return _moved(start, axis, _coord(start, axis) + delta / 2)


def end_control_point(start: Point, end: Point, side: AnchorSide) -> Point:
    """Halfway back from end to start along the end anchor's axis."""
    axis = SIDE_AXES[side]
    if axis is None:
        return end
    delta = _coord(end, axis) - _coord(start, axis)
    return _moved(end, axis, _coord(end, axis) - delta / 2)


def start_corner_tangents(
    start: Point,
    end: Point,
    radius: float,
    side: AnchorSide,
) -> tuple[Point, Point]:
    """Tangent points around the corner at the start control point.

    The route arrives along the start anchor's axis and leaves along
    the other one.
    """
    axis = SIDE_AXES[side]
    if axis is None:
        return start, start
    cross = _cross(axis)
    corner = start_control_point(start, end, side)
    along = _sign(_coord(end, axis) - _coord(start, axis))
    turn = _sign(_coord(end, cross) - _coord(start, cross))
    before = _moved(corner, axis, _coord(corner, axis) - along * radius)
    after = _moved(corner, cross, _coord(corner, cross) + turn * radius)
    return before, after


def end_corner_tangents(
    start: Point,
    end: Point,
    radius: float,
    side: AnchorSide,
) -> tuple[Point, Point]:
    """Tangent points around the corner at the end control point.

    The route arrives across the end anchor's axis and leaves along it.
    For top/bottom end anchors the second point is stepped back along Y
    by ``sign(dx) * radius``, the horizontal direction of travel.
    """
    axis = SIDE_AXES[side]
    if axis is None:
        return end, end
    cross = _cross(axis)
    corner = end_control_point(start, end, side)
    along = _sign(_coord(end, axis) - _coord(start, axis))
    turn = _sign(_coord(end, cross) - _coord(start, cross))
    before = _moved(corner, cross, _coord(corner, cross) - turn * radius)
    if axis == "y":
        after = _moved(corner, axis, _coord(corner, axis) - turn * radius)
    else:
        after = _moved(corner, axis, _coord(corner, axis) + along * radius)
    return before, after
