"""SVG path strings for the three line styles.

Output uses absolute ``M``, ``C``, ``A`` and ``L`` commands.  The angle
style without rounding relies on the implicit line-to that follows the
coordinate pairs of an ``M`` command.
"""

from __future__ import annotations

import math

from archer_svg.layout.constants import ARC_RADIUS
from archer_svg.layout.routing.common import (
    SUPPRESSED,
    ConnectorSpec,
    CornerTangents,
    DrawnPath,
    PathResult,
    fmt_num,
    fmt_point,
)
from archer_svg.parser.model import LineGroupType, LineStyle, Point

_ROUNDED_GROUPS = (LineGroupType.RISE, LineGroupType.DROP)


def apply_offset(
    start: Point,
    end: Point,
    control_start: Point,
    offset: float,
    line_style: LineStyle,
) -> tuple[Point, Point]:
    """Shift the line ends by *offset* to separate overlapping connectors.

    The direction is the line of sight for STRAIGHT connectors and the
    start-to-first-control direction otherwise.  The end always moves
    back along it.  The start moves forward along it, except for
    STRAIGHT connectors whose start stays put.
    """
    if not offset:
        return start, end

    if line_style is LineStyle.STRAIGHT:
        angle = math.atan2(end.y - start.y, end.x - start.x)
    else:
        angle = math.atan2(control_start.y - start.y, control_start.x - start.x)
    dx = offset * math.cos(angle)
    dy = offset * math.sin(angle)

    if line_style is not LineStyle.STRAIGHT:
        start = Point(start.x + dx, start.y + dy)
    end = Point(end.x - dx, end.y - dy)
    return start, end


_SWEEP_FLAGS: dict[tuple[LineGroupType, bool], tuple[int, int]] = {
    (LineGroupType.RISE, True): (0, 1),
    (LineGroupType.RISE, False): (1, 0),
    (LineGroupType.DROP, True): (1, 0),
    (LineGroupType.DROP, False): (0, 1),
}


def corner_sweep_flags(
    group_type: LineGroupType,
    start_x: float,
    end_x: float,
) -> tuple[int, int]:
    """Arc sweep flags for the two corners of a rounded angle route.

    The flags depend only on the batch classification and on whether
    the line runs rightward (``start_x < end_x``).  The second corner
    always sweeps opposite to the first.
    """
    return _SWEEP_FLAGS[(group_type, start_x < end_x)]


def _arc(flag: int, to: Point) -> str:
    r = fmt_num(ARC_RADIUS)
    return f"A{r},{r} 0 0,{flag} {fmt_point(to)}"


def build_path(
    spec: ConnectorSpec,
    start: Point,
    end: Point,
    controls: tuple[Point, Point],
    tangents: CornerTangents | None = None,
    group_type: LineGroupType = LineGroupType.NONE,
) -> PathResult:
    """Assemble the path for one connector.

    *start* and *end* are the marker-adjusted line ends before offset;
    *controls* are the control points computed from them.  Rounded
    corners are only drawn for RISE and DROP batches.  A member whose
    own vertical direction disagrees with its batch is SUPPRESSED.
    """
    control_start, control_end = controls

    if start == end:
        return DrawnPath(f"M{fmt_point(start)} {fmt_point(end)}")

    line_start, line_end = apply_offset(
        start, end, control_start, spec.offset, spec.line_style
    )
    head = f"M{fmt_point(line_start)} "
    tail = fmt_point(line_end)

    if spec.line_style is LineStyle.CURVE:
        return DrawnPath(
            f"{head}C{fmt_point(control_start)} {fmt_point(control_end)} {tail}"
        )

    if spec.line_style is LineStyle.STRAIGHT:
        return DrawnPath(f"{head}{tail}")

    polyline = f"{head}{fmt_point(control_start)} {fmt_point(control_end)} {tail}"
    if not spec.round_corner or tangents is None or group_type not in _ROUNDED_GROUPS:
        return DrawnPath(polyline)

    if start.y == end.y:
        return DrawnPath(polyline)
    if group_type is LineGroupType.RISE and start.y < end.y:
        return SUPPRESSED
    if group_type is LineGroupType.DROP and start.y > end.y:
        return SUPPRESSED

    first, second = corner_sweep_flags(group_type, line_start.x, line_end.x)
    return DrawnPath(
        f"{head}{fmt_point(tangents.start_in)} {_arc(first, tangents.start_out)} "
        f"L{fmt_point(tangents.end_in)} {_arc(second, tangents.end_out)} L{tail}"
    )
