"""Line endpoints pulled back from their anchors to make room for markers.

A marker is drawn in stroke-width units, so the visible gap it needs
grows with the stroke: the anchor is moved by
``marker_length * stroke_width / 2`` along a unit direction vector.

For STRAIGHT connectors the vector points along the line of sight to
the opposing anchor.  Every other style uses the fixed vector of the
anchor's side, so the marker sits flush against the element box.
"""

from __future__ import annotations

import math

from archer_svg.layout.routing.common import ConnectorSpec
from archer_svg.parser.model import AnchorSide, LineStyle, Point

SIDE_VECTORS: dict[AnchorSide, tuple[float, float]] = {
    AnchorSide.TOP: (0.0, -1.0),
    AnchorSide.BOTTOM: (0.0, 1.0),
    AnchorSide.LEFT: (-1.0, 0.0),
    AnchorSide.RIGHT: (1.0, 0.0),
    AnchorSide.NONE: (0.0, 0.0),
}


def direction_vector(side: AnchorSide) -> tuple[float, float]:
    """Unit vector pointing out of the element through *side*."""
    return SIDE_VECTORS[side]


def resolve_endpoint(
    anchor: Point,
    side: AnchorSide,
    marker_length: float,
    stroke_width: float,
    line_style: LineStyle,
    opposing: Point,
) -> Point:
    """Return the line end for *anchor* after the marker adjustment.

    *marker_length* is zero when the marker at this end is disabled,
    in which case the anchor comes back unchanged.
    """
    if not marker_length:
        return anchor

    if line_style is LineStyle.STRAIGHT:
        angle = math.atan2(opposing.y - anchor.y, opposing.x - anchor.x)
        vx, vy = math.cos(angle), math.sin(angle)
    else:
        vx, vy = direction_vector(side)

    shift = marker_length * stroke_width / 2
    return Point(anchor.x + vx * shift, anchor.y + vy * shift)


def adjusted_endpoints(spec: ConnectorSpec) -> tuple[Point, Point]:
    """Return the (start, end) line endpoints of a connector, before offset."""
    start = resolve_endpoint(
        spec.source,
        spec.source_side,
        spec.marker_length if spec.start_marker else 0.0,
        spec.stroke_width,
        spec.line_style,
        spec.target,
    )
    end = resolve_endpoint(
        spec.target,
        spec.target_side,
        spec.marker_length if spec.end_marker else 0.0,
        spec.stroke_width,
        spec.line_style,
        spec.source,
    )
    return start, end
