"""Arrowhead and circle marker definitions."""

from __future__ import annotations

import drawsvg as draw

from archer_svg.parser.model import ArrowShape, EndShape
from archer_svg.render.constants import MARKER_ORIENT, MARKER_UNITS


def build_marker(marker_id: str, shape: EndShape, color: str) -> draw.Marker:
    """Build the marker for one connector.

    The marker is laid out in stroke-width units with its reference point
    at the line end, which the routing engine has already pulled back
    from the anchor by half the marker length times the stroke width.
    A circle therefore ends up centred on the anchor and an arrow's tip
    touches it.
    """
    if shape.circle is not None:
        circle = shape.circle
        r = circle.radius
        marker = draw.Marker(
            0, 0, 2 * r, 2 * r,
            orient=MARKER_ORIENT,
            id=marker_id,
            refX=0,
            refY=r,
            markerUnits=MARKER_UNITS,
        )
        marker.append(draw.Circle(
            r, r, max(r - circle.stroke_width / 2, 0),
            fill=circle.fill_color or color,
            stroke=circle.stroke_color or color,
            stroke_width=circle.stroke_width,
        ))
        return marker

    arrow = shape.arrow or ArrowShape()
    length = arrow.arrow_length
    thickness = arrow.arrow_thickness
    marker = draw.Marker(
        0, 0, length, thickness,
        orient=MARKER_ORIENT,
        id=marker_id,
        refX=0,
        refY=thickness / 2,
        markerUnits=MARKER_UNITS,
    )
    marker.append(draw.Lines(
        0, 0,
        length, thickness / 2,
        0, thickness,
        close=True,
        fill=color,
    ))
    return marker
