"""Anchor resolution: element box + side -> point in container coordinates."""

from __future__ import annotations

from archer_svg.parser.model import Anchor, AnchorSide, Diagram, Element, Point

ORIGIN = Point(0.0, 0.0)


def point_on_box(element: Element, side: AnchorSide) -> Point:
    """Return the attachment point of *side* on an element's box.

    Top and bottom anchors sit at the horizontal centre of their edge,
    left and right anchors at the vertical centre.  NONE is the centre of
    the box.
    """
    cx = element.x + element.width / 2
    cy = element.y + element.height / 2
    if side is AnchorSide.TOP:
        return Point(cx, element.y)
    if side is AnchorSide.BOTTOM:
        return Point(cx, element.y + element.height)
    if side is AnchorSide.LEFT:
        return Point(element.x, cy)
    if side is AnchorSide.RIGHT:
        return Point(element.x + element.width, cy)
    return Point(cx, cy)


def anchor_point(
    diagram: Diagram,
    anchor: Anchor,
    origin: Point = ORIGIN,
) -> Point | None:
    """Resolve an anchor relative to *origin*.

    Returns None while the element is unknown or has not been measured
    yet; callers skip the connector for this pass.
    """
    element = diagram.elements.get(anchor.element_id)
    if element is None or not element.is_measured:
        return None
    p = point_on_box(element, anchor.side)
    return Point(p.x - origin.x, p.y - origin.y)
