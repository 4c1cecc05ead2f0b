"""Label box for a connector."""

from __future__ import annotations

from archer_svg.layout.routing.common import LabelBox
from archer_svg.parser.model import Point


def label_box(start: Point, end: Point) -> LabelBox:
    """Box spanning the line ends; never thinner than one unit."""
    return LabelBox(
        x=min(start.x, end.x),
        y=min(start.y, end.y),
        width=max(abs(end.x - start.x), 1),
        height=max(abs(end.y - start.y), 1),
    )
