"""Element layout and anchor resolution."""

from archer_svg.layout.anchors import anchor_point, point_on_box
from archer_svg.layout.engine import compute_layout

__all__ = ["anchor_point", "compute_layout", "point_on_box"]
