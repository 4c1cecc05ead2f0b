"""SVG rendering for connector diagrams."""

from archer_svg.render.svg import render_svg

__all__ = ["render_svg"]
