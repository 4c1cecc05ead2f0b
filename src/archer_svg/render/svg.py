"""SVG generation for connector diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from archer_svg.layout.routing import RoutedConnector, path_d, route_connectors
from archer_svg.parser.model import Diagram
from archer_svg.render.constants import (
    CANVAS_PADDING,
    EMPTY_SVG,
    TITLE_BASELINE,
    TITLE_HEIGHT,
)
from archer_svg.render.markers import build_marker
from archer_svg.render.style import Theme


def render_svg(
    diagram: Diagram,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
    routes: list[RoutedConnector] | None = None,
) -> str:
    """Render a laid-out diagram to an SVG string.

    *routes* may carry connectors already routed by the caller.

    Connectors whose anchors cannot be resolved, and connectors whose
    path is suppressed, are left out of the drawing.
    """
    measured = [e for e in diagram.elements.values() if e.is_measured]
    if not measured:
        return EMPTY_SVG

    max_x = max(e.x + e.width for e in measured)
    max_y = max(e.y + e.height for e in measured)
    top = TITLE_HEIGHT if diagram.title else 0.0

    svg_width = width or int(max_x + padding * 2)
    svg_height = height or int(max_y + padding * 2 + top)

    d = draw.Drawing(svg_width, svg_height)

    # Background
    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    # Title
    if diagram.title:
        d.append(draw.Text(
            diagram.title,
            theme.title_font_size,
            padding, TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    content = draw.Group(transform=f"translate({padding},{padding + top})")
    _render_elements(content, diagram, theme)

    # Connectors are drawn over the element boxes
    if routes is None:
        routes = route_connectors(diagram)
    _render_connectors(content, routes, theme)
    _render_connector_labels(content, routes, theme)

    d.append(content)
    return d.as_svg()


def _render_elements(
    group: draw.Group,
    diagram: Diagram,
    theme: Theme,
) -> None:
    """Render elements as rounded boxes with a centred label."""
    for element in diagram.elements.values():
        if not element.is_measured:
            continue

        r = theme.element_corner_radius
        group.append(draw.Rectangle(
            element.x, element.y,
            element.width, element.height,
            rx=r, ry=r,
            fill=theme.element_fill,
            stroke=theme.element_stroke,
            stroke_width=theme.element_stroke_width,
        ))
        group.append(draw.Text(
            element.label,
            theme.label_font_size,
            element.x + element.width / 2,
            element.y + element.height / 2,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _render_connectors(
    group: draw.Group,
    routes: list[RoutedConnector],
    theme: Theme,
) -> None:
    """Render connector paths with their start and end markers."""
    for route in routes:
        d = path_d(route.geometry.path)
        if not d:
            continue

        style = route.style
        color = style.stroke_color or theme.connector_color
        marker = None
        if style.start_marker or style.end_marker:
            marker = build_marker(route.marker_id, style.end_shape, color)

        kwargs = {}
        if style.stroke_dasharray:
            kwargs["stroke_dasharray"] = style.stroke_dasharray
        if style.start_marker:
            kwargs["marker_start"] = marker
        if style.end_marker:
            kwargs["marker_end"] = marker

        group.append(draw.Path(
            d=d,
            fill="none",
            stroke=color,
            stroke_width=style.stroke_width,
            **kwargs,
        ))


def _render_connector_labels(
    group: draw.Group,
    routes: list[RoutedConnector],
    theme: Theme,
) -> None:
    """Render relation labels centred in each connector's label box."""
    for route in routes:
        if not route.relation.label or route.geometry.is_suppressed:
            continue
        center = route.geometry.label.center
        group.append(draw.Text(
            route.relation.label,
            theme.connector_label_font_size,
            center.x, center.y,
            fill=theme.connector_label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))
