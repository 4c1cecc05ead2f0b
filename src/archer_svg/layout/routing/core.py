"""Connector routing for a whole diagram.

Routing runs in two passes.  The first resolves every relation's
anchors and marker-adjusted endpoints; when the diagram asks for
rounded right-angle connectors those endpoints are classified as one
batch.  The second pass builds each connector's geometry with that
shared classification.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from archer_svg.layout.anchors import ORIGIN, anchor_point
from archer_svg.layout.routing.common import (
    ConnectorGeometry,
    ConnectorSpec,
    ConnectorStyle,
    CornerTangents,
    marker_id,
    resolve_connector_style,
)
from archer_svg.layout.routing.control import (
    end_control_point,
    end_corner_tangents,
    start_control_point,
    start_corner_tangents,
)
from archer_svg.layout.routing.endpoints import adjusted_endpoints
from archer_svg.layout.routing.grouping import classify_line_group
from archer_svg.layout.routing.labels import label_box
from archer_svg.layout.routing.path import apply_offset, build_path
from archer_svg.parser.model import Diagram, LineGroupType, LineStyle, Point, Relation

logger = logging.getLogger(__name__)


@dataclass
class RoutedConnector:
    """A relation together with its resolved style and geometry."""

    relation: Relation
    style: ConnectorStyle
    spec: ConnectorSpec
    geometry: ConnectorGeometry
    marker_id: str


def compute_connector(spec: ConnectorSpec) -> ConnectorGeometry:
    """Compute endpoints, control points, path and label box for one connector."""
    start, end = adjusted_endpoints(spec)
    control_start = start_control_point(start, end, spec.source_side)
    control_end = end_control_point(start, end, spec.target_side)

    tangents = None
    if spec.line_style is LineStyle.ANGLE and spec.round_corner:
        start_in, start_out = start_corner_tangents(
            start, end, spec.round_corner, spec.source_side
        )
        end_in, end_out = end_corner_tangents(
            start, end, spec.round_corner, spec.target_side
        )
        tangents = CornerTangents(start_in, start_out, end_in, end_out)

    path = build_path(
        spec, start, end, (control_start, control_end), tangents, spec.group_type
    )

    if start == end:
        line_start, line_end = start, end
    else:
        line_start, line_end = apply_offset(
            start, end, control_start, spec.offset, spec.line_style
        )

    return ConnectorGeometry(
        start=start,
        end=end,
        control_start=control_start,
        control_end=control_end,
        tangents=tangents,
        path=path,
        label=label_box(line_start, line_end),
    )


def _connector_spec(
    diagram: Diagram,
    style: ConnectorStyle,
    source: Point,
    target: Point,
    relation: Relation,
) -> ConnectorSpec:
    return ConnectorSpec(
        source=source,
        source_side=relation.source.side,
        target=target,
        target_side=relation.target.side,
        stroke_width=style.stroke_width,
        start_marker=style.start_marker,
        end_marker=style.end_marker,
        marker_length=style.end_shape.marker_length,
        line_style=style.line_style,
        offset=diagram.defaults.offset,
        round_corner=diagram.defaults.round_corner,
    )


def groups_rounded_corners(diagram: Diagram) -> bool:
    """True when the diagram's connectors form one rounded right-angle batch."""
    return bool(diagram.defaults.no_curves and diagram.defaults.round_corner)


def route_connectors(
    diagram: Diagram,
    origin: Point = ORIGIN,
) -> list[RoutedConnector]:
    """Route every relation of *diagram* that can be resolved.

    Relations whose anchors cannot be resolved yet are logged and left
    out; suppressed connectors are returned with a suppressed path so
    callers can decide how to report them.
    """
    resolved: list[tuple[Relation, ConnectorStyle, ConnectorSpec]] = []
    for relation in diagram.relations:
        source = anchor_point(diagram, relation.source, origin)
        if source is None:
            logger.warning(
                "Could not find starting point of element %r; not drawing %s",
                relation.source.element_id,
                relation.key,
            )
            continue
        target = anchor_point(diagram, relation.target, origin)
        if target is None:
            logger.warning(
                "Could not find target element %r; not drawing %s",
                relation.target.element_id,
                relation.key,
            )
            continue
        style = resolve_connector_style(diagram, relation)
        resolved.append(
            (relation, style, _connector_spec(diagram, style, source, target, relation))
        )

    group_type = LineGroupType.NONE
    if groups_rounded_corners(diagram):
        group_type = classify_line_group(
            [adjusted_endpoints(spec) for _rel, _style, spec in resolved]
        )
        logger.debug("Classified %d connectors as %s", len(resolved), group_type.value)

    routed: list[RoutedConnector] = []
    for relation, style, spec in resolved:
        spec = replace(spec, group_type=group_type)
        geometry = compute_connector(spec)
        if geometry.is_suppressed:
            logger.debug("Suppressed %s: direction disagrees with its batch", relation.key)
        routed.append(
            RoutedConnector(
                relation=relation,
                style=style,
                spec=spec,
                geometry=geometry,
                marker_id=marker_id(diagram.unique_id, relation),
            )
        )
    return routed
