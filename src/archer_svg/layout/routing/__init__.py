"""Connector routing subpackage.

Public API:
- route_connectors: Two-pass routing of every relation in a diagram
- compute_connector: Geometry for a single ConnectorSpec
- classify_line_group: Batch classification for rounded angle routes
- resolve_endpoint / adjusted_endpoints: Marker-adjusted line ends
- start_control_point / end_control_point: Curve and dogleg controls
- start_corner_tangents / end_corner_tangents: Rounded corner tangents
- build_path: SVG path string assembly
- label_box: Connector label bounds
"""

from archer_svg.layout.routing.common import (
    SUPPRESSED,
    ConnectorGeometry,
    ConnectorSpec,
    CornerTangents,
    DrawnPath,
    LabelBox,
    PathResult,
    Suppressed,
    path_d,
)
from archer_svg.layout.routing.control import (
    end_control_point,
    end_corner_tangents,
    start_control_point,
    start_corner_tangents,
)
from archer_svg.layout.routing.core import (
    RoutedConnector,
    compute_connector,
    route_connectors,
)
from archer_svg.layout.routing.endpoints import adjusted_endpoints, resolve_endpoint
from archer_svg.layout.routing.grouping import classify_line_group
from archer_svg.layout.routing.labels import label_box
from archer_svg.layout.routing.path import apply_offset, build_path

__all__ = [
    "SUPPRESSED",
    "ConnectorGeometry",
    "ConnectorSpec",
    "CornerTangents",
    "DrawnPath",
    "LabelBox",
    "PathResult",
    "RoutedConnector",
    "Suppressed",
    "adjusted_endpoints",
    "apply_offset",
    "build_path",
    "classify_line_group",
    "compute_connector",
    "end_control_point",
    "end_corner_tangents",
    "label_box",
    "path_d",
    "resolve_endpoint",
    "route_connectors",
    "start_control_point",
    "start_corner_tangents",
]
