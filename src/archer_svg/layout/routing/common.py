"""Shared types and helper functions for connector routing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from archer_svg.parser.model import (
    AnchorSide,
    Diagram,
    EndShape,
    LineGroupType,
    LineStyle,
    Point,
    Relation,
)


@dataclass(frozen=True)
class ConnectorSpec:
    """Everything the geometry engine needs to route one connector.

    ``marker_length`` is the marker size in stroke-width units (a
    circle's diameter or twice an arrow's length); whether it applies at
    each end is decided by ``start_marker`` and ``end_marker``.
    """

    source: Point
    source_side: AnchorSide
    target: Point
    target_side: AnchorSide
    stroke_width: float = 2.0
    start_marker: bool = False
    end_marker: bool = True
    marker_length: float = 0.0
    line_style: LineStyle = LineStyle.CURVE
    offset: float = 0.0
    round_corner: float = 0.0
    group_type: LineGroupType = LineGroupType.NONE


@dataclass(frozen=True)
class LabelBox:
    """Axis-aligned box a connector label is centred in."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class DrawnPath:
    """A path to draw, as an SVG ``d`` attribute."""

    d: str


class Suppressed:
    """Marker result for a connector that must not be drawn."""

    _instance: Suppressed | None = None

    def __new__(cls) -> Suppressed:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SUPPRESSED"


SUPPRESSED = Suppressed()

PathResult = DrawnPath | Suppressed


def path_d(result: PathResult) -> str:
    """Return the SVG ``d`` string for a result; empty when suppressed."""
    if isinstance(result, DrawnPath):
        return result.d
    return ""


@dataclass(frozen=True)
class CornerTangents:
    """Tangent points bracketing the two rounded corners of an angle route."""

    start_in: Point
    start_out: Point
    end_in: Point
    end_out: Point


@dataclass
class ConnectorGeometry:
    """Computed geometry for one connector."""

    start: Point
    end: Point
    control_start: Point
    control_end: Point
    tangents: CornerTangents | None
    path: PathResult
    label: LabelBox

    @property
    def is_suppressed(self) -> bool:
        return isinstance(self.path, Suppressed)


@dataclass
class ConnectorStyle:
    """Effective drawing settings for a relation after applying overrides."""

    stroke_color: str | None
    stroke_width: float
    stroke_dasharray: str | None
    line_style: LineStyle
    start_marker: bool
    end_marker: bool
    end_shape: EndShape


def resolve_connector_style(diagram: Diagram, relation: Relation) -> ConnectorStyle:
    """Merge a relation's style overrides over the diagram defaults.

    The line style falls back to ANGLE when curves are disabled, CURVE
    otherwise.  The end marker is on unless something turns it off.
    """
    defaults = diagram.defaults
    style = relation.style

    no_curves = bool(style.no_curves or defaults.no_curves)
    line_style = style.line_style or defaults.line_style
    if line_style is None:
        line_style = LineStyle.ANGLE if no_curves else LineStyle.CURVE

    start_marker = style.start_marker if style.start_marker is not None else defaults.start_marker
    end_marker = style.end_marker if style.end_marker is not None else defaults.end_marker

    return ConnectorStyle(
        stroke_color=style.stroke_color or defaults.stroke_color,
        stroke_width=style.stroke_width or defaults.stroke_width,
        stroke_dasharray=style.stroke_dasharray or defaults.stroke_dasharray,
        line_style=line_style,
        start_marker=bool(start_marker),
        end_marker=bool(end_marker),
        end_shape=style.end_shape or defaults.end_shape,
    )


def marker_id(unique_id: str, relation: Relation) -> str:
    """Return the SVG id for a relation's marker definition."""
    return f"{unique_id}{relation.source.element_id}{relation.target.element_id}"


def fmt_num(value: float) -> str:
    """Format a coordinate in shortest form: ``0``, ``12.5``, ``-3``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return repr(float(value))


def fmt_point(p: Point) -> str:
    return f"{fmt_num(p.x)},{fmt_num(p.y)}"
