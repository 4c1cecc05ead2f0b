"""Data model for connector diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AnchorSide(Enum):
    """Side of an element's box that an anchor is attached to."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class LineStyle(Enum):
    """How a connector travels between its two anchors."""

    STRAIGHT = "straight"
    CURVE = "curve"
    ANGLE = "angle"


class LineGroupType(Enum):
    """Shape of a batch of rounded right-angle connectors."""

    NONE = "none"
    RISE = "rise"
    DROP = "drop"
    SHRINK = "shrink"
    EXPAND = "expand"


@dataclass(frozen=True)
class Point:
    """A coordinate in the diagram plane (y grows downward)."""

    x: float
    y: float


@dataclass
class ArrowShape:
    """Triangular arrowhead marker, sized in stroke-width units."""

    arrow_length: float = 10.0
    arrow_thickness: float = 6.0


@dataclass
class CircleShape:
    """Circular marker, sized in stroke-width units."""

    radius: float = 2.0
    fill_color: str | None = None
    stroke_color: str | None = None
    stroke_width: float = 1.0


@dataclass
class EndShape:
    """Marker drawn at connector ends.  A circle wins over an arrow."""

    arrow: ArrowShape | None = field(default_factory=ArrowShape)
    circle: CircleShape | None = None

    @property
    def marker_length(self) -> float:
        """Distance the line end is pulled back from the anchor, per unit stroke."""
        if self.circle is not None:
            return self.circle.radius * 2
        return (self.arrow or ArrowShape()).arrow_length * 2


@dataclass
class Element:
    """A rectangular region that connectors attach to.

    Width and height stay at zero until the element has been measured,
    either from an explicit ``%%archer box:`` directive or by the layout
    engine.
    """

    id: str
    label: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    # Layer assigned by auto layout
    layer: int = 0

    @property
    def is_measured(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Anchor:
    """An element id plus the side of its box a connector attaches to."""

    element_id: str
    side: AnchorSide = AnchorSide.NONE


@dataclass
class RelationStyle:
    """Per-relation overrides of the diagram-level connector defaults."""

    stroke_color: str | None = None
    stroke_width: float | None = None
    stroke_dasharray: str | None = None
    line_style: LineStyle | None = None
    no_curves: bool | None = None
    start_marker: bool | None = None
    end_marker: bool | None = None
    end_shape: EndShape | None = None


@dataclass
class Relation:
    """A directed connector from one anchor to another."""

    source: Anchor
    target: Anchor
    label: str = ""
    style: RelationStyle = field(default_factory=RelationStyle)

    @property
    def key(self) -> str:
        return f"{self.source.element_id}->{self.target.element_id}"


@dataclass
class ConnectorDefaults:
    """Diagram-wide connector settings (the container props)."""

    stroke_color: str | None = None
    stroke_width: float = 2.0
    stroke_dasharray: str | None = None
    line_style: LineStyle | None = None
    no_curves: bool = False
    offset: float = 0.0
    round_corner: float = 0.0
    start_marker: bool = False
    end_marker: bool = True
    end_shape: EndShape = field(default_factory=EndShape)


@dataclass
class Diagram:
    """Complete connector diagram definition."""

    title: str = ""
    unique_id: str = "archer"
    layout: str = "auto"  # "auto" or "manual"
    elements: dict[str, Element] = field(default_factory=dict)
    relations: list[Relation] = field(default_factory=list)
    defaults: ConnectorDefaults = field(default_factory=ConnectorDefaults)
    # Element IDs that had explicit %%archer box: directives
    _explicit_boxes: set[str] = field(default_factory=set)

    def add_element(self, element: Element) -> None:
        self.elements[element.id] = element

    def add_relation(self, relation: Relation) -> None:
        self.relations.append(relation)

    def find_relation(self, source_id: str, target_id: str) -> Relation | None:
        """Return the first relation from *source_id* to *target_id*."""
        for relation in self.relations:
            if (
                relation.source.element_id == source_id
                and relation.target.element_id == target_id
            ):
                return relation
        return None

    def element_relations(self, element_id: str) -> list[Relation]:
        """Return relations that start or end at an element."""
        return [
            r
            for r in self.relations
            if r.source.element_id == element_id or r.target.element_id == element_id
        ]

    def has_explicit_box(self, element_id: str) -> bool:
        return element_id in self._explicit_boxes

    def mark_explicit_box(self, element_id: str) -> None:
        self._explicit_boxes.add(element_id)
