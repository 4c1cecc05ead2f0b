"""Parser for connector diagrams written as Mermaid-style text.

Uses a simple line-by-line approach rather than a full grammar parser.
Diagram settings come from ``%%archer`` directives; elements and
relations use a small subset of Mermaid ``graph`` syntax extended with
``:side`` anchor suffixes::

    %%archer title: Fan-out
    %%archer line_style: angle
    %%archer round_corner: 5
    %%archer box: root | 20, 100, 80, 40
    graph LR
        root[Root]
        root:right -->|first| a:left
        root:right --- b:left
"""

from __future__ import annotations

import copy
import re
from dataclasses import fields

from archer_svg.parser.model import (
    Anchor,
    AnchorSide,
    ArrowShape,
    CircleShape,
    Diagram,
    Element,
    EndShape,
    LineStyle,
    Relation,
    RelationStyle,
)

_SIDE_MAP = {
    "top": AnchorSide.TOP,
    "bottom": AnchorSide.BOTTOM,
    "left": AnchorSide.LEFT,
    "right": AnchorSide.RIGHT,
    "none": AnchorSide.NONE,
    "middle": AnchorSide.NONE,
}

_LINE_STYLE_MAP = {style.value: style for style in LineStyle}

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def parse_archer(text: str) -> Diagram:
    """Parse a diagram definition with %%archer directives.

    Raises ValueError on malformed directive values or anchor sides.
    """
    diagram = Diagram()
    pending_styles: list[tuple[int, str, str, RelationStyle, dict[str, float]]] = []

    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%archer"):
            try:
                _parse_directive(stripped, diagram, pending_styles, lineno)
            except ValueError as e:
                raise ValueError(f"line {lineno}: {e}") from e
            continue

        # Skip regular comments and graph declaration
        if stripped.startswith("%%") or stripped.startswith("graph "):
            continue

        try:
            if "-->" in stripped or "---" in stripped:
                _parse_relation(stripped, diagram)
            else:
                _parse_element(stripped, diagram)
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e

    # Post-parse: per-relation styles may precede the relations they name
    for lineno, source, target, style, shape_overrides in pending_styles:
        matched = [
            r
            for r in diagram.relations
            if r.source.element_id == source and r.target.element_id == target
        ]
        if not matched:
            raise ValueError(
                f"line {lineno}: style refers to unknown relation {source} -> {target}"
            )
        for relation in matched:
            _merge_style(relation.style, style)
            if shape_overrides:
                base = relation.style.end_shape or diagram.defaults.end_shape
                relation.style.end_shape = _override_shape(base, shape_overrides)

    return diagram


def _merge_style(target: RelationStyle, overrides: RelationStyle) -> None:
    """Copy every field set in *overrides* onto *target*."""
    for f in fields(overrides):
        value = getattr(overrides, f.name)
        if value is not None:
            setattr(target, f.name, value)


def _parse_directive(
    line: str,
    diagram: Diagram,
    pending_styles: list[tuple[int, str, str, RelationStyle, dict[str, float]]],
    lineno: int,
) -> None:
    """Parse a %%archer directive line."""
    content = line[len("%%archer") :].strip()
    key, sep, value = content.partition(":")
    if not sep:
        raise ValueError(f"malformed directive {line!r}")
    key = key.strip().lower()
    value = value.strip()
    defaults = diagram.defaults

    if key == "title":
        diagram.title = value
    elif key == "id":
        diagram.unique_id = value
    elif key == "layout":
        mode = value.lower()
        if mode not in ("auto", "manual"):
            raise ValueError(f"unknown layout mode {value!r}")
        diagram.layout = mode
    elif key == "line_style":
        defaults.line_style = parse_line_style(value)
    elif key == "no_curves":
        defaults.no_curves = parse_bool(value)
    elif key == "round_corner":
        defaults.round_corner = _parse_float(value, "round_corner")
    elif key == "offset":
        defaults.offset = _parse_float(value, "offset")
    elif key == "stroke":
        parts = [p.strip() for p in value.split("|")]
        defaults.stroke_color = parts[0] or None
        if len(parts) >= 2 and parts[1]:
            defaults.stroke_width = _parse_float(parts[1], "stroke width")
        if len(parts) >= 3 and parts[2]:
            defaults.stroke_dasharray = parts[2]
    elif key == "start_marker":
        defaults.start_marker = parse_bool(value)
    elif key == "end_marker":
        defaults.end_marker = parse_bool(value)
    elif key == "end_shape":
        defaults.end_shape = _parse_end_shape(value)
    elif key == "box":
        _parse_box_directive(value, diagram)
    elif key == "style":
        source, target, style, shape_overrides = _parse_style_directive(value)
        pending_styles.append((lineno, source, target, style, shape_overrides))
    else:
        raise ValueError(f"unknown directive {key!r}")


def _parse_float(value: str, what: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{what} must be a number, got {value!r}") from None


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected true/false, got {value!r}")


def parse_line_style(value: str) -> LineStyle:
    style = _LINE_STYLE_MAP.get(value.strip().lower())
    if style is None:
        choices = ", ".join(_LINE_STYLE_MAP)
        raise ValueError(f"unknown line style {value!r} (expected one of {choices})")
    return style


def parse_side(value: str | None) -> AnchorSide:
    if value is None:
        return AnchorSide.NONE
    side = _SIDE_MAP.get(value.lower())
    if side is None:
        raise ValueError(f"unknown anchor side {value!r}")
    return side


def _parse_end_shape(value: str) -> EndShape:
    """Parse ``arrow | length | thickness`` or ``circle | radius | fill | stroke | width``."""
    parts = [p.strip() for p in value.split("|")]
    kind = parts[0].lower()
    if kind == "arrow":
        arrow = ArrowShape()
        if len(parts) >= 2 and parts[1]:
            arrow.arrow_length = _parse_float(parts[1], "arrow length")
        if len(parts) >= 3 and parts[2]:
            arrow.arrow_thickness = _parse_float(parts[2], "arrow thickness")
        return EndShape(arrow=arrow)
    if kind == "circle":
        circle = CircleShape()
        if len(parts) >= 2 and parts[1]:
            circle.radius = _parse_float(parts[1], "circle radius")
        if len(parts) >= 3 and parts[2]:
            circle.fill_color = parts[2]
        if len(parts) >= 4 and parts[3]:
            circle.stroke_color = parts[3]
        if len(parts) >= 5 and parts[4]:
            circle.stroke_width = _parse_float(parts[4], "circle stroke width")
        return EndShape(arrow=None, circle=circle)
    raise ValueError(f"unknown end shape {parts[0]!r} (expected arrow or circle)")


def _parse_box_directive(value: str, diagram: Diagram) -> None:
    """Parse %%archer box: element_id | x, y, width, height directive."""
    parts = value.split("|")
    if len(parts) < 2:
        raise ValueError("box needs 'element | x, y, width, height'")
    element_id = parts[0].strip()
    coords = [c.strip() for c in parts[1].split(",")]
    if len(coords) != 4:
        raise ValueError(f"box for {element_id!r} needs 4 numbers")
    x, y, w, h = (_parse_float(c, "box coordinate") for c in coords)

    element = diagram.elements.get(element_id)
    if element is None:
        element = Element(id=element_id, label=element_id)
        diagram.add_element(element)
    element.x, element.y, element.width, element.height = x, y, w, h
    diagram.mark_explicit_box(element_id)


def _parse_style_directive(
    value: str,
) -> tuple[str, str, RelationStyle, dict[str, float]]:
    """Parse %%archer style: source -> target | key=value, ... directive."""
    parts = value.split("|", 1)
    if len(parts) < 2:
        raise ValueError("style needs 'source -> target | key=value, ...'")
    ends = [p.strip() for p in parts[0].split("->")]
    if len(ends) != 2 or not all(ends):
        raise ValueError(f"style needs 'source -> target', got {parts[0].strip()!r}")

    style = RelationStyle()
    shape_overrides: dict[str, float] = {}
    for item in parts[1].split(","):
        if not item.strip():
            continue
        key, sep, val = item.partition("=")
        if not sep:
            raise ValueError(f"style entry {item.strip()!r} is not key=value")
        key = key.strip().lower()
        val = val.strip()
        if key == "stroke_color":
            style.stroke_color = val
        elif key == "stroke_width":
            style.stroke_width = _parse_float(val, "stroke_width")
        elif key == "stroke_dasharray":
            style.stroke_dasharray = val
        elif key == "line_style":
            style.line_style = parse_line_style(val)
        elif key == "no_curves":
            style.no_curves = parse_bool(val)
        elif key == "start_marker":
            style.start_marker = parse_bool(val)
        elif key == "end_marker":
            style.end_marker = parse_bool(val)
        elif key in ("arrow_length", "arrow_thickness", "circle_radius"):
            # Applied over the diagram's end shape once parsing is done
            shape_overrides[key] = _parse_float(val, key)
        else:
            raise ValueError(f"unknown style key {key!r}")
    return ends[0], ends[1], style, shape_overrides


def _override_shape(base: EndShape, overrides: dict[str, float]) -> EndShape:
    """Return a copy of *base* with per-relation marker sizes applied.

    Arrow keys turn a circle end shape into an arrow; ``circle_radius``
    turns an arrow into a circle.
    """
    shape = copy.deepcopy(base)
    if "arrow_length" in overrides or "arrow_thickness" in overrides:
        shape.circle = None
        shape.arrow = shape.arrow or ArrowShape()
        if "arrow_length" in overrides:
            shape.arrow.arrow_length = overrides["arrow_length"]
        if "arrow_thickness" in overrides:
            shape.arrow.arrow_thickness = overrides["arrow_thickness"]
    if "circle_radius" in overrides:
        shape.circle = shape.circle or CircleShape()
        shape.circle.radius = overrides["circle_radius"]
    return shape


# Regex patterns for element shapes
_ELEMENT_PATTERNS = [
    # square bracket: element_id[label]
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\[(.+?)\]$"),
    # round bracket: element_id(label)
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\((.+?)\)$"),
    # bare id
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)$"),
]

# Relation pattern: source[:side] -->|label| target[:side]
_RELATION_PATTERN = re.compile(
    r"^([a-zA-Z_][a-zA-Z0-9_]*)(?::([a-zA-Z]+))?\s*"  # source and side
    r"(<-->|-->|---)"  # arrow
    r"(?:\|([^|]*)\|)?\s*"  # optional |label|
    r"([a-zA-Z_][a-zA-Z0-9_]*)(?::([a-zA-Z]+))?$"  # target and side
)


def _parse_element(line: str, diagram: Diagram) -> None:
    """Parse an element definition line."""
    for pattern in _ELEMENT_PATTERNS:
        m = pattern.match(line)
        if m:
            element_id = m.group(1)
            label = m.group(2).strip() if m.lastindex >= 2 else None
            if element_id not in diagram.elements:
                diagram.add_element(Element(id=element_id, label=label or element_id))
            elif label is not None:
                # Update label if the element was auto-created
                diagram.elements[element_id].label = label
            return
    raise ValueError(f"cannot parse {line!r}")


def _parse_relation(line: str, diagram: Diagram) -> None:
    """Parse a relation line.

    ``-->`` draws an end marker, ``---`` draws none and ``<-->`` draws
    markers at both ends.
    """
    m = _RELATION_PATTERN.match(line)
    if not m:
        raise ValueError(f"cannot parse relation {line!r}")

    source, source_side, arrow, label, target, target_side = m.groups()

    # Ensure elements exist
    for element_id in (source, target):
        if element_id not in diagram.elements:
            diagram.add_element(Element(id=element_id, label=element_id))

    style = RelationStyle()
    if arrow == "---":
        style.end_marker = False
    elif arrow == "<-->":
        style.start_marker = True

    diagram.add_relation(
        Relation(
            source=Anchor(source, parse_side(source_side)),
            target=Anchor(target, parse_side(target_side)),
            label=label.strip() if label else "",
            style=style,
        )
    )
