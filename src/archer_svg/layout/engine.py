"""Layout coordinator: gives unmeasured elements a box.

Elements with an explicit box keep it.  In ``auto`` mode the rest are
stacked in one column per layer, sized from their label.  In ``manual``
mode they stay unmeasured and their connectors are skipped at render
time.
"""

from __future__ import annotations

from collections import defaultdict

from archer_svg.layout.constants import (
    BOX_HEIGHT,
    CHAR_WIDTH,
    LABEL_PAD,
    MIN_BOX_WIDTH,
    X_OFFSET,
    X_SPACING,
    Y_OFFSET,
    Y_SPACING,
)
from archer_svg.layout.layers import assign_layers
from archer_svg.parser.model import Diagram, Element


def box_width(element: Element) -> float:
    """Width of an auto-placed box for an element's label."""
    return max(MIN_BOX_WIDTH, len(element.label) * CHAR_WIDTH + 2 * LABEL_PAD)


def compute_layout(
    diagram: Diagram,
    x_spacing: float = X_SPACING,
    y_spacing: float = Y_SPACING,
    x_offset: float = X_OFFSET,
    y_offset: float = Y_OFFSET,
) -> None:
    """Compute boxes for all unmeasured elements of the diagram."""
    if diagram.layout != "auto":
        return

    pending = [e for e in diagram.elements.values() if not e.is_measured]
    if not pending:
        return

    layers = assign_layers(diagram)
    for element in diagram.elements.values():
        element.layer = layers.get(element.id, 0)

    columns: dict[int, list[Element]] = defaultdict(list)
    for element in pending:
        columns[element.layer].append(element)

    # Each column is as wide as its widest box
    col_widths = {
        layer: max(box_width(e) for e in members) for layer, members in columns.items()
    }
    col_x: dict[int, float] = {}
    x = x_offset
    for layer in range(max(columns) + 1):
        col_x[layer] = x
        x += col_widths.get(layer, 0.0) + x_spacing

    # Start each column below any explicit box that shares its X range
    for layer, members in sorted(columns.items()):
        y = y_offset
        left = col_x[layer]
        right = left + col_widths[layer]
        for other in diagram.elements.values():
            if other.is_measured and other.x < right and other.x + other.width > left:
                y = max(y, other.y + other.height + y_spacing)
        for element in members:
            w = box_width(element)
            element.x = left + (col_widths[layer] - w) / 2
            element.y = y
            element.width = w
            element.height = BOX_HEIGHT
            y += BOX_HEIGHT + y_spacing
