"""Theme and style constants for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a connector diagram."""

    name: str
    background_color: str
    element_fill: str
    element_stroke: str
    element_stroke_width: float
    element_corner_radius: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    connector_color: str
    connector_label_color: str
    connector_label_font_size: float
