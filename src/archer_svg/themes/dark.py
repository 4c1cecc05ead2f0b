"""Dark grey theme."""

from archer_svg.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    element_fill="rgba(255, 255, 255, 0.06)",
    element_stroke="rgba(255, 255, 255, 0.4)",
    element_stroke_width=1.0,
    element_corner_radius=8.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=22.0,
    connector_color="#f5c542",
    connector_label_color="#aaaaaa",
    connector_label_font_size=11.0,
)
