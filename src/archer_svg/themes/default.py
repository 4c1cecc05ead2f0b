"""Default light theme."""

from archer_svg.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="none",
    element_fill="#ffffff",
    element_stroke="#333333",
    element_stroke_width=1.5,
    element_corner_radius=6.0,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#111111",
    title_font_size=20.0,
    connector_color="#ff0000",
    connector_label_color="#555555",
    connector_label_font_size=11.0,
)
