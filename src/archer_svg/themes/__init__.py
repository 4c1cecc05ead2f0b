"""Theme definitions for connector diagrams."""

from archer_svg.themes.dark import DARK_THEME
from archer_svg.themes.default import DEFAULT_THEME

THEMES = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DEFAULT_THEME", "DARK_THEME"]
