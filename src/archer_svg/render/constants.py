"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the entire SVG canvas."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the content when the diagram has a title."""

TITLE_BASELINE: float = 28.0
"""Y position of the title baseline."""

EMPTY_SVG: str = '<svg xmlns="http://www.w3.org/2000/svg"></svg>'
"""Output for a diagram with no elements."""

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
MARKER_ORIENT: str = "auto-start-reverse"
"""Marker orientation; flips the shared marker at path starts."""

MARKER_UNITS: str = "strokeWidth"
"""Markers scale with the connector's stroke width."""
