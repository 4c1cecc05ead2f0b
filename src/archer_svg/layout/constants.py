"""Layout and routing constants.

Centralizes magic numbers from engine.py, anchors.py and the routing
subpackage.
"""

# ---------------------------------------------------------------------------
# Font / text metrics
# ---------------------------------------------------------------------------
CHAR_WIDTH: float = 7.0
"""Approximate pixel width of a single character at default font size."""

LABEL_PAD: float = 12.0
"""Horizontal padding added to label width when sizing auto-placed boxes."""

# ---------------------------------------------------------------------------
# Auto layout (used as function parameter defaults)
# ---------------------------------------------------------------------------
X_SPACING: float = 80.0
"""Horizontal gap between layer columns."""

Y_SPACING: float = 40.0
"""Vertical gap between elements in the same column."""

X_OFFSET: float = 20.0
"""Left padding from the container origin to the first column."""

Y_OFFSET: float = 20.0
"""Top padding from the container origin to the first row."""

MIN_BOX_WIDTH: float = 80.0
"""Minimum width of an auto-placed element box."""

BOX_HEIGHT: float = 40.0
"""Height of an auto-placed element box."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
ARC_RADIUS: float = 5.0
"""Radius written into the arc commands of rounded angle routes."""
