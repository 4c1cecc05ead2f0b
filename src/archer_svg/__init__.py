"""archer-svg: route and render arrows between rectangular elements."""

__version__ = "0.1.0"
