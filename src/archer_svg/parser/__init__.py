"""Diagram text parser and data model."""

from archer_svg.parser.archer import parse_archer
from archer_svg.parser.model import Diagram

__all__ = ["Diagram", "parse_archer"]
