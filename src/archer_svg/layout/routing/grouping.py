"""Batch classification of rounded right-angle connectors.

When several angle connectors fan in or out side by side, their rounded
corners must all bend the same way or the arcs cross each other.  The
batch is classified once from the spread of its start and end Y values
and every member is routed with that shared classification.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from archer_svg.parser.model import LineGroupType, Point


def classify_line_group(
    endpoints: Iterable[tuple[Point, Point]] | Mapping[str, tuple[Point, Point]],
) -> LineGroupType:
    """Classify a batch from its adjusted (start, end) endpoint pairs.

    Endpoints must be taken after the marker adjustment and before any
    offset.  Rules are checked in order and the first match wins, so a
    batch whose start and end Y ranges coincide is a RISE.
    """
    if isinstance(endpoints, Mapping):
        endpoints = endpoints.values()

    start_ys: list[float] = []
    end_ys: list[float] = []
    for start, end in endpoints:
        start_ys.append(start.y)
        end_ys.append(end.y)

    if not start_ys:
        return LineGroupType.NONE

    start_max, start_min = max(start_ys), min(start_ys)
    end_max, end_min = max(end_ys), min(end_ys)

    if start_max >= end_max and start_min >= end_min:
        return LineGroupType.RISE
    if start_max <= end_max and start_min <= end_min:
        return LineGroupType.DROP
    if start_max > end_max and start_min < end_min:
        return LineGroupType.SHRINK
    if start_max < end_max and start_min > end_min:
        return LineGroupType.EXPAND
    return LineGroupType.NONE
