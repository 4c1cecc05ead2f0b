"""Layer assignment for auto-placed elements (column positioning).

Uses longest-path layering on a topological sort so every relation
points from a lower layer to a higher one.
"""

from __future__ import annotations

__all__ = ["assign_layers"]

import networkx as nx

from archer_svg.parser.model import Diagram


def assign_layers(diagram: Diagram) -> dict[str, int]:
    """Assign each element to a layer (integer column).

    Each element's layer is 1 + the maximum layer of its predecessors.

    Returns a dict mapping element_id -> layer number (0-based).
    Raises ValueError if the relation graph has a cycle.
    """
    G = nx.DiGraph()
    for relation in diagram.relations:
        G.add_edge(relation.source.element_id, relation.target.element_id)

    # Add isolated elements
    for eid in diagram.elements:
        if eid not in G:
            G.add_node(eid)

    try:
        topo_order = list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible as e:
        cycle = " -> ".join(u for u, _v in nx.find_cycle(G))
        raise ValueError(
            f"Relations form a cycle ({cycle}); give these elements "
            f"explicit '%%archer box:' directives or use '%%archer layout: manual'"
        ) from e

    layers: dict[str, int] = {}
    for node in topo_order:
        preds = list(G.predecessors(node))
        if not preds:
            layers[node] = 0
        else:
            layers[node] = max(layers[p] for p in preds) + 1

    return layers
