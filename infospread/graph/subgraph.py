"""
infospread/graph/subgraph.py — Node isolation operator.

Every "remove nodes matching P, then recompute" query goes through here.
Removed nodes are not deleted from the vertex range: they stay present but
isolated, so capacity-based denominators (N - 1) are unchanged and their
zero degrees pull averages down.
"""

import logging
from collections.abc import Iterable

from infospread.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def isolate_nodes(graph: WeightedGraph, nodes: Iterable[int]) -> WeightedGraph:
    """
    Return a copy of `graph` with every edge incident to `nodes` severed.

    Algorithm:
        1. Deep-copy the graph (same capacity, every arc re-inserted).
        2. For each node n, walk a snapshot of n's neighbor list and remove
           the edge in both directions.

    Args:
        graph: Source graph. Never mutated.
        nodes: Vertex ids to isolate. Ids with no edges are no-ops.

    Returns:
        isolated: New WeightedGraph in which every node of `nodes` has degree 0.
    """
    isolated = graph.copy()
    removed_arcs = 0

    for n in nodes:
        for neighbor in list(isolated.neighbors(n)):
            isolated.remove_edge(n, neighbor)
            isolated.remove_edge(neighbor, n)
            removed_arcs += 2

    logger.debug(
        "Isolated nodes: %d arcs severed, %d arcs remain.",
        removed_arcs,
        isolated.edge_count(),
    )
    return isolated
