"""
infospread/propagation/path.py — Most-likely propagation path.

The probability that information travels along a path is the product of
its edge probabilities. Maximising a product of probabilities in (0, 1] is
the same as minimising the sum of their negative logs, so the most-likely
path is the shortest path under

    cost(u, v) = -ln(w(u, v) / weight_scale)

Every cost is >= 0 because w <= weight_scale, which makes Dijkstra exact.
A zero-probability arc (possible only when tau = 0) has infinite cost and
is never relaxed.

Dijkstra uses a binary heap with lazy deletion: a vertex may sit in the
heap several times and stale entries are skipped on pop. Heap entries are
(distance, vertex) tuples, so equal distances pop in ascending id order.
"""

import heapq
import logging
import math

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def edge_cost(weight: int, config: SpreadConfig = DEFAULT_CONFIG) -> float:
    """Negative log-probability of an arc with integer weight `weight`."""
    if weight <= 0:
        return math.inf
    return -math.log(weight / config.weight_scale)


def most_likely_path(
    graph: WeightedGraph,
    source: int,
    destination: int,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> list[int]:
    """
    Maximum-likelihood path from source to destination.

    Args:
        graph:       tau-filtered graph.
        source:      Start vertex.
        destination: End vertex.
        config:      SpreadConfig. Uses weight_scale.

    Returns:
        path: [source, ..., destination], [source] if source == destination,
              or [] if destination is unreachable. Ids outside the graph
              yield [] (or [source] when both ends are the same id).
    """
    if source == destination:
        return [source]

    distance: dict[int, float] = {source: 0.0}
    predecessor: dict[int, int] = {}
    settled: set[int] = set()
    heap = [(0.0, source)]

    while heap:
        dist_u, u = heapq.heappop(heap)
        if u == destination:
            break
        if u in settled:
            continue
        settled.add(u)

        for v in graph.neighbors(u):
            if v in settled:
                continue
            candidate = dist_u + edge_cost(graph.weight(u, v), config)
            if candidate < distance.get(v, math.inf):
                distance[v] = candidate
                predecessor[v] = u
                heapq.heappush(heap, (candidate, v))

    path = _walk_predecessors(predecessor, source, destination)
    if path:
        logger.debug(
            "Most-likely path %d → %d: %d hops, probability %.6f.",
            source,
            destination,
            len(path) - 1,
            math.exp(-distance[destination]),
        )
    return path


def path_probability(
    graph: WeightedGraph,
    path: list[int],
    config: SpreadConfig = DEFAULT_CONFIG,
) -> float:
    """
    Product of edge probabilities along `path`.

    1.0 for a single-vertex path, 0.0 for an empty path or one that uses a
    missing edge.
    """
    if not path:
        return 0.0

    probability = 1.0
    for u, v in zip(path, path[1:]):
        if not graph.has_edge(u, v):
            return 0.0
        probability *= graph.weight(u, v) / config.weight_scale
    return probability


def _walk_predecessors(
    predecessor: dict[int, int],
    source: int,
    destination: int,
) -> list[int]:
    """Rebuild source → destination from predecessor links; [] if unlinked."""
    path = [destination]
    at = destination
    while at in predecessor:
        at = predecessor[at]
        path.append(at)

    if path[-1] != source:
        return []
    path.reverse()
    return path
