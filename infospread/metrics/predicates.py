"""
infospread/metrics/predicates.py — Structural node sets.

Each predicate selects vertices from 1..N by a structural criterion. The
selected set is what the removal queries isolate before recomputing
generations or R:

    degree_nodes                       degree == d
    clustering_nodes                   C(n) in [low - eps, high + eps]
    high_degree_low_clustering_nodes   degree >= d  and  C(n) in [-eps, high + eps]

eps is config.clustering_tolerance (0.01 by default); the widened endpoints
keep exact values such as 1.0 or 0.5 inside the range despite float noise.
Vertices with degree <= 1 have C(n) = 0 and are selected whenever 0 lies in
the widened range.
"""

import logging

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.graph.store import WeightedGraph
from infospread.metrics.clustering import all_clustering_coefficients

logger = logging.getLogger(__name__)


def within_tolerance(
    value: float,
    low: float,
    high: float,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> bool:
    """True iff value lies in [low - eps, high + eps]."""
    eps = config.clustering_tolerance
    return low - eps <= value <= high + eps


def degree_nodes(graph: WeightedGraph, d: int) -> set[int]:
    """Vertices whose degree is exactly d."""
    nodes = {n for n in graph.vertices() if graph.degree(n) == d}
    logger.debug("degree_nodes(%d): %d vertices selected.", d, len(nodes))
    return nodes


def clustering_nodes(
    graph: WeightedGraph,
    low: float,
    high: float,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> set[int]:
    """Vertices whose clustering coefficient lies in the widened [low, high]."""
    coefficients = all_clustering_coefficients(graph)
    nodes = {
        n for n, coeff in coefficients.items()
        if within_tolerance(coeff, low, high, config)
    }
    logger.debug(
        "clustering_nodes(%.3f, %.3f): %d vertices selected.", low, high, len(nodes)
    )
    return nodes


def high_degree_low_clustering_nodes(
    graph: WeightedGraph,
    min_degree: int,
    max_clustering: float,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> set[int]:
    """
    Hub-like vertices: degree >= min_degree and clustering <= max_clustering.

    These are the vertices that bridge otherwise separate neighborhoods;
    isolating them is the most disruptive removal for a cascade.
    """
    coefficients = all_clustering_coefficients(graph)
    nodes = {
        n for n, coeff in coefficients.items()
        if graph.degree(n) >= min_degree
        and within_tolerance(coeff, 0.0, max_clustering, config)
    }
    logger.debug(
        "high_degree_low_clustering_nodes(%d, %.3f): %d vertices selected.",
        min_degree,
        max_clustering,
        len(nodes),
    )
    return nodes
