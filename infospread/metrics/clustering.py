"""
infospread/metrics/clustering.py — Local clustering coefficient.

For a vertex n with degree k >= 2 and T triangles through n (unordered
neighbor pairs that are themselves adjacent):

    C(n) = 2T / (k (k - 1))

Vertices with degree <= 1 score 0. Edge weights play no part: clustering is
a property of the tau-filtered topology only, computed with NetworkX's
unweighted nx.clustering().
"""

import networkx as nx

from infospread.graph.store import WeightedGraph


def clustering_coefficient(graph: WeightedGraph, n: int) -> float:
    """Clustering coefficient of n in [0, 1], or -1 if n is not in 1..N."""
    if n <= 0 or n >= graph.node_count():
        return -1.0
    return float(nx.clustering(graph.as_networkx(), n))


def all_clustering_coefficients(graph: WeightedGraph) -> dict[int, float]:
    """
    Clustering coefficient of every real vertex.

    Returns:
        coefficients: Dict mapping vertex id (1..N) → coefficient in [0, 1].
    """
    if graph.node_count() <= 1:
        return {}
    coefficients = nx.clustering(graph.as_networkx())
    return {n: float(coefficients[n]) for n in graph.vertices()}
