"""
infospread/metrics/degree.py — Degree, average degree and degree distribution.

Average degree divides the arc count by the number of real vertices N
(capacity - 1), not by the number of connected vertices: isolated vertices
count with degree 0. Because every undirected edge is stored as two arcs,
arcs / N is the usual undirected average degree 2E / N, and a self-loop
adds 2 to the degree of its vertex.
"""

import logging

import numpy as np

from infospread.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def degree(graph: WeightedGraph, n: int) -> int:
    """Arcs leaving n (a self-loop counts twice), or -1 if n is not in 1..N."""
    if n <= 0 or n >= graph.node_count():
        return -1
    return graph.degree(n)


def avg_degree(graph: WeightedGraph) -> float:
    """
    Average degree over all N real vertices.

    Returns 0.0 for a graph with no real vertices.
    """
    vertex_count = graph.node_count() - 1
    if vertex_count <= 0:
        return 0.0
    return graph.edge_count() / vertex_count


def degree_distribution(graph: WeightedGraph) -> np.ndarray:
    """
    Histogram of vertex degrees.

    Returns:
        counts: 1-D int array where counts[k] is the number of real vertices
                with degree k. Length is max degree + 1; empty for a graph
                with no real vertices.
    """
    degrees = np.fromiter(
        (graph.degree(n) for n in graph.vertices()),
        dtype=np.int64,
    )
    if degrees.size == 0:
        return np.zeros(0, dtype=np.int64)

    counts = np.bincount(degrees)
    logger.debug(
        "Degree distribution: %d vertices, max degree %d.",
        degrees.size,
        counts.size - 1,
    )
    return counts
