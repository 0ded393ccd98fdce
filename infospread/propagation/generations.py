"""
infospread/propagation/generations.py — Generational cascade coverage.

A cascade starts at one seed vertex (generation 0). Each generation infects
every not-yet-infected neighbor of the previous generation, i.e. one BFS
layer on the tau-filtered graph. Edge weights are ignored once the filter
has been applied.

The coverage target for a threshold t over N real vertices is

    target = ceil(t * N)

and the answer is the first generation after which the cumulative number
of infected vertices reaches the target. If the cascade dies out first the
answer is -1.

Layers come from NetworkX's nx.bfs_layers(), which yields exactly the
vertices discovered in each generation.
"""

import logging
import math

import networkx as nx

from infospread.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def coverage_target(graph: WeightedGraph, threshold: float) -> int:
    """Number of vertices a cascade must reach to cover `threshold` of N."""
    return math.ceil(threshold * (graph.node_count() - 1))


def generations_to_coverage(
    graph: WeightedGraph,
    seed: int,
    threshold: float,
) -> int:
    """
    Minimum number of BFS generations from `seed` covering `threshold` of N.

    Callers validate seed and threshold; this routine assumes seed is a
    real vertex of `graph`.

    Args:
        graph:     tau-filtered graph (possibly with nodes isolated).
        seed:      Vertex where the cascade starts.
        threshold: Fraction of real vertices to reach.

    Returns:
        generations: 0 if the seed alone meets the target, the generation
                     count at which the target is met, or -1 if the cascade
                     exhausts its component first.
    """
    target = coverage_target(graph, threshold)
    infected = 0

    for generation, layer in enumerate(nx.bfs_layers(graph.as_networkx(), seed)):
        infected += len(layer)
        if infected >= target:
            logger.debug(
                "Cascade from %d reached %d/%d vertices in %d generations.",
                seed,
                infected,
                target,
                generation,
            )
            return generation

    logger.debug(
        "Cascade from %d died out at %d/%d vertices.", seed, infected, target
    )
    return -1


def coverage_curve(graph: WeightedGraph, seed: int) -> list[float]:
    """
    Cumulative fraction of the N real vertices infected after each generation.

    Entry k is the share reached once generation k has been infected, so
    entry 0 is 1/N (the seed alone). The list ends when the cascade dies out.
    """
    total = graph.node_count() - 1
    if total <= 0:
        return []
    curve = []
    infected = 0
    for layer in nx.bfs_layers(graph.as_networkx(), seed):
        infected += len(layer)
        curve.append(infected / total)
    return curve
