"""
infospread/metrics/reproduction.py — Coarse reproduction number R.

    R = tau * <k> * d

tau is the load threshold as a probability, <k> the average degree over all
N real vertices and d the mean infectious duration (config, 1.0 by default).

The removal variant isolates a node set on a copy of the graph and keeps the
full N in the average-degree denominator. Removed vertices count as present
with degree 0, so every removal directly lowers R.
"""

import logging
from collections.abc import Collection

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.graph.store import WeightedGraph
from infospread.graph.subgraph import isolate_nodes
from infospread.metrics.degree import avg_degree

logger = logging.getLogger(__name__)


def r_number(
    graph: WeightedGraph,
    tau: float,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> float:
    """R for the graph as loaded."""
    return tau * avg_degree(graph) * config.infectious_duration


def r_number_after_isolation(
    graph: WeightedGraph,
    tau: float,
    nodes: Collection[int],
    config: SpreadConfig = DEFAULT_CONFIG,
) -> float:
    """
    R after cutting every edge incident to `nodes`.

    Args:
        graph:  Graph as loaded. Never mutated.
        tau:    Load threshold as a probability in [0, 1].
        nodes:  Vertices to isolate.
        config: SpreadConfig. Uses infectious_duration.

    Returns:
        R of the isolated copy. If `nodes` is empty this is exactly
        r_number(graph, tau, config): no copy is made.
    """
    if not nodes:
        return r_number(graph, tau, config)

    isolated = isolate_nodes(graph, nodes)
    r = tau * avg_degree(isolated) * config.infectious_duration
    logger.debug(
        "R after isolating %d vertices: %.4f (was %.4f).",
        len(nodes),
        r,
        r_number(graph, tau, config),
    )
    return r
