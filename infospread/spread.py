"""
infospread/spread.py — InformationSpread: the analytics facade.

Holds one tau-filtered graph and answers every query against it. The graph
is populated by load_graph_from_dataset() and treated as immutable
afterwards; removal queries work on private copies built by
infospread.graph.subgraph.isolate_nodes().

Errors are reported by sentinel values, never by raising:
    -1          invalid vertex id / threshold, or coverage target unreachable
    [] / set()  no path / no matching vertices

Removal queries (generations_degree, generations_cc,
generations_high_deg_low_cc) share one contract:
    1. seed must lie in 1..N and threshold in (0, 1], else -1
    2. select the removal set on the graph as loaded
    3. empty set: -1
    4. seed in the set (the seed is already eliminated): 0
    5. otherwise run the cascade on the isolated copy
Note that plain generations() accepts threshold == 0 (answer 0) while the
removal variants reject it.
"""

import logging
from collections.abc import Callable

import numpy as np

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.graph.loader import load_edge_list
from infospread.graph.store import WeightedGraph
from infospread.graph.subgraph import isolate_nodes
from infospread.metrics.clustering import clustering_coefficient
from infospread.metrics.degree import avg_degree, degree, degree_distribution
from infospread.metrics.predicates import (
    clustering_nodes,
    degree_nodes,
    high_degree_low_clustering_nodes,
)
from infospread.metrics.reproduction import r_number, r_number_after_isolation
from infospread.propagation.generations import generations_to_coverage
from infospread.propagation.path import most_likely_path, path_probability

logger = logging.getLogger(__name__)


class InformationSpread:
    """
    Information-spread analytics over one weighted undirected graph.

    Usage:
        spread = InformationSpread()
        spread.load_graph_from_dataset("graph.mtx", tau=0.55)
        spread.path(1, 3)
        spread.generations_degree(seed=1, threshold=0.1, d=1)
    """

    def __init__(self, config: SpreadConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.tau = 0.0
        self.graph = WeightedGraph()

    # ── Loading ───────────────────────────────────────────────────────────────

    def load_graph_from_dataset(self, file_path: str, tau: float) -> int:
        """
        Load an edge list, keeping edges with probability above tau.

        A missing file is logged and leaves an empty graph behind (no stale
        graph from an earlier load survives).

        Returns:
            Number of distinct vertices on at least one accepted edge.

        Raises:
            ValueError: tau outside [0, 1] or malformed file contents.
        """
        result = load_edge_list(file_path, tau, self.config)
        self.tau = tau
        self.graph = result.graph
        return len(result.connected_nodes)

    # ── Neighborhood and paths ────────────────────────────────────────────────

    def get_neighbors(self, node: int) -> list[int]:
        """Neighbors of node in ascending id order."""
        return self.graph.neighbors(node)

    def path(self, source: int, destination: int) -> list[int]:
        """Most-likely propagation path; [] if destination is unreachable."""
        return most_likely_path(self.graph, source, destination, self.config)

    def path_probability(self, path: list[int]) -> float:
        """Probability that information follows `path` end to end."""
        return path_probability(self.graph, path, self.config)

    # ── Degree and R ──────────────────────────────────────────────────────────

    def degree(self, node: int) -> int:
        return degree(self.graph, node)

    def avg_degree(self) -> float:
        return avg_degree(self.graph)

    def degree_distribution(self) -> np.ndarray:
        """counts[k] = number of real vertices with degree k."""
        return degree_distribution(self.graph)

    def r_number(self) -> float:
        return r_number(self.graph, self.tau, self.config)

    def degree_nodes(self, d: int) -> set[int]:
        return degree_nodes(self.graph, d)

    def r_number_degree(self, d: int) -> float:
        """R after isolating every vertex of degree d."""
        return r_number_after_isolation(
            self.graph, self.tau, self.degree_nodes(d), self.config
        )

    # ── Clustering ────────────────────────────────────────────────────────────

    def clust_coeff(self, node: int) -> float:
        return clustering_coefficient(self.graph, node)

    def clust_coeff_nodes(self, low: float, high: float) -> set[int]:
        return clustering_nodes(self.graph, low, high, self.config)

    def r_number_cc(self, low: float, high: float) -> float:
        """R after isolating every vertex with clustering in [low, high]."""
        return r_number_after_isolation(
            self.graph, self.tau, self.clust_coeff_nodes(low, high), self.config
        )

    def high_deg_low_cc_nodes(self, deg_low: int, cc_high: float) -> set[int]:
        return high_degree_low_clustering_nodes(
            self.graph, deg_low, cc_high, self.config
        )

    def r_number_deg_cc(self, deg_low: int, cc_high: float) -> float:
        """R after isolating hub vertices (degree >= deg_low, clustering <= cc_high)."""
        return r_number_after_isolation(
            self.graph,
            self.tau,
            self.high_deg_low_cc_nodes(deg_low, cc_high),
            self.config,
        )

    # ── Cascades ──────────────────────────────────────────────────────────────

    def generations(self, seed: int, threshold: float) -> int:
        """
        BFS generations from seed needed to reach threshold of all vertices.

        Returns 0 for threshold == 0, -1 for an invalid seed or threshold
        outside [0, 1], and -1 if the cascade dies out short of the target.
        """
        if not self._is_vertex(seed) or not 0.0 <= threshold <= 1.0:
            return -1
        if threshold == 0:
            return 0
        return generations_to_coverage(self.graph, seed, threshold)

    def generations_degree(self, seed: int, threshold: float, d: int) -> int:
        """Generations after isolating every vertex of degree d."""
        return self._generations_after_removal(
            seed, threshold, lambda: self.degree_nodes(d)
        )

    def generations_cc(
        self, seed: int, threshold: float, low: float, high: float
    ) -> int:
        """Generations after isolating every vertex with clustering in [low, high]."""
        return self._generations_after_removal(
            seed, threshold, lambda: self.clust_coeff_nodes(low, high)
        )

    def generations_high_deg_low_cc(
        self, seed: int, threshold: float, deg_low: int, cc_high: float
    ) -> int:
        """Generations after isolating hub vertices."""
        return self._generations_after_removal(
            seed, threshold, lambda: self.high_deg_low_cc_nodes(deg_low, cc_high)
        )

    # ── Internals ─────────────────────────────────────────────────────────────

    def _is_vertex(self, node: int) -> bool:
        return 1 <= node < self.graph.node_count()

    def _generations_after_removal(
        self,
        seed: int,
        threshold: float,
        select: Callable[[], set[int]],
    ) -> int:
        if not self._is_vertex(seed) or not 0.0 < threshold <= 1.0:
            return -1

        removed = select()
        if not removed:
            return -1
        if seed in removed:
            return 0

        isolated = isolate_nodes(self.graph, removed)
        return generations_to_coverage(isolated, seed, threshold)
