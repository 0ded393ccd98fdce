"""
infospread/graph/store.py — Weighted undirected graph store.

Vertex ids are dense integers 1..N. Slot 0 is reserved and never a valid
vertex, so a graph declared with N vertices has a capacity of N + 1 slots
and node_count() reports N + 1.

Each undirected edge {u, v} carries one integer weight in [0, 100] (the
transmission probability scaled by SpreadConfig.weight_scale). The store is
backed by a NetworkX Graph, which keeps both directions of every edge in
step: an arc u→v exists iff v→u exists, with the same weight. Arc counts
therefore always equal twice the undirected edge count. A self-loop {u, u}
is one edge holding both of its arcs, so it adds 2 to the arc count and to
the degree of u, while neighbors(u) lists u once.

The store itself never raises on out-of-range vertices: neighbors() returns
an empty list and has_edge() returns False. Range guards live in the
callers.
"""

import networkx as nx


class WeightedGraph:
    """
    Dense-id weighted undirected graph.

    Query methods are read-only; only the loader and the subgraph operator
    (on a private copy) call the mutators.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._graph = nx.Graph()
        self._capacity = 0
        if capacity:
            self.init(capacity)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def init(self, capacity: int) -> None:
        """
        Reset the store to `capacity` slots (vertices 1..capacity-1), no edges.

        Calling init again discards every edge, so a loader session may call it
        once per load without leaking state from a previous one.
        """
        self._graph = nx.Graph()
        self._capacity = max(int(capacity), 0)
        self._graph.add_nodes_from(range(1, self._capacity))

    def copy(self) -> "WeightedGraph":
        """Deep copy with the same capacity and every arc re-inserted."""
        copied = WeightedGraph(self._capacity)
        for u in range(1, self._capacity):
            for v in self.neighbors(u):
                copied.add_edge(u, v, self.weight(u, v))
        return copied

    # ── Mutators ──────────────────────────────────────────────────────────────

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Insert edge {u, v} with weight w (both arcs)."""
        self._graph.add_edge(u, v, weight=int(w))

    def remove_edge(self, u: int, v: int) -> None:
        """Delete edge {u, v} if present; no-op otherwise."""
        if self._graph.has_edge(u, v):
            self._graph.remove_edge(u, v)

    # ── Queries ───────────────────────────────────────────────────────────────

    def node_count(self) -> int:
        """Capacity including the reserved slot 0 (N + 1)."""
        return self._capacity

    def edge_count(self) -> int:
        """Number of directed arcs stored (2 x undirected edges, loops included)."""
        return 2 * self._graph.number_of_edges()

    def degree(self, u: int) -> int:
        """Arcs leaving u; a self-loop counts twice. 0 for unknown vertices."""
        if u not in self._graph:
            return 0
        return self._graph.degree(u)

    def neighbors(self, u: int) -> list[int]:
        """Ids adjacent to u in ascending order; [] for unknown vertices."""
        if u not in self._graph:
            return []
        return sorted(self._graph.adj[u])

    def weight(self, u: int, v: int) -> int:
        """Integer weight of edge {u, v}. The edge must exist."""
        return self._graph.adj[u][v]["weight"]

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def vertices(self) -> range:
        """Real vertex ids, 1..N."""
        return range(1, self._capacity)

    def as_networkx(self) -> nx.Graph:
        """Read-only NetworkX view of the store (edge attribute 'weight')."""
        return self._graph.copy(as_view=True)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(capacity={self._capacity}, "
            f"arcs={self.edge_count()})"
        )
