"""
infospread/graph/loader.py — Edge-list loader with the tau filter.

Reads a Matrix-Market-like text file into a WeightedGraph:

    %%MatrixMarket matrix coordinate real symmetric   (optional, skipped)
    % comment lines                                   (optional, skipped)
    N M NNZ                                            header: only N is read
    from to weight                                     one edge per line
    ...

`from` and `to` are vertex ids in 0..N (0 is a sentinel and such edges are
discarded); `weight` is a transmission probability in [0, 1]. Probabilities
are scaled to integers by truncation toward zero (0.29 → 28 because
0.29 * 100 == 28.999999999999996), then filtered against tau:

    keep  iff  w > tau * weight_scale - threshold_slack
          iff  w >= config.min_weight(tau)

Every kept edge is stored in both directions. A self-loop `u u w` that
passes the filter is kept as well and gives u two arcs. A repeated {u, v}
pair keeps the weight of its last line.

Failure model:
    - Missing file: logged at ERROR, empty LoadResult returned.
    - Malformed header or edge line, ids outside 0..N, probabilities outside
      [0, 1]: ValueError propagates (malformed input is fatal).
"""

import logging
from dataclasses import dataclass, field

import pandas as pd

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """
    Outcome of a single edge-list load.

    Fields:
        graph:               The populated store (capacity 0 if nothing loaded).
        declared_vertices:   N from the header line.
        connected_nodes:     Distinct vertices on at least one accepted edge.
        accepted_edges:      Undirected edges stored (arcs / 2).
        skipped_weak:        Edges dropped by the tau filter.
        skipped_sentinel:    Edges with a 0 endpoint.
        source_found:        False when the file did not exist.
    """
    graph: WeightedGraph = field(default_factory=WeightedGraph)
    declared_vertices: int = 0
    connected_nodes: set[int] = field(default_factory=set)
    accepted_edges: int = 0
    skipped_weak: int = 0
    skipped_sentinel: int = 0
    source_found: bool = True


def load_edge_list(
    path: str,
    tau: float,
    config: SpreadConfig = DEFAULT_CONFIG,
) -> LoadResult:
    """
    Load a weighted edge list and apply the tau filter.

    Args:
        path:   Path to the edge-list file.
        tau:    Minimum transmission probability in [0, 1].
        config: SpreadConfig. Uses weight_scale, threshold_slack and
                comment_prefix.

    Returns:
        LoadResult with the populated graph and load statistics.

    Raises:
        ValueError: tau outside [0, 1] or malformed file contents.
    """
    if not 0.0 <= tau <= 1.0:
        raise ValueError(f"tau must lie in [0, 1], got {tau!r}")

    try:
        with open(path, encoding="utf-8") as fh:
            declared = _read_header(fh, config.comment_prefix)
            if declared is None:
                logger.warning("Edge list %s is empty, nothing loaded.", path)
                return LoadResult()
            edges = _read_edges(fh, config.comment_prefix)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        return LoadResult(source_found=False)

    graph = WeightedGraph(declared + 1)
    result = LoadResult(graph=graph, declared_vertices=declared)

    if edges.empty:
        logger.info("Loaded %s: %d vertices declared, no edges.", path, declared)
        return result

    src, dst, prob = _coerce_edges(edges, declared)
    weights = (prob * config.weight_scale).astype("int64")

    sentinel = (src == 0) | (dst == 0)
    weak = ~sentinel & (weights < config.min_weight(tau))
    kept = ~(sentinel | weak)

    for u, v, w in zip(src[kept].tolist(), dst[kept].tolist(), weights[kept].tolist()):
        graph.add_edge(u, v, w)

    result.connected_nodes = set(src[kept].tolist()) | set(dst[kept].tolist())
    result.accepted_edges = graph.edge_count() // 2
    result.skipped_weak = int(weak.sum())
    result.skipped_sentinel = int(sentinel.sum())

    logger.info(
        "Loaded %s: %d vertices declared, %d edges accepted over %d connected "
        "nodes (tau=%.3f; skipped %d weak, %d sentinel).",
        path,
        declared,
        result.accepted_edges,
        len(result.connected_nodes),
        tau,
        result.skipped_weak,
        result.skipped_sentinel,
    )
    return result


def _read_header(fh, comment_prefix: str) -> int | None:
    """Consume comment lines and the header; return N, or None at EOF."""
    for raw_line in fh:
        line = raw_line.strip()
        if not line or line.startswith(comment_prefix):
            continue
        declared = int(line.split()[0])
        if declared < 0:
            raise ValueError(f"Declared vertex count must be >= 0, got {declared}")
        return declared
    return None


def _read_edges(fh, comment_prefix: str) -> pd.DataFrame:
    """Read the remaining lines as whitespace-separated string fields."""
    try:
        return pd.read_csv(
            fh,
            sep=r"\s+",
            header=None,
            comment=comment_prefix,
            dtype=str,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()


def _coerce_edges(
    edges: pd.DataFrame,
    declared: int,
) -> tuple[pd.Series, pd.Series, pd.Series]:
    """
    Validate and convert raw edge fields to (from, to, probability) series.

    Raises ValueError on short lines, non-numeric fields, non-integral or
    out-of-range ids, and probabilities outside [0, 1].
    """
    if edges.shape[1] < 3 or edges.iloc[:, :3].isna().to_numpy().any():
        raise ValueError("Every edge line needs three fields: from to weight")

    endpoints = edges.iloc[:, :2].apply(pd.to_numeric)
    if not (endpoints % 1 == 0).to_numpy().all():
        raise ValueError("Vertex ids must be integers")
    endpoints = endpoints.astype("int64")
    if ((endpoints < 0) | (endpoints > declared)).to_numpy().any():
        raise ValueError(f"Vertex ids must lie in 0..{declared}")

    prob = pd.to_numeric(edges.iloc[:, 2]).astype("float64")
    if ((prob < 0.0) | (prob > 1.0)).any():
        raise ValueError("Edge weights must lie in [0, 1]")

    return endpoints.iloc[:, 0], endpoints.iloc[:, 1], prob
