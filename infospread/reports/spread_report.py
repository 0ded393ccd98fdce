"""
infospread/reports/spread_report.py — Spread snapshot and node tables.

Captures the structural state of a loaded graph in one SpreadSnapshot:
  - size (declared vertices, connected vertices, arcs)
  - spread potential (average degree, R)
  - local structure (mean clustering, degree distribution, top hubs)

Snapshots can be persisted as JSON (export_snapshot_json) or written as a
short Markdown summary (export_report_markdown). node_metrics_frame() gives
the per-vertex table behind the snapshot as a pandas DataFrame.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from datetime import datetime

import pandas as pd

from infospread.graph.store import WeightedGraph
from infospread.metrics.clustering import all_clustering_coefficients

logger = logging.getLogger(__name__)


@dataclass
class SpreadSnapshot:
    """
    Timestamped summary of one loaded graph.

    degree_distribution maps degree (as a string key, for JSON) → vertex
    count. top_hubs lists the highest-degree vertices as
    {node, degree, clustering} dicts, ties broken by ascending id.
    """

    snapshot_date: str                      # ISO 8601 date string
    tau: float

    # Graph size
    declared_vertices: int
    connected_vertices: int
    arc_count: int

    # Spread potential
    avg_degree: float
    r_number: float

    # Local structure
    mean_clustering: float
    degree_distribution: dict
    top_hubs: list


def node_metrics_frame(graph: WeightedGraph) -> pd.DataFrame:
    """
    Per-vertex degree and clustering coefficient.

    Returns:
        DataFrame indexed by vertex id (1..N, index name 'node') with
        columns 'degree' (int) and 'clustering' (float). Empty for a graph
        with no real vertices.
    """
    coefficients = all_clustering_coefficients(graph)
    frame = pd.DataFrame(
        {
            "degree": [graph.degree(n) for n in graph.vertices()],
            "clustering": [coefficients.get(n, 0.0) for n in graph.vertices()],
        },
        index=pd.Index(list(graph.vertices()), name="node"),
    )
    return frame.astype({"degree": "int64", "clustering": "float64"})


def generate_spread_snapshot(spread, top_n: int = 5) -> SpreadSnapshot:
    """
    Summarise the graph currently held by an InformationSpread instance.

    Args:
        spread: InformationSpread with a loaded graph.
        top_n:  Number of hub vertices to list.

    Returns:
        SpreadSnapshot.
    """
    frame = node_metrics_frame(spread.graph)
    distribution = spread.degree_distribution()

    hubs = frame.sort_values(
        ["degree", "clustering"], ascending=[False, True], kind="mergesort"
    ).head(top_n)
    top_hubs = [
        {
            "node": int(node),
            "degree": int(row["degree"]),
            "clustering": round(float(row["clustering"]), 4),
        }
        for node, row in hubs.iterrows()
        if row["degree"] > 0
    ]

    snapshot = SpreadSnapshot(
        snapshot_date=datetime.now().strftime("%Y-%m-%d"),
        tau=spread.tau,
        declared_vertices=max(spread.graph.node_count() - 1, 0),
        connected_vertices=int((frame["degree"] > 0).sum()) if not frame.empty else 0,
        arc_count=spread.graph.edge_count(),
        avg_degree=round(spread.avg_degree(), 4),
        r_number=round(spread.r_number(), 4),
        mean_clustering=round(float(frame["clustering"].mean()), 4) if not frame.empty else 0.0,
        degree_distribution={str(k): int(c) for k, c in enumerate(distribution) if c > 0},
        top_hubs=top_hubs,
    )

    logger.info(
        "Spread snapshot: %d vertices, %d connected, R=%.4f.",
        snapshot.declared_vertices,
        snapshot.connected_vertices,
        snapshot.r_number,
    )
    return snapshot


def export_snapshot_json(snapshot: SpreadSnapshot, output_path: str) -> str:
    """
    Write the snapshot as indented JSON. Creates parent directories.

    Returns:
        output_path.
    """
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(asdict(snapshot), f, indent=2)
    logger.info("Spread snapshot saved to: %s", output_path)
    return output_path


def export_report_markdown(snapshot: SpreadSnapshot, output_path: str) -> str:
    """
    Export a human-readable Markdown summary of the snapshot.

    Structure:
        # Information Spread Report
        **Date:** {date} | **tau:** {tau}

        ## Network
        | Metric | Value |

        ## Degree Distribution
        | Degree | Vertices |

        ## Top Hubs
        | Node | Degree | Clustering |

    Writes the file to output_path and returns the Markdown string.
    """
    lines = [
        "# Information Spread Report",
        "",
        f"**Date:** {snapshot.snapshot_date} | **tau:** {snapshot.tau:.2f}",
        "",
        "## Network",
        "",
        "| Metric | Value |",
        "|---|---|",
        f"| Declared vertices | {snapshot.declared_vertices} |",
        f"| Connected vertices | {snapshot.connected_vertices} |",
        f"| Arcs | {snapshot.arc_count} |",
        f"| Average degree | {snapshot.avg_degree:.4f} |",
        f"| R | {snapshot.r_number:.4f} |",
        f"| Mean clustering | {snapshot.mean_clustering:.4f} |",
        "",
        "## Degree Distribution",
        "",
        "| Degree | Vertices |",
        "|---|---|",
    ]
    for k, count in snapshot.degree_distribution.items():
        lines.append(f"| {k} | {count} |")

    lines += ["", "## Top Hubs", ""]
    if snapshot.top_hubs:
        lines += ["| Node | Degree | Clustering |", "|---|---|---|"]
        for hub in snapshot.top_hubs:
            lines.append(f"| {hub['node']} | {hub['degree']} | {hub['clustering']:.4f} |")
    else:
        lines.append("No connected vertices.")

    markdown = "\n".join(lines) + "\n"

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(markdown)
    logger.info("Spread report written to: %s", output_path)
    return markdown
