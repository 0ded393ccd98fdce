"""
infospread/pipeline.py — Single-call analysis run.

run_spread_analysis() loads an edge list, snapshots the graph, measures
cascade depth from one seed at several coverage thresholds, and optionally
writes the JSON snapshot, Markdown report and PNG figures.

Usage:
    from infospread.pipeline import run_spread_analysis
    result = run_spread_analysis("graph.mtx", tau=0.55, seed=1)
    print(result.snapshot.r_number, result.generations)
"""

import logging
from dataclasses import dataclass, field

from infospread.config import DEFAULT_CONFIG, SpreadConfig
from infospread.reports.spread_report import (
    SpreadSnapshot,
    export_report_markdown,
    export_snapshot_json,
    generate_spread_snapshot,
)
from infospread.spread import InformationSpread
from infospread.viz.figures import generate_all_figures

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS = (0.1, 0.25, 0.5, 0.75, 1.0)


@dataclass
class SpreadAnalysisResult:
    """
    Output of one run_spread_analysis() call.

    generations maps each requested threshold → generation count (or -1).
    """

    spread: InformationSpread
    connected_nodes: int
    snapshot: SpreadSnapshot
    seed: int
    generations: dict[float, int] = field(default_factory=dict)
    snapshot_path: str | None = None
    report_path: str | None = None
    figure_paths: dict[str, str] = field(default_factory=dict)


def run_spread_analysis(
    file_path: str,
    tau: float,
    seed: int,
    thresholds: tuple[float, ...] = DEFAULT_THRESHOLDS,
    config: SpreadConfig = DEFAULT_CONFIG,
    snapshot_path: str | None = None,
    report_path: str | None = None,
    figures_dir: str | None = None,
) -> SpreadAnalysisResult:
    """
    Execute load → snapshot → cascade depths → (optional) exports and figures.

    Args:
        file_path:     Edge-list file.
        tau:           Load threshold in [0, 1].
        seed:          Cascade start vertex.
        thresholds:    Coverage fractions to evaluate with generations().
        config:        SpreadConfig.
        snapshot_path: If provided, the snapshot is written here as JSON.
        report_path:   If provided, a Markdown report is written here.
        figures_dir:   If provided, PNG figures are written into this directory.

    Returns:
        SpreadAnalysisResult.
    """
    spread = InformationSpread(config)
    connected = spread.load_graph_from_dataset(file_path, tau)

    snapshot = generate_spread_snapshot(spread)
    generations = {t: spread.generations(seed, t) for t in thresholds}

    result = SpreadAnalysisResult(
        spread=spread,
        connected_nodes=connected,
        snapshot=snapshot,
        seed=seed,
        generations=generations,
    )

    if snapshot_path:
        result.snapshot_path = export_snapshot_json(snapshot, snapshot_path)
    if report_path:
        export_report_markdown(snapshot, report_path)
        result.report_path = report_path
    if figures_dir:
        result.figure_paths = generate_all_figures(
            spread, figures_dir, seed=seed, thresholds=tuple(thresholds)
        )

    logger.info(
        "Spread analysis complete for %s: %d connected nodes, seed %d, "
        "generations %s.",
        file_path,
        connected,
        seed,
        generations,
    )
    return result
