"""
infospread/viz/figures.py — PNG figures for an InformationSpread instance.

Two figures are produced from the loaded graph, with no extra file input:

    degree_distribution.png  Bar chart of vertex count per degree, with the
                             average degree marked.
    coverage_curve.png       Cumulative share of vertices reached per
                             generation from one seed, with the requested
                             coverage thresholds drawn as guide lines.

Usage:
    from infospread.viz.figures import generate_all_figures
    paths = generate_all_figures(spread, output_dir="figures", seed=1)
    # paths = {"degree_distribution.png": "/abs/path/...", ...}
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import matplotlib
try:
    matplotlib.use("Agg")
except Exception:
    pass  # backend already set

import matplotlib.pyplot as plt
import numpy as np

from infospread.propagation.generations import coverage_curve

if TYPE_CHECKING:
    from infospread.spread import InformationSpread

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Shared palette
# ---------------------------------------------------------------------------
C_BAR = "#2196A6"
C_MARK = "#E05E3A"
C_DARK = "#1A2B3C"
C_LIGHT = "#E8EFF5"

STYLE = {
    "figure.facecolor": "white",
    "axes.facecolor": C_LIGHT,
    "axes.edgecolor": C_DARK,
    "axes.labelcolor": C_DARK,
    "xtick.color": C_DARK,
    "ytick.color": C_DARK,
    "text.color": C_DARK,
    "grid.color": "white",
    "grid.linewidth": 1.0,
    "axes.spines.top": False,
    "axes.spines.right": False,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate_all_figures(
    spread: "InformationSpread",
    output_dir: str,
    seed: int | None = None,
    thresholds: tuple[float, ...] = (),
) -> dict[str, str]:
    """
    Render every figure for `spread` into `output_dir`.

    Args:
        spread:     Loaded InformationSpread.
        output_dir: Directory for the PNG files (created if needed).
        seed:       Cascade start vertex for the coverage curve. The curve
                    is skipped when seed is None or not a real vertex.
        thresholds: Coverage fractions drawn as horizontal guide lines.

    Returns:
        Dict mapping filename -> absolute path for each figure written.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths: dict[str, str] = {}
    plt.rcParams.update(STYLE)

    p = plot_degree_distribution(spread, output_dir)
    if p:
        paths[os.path.basename(p)] = p

    if seed is not None and 1 <= seed < spread.graph.node_count():
        p = plot_coverage_curve(spread, seed, output_dir, thresholds)
        if p:
            paths[os.path.basename(p)] = p
    elif seed is not None:
        logger.warning("Seed %s is not a vertex; coverage curve skipped.", seed)

    logger.info("Wrote %d figures to %s.", len(paths), output_dir)
    return paths


def plot_degree_distribution(spread: "InformationSpread", output_dir: str) -> str | None:
    """Bar chart of counts[k] = number of vertices with degree k."""
    counts = spread.degree_distribution()
    if counts.size == 0:
        logger.warning("Graph has no vertices; degree distribution skipped.")
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    degrees = np.arange(counts.size)
    ax.bar(degrees, counts, color=C_BAR, edgecolor="white", linewidth=0.8, zorder=3)

    avg = spread.avg_degree()
    ax.axvline(avg, color=C_MARK, linestyle="--", linewidth=1.5, zorder=4,
               label=f"average degree {avg:.2f}")

    ax.set_xlabel("Degree", fontsize=12)
    ax.set_ylabel("Number of vertices", fontsize=12)
    ax.set_title(f"Degree Distribution (tau = {spread.tau})",
                 fontsize=13, fontweight="bold", pad=12)
    ax.set_xticks(degrees)
    ax.set_ylim(bottom=0)
    ax.yaxis.grid(True, zorder=0)
    ax.legend(fontsize=10, loc="upper right")

    fig.tight_layout()
    path = os.path.join(output_dir, "degree_distribution.png")
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return os.path.abspath(path)


def plot_coverage_curve(
    spread: "InformationSpread",
    seed: int,
    output_dir: str,
    thresholds: tuple[float, ...] = (),
) -> str | None:
    """Step plot of cumulative coverage per generation from `seed`."""
    curve = coverage_curve(spread.graph, seed)
    if not curve:
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.step(range(len(curve)), curve, where="post", color=C_BAR,
            linewidth=2.0, zorder=3)
    ax.scatter(range(len(curve)), curve, color=C_BAR, zorder=4)

    for t in thresholds:
        reached = spread.generations(seed, t)
        label = f"{t:.0%}: generation {reached}" if reached >= 0 else f"{t:.0%}: not reached"
        ax.axhline(t, color=C_MARK, linestyle=":", linewidth=1.2, zorder=2, label=label)

    ax.set_xlabel("Generation", fontsize=12)
    ax.set_ylabel("Share of vertices reached", fontsize=12)
    ax.set_title(f"Cascade Coverage from Vertex {seed} (tau = {spread.tau})",
                 fontsize=13, fontweight="bold", pad=12)
    ax.set_xticks(range(len(curve)))
    ax.set_ylim(0, 1.05)
    ax.yaxis.grid(True, zorder=0)
    if thresholds:
        ax.legend(fontsize=10, loc="lower right")

    fig.tight_layout()
    path = os.path.join(output_dir, "coverage_curve.png")
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return os.path.abspath(path)
