"""
infospread/tests/test_figures.py — Tests for the matplotlib figures.

Figures render with the Agg backend into tmp_path; tests check which files
are written, not their pixels.
"""

import logging
import os

from infospread.pipeline import run_spread_analysis
from infospread.spread import InformationSpread
from infospread.viz.figures import (
    generate_all_figures,
    plot_coverage_curve,
    plot_degree_distribution,
)

PNG_MAGIC = b"\x89PNG"


def _is_png(path: str) -> bool:
    with open(path, "rb") as f:
        return f.read(4) == PNG_MAGIC


def test_generate_all_figures(spread, tmp_path):
    paths = generate_all_figures(spread, str(tmp_path / "figs"), seed=1,
                                 thresholds=(0.25, 1.0))
    assert set(paths) == {"degree_distribution.png", "coverage_curve.png"}
    for path in paths.values():
        assert os.path.isabs(path)
        assert _is_png(path)


def test_generate_all_figures_without_seed(spread, tmp_path):
    paths = generate_all_figures(spread, str(tmp_path))
    assert set(paths) == {"degree_distribution.png"}


def test_generate_all_figures_bad_seed(spread, tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        paths = generate_all_figures(spread, str(tmp_path), seed=99)
    assert "coverage_curve.png" not in paths
    assert "coverage curve skipped" in caplog.text


def test_empty_graph_writes_nothing(tmp_path):
    s = InformationSpread()
    assert plot_degree_distribution(s, str(tmp_path)) is None
    assert generate_all_figures(s, str(tmp_path), seed=1) == {}


def test_plot_coverage_curve_isolated_seed(spread, tmp_path):
    path = plot_coverage_curve(spread, 6, str(tmp_path), thresholds=(0.5,))
    assert path is not None and _is_png(path)


def test_pipeline_writes_figures(test_graph_path, tmp_path):
    result = run_spread_analysis(
        test_graph_path, tau=0.55, seed=1, thresholds=(0.3,),
        figures_dir=str(tmp_path / "figs"),
    )
    assert set(result.figure_paths) == {"degree_distribution.png", "coverage_curve.png"}
