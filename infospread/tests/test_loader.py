"""
infospread/tests/test_loader.py — Tests for infospread.graph.loader.

Tests verify:
- The header's first token sets capacity N + 1; banner/comment lines are skipped.
- The tau filter keeps w > tau*100 - 0.1 (0.55 keeps a 0.55 edge, drops 0.54).
- Probabilities are truncated, not rounded, when scaled (0.29 → 28).
- Sentinel (0-endpoint) edges are skipped and counted.
- Self-loops that pass the filter are kept and give their vertex two arcs.
- Missing files log an error and return an empty result.
- Malformed input raises ValueError.
"""

import logging

import pytest

from infospread.config import SpreadConfig
from infospread.graph.loader import LoadResult, load_edge_list


# ── Fixture files ─────────────────────────────────────────────────────────────

def test_test_graph_load_statistics(test_graph_path):
    result = load_edge_list(test_graph_path, 0.55)
    assert isinstance(result, LoadResult)
    assert result.declared_vertices == 12
    assert result.graph.node_count() == 13
    assert result.connected_nodes == {1, 2, 3, 7, 9, 10, 11, 12}
    assert result.accepted_edges == 7
    assert result.graph.edge_count() == 14
    assert result.skipped_weak == 3
    assert result.skipped_sentinel == 2
    assert result.source_found


def test_boundary_weight_equal_to_tau_is_kept(test_graph_path):
    result = load_edge_list(test_graph_path, 0.55)
    assert result.graph.has_edge(9, 10)
    assert result.graph.weight(9, 10) == 55
    assert not result.graph.has_edge(2, 8)


def test_lower_tau_admits_weak_edges(test_graph_path):
    result = load_edge_list(test_graph_path, 0.01)
    assert result.accepted_edges == 10
    assert result.graph.has_edge(5, 8)
    assert result.graph.weight(5, 8) == 10
    assert len(result.connected_nodes) == 11


def test_no_stored_weight_below_threshold(test_graph_path):
    for tau in (0.0, 0.3, 0.55, 0.7, 0.9):
        g = load_edge_list(test_graph_path, tau).graph
        for u in g.vertices():
            for v in g.neighbors(u):
                assert g.weight(u, v) > tau * 100 - 0.1


def test_stored_graph_is_symmetric(test_graph_path):
    g = load_edge_list(test_graph_path, 0.01).graph
    for u in g.vertices():
        for v in g.neighbors(u):
            assert g.has_edge(v, u)
            assert g.weight(u, v) == g.weight(v, u)


def test_nothing_graph_accepts_no_edges(nothing_graph_path):
    result = load_edge_list(nothing_graph_path, 0.55)
    assert result.graph.node_count() == 6
    assert result.graph.edge_count() == 0
    assert result.connected_nodes == set()
    assert result.skipped_weak == 2


# ── Weight conversion ─────────────────────────────────────────────────────────

def test_weights_are_truncated_not_rounded(write_edge_list):
    path = write_edge_list(3, [(1, 2, "0.29"), (2, 3, "0.999")])
    g = load_edge_list(path, 0.0).graph
    assert g.weight(1, 2) == 28
    assert g.weight(2, 3) == 99


def test_tau_zero_keeps_zero_weight_edges(write_edge_list):
    path = write_edge_list(2, [(1, 2, "0.0")])
    result = load_edge_list(path, 0.0)
    assert result.graph.has_edge(1, 2)
    assert result.graph.weight(1, 2) == 0


def test_tau_one_keeps_only_certain_edges(write_edge_list):
    path = write_edge_list(3, [(1, 2, "1.0"), (2, 3, "0.99")])
    g = load_edge_list(path, 1.0).graph
    assert g.has_edge(1, 2)
    assert not g.has_edge(2, 3)


def test_repeated_edge_keeps_last_weight(write_edge_list):
    path = write_edge_list(2, [(1, 2, "0.60"), (2, 1, "0.90")])
    result = load_edge_list(path, 0.5)
    assert result.accepted_edges == 1
    assert result.graph.weight(1, 2) == 90


def test_self_loop_kept_when_above_threshold(write_edge_list):
    path = write_edge_list(2, [(1, 1, "0.90"), (2, 2, "0.20")])
    result = load_edge_list(path, 0.55)
    assert result.connected_nodes == {1}
    assert result.accepted_edges == 1
    assert result.graph.edge_count() == 2
    assert result.graph.neighbors(1) == [1]
    assert result.skipped_weak == 1


def test_custom_weight_scale(write_edge_list):
    path = write_edge_list(2, [(1, 2, "0.555")])
    config = SpreadConfig(weight_scale=1000)
    g = load_edge_list(path, 0.555, config).graph
    assert g.weight(1, 2) == 555


# ── Header handling ───────────────────────────────────────────────────────────

def test_header_only_file(write_edge_list):
    path = write_edge_list(4, [])
    result = load_edge_list(path, 0.5)
    assert result.graph.node_count() == 5
    assert result.graph.edge_count() == 0


def test_empty_file_loads_nothing(tmp_path):
    path = tmp_path / "empty.mtx"
    path.write_text("", encoding="utf-8")
    result = load_edge_list(str(path), 0.5)
    assert result.graph.node_count() == 0
    assert result.connected_nodes == set()


def test_extra_header_tokens_ignored(tmp_path):
    path = tmp_path / "g.mtx"
    path.write_text("3 3 2 extra tokens\n1 2 0.9\n", encoding="utf-8")
    result = load_edge_list(str(path), 0.5)
    assert result.graph.node_count() == 4
    assert result.graph.neighbors(1) == [2]


# ── Missing file ──────────────────────────────────────────────────────────────

def test_missing_file_logs_error_and_returns_empty(tmp_path, caplog):
    missing = str(tmp_path / "does_not_exist.mtx")
    with caplog.at_level(logging.ERROR, logger="infospread.graph.loader"):
        result = load_edge_list(missing, 0.5)
    assert not result.source_found
    assert result.connected_nodes == set()
    assert result.graph.node_count() == 0
    assert any("File not found" in r.getMessage() for r in caplog.records)


# ── Malformed input ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("tau", [-0.1, 1.01, float("nan")])
def test_tau_out_of_range_raises(test_graph_path, tau):
    with pytest.raises(ValueError):
        load_edge_list(test_graph_path, tau)


def test_non_integer_header_raises(tmp_path):
    path = tmp_path / "bad.mtx"
    path.write_text("twelve 3 3\n1 2 0.5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_edge_list(str(path), 0.5)


def test_short_edge_line_raises(tmp_path):
    path = tmp_path / "bad.mtx"
    path.write_text("3 3 2\n1 2 0.5\n2 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_edge_list(str(path), 0.5)


def test_non_numeric_weight_raises(write_edge_list):
    path = write_edge_list(3, [(1, 2, "high")])
    with pytest.raises(ValueError):
        load_edge_list(path, 0.5)


def test_vertex_beyond_declared_count_raises(write_edge_list):
    path = write_edge_list(3, [(1, 4, "0.5")])
    with pytest.raises(ValueError):
        load_edge_list(path, 0.5)


def test_probability_above_one_raises(write_edge_list):
    path = write_edge_list(3, [(1, 2, "1.5")])
    with pytest.raises(ValueError):
        load_edge_list(path, 0.5)
