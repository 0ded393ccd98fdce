"""
infospread/tests/conftest.py — Shared pytest fixtures for the infospread suite.

Fixture files (infospread/tests/data/):
    test_graph.mtx     N=12. At tau=0.55, 7 edges (14 arcs) survive over
                       vertices {1, 2, 3, 7, 9, 10, 11, 12}:
                           1-2 0.80   1-3 0.90   2-7 0.60   3-7 0.70
                           9-10 0.55  10-12 0.75 9-11 0.65
                       Below 0.55: 4-5 0.30, 2-8 0.54, 5-8 0.10.
                       Always dropped: 0-4, 6-0 (sentinel).
                       No triangles at any tau.
    tri_graph.mtx      Triangle on {1, 2, 3}, weights 0.30–0.50.
    nothing_graph.mtx  N=5, every edge below 0.55.
    one_node_graph.mtx N=1, a single self-loop 1-1 0.90 (2 arcs).

Fixtures:
    data_dir        — Path to the fixture directory.
    test_graph_path / tri_graph_path / nothing_graph_path /
    one_node_graph_path — file paths.
    spread          — InformationSpread loaded with test_graph.mtx at tau=0.55.
    tri_spread      — InformationSpread loaded with tri_graph.mtx at tau=0.01.
    write_edge_list — Factory writing an ad-hoc edge list under tmp_path.
"""

import os

import pytest

from infospread.spread import InformationSpread

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture(scope="session")
def data_dir() -> str:
    return DATA_DIR


@pytest.fixture(scope="session")
def test_graph_path(data_dir) -> str:
    return os.path.join(data_dir, "test_graph.mtx")


@pytest.fixture(scope="session")
def tri_graph_path(data_dir) -> str:
    return os.path.join(data_dir, "tri_graph.mtx")


@pytest.fixture(scope="session")
def nothing_graph_path(data_dir) -> str:
    return os.path.join(data_dir, "nothing_graph.mtx")


@pytest.fixture(scope="session")
def one_node_graph_path(data_dir) -> str:
    return os.path.join(data_dir, "one_node_graph.mtx")


@pytest.fixture
def spread(test_graph_path) -> InformationSpread:
    """test_graph.mtx loaded at tau = 0.55 (fresh instance per test)."""
    s = InformationSpread()
    s.load_graph_from_dataset(test_graph_path, 0.55)
    return s


@pytest.fixture
def tri_spread(tri_graph_path) -> InformationSpread:
    """tri_graph.mtx loaded at tau = 0.01."""
    s = InformationSpread()
    s.load_graph_from_dataset(tri_graph_path, 0.01)
    return s


@pytest.fixture
def write_edge_list(tmp_path):
    """
    Factory: write_edge_list(n, edges, name="graph.mtx") -> path.

    `edges` is an iterable of (from, to, weight) triples; weight is written
    verbatim so tests control the exact decimal text.
    """
    def _write(n, edges, name="graph.mtx"):
        path = tmp_path / name
        lines = [f"{n} {n} {len(edges)}"]
        lines += [f"{u} {v} {w}" for u, v, w in edges]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write
