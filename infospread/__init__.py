"""
infospread — Probabilistic information-spread analytics on weighted graphs.

Models epidemic-style propagation over an undirected graph whose edge
weights are transmission probabilities. A load-time threshold tau drops
edges too weak to matter; the remaining graph answers questions about
reachability, most-likely propagation paths, degree and clustering
structure, a coarse reproduction number R, and how many BFS generations a
cascade needs to cover a fraction of the network.

Entry point:
    from infospread import InformationSpread
    spread = InformationSpread()
    spread.load_graph_from_dataset("graph.mtx", tau=0.55)
    spread.generations(seed=1, threshold=0.3)
"""

from infospread.spread import InformationSpread

__version__ = "0.1.0"

__all__ = ["InformationSpread"]
