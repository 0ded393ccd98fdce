"""
infospread.graph — Graph store, loader and subgraph operator.

Modules:
    store     — WeightedGraph: dense-id weighted undirected adjacency store.
    loader    — Build a WeightedGraph from an edge-list file with the tau filter.
    subgraph  — isolate_nodes(): copy a graph with chosen nodes cut off.
"""
