"""
infospread.propagation — How information moves through the filtered graph.

Modules:
    path         — Most-likely path (Dijkstra on -ln p) and path probability.
    generations  — BFS generations needed to cover a fraction of the network.
"""
