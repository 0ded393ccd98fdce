"""
infospread.metrics — Structural metrics over the tau-filtered graph.

Modules:
    degree        — Degree, average degree, degree distribution.
    clustering    — Local clustering coefficient.
    predicates    — Node sets selected by degree and/or clustering.
    reproduction  — Reproduction number R, with and without node removal.

All tolerances and scale factors live in infospread.config.SpreadConfig.
"""
