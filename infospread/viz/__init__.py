"""
infospread.viz — Static figures for a loaded graph.

Modules:
    figures — Degree distribution histogram and cascade coverage curve
              rendered with matplotlib (Agg backend, PNG output).
"""

from infospread.viz.figures import generate_all_figures
