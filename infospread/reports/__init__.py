"""
infospread.reports — Snapshots and tables for a loaded graph.

Modules:
    spread_report — SpreadSnapshot, per-node metrics DataFrame, JSON and
                    Markdown export.
"""
