"""
infospread/config.py — All tunable parameters for infospread.

No constant that shapes a metric should be hardcoded in a metric module.
The weight scale, threshold slack, clustering tolerance and infectious
duration live here so that a calibration change is a single-file diff.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SpreadConfig:
    """
    Immutable configuration for the spread analytics.

    All fields have documented defaults. Override by constructing a new
    SpreadConfig with the desired values.
    """

    # ── Edge weights ──────────────────────────────────────────────────────────
    weight_scale: int = 100
    # Probabilities in [0, 1] are stored as integers in [0, weight_scale].
    # A probability p becomes int(p * weight_scale), truncated toward zero.

    threshold_slack: float = 0.1
    # An edge with scaled weight w survives the load filter iff
    #     w > tau * weight_scale - threshold_slack
    # The slack absorbs float noise in tau * weight_scale
    # (0.55 * 100 == 55.00000000000001).

    # ── Clustering ────────────────────────────────────────────────────────────
    clustering_tolerance: float = 0.01
    # Range predicates on the clustering coefficient accept
    # [low - tolerance, high + tolerance].

    # ── Reproduction number ───────────────────────────────────────────────────
    infectious_duration: float = 1.0
    # Mean infectious duration d in R = tau * <k> * d.

    # ── Input format ──────────────────────────────────────────────────────────
    comment_prefix: str = "%"
    # Matrix Market banner and comment lines start with this prefix.

    def min_weight(self, tau: float) -> int:
        """Smallest integer weight kept by the load filter at threshold tau."""
        cutoff = tau * self.weight_scale - self.threshold_slack
        # w > cutoff  <=>  w >= floor(cutoff) + 1 for integer w
        return math.floor(cutoff) + 1


# Singleton default: import this everywhere instead of constructing anew.
DEFAULT_CONFIG = SpreadConfig()
