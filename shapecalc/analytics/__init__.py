"""
Analytics Layer
===============

Bounded Context: Aggregate statistics over shape collections.

Design Philosophy:
- Stateless aggregation (compute_stats)
- Immutable outputs (ShapeStats)
"""

from shapecalc.analytics.stats import ShapeStats, compute_stats

__all__ = [
    "ShapeStats",
    "compute_stats",
]
