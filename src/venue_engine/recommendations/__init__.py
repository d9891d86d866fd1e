"""
Recommendations Module
======================

Rule-based crowd recommendations derived from simulation output.

This module provides:
    - rules: threshold, hotspot and trend rules
    - engine: grouping, de-duplication and ranking
"""

from venue_engine.recommendations.engine import (
    deduplicate,
    derive_recommendations,
    evaluate_snapshot,
    latest_by_location,
    rank,
    series_by_location,
)
from venue_engine.recommendations.rules import hotspot_rule, percent, threshold_rule, trend_rule

__all__ = [
    "derive_recommendations",
    "evaluate_snapshot",
    "latest_by_location",
    "series_by_location",
    "deduplicate",
    "rank",
    "threshold_rule",
    "hotspot_rule",
    "trend_rule",
    "percent",
]
