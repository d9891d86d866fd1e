"""
Recommendation Rules
====================

Rule functions that turn one observation into at most one recommendation.

Threshold Rule (latest sample per location, first match wins):
    density > 0.9  → high,   warning: critical congestion
    density > 0.8  → high,   warning: high congestion
    density > 0.7  → medium, info:    moderate congestion
    density < 0.3  → low,    success: optimal flow
    otherwise      → nothing

Hotspot Rule (every hotspot, keyed by index):
    intensity > 0.8 → high, warning: hotspot detected

Trend Rule (locations with >= 3 samples):
    trend = latest - density three samples back (oldest of last three)
    trend >  0.2 → medium, warning: rapid increase
    trend < -0.2 → low,    info:    dispersing

The cutoffs are exact literals; comparisons always use raw floats.
Percentages are rounded only for display text.
"""

import math
from typing import Optional, Sequence

from venue_engine.models.recommendation import Priority, Recommendation, RecommendationType
from venue_engine.models.rule_codes import RuleKind
from venue_engine.models.simulation import DensitySample, Hotspot


CRITICAL_DENSITY = 0.9
HIGH_DENSITY = 0.8
MODERATE_DENSITY = 0.7
LOW_DENSITY = 0.3

HOTSPOT_INTENSITY = 0.8

TREND_WINDOW = 3
TREND_DELTA = 0.2


def percent(value: float) -> int:
    """Whole percentage for display, rounding halves up."""
    return int(math.floor(value * 100 + 0.5))


def threshold_rule(location: str, sample: DensitySample) -> Optional[Recommendation]:
    """Congestion recommendation for the latest sample of ``location``."""
    density = sample.density
    shown = percent(density)

    if density > CRITICAL_DENSITY:
        return Recommendation(
            id=RuleKind.CRITICAL_DENSITY.key(location),
            type=RecommendationType.WARNING,
            title=f"Critical Congestion at {location}",
            description=(
                f"Crowd density at {location} is at {shown}%. "
                f"Immediate action required to prevent overcrowding."
            ),
            priority=Priority.HIGH,
            action="Deploy Emergency Crowd Control",
            location=location,
            density=density,
            timestamp=sample.timestamp,
        )
    elif density > HIGH_DENSITY:
        return Recommendation(
            id=RuleKind.HIGH_DENSITY.key(location),
            type=RecommendationType.WARNING,
            title=f"High Congestion at {location}",
            description=(
                f"Crowd density at {location} is at {shown}%. "
                f"Consider opening additional routes or implementing crowd control measures."
            ),
            priority=Priority.HIGH,
            action="Open Alternative Routes",
            location=location,
            density=density,
            timestamp=sample.timestamp,
        )
    elif density > MODERATE_DENSITY:
        return Recommendation(
            id=RuleKind.MODERATE_DENSITY.key(location),
            type=RecommendationType.INFO,
            title=f"Moderate Congestion at {location}",
            description=(
                f"Crowd density at {location} is at {shown}%. "
                f"Monitor closely for potential bottlenecks."
            ),
            priority=Priority.MEDIUM,
            action="Increase Monitoring",
            location=location,
            density=density,
            timestamp=sample.timestamp,
        )
    elif density < LOW_DENSITY:
        return Recommendation(
            id=RuleKind.LOW_DENSITY.key(location),
            type=RecommendationType.SUCCESS,
            title=f"Optimal Flow at {location}",
            description=(
                f"Crowd density at {location} is at {shown}%. "
                f"Flow is optimal and well-managed."
            ),
            priority=Priority.LOW,
            action="Maintain Current Setup",
            location=location,
            density=density,
            timestamp=sample.timestamp,
        )
    return None


def hotspot_rule(index: int, hotspot: Hotspot) -> Optional[Recommendation]:
    """Warning for a high-intensity hotspot, keyed by its list index."""
    if hotspot.intensity <= HOTSPOT_INTENSITY:
        return None
    return Recommendation(
        id=RuleKind.HOTSPOT.key(index),
        type=RecommendationType.WARNING,
        title=f"Hotspot Detected: {hotspot.location}",
        description=(
            f"High-intensity crowd concentration detected at {hotspot.location} "
            f"with {percent(hotspot.intensity)}% intensity."
        ),
        priority=Priority.HIGH,
        action="Deploy Crowd Management Team",
        location=hotspot.location,
        density=hotspot.intensity,
    )


def trend_rule(location: str, series: Sequence[DensitySample]) -> Optional[Recommendation]:
    """
    Trend recommendation for a time-ordered ``series`` of one location.

    Returns None for fewer than three samples or ``|trend| <= 0.2``.
    """
    if len(series) < TREND_WINDOW:
        return None

    recent = series[-TREND_WINDOW:]
    latest = recent[-1].density
    trend = latest - recent[0].density

    if trend > TREND_DELTA:
        return Recommendation(
            id=RuleKind.TREND_INCREASING.key(location),
            type=RecommendationType.WARNING,
            title=f"Rapid Crowd Increase at {location}",
            description=(
                f"Crowd density at {location} is rapidly increasing. "
                f"Prepare for potential congestion in the next 30-60 minutes."
            ),
            priority=Priority.MEDIUM,
            action="Prepare Contingency Plans",
            location=location,
            density=latest,
        )
    elif trend < -TREND_DELTA:
        return Recommendation(
            id=RuleKind.TREND_DECREASING.key(location),
            type=RecommendationType.INFO,
            title=f"Crowd Dispersing at {location}",
            description=(
                f"Crowd density at {location} is decreasing. "
                f"Good flow management in progress."
            ),
            priority=Priority.LOW,
            action="Continue Current Strategy",
            location=location,
            density=latest,
        )
    return None
