"""
Recommendation Engine
=====================

Derives a ranked list of crowd-management recommendations from density
samples and hotspots.

Pipeline:
    1. Threshold rule on the latest sample of each location
       (optionally only the selected location)
    2. Hotspot rule on every hotspot
    3. Trend rule on every location's time-ordered series
    4. De-duplicate by id, first occurrence wins
    5. Stable sort by priority weight (high=3, medium=2, low=1)

Properties:
    - Pure: no state, no side effects, recomputed from scratch per call
    - Deterministic: identical input gives identical ids in identical order
    - Location order is first appearance in the sample list

Example:
    from venue_engine.recommendations import derive_recommendations

    recs = derive_recommendations(snapshot.crowd_density, snapshot.hotspots)
    for rec in recs:
        print(rec.priority.value, rec.title)
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from venue_engine.models.recommendation import Recommendation
from venue_engine.models.simulation import DensitySample, Hotspot, SimulationSnapshot
from venue_engine.recommendations.rules import hotspot_rule, threshold_rule, trend_rule


logger = logging.getLogger(__name__)


def latest_by_location(samples: Iterable[DensitySample]) -> Dict[str, DensitySample]:
    """
    Most recent sample per location.

    A later sample replaces the kept one only if its timestamp is strictly
    newer, so the first of several equal timestamps wins.
    """
    latest: Dict[str, DensitySample] = {}
    for sample in samples:
        existing = latest.get(sample.location)
        if existing is None or sample.instant > existing.instant:
            latest[sample.location] = sample
    return latest


def series_by_location(samples: Iterable[DensitySample]) -> Dict[str, List[DensitySample]]:
    """Samples grouped per location, each series sorted oldest first (stable)."""
    grouped: Dict[str, List[DensitySample]] = {}
    for sample in samples:
        grouped.setdefault(sample.location, []).append(sample)
    return {
        location: sorted(series, key=lambda s: s.instant)
        for location, series in grouped.items()
    }


def deduplicate(recommendations: Iterable[Recommendation]) -> List[Recommendation]:
    """Drop recommendations whose id was already seen."""
    seen = set()
    unique = []
    for rec in recommendations:
        if rec.id in seen:
            continue
        seen.add(rec.id)
        unique.append(rec)
    return unique


def rank(recommendations: Iterable[Recommendation]) -> List[Recommendation]:
    """Sort by descending priority weight, keeping rule order for ties."""
    return sorted(recommendations, key=lambda r: -r.priority.weight)


def derive_recommendations(
    samples: Sequence[DensitySample],
    hotspots: Sequence[Hotspot],
    location: Optional[str] = None,
) -> List[Recommendation]:
    """
    Evaluate all rules and return the ranked recommendation list.

    Args:
        samples: Density samples from the simulation feed
        hotspots: Detected hotspots
        location: If given, the threshold rule only considers this
            location (hotspot and trend rules are unaffected)

    Returns:
        Recommendations ordered high → medium → low
    """
    candidates: List[Recommendation] = []

    latest = latest_by_location(samples)
    if location is not None:
        latest = {location: latest[location]} if location in latest else {}

    for loc, sample in latest.items():
        rec = threshold_rule(loc, sample)
        if rec is not None:
            candidates.append(rec)

    for index, hotspot in enumerate(hotspots):
        rec = hotspot_rule(index, hotspot)
        if rec is not None:
            candidates.append(rec)

    for loc, series in series_by_location(samples).items():
        rec = trend_rule(loc, series)
        if rec is not None:
            candidates.append(rec)

    ranked = rank(deduplicate(candidates))

    logger.debug(
        f"Recommendations: samples={len(samples)}, hotspots={len(hotspots)}, "
        f"location={location!r}, produced={len(ranked)}"
    )
    return ranked


def evaluate_snapshot(
    snapshot: SimulationSnapshot,
    location: Optional[str] = None,
) -> List[Recommendation]:
    """Run the engine on a provider snapshot."""
    return derive_recommendations(snapshot.crowd_density, snapshot.hotspots, location)
