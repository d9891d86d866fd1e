"""
Rule Codes
==========

Fixed set of machine-readable recommendation kinds.

Every recommendation id is ``{kind}-{location}`` (or ``{kind}-{index}``
for hotspots), so the kind values are part of the output contract and
must stay stable for de-duplication and UI diffing.
"""

from enum import Enum


class RuleKind(str, Enum):
    """
    Recommendation kinds, one per rule outcome.

    Attributes:
        CRITICAL_DENSITY: density > 0.9
        HIGH_DENSITY: density > 0.8
        MODERATE_DENSITY: density > 0.7
        LOW_DENSITY: density < 0.3
        HOTSPOT: hotspot intensity > 0.8
        TREND_INCREASING: three-sample rise > 0.2
        TREND_DECREASING: three-sample fall > 0.2
    """

    # Threshold rule (one per location)
    CRITICAL_DENSITY = "high-density"
    HIGH_DENSITY = "medium-density"
    MODERATE_DENSITY = "moderate-density"
    LOW_DENSITY = "low-density"

    # Hotspot rule (one per hotspot index)
    HOTSPOT = "hotspot"

    # Trend rule
    TREND_INCREASING = "trend-increasing"
    TREND_DECREASING = "trend-decreasing"

    def key(self, subject: object) -> str:
        """Deterministic recommendation id for ``subject``."""
        return f"{self.value}-{subject}"
