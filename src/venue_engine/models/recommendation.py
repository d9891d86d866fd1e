"""
Recommendation Models
=====================

Output contract of the crowd recommendation engine.

Output Contract:
    {
        "id": "high-density-Main Entrance",
        "type": "warning",
        "title": "Critical Congestion at Main Entrance",
        "description": "Crowd density at Main Entrance is at 95%. ...",
        "priority": "high",
        "action": "Deploy Emergency Crowd Control",
        "location": "Main Entrance",
        "density": 0.95,
        "timestamp": "2025-03-01T18:15:00Z"
    }

Recommendations are created fresh on every evaluation and never mutated.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RecommendationType(str, Enum):
    """Visual category of a recommendation."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class Priority(str, Enum):
    """Recommendation priority, ranked by ``weight``."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class Recommendation(BaseModel):
    """
    Actionable recommendation derived from density samples and hotspots.

    Attributes:
        id: ``{kind}-{location}`` or ``{kind}-{index}``; stable per input
        type: warning / info / success
        title: Short headline
        description: Display text (density shown as a whole percentage)
        priority: high / medium / low
        action: Suggested operator action
        location: Location the recommendation refers to
        density: Raw density or intensity that triggered it
        timestamp: Timestamp of the triggering sample, if any
    """

    id: str = Field(..., description="Deterministic recommendation id")

    type: RecommendationType = Field(..., description="Visual category")

    title: str = Field(..., description="Short headline")

    description: str = Field(..., description="Display text")

    priority: Priority = Field(..., description="Ranking priority")

    action: str = Field(..., description="Suggested operator action")

    location: Optional[str] = Field(default=None)

    density: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    timestamp: Optional[str] = Field(default=None)

    class Config:
        """Pydantic model configuration."""

        frozen = True
