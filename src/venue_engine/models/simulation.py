"""
Simulation Input Models
=======================

Schema for crowd simulation results supplied by the upstream provider.

Input Contract (from the simulation provider):
    {
        "eventId": "evt-42",
        "crowdDensity": [
            {"timestamp": "2025-03-01T18:00:00Z", "location": "Main Entrance", "density": 0.62}
        ],
        "hotspots": [
            {"x": 42.0, "y": 18.5, "intensity": 0.87, "location": "Gate B"}
        ]
    }

Only ``crowdDensity`` and ``hotspots`` are consumed; any other provider
keys are ignored.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 instant.

    A trailing ``Z`` is accepted. Naive timestamps are treated as UTC so
    that mixed inputs stay comparable.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class DensitySample(BaseModel):
    """
    Timestamped crowd-density reading for one named location.

    The original timestamp string is kept verbatim so it can be echoed
    back on recommendations.
    """

    timestamp: str = Field(..., description="ISO-8601 instant")

    location: str = Field(..., description="Named location")

    density: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Normalized crowd density [0, 1]",
    )

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        """Reject timestamps that are not ISO-8601."""
        parse_timestamp(v)
        return v

    @property
    def instant(self) -> datetime:
        """Parsed, timezone-aware timestamp."""
        return parse_timestamp(self.timestamp)


class Hotspot(BaseModel):
    """Point of elevated crowd intensity detected by the simulation."""

    location: str = Field(..., description="Named location")

    intensity: float = Field(..., ge=0.0, le=1.0, description="Intensity [0, 1]")

    x: Optional[float] = Field(default=None, description="Map X (unused by rules)")

    y: Optional[float] = Field(default=None, description="Map Y (unused by rules)")


class SimulationSnapshot(BaseModel):
    """Subset of a simulation result consumed by the recommendation engine."""

    crowd_density: List[DensitySample] = Field(
        default_factory=list,
        alias="crowdDensity",
    )

    hotspots: List[Hotspot] = Field(default_factory=list)

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "crowdDensity": [
                    {"timestamp": "2025-03-01T18:00:00Z", "location": "Main Entrance", "density": 0.62},
                    {"timestamp": "2025-03-01T18:15:00Z", "location": "Main Entrance", "density": 0.95},
                ],
                "hotspots": [
                    {"x": 42.0, "y": 18.5, "intensity": 0.87, "location": "Gate B"},
                ],
            }
        }
