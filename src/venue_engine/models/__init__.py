"""
Data Models
===========

Pydantic models for the venue engine.

This module re-exports all data models for convenient access.

Models:
    Geometry:
        - Point: (x, y) tuple in logical viewport units
        - Zone, Exit: Editable map elements
        - VenueMapDocument: Exported venue map
        - RingPack, SurfaceBounds: Derived layout / pointer surface
        - LayoutLimits: Clamp ranges for layout counts

    Simulation:
        - DensitySample, Hotspot: Provider readings
        - SimulationSnapshot: Recommendation engine input

    Recommendation:
        - RecommendationType, Priority: Output enums
        - Recommendation: Output contract
        - RuleKind: Recommendation id prefixes
"""

from venue_engine.models.geometry import (
    Exit,
    Point,
    RingPack,
    SurfaceBounds,
    VenueMapDocument,
    Zone,
)
from venue_engine.models.layout import LayoutLimits
from venue_engine.models.simulation import DensitySample, Hotspot, SimulationSnapshot
from venue_engine.models.recommendation import Priority, Recommendation, RecommendationType
from venue_engine.models.rule_codes import RuleKind

__all__ = [
    # Geometry
    "Point",
    "Zone",
    "Exit",
    "VenueMapDocument",
    "RingPack",
    "SurfaceBounds",
    "LayoutLimits",
    # Simulation
    "DensitySample",
    "Hotspot",
    "SimulationSnapshot",
    # Recommendation
    "RecommendationType",
    "Priority",
    "Recommendation",
    "RuleKind",
]
