"""
Geometry Models
===============

This module defines the venue map data model shared by the editors and
the read-only renderers.

Coordinate System:
    All points live in a fixed LOGICAL VIEWPORT of 100 x 62.5 units,
    independent of on-screen pixel size. Origin is top-left, X increases
    rightward, Y increases downward. A Point is a plain (x, y) tuple and
    is copied by value.

Supported Geometries:
    - Zone: named, layered polygon (>= 3 points)
    - Exit: gate on the venue perimeter
    - VenueMapDocument: the exported zones/exits artifact
    - RingPack: derived concentric ring layout (not stored)
    - SurfaceBounds: bounding box of the rendering surface (pixels)

Example Document:
    {
        "sections": 24,
        "layers": 1,
        "exits": 0,
        "zones": [
            {"id": "R1C1", "name": "R1·C1", "layer": 1,
             "points": [[5, 5], [16.25, 5], [16.25, 22.5], [5, 22.5]]}
        ],
        "exitsList": []
    }
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


Point = Tuple[float, float]


class Zone(BaseModel):
    """
    Named polygon region of a venue map, tagged with a layer number.

    Winding order is kept as produced; the polygon is not guaranteed convex
    and is implicitly closed (last point connects to first).

    Attributes:
        id: Unique identifier within a document
        name: Display label
        layer: Tier number, 1 = innermost / ground level
        points: Ordered polygon vertices in logical coordinates
    """

    id: str = Field(..., description="Unique zone identifier")

    name: str = Field(..., description="Human-readable label")

    layer: int = Field(default=1, ge=1, description="Layer number (>= 1)")

    points: List[Point] = Field(
        ...,
        min_length=3,
        description="Ordered polygon vertices (minimum 3)",
    )


class Exit(BaseModel):
    """
    Gate on the venue perimeter.

    Attributes:
        id: Unique identifier within a document
        name: Display label ("Exit 1", ...)
        position: Gate anchor point in logical coordinates
        angle_degrees: Bearing of the gate from the venue center, if known
    """

    id: str = Field(..., description="Unique exit identifier")

    name: str = Field(..., description="Human-readable label")

    position: Point = Field(..., description="Gate anchor (logical units)")

    angle_degrees: Optional[float] = Field(
        default=None,
        description="Bearing from the venue center in degrees (0 = +x)",
    )


class VenueMapDocument(BaseModel):
    """
    Serialized zones/exits artifact emitted by the layout editors.

    Invariants:
        sections == len(zones)
        exits == len(exits_list)

    ``exits_list`` is exchanged as ``exitsList`` on the wire.
    """

    sections: int = Field(..., ge=0, description="Number of zones")

    layers: int = Field(..., ge=1, description="Highest layer in the map")

    exits: int = Field(..., ge=0, description="Number of exits")

    zones: List[Zone] = Field(default_factory=list)

    exits_list: List[Exit] = Field(default_factory=list, alias="exitsList")

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True

    @model_validator(mode="after")
    def validate_counts(self) -> "VenueMapDocument":
        """Ensure the summary counts match the collections."""
        if self.sections != len(self.zones):
            raise ValueError(
                f"sections={self.sections} does not match {len(self.zones)} zones"
            )
        if self.exits != len(self.exits_list):
            raise ValueError(
                f"exits={self.exits} does not match {len(self.exits_list)} exits"
            )
        return self

    @classmethod
    def from_collections(
        cls,
        zones: List[Zone],
        exits: List[Exit],
        layers: Optional[int] = None,
    ) -> "VenueMapDocument":
        """
        Build a document from editor collections.

        Zones and exits are deep-copied so later editor mutations never
        leak into an already emitted document.

        Args:
            zones: Current zone collection
            exits: Current exit collection
            layers: Fixed layer count; defaults to the highest zone layer
                (1 for an empty map)
        """
        if layers is None:
            layers = max((z.layer for z in zones), default=1)
        return cls(
            sections=len(zones),
            layers=layers,
            exits=len(exits),
            zones=[z.model_copy(deep=True) for z in zones],
            exits_list=[e.model_copy(deep=True) for e in exits],
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize using the interchange field names."""
        return self.model_dump_json(indent=indent, by_alias=True, exclude_none=True)


@dataclass(frozen=True, slots=True)
class RingPack:
    """
    Concentric ring layout derived from (layers, void_ratio, gap).

    ``layers`` rings of uniform ``thickness`` separated by ``gap`` fit
    between ``void_radius`` and ``outer_radius``.
    """

    center_x: float
    center_y: float
    outer_radius: float
    void_radius: float
    thickness: float
    gap: float

    def ring_bounds(self, layer_index: int) -> Tuple[float, float]:
        """Inner and outer radius of the ring at 0-based ``layer_index``."""
        inner = self.void_radius + layer_index * (self.thickness + self.gap)
        return inner, inner + self.thickness

    def to_dict(self) -> dict:
        """Export as dictionary for serialization."""
        return {
            "center_x": self.center_x,
            "center_y": self.center_y,
            "outer_radius": self.outer_radius,
            "void_radius": self.void_radius,
            "thickness": self.thickness,
            "gap": self.gap,
        }


@dataclass(frozen=True, slots=True)
class SurfaceBounds:
    """
    Bounding box of the rendering surface in pixel space.

    Attributes:
        left: Pixel X of the surface's left edge
        top: Pixel Y of the surface's top edge
        width: Surface width in pixels
        height: Surface height in pixels
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface width and height must be positive")
