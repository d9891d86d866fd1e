"""
Geometry Module
===============

Venue zone geometry: pure functions over the logical viewport.
"""

from venue_engine.geometry.regions import (
    point_in_polygon,
    polygon_area,
    polygon_bounds,
    polygon_centroid,
    translate_points,
)
from venue_engine.geometry.shapes import (
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
    candidate_gate_positions,
    compute_ring_pack,
    gate_marker_points,
    grid_cells,
    rect_cell,
    ring_sector_points,
)
from venue_engine.geometry.viewport import identity_surface, to_logical

__all__ = [
    "VIEWPORT_WIDTH",
    "VIEWPORT_HEIGHT",
    "ring_sector_points",
    "compute_ring_pack",
    "rect_cell",
    "grid_cells",
    "candidate_gate_positions",
    "gate_marker_points",
    "polygon_area",
    "polygon_centroid",
    "polygon_bounds",
    "point_in_polygon",
    "translate_points",
    "to_logical",
    "identity_surface",
]
