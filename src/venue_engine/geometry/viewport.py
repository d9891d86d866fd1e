"""
Viewport Mapping
================

Maps pixel-space pointer events into the fixed logical viewport.

    logical_x = (pixel_x - surface.left) / surface.width  * viewport_width
    logical_y = (pixel_y - surface.top)  / surface.height * viewport_height

Editing logic only ever sees logical coordinates, so the output does not
depend on the on-screen size of the rendering surface.
"""

from venue_engine.geometry.shapes import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from venue_engine.models.geometry import Point, SurfaceBounds


def to_logical(
    pixel_x: float,
    pixel_y: float,
    surface: SurfaceBounds,
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
) -> Point:
    """Convert a pixel position on ``surface`` to logical coordinates."""
    return (
        (pixel_x - surface.left) / surface.width * viewport_width,
        (pixel_y - surface.top) / surface.height * viewport_height,
    )


def identity_surface(
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
) -> SurfaceBounds:
    """Surface whose pixels coincide with logical units."""
    return SurfaceBounds(left=0.0, top=0.0, width=viewport_width, height=viewport_height)
