"""
Venue Shapes
============

Pure functions that turn venue parameters into polygon point-sets.

    - ring_sector_points: annular sector (one seating section of a ring)
    - compute_ring_pack: radii for N concentric rings in the viewport
    - rect_cell / grid_cells: axis-aligned cells and uniform grids
    - candidate_gate_positions / gate_marker_points: perimeter gates

Conventions:
    Angles are in DEGREES, 0° points along +x and angles grow towards +y
    (clockwise on screen, since Y points down).

    All functions are total over sane numeric ranges and never raise.
    Callers clamp external inputs (layer, row, column counts) before
    calling; nothing here re-validates.
"""

import math
from typing import List, Tuple

from venue_engine.models.geometry import Point, RingPack


VIEWPORT_WIDTH = 100.0
VIEWPORT_HEIGHT = 62.5

# Ring layout defaults
DEFAULT_VOID_RATIO = 0.35
DEFAULT_RING_GAP = 1.6
CIRCLE_MARGIN = 3.0
MIN_VOID_RADIUS = 4.0
MIN_RING_THICKNESS = 1.0


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def ring_sector_points(
    center_x: float,
    center_y: float,
    inner_radius: float,
    outer_radius: float,
    start_degrees: float,
    end_degrees: float,
    steps: int = 16,
) -> List[Point]:
    """
    Closed polygon approximating an annular sector.

    Samples ``steps + 1`` points along the outer arc from start to end,
    then ``steps + 1`` points along the inner arc from end back to start.
    Connected in order (and closed back to the first point) the result is
    a non-self-intersecting ring segment.

    Args:
        center_x: Ring center X
        center_y: Ring center Y
        inner_radius: Inner arc radius
        outer_radius: Outer arc radius
        start_degrees: Start angle
        end_degrees: End angle
        steps: Arc subdivisions (>= 1). Only changes interior sampling;
            the four corner vertices are identical for any value.

    Returns:
        ``2 * (steps + 1)`` points
    """
    step = (end_degrees - start_degrees) / steps
    points: List[Point] = []

    for i in range(steps + 1):
        a = _to_radians(start_degrees + i * step)
        points.append((
            center_x + outer_radius * math.cos(a),
            center_y + outer_radius * math.sin(a),
        ))

    for i in range(steps, -1, -1):
        a = _to_radians(start_degrees + i * step)
        points.append((
            center_x + inner_radius * math.cos(a),
            center_y + inner_radius * math.sin(a),
        ))

    return points


def circle_center(
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
) -> Point:
    """Center of the viewport."""
    return viewport_width / 2, viewport_height / 2


def circle_outer_radius(
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
    margin: float = CIRCLE_MARGIN,
) -> float:
    """Largest radius that keeps ``margin`` to the nearest viewport edge."""
    return min(viewport_width / 2 - margin, viewport_height / 2 - margin)


def compute_ring_pack(
    layers: int,
    void_ratio: float = DEFAULT_VOID_RATIO,
    gap: float = DEFAULT_RING_GAP,
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
    margin: float = CIRCLE_MARGIN,
    min_void: float = MIN_VOID_RADIUS,
) -> RingPack:
    """
    Fit ``layers`` concentric rings between an empty center and the edge.

    Formulas:
        outer_radius = min(W/2 - margin, H/2 - margin)
        void_radius  = max(min_void, outer_radius * void_ratio)
        usable       = outer_radius - void_radius - (layers - 1) * gap
        thickness    = max(1, usable / layers)   (0 when layers == 0)

    Thickness is floored at 1 unit so that many requested layers never
    collapse into zero-width rings. With the floor in effect the outer
    ring may extend past ``outer_radius``.

    Args:
        layers: Number of rings (already clamped by the caller)
        void_ratio: Empty center radius as a fraction of the outer radius
        gap: Spacing between consecutive rings

    Returns:
        RingPack with center, radii, thickness and gap
    """
    outer_radius = circle_outer_radius(viewport_width, viewport_height, margin)
    center_x, center_y = circle_center(viewport_width, viewport_height)
    void_radius = max(min_void, outer_radius * void_ratio)
    usable = outer_radius - void_radius - max(0, layers - 1) * gap
    thickness = max(MIN_RING_THICKNESS, usable / layers) if layers > 0 else 0.0

    return RingPack(
        center_x=center_x,
        center_y=center_y,
        outer_radius=outer_radius,
        void_radius=void_radius,
        thickness=thickness,
        gap=gap,
    )


def rect_cell(x: float, y: float, width: float, height: float) -> List[Point]:
    """Four corners of an axis-aligned rectangle, clockwise from top-left."""
    return [
        (x, y),
        (x + width, y),
        (x + width, y + height),
        (x, y + height),
    ]


def grid_cells(
    rows: int,
    cols: int,
    inset: float,
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
) -> List[Tuple[int, int, List[Point]]]:
    """
    Partition the inset bounding box into a ``rows x cols`` grid.

    Cell size is ``(dimension - 2 * inset) / count``; the divisor is
    floored at 1 so a zero count never divides by zero.

    Returns:
        ``(row, col, points)`` triples with 1-based row/col, row-major
    """
    width = viewport_width - inset * 2
    height = viewport_height - inset * 2
    cell_w = width / max(cols, 1)
    cell_h = height / max(rows, 1)

    cells = []
    for r in range(rows):
        for c in range(cols):
            cells.append((
                r + 1,
                c + 1,
                rect_cell(inset + c * cell_w, inset + r * cell_h, cell_w, cell_h),
            ))
    return cells


def candidate_gate_positions(
    ring_pack: RingPack,
    count: int = 16,
    offset: float = 0.8,
) -> List[Tuple[float, Point]]:
    """
    Evenly spaced snap positions for gates just outside the outer ring.

    Returns:
        ``(angle_degrees, point)`` pairs starting at 0° and going clockwise
    """
    radius = ring_pack.outer_radius + offset
    positions = []
    for i in range(count):
        angle = i * 360 / count
        a = _to_radians(angle)
        positions.append((
            angle,
            (
                ring_pack.center_x + radius * math.cos(a),
                ring_pack.center_y + radius * math.sin(a),
            ),
        ))
    return positions


def gate_marker_points(
    center: Point,
    position: Point,
    width: float = 5.0,
    depth: float = 2.4,
    steps: int = 4,
) -> List[Point]:
    """
    Small annular-sector polygon marking a gate on the perimeter.

    The marker is centered on ``position``: it spans ``width`` units along
    the circle through ``position`` and ``depth`` units radially.

    Args:
        center: Venue center
        position: Gate anchor
        width: Arc length of the marker
        depth: Radial extent of the marker
        steps: Arc subdivisions
    """
    dx = position[0] - center[0]
    dy = position[1] - center[1]
    radius = math.hypot(dx, dy)
    angle = math.degrees(math.atan2(dy, dx))
    half_span = math.degrees((width / 2) / radius) if radius > 0 else 180.0

    return ring_sector_points(
        center[0],
        center[1],
        max(0.0, radius - depth / 2),
        radius + depth / 2,
        angle - half_span,
        angle + half_span,
        steps,
    )
