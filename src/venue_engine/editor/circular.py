"""
Circular Layout Editor
======================

Stadium editor: concentric ring layers split into angular sections, plus
gates placed on the perimeter.

Layout:
    Ring radii come from ``compute_ring_pack(layers)``. Layer ``li``
    (0-based) is split into ``S`` sections of ``360 / S`` degrees each,
    starting at -90° (top of the viewport) and trimmed by the angular gap
    on both ends. Zone id ``L{li+1}-S{s+1}``, name ``S{s+1}``.

Sections Per Layer:
    Initially the innermost layer has 1 section and every other layer 4.
    Adding layers appends 4-section layers; removing layers truncates.
    All counts are clamped to the configured limits.

Gates:
    A fixed set of candidate positions sits just outside the outer ring.
    A click within the snap radius of a candidate toggles a gate there;
    clicks farther away are ignored.
"""

import itertools
import logging
import math
from typing import List, Optional, Tuple

from venue_engine.models.layout import LayoutLimits
from venue_engine.editor.base import BaseLayoutEditor, DocumentListener, clamp
from venue_engine.geometry.shapes import (
    CIRCLE_MARGIN,
    DEFAULT_RING_GAP,
    DEFAULT_VOID_RATIO,
    MIN_VOID_RADIUS,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
    candidate_gate_positions,
    compute_ring_pack,
    gate_marker_points,
    ring_sector_points,
)
from venue_engine.geometry.viewport import identity_surface, to_logical
from venue_engine.models.geometry import Exit, Point, RingPack, SurfaceBounds, Zone


logger = logging.getLogger(__name__)


FIRST_LAYER_SECTIONS = 1
DEFAULT_LAYER_SECTIONS = 4


class CircularLayoutEditor(BaseLayoutEditor):
    """
    Editor for ring/section stadium layouts with perimeter gates.

    Attributes:
        layers: Number of rings
        sections_per_layer: Section count for each ring, innermost first
    """

    kind = "circular"

    def __init__(
        self,
        layers: int = 2,
        limits: Optional[LayoutLimits] = None,
        on_change: Optional[DocumentListener] = None,
        surface: Optional[SurfaceBounds] = None,
        void_ratio: float = DEFAULT_VOID_RATIO,
        gap: float = DEFAULT_RING_GAP,
        margin: float = CIRCLE_MARGIN,
        min_void: float = MIN_VOID_RADIUS,
        angular_gap: float = 2.0,
        sector_steps: int = 18,
        gate_candidates: int = 16,
        gate_offset: float = 0.8,
        gate_snap_radius: float = 2.5,
        gate_width: float = 5.0,
        gate_depth: float = 2.4,
        viewport_width: float = VIEWPORT_WIDTH,
        viewport_height: float = VIEWPORT_HEIGHT,
    ) -> None:
        super().__init__(on_change, viewport_width, viewport_height)
        self.limits = limits or LayoutLimits()
        self.surface = surface or identity_surface(viewport_width, viewport_height)
        self.void_ratio = void_ratio
        self.gap = gap
        self.margin = margin
        self.min_void = min_void
        self.angular_gap = angular_gap
        self.sector_steps = sector_steps
        self.gate_candidates = gate_candidates
        self.gate_offset = gate_offset
        self.gate_snap_radius = gate_snap_radius
        self.gate_width = gate_width
        self.gate_depth = gate_depth
        self._ids = itertools.count(1)

        self.layers = clamp(layers, self.limits.layers_min, self.limits.layers_max)
        self.sections_per_layer: List[int] = [
            self._clamp_sections(FIRST_LAYER_SECTIONS if i == 0 else DEFAULT_LAYER_SECTIONS)
            for i in range(self.layers)
        ]
        self._regenerate()

    # -------------------------------------------------------------------------
    # Layout parameters
    # -------------------------------------------------------------------------

    @property
    def ring_pack(self) -> RingPack:
        return compute_ring_pack(
            self.layers,
            self.void_ratio,
            self.gap,
            self.viewport_width,
            self.viewport_height,
            self.margin,
            self.min_void,
        )

    def set_layers(self, layers: int) -> int:
        """Clamp and apply a new layer count; returns the applied value."""
        self.layers = clamp(layers, self.limits.layers_min, self.limits.layers_max)
        sections = self.sections_per_layer[: self.layers]
        while len(sections) < self.layers:
            sections.append(DEFAULT_LAYER_SECTIONS)
        self.sections_per_layer = [self._clamp_sections(s) for s in sections]
        self._regenerate()
        return self.layers

    def set_sections(self, layer_index: int, sections: int) -> int:
        """
        Clamp and apply the section count of one layer.

        Args:
            layer_index: 0-based layer index
            sections: Requested section count

        Raises:
            IndexError: If ``layer_index`` is not an existing layer
        """
        if not 0 <= layer_index < self.layers:
            raise IndexError(f"layer_index {layer_index} out of range (layers={self.layers})")
        self.sections_per_layer[layer_index] = self._clamp_sections(sections)
        self._regenerate()
        return self.sections_per_layer[layer_index]

    def document_layers(self) -> int:
        return self.layers

    # -------------------------------------------------------------------------
    # Gates
    # -------------------------------------------------------------------------

    def candidate_gates(self) -> List[Tuple[float, Point]]:
        """Snap positions as ``(angle_degrees, point)`` pairs."""
        return candidate_gate_positions(
            self.ring_pack,
            self.gate_candidates,
            self.gate_offset,
        )

    def toggle_gate_at(self, pixel_x: float, pixel_y: float) -> Optional[Exit]:
        """
        Add or remove the gate nearest to a click.

        Returns:
            The added or removed Exit, or None if the click was farther
            than the snap radius from every candidate
        """
        x, y = to_logical(
            pixel_x,
            pixel_y,
            self.surface,
            self.viewport_width,
            self.viewport_height,
        )

        best = None
        for angle, point in self.candidate_gates():
            distance = math.hypot(point[0] - x, point[1] - y)
            if best is None or distance < best[0]:
                best = (distance, angle, point)

        if best is None or best[0] >= self.gate_snap_radius:
            return None

        _, angle, point = best
        for existing in self._exits:
            if existing.angle_degrees == angle:
                self._exits = [e for e in self._exits if e.id != existing.id]
                logger.info(f"Removed gate {existing.id} at {angle:.1f}°")
                self.recompute()
                return existing

        gate = Exit(
            id=f"exit-{next(self._ids)}",
            name=f"Exit {len(self._exits) + 1}",
            position=point,
            angle_degrees=angle,
        )
        self._exits.append(gate)
        logger.info(f"Added gate {gate.id} at {angle:.1f}°")
        self.recompute()
        return gate

    def gate_markers(self) -> List[Tuple[str, List[Point]]]:
        """Render polygons for the placed gates as ``(exit_id, points)``."""
        pack = self.ring_pack
        center = (pack.center_x, pack.center_y)
        return [
            (gate.id, gate_marker_points(center, gate.position, self.gate_width, self.gate_depth))
            for gate in self._exits
        ]

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _clamp_sections(self, sections: int) -> int:
        return clamp(sections, self.limits.sections_min, self.limits.sections_max)

    def _regenerate(self) -> None:
        pack = self.ring_pack
        zones = []
        for li in range(self.layers):
            inner, outer = pack.ring_bounds(li)
            count = max(1, self.sections_per_layer[li])
            step = 360 / count
            for s in range(count):
                start = -90 + s * step + self.angular_gap
                end = -90 + (s + 1) * step - self.angular_gap
                zones.append(Zone(
                    id=f"L{li + 1}-S{s + 1}",
                    name=f"S{s + 1}",
                    layer=li + 1,
                    points=ring_sector_points(
                        pack.center_x,
                        pack.center_y,
                        inner,
                        outer,
                        start,
                        end,
                        self.sector_steps,
                    ),
                ))
        self._zones = zones
        logger.debug(
            f"Rings regenerated: layers={self.layers}, sections={self.sections_per_layer}"
        )
        self.recompute()
