"""
Zone Editor
===========

Free-form venue editor: rectangles, hand-drawn polygons and dragging.

Transition Table:
    any            select tool T   → T (IDLE if T was already active)
    ADD_RECTANGLE  confirm         → append default rectangle at center
    DRAW_POLYGON   canvas click    → append point to draft
    DRAW_POLYGON   confirm         → commit draft (>= 3 points) as zone
    MOVE           pointer down    → anchor zone + pointer position
    MOVE           pointer move    → translate anchored zone by delta
    MOVE           pointer up      → clear anchor
    any            reset           → clear zones, exits, draft; IDLE

Confirming with too few points is a silent no-op ("not ready yet").
Zone-changing transitions end in ``recompute()``.

Example:
    editor = ZoneEditor(on_change=store.save)
    editor.select_tool(EditorTool.DRAW_POLYGON)
    for x, y in clicks:
        editor.canvas_click(x, y)
    editor.confirm()
"""

import itertools
import logging
from typing import Optional

from venue_engine.editor.base import BaseLayoutEditor, DocumentListener
from venue_engine.editor.state import EditorState, EditorTool, next_tool
from venue_engine.geometry.regions import point_in_polygon, translate_points
from venue_engine.geometry.shapes import VIEWPORT_HEIGHT, VIEWPORT_WIDTH, rect_cell
from venue_engine.geometry.viewport import identity_surface, to_logical
from venue_engine.models.geometry import Point, SurfaceBounds, Zone


logger = logging.getLogger(__name__)


MIN_POLYGON_POINTS = 3


class ZoneEditor(BaseLayoutEditor):
    """
    Interactive editor for a collection of named, layered zones.

    The editor owns its zones exclusively; callers receive copies through
    the emitted VenueMapDocument.

    Attributes:
        state: Explicit interaction state (tool, draft, drag anchor)
        surface: Pixel bounds of the rendering surface
    """

    kind = "custom"

    def __init__(
        self,
        on_change: Optional[DocumentListener] = None,
        surface: Optional[SurfaceBounds] = None,
        rect_width: float = 12.0,
        rect_height: float = 8.0,
        viewport_width: float = VIEWPORT_WIDTH,
        viewport_height: float = VIEWPORT_HEIGHT,
    ) -> None:
        """
        Initialize an empty editor.

        Args:
            on_change: Called with the new document after every zone change
            surface: Rendering surface bounds; defaults to one pixel per unit
            rect_width: Width of rectangles added by the rectangle tool
            rect_height: Height of rectangles added by the rectangle tool
        """
        super().__init__(on_change, viewport_width, viewport_height)
        self.surface = surface or identity_surface(viewport_width, viewport_height)
        self.rect_width = rect_width
        self.rect_height = rect_height
        self.state = EditorState()
        self._ids = itertools.count(1)

    @property
    def tool(self) -> EditorTool:
        return self.state.tool

    def set_surface(self, surface: SurfaceBounds) -> None:
        """Update the surface bounds after a resize."""
        self.surface = surface

    def _to_logical(self, pixel_x: float, pixel_y: float) -> Point:
        return to_logical(
            pixel_x,
            pixel_y,
            self.surface,
            self.viewport_width,
            self.viewport_height,
        )

    # -------------------------------------------------------------------------
    # Tool selection
    # -------------------------------------------------------------------------

    def select_tool(self, tool: EditorTool) -> EditorTool:
        """
        Toggle ``tool``.

        Returns:
            The tool that is active afterwards
        """
        previous = self.state.tool
        current = next_tool(previous, tool)

        if previous == EditorTool.DRAW_POLYGON and current != EditorTool.DRAW_POLYGON:
            if self.state.draft:
                logger.debug(f"Abandoning polygon draft ({len(self.state.draft)} points)")
            self.state.clear_draft()
        self.state.clear_drag()

        self.state.tool = current
        logger.debug(f"Tool: {previous.value} → {current.value}")
        return current

    # -------------------------------------------------------------------------
    # Gestures
    # -------------------------------------------------------------------------

    def confirm(self) -> Optional[Zone]:
        """
        Confirm the active tool's pending shape.

        Returns:
            The committed zone, or None if nothing was ready
        """
        tool = self.state.tool
        if tool == EditorTool.ADD_RECTANGLE:
            return self._add_rectangle()
        elif tool == EditorTool.DRAW_POLYGON:
            return self._finish_polygon()
        return None

    def canvas_click(self, pixel_x: float, pixel_y: float) -> Optional[Point]:
        """
        Record a draft vertex when drawing.

        Returns:
            The logical point added, or None outside DRAW_POLYGON
        """
        if self.state.tool != EditorTool.DRAW_POLYGON:
            return None
        point = self._to_logical(pixel_x, pixel_y)
        self.state.draft.append(point)
        return point

    def pointer_down(
        self,
        pixel_x: float,
        pixel_y: float,
        zone_id: Optional[str] = None,
    ) -> bool:
        """
        Start dragging a zone.

        Args:
            pixel_x: Pointer X in pixels
            pixel_y: Pointer Y in pixels
            zone_id: Zone under the pointer; hit-tested when omitted

        Returns:
            True if a drag anchor was recorded
        """
        if self.state.tool != EditorTool.MOVE:
            return False

        point = self._to_logical(pixel_x, pixel_y)
        if zone_id is None:
            zone = self.zone_at(point)
        else:
            zone = self.get_zone(zone_id)
        if zone is None:
            return False

        self.state.drag_zone_id = zone.id
        self.state.drag_anchor = point
        return True

    def pointer_move(self, pixel_x: float, pixel_y: float) -> bool:
        """
        Translate the anchored zone by the pointer delta.

        Returns:
            True if a zone moved
        """
        if self.state.tool != EditorTool.MOVE or not self.state.is_dragging:
            return False

        zone = self.get_zone(self.state.drag_zone_id)
        if zone is None:
            self.state.clear_drag()
            return False

        point = self._to_logical(pixel_x, pixel_y)
        anchor = self.state.drag_anchor
        dx = point[0] - anchor[0]
        dy = point[1] - anchor[1]

        zone.points = translate_points(zone.points, dx, dy)
        self.state.drag_anchor = point
        self.recompute()
        return True

    def pointer_up(self) -> None:
        self.state.clear_drag()

    def reset(self) -> None:
        """Clear all zones, exits and draft state and return to IDLE."""
        self._zones = []
        self._exits = []
        self.state = EditorState()
        logger.info("Zone editor reset")
        self.recompute()

    # -------------------------------------------------------------------------
    # Direct zone edits
    # -------------------------------------------------------------------------

    def remove_zone(self, zone_id: str) -> Zone:
        """
        Remove a zone.

        Raises:
            KeyError: If no zone has ``zone_id``
        """
        zone = self.get_zone(zone_id)
        if zone is None:
            raise KeyError(zone_id)
        self._zones = [z for z in self._zones if z.id != zone_id]
        if self.state.drag_zone_id == zone_id:
            self.state.clear_drag()
        self.recompute()
        return zone

    def set_zone_layer(self, zone_id: str, layer: int) -> Zone:
        """
        Move a zone to another layer (floored at 1).

        Raises:
            KeyError: If no zone has ``zone_id``
        """
        zone = self.get_zone(zone_id)
        if zone is None:
            raise KeyError(zone_id)
        zone.layer = max(1, layer)
        self.recompute()
        return zone

    def zone_at(self, point: Point) -> Optional[Zone]:
        """Top-most (last drawn) zone containing ``point``."""
        for zone in reversed(self._zones):
            if point_in_polygon(point, zone.points):
                return zone
        return None

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _add_rectangle(self) -> Zone:
        w, h = self.rect_width, self.rect_height
        x = self.viewport_width / 2 - w / 2
        y = self.viewport_height / 2 - h / 2
        zone = Zone(
            id=f"rect-{next(self._ids)}",
            name=f"Rect {len(self._zones) + 1}",
            layer=1,
            points=rect_cell(x, y, w, h),
        )
        self._zones.append(zone)
        logger.info(f"Added rectangle zone {zone.id}")
        self.recompute()
        return zone

    def _finish_polygon(self) -> Optional[Zone]:
        if len(self.state.draft) < MIN_POLYGON_POINTS:
            return None
        zone = Zone(
            id=f"poly-{next(self._ids)}",
            name=f"Custom {len(self._zones) + 1}",
            layer=1,
            points=list(self.state.draft),
        )
        self._zones.append(zone)
        self.state.clear_draft()
        logger.info(f"Added polygon zone {zone.id} ({len(zone.points)} points)")
        self.recompute()
        return zone
