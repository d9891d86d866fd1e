"""
Editor State
============

Explicit interaction state for the free-form zone editor.

Tools:
    IDLE → no gesture is interpreted
    ADD_RECTANGLE → confirm appends a default rectangle
    DRAW_POLYGON → clicks collect a draft, confirm commits it
    MOVE → pointer drags translate a zone

Tool Selection:
    Selecting a tool activates it; selecting the active tool again returns
    to IDLE. Switching away from DRAW_POLYGON abandons the draft, and any
    tool switch drops an in-progress drag.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from venue_engine.models.geometry import Point


class EditorTool(str, Enum):
    """Active interaction mode of a ZoneEditor."""

    IDLE = "idle"
    ADD_RECTANGLE = "add-rectangle"
    DRAW_POLYGON = "draw-polygon"
    MOVE = "move"


def next_tool(current: EditorTool, selected: EditorTool) -> EditorTool:
    """Tool that becomes active when ``selected`` is picked in ``current``."""
    if selected == current:
        return EditorTool.IDLE
    return selected


@dataclass
class EditorState:
    """
    Per-editor interaction state.

    Attributes:
        tool: Active tool
        draft: Polygon vertices collected so far (DRAW_POLYGON only)
        drag_zone_id: Zone being dragged (MOVE only)
        drag_anchor: Last pointer position of the drag, logical units
    """

    tool: EditorTool = EditorTool.IDLE
    draft: List[Point] = field(default_factory=list)
    drag_zone_id: Optional[str] = None
    drag_anchor: Optional[Point] = None

    @property
    def is_dragging(self) -> bool:
        return self.drag_zone_id is not None and self.drag_anchor is not None

    def clear_draft(self) -> None:
        self.draft = []

    def clear_drag(self) -> None:
        self.drag_zone_id = None
        self.drag_anchor = None
