"""
Editor Module
=============

Layout editors that own zone/exit collections and emit VenueMapDocuments.

    - ZoneEditor: free-form rectangles, polygons and dragging
    - GridLayoutEditor: rows x cols rectangular layout
    - CircularLayoutEditor: rings, sections and perimeter gates
"""

from venue_engine.editor.base import BaseLayoutEditor, clamp, export_filename
from venue_engine.editor.circular import CircularLayoutEditor
from venue_engine.editor.custom import ZoneEditor
from venue_engine.editor.grid import GridLayoutEditor
from venue_engine.editor.state import EditorState, EditorTool, next_tool

__all__ = [
    "BaseLayoutEditor",
    "CircularLayoutEditor",
    "EditorState",
    "EditorTool",
    "GridLayoutEditor",
    "ZoneEditor",
    "clamp",
    "export_filename",
    "next_tool",
]
