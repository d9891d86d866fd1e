"""
VenueEngine
===========

Venue zone geometry and crowd recommendation core.

This package turns abstract venue parameters (ring layers, angular
sections, grid rows/columns, perimeter gates) into polygon geometry in a
fixed logical viewport, manages interactive zone editing, and derives
ranked crowd-management recommendations from simulated density data.

Components:
    - geometry: Ring sectors, ring packs, grid cells, gate markers
    - editor: Zone editor state machine and layout generators
    - recommendations: Threshold, hotspot and trend rules
    - models: Pydantic data model and export document

Example:
    from venue_engine.editor import GridLayoutEditor

    editor = GridLayoutEditor(rows=3, cols=8)
    print(editor.to_json())
"""

__version__ = "0.1.0"
__author__ = "Venue Engine Project"

__all__ = [
    "__version__",
]
