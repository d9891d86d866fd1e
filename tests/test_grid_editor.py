"""
Grid Layout Editor Tests
========================

Tests for the rows x cols rectangular layout.
"""

import pytest

from venue_engine.editor import GridLayoutEditor
from venue_engine.geometry import polygon_area, polygon_bounds
from venue_engine.models.layout import LayoutLimits


class TestGridLayout:
    """Tests for grid generation."""

    def test_default_grid(self):
        editor = GridLayoutEditor()
        document = editor.to_document()

        assert document.sections == 24
        assert document.layers == 1
        assert document.exits == 0

    def test_ids_are_unique_and_positional(self):
        zones = GridLayoutEditor(rows=3, cols=8).zones
        ids = [z.id for z in zones]

        assert len(set(ids)) == 24
        assert ids[0] == "R1C1"
        assert ids[8] == "R2C1"
        assert ids[-1] == "R3C8"
        assert zones[0].name == "R1·C1"

    def test_cells_tile_inset_box(self):
        """Cell areas sum to the inset box area."""
        zones = GridLayoutEditor(rows=3, cols=8, inset=5).zones

        total = sum(polygon_area(z.points) for z in zones)
        assert total == pytest.approx(90 * 52.5)

    def test_cells_do_not_overlap(self):
        bounds = [polygon_bounds(z.points) for z in GridLayoutEditor(rows=3, cols=4).zones]

        for i, (ax0, ay0, ax1, ay1) in enumerate(bounds):
            for bx0, by0, bx1, by1 in bounds[i + 1:]:
                overlap_x = min(ax1, bx1) - max(ax0, bx0)
                overlap_y = min(ay1, by1) - max(ay0, by0)
                assert overlap_x <= 1e-9 or overlap_y <= 1e-9

    def test_all_zones_single_layer(self):
        assert {z.layer for z in GridLayoutEditor(rows=2, cols=5).zones} == {1}


class TestGridClamping:
    """Tests for out-of-range rows and columns."""

    def test_constructor_clamps(self):
        editor = GridLayoutEditor(rows=0, cols=100)

        assert editor.rows == 1
        assert editor.cols == 30
        assert len(editor.zones) == 30

    def test_setters_return_applied_value(self):
        editor = GridLayoutEditor()

        assert editor.set_rows(50) == 20
        assert editor.set_cols(-3) == 1
        assert len(editor.zones) == 20

    def test_custom_limits(self):
        limits = LayoutLimits(rows_max=4, cols_max=4)
        editor = GridLayoutEditor(rows=10, cols=10, limits=limits)

        assert (editor.rows, editor.cols) == (4, 4)


class TestGridRegeneration:
    """Tests for replace-all regeneration."""

    def test_resize_replaces_zones(self):
        editor = GridLayoutEditor(rows=3, cols=8)
        editor.resize(2, 2)

        assert [z.id for z in editor.zones] == ["R1C1", "R1C2", "R2C1", "R2C2"]

    def test_emits_on_every_change(self, documents):
        editor = GridLayoutEditor(on_change=documents.append)
        editor.set_rows(4)
        editor.set_cols(2)

        assert [d.sections for d in documents] == [24, 32, 8]

    def test_export_filename(self):
        assert GridLayoutEditor().export_filename(42) == "rect-map-42.json"

    def test_resize_returns_applied_counts(self):
        editor = GridLayoutEditor()

        assert editor.resize(0, 100) == (1, 30)
        assert len(editor.zones) == 30
