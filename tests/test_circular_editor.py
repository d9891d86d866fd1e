"""
Circular Layout Editor Tests
============================

Tests for ring/section generation and perimeter gates.
"""

import math

import pytest

from venue_engine.editor import CircularLayoutEditor


class TestRingSections:
    """Tests for zone generation."""

    def test_default_layout(self):
        editor = CircularLayoutEditor()

        assert editor.layers == 2
        assert editor.sections_per_layer == [1, 4]
        assert [z.id for z in editor.zones] == ["L1-S1", "L2-S1", "L2-S2", "L2-S3", "L2-S4"]

    def test_sector_vertex_count(self):
        for zone in CircularLayoutEditor(sector_steps=18).zones:
            assert len(zone.points) == 38

    def test_zone_names_and_layers(self):
        zones = CircularLayoutEditor().zones

        assert zones[0].name == "S1"
        assert zones[0].layer == 1
        assert {z.layer for z in zones[1:]} == {2}

    def test_document_layers_match_editor(self):
        editor = CircularLayoutEditor(layers=3)
        document = editor.to_document()

        assert document.layers == 3
        assert document.sections == 1 + 4 + 4

    def test_innermost_ring_starts_at_void(self):
        editor = CircularLayoutEditor()
        pack = editor.ring_pack
        zone = editor.zones[0]

        distances = [math.hypot(x - pack.center_x, y - pack.center_y) for x, y in zone.points]

        assert min(distances) == pytest.approx(pack.void_radius)
        assert max(distances) == pytest.approx(pack.void_radius + pack.thickness)

    def test_first_section_starts_at_top(self):
        """Section 1 begins just clockwise of -90 degrees."""
        editor = CircularLayoutEditor(angular_gap=2.0)
        pack = editor.ring_pack
        x, y = editor.zones[1].points[0]

        angle = math.degrees(math.atan2(y - pack.center_y, x - pack.center_x))
        assert angle == pytest.approx(-88.0)


class TestLayerAndSectionCounts:
    """Tests for clamping and per-layer section counts."""

    def test_adding_layers_appends_default_sections(self):
        editor = CircularLayoutEditor()
        assert editor.set_layers(3) == 3
        assert editor.sections_per_layer == [1, 4, 4]

    def test_removing_layers_truncates(self):
        editor = CircularLayoutEditor(layers=3)
        editor.set_sections(1, 6)

        editor.set_layers(2)
        assert editor.sections_per_layer == [1, 6]

        editor.set_layers(1)
        assert editor.sections_per_layer == [1]
        assert len(editor.zones) == 1

    def test_layers_are_clamped(self):
        editor = CircularLayoutEditor()

        assert editor.set_layers(99) == 8
        assert editor.set_layers(0) == 1

    def test_sections_are_clamped(self):
        editor = CircularLayoutEditor()

        assert editor.set_sections(1, 100) == 24
        assert editor.set_sections(1, 0) == 1
        assert len(editor.zones) == 2

    def test_invalid_layer_index(self):
        editor = CircularLayoutEditor(layers=2)

        with pytest.raises(IndexError):
            editor.set_sections(2, 4)
        with pytest.raises(IndexError):
            editor.set_sections(-1, 4)

    def test_emits_on_change(self, documents):
        editor = CircularLayoutEditor(on_change=documents.append)
        editor.set_sections(1, 8)

        assert [d.sections for d in documents] == [5, 9]


class TestGates:
    """Tests for gate toggling on the perimeter."""

    def _candidate(self, editor, angle):
        for candidate_angle, point in editor.candidate_gates():
            if candidate_angle == angle:
                return point
        raise AssertionError(f"no candidate at {angle}")

    def test_candidates(self):
        editor = CircularLayoutEditor()
        candidates = editor.candidate_gates()

        assert len(candidates) == 16
        assert [a for a, _ in candidates][:3] == [0, 22.5, 45]

    def test_click_near_candidate_adds_gate(self, documents):
        editor = CircularLayoutEditor(on_change=documents.append)
        x, y = self._candidate(editor, 0)

        gate = editor.toggle_gate_at(x + 1, y)

        assert gate.id == "exit-1"
        assert gate.name == "Exit 1"
        assert gate.angle_degrees == 0
        assert gate.position == pytest.approx((x, y))
        assert documents[-1].exits == 1

    def test_second_click_removes_gate(self):
        editor = CircularLayoutEditor()
        x, y = self._candidate(editor, 90)

        added = editor.toggle_gate_at(x, y)
        removed = editor.toggle_gate_at(x, y - 0.5)

        assert removed.id == added.id
        assert editor.exits == []

    def test_click_far_from_perimeter_is_ignored(self, documents):
        editor = CircularLayoutEditor(on_change=documents.append)
        emitted = len(documents)

        assert editor.toggle_gate_at(50, 31.25) is None
        assert editor.exits == []
        assert len(documents) == emitted

    def test_gates_survive_regeneration(self):
        editor = CircularLayoutEditor()
        editor.toggle_gate_at(*self._candidate(editor, 180))

        editor.set_layers(4)

        assert len(editor.exits) == 1
        assert editor.to_document().exits == 1

    def test_gate_markers(self):
        editor = CircularLayoutEditor()
        editor.toggle_gate_at(*self._candidate(editor, 0))
        editor.toggle_gate_at(*self._candidate(editor, 45))

        markers = editor.gate_markers()

        assert [gate_id for gate_id, _ in markers] == ["exit-1", "exit-2"]
        assert all(len(points) == 10 for _, points in markers)

    def test_document_lists_exits(self):
        editor = CircularLayoutEditor()
        editor.toggle_gate_at(*self._candidate(editor, 0))

        data = editor.to_document().model_dump(by_alias=True)

        assert data["exits"] == 1
        assert data["exitsList"][0]["name"] == "Exit 1"

    def test_export_filename(self):
        assert CircularLayoutEditor().export_filename(7) == "circular-map-7.json"
