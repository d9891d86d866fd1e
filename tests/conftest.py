"""
Test Configuration
==================

Pytest fixtures and test configuration for VenueEngine.
"""

import pytest


@pytest.fixture
def sample_snapshot_payload():
    """Provide a provider-shaped simulation result."""
    return {
        "eventId": "evt-42",
        "crowdDensity": [
            {"timestamp": "2025-03-01T18:00:00Z", "location": "Main Entrance", "density": 0.62},
            {"timestamp": "2025-03-01T18:00:00Z", "location": "Stage Area", "density": 0.3},
            {"timestamp": "2025-03-01T18:15:00Z", "location": "Main Entrance", "density": 0.95},
            {"timestamp": "2025-03-01T18:15:00Z", "location": "Stage Area", "density": 0.4},
            {"timestamp": "2025-03-01T18:30:00Z", "location": "Stage Area", "density": 0.6},
            {"timestamp": "2025-03-01T18:30:00Z", "location": "Food Court", "density": 0.2},
        ],
        "hotspots": [
            {"x": 42.0, "y": 18.5, "intensity": 0.87, "location": "Gate B"},
            {"x": 12.0, "y": 40.0, "intensity": 0.4, "location": "Food Court"},
        ],
        "recommendations": [],
        "scenarios": {"entry": None, "exit": None, "congestion": None},
    }


@pytest.fixture
def sample_snapshot(sample_snapshot_payload):
    """Provide a parsed SimulationSnapshot."""
    from venue_engine.models.simulation import SimulationSnapshot

    return SimulationSnapshot.model_validate(sample_snapshot_payload)


@pytest.fixture
def make_sample():
    """Factory for DensitySample with minute-based timestamps."""
    from venue_engine.models.simulation import DensitySample

    def _make(location: str, density: float, minute: int = 0) -> DensitySample:
        return DensitySample(
            timestamp=f"2025-03-01T18:{minute:02d}:00Z",
            location=location,
            density=density,
        )

    return _make


@pytest.fixture
def documents():
    """Collect documents emitted by an editor's on_change listener."""
    return []


@pytest.fixture
def zone_editor(documents):
    """Provide an empty ZoneEditor whose pixels equal logical units."""
    from venue_engine.editor import ZoneEditor

    return ZoneEditor(on_change=documents.append)
