"""
Layout Editor Base
==================

Shared behaviour of the layout editors: zone/exit ownership, document
export and change notification.

Every mutating transition ends in ``recompute()``, which rebuilds the
VenueMapDocument and hands it to the ``on_change`` listener. Callers can
also ask for the current document at any time via ``to_document()``.
"""

import logging
import time
from typing import Callable, List, Optional

from venue_engine.geometry.shapes import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from venue_engine.models.geometry import Exit, VenueMapDocument, Zone


logger = logging.getLogger(__name__)


DocumentListener = Callable[[VenueMapDocument], None]


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def export_filename(kind: str, now_ms: Optional[int] = None) -> str:
    """Download name for an exported map: ``{kind}-map-{unixMillis}.json``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{kind}-map-{now_ms}.json"


class BaseLayoutEditor:
    """
    Base class for editors that own a zone and exit collection.

    Subclasses set ``kind`` and may override ``document_layers``.

    Attributes:
        document: Last document emitted by ``recompute()``
    """

    kind = "venue"

    def __init__(
        self,
        on_change: Optional[DocumentListener] = None,
        viewport_width: float = VIEWPORT_WIDTH,
        viewport_height: float = VIEWPORT_HEIGHT,
    ) -> None:
        self.on_change = on_change
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self._zones: List[Zone] = []
        self._exits: List[Exit] = []
        self.document: Optional[VenueMapDocument] = None

    @property
    def zones(self) -> List[Zone]:
        """Current zones (read-only view)."""
        return list(self._zones)

    @property
    def exits(self) -> List[Exit]:
        """Current exits (read-only view)."""
        return list(self._exits)

    def get_zone(self, zone_id: str) -> Optional[Zone]:
        for zone in self._zones:
            if zone.id == zone_id:
                return zone
        return None

    def document_layers(self) -> Optional[int]:
        """Fixed layer count for the document, or None for max zone layer."""
        return None

    def to_document(self) -> VenueMapDocument:
        """Serialize the current collections."""
        return VenueMapDocument.from_collections(
            self._zones,
            self._exits,
            layers=self.document_layers(),
        )

    def recompute(self) -> VenueMapDocument:
        """Rebuild the document and notify the listener."""
        self.document = self.to_document()
        logger.debug(
            f"{self.kind} map recomputed: sections={self.document.sections}, "
            f"layers={self.document.layers}, exits={self.document.exits}"
        )
        if self.on_change is not None:
            self.on_change(self.document)
        return self.document

    def to_json(self) -> str:
        return self.to_document().to_json()

    def export_filename(self, now_ms: Optional[int] = None) -> str:
        return export_filename(self.kind, now_ms)
