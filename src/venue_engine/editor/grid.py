"""
Grid Layout Editor
==================

Rectangular venue editor: a ``rows x cols`` grid covering an inset box.

Rows and columns are clamped independently to the configured limits.
Any change regenerates every zone (replace-all, no incremental diff).
Cells are labeled by 1-based position: id ``R{row}C{col}``, name
``R{row}·C{col}``.
"""

import logging
from typing import Optional, Tuple

from venue_engine.models.layout import LayoutLimits
from venue_engine.editor.base import BaseLayoutEditor, DocumentListener, clamp
from venue_engine.geometry.shapes import VIEWPORT_HEIGHT, VIEWPORT_WIDTH, grid_cells
from venue_engine.models.geometry import Zone


logger = logging.getLogger(__name__)


class GridLayoutEditor(BaseLayoutEditor):
    """Editor producing a uniform grid of single-layer zones."""

    kind = "rect"

    def __init__(
        self,
        rows: int = 3,
        cols: int = 8,
        inset: float = 5.0,
        limits: Optional[LayoutLimits] = None,
        on_change: Optional[DocumentListener] = None,
        viewport_width: float = VIEWPORT_WIDTH,
        viewport_height: float = VIEWPORT_HEIGHT,
    ) -> None:
        super().__init__(on_change, viewport_width, viewport_height)
        self.limits = limits or LayoutLimits()
        self.inset = inset
        self.rows = clamp(rows, self.limits.rows_min, self.limits.rows_max)
        self.cols = clamp(cols, self.limits.cols_min, self.limits.cols_max)
        self._regenerate()

    def set_rows(self, rows: int) -> int:
        """Clamp and apply a new row count; returns the applied value."""
        return self.resize(rows, self.cols)[0]

    def set_cols(self, cols: int) -> int:
        """Clamp and apply a new column count; returns the applied value."""
        return self.resize(self.rows, cols)[1]

    def resize(self, rows: int, cols: int) -> Tuple[int, int]:
        """Clamp and apply both counts; returns the applied ``(rows, cols)``."""
        self.rows = clamp(rows, self.limits.rows_min, self.limits.rows_max)
        self.cols = clamp(cols, self.limits.cols_min, self.limits.cols_max)
        self._regenerate()
        return self.rows, self.cols

    def document_layers(self) -> int:
        return 1

    def _regenerate(self) -> None:
        self._zones = [
            Zone(
                id=f"R{r}C{c}",
                name=f"R{r}·C{c}",
                layer=1,
                points=points,
            )
            for r, c, points in grid_cells(
                self.rows,
                self.cols,
                self.inset,
                self.viewport_width,
                self.viewport_height,
            )
        ]
        logger.debug(f"Grid regenerated: {self.rows}x{self.cols}")
        self.recompute()
