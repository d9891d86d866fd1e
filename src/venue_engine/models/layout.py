"""
Layout Limits
=============

Clamp ranges shared by the layout editors and the settings loader.

Values outside a range are clamped, never rejected. Editors receive a
LayoutLimits instance (or build the defaults) so that importing them
never loads the global settings.
"""

from pydantic import BaseModel, Field


class LayoutLimits(BaseModel):
    """Clamp ranges for user-supplied layout counts."""

    layers_min: int = Field(default=1, ge=1)
    layers_max: int = Field(default=8, ge=1)
    sections_min: int = Field(default=1, ge=1)
    sections_max: int = Field(default=24, ge=1)
    rows_min: int = Field(default=1, ge=1)
    rows_max: int = Field(default=20, ge=1)
    cols_min: int = Field(default=1, ge=1)
    cols_max: int = Field(default=30, ge=1)
