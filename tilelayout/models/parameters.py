"""Tile and shower parameters, plus run configuration."""

from __future__ import annotations
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from .wall import WallSpec

logger = logging.getLogger(__name__)


class TilePattern(str, Enum):
    BRICK_50 = "brick-50"   # Half offset running bond
    BRICK_33 = "brick-33"   # Third offset running bond
    STRAIGHT = "straight"   # Stacked grid

    @classmethod
    def coerce(cls, value: Any) -> TilePattern:
        """Map any value onto a known pattern; unknown values become straight."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unknown tile pattern %r, using straight", value)
            return cls.STRAIGHT


class TileSpec(BaseModel):
    """Tile size, grout joint and laying pattern shared by all walls."""
    width: float
    height: float
    grout_spacing: float = 0.0
    pattern: TilePattern = TilePattern.STRAIGHT

    @field_validator("pattern", mode="before")
    @classmethod
    def coerce_pattern(cls, v: Any) -> TilePattern:
        return TilePattern.coerce(v)


class ShowerParams(BaseModel):
    """User-adjustable shower and tile dimensions (inches)."""
    shower_width: float = 36.0      # Back wall width
    shower_height: float = 96.0     # Shared by all three walls
    shower_depth: float = 36.0      # Side wall width
    tile_width: float = 3.0
    tile_height: float = 6.0
    grout_spacing: float = 0.125
    pattern: TilePattern = TilePattern.BRICK_50

    @field_validator("pattern", mode="before")
    @classmethod
    def coerce_pattern(cls, v: Any) -> TilePattern:
        return TilePattern.coerce(v)

    @property
    def back_wall(self) -> WallSpec:
        return WallSpec(width=self.shower_width, height=self.shower_height)

    @property
    def side_wall(self) -> WallSpec:
        """Left and right walls run the depth of the shower."""
        return WallSpec(width=self.shower_depth, height=self.shower_height)

    @property
    def tile(self) -> TileSpec:
        return TileSpec(
            width=self.tile_width,
            height=self.tile_height,
            grout_spacing=self.grout_spacing,
            pattern=self.pattern,
        )


class LayoutConfig(BaseModel):
    """Controls numbering and purchase estimation."""
    use_ledger_board: bool = False  # Bottom row installed last, numbered L1, L2...
    waste_percent: int = 10         # Overage added to the purchase estimate
