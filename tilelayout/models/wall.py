"""Wall models: the three shower walls and cross-wall alignment."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class WallName(str, Enum):
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class WrapDirection(str, Enum):
    """Which edge of the back wall a side wall continues from."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def wall(self) -> WallName:
        return WallName(self.value)


class WallSpec(BaseModel):
    """A rectangular wall surface, in inches."""
    width: float
    height: float


class AlignmentReference(BaseModel):
    """
    Grid origin of the reference (back) wall, handed to a side wall
    so its tile courses continue around the corner.
    """
    start_x: float
    start_y: float
    wrap_direction: WrapDirection
    reference_width: float  # Width of the back wall
