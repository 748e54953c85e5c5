"""Stacked and running bond patterns."""

from __future__ import annotations

from tilelayout.patterns.base import PatternRule
from tilelayout.models import TilePattern


class StraightPattern(PatternRule):
    """Stacked grid: every course lines up."""

    def get_id(self) -> str:
        return TilePattern.STRAIGHT.value

    def get_name(self) -> str:
        return "Straight Stack"

    def row_offset(self, row: int, pitch_x: float) -> float:
        return 0.0


class HalfBrickPattern(PatternRule):
    """Running bond, odd courses shifted half a tile."""

    def get_id(self) -> str:
        return TilePattern.BRICK_50.value

    def get_name(self) -> str:
        return "Running Bond 1/2"

    def row_offset(self, row: int, pitch_x: float) -> float:
        return pitch_x / 2 if row % 2 == 1 else 0.0


class ThirdBrickPattern(PatternRule):
    """Running bond stepping a third of a tile per course."""

    def get_id(self) -> str:
        return TilePattern.BRICK_33.value

    def get_name(self) -> str:
        return "Running Bond 1/3"

    def row_offset(self, row: int, pitch_x: float) -> float:
        return (pitch_x / 3) * (row % 3)
