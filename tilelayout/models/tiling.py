"""Tile layout output models."""

from __future__ import annotations
from typing import Union

from pydantic import BaseModel

from .geometry import CutInfo
from .wall import AlignmentReference, WallName, WrapDirection

# Ordinary install numbers are ints; ledger (bottom row) numbers are "L1", "L2"...
InstallNumber = Union[int, str]
TileKey = tuple[WallName, int, int]


class Tile(BaseModel):
    """A single tile placement, clipped to its wall."""
    wall: WallName
    row: int
    col: int
    x: float            # Visible rectangle, wall-local inches
    y: float
    width: float
    height: float
    full_width: float   # Uncut tile size
    full_height: float
    cut_info: CutInfo = CutInfo()
    is_cut: bool = False
    install_number: InstallNumber | None = None
    corner_pair_wall: WallName | None = None  # Other wall this tile wraps onto

    @property
    def key(self) -> TileKey:
        """Stable identity of this tile across a run."""
        return (self.wall, self.row, self.col)


class WallLayout(BaseModel):
    """The tile grid computed for one wall."""
    wall: WallName
    tiles: list[Tile]
    total_tiles: int = 0
    full_tiles: int = 0
    cut_tiles: int = 0
    wall_width: float
    wall_height: float
    start_x: float      # Grid origin offset, shared coordinate system
    start_y: float
    grid_columns: int = 0   # Size of the padded generation grid
    grid_rows: int = 0

    def wrap_reference(self, direction: WrapDirection) -> AlignmentReference:
        """Alignment for a side wall continuing from this wall's edge."""
        return AlignmentReference(
            start_x=self.start_x,
            start_y=self.start_y,
            wrap_direction=direction,
            reference_width=self.wall_width,
        )


class CornerPair(BaseModel):
    """Two visible fragments of one physical tile bent around a corner."""
    back_tile: Tile
    side_tile: Tile
    walls: tuple[WallName, WallName]

    @property
    def side(self) -> WallName:
        return self.walls[1]


class ShowerLayoutResult(BaseModel):
    """Layouts for all three walls plus material totals."""
    back_wall: WallLayout
    left_wall: WallLayout
    right_wall: WallLayout
    corner_pairs: list[CornerPair] = []
    total_tiles: int = 0
    total_full_tiles: int = 0
    total_cut_tiles: int = 0
    physical_tiles: int = 0
    recommended_purchase: int = 0

    @classmethod
    def from_layouts(
        cls,
        back: WallLayout,
        left: WallLayout,
        right: WallLayout,
        corner_pairs: list[CornerPair],
        waste_percent: int = 10,
    ) -> ShowerLayoutResult:
        walls = (back, left, right)
        total = sum(w.total_tiles for w in walls)
        physical = total - len(corner_pairs)
        return cls(
            back_wall=back,
            left_wall=left,
            right_wall=right,
            corner_pairs=corner_pairs,
            total_tiles=total,
            total_full_tiles=sum(w.full_tiles for w in walls),
            total_cut_tiles=sum(w.cut_tiles for w in walls),
            physical_tiles=physical,
            # Integer ceil of physical * (1 + waste)
            recommended_purchase=-(-physical * (100 + waste_percent) // 100),
        )

    @property
    def walls(self) -> dict[WallName, WallLayout]:
        return {
            WallName.BACK: self.back_wall,
            WallName.LEFT: self.left_wall,
            WallName.RIGHT: self.right_wall,
        }
