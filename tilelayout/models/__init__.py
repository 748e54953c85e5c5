from .geometry import Rect, CutInfo
from .wall import WallName, WrapDirection, WallSpec, AlignmentReference
from .parameters import TilePattern, TileSpec, ShowerParams, LayoutConfig
from .tiling import (
    Tile, WallLayout, CornerPair, ShowerLayoutResult, InstallNumber, TileKey,
)
from .context import ShowerContext

__all__ = [
    "Rect", "CutInfo",
    "WallName", "WrapDirection", "WallSpec", "AlignmentReference",
    "TilePattern", "TileSpec", "ShowerParams", "LayoutConfig",
    "Tile", "WallLayout", "CornerPair", "ShowerLayoutResult",
    "InstallNumber", "TileKey",
    "ShowerContext",
]
