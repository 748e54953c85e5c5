"""Corner analysis: finds tiles that wrap from the back wall onto a side wall."""

from __future__ import annotations
import logging

from tilelayout.models import (
    CornerPair, ShowerContext, Tile, WallLayout, WallName,
)

logger = logging.getLogger(__name__)


class CornerAnalyzer:
    """Detects corner pairs between the back wall and each side wall."""

    def analyze(self, context: ShowerContext) -> None:
        """Run the corner pass and populate the context."""
        context.corner_pairs = identify_corner_pairs(
            context.back, context.left, context.right,
        )


def identify_corner_pairs(
    back: WallLayout,
    left: WallLayout,
    right: WallLayout,
) -> list[CornerPair]:
    """
    Pair back wall edge cuts with the complementary side wall cuts.

    Side walls share the back wall's rows and continue its grid across
    the seam, so a back tile cut on its left edge and a left wall tile
    cut on its right edge in the same row are one physical tile. The
    right corner mirrors this.
    """
    back_left_by_row: dict[int, Tile] = {}
    back_right_by_row: dict[int, Tile] = {}

    for tile in back.tiles:
        if tile.cut_info.left > 0:
            back_left_by_row[tile.row] = tile
        if tile.cut_info.right > 0:
            back_right_by_row[tile.row] = tile

    pairs: list[CornerPair] = []
    pairs.extend(_pair_edge(left.tiles, back_left_by_row, WallName.LEFT, "right"))
    pairs.extend(_pair_edge(right.tiles, back_right_by_row, WallName.RIGHT, "left"))

    _warn_double_corners(pairs)
    return pairs


def _pair_edge(
    side_tiles: list[Tile],
    back_by_row: dict[int, Tile],
    side: WallName,
    seam_edge: str,
) -> list[CornerPair]:
    pairs: list[CornerPair] = []
    for tile in side_tiles:
        if getattr(tile.cut_info, seam_edge) <= 0:
            continue
        back_tile = back_by_row.get(tile.row)
        if back_tile is None:
            continue
        pairs.append(CornerPair(
            back_tile=back_tile,
            side_tile=tile,
            walls=(WallName.BACK, side),
        ))
    return pairs


def _warn_double_corners(pairs: list[CornerPair]) -> None:
    """A back tile spanning both corners is paired twice; flag it."""
    seen: dict[tuple, WallName] = {}
    for pair in pairs:
        key = pair.back_tile.key
        if key in seen and seen[key] != pair.side:
            logger.warning(
                "Back tile row=%d col=%d wraps both corners; counted as two pairs",
                key[1], key[2],
            )
        seen[key] = pair.side
