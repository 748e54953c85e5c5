"""Installation numbering: the order a setter lays the tiles.

Each wall is numbered bottom course first, left to right. Walls are
visited back, left, right, sharing one counter. A side tile that is
the other half of a corner tile reuses the back tile's number. With a
ledger board the bottom course is set last and gets its own L-track.
"""

from __future__ import annotations
import functools
from typing import NamedTuple

from tilelayout.models import (
    CornerPair, InstallNumber, ShowerContext, Tile, TileKey, WallLayout,
)

# Tiles within this many inches vertically share a course
ROW_TOLERANCE = 0.01


class _Counters(NamedTuple):
    next_number: int = 1
    next_ledger: int = 1


def _compare_install_order(a: Tile, b: Tile) -> int:
    if abs(a.y - b.y) > ROW_TOLERANCE:
        return -1 if a.y > b.y else 1  # Bottom course first
    if a.x != b.x:
        return -1 if a.x < b.x else 1
    return 0


def install_order(tiles: list[Tile]) -> list[Tile]:
    """Tiles sorted bottom course first, then left to right."""
    return sorted(tiles, key=functools.cmp_to_key(_compare_install_order))


def bottom_row_y(layout: WallLayout) -> float | None:
    """The y of the lowest course on a wall, or None for an empty wall."""
    if not layout.tiles:
        return None
    return max(t.y for t in layout.tiles)


def plan_install_numbers(
    back: WallLayout,
    left: WallLayout,
    right: WallLayout,
    corner_pairs: list[CornerPair],
    use_ledger_board: bool = False,
) -> dict[TileKey, InstallNumber]:
    """
    Work out every tile's install number without touching the tiles.

    Returns a map from tile key to its number. Ordinary numbers are
    ints starting at 1; ledger numbers are 'L1', 'L2', ...
    """
    inherits_from = {p.side_tile.key: p.back_tile.key for p in corner_pairs}
    ledger_y = bottom_row_y(back) if use_ledger_board else None

    numbers: dict[TileKey, InstallNumber] = {}
    counters = _Counters()

    for layout in (back, left, right):
        for tile in install_order(layout.tiles):
            counters = _number_tile(tile, numbers, counters, inherits_from, ledger_y)

    return numbers


def _number_tile(
    tile: Tile,
    numbers: dict[TileKey, InstallNumber],
    counters: _Counters,
    inherits_from: dict[TileKey, TileKey],
    ledger_y: float | None,
) -> _Counters:
    source = inherits_from.get(tile.key)
    if source is not None and source in numbers:
        numbers[tile.key] = numbers[source]
        return counters

    if ledger_y is not None and abs(tile.y - ledger_y) < ROW_TOLERANCE:
        numbers[tile.key] = f"L{counters.next_ledger}"
        return counters._replace(next_ledger=counters.next_ledger + 1)

    numbers[tile.key] = counters.next_number
    return counters._replace(next_number=counters.next_number + 1)


def assign_install_numbers(
    back: WallLayout,
    left: WallLayout,
    right: WallLayout,
    corner_pairs: list[CornerPair],
    use_ledger_board: bool = False,
) -> None:
    """Annotate tiles in place with install numbers and corner partners."""
    numbers = plan_install_numbers(back, left, right, corner_pairs, use_ledger_board)

    for layout in (back, left, right):
        for tile in layout.tiles:
            tile.install_number = numbers[tile.key]

    for pair in corner_pairs:
        pair.back_tile.corner_pair_wall = pair.side
        pair.side_tile.corner_pair_wall = pair.walls[0]


class InstallNumberer:
    """Numbering pass over a populated ShowerContext."""

    def number(self, context: ShowerContext) -> None:
        assign_install_numbers(
            context.back, context.left, context.right,
            context.corner_pairs,
            use_ledger_board=context.config.use_ledger_board,
        )
