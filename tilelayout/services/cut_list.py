"""Cut list: what to trim from each cut tile, in install order."""

from __future__ import annotations

from tilelayout.core.numbering import install_order
from tilelayout.core.units import to_fractional_inches
from tilelayout.models import ShowerLayoutResult, Tile, WallLayout

_SIDES = ("left", "right", "top", "bottom")


def describe_cut(tile: Tile) -> str:
    cut = tile.cut_info
    cuts = [
        f"{side}: {to_fractional_inches(getattr(cut, side))}"
        for side in _SIDES
        if getattr(cut, side) > 0
    ]
    number = tile.install_number if tile.install_number is not None else "?"
    return (
        f"Tile #{number}: {to_fractional_inches(tile.width)} × "
        f"{to_fractional_inches(tile.height)} (cut {', '.join(cuts)})"
    )


def build_cut_list(layout: WallLayout) -> list[str]:
    """One line per cut tile on the wall, bottom course first."""
    return [describe_cut(t) for t in install_order(layout.tiles) if t.is_cut]


def build_cut_lists(result: ShowerLayoutResult) -> dict[str, list[str]]:
    return {wall.value: build_cut_list(layout) for wall, layout in result.walls.items()}
