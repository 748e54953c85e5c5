"""Wall layout engine: places a tile grid on one wall.

The back wall is centred so the edge cuts on opposite sides match.
Side walls take the back wall's grid origin and shift it so their
courses continue around the corner without a break.
"""

from __future__ import annotations
import logging
import math

from tilelayout.core.errors import LayoutValidationError
from tilelayout.core.registry import PatternRegistry, create_default_registry
from tilelayout.models import (
    AlignmentReference, CutInfo, Rect, Tile, TilePattern, WallLayout,
    WallName, WrapDirection,
)

logger = logging.getLogger(__name__)

# Whole pitch steps generated past the wall on every side
GRID_MARGIN = 2

# Float noise below this is treated as touching, not overlapping
EPSILON = 1e-9

_default_registry: PatternRegistry | None = None


def _get_default_registry() -> PatternRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def compute_wall_layout(
    wall_width: float,
    wall_height: float,
    tile_width: float,
    tile_height: float,
    grout_spacing: float,
    pattern: TilePattern | str,
    alignment: AlignmentReference | None = None,
    *,
    wall: WallName | None = None,
    registry: PatternRegistry | None = None,
) -> WallLayout:
    """
    Compute the tile grid for a single wall.

    With no `alignment` the grid is centred on the wall. Otherwise the
    vertical offset is copied from the reference and the horizontal
    offset is chosen so the grid runs continuously across the corner
    seam named by `alignment.wrap_direction`.

    Raises LayoutValidationError for non-positive dimensions or
    negative grout spacing.
    """
    _validate(wall_width, wall_height, tile_width, tile_height, grout_spacing)

    if wall is None:
        wall = alignment.wrap_direction.wall if alignment else WallName.BACK
    rule = (registry or _get_default_registry()).resolve(TilePattern.coerce(pattern))

    pitch_x = tile_width + grout_spacing
    pitch_y = tile_height + grout_spacing

    if alignment is None:
        start_x = _centered_offset(wall_width, pitch_x, grout_spacing)
        start_y = _centered_offset(wall_height, pitch_y, grout_spacing)
    else:
        start_y = alignment.start_y
        if alignment.wrap_direction == WrapDirection.LEFT:
            # This wall's right edge meets the back wall's left edge
            start_x = alignment.start_x - wall_width
        else:
            # This wall's left edge meets the back wall's right edge
            start_x = alignment.start_x + alignment.reference_width

    # Extra column on the left absorbs the pattern stagger (< one pitch)
    col_start = math.floor(start_x / pitch_x) - GRID_MARGIN - 1
    col_end = math.ceil((start_x + wall_width) / pitch_x) + GRID_MARGIN
    row_start = math.floor(start_y / pitch_y) - GRID_MARGIN
    row_end = math.ceil((start_y + wall_height) / pitch_y) + GRID_MARGIN

    tiles: list[Tile] = []
    full_tiles = 0
    cut_tiles = 0

    for row in range(row_start, row_end + 1):
        offset_x = rule.row_offset(row, pitch_x)
        y = row * pitch_y - start_y
        for col in range(col_start, col_end + 1):
            placed = Rect(
                x=col * pitch_x + offset_x - start_x,
                y=y,
                width=tile_width,
                height=tile_height,
            )
            if not placed.intersects(wall_width, wall_height, EPSILON):
                continue

            visible = placed.clip(wall_width, wall_height)
            cut_info = CutInfo.between(placed, visible, EPSILON)
            is_cut = cut_info.is_cut
            if is_cut:
                cut_tiles += 1
            else:
                full_tiles += 1

            tiles.append(Tile(
                wall=wall,
                row=row,
                col=col,
                x=visible.x,
                y=visible.y,
                width=visible.width,
                height=visible.height,
                full_width=tile_width,
                full_height=tile_height,
                cut_info=cut_info,
                is_cut=is_cut,
            ))

    logger.debug(
        "%s wall %.3fx%.3f: %d tiles (%d full, %d cut), start=(%.4f, %.4f)",
        wall.value, wall_width, wall_height,
        len(tiles), full_tiles, cut_tiles, start_x, start_y,
    )

    return WallLayout(
        wall=wall,
        tiles=tiles,
        total_tiles=len(tiles),
        full_tiles=full_tiles,
        cut_tiles=cut_tiles,
        wall_width=wall_width,
        wall_height=wall_height,
        start_x=start_x,
        start_y=start_y,
        grid_columns=col_end - col_start + 1,
        grid_rows=row_end - row_start + 1,
    )


def _centered_offset(wall_size: float, pitch: float, grout_spacing: float) -> float:
    """Offset that splits the overhanging tile evenly between both edges."""
    # Tolerance keeps float noise on an exact fit from adding a step
    steps = math.ceil(wall_size / pitch - EPSILON)
    # The last joint past the final tile is not part of the covered extent
    extent = steps * pitch - grout_spacing
    return (extent - wall_size) / 2


def _validate(
    wall_width: float,
    wall_height: float,
    tile_width: float,
    tile_height: float,
    grout_spacing: float,
) -> None:
    for name, value in (
        ("wall_width", wall_width),
        ("wall_height", wall_height),
        ("tile_width", tile_width),
        ("tile_height", tile_height),
    ):
        if not math.isfinite(value):
            raise LayoutValidationError(name, value, "must be finite")
        if not value > 0:
            raise LayoutValidationError(name, value)
    if not math.isfinite(grout_spacing):
        raise LayoutValidationError("grout_spacing", grout_spacing, "must be finite")
    if not grout_spacing >= 0:
        raise LayoutValidationError("grout_spacing", grout_spacing, "must not be negative")
