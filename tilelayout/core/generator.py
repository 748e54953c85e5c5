"""Main shower layout generator: orchestrates walls, corners and numbering."""

from __future__ import annotations

from tilelayout.models import (
    LayoutConfig, ShowerContext, ShowerLayoutResult, ShowerParams,
    WallName, WrapDirection,
)
from tilelayout.core.analyzer import CornerAnalyzer
from tilelayout.core.layout import compute_wall_layout
from tilelayout.core.numbering import InstallNumberer
from tilelayout.core.registry import PatternRegistry, create_default_registry


class ShowerLayoutGenerator:
    """
    Stateless shower layout generator.

    Lays out the back wall, wraps both side walls from it, pairs the
    corner tiles, numbers everything and totals the materials.
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = CornerAnalyzer()
        self.numberer = InstallNumberer()

    def generate(
        self,
        params: ShowerParams,
        config: LayoutConfig | None = None,
    ) -> ShowerLayoutResult:
        if config is None:
            config = LayoutConfig()

        context = ShowerContext(params=params, config=config)
        tile = params.tile
        back_spec, side_spec = params.back_wall, params.side_wall

        # Back wall is the reference, centred with no alignment
        back = compute_wall_layout(
            back_spec.width, back_spec.height,
            tile.width, tile.height, tile.grout_spacing, tile.pattern,
            None,
            wall=WallName.BACK, registry=self.registry,
        )
        context.add_layout(back)

        for direction in (WrapDirection.LEFT, WrapDirection.RIGHT):
            context.add_layout(compute_wall_layout(
                side_spec.width, side_spec.height,
                tile.width, tile.height, tile.grout_spacing, tile.pattern,
                back.wrap_reference(direction),
                wall=direction.wall, registry=self.registry,
            ))

        # Analysis phase: corner pairs
        self.analyzer.analyze(context)

        # Numbering phase: annotates tiles in place
        self.numberer.number(context)

        return ShowerLayoutResult.from_layouts(
            context.back, context.left, context.right,
            context.corner_pairs,
            waste_percent=config.waste_percent,
        )


def compute_shower_layout(
    params: ShowerParams | dict,
    config: LayoutConfig | None = None,
) -> ShowerLayoutResult:
    """Lay out all three walls of a shower with the standard patterns."""
    if isinstance(params, dict):
        params = ShowerParams(**params)
    return ShowerLayoutGenerator().generate(params, config)
