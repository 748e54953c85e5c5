"""Shower context: accumulates state during one layout pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .parameters import ShowerParams, LayoutConfig
from .tiling import WallLayout, CornerPair
from .wall import WallName


class ShowerContext(BaseModel):
    """
    Holds all state during a single shower layout pass.

    The generator lays out walls, the analyzer adds corner pairs,
    and numbering annotates the tiles in place.
    """
    # Input
    params: ShowerParams
    config: LayoutConfig = Field(default_factory=LayoutConfig)

    # Per-wall layouts (populated in back, left, right order)
    layouts: dict[WallName, WallLayout] = {}

    # Analysis results
    corner_pairs: list[CornerPair] = []

    def add_layout(self, layout: WallLayout) -> None:
        self.layouts[layout.wall] = layout

    @property
    def back(self) -> WallLayout:
        return self.layouts[WallName.BACK]

    @property
    def left(self) -> WallLayout:
        return self.layouts[WallName.LEFT]

    @property
    def right(self) -> WallLayout:
        return self.layouts[WallName.RIGHT]
