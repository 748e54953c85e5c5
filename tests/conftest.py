"""Shared fixtures for layout tests."""

import pytest

from tilelayout.models import ShowerParams


@pytest.fixture
def standard_params() -> ShowerParams:
    """36" x 96" x 36" shower with 3x6 subway tile, 1/8" grout, half offset."""
    return ShowerParams(
        shower_width=36, shower_height=96, shower_depth=36,
        tile_width=3, tile_height=6, grout_spacing=0.125,
        pattern="brick-50",
    )


@pytest.fixture
def straight_params(standard_params: ShowerParams) -> ShowerParams:
    """Same shower, stacked tiles."""
    return ShowerParams(**{**standard_params.model_dump(), "pattern": "straight"})
