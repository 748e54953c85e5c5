"""High-level layout service: facade for the API layer."""

from __future__ import annotations
import logging

from tilelayout.models import ShowerParams, LayoutConfig, ShowerLayoutResult
from tilelayout.core.generator import ShowerLayoutGenerator
from tilelayout.core.registry import PatternRegistry, create_default_registry

logger = logging.getLogger(__name__)


class LayoutService:
    """Delegates to the generator and logs a summary of each run."""

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = ShowerLayoutGenerator(self.registry)

    def generate(
        self,
        params: ShowerParams | None = None,
        config: LayoutConfig | None = None,
    ) -> ShowerLayoutResult:
        if params is None:
            params = ShowerParams()
        if config is None:
            config = LayoutConfig()

        result = self.generator.generate(params, config)
        logger.info(
            "Layout %gx%gx%g with %gx%g %s tiles: %d placed, %d corner pairs, buy %d",
            params.shower_width, params.shower_height, params.shower_depth,
            params.tile_width, params.tile_height, params.pattern.value,
            result.total_tiles, len(result.corner_pairs),
            result.recommended_purchase,
        )
        return result

    def list_patterns(self) -> list[dict[str, str]]:
        return [
            {"id": p.get_id(), "name": p.get_name()}
            for p in self.registry.list_patterns()
        ]
