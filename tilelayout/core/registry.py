"""Pattern registry: stores and resolves laying patterns."""

from __future__ import annotations

from tilelayout.models import TilePattern
from tilelayout.patterns.base import PatternRule


class PatternRegistry:
    """
    Central registry for all laying patterns.

    Patterns are registered at startup. During layout, the registry
    resolves a pattern name to its rule, falling back to the straight
    stack for anything it does not know.
    """

    fallback_id: str = TilePattern.STRAIGHT.value

    def __init__(self) -> None:
        self._patterns: dict[str, PatternRule] = {}

    def register(self, pattern: PatternRule) -> None:
        """Register a laying pattern."""
        self._patterns[pattern.get_id()] = pattern

    def get_pattern(self, pattern_id: str) -> PatternRule | None:
        return self._patterns.get(pattern_id)

    def list_patterns(self) -> list[PatternRule]:
        """Return all registered patterns."""
        return list(self._patterns.values())

    def resolve(self, pattern: TilePattern | str) -> PatternRule:
        """Return the rule for `pattern`, or the fallback when unknown."""
        key = pattern.value if isinstance(pattern, TilePattern) else str(pattern)
        rule = self.get_pattern(key) or self.get_pattern(self.fallback_id)
        if rule is None:
            raise LookupError(f"No pattern registered for {key!r} and no fallback")
        return rule


def create_default_registry() -> PatternRegistry:
    """Create a registry with all standard laying patterns."""
    from tilelayout.patterns.bond import (
        StraightPattern, HalfBrickPattern, ThirdBrickPattern,
    )

    registry = PatternRegistry()
    registry.register(StraightPattern())
    registry.register(HalfBrickPattern())
    registry.register(ThirdBrickPattern())
    return registry
