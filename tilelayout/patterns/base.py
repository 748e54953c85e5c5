"""Abstract base class for tile laying patterns.

Every pattern in the system implements this interface. Patterns are:
- Self-contained: each decides the horizontal stagger of a course
- Registered by id: the registry resolves a pattern name to a rule
- Pure: the offset depends only on the row index and pitch
"""

from __future__ import annotations
from abc import ABC, abstractmethod


class PatternRule(ABC):
    """
    Base class for all laying patterns.

    Subclasses implement `row_offset()`. The layout engine asks the
    resolved pattern how far each row is shifted right before placing
    its tiles.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier matching a TilePattern value (e.g., 'brick-50')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Running Bond 1/2')."""
        ...

    @abstractmethod
    def row_offset(self, row: int, pitch_x: float) -> float:
        """
        Horizontal shift applied to every tile in `row`.

        Must lie in [0, pitch_x) so the engine's one-column coverage
        margin holds.
        """
        ...
