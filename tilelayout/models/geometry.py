"""Geometric primitives for wall-local tile placement."""

from __future__ import annotations
from pydantic import BaseModel


class Rect(BaseModel):
    """Axis-aligned rectangle in wall-local inches (origin top-left)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, width: float, height: float, eps: float = 0.0) -> bool:
        """True if any part of this rect lies inside [0, width] x [0, height]."""
        return (
            self.x < width - eps
            and self.y < height - eps
            and self.right > eps
            and self.bottom > eps
        )

    def clip(self, width: float, height: float) -> Rect:
        """Clip to the [0, width] x [0, height] wall rectangle."""
        left = max(0.0, self.x)
        top = max(0.0, self.y)
        return Rect(
            x=left,
            y=top,
            width=min(width, self.right) - left,
            height=min(height, self.bottom) - top,
        )


class CutInfo(BaseModel):
    """Amount trimmed from each side of a tile. Zero means uncut."""
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    @property
    def is_cut(self) -> bool:
        return any(v > 0 for v in (self.left, self.right, self.top, self.bottom))

    @classmethod
    def between(cls, outer: Rect, inner: Rect, eps: float = 0.0) -> CutInfo:
        """Distances from each edge of `outer` in to the matching edge of `inner`."""

        def amount(d: float) -> float:
            return d if d > eps else 0.0

        return cls(
            left=amount(inner.x - outer.x),
            right=amount(outer.right - inner.right),
            top=amount(inner.y - outer.y),
            bottom=amount(outer.bottom - inner.bottom),
        )
