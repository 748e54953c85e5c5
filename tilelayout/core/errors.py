"""Errors raised by the layout core."""

from __future__ import annotations


class LayoutValidationError(ValueError):
    """Invalid wall or tile dimensions supplied by the caller."""

    def __init__(self, field: str, value: float, requirement: str = "must be positive") -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {requirement}, got {value!r}")
