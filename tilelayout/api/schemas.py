"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from tilelayout.models import ShowerParams, LayoutConfig, ShowerLayoutResult


class LayoutRequest(BaseModel):
    """Request body for the /layout endpoint."""
    params: ShowerParams = ShowerParams()
    config: LayoutConfig = LayoutConfig()


class LayoutResponse(BaseModel):
    """Response from the /layout endpoint."""
    layout: ShowerLayoutResult
    cut_lists: dict[str, list[str]]


class PatternInfo(BaseModel):
    id: str
    name: str
