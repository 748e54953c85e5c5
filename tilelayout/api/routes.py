"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from tilelayout.services.cut_list import build_cut_lists
from tilelayout.services.layout_service import LayoutService
from tilelayout.api.schemas import LayoutRequest, LayoutResponse, PatternInfo

router = APIRouter()

# Shared service instance
_service = LayoutService()


@router.post("/layout", response_model=LayoutResponse)
async def generate_layout(request: LayoutRequest) -> LayoutResponse:
    """Lay out the three shower walls for the given tile."""
    layout = _service.generate(request.params, request.config)

    return LayoutResponse(
        layout=layout,
        cut_lists=build_cut_lists(layout),
    )


@router.get("/patterns", response_model=list[PatternInfo])
async def list_patterns() -> list[PatternInfo]:
    """List all available laying patterns."""
    return [PatternInfo(**p) for p in _service.list_patterns()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
