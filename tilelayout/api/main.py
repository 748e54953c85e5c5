"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tilelayout import config
from tilelayout.api.routes import router
from tilelayout.core.errors import LayoutValidationError


async def _validation_error_handler(request: Request, exc: LayoutValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shower Tile Layout",
        description="Tile grid, corner wrap and install order for three-wall showers",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LayoutValidationError, _validation_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
