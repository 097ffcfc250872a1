"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from balcony import config
from balcony.api.routes import router
from balcony.core.errors import LayoutError, PresetNotFound

logger = logging.getLogger(__name__)


async def layout_error_handler(request: Request, exc: LayoutError) -> JSONResponse:
    logger.warning("Rejected layout request: %s", exc)
    return JSONResponse({"detail": str(exc), "error": exc.code}, status_code=422)


async def not_found_handler(request: Request, exc: PresetNotFound) -> JSONResponse:
    return JSONResponse({"detail": str(exc), "error": "not_found"}, status_code=404)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Balcony Configurator",
        description="Parametric layout engine for balcony structures",
        version="0.1.0",
    )

    # CORS: allow the configurator front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LayoutError, layout_error_handler)
    app.add_exception_handler(PresetNotFound, not_found_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
