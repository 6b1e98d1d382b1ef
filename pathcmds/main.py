"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pathcmds import __version__
from pathcmds.config import configure_logging, settings
from pathcmds.models.responses import ErrorResponse
from pathcmds.parser import PathDataError
from pathcmds.svg.serializer import NonFiniteCoordinateError

load_dotenv()

configure_logging()

logger = logging.getLogger(__name__)


async def _path_data_error_handler(request: Request, exc: PathDataError) -> JSONResponse:
    logger.warning("Rejected path data on %s: %s", request.url.path, exc)
    body = ErrorResponse(detail=exc.message, error=type(exc).__name__, position=exc.position)
    return JSONResponse(status_code=422, content=body.model_dump())


async def _non_finite_error_handler(request: Request, exc: NonFiniteCoordinateError) -> JSONResponse:
    logger.warning("Rejected non-finite output on %s: %s", request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=type(exc).__name__)
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="pathcmds",
        description="SVG path data → normalized move/line/quadratic/cubic/close commands",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PathDataError, _path_data_error_handler)
    app.add_exception_handler(NonFiniteCoordinateError, _non_finite_error_handler)

    from pathcmds.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
