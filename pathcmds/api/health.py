"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathcmds import __version__
from pathcmds.models.responses import HealthResponse
from pathcmds.parser import SUPPORTED_COMMANDS

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_supported=list(SUPPORTED_COMMANDS),
    )
