"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_supported: list[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    # Flat records: {"t": "C", "x": .., "y": .., "cx": .., "cy": .., "cx2": .., "cy2": ..}
    commands: list[dict[str, Any]] = Field(default_factory=list)
    count: int = 0
    path_data: str = ""


class ParseSvgResponse(BaseModel):
    paths: list[list[dict[str, Any]]] = Field(default_factory=list)
    viewbox: tuple[float, float, float, float] | None = None


class ErrorResponse(BaseModel):
    detail: str
    error: str
    position: int | None = None
