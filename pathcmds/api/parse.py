"""POST /api/parse and /api/parse-svg — path data to command records."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathcmds.config import Settings, get_settings
from pathcmds.models.requests import ParseRequest, ParseSvgRequest
from pathcmds.models.responses import ParseResponse, ParseSvgResponse
from pathcmds.parser import parse_path_data
from pathcmds.svg.extract import extract_viewbox, parse_svg_paths
from pathcmds.svg.serializer import commands_to_dicts, commands_to_path_data

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_length(text: str, settings: Settings) -> None:
    if len(text) > settings.max_path_length:
        raise HTTPException(
            status_code=413,
            detail=f"Input too long: {len(text)} chars (limit {settings.max_path_length})",
        )


@router.post("/parse", response_model=ParseResponse)
async def parse(request: ParseRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    _check_length(request.d, settings)
    # PathDataError propagates to the app-level handler (422)
    commands = parse_path_data(request.d, request.transform.to_transform())
    return ParseResponse(
        commands=commands_to_dicts(commands),
        count=len(commands),
        path_data=commands_to_path_data(commands, settings.default_precision),
    )


@router.post("/parse-svg", response_model=ParseSvgResponse)
async def parse_svg(
    request: ParseSvgRequest, settings: Settings = Depends(get_settings)
) -> ParseSvgResponse:
    _check_length(request.svg, settings)
    paths = parse_svg_paths(
        request.svg,
        request.transform.to_transform(),
        skip_invalid=request.skip_invalid,
    )
    return ParseSvgResponse(
        paths=[commands_to_dicts(p) for p in paths],
        viewbox=extract_viewbox(request.svg),
    )
