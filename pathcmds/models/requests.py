"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathcmds.parser import PathTransform


class TransformOptions(BaseModel):
    scale_x: float = Field(default=1.0, description="Multiplies every output x")
    scale_y: float = Field(default=1.0, description="Multiplies every output y")
    flip_y: bool = Field(default=False, description="Negate y before scaling")
    offset_x: float = Field(default=0.0, description="Added to every output x")
    offset_y: float = Field(default=0.0, description="Added to every output y")

    def to_transform(self) -> PathTransform:
        return PathTransform(**self.model_dump())


class ParseRequest(BaseModel):
    d: str = Field(..., description="SVG path data string")
    transform: TransformOptions = Field(default_factory=TransformOptions)


class ParseSvgRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    transform: TransformOptions = Field(default_factory=TransformOptions)
    skip_invalid: bool = Field(
        default=False,
        description="Leave out paths that fail to parse instead of rejecting the request",
    )
