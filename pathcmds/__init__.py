"""pathcmds — SVG path data to normalized drawing commands."""

from pathcmds.models.commands import Close, Command, CubicCurve, Line, Move, QuadraticCurve
from pathcmds.parser import (
    MalformedNumberError,
    PathDataError,
    PathTransform,
    UnsupportedCommandError,
    UnsupportedFeatureError,
    parse_path_data,
)

__version__ = "0.1.0"

__all__ = [
    "Close",
    "Command",
    "CubicCurve",
    "Line",
    "Move",
    "QuadraticCurve",
    "MalformedNumberError",
    "PathDataError",
    "PathTransform",
    "UnsupportedCommandError",
    "UnsupportedFeatureError",
    "parse_path_data",
]
