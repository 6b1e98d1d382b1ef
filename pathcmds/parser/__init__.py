"""SVG path data parser: scanner → interpreter → output transform."""

from pathcmds.parser.errors import (
    MalformedNumberError,
    PathDataError,
    UnsupportedCommandError,
    UnsupportedFeatureError,
)
from pathcmds.parser.interpreter import SUPPORTED_COMMANDS, parse_path_data, reflect
from pathcmds.parser.scanner import PathScanner, is_command_letter
from pathcmds.parser.transform import PathTransform

__all__ = [
    "MalformedNumberError",
    "PathDataError",
    "UnsupportedCommandError",
    "UnsupportedFeatureError",
    "SUPPORTED_COMMANDS",
    "parse_path_data",
    "reflect",
    "PathScanner",
    "is_command_letter",
    "PathTransform",
]
