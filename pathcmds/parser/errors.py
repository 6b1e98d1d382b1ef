"""Path data parse errors. Every error aborts the whole parse."""

from __future__ import annotations


class PathDataError(ValueError):
    """Raised when a path data string cannot be turned into commands."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class MalformedNumberError(PathDataError):
    """A numeric argument was expected but none could be scanned."""


class UnsupportedFeatureError(PathDataError):
    """Elliptical arc commands (A/a) are recognized but not supported."""


class UnsupportedCommandError(PathDataError):
    """A letter outside the supported command families was found."""
