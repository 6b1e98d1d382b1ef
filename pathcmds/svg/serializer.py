"""Write command records back out as flat dicts or absolute path data."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pathcmds.models.commands import (
    COMMAND_TYPES,
    Close,
    Command,
    CubicCurve,
    Line,
    Move,
    QuadraticCurve,
)


class NonFiniteCoordinateError(ValueError):
    """A coordinate overflowed to inf or is NaN and cannot be written out."""


def _check_finite(cmd: Command) -> Command:
    for x, y in cmd.points():
        if not (math.isfinite(x) and math.isfinite(y)):
            raise NonFiniteCoordinateError(f"Non-finite coordinate in {cmd!r}")
    return cmd


def commands_to_dicts(commands: Iterable[Command]) -> list[dict[str, Any]]:
    """Flat record dicts. Raises NonFiniteCoordinateError on inf/NaN coordinates."""
    return [_check_finite(cmd).to_dict() for cmd in commands]


def commands_from_dicts(records: Iterable[Mapping[str, Any]]) -> list[Command]:
    """Inverse of ``commands_to_dicts``. Raises ValueError on an unknown ``t``."""
    commands: list[Command] = []
    for rec in records:
        kind = rec.get("t")
        if kind not in COMMAND_TYPES:
            raise ValueError(f"Unknown command record type: {kind!r}")
        if kind in ("M", "L"):
            commands.append(COMMAND_TYPES[kind](float(rec["x"]), float(rec["y"])))
        elif kind == "Q":
            commands.append(
                QuadraticCurve(float(rec["x"]), float(rec["y"]), float(rec["cx"]), float(rec["cy"]))
            )
        elif kind == "C":
            commands.append(
                CubicCurve(
                    float(rec["x"]),
                    float(rec["y"]),
                    float(rec["cx"]),
                    float(rec["cy"]),
                    float(rec["cx2"]),
                    float(rec["cy2"]),
                )
            )
        else:
            commands.append(Close())
    return commands


def format_number(value: float, precision: int | None = None) -> str:
    """Shortest text for ``value``; trailing zeros and "-0" are dropped."""
    if precision is None:
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
    else:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def commands_to_path_data(commands: Iterable[Command], precision: int | None = None) -> str:
    """Absolute path data for ``commands``.

    With ``precision=None`` the output parses back to the same records; a fixed
    precision rounds. Raises NonFiniteCoordinateError on inf/NaN coordinates.
    """

    def fmt(*values: float) -> str:
        return " ".join(format_number(v, precision) for v in values)

    parts: list[str] = []
    for cmd in commands:
        if isinstance(cmd, (Move, Line, QuadraticCurve, CubicCurve, Close)):
            _check_finite(cmd)
        if isinstance(cmd, (Move, Line)):
            parts.append(f"{cmd.kind}{fmt(cmd.x, cmd.y)}")
        elif isinstance(cmd, QuadraticCurve):
            parts.append(f"Q{fmt(cmd.cx, cmd.cy, cmd.x, cmd.y)}")
        elif isinstance(cmd, CubicCurve):
            parts.append(f"C{fmt(cmd.cx1, cmd.cy1, cmd.cx2, cmd.cy2, cmd.x, cmd.y)}")
        elif isinstance(cmd, Close):
            parts.append("Z")
        else:
            raise TypeError(f"Not a path command: {cmd!r}")
    return " ".join(parts)
