"""Drawing command records emitted by the path parser.

Every record carries output-space coordinates only. The five record types
form a closed union (``Command``); consumers should match on the class:

    for cmd in commands:
        match cmd:
            case Move(x, y): pen.move_to(x, y)
            case CubicCurve(x, y, cx1, cy1, cx2, cy2): ...
            case Close(): pen.close()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class Move:
    x: float
    y: float

    kind: ClassVar[str] = "M"

    def points(self) -> list[tuple[float, float]]:
        return [(self.x, self.y)]

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.kind, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Line:
    x: float
    y: float

    kind: ClassVar[str] = "L"

    def points(self) -> list[tuple[float, float]]:
        return [(self.x, self.y)]

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.kind, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class QuadraticCurve:
    """Quadratic Bézier to (x, y) through control point (cx, cy)."""

    x: float
    y: float
    cx: float
    cy: float

    kind: ClassVar[str] = "Q"

    def points(self) -> list[tuple[float, float]]:
        return [(self.cx, self.cy), (self.x, self.y)]

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.kind, "x": self.x, "y": self.y, "cx": self.cx, "cy": self.cy}


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bézier to (x, y) through (cx1, cy1) then (cx2, cy2)."""

    x: float
    y: float
    cx1: float
    cy1: float
    cx2: float
    cy2: float

    kind: ClassVar[str] = "C"

    def points(self) -> list[tuple[float, float]]:
        return [(self.cx1, self.cy1), (self.cx2, self.cy2), (self.x, self.y)]

    def to_dict(self) -> dict[str, Any]:
        # Flat record keys: first control is cx/cy, second is cx2/cy2
        return {
            "t": self.kind,
            "x": self.x,
            "y": self.y,
            "cx": self.cx1,
            "cy": self.cy1,
            "cx2": self.cx2,
            "cy2": self.cy2,
        }


@dataclass(frozen=True)
class Close:
    kind: ClassVar[str] = "Z"

    def points(self) -> list[tuple[float, float]]:
        return []

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.kind}


Command = Union[Move, Line, QuadraticCurve, CubicCurve, Close]

COMMAND_TYPES: dict[str, type] = {
    cls.kind: cls for cls in (Move, Line, QuadraticCurve, CubicCurve, Close)
}
