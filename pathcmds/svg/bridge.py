"""Bridge from command records to svgpathtools geometry and numpy point arrays."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, Line as LineSegment, Path, QuadraticBezier

from pathcmds.models.commands import Close, Command, CubicCurve, Line, Move, QuadraticCurve
from pathcmds.utils.geometry import bbox, winding_direction


def split_contours(commands: Sequence[Command]) -> list[list[Command]]:
    """One list per subpath, each starting at its Move.

    Drawing commands that appear before any Move start a contour at the origin.
    """
    contours: list[list[Command]] = []
    current: list[Command] = []
    for cmd in commands:
        if isinstance(cmd, Move) and current:
            contours.append(current)
            current = []
        current.append(cmd)
    if current:
        contours.append(current)
    return contours


def to_svgpathtools(commands: Sequence[Command]) -> Path:
    """Build an svgpathtools Path (complex coordinates) from command records.

    Close adds a closing line only when the pen is away from the subpath start.
    """
    segments = []
    pos = start = 0j
    for cmd in commands:
        if isinstance(cmd, Move):
            pos = start = complex(cmd.x, cmd.y)
        elif isinstance(cmd, Line):
            end = complex(cmd.x, cmd.y)
            segments.append(LineSegment(pos, end))
            pos = end
        elif isinstance(cmd, QuadraticCurve):
            end = complex(cmd.x, cmd.y)
            segments.append(QuadraticBezier(pos, complex(cmd.cx, cmd.cy), end))
            pos = end
        elif isinstance(cmd, CubicCurve):
            end = complex(cmd.x, cmd.y)
            segments.append(
                CubicBezier(pos, complex(cmd.cx1, cmd.cy1), complex(cmd.cx2, cmd.cy2), end)
            )
            pos = end
        elif isinstance(cmd, Close):
            if pos != start:
                segments.append(LineSegment(pos, start))
            pos = start
    return Path(*segments)


def sample_points(commands: Sequence[Command], samples_per_segment: int = 12) -> NDArray[np.float64]:
    """Nx2 array of points along the path, segment by segment.

    Each segment contributes ``samples_per_segment`` points after its start;
    the start of the first segment in each contour is included once.
    """
    if samples_per_segment < 1:
        raise ValueError("samples_per_segment must be >= 1")

    ts = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
    points: list[tuple[float, float]] = []
    for contour in split_contours(commands):
        path = to_svgpathtools(contour)
        for i, seg in enumerate(path):
            if i == 0:
                points.append((seg.start.real, seg.start.imag))
            for t in ts:
                pt = seg.point(t)
                points.append((pt.real, pt.imag))

    if not points:
        return np.empty((0, 2))
    return np.array(points, dtype=np.float64)


def contour_windings(commands: Sequence[Command], samples_per_segment: int = 12) -> list[int]:
    """Winding per contour: 1 = CCW, -1 = CW, 0 = degenerate (in the output frame)."""
    return [
        winding_direction(sample_points(contour, samples_per_segment))
        for contour in split_contours(commands)
    ]


def path_bbox(commands: Sequence[Command]) -> tuple[float, float, float, float]:
    """Exact (xmin, ymin, xmax, ymax) of the drawn segments.

    A path with no segments (moves only) falls back to its Move points.
    """
    path = to_svgpathtools(commands)
    if len(path) == 0:
        pts = np.array([p for cmd in commands for p in cmd.points()], dtype=np.float64)
        return bbox(pts.reshape(-1, 2))
    xmin, xmax, ymin, ymax = path.bbox()
    return (float(xmin), float(ymin), float(xmax), float(ymax))
