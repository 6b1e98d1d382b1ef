"""Path data interpreter — SVG ``d`` string → normalized drawing commands.

Supported: M/m, L/l, H/h, V/v, C/c, S/s, Q/q, T/t, Z/z.
Rejected: A/a (pre-flatten arcs to Béziers) and any other letter.

All bookkeeping (current point, subpath start, reflection anchors) happens in
model space. The output transform is applied only when a record is built.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from pathcmds.models.commands import Close, Command, CubicCurve, Line, Move, QuadraticCurve
from pathcmds.parser.errors import PathDataError, UnsupportedCommandError, UnsupportedFeatureError
from pathcmds.parser.scanner import PathScanner
from pathcmds.parser.transform import PathTransform

logger = logging.getLogger(__name__)

Point = tuple[float, float]


def reflect(p: Point, c: Point) -> Point:
    """Reflect control point ``p`` through the current point ``c``: 2*c - p."""
    return (2 * c[0] - p[0], 2 * c[1] - p[1])


@dataclass
class _ParserState:
    """Mutable state for one parse call."""

    transform: PathTransform
    commands: list[Command] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    # Last cubic / quadratic control point, for S and T reflection
    cubic_ctrl: Point | None = None
    quad_ctrl: Point | None = None
    # Previous command letter, original case
    previous: str | None = None

    @property
    def current(self) -> Point:
        return (self.x, self.y)

    def previous_in(self, families: str) -> bool:
        return self.previous is not None and self.previous.upper() in families

    def resolve(self, x: float, y: float, relative: bool) -> Point:
        if relative:
            return (self.x + x, self.y + y)
        return (x, y)

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(Move(*self.transform.apply(x, y)))
        self.x, self.y = x, y
        self.start_x, self.start_y = x, y
        self.cubic_ctrl = self.quad_ctrl = None

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(Line(*self.transform.apply(x, y)))
        self.x, self.y = x, y
        self.cubic_ctrl = self.quad_ctrl = None

    def cubic_to(self, c1: Point, c2: Point, end: Point) -> None:
        t = self.transform.apply
        self.commands.append(CubicCurve(*t(*end), *t(*c1), *t(*c2)))
        self.x, self.y = end
        self.cubic_ctrl = c2
        self.quad_ctrl = None

    def quad_to(self, ctrl: Point, end: Point) -> None:
        t = self.transform.apply
        self.commands.append(QuadraticCurve(*t(*end), *t(*ctrl)))
        self.x, self.y = end
        self.quad_ctrl = ctrl
        self.cubic_ctrl = None

    def close(self) -> None:
        self.commands.append(Close())
        self.x, self.y = self.start_x, self.start_y
        self.cubic_ctrl = self.quad_ctrl = None


def _repetitions(scanner: PathScanner) -> Iterator[None]:
    """Yield once per argument group: the first, then again while no command letter follows."""
    yield
    while not scanner.at_command_boundary():
        yield


def _read_point(scanner: PathScanner, state: _ParserState, relative: bool) -> Point:
    x = scanner.read_number()
    y = scanner.read_number()
    return state.resolve(x, y, relative)


def _move(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    state.move_to(*_read_point(scanner, state, relative))
    # Bare pairs after the first are implicit line-tos
    while not scanner.at_command_boundary():
        state.line_to(*_read_point(scanner, state, relative))


def _line(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        state.line_to(*_read_point(scanner, state, relative))


def _horizontal(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        x = scanner.read_number()
        state.line_to(state.x + x if relative else x, state.y)


def _vertical(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        y = scanner.read_number()
        state.line_to(state.x, state.y + y if relative else y)


def _cubic(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        # All three points resolve against the same current point
        c1 = _read_point(scanner, state, relative)
        c2 = _read_point(scanner, state, relative)
        end = _read_point(scanner, state, relative)
        state.cubic_to(c1, c2, end)


def _smooth_cubic(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        c2 = _read_point(scanner, state, relative)
        end = _read_point(scanner, state, relative)
        if state.previous_in("CS") and state.cubic_ctrl is not None:
            c1 = reflect(state.cubic_ctrl, state.current)
        else:
            c1 = state.current
        state.cubic_to(c1, c2, end)
        state.previous = "S"


def _quadratic(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        ctrl = _read_point(scanner, state, relative)
        end = _read_point(scanner, state, relative)
        state.quad_to(ctrl, end)


def _smooth_quadratic(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    for _ in _repetitions(scanner):
        end = _read_point(scanner, state, relative)
        if state.previous_in("QT") and state.quad_ctrl is not None:
            ctrl = reflect(state.quad_ctrl, state.current)
        else:
            ctrl = state.current
        state.quad_to(ctrl, end)
        state.previous = "T"


def _close(scanner: PathScanner, state: _ParserState, relative: bool) -> None:
    state.close()
    if not scanner.at_command_boundary():
        raise PathDataError(
            f"coordinates after closepath at {scanner.position}", scanner.position
        )


_Handler = Callable[[PathScanner, _ParserState, bool], None]

_HANDLERS: dict[str, _Handler] = {
    "M": _move,
    "L": _line,
    "H": _horizontal,
    "V": _vertical,
    "C": _cubic,
    "S": _smooth_cubic,
    "Q": _quadratic,
    "T": _smooth_quadratic,
    "Z": _close,
}

SUPPORTED_COMMANDS = "".join(_HANDLERS)


def parse_path_data(
    d: str,
    transform: PathTransform | None = None,
    **options: float | bool,
) -> list[Command]:
    """Parse an SVG path ``d`` string into Move/Line/QuadraticCurve/CubicCurve/Close records.

    The output transform is given either as a ``PathTransform`` or as its
    keyword fields (``scale_x``, ``scale_y``, ``flip_y``, ``offset_x``,
    ``offset_y``); the default is identity.

    Raises a ``PathDataError`` subclass on the first problem; nothing is
    returned for a partially parsed path.
    """
    if transform is not None and options:
        raise TypeError("pass either a PathTransform or transform options, not both")
    if transform is None:
        transform = PathTransform(**options) if options else PathTransform.identity()

    scanner = PathScanner(d)
    state = _ParserState(transform=transform)

    while True:
        letter = scanner.read_command(state.previous)
        if letter is None:
            if not scanner.at_end:
                raise PathDataError(
                    f"path data must begin with a command letter, found {d[scanner.position]!r}",
                    scanner.position,
                )
            break

        family = letter.upper()
        if family == "A":
            raise UnsupportedFeatureError(
                "Arc command (A/a) is not supported. Pre-normalize arcs to Béziers.",
                scanner.position - 1,
            )
        handler = _HANDLERS.get(family)
        if handler is None:
            raise UnsupportedCommandError(
                f"unsupported path command {letter!r} at {scanner.position - 1}",
                scanner.position - 1,
            )

        handler(scanner, state, letter != family)
        state.previous = letter

    logger.debug("Parsed path data: %d commands from %d chars", len(state.commands), len(d))
    return state.commands
