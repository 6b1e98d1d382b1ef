"""
pathcmds command line — parse path data from a file and print the commands.

Usage:
  pathcmds glyph.svg                         # JSON records, one array per <path>
  pathcmds path.txt --format d               # absolute path data, one line per path
  pathcmds glyph.svg --flip-y --offset-y 800 # font-style y-up coordinates
  echo "M0 0 L10 10" | pathcmds -            # read from stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pathcmds.config import configure_logging, settings
from pathcmds.parser import PathDataError, PathTransform, parse_path_data
from pathcmds.svg.extract import parse_svg_paths
from pathcmds.svg.serializer import (
    NonFiniteCoordinateError,
    commands_to_dicts,
    commands_to_path_data,
)

logger = logging.getLogger(__name__)


def looks_like_svg(text: str) -> bool:
    stripped = text.lstrip()
    if not stripped.startswith("<"):
        return False
    lowered = stripped.lower()
    return "<svg" in lowered or "<path" in lowered


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathcmds",
        description="SVG path data → move/line/quadratic/cubic/close commands",
    )
    parser.add_argument("input", help="File holding SVG markup or a raw d string ('-' for stdin)")
    parser.add_argument("--svg", action="store_true", help="Treat input as SVG markup")
    parser.add_argument("--scale-x", type=float, default=1.0)
    parser.add_argument("--scale-y", type=float, default=1.0)
    parser.add_argument("--flip-y", action="store_true", help="Negate y before scaling")
    parser.add_argument("--offset-x", type=float, default=0.0)
    parser.add_argument("--offset-y", type=float, default=0.0)
    parser.add_argument("--format", choices=("json", "d"), default="json")
    parser.add_argument(
        "--precision",
        type=int,
        default=settings.default_precision,
        help="Decimal places for --format d",
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument("--log-level", default=None, help="Override PATHCMDS_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    transform = PathTransform(
        scale_x=args.scale_x,
        scale_y=args.scale_y,
        flip_y=args.flip_y,
        offset_x=args.offset_x,
        offset_y=args.offset_y,
    )

    try:
        text = read_input(args.input)
    except OSError as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        if args.svg or looks_like_svg(text):
            paths = parse_svg_paths(text, transform)
        else:
            paths = [parse_path_data(text.strip(), transform)]
    except PathDataError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        if args.format == "d":
            output = "\n".join(commands_to_path_data(p, args.precision) for p in paths)
        else:
            output = json.dumps([commands_to_dicts(p) for p in paths], indent=2)
    except NonFiniteCoordinateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("Wrote %d paths to %s", len(paths), args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
