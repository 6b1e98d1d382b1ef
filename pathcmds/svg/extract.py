"""Pull path data out of SVG markup and parse it.

Regex-based: reads every ``<path>`` tag's ``d`` attribute in document order,
whatever the attribute order. Element transforms and styles are ignored.
"""

from __future__ import annotations

import logging
import re

from pathcmds.models.commands import Command
from pathcmds.parser import PathDataError, PathTransform, parse_path_data

logger = logging.getLogger(__name__)

_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'([\w:-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')
_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*["\']([^"\']+)["\']')
_NUMBER_SPLIT_RE = re.compile(r"[\s,]+")


def _extract_attrs(tag_text: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs


def extract_path_data(svg_text: str) -> list[str]:
    """Return the ``d`` value of every path element, in document order."""
    paths: list[str] = []
    for match in _PATH_TAG_RE.finditer(svg_text):
        d = _extract_attrs(match.group(0)).get("d")
        if d is None:
            logger.warning("Skipping <path> without d attribute at offset %d", match.start())
            continue
        paths.append(d)
    return paths


def extract_viewbox(svg_text: str) -> tuple[float, float, float, float] | None:
    """Return the root viewBox as (min_x, min_y, width, height), or None."""
    match = _VIEWBOX_RE.search(svg_text)
    if not match:
        return None
    parts = [p for p in _NUMBER_SPLIT_RE.split(match.group(1).strip()) if p]
    if len(parts) != 4:
        return None
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        return None
    return (min_x, min_y, width, height)


def parse_svg_paths(
    svg_text: str,
    transform: PathTransform | None = None,
    skip_invalid: bool = False,
    **options: float | bool,
) -> list[list[Command]]:
    """Parse every path in an SVG document.

    With ``skip_invalid`` a path that fails to parse is logged and left out;
    otherwise the first ``PathDataError`` propagates.
    """
    if transform is None:
        transform = PathTransform(**options) if options else PathTransform.identity()
    elif options:
        raise TypeError("pass either a PathTransform or transform options, not both")

    results: list[list[Command]] = []
    for i, d in enumerate(extract_path_data(svg_text)):
        try:
            results.append(parse_path_data(d, transform))
        except PathDataError as e:
            if not skip_invalid:
                raise
            logger.warning("Skipping path %d: %s", i, e)

    logger.info("Parsed SVG: %d paths, %d commands", len(results), sum(len(r) for r in results))
    return results
