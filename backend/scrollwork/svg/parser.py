"""Outline extraction from an uploaded SVG document.

Only the first <path> element matters: its ``d`` attribute becomes the
outline boundary. Namespaced and un-namespaced documents are both accepted.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from scrollwork.engine.bounds import OutlineBoundary, parse_outline
from scrollwork.errors import InvalidBoundaryError

logger = logging.getLogger(__name__)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def extract_outline_path(svg_text: str) -> str:
    """Return the ``d`` attribute of the first <path> in the document."""
    if not isinstance(svg_text, str) or not svg_text.strip():
        raise InvalidBoundaryError("Could not read SVG: document is empty")

    try:
        root = ET.fromstring(svg_text.strip())
    except ET.ParseError as e:
        logger.warning("Uploaded SVG is not well-formed: %s", e)
        raise InvalidBoundaryError(f"Could not read SVG: {e}") from e

    for elem in root.iter():
        if not isinstance(elem.tag, str) or _strip_ns(elem.tag) != "path":
            continue
        d = (elem.get("d") or "").strip()
        if not d:
            raise InvalidBoundaryError("SVG <path> has no d attribute")
        return d

    raise InvalidBoundaryError("SVG must contain a <path>")


def load_outline(svg_text: str) -> OutlineBoundary:
    """Extract and validate the outline of an uploaded SVG."""
    d = extract_outline_path(svg_text)
    parse_outline(d)
    logger.info("Loaded outline path (%d chars)", len(d))
    return OutlineBoundary(d)
