"""SVG reader — facade over svgpathtools for inspecting rendered ornaments.

Only what the serializer writes is understood: the root viewBox/size
attributes and ``<path d="…">`` elements.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import numpy as np
from svgpathtools import parse_path

from sullivan.geometry.primitives import Rect

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_WIDTH_RE = re.compile(r'\swidth\s*=\s*"([^"]*?)"')
_HEIGHT_RE = re.compile(r'\sheight\s*=\s*"([^"]*?)"')
_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]+)"[^>]*/?\s*>', re.IGNORECASE)


@dataclass
class SvgSummary:
    view_box: Rect | None = None
    width: float | None = None
    height: float | None = None
    path_count: int = 0
    closed_count: int = 0
    segment_count: int = 0
    # Tight box of the drawn geometry, None when nothing could be parsed.
    geometry_bounds: Rect | None = None
    errors: list[str] = field(default_factory=list)


def _parse_length(value: str) -> float | None:
    try:
        return float(value.replace("px", "").replace("pt", ""))
    except ValueError:
        return None


def parse_view_box(svg_text: str) -> Rect | None:
    match = _VIEWBOX_RE.search(svg_text)
    if not match:
        return None
    parts = match.group(1).replace(",", " ").split()
    if len(parts) < 4:
        return None
    x, y, w, h = (float(p) for p in parts[:4])
    return Rect(x, y, w, h)


def read_svg(svg_text: str) -> SvgSummary:
    """Summarize an SVG document: viewBox, size, path count and geometry extent."""
    summary = SvgSummary(view_box=parse_view_box(svg_text))

    root_tag = _SVG_TAG_RE.search(svg_text)
    if root_tag:
        tag = root_tag.group(0)
        w_match = _WIDTH_RE.search(tag)
        h_match = _HEIGHT_RE.search(tag)
        if w_match:
            summary.width = _parse_length(w_match.group(1))
        if h_match:
            summary.height = _parse_length(h_match.group(1))

    boxes: list[tuple[float, float, float, float]] = []
    for match in _PATH_D_RE.finditer(svg_text):
        d = match.group(1)
        summary.path_count += 1
        if d.rstrip().upper().endswith("Z"):
            summary.closed_count += 1

        try:
            path = parse_path(d)
        except Exception as e:
            logger.warning("Failed to parse path: %s", e)
            summary.errors.append(str(e))
            continue

        summary.segment_count += len(path)
        if len(path):
            boxes.append(path.bbox())

    if boxes:
        arr = np.array(boxes, dtype=np.float64)
        xmin, ymin = arr[:, 0].min(), arr[:, 2].min()
        xmax, ymax = arr[:, 1].max(), arr[:, 3].max()
        summary.geometry_bounds = Rect(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))

    logger.debug("Read SVG: %d paths, %d segments", summary.path_count, summary.segment_count)
    return summary
