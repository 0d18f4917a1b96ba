"""Write SVG markup from flattened ornament paths."""

from __future__ import annotations

import logging
from html import escape
from typing import Annotated

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sullivan.engine.flatten import FlattenedPath, flatten
from sullivan.engine.scene import NodeType, OrnamentResult
from sullivan.geometry.primitives import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    Rect,
)
from sullivan.models.params import FlooredInt

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class SvgRenderOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    stroke: str = "#333"
    fill: str = "none"
    stroke_width: float = 0.01
    # Keep auxiliary (construction) paths such as grids and guide polygons.
    include_construction: bool = True
    precision: Annotated[int, FlooredInt(0, 10)] = 4
    include_xml_declaration: bool = False
    width: float | None = None
    height: float | None = None


def format_number(value: float, precision: int) -> str:
    """Fixed-point with ``precision`` decimals; negative zero prints as zero."""
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def format_plain(value: float) -> str:
    """Shortest form for attribute values: integral floats drop their fraction."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def command_to_d(cmd: PathCommand, precision: int) -> str:
    def f(v: float) -> str:
        return format_number(v, precision)

    if isinstance(cmd, MoveTo):
        return f"M {f(cmd.p.x)} {f(cmd.p.y)}"
    if isinstance(cmd, LineTo):
        return f"L {f(cmd.p.x)} {f(cmd.p.y)}"
    if isinstance(cmd, QuadTo):
        return f"Q {f(cmd.p1.x)} {f(cmd.p1.y)} {f(cmd.p.x)} {f(cmd.p.y)}"
    if isinstance(cmd, CubicTo):
        return (
            f"C {f(cmd.p1.x)} {f(cmd.p1.y)} "
            f"{f(cmd.p2.x)} {f(cmd.p2.y)} "
            f"{f(cmd.p.x)} {f(cmd.p.y)}"
        )
    if isinstance(cmd, ClosePath):
        return "Z"
    raise TypeError(f"Unknown path command: {cmd!r}")


def path_to_d(path: FlattenedPath, precision: int = 4) -> str:
    """Path data string. A closed path without a trailing ClosePath gets one."""
    parts = [command_to_d(cmd, precision) for cmd in path.commands]
    if path.closed and not path.has_close_command:
        parts.append("Z")
    return " ".join(parts)


def view_box(bounds: Rect) -> str:
    return " ".join(format_plain(v) for v in (bounds.x, bounds.y, bounds.width, bounds.height))


def visible_paths(paths: list[FlattenedPath], options: SvgRenderOptions) -> list[FlattenedPath]:
    """Paths that will be written; construction paths drop out when excluded."""
    if options.include_construction:
        return list(paths)
    return [fp for fp in paths if fp.node_type is not NodeType.AUXILIARY]


def render_svg(
    paths: list[FlattenedPath],
    bounds: Rect,
    options: SvgRenderOptions | None = None,
) -> str:
    """Serialize already-flattened paths. The viewBox is taken from ``bounds``."""
    opts = options or SvgRenderOptions()
    kept = visible_paths(paths, opts)
    stroke = escape(opts.stroke, quote=True)
    fill = escape(opts.fill, quote=True)

    lines: list[str] = []
    if opts.include_xml_declaration:
        lines.append(XML_DECLARATION)

    size = ""
    if opts.width is not None:
        size += f' width="{format_plain(opts.width)}"'
    if opts.height is not None:
        size += f' height="{format_plain(opts.height)}"'

    lines.append(
        f'<svg xmlns="{SVG_NS}" viewBox="{view_box(bounds)}"{size} '
        f'fill="none" stroke="{stroke}" stroke-width="{format_plain(opts.stroke_width)}">'
    )
    lines.append(f'  <g fill="{fill}" stroke="{stroke}">')

    for fp in kept:
        lines.append(f'    <path d="{path_to_d(fp, opts.precision)}" />')

    lines.append("  </g>")
    lines.append("</svg>")
    logger.debug("Serialized %d/%d paths", len(kept), len(paths))
    return "\n".join(lines) + "\n"


def ornament_to_svg(result: OrnamentResult, options: SvgRenderOptions | None = None) -> str:
    """Flatten and serialize a generator result in one call."""
    return render_svg(flatten(result), result.bounds, options)
