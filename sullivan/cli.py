"""Command-line entry point.

    sullivan list
    sullivan render plate --params '{"step": 3, "medallionRadius": 0.4}' -o plate.svg
    sullivan render radial-flow --params-file flow.json --width 800 --height 800
    sullivan preset > preset.json
    sullivan preset --from preset.json --part square -o square.svg
    sullivan inspect plate.svg
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sullivan.config import configure_logging, settings
from sullivan.engine.pipeline import Pipeline, RenderResult, create_pipeline
from sullivan.errors import SullivanError
from sullivan.geometry.curves import clamp
from sullivan.models.presets import default_controller_params, dump_preset, read_preset_file
from sullivan.svg.parser import read_svg
from sullivan.svg.serializer import SvgRenderOptions

logger = logging.getLogger(__name__)


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", type=Path, help="Write SVG here instead of stdout")
    parser.add_argument("--stroke", default="#333", help="Stroke colour (default: #333)")
    parser.add_argument("--fill", default="none", help="Fill colour (default: none)")
    parser.add_argument("--stroke-width", type=float, default=0.01, help="Stroke width in viewBox units")
    parser.add_argument(
        "--precision",
        type=int,
        default=settings.default_precision,
        help="Decimals per coordinate (0-10)",
    )
    parser.add_argument(
        "--no-construction",
        action="store_true",
        help="Drop auxiliary construction lines (grids, guide polygons)",
    )
    parser.add_argument("--xml-declaration", action="store_true", help="Prepend an XML prolog")
    parser.add_argument("--width", type=float, help="Fit the scene into a pixel frame of this width")
    parser.add_argument("--height", type=float, help="Fit the scene into a pixel frame of this height")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sullivan",
        description="Procedural architectural ornament rendered to SVG.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: warning)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List registered generators and their default parameters")

    render = sub.add_parser("render", help="Render one generator to SVG")
    render.add_argument("generator_id", help="Generator id, e.g. plate, radial-flow, leaf, square")
    source = render.add_mutually_exclusive_group()
    source.add_argument("--params", help="Generator parameters as a JSON object")
    source.add_argument("--params-file", type=Path, help="JSON file with generator parameters")
    _add_render_options(render)

    preset = sub.add_parser("preset", help="Print the default preset, or render part of a preset file")
    preset.add_argument("--from", dest="source", type=Path, help="Preset JSON file to render")
    preset.add_argument(
        "--part",
        choices=["flow", "square", "leaf", "plate"],
        default="flow",
        help="Which part of the preset to render (default: flow)",
    )
    _add_render_options(preset)

    inspect = sub.add_parser("inspect", help="Summarize an SVG file")
    inspect.add_argument("path", type=Path, help="SVG file to read")

    return parser


def _load_params(args: argparse.Namespace) -> dict[str, Any]:
    if args.params:
        raw = json.loads(args.params)
    elif args.params_file:
        raw = json.loads(args.params_file.read_text(encoding="utf-8"))
    else:
        return {}
    if not isinstance(raw, dict):
        raise SullivanError("Generator parameters must be a JSON object")
    return raw


def _options(args: argparse.Namespace) -> SvgRenderOptions:
    return SvgRenderOptions(
        stroke=args.stroke,
        fill=args.fill,
        stroke_width=args.stroke_width,
        precision=args.precision,
        include_construction=not args.no_construction,
        include_xml_declaration=args.xml_declaration,
    )


def _viewport(args: argparse.Namespace) -> tuple[float, float] | None:
    if args.width is None and args.height is None:
        return None
    width = args.width if args.width is not None else args.height
    height = args.height if args.height is not None else args.width
    limit = settings.max_viewport_px
    return clamp(width, 1, limit), clamp(height, 1, limit)


def _emit(rendered: RenderResult, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(rendered.svg)
        return
    output.write_text(rendered.svg, encoding="utf-8")
    print(
        f"Wrote {output} ({rendered.path_count} paths, {rendered.node_count} nodes)",
        file=sys.stderr,
    )


def cmd_list(pipeline: Pipeline, args: argparse.Namespace) -> None:
    for spec in pipeline.registry.all():
        print(f"{spec.id:<12} {spec.description}")
        print(f"{'':<12} defaults: {json.dumps(spec.defaults(), sort_keys=True)}")


def cmd_render(pipeline: Pipeline, args: argparse.Namespace) -> None:
    rendered = pipeline.render(
        args.generator_id,
        _load_params(args),
        _options(args),
        viewport=_viewport(args),
    )
    _emit(rendered, args.output)


def cmd_preset(pipeline: Pipeline, args: argparse.Namespace) -> None:
    if args.source is None:
        print(dump_preset(default_controller_params()))
        return
    preset = read_preset_file(args.source)
    rendered = pipeline.render_preset(preset, args.part, _options(args), viewport=_viewport(args))
    _emit(rendered, args.output)


def cmd_inspect(pipeline: Pipeline, args: argparse.Namespace) -> None:
    summary = read_svg(args.path.read_text(encoding="utf-8"))
    vb = summary.view_box
    gb = summary.geometry_bounds
    view_box = f"{vb.x:g} {vb.y:g} {vb.width:g} {vb.height:g}" if vb else "-"
    print(f"viewBox:  {view_box}")
    if summary.width is not None or summary.height is not None:
        print(f"size:     {summary.width or '-'} x {summary.height or '-'}")
    print(f"paths:    {summary.path_count} ({summary.closed_count} closed, {summary.segment_count} segments)")
    if gb:
        print(f"geometry: x {gb.x:.4f}..{gb.x + gb.width:.4f}  y {gb.y:.4f}..{gb.y + gb.height:.4f}")
    for err in summary.errors:
        print(f"warning:  {err}")


COMMANDS = {
    "list": cmd_list,
    "render": cmd_render,
    "preset": cmd_preset,
    "inspect": cmd_inspect,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "warning")

    pipeline = create_pipeline()
    try:
        COMMANDS[args.command](pipeline, args)
    except (SullivanError, ValidationError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
