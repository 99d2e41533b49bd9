from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template

from ..models.pattern import Pattern
from .context import build_export_context

FABRIC_COLOR = "#F5F0E8"
GRID_LINE_COLOR = "#E0D8D0"
BORDER_COLOR = "#8B4513"
STITCH_PADDING = 1
NUMBER_EVERY = 10


@lru_cache(maxsize=1)
def _load_template() -> Template:
    env = Environment(
        loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
        autoescape=True,
    )
    return env.get_template("pattern.svg.j2")


def _ink_for(rgb) -> str:
    r, g, b = rgb
    return "#000000" if r * 0.3 + g * 0.59 + b * 0.11 > 140 else "#FFFFFF"


def export_svg(
    pattern: Pattern,
    *,
    stitch_size: int = 10,
    show_symbols: bool = False,
    show_grid_numbers: bool = False,
    show_border: bool = False,
) -> str:
    context = build_export_context(pattern)
    grid_w = context["grid"]["width"]
    grid_h = context["grid"]["height"]
    size = stitch_size
    margin = size * 3 if show_grid_numbers else 0
    rgb_by_id = {entry["id"]: entry["rgb"] for entry in context["palette"]}

    stitches = []
    for stitch in context["stitches"]:
        sx = stitch["x"] * size
        sy = stitch["y"] * size
        stitches.append(
            {
                "x0": sx + STITCH_PADDING,
                "y0": sy + STITCH_PADDING,
                "x1": sx + size - STITCH_PADDING,
                "y1": sy + size - STITCH_PADDING,
                "cx": sx + size / 2,
                "cy": sy + size / 2,
                "hex": stitch["hex"],
                "symbol": stitch["symbol"] or "",
                "ink": _ink_for(rgb_by_id[stitch["id"]]),
            }
        )

    def _numbers(count: int):
        return [
            {"label": n, "pos": margin + n * size}
            for n in range(0, count + 1, NUMBER_EVERY)
        ]

    return _load_template().render(
        svg_width=grid_w * size + margin,
        svg_height=grid_h * size + margin,
        grid_px_w=grid_w * size,
        grid_px_h=grid_h * size,
        size=size,
        margin=margin,
        fabric=FABRIC_COLOR,
        grid_line=GRID_LINE_COLOR,
        border=BORDER_COLOR,
        stitches=stitches,
        show_symbols=show_symbols,
        symbol_size=max(4, int(size * 0.7)),
        show_border=show_border,
        show_grid_numbers=show_grid_numbers,
        number_size=max(6, int(size * 0.9)),
        column_numbers=_numbers(grid_w),
        row_numbers=_numbers(grid_h),
    )


__all__ = ["export_svg"]
