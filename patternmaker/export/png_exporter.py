import io

import numpy as np
from PIL import Image, ImageDraw

from ..models.pattern import Pattern

FABRIC_RGB = (245, 240, 232)
GRID_LINE_RGB = (224, 216, 208)
STITCH_PADDING = 1


def render_pattern_image(pattern: Pattern, stitch_size: int = 10) -> Image.Image:
    """Draw the fabric grid and an X per stitch in its thread colour."""
    w = pattern.canvasGrid.width
    h = pattern.canvasGrid.height
    cell = max(2, int(stitch_size))

    img = np.empty((h * cell, w * cell, 3), dtype=np.uint8)
    img[:, :] = FABRIC_RGB
    # grid lines on the top/left edge of every cell
    img[::cell, :] = GRID_LINE_RGB
    img[:, ::cell] = GRID_LINE_RGB

    pil = Image.fromarray(img)
    draw = ImageDraw.Draw(pil)
    for stitch in pattern.stitches:
        x0 = stitch.x * cell + STITCH_PADDING
        y0 = stitch.y * cell + STITCH_PADDING
        x1 = (stitch.x + 1) * cell - STITCH_PADDING
        y1 = (stitch.y + 1) * cell - STITCH_PADDING
        color = tuple(stitch.thread.rgb)
        draw.line([(x0, y0), (x1, y1)], fill=color, width=2)
        draw.line([(x1, y0), (x0, y1)], fill=color, width=2)
    return pil


def export_png(pattern: Pattern, *, stitch_size: int = 10) -> bytes:
    buf = io.BytesIO()
    render_pattern_image(pattern, stitch_size=stitch_size).save(buf, format="PNG")
    return buf.getvalue()


__all__ = ["export_png", "render_pattern_image"]
