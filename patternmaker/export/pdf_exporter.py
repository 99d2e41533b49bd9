import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ..core.stats import calculate_pattern_stats
from ..models.pattern import Pattern
from .context import build_export_context
from .png_exporter import render_pattern_image

logger = logging.getLogger(__name__)

FONT_CANDIDATES = [
    Path("assets/fonts/DejaVuSans.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/local/share/fonts/DejaVuSans.ttf"),
]
FONT_NAME = "DejaVuSans"


def _ensure_font() -> str:
    try:
        pdfmetrics.getFont(FONT_NAME)
        return FONT_NAME
    except KeyError:
        pass

    for candidate in FONT_CANDIDATES:
        if candidate.exists():
            try:
                pdfmetrics.registerFont(TTFont(FONT_NAME, str(candidate)))
                return FONT_NAME
            except Exception as exc:  # broken font file: fall back to built-in fonts
                logger.warning("Failed to register font %s: %s", candidate, exc)
                continue
    return "Helvetica"


def export_pdf(pattern: Pattern, *, title: Optional[str] = None, stitch_size: int = 12) -> bytes:
    """
    Print-ready chart: title, pattern preview, legend and a summary footer on a
    landscape A4 page (the legend continues on extra pages when long).
    """
    context = build_export_context(pattern)
    buffer = io.BytesIO()

    page_w, page_h = landscape(A4)
    c = canvas.Canvas(buffer, pagesize=(page_w, page_h))
    font_name = _ensure_font()

    # -----------------------------------------------------------------
    # 1) Title
    # -----------------------------------------------------------------
    title = title or context["meta"]["title"]
    title_font_name = f"{font_name}-Bold"
    if title_font_name not in pdfmetrics.getRegisteredFontNames():
        title_font_name = font_name
    c.setFont(title_font_name, 20)
    c.drawString(20 * mm, page_h - 20 * mm, title)

    # -----------------------------------------------------------------
    # 2) Pattern preview
    # -----------------------------------------------------------------
    preview_block_w = page_w * 0.65
    preview_block_h = page_h - 50 * mm
    preview_top_y = page_h - 30 * mm
    preview_left_x = 20 * mm

    img = render_pattern_image(pattern, stitch_size=stitch_size)
    img_w, img_h = img.size
    scale = min(preview_block_w / img_w, preview_block_h / img_h, 1.0)
    draw_w = img_w * scale
    draw_h = img_h * scale
    c.drawImage(
        ImageReader(img),
        preview_left_x,
        preview_top_y - draw_h,
        width=draw_w,
        height=draw_h,
        preserveAspectRatio=True,
        anchor="sw",
    )

    # -----------------------------------------------------------------
    # 3) Legend
    # -----------------------------------------------------------------
    c.setFont(font_name, 11)
    legend_x = page_w * 0.7
    legend_y = page_h - 30 * mm
    c.drawString(legend_x, legend_y + 10, "Legend:")

    for entry in context["legend"]:
        legend_y -= 14
        if legend_y < 25 * mm:
            c.showPage()
            legend_y = page_h - 20 * mm
            c.setFont(font_name, 11)
        c.setFillColorRGB(*(v / 255.0 for v in entry["rgb"]))
        c.rect(legend_x, legend_y - 2, 10, 10, stroke=1, fill=1)
        c.setFillColorRGB(0, 0, 0)
        line = f"{entry['symbol']:<3} {entry['brand']} {entry['id']} {entry['name']} ({entry['count']})"
        c.drawString(legend_x + 14, legend_y, line)

    # -----------------------------------------------------------------
    # 4) Grid information
    # -----------------------------------------------------------------
    grid = context["grid"]
    meta = context["meta"]
    stats = meta.get("stats") or calculate_pattern_stats(
        meta["total_stitches"], meta["palette_size"]
    )
    c.setFont(font_name, 10)
    c.drawString(
        20 * mm,
        15 * mm,
        f"Grid: {grid['width']} x {grid['height']} stitches · Colors: {meta['palette_size']}"
        f" · Stitches: {meta['total_stitches']}"
        f" · Difficulty: {stats['difficulty']} · Time: {stats['time_estimate']}",
    )

    c.showPage()
    c.save()
    return buffer.getvalue()


__all__ = ["export_pdf"]
