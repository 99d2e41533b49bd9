"""Renderers turning a finished pattern into files."""

from .context import build_export_context, rgb_to_hex
from .json_exporter import build_open_format, export_json
from .pdf_exporter import export_pdf
from .png_exporter import export_png
from .svg_exporter import export_svg

__all__ = [
    "build_export_context",
    "build_open_format",
    "export_json",
    "export_pdf",
    "export_png",
    "export_svg",
    "rgb_to_hex",
]
