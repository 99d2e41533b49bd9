import logging
import re
from typing import Optional

import numpy as np
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from ..core.errors import InvalidInputError
from ..core.pipeline import process_image_to_pattern_async
from ..core.pixels import decode_image
from ..cv.background import detect_background_color
from ..export.context import rgb_to_hex
from ..export.json_exporter import build_open_format, export_json
from ..export.pdf_exporter import export_pdf
from ..export.png_exporter import export_png
from ..export.svg_exporter import export_svg
from ..models.api_schemas import BackgroundColor, ConversionOptions
from ..settings import DEFAULT_BRAND, DEFAULT_GRID_WIDTH, DEFAULT_TOLERANCE, MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp", "image/bmp"}
HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

MEDIA_TYPES = {
    "svg": "image/svg+xml",
    "json": "application/json",
    "png": "image/png",
    "pdf": "application/pdf",
}


async def _read_image(file: UploadFile) -> np.ndarray:
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        logger.warning("Rejected upload %s (%s)", file.filename, file.content_type)
        raise HTTPException(status_code=400, detail="Unsupported file type")

    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Image too large")
    try:
        return decode_image(content)
    except InvalidInputError as exc:
        logger.warning("Could not decode upload %s: %s", file.filename, exc)
        raise HTTPException(status_code=400, detail=str(exc))


def _parse_hex(value: Optional[str]):
    if not value:
        return None
    match = HEX_RE.match(value.strip())
    if not match:
        raise HTTPException(status_code=400, detail=f"Invalid background colour: {value!r}")
    return tuple(int(part, 16) for part in match.groups())


def conversion_options(
    remove_background: bool = False,
    background: Optional[str] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    use_dithering: bool = False,
    dithering_algorithm: str = "floyd-steinberg",
    max_colors: Optional[int] = None,
    merge_tolerance: Optional[float] = None,
    shape: str = "rectangle",
) -> ConversionOptions:
    try:
        return ConversionOptions(
            remove_background=remove_background,
            background_color=_parse_hex(background),
            tolerance=tolerance,
            use_dithering=use_dithering,
            dithering_algorithm=dithering_algorithm,
            max_colors=max_colors,
            merge_tolerance=merge_tolerance,
            shape=shape,
        )
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise HTTPException(status_code=400, detail=errors)


async def _convert(file: UploadFile, grid_width: int, brand: str, options: ConversionOptions):
    image = await _read_image(file)
    try:
        return await process_image_to_pattern_async(
            image,
            grid_width,
            options,
            brand=brand,
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


# =====================================================================
#   BACKGROUND
# =====================================================================


@router.post("/background", response_model=BackgroundColor)
async def detect_background(file: UploadFile = File(...)):
    image = await _read_image(file)
    rgb = detect_background_color(image)
    return BackgroundColor(rgb=rgb, hex=rgb_to_hex(rgb))


# =====================================================================
#   CONVERT
# =====================================================================


@router.post("/patterns")
async def create_pattern(
    file: UploadFile = File(...),
    grid_width: int = DEFAULT_GRID_WIDTH,
    brand: str = DEFAULT_BRAND,
    options: ConversionOptions = Depends(conversion_options),
):
    pattern = await _convert(file, grid_width, brand, options)
    payload = build_open_format(pattern)
    payload["legend"] = pattern.meta["legend"]
    payload["stats"] = pattern.meta["stats"]
    payload["background"] = pattern.meta.get("background_color")
    return JSONResponse(payload)


@router.post("/patterns/export")
async def export_pattern(
    file: UploadFile = File(...),
    format: str = "svg",
    grid_width: int = DEFAULT_GRID_WIDTH,
    brand: str = DEFAULT_BRAND,
    show_symbols: bool = False,
    show_grid_numbers: bool = False,
    show_border: bool = False,
    options: ConversionOptions = Depends(conversion_options),
):
    if format not in MEDIA_TYPES:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {format}")
    pattern = await _convert(file, grid_width, brand, options)

    if format == "svg":
        content = export_svg(
            pattern,
            show_symbols=show_symbols,
            show_grid_numbers=show_grid_numbers,
            show_border=show_border,
        )
    elif format == "json":
        content = export_json(pattern)
    elif format == "png":
        content = export_png(pattern)
    else:
        content = export_pdf(pattern)

    return Response(
        content=content,
        media_type=MEDIA_TYPES[format],
        headers={"Content-Disposition": f'attachment; filename="cross-stitch-pattern.{format}"'},
    )
