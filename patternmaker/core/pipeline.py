import asyncio
import logging
from typing import Callable, Dict, Generator, List, Optional, Sequence

import numpy as np

from ..color.palette_loader import load_palette
from ..color.palette_matcher import build_index, is_similar, nearest_color
from ..cv.background import detect_background_color
from ..cv.cell_sampler import grid_dimensions, iter_cell_centers
from ..cv.dithering import diffuse_error, get_kernel
from ..models.api_schemas import ConversionOptions
from ..models.pattern import CanvasGrid, ColorUsage, Pattern, Stitch, ThreadRef
from ..settings import CHUNK_ROWS, DEFAULT_BRAND, DEFAULT_GRID_WIDTH
from .errors import InvalidInputError
from .legend import build_legend
from .pixels import as_pixel_buffer
from .postprocess import limit_colors, merge_colors
from .shapes import apply_shape_mask
from .stats import calculate_pattern_stats
from .types import RGB

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]
ALPHA_THRESHOLD = 128


# =====================================================================
#  GRID SWEEP
# =====================================================================


def _sweep(
    pixels: np.ndarray,
    grid: tuple,
    options: ConversionOptions,
    palette: Sequence[ThreadRef],
    chunk_rows: int,
) -> Generator[int, None, Pattern]:
    height, width = pixels.shape[:2]
    grid_w, grid_h = grid
    index = build_index(palette)

    # Dithering writes accumulated error into a copy owned by this sweep only,
    # and later samples read from it.
    working = pixels.copy() if options.use_dithering else pixels
    background = options.background_color if options.remove_background else None

    matches: Dict[RGB, ThreadRef] = {}
    stitches: List[Stitch] = []
    threads: Dict[str, ThreadRef] = {}
    counts: Dict[str, int] = {}
    skipped_background = 0
    transparent = 0
    processed = 0
    total = grid_w * grid_h

    for start in range(0, grid_h, chunk_rows):
        rows = range(start, min(start + chunk_rows, grid_h))
        for x, y, sample_x, sample_y in iter_cell_centers(width, height, grid, rows):
            processed += 1
            r, g, b, a = (int(c) for c in working[sample_y, sample_x])
            if a <= ALPHA_THRESHOLD:
                transparent += 1
                continue

            sample = (r, g, b)
            if background is not None and is_similar(sample, background, options.tolerance):
                skipped_background += 1
                continue

            matched = matches.get(sample)
            if matched is None:
                matched = nearest_color(index, sample, palette)
                matches[sample] = matched

            stitches.append(Stitch(x=x, y=y, thread=matched))
            if matched.id not in threads:
                threads[matched.id] = matched
                counts[matched.id] = 0
            counts[matched.id] += 1

            if options.use_dithering:
                mr, mg, mb = matched.rgb
                diffuse_error(
                    working,
                    sample_x,
                    sample_y,
                    (r - mr, g - mg, b - mb),
                    options.dithering_algorithm,
                )

        yield int(processed * 100 / total + 0.5)

    logger.info(
        "Conversion complete: %d stitches, %d cells skipped as background, %d transparent",
        len(stitches),
        skipped_background,
        transparent,
    )
    return Pattern(
        canvasGrid=CanvasGrid(width=grid_w, height=grid_h),
        stitches=stitches,
        colorUsage={
            thread_id: ColorUsage(thread=thread, count=counts[thread_id])
            for thread_id, thread in threads.items()
        },
    )


def iter_build_pattern(
    image: np.ndarray,
    grid_width: int,
    options: Optional[ConversionOptions] = None,
    palette: Optional[Sequence[ThreadRef]] = None,
    *,
    chunk_rows: int = CHUNK_ROWS,
) -> Generator[int, None, Pattern]:
    """
    Validate the inputs and return a generator that sweeps the grid in chunks.

    The generator yields an integer progress percentage after every ``chunk_rows``
    grid rows (the last value is always 100) and returns the finished
    :class:`Pattern` as its ``StopIteration`` value. Invalid input raises here,
    before any chunk runs.
    """
    options = options or ConversionOptions()
    if chunk_rows < 1:
        raise InvalidInputError(f"chunk_rows must be at least 1, got {chunk_rows}")
    pixels = as_pixel_buffer(image)
    height, width = pixels.shape[:2]
    grid = grid_dimensions(width, height, grid_width)
    if palette is None:
        palette = load_palette(DEFAULT_BRAND)
    if not palette:
        raise InvalidInputError("Palette is empty")
    if options.use_dithering:
        get_kernel(options.dithering_algorithm)

    logger.debug("Building %dx%d pattern with %s", grid[0], grid[1], options)
    return _sweep(pixels, grid, options, palette, chunk_rows)


def build_pattern(
    image: np.ndarray,
    grid_width: int,
    options: Optional[ConversionOptions] = None,
    palette: Optional[Sequence[ThreadRef]] = None,
    *,
    chunk_rows: int = CHUNK_ROWS,
    on_progress: Optional[ProgressCallback] = None,
) -> Pattern:
    sweep = iter_build_pattern(image, grid_width, options, palette, chunk_rows=chunk_rows)
    while True:
        try:
            percent = next(sweep)
        except StopIteration as stop:
            return stop.value
        if on_progress is not None:
            on_progress(percent)


async def build_pattern_async(
    image: np.ndarray,
    grid_width: int,
    options: Optional[ConversionOptions] = None,
    palette: Optional[Sequence[ThreadRef]] = None,
    *,
    chunk_rows: int = CHUNK_ROWS,
    on_progress: Optional[ProgressCallback] = None,
) -> Pattern:
    """Same as :func:`build_pattern`, handing control back to the event loop between chunks."""
    sweep = iter_build_pattern(image, grid_width, options, palette, chunk_rows=chunk_rows)
    while True:
        try:
            percent = next(sweep)
        except StopIteration as stop:
            return stop.value
        if on_progress is not None:
            on_progress(percent)
        await asyncio.sleep(0)


# =====================================================================
#  IMAGE → PATTERN
# =====================================================================


def _resolve_options(pixels: np.ndarray, options: Optional[ConversionOptions]) -> ConversionOptions:
    options = options or ConversionOptions()
    if options.remove_background and options.background_color is None:
        background = detect_background_color(pixels)
        options = options.model_copy(update={"background_color": background})
    return options


def finalize_pattern(
    pattern: Pattern,
    options: ConversionOptions,
    brand: str = DEFAULT_BRAND,
) -> Pattern:
    """
    Post-process a freshly built pattern:
      1) limit the palette to ``max_colors``
      2) merge similar colours within ``merge_tolerance``
      3) apply the shape mask
      4) attach legend, statistics and conversion metadata
    """
    if options.max_colors is not None:
        pattern = limit_colors(pattern, options.max_colors)
    if options.merge_tolerance is not None:
        pattern = merge_colors(pattern, options.merge_tolerance)
    pattern = apply_shape_mask(pattern, options.shape)

    total_stitches = len(pattern.stitches)
    palette_size = len(pattern.colorUsage)
    meta: Dict[str, object] = dict(pattern.meta)
    meta.update(
        {
            "title": meta.get("title") or "Cross Stitch Pattern",
            "brand": brand,
            "grid_width": pattern.canvasGrid.width,
            "grid_height": pattern.canvasGrid.height,
            "palette_size": palette_size,
            "total_stitches": total_stitches,
            "options": options.model_dump(mode="json"),
            "background_color": list(options.background_color) if options.background_color else None,
            "stats": calculate_pattern_stats(total_stitches, palette_size),
        }
    )
    pattern = pattern.model_copy(update={"meta": meta})
    pattern.meta["legend"] = build_legend(pattern)
    return pattern


def process_image_to_pattern(
    image: np.ndarray,
    grid_width: int = DEFAULT_GRID_WIDTH,
    options: Optional[ConversionOptions] = None,
    palette: Optional[Sequence[ThreadRef]] = None,
    *,
    brand: str = DEFAULT_BRAND,
    chunk_rows: int = CHUNK_ROWS,
    on_progress: Optional[ProgressCallback] = None,
) -> Pattern:
    """
    Main pipeline:
      1) detect the background colour when removal is requested without one
      2) sample the grid, match threads and (optionally) dither
      3) limit / merge colours and apply the shape mask
      4) legend, statistics and metadata
    """
    pixels = as_pixel_buffer(image)
    options = _resolve_options(pixels, options)
    if palette is None:
        palette = load_palette(brand)
    pattern = build_pattern(
        pixels,
        grid_width,
        options,
        palette,
        chunk_rows=chunk_rows,
        on_progress=on_progress,
    )
    return finalize_pattern(pattern, options, brand)


async def process_image_to_pattern_async(
    image: np.ndarray,
    grid_width: int = DEFAULT_GRID_WIDTH,
    options: Optional[ConversionOptions] = None,
    palette: Optional[Sequence[ThreadRef]] = None,
    *,
    brand: str = DEFAULT_BRAND,
    chunk_rows: int = CHUNK_ROWS,
    on_progress: Optional[ProgressCallback] = None,
) -> Pattern:
    pixels = as_pixel_buffer(image)
    options = _resolve_options(pixels, options)
    if palette is None:
        palette = load_palette(brand)
    pattern = await build_pattern_async(
        pixels,
        grid_width,
        options,
        palette,
        chunk_rows=chunk_rows,
        on_progress=on_progress,
    )
    return finalize_pattern(pattern, options, brand)
