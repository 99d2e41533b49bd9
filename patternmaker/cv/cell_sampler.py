from __future__ import annotations

import math
from typing import Iterator, Tuple

from ..core.errors import InvalidInputError


def grid_dimensions(image_width: int, image_height: int, grid_width: int) -> Tuple[int, int]:
    """Return ``(grid_width, grid_height)``, deriving the height from the image aspect ratio."""
    if grid_width < 1:
        raise InvalidInputError(f"Grid width must be a positive integer, got {grid_width}")
    if image_width < 1 or image_height < 1:
        raise InvalidInputError("Pixel buffer is empty")
    aspect_ratio = image_height / image_width
    # round half up
    grid_height = int(math.floor(grid_width * aspect_ratio + 0.5))
    return grid_width, max(1, grid_height)


def cell_size(image_width: int, image_height: int, grid: Tuple[int, int]) -> Tuple[float, float]:
    grid_w, grid_h = grid
    return image_width / float(grid_w), image_height / float(grid_h)


def iter_cell_centers(
    image_width: int,
    image_height: int,
    grid: Tuple[int, int],
    rows: range | None = None,
) -> Iterator[Tuple[int, int, int, int]]:
    """
    Yield ``(x, y, sample_x, sample_y)`` for each grid cell in row-major order.

    The sample is the source pixel nearest to the cell centre. ``rows`` restricts
    the sweep to a range of grid rows so callers can process the grid in chunks.
    """
    grid_w, grid_h = grid
    cell_w, cell_h = cell_size(image_width, image_height, grid)
    for y in rows if rows is not None else range(grid_h):
        sample_y = min(image_height - 1, int(math.floor(y * cell_h + cell_h / 2)))
        for x in range(grid_w):
            sample_x = min(image_width - 1, int(math.floor(x * cell_w + cell_w / 2)))
            yield x, y, sample_x, sample_y


__all__ = ["grid_dimensions", "cell_size", "iter_cell_centers"]
