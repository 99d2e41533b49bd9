"""Error-diffusion kernels applied to the per-build working pixel buffer."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

import numpy as np

from ..core.errors import InvalidInputError

# (dx, dy, weight) offsets in source pixel space, rooted at the sampled pixel
KERNELS: Dict[str, Tuple[Tuple[int, int, float], ...]] = {
    "floyd-steinberg": (
        (1, 0, 7 / 16),
        (-1, 1, 3 / 16),
        (0, 1, 5 / 16),
        (1, 1, 1 / 16),
    ),
    # lighter and more scattered; only 6/8 of the error is propagated
    "atkinson": (
        (1, 0, 1 / 8),
        (2, 0, 1 / 8),
        (-1, 1, 1 / 8),
        (0, 1, 1 / 8),
        (1, 1, 1 / 8),
        (0, 2, 1 / 8),
    ),
}


def get_kernel(algorithm: str) -> Tuple[Tuple[int, int, float], ...]:
    try:
        return KERNELS[algorithm]
    except KeyError:
        raise InvalidInputError(f"Unknown dithering algorithm: {algorithm!r}") from None


def distribute_error(
    buffer: np.ndarray,
    x: int,
    y: int,
    error: Sequence[float],
    factor: float,
) -> None:
    height, width = buffer.shape[:2]
    if x < 0 or x >= width or y < 0 or y >= height:
        return
    current = buffer[y, x, :3].astype(np.float64)
    updated = current + np.asarray(error, dtype=np.float64) * factor
    # same rounding as an 8-bit clamped store
    buffer[y, x, :3] = np.clip(np.rint(updated), 0, 255).astype(np.uint8)


def diffuse_error(
    buffer: np.ndarray,
    x: int,
    y: int,
    error: Sequence[float],
    algorithm: str = "floyd-steinberg",
) -> None:
    """Spread ``error`` (sampled minus matched RGB) from pixel ``(x, y)`` in place."""
    kernel = get_kernel(algorithm)
    if not any(error):
        return
    for dx, dy, weight in kernel:
        distribute_error(buffer, x + dx, y + dy, error, weight)


__all__ = ["KERNELS", "get_kernel", "distribute_error", "diffuse_error"]
