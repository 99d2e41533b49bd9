from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..core.errors import InvalidInputError
from ..models.pattern import ThreadRef

# Luminance-style channel weights (green > red > blue)
WEIGHTS = (0.30, 0.59, 0.11)


def color_distance(rgb_a: Sequence[int], rgb_b: Sequence[int], squared: bool = False) -> float:
    dr = int(rgb_a[0]) - int(rgb_b[0])
    dg = int(rgb_a[1]) - int(rgb_b[1])
    db = int(rgb_a[2]) - int(rgb_b[2])
    dist = dr * dr * WEIGHTS[0] + dg * dg * WEIGHTS[1] + db * db * WEIGHTS[2]
    return dist if squared else math.sqrt(dist)


def is_similar(rgb_a: Sequence[int], rgb_b: Sequence[int], tolerance: float) -> bool:
    return color_distance(rgb_a, rgb_b) < tolerance


def build_index(palette: Sequence[ThreadRef]) -> np.ndarray:
    if not palette:
        raise InvalidInputError("Palette is empty")
    return np.array([p.rgb for p in palette], dtype=np.float64)


def nearest_color(index: np.ndarray, rgb: Sequence[int], palette: Sequence[ThreadRef]) -> ThreadRef:
    diff = index - np.asarray(rgb[:3], dtype=np.float64)
    dist = (
        diff[:, 0] * diff[:, 0] * WEIGHTS[0]
        + diff[:, 1] * diff[:, 1] * WEIGHTS[1]
        + diff[:, 2] * diff[:, 2] * WEIGHTS[2]
    )
    # argmin returns the first minimum, so ties resolve to palette order
    return palette[int(np.argmin(dist))]


def find_closest(rgb: Sequence[int], palette: Sequence[ThreadRef]) -> ThreadRef:
    return nearest_color(build_index(palette), rgb, palette)
