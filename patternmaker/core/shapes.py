from __future__ import annotations

import math
from typing import Callable, Dict

from ..models.pattern import Pattern
from .errors import InvalidInputError
from .postprocess import derive_pattern

# keeps log() finite on the heart's horizontal axis
HEART_EPSILON = 1e-9


def _inside_ellipse(dx: float, dy: float) -> bool:
    return dx * dx + dy * dy <= 1


def _inside_diamond(dx: float, dy: float) -> bool:
    return abs(dx) + abs(dy) <= 1


def _inside_heart(dx: float, dy: float) -> bool:
    # Stylised polar curve, not a geometric heart.
    t = math.atan2(dy, dx)
    r = math.sqrt(dx * dx + dy * dy)
    log_t = math.log(max(abs(t), HEART_EPSILON))
    return r <= 0.8 + abs(math.sin(t) * math.cos(t) * log_t / 2.5)


def _inside_star(dx: float, dy: float) -> bool:
    angle = math.atan2(dy, dx)
    radius = math.sqrt(dx * dx + dy * dy)
    point_angle = (angle + math.pi) % (2 * math.pi / 5)
    return radius <= 0.5 + 0.5 * math.cos(5 * point_angle)


SHAPES: Dict[str, Callable[[float, float], bool]] = {
    "circle": _inside_ellipse,
    "oval": _inside_ellipse,
    "diamond": _inside_diamond,
    "heart": _inside_heart,
    "star": _inside_star,
}


def normalise_coords(x: int, y: int, width: int, height: int) -> tuple[float, float]:
    half_w = width / 2
    half_h = height / 2
    return (x - half_w) / half_w, (y - half_h) / half_h


def apply_shape_mask(pattern: Pattern, shape: str = "rectangle") -> Pattern:
    """Drop stitches outside ``shape``; colour usage is recounted from the survivors."""
    if shape == "rectangle":
        return pattern
    predicate = SHAPES.get(shape)
    if predicate is None:
        raise InvalidInputError(f"Unknown pattern shape: {shape!r}")

    width = pattern.canvasGrid.width
    height = pattern.canvasGrid.height
    kept = [
        stitch
        for stitch in pattern.stitches
        if predicate(*normalise_coords(stitch.x, stitch.y, width, height))
    ]
    return derive_pattern(pattern, kept)


__all__ = ["apply_shape_mask", "normalise_coords", "SHAPES"]
