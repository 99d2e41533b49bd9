from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from patternmaker.core.postprocess import rebuild_color_usage
from patternmaker.models.pattern import CanvasGrid, Pattern, Stitch, ThreadRef

RED = ThreadRef(id="A", name="Red", rgb=(255, 0, 0))
BLUE = ThreadRef(id="B", name="Blue", rgb=(0, 0, 255))
BLACK = ThreadRef(id="K", name="Black", rgb=(0, 0, 0))
WHITE = ThreadRef(id="W", name="White", rgb=(255, 255, 255))


def make_solid_image(
    width: int,
    height: int,
    rgb: Sequence[int] = (255, 0, 0),
    alpha: int = 255,
) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :, :3] = rgb
    canvas[:, :, 3] = alpha
    return canvas


def make_bordered_image(
    width: int,
    height: int,
    border_rgb: Sequence[int] = (255, 255, 255),
    seed: int = 7,
) -> np.ndarray:
    """Random interior surrounded by a one pixel border of ``border_rgb``."""
    rng = np.random.default_rng(seed)
    canvas = rng.integers(0, 200, size=(height, width, 4), dtype=np.uint8)
    canvas[:, :, 3] = 255
    canvas[0, :, :3] = border_rgb
    canvas[-1, :, :3] = border_rgb
    canvas[:, 0, :3] = border_rgb
    canvas[:, -1, :3] = border_rgb
    return canvas


def make_subject_image(width: int = 40, height: int = 30) -> np.ndarray:
    """White background with a red square and a blue bar in the middle."""
    canvas = make_solid_image(width, height, (255, 255, 255))
    canvas[height // 4 : height // 2, width // 4 : width // 2, :3] = (200, 30, 40)
    canvas[height // 2 : 3 * height // 4, width // 3 : 3 * width // 4, :3] = (30, 60, 170)
    return canvas


def make_gradient_image(width: int = 48, height: int = 32) -> np.ndarray:
    xs = np.linspace(0, 255, width, dtype=np.float64)
    ys = np.linspace(0, 255, height, dtype=np.float64)
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = xs[None, :].astype(np.uint8)
    canvas[:, :, 1] = ys[:, None].astype(np.uint8)
    canvas[:, :, 2] = ((xs[None, :] + ys[:, None]) / 2).astype(np.uint8)
    canvas[:, :, 3] = 255
    return canvas


def make_pattern(
    width: int,
    height: int,
    cells: Iterable[Tuple[int, int, ThreadRef]],
) -> Pattern:
    stitches = [Stitch(x=x, y=y, thread=thread) for x, y, thread in cells]
    return Pattern(
        canvasGrid=CanvasGrid(width=width, height=height),
        stitches=stitches,
        colorUsage=rebuild_color_usage(stitches),
    )


def full_pattern(width: int, height: int, thread: ThreadRef = RED) -> Pattern:
    return make_pattern(
        width,
        height,
        ((x, y, thread) for y in range(height) for x in range(width)),
    )


def stitch_triples(pattern: Pattern):
    return [(s.x, s.y, s.thread.id) for s in pattern.stitches]


def assert_usage_consistent(pattern: Pattern) -> None:
    counts: dict[str, int] = {}
    for stitch in pattern.stitches:
        counts[stitch.thread.id] = counts.get(stitch.thread.id, 0) + 1
    assert {k: v.count for k, v in pattern.colorUsage.items()} == counts
    assert sum(v.count for v in pattern.colorUsage.values()) == len(pattern.stitches)
