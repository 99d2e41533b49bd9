from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from ..color.palette_matcher import is_similar
from ..core.pixels import as_pixel_buffer
from ..core.types import RGB

logger = logging.getLogger(__name__)

CLUSTER_TOLERANCE = 20


def edge_sample_points(width: int, height: int) -> List[Tuple[int, int]]:
    """Corners, edge midpoints and nine evenly spaced points along each border (44 total)."""
    points = [
        (0, 0),
        (width - 1, 0),
        (0, height - 1),
        (width - 1, height - 1),
        (width // 2, 0),
        (width // 2, height - 1),
        (0, height // 2),
        (width - 1, height // 2),
    ]
    for i in range(1, 10):
        offset = i / 10
        points.extend(
            [
                (int(width * offset), 0),
                (int(width * offset), height - 1),
                (0, int(height * offset)),
                (width - 1, int(height * offset)),
            ]
        )
    return [
        (min(max(x, 0), width - 1), min(max(y, 0), height - 1))
        for x, y in points
    ]


def detect_background_color(image: np.ndarray) -> RGB:
    """
    Guess the background colour from the image border.

    Border samples are grouped greedily: each sample joins the first group whose
    representative (the group's first sample) is within ``CLUSTER_TOLERANCE``, or
    starts a new group. The representative of the largest group wins; on a tie the
    group created first is kept.
    """
    pixels = as_pixel_buffer(image)
    height, width = pixels.shape[:2]

    groups: List[List] = []  # [representative, count]
    for x, y in edge_sample_points(width, height):
        r, g, b = (int(c) for c in pixels[y, x, :3])
        sample = (r, g, b)
        for group in groups:
            if is_similar(sample, group[0], CLUSTER_TOLERANCE):
                group[1] += 1
                break
        else:
            groups.append([sample, 1])

    best = groups[0]
    for group in groups[1:]:
        if group[1] > best[1]:
            best = group

    logger.debug(
        "Detected background %s from %d edge groups (%d samples)",
        best[0],
        len(groups),
        best[1],
    )
    return best[0]


__all__ = ["detect_background_color", "edge_sample_points", "CLUSTER_TOLERANCE"]
