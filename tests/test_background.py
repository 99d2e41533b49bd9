from __future__ import annotations

import numpy as np
import pytest

from patternmaker.core.errors import InvalidInputError
from patternmaker.cv.background import detect_background_color, edge_sample_points
from tests.utils import make_bordered_image, make_solid_image


def test_white_border_detected():
    img = make_bordered_image(10, 10, border_rgb=(255, 255, 255))
    assert detect_background_color(img) == (255, 255, 255)


@pytest.mark.parametrize("size", [(1, 1), (1, 7), (9, 1), (10, 10), (123, 45)])
def test_sample_points_in_bounds(size):
    width, height = size
    points = edge_sample_points(width, height)
    assert len(points) == 44
    assert all(0 <= x < width and 0 <= y < height for x, y in points)


def test_single_pixel_image():
    img = make_solid_image(1, 1, (12, 34, 56))
    assert detect_background_color(img) == (12, 34, 56)


def test_one_pixel_wide_strip():
    img = make_solid_image(1, 20, (0, 128, 0))
    assert detect_background_color(img) == (0, 128, 0)


def test_largest_group_wins():
    # top and bottom rows black (24 samples), left and right columns white (20 samples)
    img = make_solid_image(20, 20, (255, 255, 255))
    img[0, :, :3] = 0
    img[-1, :, :3] = 0
    assert detect_background_color(img) == (0, 0, 0)


def test_group_representative_is_first_sample():
    img = make_solid_image(30, 30, (250, 250, 250))
    img[0, 0, :3] = (245, 245, 245)  # first sampled point, within tolerance of the rest
    assert detect_background_color(img) == (245, 245, 245)


def test_alpha_is_ignored_and_rgb_input_accepted():
    rgba = make_solid_image(8, 8, (10, 20, 30), alpha=0)
    assert detect_background_color(rgba) == (10, 20, 30)
    rgb = np.full((8, 8, 3), 77, dtype=np.uint8)
    assert detect_background_color(rgb) == (77, 77, 77)


def test_empty_image_rejected():
    with pytest.raises(InvalidInputError):
        detect_background_color(np.zeros((0, 5, 4), dtype=np.uint8))
