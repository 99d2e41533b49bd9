from __future__ import annotations

import numpy as np
import pytest

from patternmaker.core.errors import InvalidInputError
from patternmaker.cv.dithering import diffuse_error
from tests.utils import make_solid_image


@pytest.mark.parametrize("algorithm", ["floyd-steinberg", "atkinson"])
def test_zero_error_is_noop(algorithm):
    buf = make_solid_image(6, 6, (90, 120, 150))
    before = buf.copy()
    diffuse_error(buf, 2, 2, (0, 0, 0), algorithm)
    assert np.array_equal(buf, before)


def test_floyd_steinberg_weights():
    buf = make_solid_image(4, 4, (100, 100, 100))
    diffuse_error(buf, 1, 1, (16, 16, 16), "floyd-steinberg")
    assert tuple(buf[1, 2, :3]) == (107, 107, 107)
    assert tuple(buf[2, 0, :3]) == (103, 103, 103)
    assert tuple(buf[2, 1, :3]) == (105, 105, 105)
    assert tuple(buf[2, 2, :3]) == (101, 101, 101)
    touched = {(1, 2), (2, 0), (2, 1), (2, 2)}
    for y in range(4):
        for x in range(4):
            if (y, x) not in touched:
                assert tuple(buf[y, x, :3]) == (100, 100, 100)
    assert np.all(buf[:, :, 3] == 255)


def test_atkinson_spreads_eighths_and_drops_outside_taps():
    buf = make_solid_image(4, 4, (100, 100, 100))
    diffuse_error(buf, 0, 0, (8, -8, 0), "atkinson")
    for y, x in [(0, 1), (0, 2), (1, 0), (1, 1), (2, 0)]:
        assert tuple(buf[y, x, :3]) == (101, 99, 100)
    assert tuple(buf[0, 0, :3]) == (100, 100, 100)
    assert tuple(buf[3, 3, :3]) == (100, 100, 100)


def test_values_are_clamped():
    buf = make_solid_image(3, 3, (250, 5, 128))
    diffuse_error(buf, 0, 0, (80, -80, 0), "floyd-steinberg")
    assert tuple(buf[0, 1, :3]) == (255, 0, 128)


def test_corner_pixel_drops_every_tap():
    buf = make_solid_image(3, 3, (100, 100, 100))
    before = buf.copy()
    diffuse_error(buf, 2, 2, (50, 50, 50), "floyd-steinberg")
    assert np.array_equal(buf, before)


def test_rounding_matches_clamped_byte_storage():
    buf = make_solid_image(3, 3, (100, 101, 100))
    # 1/16 of 8 is 0.5: halves round to even
    diffuse_error(buf, 0, 0, (8, 8, 0), "floyd-steinberg")
    assert tuple(buf[1, 1, :3]) == (100, 102, 100)


def test_unknown_algorithm_rejected():
    buf = make_solid_image(3, 3)
    with pytest.raises(InvalidInputError):
        diffuse_error(buf, 0, 0, (1, 1, 1), "ordered")
