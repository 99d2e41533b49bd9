from __future__ import annotations

import pytest

from patternmaker.core.errors import InvalidInputError
from patternmaker.core.shapes import apply_shape_mask
from tests.utils import BLUE, RED, assert_usage_consistent, full_pattern, make_pattern


def _positions(pattern):
    return {(s.x, s.y) for s in pattern.stitches}


def test_rectangle_is_identity():
    pattern = full_pattern(6, 4)
    assert apply_shape_mask(pattern, "rectangle") is pattern


@pytest.mark.parametrize("shape", ["circle", "oval", "diamond", "heart", "star"])
def test_masks_keep_centre_and_drop_corner(shape):
    pattern = full_pattern(10, 10)
    masked = apply_shape_mask(pattern, shape)
    kept = _positions(masked)
    assert (5, 5) in kept
    assert (0, 0) not in kept
    assert kept <= _positions(pattern)
    assert_usage_consistent(masked)


def test_circle_containment():
    masked = apply_shape_mask(full_pattern(10, 10), "circle")
    for x, y in _positions(masked):
        dx, dy = (x - 5) / 5, (y - 5) / 5
        assert dx * dx + dy * dy <= 1


def test_diamond_keeps_edge_midpoints():
    kept = _positions(apply_shape_mask(full_pattern(10, 10), "diamond"))
    assert (0, 5) in kept
    assert (5, 0) in kept
    assert (1, 1) not in kept


def test_heart_handles_horizontal_axis():
    # cells on the centre row have an angle of exactly 0 or pi
    kept = _positions(apply_shape_mask(full_pattern(9, 8), "heart"))
    assert (4, 4) in kept
    assert (6, 4) in kept


def test_usage_recounted_after_mask():
    cells = [(x, y, RED if x < 5 else BLUE) for y in range(10) for x in range(10)]
    cells[0] = (0, 0, BLUE)
    pattern = make_pattern(10, 10, cells)
    masked = apply_shape_mask(pattern, "circle")
    assert masked.colorUsage["A"].count < pattern.colorUsage["A"].count
    assert_usage_consistent(masked)
    assert pattern.colorUsage["A"].count == 49


def test_unknown_shape_rejected():
    with pytest.raises(InvalidInputError):
        apply_shape_mask(full_pattern(2, 2), "triangle")
