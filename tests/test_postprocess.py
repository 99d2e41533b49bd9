from __future__ import annotations

import pytest

from patternmaker.core.errors import InvalidInputError
from patternmaker.core.legend import build_legend
from patternmaker.core.pipeline import process_image_to_pattern
from patternmaker.core.postprocess import limit_colors, merge_colors
from patternmaker.core.shapes import apply_shape_mask
from patternmaker.export.context import build_export_context
from patternmaker.models.pattern import ThreadRef
from tests.utils import (
    BLACK,
    BLUE,
    RED,
    WHITE,
    assert_usage_consistent,
    make_gradient_image,
    make_pattern,
    stitch_triples,
)

DARK_RED = ThreadRef(id="R1", name="Dark red", rgb=(200, 0, 0))
LIGHT_RED = ThreadRef(id="R2", name="Light red", rgb=(205, 0, 0))


def _row(*threads):
    return make_pattern(len(threads), 1, ((x, 0, t) for x, t in enumerate(threads)))


def test_limit_keeps_most_used():
    pattern = _row(RED, RED, RED, BLUE, BLUE, BLACK, WHITE)
    limited = limit_colors(pattern, 2)
    assert set(limited.colorUsage) == {"A", "B"}
    # black is closer to blue than to red under the weighted metric
    assert [s.thread.id for s in limited.stitches] == ["A", "A", "A", "B", "B", "B", "A"]
    assert_usage_consistent(limited)


def test_limit_ties_keep_discovery_order():
    pattern = _row(BLUE, RED, BLUE, RED)
    limited = limit_colors(pattern, 1)
    assert list(limited.colorUsage) == ["B"]
    assert limited.colorUsage["B"].count == 4


def test_limit_within_bound_is_noop():
    pattern = _row(RED, BLUE)
    assert limit_colors(pattern, 2) is pattern
    assert limit_colors(pattern, 10) is pattern


def test_limit_rejects_non_positive():
    with pytest.raises(InvalidInputError):
        limit_colors(_row(RED), 0)


def test_limit_leaves_input_untouched():
    pattern = _row(RED, BLUE, BLACK)
    before = stitch_triples(pattern)
    limit_colors(pattern, 1)
    assert stitch_triples(pattern) == before
    assert len(pattern.colorUsage) == 3


def test_merge_similar_reds():
    pattern = _row(DARK_RED, DARK_RED, DARK_RED, LIGHT_RED, LIGHT_RED, LIGHT_RED, LIGHT_RED, LIGHT_RED, BLUE, BLUE)
    merged = merge_colors(pattern, 10)
    assert set(merged.colorUsage) == {"R2", "B"}
    assert merged.colorUsage["R2"].count == 8
    assert merged.colorUsage["R2"].thread.rgb == (205, 0, 0)
    assert len(merged.stitches) == len(pattern.stitches)
    assert_usage_consistent(merged)


def test_merge_is_deterministic():
    pattern = _row(DARK_RED, LIGHT_RED, BLUE, WHITE, BLACK, LIGHT_RED)
    first = stitch_triples(merge_colors(pattern, 10))
    for _ in range(3):
        assert stitch_triples(merge_colors(pattern, 10)) == first


def test_merge_equal_counts_prefer_first_member():
    pattern = _row(DARK_RED, LIGHT_RED)
    merged = merge_colors(pattern, 10)
    assert list(merged.colorUsage) == ["R1"]


def test_merge_nothing_similar_is_noop():
    pattern = _row(RED, BLUE, BLACK)
    assert merge_colors(pattern, 5) is pattern


def test_merge_rejects_negative_tolerance():
    with pytest.raises(InvalidInputError):
        merge_colors(_row(RED), -1)


def test_reprocessing_finished_pattern_refreshes_legend_and_stats():
    pattern = process_image_to_pattern(make_gradient_image(), 24, palette=[RED, BLUE, BLACK, WHITE])
    assert len(pattern.colorUsage) > 1

    reduced = apply_shape_mask(limit_colors(pattern, 1), "circle")
    assert reduced.meta["title"] == pattern.meta["title"]
    for key in ("legend", "stats", "total_stitches", "palette_size"):
        assert key not in reduced.meta

    context = build_export_context(reduced)
    assert sum(row["count"] for row in context["legend"]) == len(reduced.stitches)
    assert len(context["legend"]) == 1
    assert context["meta"]["palette_size"] == 1

    merged = merge_colors(pattern, 1000)
    assert "legend" not in merged.meta
    assert [row["count"] for row in build_legend(merged)] == [len(merged.stitches)]
