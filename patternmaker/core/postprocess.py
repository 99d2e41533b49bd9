"""Colour-count reduction applied to a finished pattern."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List

from ..color.palette_matcher import color_distance, is_similar
from ..models.pattern import ColorUsage, Pattern, Stitch, ThreadRef
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def rebuild_color_usage(stitches: Iterable[Stitch]) -> Dict[str, ColorUsage]:
    """Count stitches per thread id, keeping the order in which ids first appear."""
    threads: Dict[str, ThreadRef] = {}
    counts: Counter[str] = Counter()
    for stitch in stitches:
        thread_id = stitch.thread.id
        if thread_id not in threads:
            threads[thread_id] = stitch.thread
        counts[thread_id] += 1
    return {
        thread_id: ColorUsage(thread=thread, count=counts[thread_id])
        for thread_id, thread in threads.items()
    }


# meta entries computed from the stitches; stale once the stitches change
DERIVED_META_KEYS = ("legend", "stats", "total_stitches", "palette_size")


def derive_pattern(pattern: Pattern, stitches: List[Stitch]) -> Pattern:
    meta = {k: v for k, v in pattern.meta.items() if k not in DERIVED_META_KEYS}
    return Pattern(
        canvasGrid=pattern.canvasGrid.model_copy(),
        stitches=stitches,
        colorUsage=rebuild_color_usage(stitches),
        meta=meta,
    )


def _remap(pattern: Pattern, remap: Dict[str, ThreadRef]) -> Pattern:
    stitches = [
        Stitch(x=s.x, y=s.y, thread=remap[s.thread.id]) if s.thread.id in remap else s
        for s in pattern.stitches
    ]
    return derive_pattern(pattern, stitches)


def rank_usage(pattern: Pattern) -> List[ColorUsage]:
    """Usage entries by descending count; equal counts keep discovery order."""
    return sorted(pattern.colorUsage.values(), key=lambda usage: -usage.count)


def limit_colors(pattern: Pattern, max_colors: int) -> Pattern:
    """
    Keep the ``max_colors`` most used threads and move every other stitch to the
    nearest kept thread (weighted RGB distance).
    """
    if max_colors < 1:
        raise InvalidInputError(f"max_colors must be at least 1, got {max_colors}")
    if len(pattern.colorUsage) <= max_colors:
        return pattern

    ranked = rank_usage(pattern)
    kept = [usage.thread for usage in ranked[:max_colors]]

    remap: Dict[str, ThreadRef] = {}
    for usage in ranked[max_colors:]:
        rgb = usage.thread.rgb
        # min() keeps the first of equally close threads, i.e. the higher ranked one
        remap[usage.thread.id] = min(
            kept, key=lambda thread: color_distance(thread.rgb, rgb, squared=True)
        )

    logger.info("Limiting palette from %d to %d colours", len(ranked), max_colors)
    return _remap(pattern, remap)


def merge_colors(pattern: Pattern, merge_tolerance: float) -> Pattern:
    """
    Merge similar threads.

    Threads are grouped first-fit in discovery order, each new thread being compared
    with the seed (first member) of every existing group. All stitches of a group are
    then moved to the group's most used member.
    """
    if merge_tolerance < 0:
        raise InvalidInputError(f"merge_tolerance must be >= 0, got {merge_tolerance}")

    clusters: List[List[ColorUsage]] = []
    for usage in pattern.colorUsage.values():
        for cluster in clusters:
            if is_similar(usage.thread.rgb, cluster[0].thread.rgb, merge_tolerance):
                cluster.append(usage)
                break
        else:
            clusters.append([usage])

    remap: Dict[str, ThreadRef] = {}
    for cluster in clusters:
        if len(cluster) < 2:
            continue
        representative = max(cluster, key=lambda usage: usage.count)
        for usage in cluster:
            if usage.thread.id != representative.thread.id:
                remap[usage.thread.id] = representative.thread

    if not remap:
        return pattern

    logger.info(
        "Merged %d colours into %d (tolerance %.1f)",
        len(pattern.colorUsage),
        len(clusters),
        merge_tolerance,
    )
    return _remap(pattern, remap)


__all__ = ["limit_colors", "merge_colors", "rebuild_color_usage", "derive_pattern", "rank_usage"]
