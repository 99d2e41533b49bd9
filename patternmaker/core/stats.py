from __future__ import annotations

from typing import Dict

STITCHES_PER_HOUR = 250
HOURS_PER_DAY = 8

_DIFFICULTY_LEVELS = (
    (2, "Beginner"),
    (4, "Easy"),
    (6, "Intermediate"),
    (8, "Advanced"),
)


def _difficulty(stitch_count: int, color_count: int) -> str:
    if stitch_count < 2000:
        score = 1
    elif stitch_count < 5000:
        score = 2
    elif stitch_count < 10000:
        score = 3
    elif stitch_count < 20000:
        score = 4
    else:
        score = 5

    if color_count > 30:
        score += 2
    elif color_count > 20:
        score += 1

    for limit, label in _DIFFICULTY_LEVELS:
        if score <= limit:
            return label
    return "Expert"


def _js_round(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def format_time_estimate(hours: float) -> str:
    if hours < 1:
        return f"{_js_round(hours * 60)} min"
    if hours < 10:
        return f"{hours:.1f} hrs"
    days = int(hours // HOURS_PER_DAY)
    remaining = _js_round(hours % HOURS_PER_DAY)
    if remaining == 0:
        return f"{days} {'day' if days == 1 else 'days'}"
    return f"{days}d {remaining}h"


def calculate_pattern_stats(stitch_count: int, color_count: int) -> Dict[str, object]:
    """Rough difficulty rating and stitching time for a pattern."""
    hours = stitch_count / STITCHES_PER_HOUR
    return {
        "difficulty": _difficulty(stitch_count, color_count),
        "time_estimate": format_time_estimate(hours),
        "estimated_hours": round(hours, 2),
    }


__all__ = ["calculate_pattern_stats", "format_time_estimate"]
