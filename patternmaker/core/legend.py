from __future__ import annotations

from typing import List

from ..models.pattern import Pattern
from .postprocess import rank_usage
from .symbols import assign_symbols_to_palette


def build_legend(pattern: Pattern) -> List[dict]:
    """Return one row per thread, most used first, with counts, colour and symbol info."""
    ranked = rank_usage(pattern)
    threads = assign_symbols_to_palette([usage.thread for usage in ranked])

    total = sum(usage.count for usage in ranked) or 1
    legend: List[dict] = []
    for usage, thread in zip(ranked, threads):
        legend.append(
            {
                "id": thread.id,
                "brand": thread.brand,
                "name": thread.name,
                "symbol": thread.symbol,
                "rgb": list(thread.rgb),
                "hex": thread.hex,
                "count": usage.count,
                "percent": round(usage.count / total * 100, 2),
            }
        )
    return legend


def symbol_map(pattern: Pattern) -> dict[str, str]:
    """Thread id -> chart symbol, consistent with :func:`build_legend`."""
    legend = pattern.meta.get("legend") or build_legend(pattern)
    return {row["id"]: row["symbol"] for row in legend}
