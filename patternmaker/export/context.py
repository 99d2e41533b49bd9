from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.legend import build_legend
from ..models.pattern import Pattern


def rgb_to_hex(rgb: Sequence[int] | None) -> str:
    if not rgb:
        return "#FFFFFF"
    r, g, b = (int(v) for v in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def build_export_context(pattern: Pattern) -> Dict[str, Any]:
    """Flatten a pattern into the plain values every renderer needs."""
    legend = pattern.meta.get("legend") or build_legend(pattern)
    symbols = {row["id"]: row["symbol"] for row in legend}

    meta = dict(pattern.meta)
    title = meta.get("title") or "Cross Stitch Pattern"

    return {
        "grid": {
            "width": pattern.canvasGrid.width,
            "height": pattern.canvasGrid.height,
        },
        "legend": legend,
        "meta": {
            **meta,
            "title": title,
            "total_stitches": len(pattern.stitches),
            "palette_size": len(pattern.colorUsage),
        },
        "palette": [
            {
                "id": usage.thread.id,
                "name": usage.thread.name,
                "hex": usage.thread.hex,
                "rgb": list(usage.thread.rgb),
                "brand": usage.thread.brand,
                "count": usage.count,
                "symbol": symbols.get(usage.thread.id),
            }
            for usage in pattern.colorUsage.values()
        ],
        "stitches": [
            {
                "x": stitch.x,
                "y": stitch.y,
                "id": stitch.thread.id,
                "hex": stitch.thread.hex,
                "symbol": symbols.get(stitch.thread.id),
            }
            for stitch in pattern.stitches
        ],
    }


__all__ = ["build_export_context", "rgb_to_hex"]
