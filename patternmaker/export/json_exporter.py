from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..models.pattern import Pattern
from .context import build_export_context

FORMAT_NAME = "Open Cross Stitch Format"
FORMAT_VERSION = "1.0"


def _iso_timestamp(moment: Optional[datetime] = None) -> str:
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_open_format(
    pattern: Pattern,
    *,
    title: Optional[str] = None,
    author: Optional[str] = None,
    description: Optional[str] = None,
    created: Optional[datetime] = None,
) -> Dict[str, Any]:
    context = build_export_context(pattern)
    return {
        "format": FORMAT_NAME,
        "version": FORMAT_VERSION,
        "metadata": {
            "title": title or context["meta"]["title"],
            "author": author or "Cross Stitch Pattern Maker",
            "created": _iso_timestamp(created),
            "description": description or "Generated cross-stitch pattern",
        },
        "pattern": {
            "width": context["grid"]["width"],
            "height": context["grid"]["height"],
            "stitchCount": len(context["stitches"]),
        },
        "palette": [
            {
                "id": entry["id"],
                "name": entry["name"],
                "hex": entry["hex"],
                "brand": entry["brand"],
                "count": entry["count"],
            }
            for entry in context["palette"]
        ],
        "stitches": [
            {"x": stitch["x"], "y": stitch["y"], "color": stitch["id"], "type": "full"}
            for stitch in context["stitches"]
        ],
    }


def export_json(pattern: Pattern, **metadata) -> str:
    return json.dumps(build_open_format(pattern, **metadata), ensure_ascii=False, indent=2)


__all__ = ["build_open_format", "export_json", "FORMAT_NAME", "FORMAT_VERSION"]
