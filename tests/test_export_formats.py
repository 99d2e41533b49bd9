from __future__ import annotations

import io
import json
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from PIL import Image

from patternmaker.export import (
    build_open_format,
    export_json,
    export_pdf,
    export_png,
    export_svg,
)
from patternmaker.models.pattern import ThreadRef
from tests.utils import BLUE, RED, make_pattern

SVG_NS = "{http://www.w3.org/2000/svg}"


def _pattern():
    return make_pattern(3, 2, [(0, 0, RED), (1, 0, RED), (2, 1, BLUE)])


def test_open_format_document():
    created = datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
    doc = build_open_format(_pattern(), title="Roses", created=created)
    assert doc["format"] == "Open Cross Stitch Format"
    assert doc["version"] == "1.0"
    assert doc["metadata"]["title"] == "Roses"
    assert doc["metadata"]["created"] == "2024-05-01T12:30:15.250Z"
    assert doc["pattern"] == {"width": 3, "height": 2, "stitchCount": 3}
    assert [p["id"] for p in doc["palette"]] == ["A", "B"]
    assert doc["palette"][0]["hex"] == "#FF0000"
    assert doc["palette"][0]["count"] == 2
    assert doc["stitches"][2] == {"x": 2, "y": 1, "color": "B", "type": "full"}


def test_export_json_is_parseable():
    doc = json.loads(export_json(_pattern()))
    assert doc["metadata"]["created"].endswith("Z")
    assert doc["metadata"]["title"] == "Cross Stitch Pattern"


def test_svg_draws_two_lines_per_stitch():
    root = ET.fromstring(export_svg(_pattern()))
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "30"
    assert root.get("height") == "20"
    lines = root.findall(f".//{SVG_NS}line")
    assert len(lines) == 6
    assert {line.get("stroke") for line in lines} == {"#FF0000", "#0000FF"}
    assert not root.findall(f".//{SVG_NS}text")


def test_svg_symbols_are_escaped():
    tricky = ThreadRef(id="X", name="Tricky", rgb=(10, 10, 10), symbol="<")
    amp = ThreadRef(id="Y", name="Amp", rgb=(250, 250, 250), symbol="&")
    pattern = make_pattern(2, 1, [(0, 0, tricky), (1, 0, amp)])
    root = ET.fromstring(export_svg(pattern, show_symbols=True))
    texts = [t.text for t in root.findall(f".//{SVG_NS}text")]
    assert texts == ["<", "&"]


def test_svg_grid_numbers_and_border():
    pattern = make_pattern(12, 3, [(11, 2, RED)])
    root = ET.fromstring(export_svg(pattern, show_grid_numbers=True, show_border=True))
    assert root.get("width") == str(12 * 10 + 30)
    labels = [t.text for t in root.findall(f".//{SVG_NS}text")]
    assert labels == ["0", "10", "0"]


def test_png_dimensions():
    img = Image.open(io.BytesIO(export_png(_pattern(), stitch_size=8)))
    assert img.size == (24, 16)
    assert img.format == "PNG"


def test_pdf_output():
    data = export_pdf(_pattern(), title="Test chart")
    assert data.startswith(b"%PDF")
    assert len(data) > 1000
