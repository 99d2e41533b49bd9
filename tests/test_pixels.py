from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from patternmaker.core.errors import InvalidInputError
from patternmaker.core.pixels import as_pixel_buffer, decode_image
from tests.utils import make_solid_image


def _png(arr) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="PNG")
    return buf.getvalue()


def test_decode_returns_rgba():
    rgb = np.full((5, 7, 3), 90, dtype=np.uint8)
    pixels = decode_image(_png(rgb))
    assert pixels.shape == (5, 7, 4)
    assert pixels.dtype == np.uint8
    assert np.all(pixels[:, :, 3] == 255)


@pytest.mark.parametrize("payload", [b"", b"not an image"])
def test_decode_rejects_garbage(payload):
    with pytest.raises(InvalidInputError):
        decode_image(payload)


def test_decode_rejects_oversized_canvas(monkeypatch):
    data = _png(make_solid_image(100, 100))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(InvalidInputError):
        decode_image(data)


def test_grayscale_and_rgb_are_expanded():
    gray = np.arange(12, dtype=np.uint8).reshape(3, 4)
    pixels = as_pixel_buffer(gray)
    assert pixels.shape == (3, 4, 4)
    assert tuple(pixels[2, 3]) == (11, 11, 11, 255)


def test_caller_array_is_returned_untouched():
    rgba = make_solid_image(3, 3, (1, 2, 3))
    assert as_pixel_buffer(rgba) is rgba


@pytest.mark.parametrize("shape", [(0, 4, 4), (4, 4, 2), (4,)])
def test_bad_shapes_rejected(shape):
    with pytest.raises(InvalidInputError):
        as_pixel_buffer(np.zeros(shape, dtype=np.uint8))
