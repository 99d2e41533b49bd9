"""Pixel buffer helpers: the decoded RGBA array the pipeline works on."""

from __future__ import annotations

import io

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import InvalidInputError


def as_pixel_buffer(image: np.ndarray) -> np.ndarray:
    """
    Return ``image`` as an ``(height, width, 4)`` uint8 RGBA array.

    RGB input gets an opaque alpha channel and grayscale input is expanded to RGB.
    The caller's array is never modified; a new array is returned only when a
    conversion is needed.
    """
    arr = np.asarray(image)
    if arr.ndim == 2:
        arr = np.stack([arr, arr, arr], axis=-1)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise InvalidInputError(f"Expected an (H, W, 3|4) pixel array, got shape {arr.shape}")
    height, width = arr.shape[:2]
    if width == 0 or height == 0:
        raise InvalidInputError("Pixel buffer is empty")

    if arr.dtype != np.uint8:
        arr = np.clip(arr, 0, 255).astype(np.uint8)
    if arr.shape[2] == 3:
        alpha = np.full((height, width, 1), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=2)
    return arr


def decode_image(data: bytes) -> np.ndarray:
    if not data:
        raise InvalidInputError("Empty image payload")
    try:
        with Image.open(io.BytesIO(data)) as img:
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise InvalidInputError("Invalid image") from exc
    return as_pixel_buffer(np.array(rgba))


__all__ = ["as_pixel_buffer", "decode_image"]
