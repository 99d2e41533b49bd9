"""Common lightweight type aliases used across the pipeline."""

from typing import Literal, Tuple

RGB = Tuple[int, int, int]
DitheringAlgorithm = Literal["floyd-steinberg", "atkinson"]
PatternShape = Literal["rectangle", "circle", "oval", "diamond", "heart", "star"]

__all__ = ["RGB", "DitheringAlgorithm", "PatternShape"]
