"""Gradient preview strip rendered as a PIL image."""

import numpy as np
from PIL import Image

from gradmap.core.sampler import color_at
from gradmap.core.types import ColorStop

EMPTY_COLOR = (0xCC, 0xCC, 0xCC)


def render_strip(stops: list[ColorStop], width: int = 512, height: int = 32) -> Image.Image:
    """Left-to-right strip; column x shows color_at(stops, x / (width - 1))."""
    if width < 1 or height < 1:
        raise ValueError(f'invalid preview size {width}x{height}')

    if not stops:
        row = np.tile(np.array(EMPTY_COLOR, dtype=np.uint8), (width, 1))
    else:
        denom = max(width - 1, 1)
        row = np.array([color_at(stops, x / denom) for x in range(width)], dtype=np.uint8)

    strip = np.repeat(row[np.newaxis, :, :], height, axis=0)
    return Image.fromarray(strip)
