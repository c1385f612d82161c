"""256-entry lookup tables mapping luminance level -> RGB."""

import numpy as np

from gradmap.core.sampler import color_at
from gradmap.core.types import ColorStop

LUT_SIZE = 256


def _freeze(table: np.ndarray) -> np.ndarray:
    table.flags.writeable = False
    return table


def build_lut(stops: list[ColorStop]) -> np.ndarray:
    """Sample the gradient at i/255 for every level. Returns a read-only (256, 3) uint8 array."""
    table = np.array(
        [color_at(stops, i / (LUT_SIZE - 1)) for i in range(LUT_SIZE)],
        dtype=np.uint8,
    )
    return _freeze(table)


def identity_lut() -> np.ndarray:
    """LUT[i] = (i, i, i); remapping with it turns an image into its luma greyscale."""
    levels = np.arange(LUT_SIZE, dtype=np.uint8)
    return _freeze(np.stack([levels, levels, levels], axis=1))


def lut_rows(lut: np.ndarray) -> list[tuple[int, int, int]]:
    """Plain-int rows for JSON/text output."""
    return [(int(r), int(g), int(b)) for r, g, b in np.asarray(lut)]
