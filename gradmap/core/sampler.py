"""Gradient sampling: the interpolated colour at a normalised position.

Stops must already be sorted by position (parse_stops guarantees this).
The bracketing pair defaults to (first, last) and is narrowed to the first
adjacent pair containing the position. A position outside every pair
therefore interpolates between the end stops with a factor outside
[0, 1]; channels are clamped to 0-255 afterwards, which is what a canvas
ImageData buffer does with the same numbers.
"""

import math

from gradmap.core.palette import BLACK, clamp_channel
from gradmap.core.types import ColorStop


def round_half_up(value: float) -> int:
    """Round to nearest, ties toward +inf (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def _bracket(stops: list[ColorStop], position: float) -> tuple[ColorStop, ColorStop]:
    left, right = stops[0], stops[-1]
    for a, b in zip(stops, stops[1:]):
        if a.position <= position <= b.position:
            return a, b
    return left, right


def color_at(stops: list[ColorStop], position: float) -> tuple[int, int, int]:
    """Colour of the gradient at position (normally 0.0 - 1.0)."""
    if not stops:
        return BLACK
    if len(stops) == 1:
        return stops[0].color

    left, right = _bracket(stops, position)
    span = right.position - left.position
    factor = 0.0 if span == 0 else (position - left.position) / span

    r, g, b = (
        clamp_channel(round_half_up(lc + (rc - lc) * factor))
        for lc, rc in zip(left.color, right.color)
    )
    return (r, g, b)
