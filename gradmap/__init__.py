"""gradmap — recolour images by mapping luminance through a colour gradient.

    >>> from gradmap import parse_stops, build_lut, remap
    >>> lut = build_lut(parse_stops('000000,FF0000,FFFF00'))
    >>> out = remap(rgba_bytes, width, height, lut)
"""

from gradmap.core.lut import build_lut, identity_lut
from gradmap.core.remap import remap, remap_array, remap_image
from gradmap.core.sampler import color_at
from gradmap.core.stops import css_gradient, parse_stops
from gradmap.core.types import ColorStop

__all__ = [
    'ColorStop',
    'build_lut',
    'color_at',
    'css_gradient',
    'identity_lut',
    'parse_stops',
    'remap',
    'remap_array',
    'remap_image',
]
