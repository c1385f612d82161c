"""Lenient parser for gradient stop text.

Accepts whitespace- and/or comma-separated tokens of the form

    [#]RRGGBB[-NN]

where NN is an explicit stop position in percent (0-100). Tokens without
a position are spread evenly across [0, 1] by their index in the token
list. Invalid tokens are dropped silently but still consume an index, so
'FF0000 nope 0000FF' puts blue at 1.0, not 0.5.

Parsing never raises; unparseable text yields an empty list.
"""

import re

from gradmap.core.palette import hex_to_rgb
from gradmap.core.types import ColorStop

_SEPARATORS = re.compile(r'[,\s]+')
_VALID_HEX = re.compile(r'^#[0-9A-F]{6}$')
_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')

EMPTY_PREVIEW = '#ccc'


def _parse_percent(text: str) -> float | None:
    """Read a leading integer the way a browser's parseInt does, as a 0-1 fraction."""
    m = _LEADING_INT.match(text)
    if not m:
        return None
    # float() has no digit limit; huge runs become inf and clamp to 0 or 1
    return float(m.group(1)) / 100


def _tokenize(text: str) -> list[str]:
    return [t for t in _SEPARATORS.split(text) if t.strip()]


def parse_stops(text: str) -> list[ColorStop]:
    """Parse stop text into ColorStops sorted by position (stable)."""
    tokens = _tokenize(text or '')
    count = len(tokens)
    stops: list[ColorStop] = []

    for index, token in enumerate(tokens):
        hex_color = token.strip().upper()
        position: float | None = None

        if '-' in hex_color:
            parts = hex_color.split('-')
            hex_color = parts[0]
            position = _parse_percent(parts[1])

        if not hex_color.startswith('#'):
            hex_color = '#' + hex_color

        if not _VALID_HEX.match(hex_color):
            continue

        if position is None:
            position = index / (count - 1) if count > 1 else 0.0

        stops.append(ColorStop(color=hex_to_rgb(hex_color), position=max(0.0, min(1.0, position))))

    stops.sort(key=lambda s: s.position)
    return stops


def _format_percent(position: float) -> str:
    pct = position * 100
    return str(int(pct)) if pct == int(pct) else repr(pct)


def css_gradient(stops: list[ColorStop]) -> str:
    """Render stops as a CSS linear-gradient for previews."""
    if not stops:
        return EMPTY_PREVIEW
    parts = ', '.join(f'{s.hex} {_format_percent(s.position)}%' for s in stops)
    return f'linear-gradient(to right, {parts})'
