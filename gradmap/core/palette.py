"""Hex colour helpers shared by the parser, sampler and report builder."""

import re

_HEX6 = re.compile(r'^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$')

BLACK: tuple[int, int, int] = (0, 0, 0)


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' (or 'RRGGBB') to an (r, g, b) tuple.

    Anything that is not exactly six hex digits maps to black.
    """
    m = _HEX6.match(hex_str.strip())
    if not m:
        return BLACK
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Convert an (r, g, b) tuple to uppercase '#RRGGBB'."""
    r, g, b = (int(c) for c in rgb)
    return f'#{r:02X}{g:02X}{b:02X}'


def clamp_channel(value: int) -> int:
    return max(0, min(255, value))
