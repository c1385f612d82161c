"""Argument helpers shared by commands that take gradient text."""

import argparse

from gradmap.core.env import default_colors
from gradmap.core.fragment import decode_url
from gradmap.core.presets import PresetStore


def add_colour_source(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'colors',
        nargs='?',
        default=None,
        help="Gradient stops, e.g. '000000,FF0000-40,FFFF00' (default: $GRADMAP_COLORS)",
    )
    parser.add_argument('-P', '--preset', type=int, metavar='N', help='Use stored preset N instead')
    parser.add_argument('-u', '--url', metavar='URL', help='Read colors from a share URL (#colors=...)')
    parser.add_argument('--presets-file', metavar='PATH', help='Preset store (default: $GRADMAP_PRESETS)')


def resolve_colours(args: argparse.Namespace) -> str:
    """Gradient text from, in order: positional, --preset, --url, $GRADMAP_COLORS."""
    if args.colors:
        return args.colors
    if args.preset is not None:
        return PresetStore(args.presets_file).get(args.preset)
    if args.url:
        return decode_url(args.url) or ''
    return default_colors()
