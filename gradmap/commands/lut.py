"""Dump the 256-entry lookup table a gradient produces.

Entry i is the gradient sampled at i/255, i.e. the colour every pixel of
luminance i becomes. Useful for checking a gradient numerically or for
feeding the table to another tool.

Text output is one line per level: '<level> #RRGGBB'.
JSON output is {"colors": ..., "lut": [[r, g, b], ... x256]}.

Example:
    gradmap lut '000000,FFFFFF'
    gradmap lut '000000 FF0000 FFFF00' --json > heat.json
"""

import argparse
import json

from gradmap.commands._common import add_colour_source, resolve_colours
from gradmap.core.lut import build_lut, lut_rows
from gradmap.core.palette import rgb_to_hex
from gradmap.core.stops import parse_stops
from gradmap.core.types import Command

command = Command(
    name='lut',
    help='Print the 256-entry luminance -> colour table for a gradient.',
)


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    add_colour_source(parser)
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> int:
    colors = resolve_colours(args)
    rows = lut_rows(build_lut(parse_stops(colors)))

    if args.json:
        print(json.dumps({'colors': colors, 'lut': [list(row) for row in rows]}))
    else:
        for level, row in enumerate(rows):
            print(f'{level:3d} {rgb_to_hex(row)}')
    return 0
