"""Recolour an image by mapping each pixel's luminance through a gradient.

For every pixel, luminance L = round(0.299 R + 0.587 G + 0.114 B) picks
one of 256 colours sampled evenly along the gradient (L / 255). Alpha is
kept as-is. The result is always written as RGBA PNG.

Gradient stops are hex colours, optionally with an explicit position in
percent after a dash. Unpositioned stops are spread evenly; invalid
tokens are ignored.

    000000,FFFFFF           black -> white (greyscale)
    000000 FF0000 FFFF00    black -> red -> yellow ("heat")
    #112233-10,#FFEEDD-90   stops pinned at 10% and 90%

Colours can also come from a stored preset (--preset N), a share URL
(--url), or $GRADMAP_COLORS.

Use --workers N to split the image across N threads; results are
identical to a single-threaded run.

Example:
    gradmap apply photo.jpg '000000,FF0000,FFFF00' -o heat.png
    gradmap apply photo.jpg --preset 2 --json
"""

import argparse
import os
import sys

from PIL import Image

from gradmap.commands._common import add_colour_source, resolve_colours
from gradmap.core.env import default_workers
from gradmap.core.lut import build_lut
from gradmap.core.remap import remap_image
from gradmap.core.report import format_json, format_text
from gradmap.core.stops import parse_stops
from gradmap.core.types import Command, Report

command = Command(
    name='apply',
    help='Recolour an image through a gradient map. Alpha is preserved.',
)

DEFAULT_OUTPUT = 'gradient-mapped-image.png'


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('image', help='Source image (any format Pillow can read)')
    add_colour_source(parser)
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT, help=f'Output PNG (default: {DEFAULT_OUTPUT})')
    parser.add_argument('-w', '--workers', type=int, default=None, help='Worker threads (default: $GRADMAP_WORKERS or 1)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> int:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        return 1

    colors = resolve_colours(args)
    stops = parse_stops(colors)
    if not stops:
        print(f'Error: no valid colour stops in {colors!r}', file=sys.stderr)
        return 1
    print(f'gradmap: {len(stops)} stop(s) parsed', file=sys.stderr)

    workers = args.workers if args.workers is not None else default_workers()

    with Image.open(args.image) as source:
        result = remap_image(source, build_lut(stops), workers=workers)

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    result.save(args.output, format='PNG')

    report = Report(
        colors=colors,
        stops=stops,
        image_path=args.image,
        image_width=result.width,
        image_height=result.height,
        output_path=args.output,
    )
    if workers > 1:
        report.add('apply', {'workers': workers})

    print(format_json(report) if args.json else format_text(report))
    return 0
