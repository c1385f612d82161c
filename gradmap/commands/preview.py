"""Show what a gradient looks like before applying it.

Prints the parsed stops and the equivalent CSS linear-gradient. With
--output, also renders a horizontal preview strip as PNG. An empty or
fully invalid gradient previews as neutral grey (#ccc).

Example:
    gradmap preview '000000,FF0000-40,FFFF00'
    gradmap preview '000000 FFFFFF' -o strip.png --width 256 --height 16
"""

import argparse

from gradmap.commands._common import add_colour_source, resolve_colours
from gradmap.core.preview import render_strip
from gradmap.core.report import format_json, format_text
from gradmap.core.stops import parse_stops
from gradmap.core.types import Command, Report

command = Command(
    name='preview',
    help='Print parsed stops and CSS gradient. Optionally render a preview strip PNG.',
)


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    add_colour_source(parser)
    parser.add_argument('-o', '--output', help='Write a preview strip PNG here')
    parser.add_argument('--width', type=int, default=512, help='Strip width in pixels (default: 512)')
    parser.add_argument('--height', type=int, default=32, help='Strip height in pixels (default: 32)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> int:
    colors = resolve_colours(args)
    stops = parse_stops(colors)
    report = Report(colors=colors, stops=stops)

    if args.output:
        render_strip(stops, args.width, args.height).save(args.output, format='PNG')
        report.add('preview', {'file': args.output, 'width': args.width, 'height': args.height})

    print(format_json(report) if args.json else format_text(report))
    return 0
