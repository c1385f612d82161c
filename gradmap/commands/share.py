"""Encode gradient text as a share-link fragment, or decode one.

The fragment form is '#colors=<percent-encoded text>'. Pass --base to
get a full link. --decode accepts a full URL, a bare fragment or a query
string; the fragment is read first, the query string second.

Example:
    gradmap share '000000,FF0000,FFFF00'
    gradmap share '000000 FFFFFF' --base https://example.org/gradient-map/
    gradmap share --decode 'https://example.org/gradient-map/#colors=000000%2CFFFFFF'
"""

import argparse
import sys

from gradmap.commands._common import add_colour_source, resolve_colours
from gradmap.core.fragment import decode_url, encode_fragment, share_url
from gradmap.core.types import Command

command = Command(
    name='share',
    help='Encode gradient text as a #colors= link fragment, or --decode one.',
)


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    add_colour_source(parser)
    parser.add_argument('-b', '--base', help='Base URL to attach the fragment to')
    parser.add_argument('-d', '--decode', metavar='URL', help='Print the colors text carried by URL')


@command.run
def run(args: argparse.Namespace) -> int:
    if args.decode:
        colors = decode_url(args.decode)
        if colors is None:
            print(f'Error: no colors parameter in {args.decode!r}', file=sys.stderr)
            return 1
        print(colors)
        return 0

    colors = resolve_colours(args)
    print(share_url(args.base, colors) if args.base else encode_fragment(colors))
    return 0
