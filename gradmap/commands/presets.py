"""Manage stored gradient presets.

Presets live in a JSON file ($GRADMAP_PRESETS, default
~/.gradmap/presets.json) as an ordered list of {"colors": "<text>"}
records. The text is stored exactly as given and parsed on use, so
presets with invalid tokens behave the same as typing them.

Actions:
  list            numbered list of presets with their CSS preview
  add <colors>    append a preset, prints its index
  show <N>        print the raw text of preset N
  remove <N>      delete preset N (later presets shift down)

Use a preset with any gradient command: gradmap apply photo.png --preset N

Example:
    gradmap presets add '000000,FF0000,FFFF00'
    gradmap presets list
    gradmap presets remove 0
"""

import argparse
import json
import sys

from gradmap.core.presets import PresetStore
from gradmap.core.stops import css_gradient, parse_stops
from gradmap.core.types import Command

command = Command(
    name='presets',
    help='List, add, show or remove stored gradient presets.',
)


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('action', choices=['list', 'add', 'show', 'remove'], help='What to do')
    parser.add_argument('value', nargs='?', help='Colors text (add) or preset index (show/remove)')
    parser.add_argument('--presets-file', metavar='PATH', help='Preset store (default: $GRADMAP_PRESETS)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text (list)')


def _index(value: str | None) -> int:
    if value is None:
        raise ValueError('preset index required')
    return int(value)


@command.run
def run(args: argparse.Namespace) -> int:
    store = PresetStore(args.presets_file)

    if args.action == 'list':
        presets = store.load()
        if args.json:
            print(json.dumps(presets, indent=2))
        elif not presets:
            print(f'(no presets in {store.path})')
        else:
            for i, record in enumerate(presets):
                print(f'{i:3d}  {record["colors"]}')
                print(f'     {css_gradient(parse_stops(record["colors"]))}')
        return 0

    if args.action == 'add':
        if not args.value:
            print('Error: presets add needs colors text', file=sys.stderr)
            return 1
        index = store.add(args.value)
        print(f'gradmap: saved preset {index} to {store.path}', file=sys.stderr)
        print(index)
        return 0

    if args.action == 'show':
        print(store.get(_index(args.value)))
        return 0

    removed = store.remove(_index(args.value))
    print(f'gradmap: removed preset {args.value}: {removed}', file=sys.stderr)
    return 0
