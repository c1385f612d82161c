"""gradmap — Gradient-map (false colour) recolouring for raster images.

Usage: gradmap <command> [args] [options]

Commands are auto-discovered from gradmap/commands/.
Each command module's docstring is its documentation.
Run `gradmap help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, gradmap looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from gradmap import registry
from gradmap.core.env import load_env
from gradmap.core.presets import PresetError


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'gradmap.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  gradmap apply photo.jpg '000000,FF0000,FFFF00' -o heat.png\n"
        "  gradmap apply photo.jpg '#112233-10 #FFEEDD-90' --workers 4 --json\n"
        "  gradmap preview '000000,FFFFFF' -o strip.png\n"
        "  gradmap lut '000000 FF0000 FFFF00' --json\n"
        "  gradmap share '000000,FFFFFF' --base https://example.org/gradient-map/\n"
        "  gradmap presets add '000000,FF0000,FFFF00'\n"
        '  gradmap help apply\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  GRADMAP_COLORS   default gradient when none is given\n'
        '  GRADMAP_PRESETS  preset store path (default ~/.gradmap/presets.json)\n'
        '  GRADMAP_WORKERS  default thread count for apply (default 1)\n'
    )
    parser = argparse.ArgumentParser(
        prog='gradmap',
        description='Recolour images by mapping luminance through a colour gradient.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.configure(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: gradmap help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # OS env vars always win over .env
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'gradmap: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        sys.exit(_print_help(args.topic))

    cmd = registry.get(args.command)
    try:
        code = cmd.execute(args)
    except (PresetError, IndexError, ValueError, OSError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
