"""Registry of gradmap subcommands.

A command is any public module in gradmap.commands with a module-level
`command = Command(...)`. Helper modules are named with a leading '_'.
"""

import importlib
import pkgutil

from gradmap.core.types import Command

_registry: dict[str, Command] = {}

# pkgutil sees nothing inside a PyInstaller bundle
_COMMAND_MODULES = ('apply', 'lut', 'presets', 'preview', 'share')


def _module_names() -> list[str]:
    import gradmap.commands as pkg

    names = [info.name for info in pkgutil.iter_modules(pkg.__path__) if not info.name.startswith('_')]
    return names or list(_COMMAND_MODULES)


def discover() -> dict[str, Command]:
    """Import every command module once; later calls reuse the result."""
    if not _registry:
        for modname in _module_names():
            cmd = getattr(importlib.import_module(f'gradmap.commands.{modname}'), 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    reg = discover()
    try:
        return reg[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
