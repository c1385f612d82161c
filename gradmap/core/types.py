"""Shared types for gradmap: ColorStop, Command, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from gradmap.core.palette import rgb_to_hex


@dataclass(frozen=True)
class ColorStop:
    """One gradient stop: an RGB colour pinned at a normalised position."""

    color: tuple[int, int, int]  # (r, g, b), each 0-255
    position: float  # 0.0 - 1.0

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.color)


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='apply', help='Recolour an image')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('image')

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._args_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function. Returns the process exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        result = self._run_fn(args)
        return 0 if result is None else int(result)


@dataclass
class Report:
    """Accumulates results of a gradient-map run for text/JSON output."""

    colors: str = ''
    stops: list[ColorStop] = field(default_factory=list)
    image_path: str | None = None
    image_width: int = 0
    image_height: int = 0
    output_path: str | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or extend) a named section of extra results."""
        self.sections.setdefault(section, {}).update(data)
