"""Shared types for colors-tool: Command, ContrastTable."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np


@dataclass
class ContrastTable:
    """Pairwise contrast report: display strings plus the raw ratios behind them."""

    colors: list[str] = field(default_factory=list)  # str(Color) per row/column
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    ratios: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))


class Command:
    """A self-registering colors-tool subcommand.

    Usage in a command module:

        command = Command(name='distance', help='Distance between two colours', aliases=['d'])

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('a')

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = '', aliases: list[str] | None = None):
        self.name = name
        self.help = help
        self.aliases = aliases or []
        self._arguments_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: argparse.Namespace) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args)
