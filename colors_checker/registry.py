"""Command discovery.

Every module in colors_checker/commands/ that defines a module-level
`command` (a Command instance) becomes a colors-tool subcommand. Lookups
accept the command name or any of its aliases.
"""

import importlib
import pkgutil

import colors_checker.commands
from colors_checker.core.types import Command

_commands: dict[str, Command] = {}
_aliases: dict[str, str] = {}


def _register(cmd: Command) -> None:
    for key in (cmd.name, *cmd.aliases):
        if key in _commands or key in _aliases:
            raise RuntimeError(f'Command name or alias {key!r} registered twice')
    _commands[cmd.name] = cmd
    for alias in cmd.aliases:
        _aliases[alias] = cmd.name


def discover() -> dict[str, Command]:
    """Import colors_checker.commands.* once and return commands keyed by name."""
    if not _commands:
        for info in pkgutil.iter_modules(colors_checker.commands.__path__):
            if info.name.startswith('_'):
                continue
            module = importlib.import_module(f'colors_checker.commands.{info.name}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _register(cmd)
    return _commands


def get(name: str) -> Command:
    """Look up a command by name or alias."""
    commands = discover()
    key = _aliases.get(name, name)
    if key not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[key]


def all_commands() -> dict[str, Command]:
    return discover()
