"""colors-tool — A tool for playing with colours.

Usage: colors-tool <command> [options]

Commands are auto-discovered from colors_checker/commands/.
Each command module's docstring is its documentation.
Run `colors-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colors-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colors_checker import registry
from colors_checker.core.env import load_env
from colors_checker.core.types import Command


def _load_command_module(cmd: Command) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colors_checker.commands.{cmd.name.replace("-", "_")}')


def _short_help(cmd: Command) -> str:
    doc = (_load_command_module(cmd).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else cmd.help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  colors-tool contrast-ratio --in palette.txt\n'
        '  colors-tool cr --in palette.txt --out contrast.csv --format csv\n'
        '  colors-tool distance fff6dd a95f09\n'
        '  colors-tool help distance\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  COLORS_TOOL_FORMAT=table|csv|json\n'
        '  COLORS_TOOL_SEPARATOR=,\n'
    )
    parser = argparse.ArgumentParser(
        prog='colors-tool',
        description='A tool for playing with colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command_name', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(
            name,
            aliases=cmd.aliases,
            help=_short_help(cmd),
            description=cmd.help,
        )
        cmd.configure(p)

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            aliases = f' ({", ".join(cmd.aliases)})' if cmd.aliases else ''
            print(f'  {name + aliases:<22} {_short_help(cmd)}')
        print('\nRun: colors-tool help <command> for full docs.')
        return 0

    try:
        cmd = registry.get(topic)
    except KeyError:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (_load_command_module(cmd).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {cmd.name!r})')
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colors-tool: loaded {env_path}', file=sys.stderr)

    if not args.command_name:
        parser.print_help()
        sys.exit(1)

    if args.command_name == 'help':
        status = _print_help(args.topic)
        if status:
            sys.exit(status)
        return

    cmd = registry.get(args.command_name)
    try:
        cmd.execute(args)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
