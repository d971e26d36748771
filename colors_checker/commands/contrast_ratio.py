"""Contrast ratio of every colour in a file against every other colour.

Reads a colour file (one `name hex` per line, blank lines and # comments
skipped). White (#ffffff) is prepended and black (#000000) appended to the
list unless --no-bookends is given. Each cell holds the WCAG contrast ratio
and its tier:

  AAA   ratio >= 7.0
  AA    ratio >= 4.5
  AA+   ratio >= 3.0
  --    below 3.0, not reported

Output goes to stdout, or to --out. Format is table (default), csv or json;
the default can be set with COLORS_TOOL_FORMAT. The name/hex separator can
be set with --separator or COLORS_TOOL_SEPARATOR.

Example:
    colors-tool contrast-ratio --in palette.txt
    colors-tool cr --in palette.txt --out contrast.csv --format csv
    colors-tool cr --in palette.csv --separator , --format json
"""

import argparse
import sys

from colors_checker.core.color_file import parse_color_file
from colors_checker.core.env import OUTPUT_FORMATS, load_settings
from colors_checker.core.report import build_contrast_table, format_csv, format_json, format_table
from colors_checker.core.types import Command

command = Command(
    name='contrast-ratio',
    help='Contrast ratio matrix (WCAG AA+/AA/AAA) for every colour in a file.',
    aliases=['cr'],
)

FORMATTERS = {
    'table': format_table,
    'csv': format_csv,
    'json': format_json,
}


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-i', '--in', dest='in_file', required=True, metavar='INFILE', help='File with one `name hex` per line'
    )
    parser.add_argument('-o', '--out', dest='out_file', help='Output file (default: stdout)')
    parser.add_argument(
        '-f', '--format', choices=OUTPUT_FORMATS, default=None, help='Output format (default: table)'
    )
    parser.add_argument('-s', '--separator', default=None, help='Separator between name and hex (default: whitespace)')
    parser.add_argument(
        '--no-bookends', action='store_true', help='Do not add white and black to the ends of the colour list'
    )


@command.run
def run(args: argparse.Namespace) -> None:
    settings = load_settings()
    output_format = args.format or settings.output_format
    # An empty --separator means whitespace, like an empty COLORS_TOOL_SEPARATOR
    separator = (args.separator or None) if args.separator is not None else settings.separator

    colors = parse_color_file(args.in_file, separator=separator)
    table = build_contrast_table(colors, bookends=not args.no_bookends)
    output = FORMATTERS[output_format](table)

    if args.out_file:
        with open(args.out_file, 'w', encoding='utf-8', newline='') as f:
            f.write(output + '\n')
        print(f'colors-tool: output is in file {args.out_file}', file=sys.stderr)
    else:
        print(output)
