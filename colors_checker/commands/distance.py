"""Colour distance and contrast ratio between two colours.

This interpretation is very naive, and assumes colour is represented in a
3-dimensional space with axes red, green and blue. The distance between
two points in this space is

  sqrt(R^2 + G^2 + B^2)

where R is the difference between the two colours' red values (0-1), etc.
Black to white is sqrt(3) ≈ 1.73.

The WCAG contrast ratio between the two colours is printed too.

Example:
    colors-tool distance fff6dd a95f09
    colors-tool d ff0000 00ff00 --json
"""

import argparse

from colors_checker.core.color import Color
from colors_checker.core.report import format_distance_json, format_distance_text
from colors_checker.core.types import Command

command = Command(
    name='distance',
    help='Compute the colour distance between two given colours.',
    aliases=['d'],
)


@command.arguments
def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('a', metavar='A', help='First colour, 6 hex digits (no #)')
    parser.add_argument('b', metavar='B', help='Second colour, 6 hex digits (no #)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> None:
    a = Color.from_hex('a', args.a)
    b = Color.from_hex('b', args.b)
    if args.json:
        print(format_distance_json(a, b))
    else:
        print(format_distance_text(a, b))
