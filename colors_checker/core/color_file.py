"""Line-oriented parser for colour list files.

Format, one colour per line:

    name hex

e.g.

    # brand palette
    cream   fff6dd
    ochre   a95f09

Blank lines and lines starting with '#' are skipped. By default name and
hex are split on any run of whitespace; pass `separator` to split on a
literal string instead (e.g. ',' or '\\t').

The first malformed line aborts the whole file with a ColorFileError that
names the line.
"""

from colors_checker.core.color import Color, FormatError


class ColorFileError(ValueError):
    """A line of a colour file could not be turned into a Color."""

    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def parse_color_file(path: str, separator: str | None = None) -> list[Color]:
    """Parse a colour list file from disk."""
    with open(path, encoding='utf-8-sig') as f:
        text = f.read()
    return parse_color_string(text, separator=separator)


def parse_color_string(text: str, separator: str | None = None) -> list[Color]:
    """Parse a colour list from a string."""
    colors = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        colors.append(_parse_line(line, line_number, separator))
    return colors


def _parse_line(line: str, line_number: int, separator: str | None) -> Color:
    parts = line.split() if separator is None else [p.strip() for p in line.split(separator)]
    if len(parts) != 2 or not all(parts):
        fmt = 'name hex' if separator is None else f'name{separator}hex'
        raise ColorFileError(
            f'syntax error on line {line_number}: line {line!r} must be in the format {fmt!r}',
            line_number,
            line,
        )
    name, value = parts
    try:
        return Color.from_hex(name, value)
    except FormatError as e:
        raise ColorFileError(f'line {line_number}: {e}', line_number, line) from e
