"""Report builder — table, CSV and JSON output for colors-tool results."""

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from colors_checker.core.color import (
    UNREPORTED_MARKER,
    Color,
    contrast_label,
    contrast_ratio,
    contrast_ratio_description,
)
from colors_checker.core.matrix import contrast_matrix
from colors_checker.core.types import ContrastTable

WHITE = Color.from_hex('white', 'ffffff')
BLACK = Color.from_hex('black', '000000')

COLUMN_SEPARATOR = ' | '


def contrast_cell(ratio: float) -> str:
    """'4.50 AA', or '--' below the reporting threshold."""
    label = contrast_label(ratio)
    if label is None:
        return UNREPORTED_MARKER
    return f'{ratio:.2f} {label}'


def build_contrast_table(colors: Sequence[Color], bookends: bool = True) -> ContrastTable:
    """Every colour against every other colour.

    With bookends, white is prepended and black appended so each colour is
    also checked against the two extremes.
    """
    if bookends:
        colors = [WHITE, *colors, BLACK]
    names = [str(c) for c in colors]
    ratios = contrast_matrix(colors)

    rows = []
    for i, name in enumerate(names):
        rows.append([name] + [contrast_cell(float(r)) for r in ratios[i]])

    return ContrastTable(colors=names, headers=[''] + names, rows=rows, ratios=ratios)


def format_table(table: ContrastTable) -> str:
    """Format as an aligned, left-justified text table."""
    all_rows = [table.headers, *table.rows]
    widths = [max(len(row[i]) for row in all_rows) for i in range(len(table.headers))]

    def _line(cells: list[str]) -> str:
        return COLUMN_SEPARATOR.join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    lines = [_line(table.headers)]
    lines.append('-+-'.join('-' * w for w in widths))
    lines.extend(_line(row) for row in table.rows)
    return '\n'.join(lines)


def format_csv(table: ContrastTable) -> str:
    """Format as CSV, header row first."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(table.headers)
    writer.writerows(table.rows)
    return buf.getvalue().rstrip('\n')


def format_json(table: ContrastTable) -> str:
    """Format as JSON."""
    matrix = []
    for row in table.ratios:
        matrix.append([{'ratio': round(float(r), 4), 'label': contrast_label(float(r))} for r in row])
    obj: dict[str, Any] = {'colors': table.colors, 'matrix': matrix}
    return json.dumps(obj, indent=2)


def format_distance_text(a: Color, b: Color) -> str:
    """Human-readable summary of two colours."""
    cr = contrast_ratio(a, b)
    lines = [
        f'A is {a.hex()}',
        f'B is {b.hex()}',
        f'Distance between A and B: {a.distance_to(b):.2f}',
        f'Contrast ratio between A and B: {cr:.2f} ({contrast_ratio_description(cr)})',
    ]
    return '\n'.join(lines)


def format_distance_json(a: Color, b: Color) -> str:
    cr = contrast_ratio(a, b)
    obj = {
        'a': a.hex(),
        'b': b.hex(),
        'distance': round(a.distance_to(b), 4),
        'contrast_ratio': round(cr, 4),
        'label': contrast_label(cr),
    }
    return json.dumps(obj, indent=2)
