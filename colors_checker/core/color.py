"""Colour value type and WCAG colour arithmetic.

A Color holds three channels normalised to [0, 1] (8-bit value / 255).
Everything here is a pure function of its inputs: no I/O, no logging.

Luminance and contrast ratio follow the WCAG 2.0 definitions:
  https://www.w3.org/TR/WCAG20/#relativeluminancedef
  https://www.w3.org/TR/WCAG20/#contrast-ratiodef

Distance is the naive Euclidean distance between two points in a cube with
axes red, green and blue. It is not perceptual.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_HEX_PAIR = re.compile(r'[0-9a-fA-F]{2}')

# Contrast ratio tiers
UNREPORTED_THRESHOLD = 3.0
AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0

UNREPORTED_MARKER = '--'


class FormatError(ValueError):
    """Raised when a hex colour string cannot be parsed.

    `chunk` is the offending 2-digit chunk, or None when the overall
    length is wrong.
    """

    def __init__(self, message: str, value: str, chunk: str | None = None):
        super().__init__(message)
        self.value = value
        self.chunk = chunk


@dataclass(frozen=True)
class Color:
    """A named RGB colour with channels in [0, 1]."""

    name: str
    red: float
    green: float
    blue: float

    @classmethod
    def from_rgb(cls, name: str, red: int, green: int, blue: int) -> Color:
        """Build from 0-255 integers. No bounds check."""
        return cls(name=name, red=red / 255, green=green / 255, blue=blue / 255)

    @classmethod
    def from_hex(cls, name: str, value: str) -> Color:
        """Build from a 6-digit hex string without a leading '#'."""
        if len(value) != 6:
            raise FormatError(f'hex for whole color must have 6 digits, got {value!r}', value)
        red = _hex_channel(value, 0)
        green = _hex_channel(value, 2)
        blue = _hex_channel(value, 4)
        return cls(name=name, red=red, green=green, blue=blue)

    def __str__(self) -> str:
        return f'{self.name} ({self.hex()})'

    def hex(self) -> str:
        """Render as #rrggbb. Channels are truncated, not rounded."""
        r = int(self.red * 255)
        g = int(self.green * 255)
        b = int(self.blue * 255)
        return f'#{r:02x}{g:02x}{b:02x}'

    def luminance(self) -> float:
        """WCAG relative luminance."""
        r = _linearize(self.red)
        g = _linearize(self.green)
        b = _linearize(self.blue)
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def contrast_ratio(self, other: Color) -> float:
        return contrast_ratio(self, other)

    def distance_to(self, other: Color) -> float:
        return distance(self, other)


def _hex_channel(value: str, offset: int) -> float:
    chunk = value[offset : offset + 2]
    if not _HEX_PAIR.fullmatch(chunk):
        raise FormatError(f'invalid hex chunk {chunk!r} at position {offset} in {value!r}', value, chunk)
    return int(chunk, 16) / 255


def _linearize(v: float) -> float:
    """sRGB gamma-encoded channel -> linear light."""
    if v > 0.03928:
        return ((v + 0.055) / 1.055) ** 2.4
    return v / 12.92


def contrast_ratio(a: Color, b: Color) -> float:
    """(lighter + 0.05) / (darker + 0.05). Symmetric, in [1, 21]."""
    l1 = a.luminance()
    l2 = b.luminance()
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_label(ratio: float) -> str | None:
    """WCAG tier for a contrast ratio. None below 3.0 (unreported)."""
    if ratio < UNREPORTED_THRESHOLD:
        return None
    if ratio < AA_THRESHOLD:
        return 'AA+'
    if ratio < AAA_THRESHOLD:
        return 'AA'
    return 'AAA'


def contrast_ratio_description(ratio: float) -> str:
    label = contrast_label(ratio)
    return label if label is not None else UNREPORTED_MARKER


def distance(a: Color, b: Color) -> float:
    """Euclidean distance over raw RGB channels."""
    return math.sqrt((a.red - b.red) ** 2 + (a.green - b.green) ** 2 + (a.blue - b.blue) ** 2)
