"""Pairwise contrast ratios for a list of colours, vectorised with numpy."""

from collections.abc import Sequence

import numpy as np

from colors_checker.core.color import Color


def luminances(colors: Sequence[Color]) -> np.ndarray:
    return np.array([c.luminance() for c in colors], dtype=np.float64)


def contrast_matrix(colors: Sequence[Color]) -> np.ndarray:
    """Return an n x n matrix where [i, j] is the contrast ratio of colors i and j.

    Symmetric with a unit diagonal. Same arithmetic as color.contrast_ratio,
    so entries match it exactly.
    """
    lum = luminances(colors)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
