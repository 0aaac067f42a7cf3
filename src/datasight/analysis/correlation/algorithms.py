"""Correlation coefficients over paired numeric sequences.

Rank ties are not averaged: every value is ranked 1 + the index of its
first occurrence in the ascending-sorted sequence.
"""

import math
from collections.abc import Sequence

import numpy as np


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def pearson(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Product-moment correlation from the raw sums.

    Returns None when the denominator is zero (fewer than two values or a
    constant sequence).
    """
    n = len(x)
    if n == 0 or n != len(y):
        return None
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.min() == xs.max() or ys.min() == ys.max():
        return None

    sum_x = float(xs.sum())
    sum_y = float(ys.sum())
    sum_xy = float((xs * ys).sum())
    sum_x2 = float((xs * xs).sum())
    sum_y2 = float((ys * ys).sum())

    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if not spread > 0:
        return None
    return _finite_or_none(numerator / math.sqrt(spread))


def first_index_ranks(values: Sequence[float]) -> list[float]:
    """Rank each value as 1 + its first index in the sorted sequence."""
    first_index: dict[float, int] = {}
    for index, value in enumerate(sorted(values)):
        first_index.setdefault(value, index)
    return [float(first_index[value] + 1) for value in values]


def spearman(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Pearson correlation of the first-index ranks."""
    if len(x) == 0 or len(x) != len(y):
        return None
    return pearson(first_index_ranks(x), first_index_ranks(y))


def kendall(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Kendall's tau over all pairs.

    Pairs tied in either sequence count as neither concordant nor
    discordant, but the denominator is always n(n-1)/2.
    """
    n = len(x)
    if n < 2 or n != len(y):
        return None
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)

    concordant = 0
    discordant = 0
    for i in range(n - 1):
        sign_x = np.sign(xs[i] - xs[i + 1 :])
        sign_y = np.sign(ys[i] - ys[i + 1 :])
        untied = (sign_x != 0) & (sign_y != 0)
        concordant += int(np.count_nonzero(untied & (sign_x == sign_y)))
        discordant += int(np.count_nonzero(untied & (sign_x != sign_y)))

    return (concordant - discordant) / (0.5 * n * (n - 1))
