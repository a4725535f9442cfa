"""Small statistics helpers (no numpy).

The p-value is a normal approximation: the t statistic is scaled by
sqrt(df) and looked up on the standard normal CDF, which is conservative
compared to a Student's t lookup.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

# Abramowitz & Stegun 7.1.26, max error 1.5e-7
_ERF_P = 0.3275911
_ERF_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)


def erf(x: float) -> float:
    """Polynomial approximation of the error function."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)
    t = 1.0 / (1.0 + _ERF_P * x)
    a1, a2, a3, a4, a5 = _ERF_A
    poly = ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def normal_cdf(x: float) -> float:
    """Standard normal cumulative distribution."""
    return 0.5 * (1.0 + erf(x / math.sqrt(2.0)))


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient.

    Returns 0.0 for mismatched or too-short input and when either series
    has zero variance.
    """
    n = len(x)
    if n != len(y) or n < 2:
        return 0.0
    # Constant series: the sum formula can leave rounding noise instead of 0
    if min(x) == max(x) or min(y) == max(y):
        return 0.0

    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(a * b for a, b in zip(x, y, strict=True))
    sum_x2 = sum(a * a for a in x)
    sum_y2 = sum(b * b for b in y)

    numerator = n * sum_xy - sum_x * sum_y
    var_x = n * sum_x2 - sum_x * sum_x
    var_y = n * sum_y2 - sum_y * sum_y
    if var_x <= 0 or var_y <= 0:
        return 0.0

    r = numerator / math.sqrt(var_x * var_y)
    return max(-1.0, min(1.0, r))


def p_value(r: float, n: int) -> float:
    """Two-sided p-value for a correlation of ``r`` over ``n`` samples."""
    if n <= 2:
        return 1.0
    if abs(r) >= 1.0:
        return 0.0
    df = n - 2
    t = r * math.sqrt(df) / math.sqrt(1.0 - r * r)
    p = 2.0 * (1.0 - normal_cdf(abs(t) / math.sqrt(df)))
    return min(1.0, max(0.0, p))


def confidence_score(r: float, p: float, n: int) -> float:
    """Heuristic blend of sample size, significance and effect size in [0, 1]."""
    sample_part = min(n / 50.0, 1.0)
    score = 0.4 * sample_part + 0.4 * (1.0 - p) + 0.2 * abs(r)
    return min(1.0, max(0.0, score))


def rate(flags: Sequence[float]) -> float:
    """Mean of 0/1 occurrence flags (0.0 for empty input)."""
    return sum(flags) / len(flags) if flags else 0.0


def percentile_index(count: int, fraction: float) -> int:
    """Index used for the simple sorted-list percentile: int((n - 1) * fraction)."""
    return int((count - 1) * fraction)
