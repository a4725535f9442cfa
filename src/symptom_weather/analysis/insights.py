"""Turn correlation results into short human-readable findings.

Order of the returned lines:
  1. strongest significant correlation
  2. one line per significant threshold effect
  3. one combined line for significant non-linear effects
  4. "nothing significant" caveat
  5. data-quality caveats
  6. seasonal pattern
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from symptom_weather.analysis.models import EffectKind, WeatherFactor
from symptom_weather.config import AnalysisConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from symptom_weather.analysis.models import (
        CorrelationResult,
        DailyDataPoint,
        DataQualityMetrics,
    )

# Meteorological seasons (northern hemisphere), keyed by month
SEASON_NAMES = ("Winter", "Spring", "Summer", "Autumn")
_MONTH_TO_SEASON = {
    12: 0, 1: 0, 2: 0,
    3: 1, 4: 1, 5: 1,
    6: 2, 7: 2, 8: 2,
    9: 3, 10: 3, 11: 3,
}  # fmt: skip


def insufficient_data_insight(config: AnalysisConfig | None = None) -> str:
    """Advisory returned alone when the window fails the overlap gate."""
    cfg = config or AnalysisConfig()
    return (
        f"At least {cfg.min_overlapping_days} days of overlapping weather and symptom "
        "data are needed for a reliable correlation analysis"
    )


def _format_threshold(correlation: CorrelationResult) -> str:
    factor = correlation.factor
    value = correlation.effect.threshold or 0.0
    direction = "drops below" if factor is WeatherFactor.PRESSURE else "rises above"
    return (
        f"Symptom risk rises noticeably when {factor.label.lower()} "
        f"{direction} {value:g}{factor.unit}"
    )


def seasonal_pattern(
    points: Sequence[DailyDataPoint],
    config: AnalysisConfig | None = None,
) -> str | None:
    """Report the season with a clearly higher occurrence rate, if any.

    Needs ``min_seasonal_days`` points overall and ``min_days_per_season``
    days in a season for that season to count.
    """
    cfg = config or AnalysisConfig()
    if len(points) < cfg.min_seasonal_days:
        return None

    counts: dict[int, list[int]] = {}
    for point in points:
        season = _MONTH_TO_SEASON[point.date.month]
        tally = counts.setdefault(season, [0, 0])
        tally[0] += 1 if point.occurred else 0
        tally[1] += 1

    rates = {
        season: occurred / total
        for season, (occurred, total) in sorted(counts.items())
        if total >= cfg.min_days_per_season
    }
    if not rates:
        return None

    average = sum(rates.values()) / len(rates)
    top_season = max(rates, key=lambda s: rates[s])
    top_rate = rates[top_season]
    if top_rate <= average * cfg.seasonal_dominance:
        return None

    return (
        f"{SEASON_NAMES[top_season]} has a higher symptom rate ({top_rate:.0%}); "
        "consider extra precautions in that season"
    )


def generate_insights(
    correlations: Sequence[CorrelationResult],
    points: Sequence[DailyDataPoint],
    quality: DataQualityMetrics,
    config: AnalysisConfig | None = None,
) -> list[str]:
    """Build the ordered insight list for an analysis run.

    Args:
        correlations: Per-factor results (any order).
        points: The assembled daily window.
        quality: Quality metrics for the same window.
        config: Policy constants (defaults if omitted).

    Returns:
        Insight strings, most important first.
    """
    cfg = config or AnalysisConfig()
    insights: list[str] = []

    significant = sorted(
        (c for c in correlations if c.is_significant),
        key=lambda c: abs(c.correlation),
        reverse=True,
    )

    if significant:
        strongest = significant[0]
        direction = "increase" if strongest.correlation > 0 else "decrease"
        insights.append(
            f"{strongest.factor.label} {direction} correlates with symptom occurrence "
            f"(r={strongest.correlation:.2f})"
        )

    insights.extend(
        _format_threshold(c) for c in significant if c.effect.kind is EffectKind.THRESHOLD
    )

    nonlinear = [c.factor.label for c in significant if c.effect.kind is EffectKind.NONLINEAR]
    if nonlinear:
        insights.append(
            f"{', '.join(nonlinear)} relate to symptoms in a non-linear way; "
            "extreme values may matter more than the trend"
        )

    if correlations and not significant:
        insights.append(
            "No statistically significant weather correlations found yet; "
            "more data may be needed"
        )

    if quality.overlapping_days < cfg.sparse_caveat_days:
        insights.append("Data is still sparse; keep recording to improve accuracy")
    if quality.coverage < cfg.coverage_caveat:
        insights.append("Data coverage is low; try to keep a daily record")

    season_line = seasonal_pattern(points, cfg)
    if season_line:
        insights.append(season_line)

    return insights
