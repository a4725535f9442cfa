"""Heuristic classification of a factor's effect shape.

Factor-specific bucket tests run first; if none fires, the sign of the
correlation decides. The rate-ratio multiplier is an empirical choice,
not a significance test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from symptom_weather.analysis.models import EffectClassification, WeatherFactor
from symptom_weather.analysis.stats import rate
from symptom_weather.config import AnalysisConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def _split_rates(
    values: Sequence[float],
    flags: Sequence[float],
    in_bucket: Callable[[float], bool],
) -> tuple[float, float] | None:
    """Occurrence rate inside and outside a bucket, or None if either is empty."""
    inside = [f for v, f in zip(values, flags, strict=True) if in_bucket(v)]
    outside = [f for v, f in zip(values, flags, strict=True) if not in_bucket(v)]
    if not inside or not outside:
        return None
    return rate(inside), rate(outside)


def _bucket_dominates(
    values: Sequence[float],
    flags: Sequence[float],
    in_bucket: Callable[[float], bool],
    ratio: float,
) -> bool:
    rates = _split_rates(values, flags, in_bucket)
    if rates is None:
        return False
    inside_rate, outside_rate = rates
    return inside_rate > outside_rate * ratio


def classify_effect(
    factor: WeatherFactor,
    values: Sequence[float],
    flags: Sequence[float],
    correlation: float,
    config: AnalysisConfig | None = None,
) -> EffectClassification:
    """Decide between threshold, non-linear and directional effects.

    Args:
        factor: Which weather factor the values belong to.
        values: Factor values, one per day with weather data.
        flags: 1.0/0.0 occurrence flags, parallel to ``values``.
        correlation: Pearson r of ``values`` against ``flags``.
        config: Thresholds and bucket ratio (defaults if omitted).

    Returns:
        Exactly one effect classification.
    """
    cfg = config or AnalysisConfig()

    if factor is WeatherFactor.PRESSURE:
        low = cfg.low_pressure_threshold
        if _bucket_dominates(values, flags, lambda v: v < low, cfg.bucket_ratio):
            return EffectClassification.at_threshold(low)

    elif factor is WeatherFactor.HUMIDITY:
        high = cfg.high_humidity_threshold
        if _bucket_dominates(values, flags, lambda v: v > high, cfg.bucket_ratio):
            return EffectClassification.at_threshold(high)

    elif factor is WeatherFactor.TEMPERATURE:
        cold, heat = cfg.extreme_cold_c, cfg.extreme_heat_c
        if _bucket_dominates(values, flags, lambda v: v < cold or v > heat, cfg.bucket_ratio):
            return EffectClassification.nonlinear()

    if abs(correlation) < cfg.weak_correlation:
        return EffectClassification.nonlinear()
    if correlation > 0:
        return EffectClassification.positive()
    return EffectClassification.negative()
