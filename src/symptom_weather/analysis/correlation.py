"""Per-factor correlation of weather against symptom occurrence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from symptom_weather.analysis.effects import classify_effect
from symptom_weather.analysis.models import CorrelationResult, WeatherFactor
from symptom_weather.analysis.stats import confidence_score, p_value, pearson
from symptom_weather.config import AnalysisConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from symptom_weather.analysis.models import DailyDataPoint, WeatherFeatureVector

logger = logging.getLogger(__name__)


def factor_value(features: WeatherFeatureVector, factor: WeatherFactor) -> float:
    """Read one factor's scalar from a feature vector."""
    match factor:
        case WeatherFactor.TEMPERATURE:
            return features.temperature
        case WeatherFactor.TEMPERATURE_CHANGE:
            return features.temperature_change_24h
        case WeatherFactor.PRESSURE:
            return features.pressure
        case WeatherFactor.PRESSURE_CHANGE:
            return features.pressure_change_24h
        case WeatherFactor.HUMIDITY:
            return features.humidity
        case WeatherFactor.WIND_SPEED:
            return features.wind_speed
        case WeatherFactor.UV_INDEX:
            return features.uv_index
        case WeatherFactor.PRECIPITATION:
            return features.precipitation_probability
    msg = f"Unknown weather factor: {factor!r}"
    raise ValueError(msg)


def paired_series(
    points: Sequence[DailyDataPoint],
    factor: WeatherFactor,
) -> tuple[list[float], list[float]]:
    """Parallel (factor value, occurrence flag) lists over days with weather."""
    valid = [p for p in points if p.has_weather_data]
    values = [factor_value(p.features, factor) for p in valid]
    flags = [1.0 if p.occurred else 0.0 for p in valid]
    return values, flags


def correlate_factor(
    points: Sequence[DailyDataPoint],
    factor: WeatherFactor,
    config: AnalysisConfig | None = None,
) -> CorrelationResult | None:
    """Correlate one factor with occurrence.

    Returns None when fewer than ``config.min_sample_size`` days have weather.
    """
    cfg = config or AnalysisConfig()
    values, flags = paired_series(points, factor)
    n = len(values)
    if n < cfg.min_sample_size:
        logger.debug("Skipping %s: %d samples < %d", factor, n, cfg.min_sample_size)
        return None

    r = pearson(values, flags)
    p = p_value(r, n)
    return CorrelationResult(
        factor=factor,
        correlation=r,
        p_value=p,
        sample_size=n,
        confidence=confidence_score(r, p, n),
        effect=classify_effect(factor, values, flags, r, cfg),
        significance_level=cfg.significance_level,
        min_sample_size=cfg.min_sample_size,
    )


def correlate_all(
    points: Sequence[DailyDataPoint],
    config: AnalysisConfig | None = None,
    factors: Sequence[WeatherFactor] = tuple(WeatherFactor),
) -> list[CorrelationResult]:
    """Correlate every factor, strongest |r| first."""
    results = [
        result
        for factor in factors
        if (result := correlate_factor(points, factor, config)) is not None
    ]
    results.sort(key=lambda c: abs(c.correlation), reverse=True)
    return results
