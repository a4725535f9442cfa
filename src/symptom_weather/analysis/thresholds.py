"""Learn personal trigger thresholds from the weather on symptom days."""

from __future__ import annotations

from typing import TYPE_CHECKING

from symptom_weather.analysis.models import PersonalThresholds
from symptom_weather.analysis.stats import percentile_index

if TYPE_CHECKING:
    from collections.abc import Sequence

    from symptom_weather.analysis.models import DailyDataPoint

MIN_HISTORY_DAYS = 30
MIN_SYMPTOM_DAYS = 10


def _percentile(values: Sequence[float], fraction: float) -> float:
    ordered = sorted(values)
    return ordered[percentile_index(len(ordered), fraction)]


def learn_personal_thresholds(points: Sequence[DailyDataPoint]) -> PersonalThresholds:
    """Derive thresholds from days when a symptom occurred.

    Falls back to the defaults with fewer than 30 days of history or fewer
    than 10 symptom days that have weather data. Learned values are clamped
    so a handful of unusual days cannot produce absurd triggers.

    Change and humidity thresholds are 75th percentiles. ``low_pressure`` is
    the 25th percentile counted from the low end of the sorted pressures.
    Counting the same index down from the top would land near the 75th
    percentile instead, a trigger that fires on most days.
    """
    if len(points) < MIN_HISTORY_DAYS:
        return PersonalThresholds()

    symptom_days = [p.features for p in points if p.occurred and p.has_weather_data]
    if len(symptom_days) < MIN_SYMPTOM_DAYS:
        return PersonalThresholds()

    pressure_change = _percentile([abs(f.pressure_change_24h) for f in symptom_days], 0.75)
    temperature_change = _percentile(
        [abs(f.temperature_change_24h) for f in symptom_days], 0.75
    )
    humidity = _percentile([f.humidity for f in symptom_days], 0.75)
    low_pressure = _percentile([f.pressure for f in symptom_days], 0.25)

    return PersonalThresholds(
        pressure_change=max(pressure_change, 2.0),
        temperature_change=max(temperature_change, 5.0),
        humidity=min(max(humidity, 60.0), 90.0),
        low_pressure=max(low_pressure, 990.0),
    )
