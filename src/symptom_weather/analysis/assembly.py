"""Join symptom records and weather observations into a daily series.

Produces exactly one ``DailyDataPoint`` per calendar day of the trailing
window, oldest first, with no gaps. Each day's rolling features are derived
from the days already assembled, so they only see strictly earlier days.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from symptom_weather.analysis.features import default_features, derive_features
from symptom_weather.analysis.models import DailyDataPoint

if TYPE_CHECKING:
    from collections.abc import Iterable

    from symptom_weather.schemas import SymptomRecord, WeatherObservation

DEFAULT_WINDOW_DAYS = 90


def window_dates(today: date, window_days: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    """Calendar days in ``[today - window_days + 1, today]``, ascending."""
    start = today - timedelta(days=window_days - 1)
    return [start + timedelta(days=i) for i in range(max(window_days, 0))]


def _symptoms_by_day(symptoms: Iterable[SymptomRecord]) -> dict[date, list[SymptomRecord]]:
    by_day: dict[date, list[SymptomRecord]] = {}
    for record in sorted(symptoms, key=lambda r: r.timestamp):
        by_day.setdefault(record.day, []).append(record)
    return by_day


def assemble_data_points(
    symptoms: Iterable[SymptomRecord],
    observations: Iterable[WeatherObservation],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> list[DailyDataPoint]:
    """Build the gap-free daily series for the analysis window.

    Args:
        symptoms: Symptom records in any order; bucketed by calendar day.
        observations: Weather observations, at most one per day expected
            (if duplicated, the last one for a day wins).
        today: Last day of the window (inclusive).
        window_days: Number of days in the window.

    Returns:
        One data point per day. Days without weather carry the neutral
        default vector and ``has_weather_data=False``.
    """
    symptoms_by_day = _symptoms_by_day(symptoms)
    weather_by_day = {obs.date: obs for obs in observations}

    points: list[DailyDataPoint] = []
    for day in window_dates(today, window_days):
        day_records = symptoms_by_day.get(day, [])
        weather = weather_by_day.get(day)
        features = derive_features(weather, points) if weather else default_features()
        points.append(
            DailyDataPoint(
                date=day,
                occurred=bool(day_records),
                intensity=day_records[0].intensity if day_records else None,
                has_weather_data=weather is not None,
                features=features,
            )
        )
    return points
