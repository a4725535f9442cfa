"""Recent daily weather history from the Open-Meteo forecast API."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from symptom_weather.datasources.weather.client import (
    DAILY_FIELDS,
    DAILY_VARS,
    MAX_PAST_DAYS,
    OPEN_METEO_API,
)
from symptom_weather.schemas import WeatherObservation, deduplicate_observations
from symptom_weather.services.http import session

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def fetch_daily_history(
    lat: float = 45.5,
    lon: float = -122.6,
    *,
    past_days: int = MAX_PAST_DAYS,
    timezone: str = "America/Los_Angeles",
) -> dict[str, Any]:
    """
    Fetch the last ``past_days`` days of daily weather.

    Args:
        lat: Latitude (default: Portland, OR).
        lon: Longitude.
        past_days: Days of history to request (clamped to 1..92).
        timezone: Timezone that defines the calendar day.

    Returns:
        Raw API response dict with a ``daily`` key containing arrays.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "daily": DAILY_VARS,
        "timezone": timezone,
        "past_days": max(1, min(past_days, MAX_PAST_DAYS)),
        "forecast_days": 1,
    }
    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_daily_observations(payload: dict[str, Any]) -> list[WeatherObservation]:
    """Convert an Open-Meteo ``daily`` block into observations.

    Days where any required variable is missing are skipped rather than
    filled, so the engine sees them as days without weather.
    """
    daily = payload.get("daily", {})
    dates = daily.get("time", [])

    observations: list[WeatherObservation] = []
    for i, day in enumerate(dates):
        row: dict[str, Any] = {}
        for var, field_name in DAILY_FIELDS.items():
            column = daily.get(var) or []
            row[field_name] = column[i] if i < len(column) else None
        if any(value is None for value in row.values()):
            logger.debug("Skipping %s: incomplete daily values", day)
            continue
        observations.append(WeatherObservation(date=date.fromisoformat(day), **row))
    return deduplicate_observations(observations)


def observations_to_rows(observations: Iterable[WeatherObservation]) -> list[dict[str, Any]]:
    """Serialize observations to JSON-compatible rows for the store."""
    return [obs.model_dump(mode="json") for obs in observations]


def observations_from_rows(rows: Iterable[dict[str, Any]]) -> list[WeatherObservation]:
    """Rebuild observations from stored rows."""
    return deduplicate_observations(WeatherObservation.model_validate(row) for row in rows)
