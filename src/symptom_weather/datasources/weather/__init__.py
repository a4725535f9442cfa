"""Open-Meteo weather data source.

Fetches recent daily weather history (free, no API key) and normalizes it
to ``WeatherObservation``.

Public API:
  - history: fetch_daily_history, parse_daily_observations,
             observations_to_rows, observations_from_rows
  - client: API URL, daily variable mapping
"""

from symptom_weather.datasources.weather.client import DAILY_VARS, MAX_PAST_DAYS, OPEN_METEO_API
from symptom_weather.datasources.weather.history import (
    fetch_daily_history,
    observations_from_rows,
    observations_to_rows,
    parse_daily_observations,
)

__all__ = [
    "DAILY_VARS",
    "MAX_PAST_DAYS",
    "OPEN_METEO_API",
    "fetch_daily_history",
    "observations_from_rows",
    "observations_to_rows",
    "parse_daily_observations",
]
