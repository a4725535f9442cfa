"""
Prefect flow for fetching recent weather history.

Run locally:
    python -m symptom_weather.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m symptom_weather.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from symptom_weather.config import get_settings
from symptom_weather.datasources.weather import (
    MAX_PAST_DAYS,
    fetch_daily_history,
    observations_to_rows,
    parse_daily_observations,
)
from symptom_weather.store import DataStore

# Data store with tiered directories under the configured data dir
store = DataStore(get_settings().data_dir)

# Relative paths within the store
WEATHER_HISTORY_PATH = Path("historical/weather/daily_history.json")


@task(name="fetch-weather-history", retries=2, retry_delay_seconds=5)
def fetch_weather_history(
    lat: float = 45.5,
    lon: float = -122.6,
    timezone: str = "America/Los_Angeles",
    past_days: int = MAX_PAST_DAYS,
) -> list[dict[str, Any]]:
    """Fetch daily weather history from Open-Meteo as store rows."""
    payload = fetch_daily_history(lat, lon, past_days=past_days, timezone=timezone)
    return observations_to_rows(parse_daily_observations(payload))


@task(name="save-weather-history")
def save_weather_history(
    rows: list[dict[str, Any]],
    lat: float,
    lon: float,
    timezone: str,
) -> Path:
    """Save weather history via store."""
    return store.write(
        WEATHER_HISTORY_PATH,
        rows,
        source="open-meteo.com",
        valid_until=datetime.now(UTC) + timedelta(hours=24),
        location={"lat": lat, "lon": lon},
        timezone=timezone,
    )


@flow(name="fetch-data", log_prints=True)
def fetch_all(
    lat: float = 45.5,
    lon: float = -122.6,
    timezone: str = "America/Los_Angeles",
) -> dict[str, Any]:
    """
    Fetch all data sources.

    Checks freshness before fetching and skips sources that are still valid.
    """
    if store.is_fresh(WEATHER_HISTORY_PATH):
        print("Weather history is fresh, skipping fetch.")
        rows = store.read(WEATHER_HISTORY_PATH) or []
    else:
        print(f"Fetching weather history for ({lat}, {lon})...")
        rows = fetch_weather_history(lat, lon, timezone)
        output_path = save_weather_history(rows, lat, lon, timezone)
        print(f"Saved {len(rows)} days of weather history to {output_path}")

    return {"weather_days": len(rows)}


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
