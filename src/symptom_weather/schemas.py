"""
Input models for the correlation engine.

Pydantic models for data delivered by external collaborators (the weather
history source and the symptom diary). Datasource adapters normalize their
payloads to these; the engine never mutates them.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from pydantic import BaseModel, Field

# =============================================================================
# Weather
# =============================================================================


class WeatherObservation(BaseModel):
    """One daily weather observation, keyed by calendar date."""

    model_config = {"frozen": True}

    date: date
    temperature: float = Field(..., description="Air temperature in Celsius")
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity in %")
    pressure: float = Field(..., gt=0, description="Barometric pressure in hPa")
    wind_speed: float = Field(default=0.0, ge=0, description="Wind speed in km/h")
    uv_index: float = Field(default=0.0, ge=0)
    precipitation_probability: float = Field(default=0.0, ge=0, le=100)
    hour: int = Field(default=12, ge=0, le=23, description="Local hour the reading represents")


def deduplicate_observations(
    observations: Iterable[WeatherObservation],
) -> list[WeatherObservation]:
    """Keep one observation per calendar day, sorted by date.

    A later observation for the same day replaces the earlier one.
    """
    by_date: dict[date, WeatherObservation] = {}
    for obs in observations:
        by_date[obs.date] = obs
    return [by_date[d] for d in sorted(by_date)]


# =============================================================================
# Symptoms
# =============================================================================


class SymptomRecord(BaseModel):
    """A single diary entry: when the symptom happened and how bad it was."""

    model_config = {"frozen": True}

    timestamp: datetime
    intensity: int = Field(..., ge=1, le=10, description="Ordinal intensity, 1-10")

    @property
    def day(self) -> date:
        """Calendar day the record belongs to."""
        return self.timestamp.date()
