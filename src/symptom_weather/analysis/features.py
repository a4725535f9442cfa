"""Derive a feature vector from one day's weather and the prior history.

Pure functions (no I/O). Formulas:

    Heat index (T >= 27 °C, RH >= 40 %): Rothfusz regression in °C form
    Wind chill (T <= 10 °C, wind > 4.8 km/h):
        13.12 + 0.6215 T - 11.37 v^0.16 + 0.3965 T v^0.16,  v = wind in m/s
    Dew point (Magnus, a = 17.27, b = 237.7):
        alpha = a T / (b + T) + ln(RH / 100)
        Td = b alpha / (a - alpha)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from symptom_weather.analysis.models import PressureTrend, WeatherFeatureVector

if TYPE_CHECKING:
    from collections.abc import Sequence

    from symptom_weather.analysis.models import DailyDataPoint
    from symptom_weather.schemas import WeatherObservation

KMH_TO_MS = 0.277778
HEAT_INDEX_MIN_TEMP_C = 27.0
HEAT_INDEX_MIN_HUMIDITY = 40.0
WIND_CHILL_MAX_TEMP_C = 10.0
WIND_CHILL_MIN_WIND_KMH = 4.8

RECENT_SYMPTOM_DAYS = 3
INTENSITY_WINDOW_DAYS = 7

# Coarse month -> seasonal propensity; winter highest, summer lowest
SEASONAL_FACTORS = {
    12: 0.8, 1: 0.8, 2: 0.8,
    3: 0.6, 4: 0.6, 5: 0.6,
    6: 0.3, 7: 0.3, 8: 0.3,
    9: 0.7, 10: 0.7, 11: 0.7,
}  # fmt: skip


def apparent_temperature(temp_c: float, humidity: float, wind_kmh: float) -> float:
    """Feels-like temperature: heat index when hot and humid, wind chill when cold and windy."""
    if temp_c >= HEAT_INDEX_MIN_TEMP_C and humidity >= HEAT_INDEX_MIN_HUMIDITY:
        t, rh = temp_c, humidity
        return (
            -8.78469475556
            + 1.61139411 * t
            + 2.33854883889 * rh
            - 0.14611605 * t * rh
            - 0.012308094 * t * t
            - 0.0164248277778 * rh * rh
            + 0.002211732 * t * t * rh
            + 0.00072546 * t * rh * rh
            - 0.000003582 * t * t * rh * rh
        )
    if temp_c <= WIND_CHILL_MAX_TEMP_C and wind_kmh > WIND_CHILL_MIN_WIND_KMH:
        v16 = (wind_kmh * KMH_TO_MS) ** 0.16
        return 13.12 + 0.6215 * temp_c - 11.37 * v16 + 0.3965 * temp_c * v16
    return temp_c


def dew_point(temp_c: float, humidity: float) -> float:
    """Magnus-formula dew point in °C.

    Humidity at or below zero is treated as 1% so the logarithm stays finite.
    """
    a, b = 17.27, 237.7
    rh = max(humidity, 1.0)
    alpha = (a * temp_c) / (b + temp_c) + math.log(rh / 100.0)
    return (b * alpha) / (a - alpha)


def classify_pressure_trend(change: float) -> PressureTrend:
    """Bucket a 24h pressure change (hPa)."""
    if change > 3:
        return PressureTrend.RAPIDLY_RISING
    if change > 1:
        return PressureTrend.RISING
    if change < -3:
        return PressureTrend.RAPIDLY_FALLING
    if change < -1:
        return PressureTrend.FALLING
    return PressureTrend.STEADY


def seasonal_factor(month: int) -> float:
    """Seasonal symptom propensity in [0, 1] for a calendar month."""
    return SEASONAL_FACTORS.get(month, 0.5)


def default_features() -> WeatherFeatureVector:
    """Neutral vector used for days without a weather observation."""
    return WeatherFeatureVector(
        temperature=20.0,
        humidity=50.0,
        pressure=1013.0,
        wind_speed=10.0,
        uv_index=5.0,
        precipitation_probability=0.0,
        temperature_change_24h=0.0,
        pressure_change_24h=0.0,
        humidity_change_24h=0.0,
        apparent_temperature=20.0,
        dew_point=10.0,
        pressure_trend=PressureTrend.STEADY,
        hour_of_day=12,
        day_of_week=1,
        seasonal_factor=0.5,
        symptom_in_last_3_days=False,
        average_intensity_last_7_days=0.0,
    )


def _last_with_weather(history: Sequence[DailyDataPoint]) -> DailyDataPoint | None:
    for point in reversed(history):
        if point.has_weather_data:
            return point
    return None


def derive_features(
    observation: WeatherObservation,
    history: Sequence[DailyDataPoint],
) -> WeatherFeatureVector:
    """Build the feature vector for one observed day.

    Args:
        observation: Weather for the day being derived.
        history: Already-assembled prior days, oldest first. Only read.

    Returns:
        Feature vector; 24h deltas are 0 when no prior day has weather.
    """
    previous = _last_with_weather(history)
    if previous is not None:
        prev = previous.features
        temp_change = observation.temperature - prev.temperature
        pressure_change = observation.pressure - prev.pressure
        humidity_change = observation.humidity - prev.humidity
    else:
        temp_change = pressure_change = humidity_change = 0.0

    recent = history[-RECENT_SYMPTOM_DAYS:]
    intensities = [
        p.intensity for p in history[-INTENSITY_WINDOW_DAYS:] if p.intensity is not None
    ]
    avg_intensity = sum(intensities) / len(intensities) if intensities else 0.0

    return WeatherFeatureVector(
        temperature=observation.temperature,
        humidity=observation.humidity,
        pressure=observation.pressure,
        wind_speed=observation.wind_speed,
        uv_index=observation.uv_index,
        precipitation_probability=observation.precipitation_probability,
        temperature_change_24h=temp_change,
        pressure_change_24h=pressure_change,
        humidity_change_24h=humidity_change,
        apparent_temperature=apparent_temperature(
            observation.temperature, observation.humidity, observation.wind_speed
        ),
        dew_point=dew_point(observation.temperature, observation.humidity),
        pressure_trend=classify_pressure_trend(pressure_change),
        hour_of_day=observation.hour,
        day_of_week=observation.date.isoweekday(),
        seasonal_factor=seasonal_factor(observation.date.month),
        symptom_in_last_3_days=any(p.occurred for p in recent),
        average_intensity_last_7_days=avg_intensity,
    )
