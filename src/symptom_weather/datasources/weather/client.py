"""Open-Meteo API constants.

API docs: https://open-meteo.com/en/docs (``past_days`` returns recent
history from the forecast endpoint, up to 92 days).
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

MAX_PAST_DAYS = 92

# Daily variable -> WeatherObservation field
DAILY_FIELDS = {
    "temperature_2m_mean": "temperature",
    "relative_humidity_2m_mean": "humidity",
    "surface_pressure_mean": "pressure",
    "wind_speed_10m_mean": "wind_speed",
    "uv_index_max": "uv_index",
    "precipitation_probability_max": "precipitation_probability",
}

DAILY_VARS = list(DAILY_FIELDS)
