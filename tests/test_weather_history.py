"""Tests for the Open-Meteo weather history datasource."""

from __future__ import annotations

from datetime import date
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from symptom_weather.datasources.weather import (
    DAILY_VARS,
    OPEN_METEO_API,
    fetch_daily_history,
    observations_from_rows,
    observations_to_rows,
    parse_daily_observations,
)


def _payload() -> dict[str, Any]:
    return {
        "daily": {
            "time": ["2026-03-01", "2026-03-02", "2026-03-03"],
            "temperature_2m_mean": [8.5, 10.1, 7.2],
            "relative_humidity_2m_mean": [82, 75, None],
            "surface_pressure_mean": [1004.2, 1011.8, 1015.0],
            "wind_speed_10m_mean": [14.0, 9.5, 6.1],
            "uv_index_max": [2.1, 3.4, 1.0],
            "precipitation_probability_max": [80, 20, 5],
        }
    }


class TestFetchDailyHistory:
    """Test the API request."""

    @patch("symptom_weather.datasources.weather.history.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = _payload()
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        result = fetch_daily_history(45.5, -122.6, past_days=30, timezone="UTC")

        assert result == _payload()
        mock_get.assert_called_once()
        assert mock_get.call_args.args[0] == OPEN_METEO_API
        params = mock_get.call_args.kwargs["params"]
        assert params["latitude"] == 45.5
        assert params["longitude"] == -122.6
        assert params["past_days"] == 30
        assert params["timezone"] == "UTC"
        assert params["daily"] == DAILY_VARS

    @patch("symptom_weather.datasources.weather.history.session.get")
    def test_past_days_clamped(self, mock_get: Mock) -> None:
        mock_get.return_value = Mock(json=Mock(return_value={}))
        fetch_daily_history(past_days=365)
        assert mock_get.call_args.kwargs["params"]["past_days"] == 92

    @patch("symptom_weather.datasources.weather.history.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("503")
        mock_get.return_value = mock_response
        with pytest.raises(requests.HTTPError):
            fetch_daily_history()


class TestParseDailyObservations:
    """Test conversion to WeatherObservation."""

    def test_parses_complete_days(self) -> None:
        observations = parse_daily_observations(_payload())
        assert [o.date for o in observations] == [date(2026, 3, 1), date(2026, 3, 2)]
        first = observations[0]
        assert first.temperature == 8.5
        assert first.humidity == 82
        assert first.pressure == 1004.2
        assert first.wind_speed == 14.0
        assert first.uv_index == 2.1
        assert first.precipitation_probability == 80

    def test_missing_column_skips_days(self) -> None:
        payload = _payload()
        del payload["daily"]["uv_index_max"]
        assert parse_daily_observations(payload) == []

    def test_empty_payload(self) -> None:
        assert parse_daily_observations({}) == []


class TestRows:
    """Test store row serialization."""

    def test_rows_are_json_compatible(self) -> None:
        rows = observations_to_rows(parse_daily_observations(_payload()))
        assert rows[0]["date"] == "2026-03-01"
        assert rows[0]["pressure"] == 1004.2

    def test_from_rows(self) -> None:
        observations = parse_daily_observations(_payload())
        rows = observations_to_rows(observations)
        assert observations_from_rows(reversed(rows)) == observations
