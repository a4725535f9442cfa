"""Tests for personal threshold learning."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from symptom_weather.analysis.features import default_features
from symptom_weather.analysis.models import DailyDataPoint, PersonalThresholds
from symptom_weather.analysis.thresholds import learn_personal_thresholds
from symptom_weather.config import AnalysisConfig

START = date(2026, 2, 1)


def _point(i: int, occurred: bool, **features: float) -> DailyDataPoint:
    return DailyDataPoint(
        date=START + timedelta(days=i),
        occurred=occurred,
        intensity=5 if occurred else None,
        has_weather_data=True,
        features=replace(default_features(), **features),
    )


def _history(symptom_days: list[dict[str, float]], quiet_days: int = 28) -> list[DailyDataPoint]:
    points = [_point(i, False) for i in range(quiet_days)]
    points += [_point(quiet_days + i, True, **f) for i, f in enumerate(symptom_days)]
    return points


class TestLearnPersonalThresholds:
    """Test percentile-based thresholds from symptom days."""

    def test_short_history_uses_defaults(self) -> None:
        points = [_point(i, True, pressure=990.0) for i in range(29)]
        assert learn_personal_thresholds(points) == PersonalThresholds()

    def test_few_symptom_days_uses_defaults(self) -> None:
        points = _history([{"pressure": 990.0}] * 9, quiet_days=40)
        assert learn_personal_thresholds(points) == PersonalThresholds()

    def test_symptom_days_without_weather_do_not_count(self) -> None:
        points = _history([{"pressure": 990.0}] * 12)
        points = [
            replace(p, has_weather_data=False) if p.occurred and i % 2 else p
            for i, p in enumerate(points)
        ]
        assert learn_personal_thresholds(points) == PersonalThresholds()

    def test_percentiles(self) -> None:
        symptom_days = [
            {
                "pressure": 995.0 + i,
                "humidity": 70.0 + i,
                "pressure_change_24h": -0.5 * i,
                "temperature_change_24h": float(i) if i % 2 else -float(i),
            }
            for i in range(12)
        ]
        thresholds = learn_personal_thresholds(_history(symptom_days))
        assert thresholds.low_pressure == pytest.approx(997.0)
        assert thresholds.humidity == pytest.approx(78.0)
        assert thresholds.pressure_change == pytest.approx(4.0)
        assert thresholds.temperature_change == pytest.approx(8.0)

    def test_low_pressure_from_lower_tail(self) -> None:
        # Mostly calm days with a few deep lows; the low tail sets the trigger
        pressures = [992.0, 993.0, 994.0] + [1012.0] * 9
        thresholds = learn_personal_thresholds(_history([{"pressure": p} for p in pressures]))
        assert thresholds.low_pressure == pytest.approx(994.0)

    def test_clamped(self) -> None:
        symptom_days = [
            {
                "pressure": 970.0,
                "humidity": 99.0,
                "pressure_change_24h": 0.5,
                "temperature_change_24h": 1.0,
            }
        ] * 12
        thresholds = learn_personal_thresholds(_history(symptom_days))
        assert thresholds == PersonalThresholds(
            pressure_change=2.0,
            temperature_change=5.0,
            humidity=90.0,
            low_pressure=990.0,
        )

    def test_humidity_lower_clamp(self) -> None:
        thresholds = learn_personal_thresholds(_history([{"humidity": 30.0}] * 12))
        assert thresholds.humidity == 60.0


class TestWithThresholds:
    """Test feeding learned thresholds into the analysis policy."""

    def test_replaces_pressure_and_humidity(self) -> None:
        config = AnalysisConfig().with_thresholds(
            PersonalThresholds(humidity=72.0, low_pressure=1001.0)
        )
        assert config.low_pressure_threshold == 1001.0
        assert config.high_humidity_threshold == 72.0
        assert config.window_days == 90
