"""Tests for insight generation."""

from __future__ import annotations

from datetime import date, timedelta

from symptom_weather.analysis.features import default_features
from symptom_weather.analysis.insights import (
    generate_insights,
    insufficient_data_insight,
    seasonal_pattern,
)
from symptom_weather.analysis.models import (
    CorrelationResult,
    DailyDataPoint,
    DataQualityMetrics,
    EffectClassification,
    WeatherFactor,
)
from symptom_weather.config import AnalysisConfig

NO_SIGNIFICANT = (
    "No statistically significant weather correlations found yet; more data may be needed"
)


def _result(
    factor: WeatherFactor,
    r: float,
    p: float = 0.001,
    effect: EffectClassification | None = None,
    n: int = 90,
) -> CorrelationResult:
    if effect is None:
        effect = EffectClassification.positive() if r > 0 else EffectClassification.negative()
    return CorrelationResult(
        factor=factor,
        correlation=r,
        p_value=p,
        sample_size=n,
        confidence=0.8,
        effect=effect,
    )


def _quality(overlapping: int = 90, coverage: float = 1.0) -> DataQualityMetrics:
    return DataQualityMetrics(
        total_days=90,
        weather_days=overlapping,
        symptom_days=10,
        overlapping_days=overlapping,
        coverage=coverage,
        consistency=1.0,
    )


def _points(start: date, occurred: list[bool]) -> list[DailyDataPoint]:
    return [
        DailyDataPoint(
            date=start + timedelta(days=i),
            occurred=o,
            intensity=5 if o else None,
            has_weather_data=True,
            features=default_features(),
        )
        for i, o in enumerate(occurred)
    ]


class TestInsufficientDataInsight:
    """Test the gate advisory."""

    def test_mentions_required_days(self) -> None:
        assert "30 days" in insufficient_data_insight()

    def test_follows_config(self) -> None:
        assert "45 days" in insufficient_data_insight(AnalysisConfig(min_overlapping_days=45))


class TestSeasonalPattern:
    """Test the seasonal occurrence line."""

    def test_needs_sixty_days(self) -> None:
        points = _points(date(2026, 1, 1), [True] * 59)
        assert seasonal_pattern(points) is None

    def test_winter_dominates(self) -> None:
        # Jan 15 - Mar 15: 45 winter days at 80%, 15 spring days with one symptom
        start = date(2026, 1, 15)
        occurred = [i < 36 for i in range(45)] + [i == 0 for i in range(15)]
        line = seasonal_pattern(_points(start, occurred))
        assert line == (
            "Winter has a higher symptom rate (80%); consider extra precautions in that season"
        )

    def test_single_season_never_dominates(self) -> None:
        points = _points(date(2026, 6, 1), [i % 2 == 0 for i in range(90)])
        assert seasonal_pattern(points) is None

    def test_small_seasons_ignored(self) -> None:
        # Only 9 days of spring: winter is the only qualifying season
        points = _points(date(2026, 1, 9), [True] * 51 + [False] * 9)
        assert seasonal_pattern(points) is None

    def test_no_symptoms(self) -> None:
        points = _points(date(2026, 1, 15), [False] * 60)
        assert seasonal_pattern(points) is None


class TestGenerateInsights:
    """Test insight ordering and content."""

    def test_strongest_significant_first(self) -> None:
        correlations = [
            _result(WeatherFactor.HUMIDITY, 0.93),
            _result(WeatherFactor.PRESSURE, -0.95),
        ]
        insights = generate_insights(correlations, [], _quality())
        assert insights[0] == "Pressure decrease correlates with symptom occurrence (r=-0.95)"

    def test_increase_wording(self) -> None:
        insights = generate_insights([_result(WeatherFactor.WIND_SPEED, 0.92)], [], _quality())
        assert insights == ["Wind speed increase correlates with symptom occurrence (r=0.92)"]

    def test_threshold_lines(self) -> None:
        correlations = [
            _result(WeatherFactor.PRESSURE, -0.95, effect=EffectClassification.at_threshold(1005)),
            _result(WeatherFactor.HUMIDITY, 0.92, effect=EffectClassification.at_threshold(80)),
        ]
        insights = generate_insights(correlations, [], _quality())
        assert insights[1:] == [
            "Symptom risk rises noticeably when pressure drops below 1005hPa",
            "Symptom risk rises noticeably when humidity rises above 80%",
        ]

    def test_nonlinear_line_lists_factors(self) -> None:
        correlations = [
            _result(WeatherFactor.TEMPERATURE, 0.95, effect=EffectClassification.nonlinear()),
            _result(WeatherFactor.UV_INDEX, 0.93, effect=EffectClassification.nonlinear()),
        ]
        insights = generate_insights(correlations, [], _quality())
        assert insights[1] == (
            "Temperature, UV index relate to symptoms in a non-linear way; "
            "extreme values may matter more than the trend"
        )

    def test_insignificant_results_are_not_reported(self) -> None:
        correlations = [
            _result(
                WeatherFactor.PRESSURE, -0.5, p=0.3, effect=EffectClassification.at_threshold(1005)
            ),
            _result(WeatherFactor.HUMIDITY, 0.2, p=0.6),
        ]
        assert generate_insights(correlations, [], _quality()) == [NO_SIGNIFICANT]

    def test_small_sample_is_not_significant(self) -> None:
        correlations = [_result(WeatherFactor.PRESSURE, -0.99, p=0.0, n=19)]
        assert generate_insights(correlations, [], _quality()) == [NO_SIGNIFICANT]

    def test_no_correlations_no_caveat(self) -> None:
        assert generate_insights([], [], _quality()) == []

    def test_quality_caveats_in_order(self) -> None:
        insights = generate_insights([], [], _quality(overlapping=20, coverage=0.3))
        assert insights == [
            "Data is still sparse; keep recording to improve accuracy",
            "Data coverage is low; try to keep a daily record",
        ]

    def test_sparse_caveat_independent_of_gate(self) -> None:
        config = AnalysisConfig(min_overlapping_days=20, sparse_caveat_days=40)
        insights = generate_insights([], [], _quality(overlapping=35), config)
        assert insights == ["Data is still sparse; keep recording to improve accuracy"]

    def test_full_ordering(self) -> None:
        start = date(2026, 1, 15)
        occurred = [i < 36 for i in range(45)] + [i == 0 for i in range(15)]
        correlations = [
            _result(WeatherFactor.PRESSURE, -0.95, effect=EffectClassification.at_threshold(1005)),
            _result(WeatherFactor.TEMPERATURE, 0.92, effect=EffectClassification.nonlinear()),
        ]
        insights = generate_insights(
            correlations, _points(start, occurred), _quality(coverage=0.5)
        )
        assert insights == [
            "Pressure decrease correlates with symptom occurrence (r=-0.95)",
            "Symptom risk rises noticeably when pressure drops below 1005hPa",
            "Temperature relate to symptoms in a non-linear way; "
            "extreme values may matter more than the trend",
            "Data coverage is low; try to keep a daily record",
            "Winter has a higher symptom rate (80%); consider extra precautions in that season",
        ]
