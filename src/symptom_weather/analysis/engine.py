"""Correlation analysis pipeline.

    assemble_data_points -> assess_data_quality -> (gate) -> correlate_all
    -> generate_insights

The analyzer holds only its policy; every call works on the snapshots it
is given, so concurrent calls with different inputs do not interfere.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from symptom_weather.analysis.assembly import assemble_data_points
from symptom_weather.analysis.correlation import correlate_all
from symptom_weather.analysis.insights import generate_insights, insufficient_data_insight
from symptom_weather.analysis.models import AnalysisResult
from symptom_weather.analysis.quality import assess_data_quality
from symptom_weather.config import AnalysisConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from symptom_weather.schemas import SymptomRecord, WeatherObservation

logger = logging.getLogger(__name__)


class CorrelationAnalyzer:
    """Runs the weather/symptom correlation analysis."""

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()

    def analyze(
        self,
        symptoms: Iterable[SymptomRecord],
        observations: Iterable[WeatherObservation],
        *,
        today: date | None = None,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Analyse the trailing window ending on ``today``.

        Args:
            symptoms: Symptom history snapshot.
            observations: Weather history snapshot, one per day.
            today: Last day of the window (defaults to ``now``'s date).
            now: Analysis timestamp (defaults to the current UTC time).

        Returns:
            A complete result. Windows with too little overlapping data
            produce an empty correlation list and a single advisory insight.
        """
        cfg = self.config
        analyzed_at = now or datetime.now(UTC)
        end = today or analyzed_at.date()

        points = assemble_data_points(symptoms, observations, end, cfg.window_days)
        quality = assess_data_quality(points)
        logger.debug(
            "Window %s..%s: %d overlapping of %d days",
            points[0].date if points else end,
            end,
            quality.overlapping_days,
            quality.total_days,
        )

        if quality.overlapping_days < cfg.min_overlapping_days:
            logger.info(
                "Insufficient data: %d overlapping days < %d",
                quality.overlapping_days,
                cfg.min_overlapping_days,
            )
            return AnalysisResult(
                correlations=[],
                quality=quality,
                analyzed_at=analyzed_at,
                insights=[insufficient_data_insight(cfg)],
            )

        correlations = correlate_all(points, cfg)
        insights = generate_insights(correlations, points, quality, cfg)
        logger.info(
            "Analysed %d factors, %d significant",
            len(correlations),
            sum(1 for c in correlations if c.is_significant),
        )
        return AnalysisResult(
            correlations=correlations,
            quality=quality,
            analyzed_at=analyzed_at,
            insights=insights,
        )
