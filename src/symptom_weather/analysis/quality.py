"""Coverage and consistency metrics for an assembled window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from symptom_weather.analysis.models import DataQualityMetrics

if TYPE_CHECKING:
    from collections.abc import Sequence

    from symptom_weather.analysis.models import DailyDataPoint

MIN_DAYS_FOR_CONSISTENCY = 8
NEUTRAL_CONSISTENCY = 0.5
GAP_SCALE_DAYS = 7.0


def is_overlapping(point: DailyDataPoint) -> bool:
    """A day usable for correlation: weather present and inside the diary window."""
    return point.has_weather_data and point.record_exists


def compute_consistency(points: Sequence[DailyDataPoint]) -> float:
    """Score in [0, 1] from the average gap between covered days.

    Returns 0.5 when fewer than 8 days exist, 1.0 when covered days are
    contiguous, and 0.0 when no day is covered at all.
    """
    if len(points) < MIN_DAYS_FOR_CONSISTENCY:
        return NEUTRAL_CONSISTENCY

    covered = sorted(p.date for p in points if is_overlapping(p))
    if not covered:
        return 0.0

    gaps = [
        (later - earlier).days - 1
        for earlier, later in zip(covered, covered[1:], strict=False)
        if (later - earlier).days > 1
    ]
    if not gaps:
        return 1.0

    average_gap = sum(gaps) / len(gaps)
    return max(0.0, 1.0 - average_gap / GAP_SCALE_DAYS)


def assess_data_quality(points: Sequence[DailyDataPoint]) -> DataQualityMetrics:
    """Summarise how much usable data the window holds."""
    total = len(points)
    overlapping = sum(1 for p in points if is_overlapping(p))
    return DataQualityMetrics(
        total_days=total,
        weather_days=sum(1 for p in points if p.has_weather_data),
        symptom_days=sum(1 for p in points if p.occurred),
        overlapping_days=overlapping,
        coverage=overlapping / total if total else 0.0,
        consistency=compute_consistency(points),
    )
