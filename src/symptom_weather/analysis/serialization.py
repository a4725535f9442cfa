"""JSON serialization helpers for analysis results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from symptom_weather.analysis.models import (
        AnalysisResult,
        CorrelationResult,
        DataQualityMetrics,
    )


def quality_to_dict(quality: DataQualityMetrics) -> dict[str, Any]:
    """Serialize data-quality metrics, including the derived level."""
    return {
        "total_days": quality.total_days,
        "weather_days": quality.weather_days,
        "symptom_days": quality.symptom_days,
        "overlapping_days": quality.overlapping_days,
        "coverage": round(quality.coverage, 3),
        "consistency": round(quality.consistency, 3),
        "level": quality.quality_level.name.lower(),
        "label": quality.quality_level.display_name,
        "description": quality.quality_level.description,
        "days_until_next_level": quality.days_until_next_level,
        "is_acceptable": quality.is_quality_acceptable,
    }


def correlation_to_dict(correlation: CorrelationResult) -> dict[str, Any]:
    """Serialize one factor's result."""
    return {
        "factor": str(correlation.factor),
        "correlation": round(correlation.correlation, 4),
        "p_value": round(correlation.p_value, 4),
        "sample_size": correlation.sample_size,
        "confidence": round(correlation.confidence, 3),
        "is_significant": correlation.is_significant,
        "strength": str(correlation.strength),
        "effect": {
            "kind": str(correlation.effect.kind),
            "threshold": correlation.effect.threshold,
        },
    }


def analysis_result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Serialize an AnalysisResult to a JSON-compatible dict.

    Args:
        result: The result to serialize.

    Returns:
        Dict with timestamp, summary, quality, correlations and insights.
    """
    return {
        "analyzed_at": result.analyzed_at.isoformat(),
        "summary": result.summary,
        "quality": quality_to_dict(result.quality),
        "correlations": [correlation_to_dict(c) for c in result.correlations],
        "insights": list(result.insights),
    }
