"""Weather/symptom correlation engine.

Pure domain logic: no I/O, no HTTP, no Prefect decorators. Inputs are the
pydantic models from ``symptom_weather.schemas``; outputs are frozen
dataclasses that callers render or serialize.

Modules:
  - features: one observation + prior days -> WeatherFeatureVector
  - assembly: symptoms + weather -> gap-free list of DailyDataPoint
  - quality: coverage and consistency of the window
  - stats: Pearson r, erf-based p-value, confidence blend
  - correlation: per-factor CorrelationResult
  - effects: threshold / non-linear / directional classification
  - insights: ordered human-readable findings
  - thresholds: personal trigger thresholds from symptom days
  - engine: CorrelationAnalyzer, the pipeline facade
  - serialization: AnalysisResult -> JSON-compatible dict
"""

from symptom_weather.analysis.assembly import assemble_data_points
from symptom_weather.analysis.correlation import correlate_all, correlate_factor
from symptom_weather.analysis.effects import classify_effect
from symptom_weather.analysis.engine import CorrelationAnalyzer
from symptom_weather.analysis.features import default_features, derive_features
from symptom_weather.analysis.insights import generate_insights, seasonal_pattern
from symptom_weather.analysis.models import (
    AnalysisResult,
    CorrelationResult,
    CorrelationStrength,
    DailyDataPoint,
    DataQualityLevel,
    DataQualityMetrics,
    EffectClassification,
    EffectKind,
    PersonalThresholds,
    PressureTrend,
    WeatherFactor,
    WeatherFeatureVector,
)
from symptom_weather.analysis.quality import assess_data_quality
from symptom_weather.analysis.serialization import analysis_result_to_dict
from symptom_weather.analysis.thresholds import learn_personal_thresholds

__all__ = [
    "AnalysisResult",
    "CorrelationAnalyzer",
    "CorrelationResult",
    "CorrelationStrength",
    "DailyDataPoint",
    "DataQualityLevel",
    "DataQualityMetrics",
    "EffectClassification",
    "EffectKind",
    "PersonalThresholds",
    "PressureTrend",
    "WeatherFactor",
    "WeatherFeatureVector",
    "analysis_result_to_dict",
    "assemble_data_points",
    "assess_data_quality",
    "classify_effect",
    "correlate_all",
    "correlate_factor",
    "default_features",
    "derive_features",
    "generate_insights",
    "learn_personal_thresholds",
    "seasonal_pattern",
]
