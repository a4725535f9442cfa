"""Data models for the correlation engine.

All derived entities are recomputed on every analysis run and never
mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime

# =============================================================================
# Factors and classifications
# =============================================================================


class WeatherFactor(StrEnum):
    """A weather-derived scalar tested independently against occurrence."""

    TEMPERATURE = "temperature"
    TEMPERATURE_CHANGE = "temperature_change"
    PRESSURE = "pressure"
    PRESSURE_CHANGE = "pressure_change"
    HUMIDITY = "humidity"
    WIND_SPEED = "wind_speed"
    UV_INDEX = "uv_index"
    PRECIPITATION = "precipitation"

    @property
    def label(self) -> str:
        """Human-readable name used in insights."""
        return _FACTOR_LABELS[self]

    @property
    def unit(self) -> str:
        return _FACTOR_UNITS[self]


_FACTOR_LABELS = {
    WeatherFactor.TEMPERATURE: "Temperature",
    WeatherFactor.TEMPERATURE_CHANGE: "Temperature change",
    WeatherFactor.PRESSURE: "Pressure",
    WeatherFactor.PRESSURE_CHANGE: "Pressure change",
    WeatherFactor.HUMIDITY: "Humidity",
    WeatherFactor.WIND_SPEED: "Wind speed",
    WeatherFactor.UV_INDEX: "UV index",
    WeatherFactor.PRECIPITATION: "Precipitation probability",
}

_FACTOR_UNITS = {
    WeatherFactor.TEMPERATURE: "°C",
    WeatherFactor.TEMPERATURE_CHANGE: "°C",
    WeatherFactor.PRESSURE: "hPa",
    WeatherFactor.PRESSURE_CHANGE: "hPa",
    WeatherFactor.HUMIDITY: "%",
    WeatherFactor.WIND_SPEED: "km/h",
    WeatherFactor.UV_INDEX: "",
    WeatherFactor.PRECIPITATION: "%",
}


class PressureTrend(IntEnum):
    """24h pressure movement bucket."""

    RAPIDLY_FALLING = -2
    FALLING = -1
    STEADY = 0
    RISING = 1
    RAPIDLY_RISING = 2


class EffectKind(StrEnum):
    """Shape of a factor's relationship with symptom occurrence."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    THRESHOLD = "threshold"
    NONLINEAR = "nonlinear"


@dataclass(frozen=True)
class EffectClassification:
    """Tagged effect shape; ``threshold`` is set only for THRESHOLD."""

    kind: EffectKind
    threshold: float | None = None

    @classmethod
    def positive(cls) -> EffectClassification:
        return cls(EffectKind.POSITIVE)

    @classmethod
    def negative(cls) -> EffectClassification:
        return cls(EffectKind.NEGATIVE)

    @classmethod
    def nonlinear(cls) -> EffectClassification:
        return cls(EffectKind.NONLINEAR)

    @classmethod
    def at_threshold(cls, value: float) -> EffectClassification:
        return cls(EffectKind.THRESHOLD, value)


class CorrelationStrength(StrEnum):
    """Verbal bucket for |r|."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very strong"

    @classmethod
    def from_coefficient(cls, r: float) -> CorrelationStrength:
        magnitude = abs(r)
        if magnitude < 0.3:
            return cls.WEAK
        if magnitude < 0.5:
            return cls.MODERATE
        if magnitude < 0.7:
            return cls.STRONG
        return cls.VERY_STRONG


class DataQualityLevel(IntEnum):
    """Coarse rating of how much overlapping data is available."""

    INSUFFICIENT = 0
    MINIMAL = 1
    ACCEPTABLE = 2
    GOOD = 3
    EXCELLENT = 4

    @classmethod
    def from_overlapping_days(cls, days: int) -> DataQualityLevel:
        if days < 14:
            return cls.INSUFFICIENT
        if days < 30:
            return cls.MINIMAL
        if days < 60:
            return cls.ACCEPTABLE
        if days < 90:
            return cls.GOOD
        return cls.EXCELLENT

    @property
    def display_name(self) -> str:
        return _QUALITY_TEXT[self][0]

    @property
    def description(self) -> str:
        return _QUALITY_TEXT[self][1]

    @property
    def minimum_days_required(self) -> int:
        """Overlapping days needed to reach the next level."""
        return _QUALITY_TEXT[self][2]


_QUALITY_TEXT: dict[DataQualityLevel, tuple[str, str, int]] = {
    DataQualityLevel.INSUFFICIENT: (
        "Insufficient",
        "At least 14 days of data are needed before basic analysis can start",
        14,
    ),
    DataQualityLevel.MINIMAL: (
        "Minimal",
        "Basic analysis is possible but accuracy is limited",
        30,
    ),
    DataQualityLevel.ACCEPTABLE: (
        "Acceptable",
        "Reliable correlation analysis is possible",
        60,
    ),
    DataQualityLevel.GOOD: (
        "Good",
        "Detailed pattern recognition is possible",
        90,
    ),
    DataQualityLevel.EXCELLENT: (
        "Excellent",
        "Rich data supports in-depth personal analysis",
        120,
    ),
}


# =============================================================================
# Per-day data
# =============================================================================


@dataclass(frozen=True)
class WeatherFeatureVector:
    """Raw weather fields plus derived and rolling features for one day."""

    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    uv_index: float
    precipitation_probability: float
    temperature_change_24h: float
    pressure_change_24h: float
    humidity_change_24h: float
    apparent_temperature: float
    dew_point: float
    pressure_trend: PressureTrend
    hour_of_day: int
    day_of_week: int
    seasonal_factor: float
    symptom_in_last_3_days: bool
    average_intensity_last_7_days: float


@dataclass(frozen=True)
class DailyDataPoint:
    """One calendar day of joined symptom and weather data."""

    date: date
    occurred: bool
    intensity: int | None
    has_weather_data: bool
    features: WeatherFeatureVector
    record_exists: bool = True


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class DataQualityMetrics:
    """Coverage and consistency of the analysed window."""

    total_days: int
    weather_days: int
    symptom_days: int
    overlapping_days: int
    coverage: float
    consistency: float

    @property
    def quality_level(self) -> DataQualityLevel:
        return DataQualityLevel.from_overlapping_days(self.overlapping_days)

    @property
    def is_quality_acceptable(self) -> bool:
        """At least 30 overlapping days and 70% coverage."""
        return self.overlapping_days >= 30 and self.coverage >= 0.7

    @property
    def days_until_next_level(self) -> int:
        """Overlapping days still missing; 0 once the top level is reached."""
        if self.quality_level is DataQualityLevel.EXCELLENT:
            return 0
        return max(0, self.quality_level.minimum_days_required - self.overlapping_days)


@dataclass(frozen=True)
class CorrelationResult:
    """Statistics for one factor against symptom occurrence."""

    factor: WeatherFactor
    correlation: float
    p_value: float
    sample_size: int
    confidence: float
    effect: EffectClassification
    significance_level: float = 0.05
    min_sample_size: int = 20

    @property
    def is_significant(self) -> bool:
        return self.p_value < self.significance_level and self.sample_size >= self.min_sample_size

    @property
    def strength(self) -> CorrelationStrength:
        return CorrelationStrength.from_coefficient(self.correlation)


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one analysis run."""

    correlations: list[CorrelationResult]
    quality: DataQualityMetrics
    analyzed_at: datetime
    insights: list[str] = field(default_factory=list)

    @property
    def has_significant_correlations(self) -> bool:
        return any(c.is_significant for c in self.correlations)

    @property
    def strongest_correlation(self) -> CorrelationResult | None:
        """Significant correlation with the largest |r|, if any."""
        significant = [c for c in self.correlations if c.is_significant]
        if not significant:
            return None
        return max(significant, key=lambda c: abs(c.correlation))

    @property
    def summary(self) -> str:
        if not self.correlations:
            return "Not enough data to analyse weather correlations"
        if not self.has_significant_correlations:
            return "No significant weather correlations found; more data may be needed"
        count = sum(1 for c in self.correlations if c.is_significant)
        noun = "factor" if count == 1 else "factors"
        return f"Found {count} significant weather {noun}"


@dataclass(frozen=True)
class PersonalThresholds:
    """Per-person trigger thresholds learned from symptom days."""

    pressure_change: float = 3.0
    temperature_change: float = 8.0
    humidity: float = 80.0
    low_pressure: float = 1005.0
