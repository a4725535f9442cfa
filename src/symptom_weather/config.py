"""
Application settings and analysis policy.

``Settings`` is read from the environment (prefix ``SYMPTOM_WEATHER_``) or a
``.env`` file. ``AnalysisConfig`` holds the tunable heuristics of the
correlation engine and is passed explicitly into it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from symptom_weather.analysis.models import PersonalThresholds


@dataclass(frozen=True)
class AnalysisConfig:
    """Policy constants for the correlation engine.

    The bucket-ratio and seasonal-dominance multipliers are empirical
    heuristics carried over for behavioral compatibility, not derived
    from a statistical test.
    """

    window_days: int = 90
    min_overlapping_days: int = 30
    min_sample_size: int = 20
    significance_level: float = 0.05
    low_pressure_threshold: float = 1005.0
    high_humidity_threshold: float = 80.0
    extreme_cold_c: float = 5.0
    extreme_heat_c: float = 35.0
    bucket_ratio: float = 1.5
    seasonal_dominance: float = 1.3
    min_seasonal_days: int = 60
    min_days_per_season: int = 10
    sparse_caveat_days: int = 30
    coverage_caveat: float = 0.7
    weak_correlation: float = 0.1

    def __post_init__(self) -> None:
        if self.window_days < 1:
            msg = f"window_days must be >= 1, got {self.window_days}"
            raise ValueError(msg)
        if self.min_sample_size < 3:
            msg = f"min_sample_size must be >= 3, got {self.min_sample_size}"
            raise ValueError(msg)
        if not 0 < self.significance_level < 1:
            msg = f"significance_level must be in (0, 1), got {self.significance_level}"
            raise ValueError(msg)
        if self.bucket_ratio < 1 or self.seasonal_dominance < 1:
            msg = "bucket_ratio and seasonal_dominance must be >= 1"
            raise ValueError(msg)
        if self.extreme_cold_c >= self.extreme_heat_c:
            msg = "extreme_cold_c must be below extreme_heat_c"
            raise ValueError(msg)

    def with_thresholds(self, thresholds: PersonalThresholds) -> AnalysisConfig:
        """Return a copy using learned pressure/humidity thresholds."""
        return replace(
            self,
            low_pressure_threshold=thresholds.low_pressure,
            high_humidity_threshold=thresholds.humidity,
        )


class Settings(BaseSettings):
    """Runtime settings, overridable via ``SYMPTOM_WEATHER_*`` env vars."""

    model_config = SettingsConfigDict(
        env_prefix="SYMPTOM_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "symptom-weather"
    app_env: str = "development"
    debug: bool = False

    # Location used for weather history
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)
    timezone: str = "America/Los_Angeles"
    data_dir: Path = Path("data")

    # Analysis policy (mirrors AnalysisConfig)
    window_days: int = 90
    min_overlapping_days: int = 30
    min_sample_size: int = 20
    significance_level: float = 0.05
    low_pressure_threshold: float = 1005.0
    high_humidity_threshold: float = 80.0
    extreme_cold_c: float = 5.0
    extreme_heat_c: float = 35.0
    bucket_ratio: float = 1.5
    seasonal_dominance: float = 1.3
    min_seasonal_days: int = 60
    min_days_per_season: int = 10
    sparse_caveat_days: int = 30
    coverage_caveat: float = 0.7
    weak_correlation: float = 0.1

    def analysis_config(self) -> AnalysisConfig:
        """Build the engine policy from these settings."""
        return AnalysisConfig(**{f.name: getattr(self, f.name) for f in fields(AnalysisConfig)})


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
