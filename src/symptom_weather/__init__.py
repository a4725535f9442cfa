"""Symptom Weather - correlate a symptom diary with local weather.

Architecture::

    datasources/   External inputs (Open-Meteo daily history, diary JSON export)
    store.py       Tiered cache with TTL (historical → derived)
    analysis/      Correlation engine (features, quality, stats, effects, insights)
    flows/         Prefect orchestration (fetch checks freshness, analyze writes results)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → store (cache) → analysis → derived/analysis.json

Extension points (see each package's docstring):
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from symptom_weather.config import AnalysisConfig, Settings
from symptom_weather.schemas import SymptomRecord, WeatherObservation

__all__ = ["AnalysisConfig", "Settings", "SymptomRecord", "WeatherObservation", "__version__"]
