"""
Prefect flow for correlating the symptom diary with cached weather.

Reads weather history written by ``flows/fetch.py``, runs the correlation
engine and writes the result to the derived tier.

Run locally:
    python -m symptom_weather.flows.analyze path/to/symptoms.json
"""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any

from prefect import flow, task

from symptom_weather.analysis import (
    CorrelationAnalyzer,
    analysis_result_to_dict,
    assemble_data_points,
    learn_personal_thresholds,
)
from symptom_weather.config import AnalysisConfig, get_settings
from symptom_weather.datasources.symptoms import load_symptom_records
from symptom_weather.datasources.weather import observations_from_rows
from symptom_weather.flows.fetch import WEATHER_HISTORY_PATH, store
from symptom_weather.schemas import SymptomRecord, WeatherObservation

ANALYSIS_PATH = Path("derived/analysis.json")


# =============================================================================
# Loading tasks
# =============================================================================


@task(name="load-weather-history")
def load_weather_history() -> list[WeatherObservation] | None:
    """Load cached weather history from the store."""
    rows = store.read(WEATHER_HISTORY_PATH)
    if rows is None:
        return None
    return observations_from_rows(rows)


@task(name="load-symptoms")
def load_symptoms(path: Path) -> list[SymptomRecord]:
    """Load the symptom diary export."""
    return load_symptom_records(path)


# =============================================================================
# Analysis tasks
# =============================================================================


@task(name="run-analysis")
def run_analysis(
    symptoms: list[SymptomRecord],
    observations: list[WeatherObservation],
    config: AnalysisConfig,
    personal_thresholds: bool = False,
) -> dict[str, Any]:
    """Run the engine and return the serialized result."""
    end = _last_day(symptoms, observations)
    if personal_thresholds and end is not None:
        points = assemble_data_points(symptoms, observations, end, config.window_days)
        thresholds = learn_personal_thresholds(points)
        print(
            f"Personal thresholds: pressure < {thresholds.low_pressure:.1f} hPa, "
            f"humidity > {thresholds.humidity:.0f}%"
        )
        config = config.with_thresholds(thresholds)

    analyzer = CorrelationAnalyzer(config)
    result = analyzer.analyze(symptoms, observations, today=end)
    return analysis_result_to_dict(result)


def _last_day(
    symptoms: list[SymptomRecord], observations: list[WeatherObservation]
) -> date | None:
    """Most recent calendar day present in either input.

    Cached weather can lag the wall clock, so the window ends at the
    latest data rather than today. With no data at all the engine picks
    its own default end day.
    """
    days = [obs.date for obs in observations] + [rec.day for rec in symptoms]
    return max(days) if days else None


@task(name="save-analysis")
def save_analysis(result: dict[str, Any], symptoms_path: Path) -> Path:
    """Write the analysis result to the derived tier."""
    return store.write(
        ANALYSIS_PATH,
        result,
        source="symptom-weather",
        symptoms=str(symptoms_path),
    )


@flow(name="analyze-symptoms", log_prints=True)
def analyze_all(
    symptoms_path: Path,
    window_days: int | None = None,
    personal_thresholds: bool = False,
) -> dict[str, Any]:
    """
    Correlate the symptom diary with cached weather history.

    Returns:
        Summary dict with the serialized result and its output path, or
        ``{"error": ...}`` when weather history has not been fetched.
    """
    observations = load_weather_history()
    if observations is None:
        print("No weather history found. Run the fetch flow first.")
        return {"error": "missing weather history"}

    symptoms = load_symptoms(symptoms_path)
    print(f"Loaded {len(symptoms)} symptom records and {len(observations)} weather days")

    config = get_settings().analysis_config()
    if window_days is not None:
        config = replace(config, window_days=window_days)
    result = run_analysis(symptoms, observations, config, personal_thresholds)
    output_path = save_analysis(result, symptoms_path)
    print(f"{result['summary']}. Saved analysis to {output_path}")

    return {
        "summary": result["summary"],
        "significant": sum(1 for c in result["correlations"] if c["is_significant"]),
        "output": str(output_path),
        "result": result,
    }


if __name__ == "__main__":
    summary = analyze_all(Path(sys.argv[1]))
    print(f"Flow complete: {summary.get('summary', summary)}")
