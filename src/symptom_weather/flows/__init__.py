"""
Prefect flows for the data pipeline.

Flows:
- fetch: Download recent daily weather history from Open-Meteo
- analyze: Correlate a symptom diary export with the cached weather

Usage (local):
    python -m symptom_weather.flows.fetch
    python -m symptom_weather.flows.analyze symptoms.json

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-data/default'
"""
