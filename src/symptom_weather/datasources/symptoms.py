"""Symptom records from a diary JSON export.

Accepted shapes::

    [{"timestamp": "2026-03-01T08:30:00", "intensity": 6}, ...]
    {"records": [...]}
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from symptom_weather.schemas import SymptomRecord

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse_symptom_records(rows: list[dict[str, Any]]) -> list[SymptomRecord]:
    """Validate raw rows, skipping (and logging) malformed ones."""
    records: list[SymptomRecord] = []
    for i, row in enumerate(rows):
        try:
            records.append(SymptomRecord.model_validate(row))
        except ValidationError as exc:
            logger.warning("Skipping symptom row %d: %s", i, exc.errors()[0]["msg"])
    return records


def load_symptom_records(path: Path) -> list[SymptomRecord]:
    """Load symptom records from a JSON export file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not a list or a ``{"records": [...]}`` object.
    """
    with path.open() as f:
        payload: Any = json.load(f)

    rows = payload.get("records") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        msg = f"Expected a list of symptom records in {path}"
        raise ValueError(msg)
    return parse_symptom_records(rows)
