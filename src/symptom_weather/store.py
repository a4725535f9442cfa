"""Tiered data store with freshness-aware caching.

Manages read/write of JSON data files organized into tiers by update frequency:
  - historical/: Fetched inputs, 24h TTL (daily weather history)
  - derived/: Computed outputs, always recomputed (analysis results)

Every file is wrapped in a metadata envelope with ``valid_until`` so the
fetch flow can skip sources that are still fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.historical = base_dir / "historical"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Read the data payload from an enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``historical/weather.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"open-meteo.com"``).
            valid_until: Expiry timestamp. None means derived/no-cache.
            **params: Extra metadata fields (location, window, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)
        return full

    def meta(self, path: Path) -> dict[str, Any]:
        """Return the envelope metadata, or an empty dict if missing."""
        envelope = self.read_raw(path)
        if envelope is None:
            return {}
        result: dict[str, Any] = envelope.get("meta", {})
        return result

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        valid_until = self.meta(path).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
