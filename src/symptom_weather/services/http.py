"""
HTTP session for the Open-Meteo weather history request.

The fetch flow makes one GET per run for up to 92 days of daily
aggregates. The session retries that GET on connection errors, rate
limiting and 5xx responses (honouring ``Retry-After``), and the mounted
adapter supplies a (connect, read) timeout when the caller passes none.

Usage::

    from symptom_weather.services.http import session

    resp = session.get(OPEN_METEO_API, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from symptom_weather import __version__

HISTORY_RETRY = Retry(
    total=3,
    connect=3,
    read=2,
    backoff_factor=1.5,  # 0s, 3s, 6s
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=frozenset({"GET"}),
    respect_retry_after_header=True,
    raise_on_status=False,  # fetch_daily_history calls raise_for_status()
)

# Connect fast; a 92-day aggregate can be slow to build server-side
HISTORY_TIMEOUT = (5.0, 60.0)

USER_AGENT = f"symptom-weather/{__version__}"


class TimeoutAdapter(HTTPAdapter):
    """Retrying adapter that fills in ``HISTORY_TIMEOUT``."""

    def send(  # type: ignore[override]
        self, request: requests.PreparedRequest, **kwargs: Any
    ) -> requests.Response:
        # Session.request always forwards timeout, as None when unset
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = HISTORY_TIMEOUT
        return super().send(request, **kwargs)


def create_session() -> requests.Session:
    """Build the HTTPS-only session used by the weather datasource."""
    s = requests.Session()
    s.mount("https://", TimeoutAdapter(max_retries=HISTORY_RETRY))
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return s


session: requests.Session = create_session()
