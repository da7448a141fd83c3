"""Shared HTTP session and JSON fetch helper for the feed fetchers."""

from __future__ import annotations

import logging
from typing import Any

from requests import RequestException, Session
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "env-monitor/1.0"


def create_session(user_agent: str = DEFAULT_USER_AGENT) -> Session:
    """Create a requests Session shared by both feeds.

    Retries are disabled: a failed fetch is simply tried again next cycle.
    """
    adapter = HTTPAdapter(max_retries=0)
    session = Session()
    session.headers["User-Agent"] = user_agent
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def fetch_json(
    session: Session,
    url: str,
    params: dict[str, str] | None = None,
    timeout: int = 30,
) -> dict[str, Any] | None:
    """GET *url* and decode a JSON object body.

    Returns None on transport failures, HTTP error statuses, undecodable
    bodies and bodies that are not JSON objects.  Failures are logged at
    DEBUG only; callers treat them as "no data this cycle".
    """
    try:
        resp = session.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except (RequestException, ValueError):
        logger.debug("Fetch failed for %s", url, exc_info=True)
        return None

    if not isinstance(data, dict):
        logger.debug("Unexpected payload type from %s: %s", url, type(data).__name__)
        return None
    return data
