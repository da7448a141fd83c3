"""USGS earthquake summary feed fetcher."""

from __future__ import annotations

import logging
import math
import time
from typing import Any

from requests import Session

from env_monitor.alerts import Bell, check_for_quake_alerts
from env_monitor.config import USGS_FEED_URL
from env_monitor.http import create_session, fetch_json
from env_monitor.models import (
    MAX_ID_LENGTH,
    MAX_PLACE_LENGTH,
    MAX_QUAKES,
    Earthquake,
    MonitorState,
)
from env_monitor.timefmt import relative_age

logger = logging.getLogger(__name__)


def _number(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    number = float(value)
    return number if math.isfinite(number) else default


def _text(value: Any, limit: int) -> str:
    return value[:limit] if isinstance(value, str) else ""


def parse_quakes(
    feed: dict[str, Any],
    min_magnitude: float,
    now: float | None = None,
) -> list[Earthquake]:
    """Build the ranked quake list from a decoded GeoJSON feed.

    Features are scanned in feed order and the first 200 at or above
    *min_magnitude* are kept; the result is then sorted by magnitude,
    largest first.  A feature without a finite numeric magnitude counts as
    M0.0.
    """
    if now is None:
        now = time.time()

    features = feed.get("features")
    if not isinstance(features, list):
        return []

    quakes: list[Earthquake] = []
    for feat in features:
        if len(quakes) >= MAX_QUAKES:
            break
        props = feat.get("properties") if isinstance(feat, dict) else None
        if not isinstance(props, dict):
            props = {}

        magnitude = _number(props.get("mag"))
        if magnitude < min_magnitude:
            continue

        time_ms = props.get("time")
        if isinstance(time_ms, bool) or not isinstance(time_ms, int):
            time_ms = 0

        quakes.append(
            Earthquake(
                magnitude=magnitude,
                place=_text(props.get("place"), MAX_PLACE_LENGTH),
                id=_text(props.get("id"), MAX_ID_LENGTH),
                time_ms=time_ms,
                time_ago=relative_age(time_ms, now),
            )
        )

    quakes.sort(key=lambda q: q.magnitude, reverse=True)
    return quakes


def refresh_seismic(
    state: MonitorState,
    min_magnitude: float,
    alert_threshold: float,
    bell: Bell,
    session: Session | None = None,
    url: str = USGS_FEED_URL,
    timeout: int = 30,
    now: float | None = None,
) -> list[Earthquake]:
    """Replace ``state.quakes`` with the latest feed and alert on new quakes.

    The list is cleared before fetching, so a failed fetch shows no quakes
    this cycle rather than stale ones.
    """
    if session is None:
        session = create_session()

    state.quakes = []
    feed = fetch_json(session, url, timeout=timeout)
    if feed is None:
        return state.quakes

    state.quakes = parse_quakes(feed, min_magnitude, now=now)
    logger.debug("Seismic feed: %d quakes at M%.1f+", len(state.quakes), min_magnitude)
    check_for_quake_alerts(state, alert_threshold, bell)
    return state.quakes
