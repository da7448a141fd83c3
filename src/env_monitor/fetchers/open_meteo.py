"""Open-Meteo forecast fetcher for the lightning status."""

from __future__ import annotations

import logging
from typing import Any

from requests import Session

from env_monitor.config import FORECAST_URL
from env_monitor.http import create_session, fetch_json
from env_monitor.models import HOURLY_SLOTS, MonitorState, WeatherSnapshot

logger = logging.getLogger(__name__)


def build_forecast_params(latitude: float, longitude: float) -> dict[str, str]:
    """Query parameters for the current code plus the next six hourly codes."""
    return {
        "latitude": f"{latitude:.2f}",
        "longitude": f"{longitude:.2f}",
        "current": "weather_code",
        "hourly": "weather_code",
        "forecast_hours": str(HOURLY_SLOTS),
    }


def _code(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def parse_forecast(data: dict[str, Any]) -> WeatherSnapshot:
    """Extract the weather codes from a decoded forecast response.

    Anything missing or of the wrong type reads as code 0.
    """
    current_code = 0
    current = data.get("current")
    if isinstance(current, dict):
        current_code = _code(current.get("weather_code"))

    hourly_codes: list[int] = []
    hourly = data.get("hourly")
    if isinstance(hourly, dict):
        codes = hourly.get("weather_code")
        if isinstance(codes, list):
            hourly_codes = [_code(c) for c in codes[:HOURLY_SLOTS]]

    return WeatherSnapshot(current_code=current_code, hourly_codes=tuple(hourly_codes))


def refresh_lightning(
    state: MonitorState,
    latitude: float,
    longitude: float,
    session: Session | None = None,
    url: str = FORECAST_URL,
    timeout: int = 30,
) -> WeatherSnapshot:
    """Replace ``state.weather`` with the forecast for the monitor location.

    A failed fetch leaves the all-clear snapshot in place.
    """
    if session is None:
        session = create_session()

    state.weather = WeatherSnapshot.clear()
    data = fetch_json(
        session, url, params=build_forecast_params(latitude, longitude), timeout=timeout
    )
    if data is None:
        return state.weather

    state.weather = parse_forecast(data)
    logger.debug(
        "Forecast for %.2f, %.2f: current=%d hourly=%s",
        latitude,
        longitude,
        state.weather.current_code,
        list(state.weather.hourly_codes),
    )
    return state.weather
