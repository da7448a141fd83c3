"""Configuration model for the environmental monitor."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

USGS_FEED_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_hour.geojson"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

MAJOR_QUAKE_THRESHOLD = 6.0
DEFAULT_LATITUDE = 54.53  # Guisborough, UK
DEFAULT_LONGITUDE = -1.05


class MonitorConfig(BaseSettings):
    """All configurable parameters for the monitor.

    Values can be set via constructor arguments, environment variables
    prefixed with ENV_MONITOR_, or defaults.  The config is frozen once built:
    the monitor location never changes after startup.
    """

    model_config = {"env_prefix": "ENV_MONITOR_", "frozen": True}

    min_magnitude: float = Field(
        default=0.0, ge=0.0, description="Minimum magnitude shown on the display."
    )
    alert_threshold: float = Field(
        default=MAJOR_QUAKE_THRESHOLD,
        ge=0.0,
        description="Minimum magnitude that rings the bell for a new quake.",
    )
    latitude: float = Field(
        default=DEFAULT_LATITUDE, ge=-90.0, le=90.0, description="Monitor latitude."
    )
    longitude: float = Field(
        default=DEFAULT_LONGITUDE, ge=-180.0, le=180.0, description="Monitor longitude."
    )
    update_interval_seconds: int = Field(
        default=120, ge=1, description="Seconds to sleep between feed cycles."
    )
    startup_delay_seconds: float = Field(
        default=4.0, ge=0.0, description="Pause after the startup banner."
    )
    request_timeout: int = Field(
        default=30, ge=1, le=300, description="HTTP request timeout in seconds."
    )
    usgs_feed_url: str = Field(default=USGS_FEED_URL, description="USGS GeoJSON feed.")
    forecast_url: str = Field(default=FORECAST_URL, description="Open-Meteo forecast API.")
    user_agent: str = Field(default="env-monitor/1.0", description="HTTP User-Agent.")


def resolve_thresholds(
    min_magnitude: float | None,
    test_mode: bool = False,
) -> tuple[float, float]:
    """Return ``(min_magnitude, alert_threshold)`` from the command line.

    ``-q`` sets both values (clamped at 0).  Without it the display shows
    everything and only major quakes ring the bell.  Test mode rings the bell
    for every displayed quake but leaves the display filter alone.
    """
    if min_magnitude is None:
        minimum, threshold = 0.0, MAJOR_QUAKE_THRESHOLD
    else:
        minimum = max(min_magnitude, 0.0)
        threshold = minimum
    if test_mode:
        threshold = 0.0
    return minimum, threshold
