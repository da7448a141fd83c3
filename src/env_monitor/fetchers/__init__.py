"""Feed fetchers for the monitor."""

from env_monitor.fetchers.open_meteo import refresh_lightning
from env_monitor.fetchers.usgs import refresh_seismic

__all__ = ["refresh_lightning", "refresh_seismic"]
