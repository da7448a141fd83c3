"""Feed cycle and driver loop: seismic -> lightning -> render -> sleep."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime, timezone

from requests import Session
from rich.console import Console

from env_monitor.alerts import Bell, console_bell
from env_monitor.config import MonitorConfig
from env_monitor.display import LightningStatus, render
from env_monitor.fetchers.open_meteo import refresh_lightning
from env_monitor.fetchers.usgs import refresh_seismic
from env_monitor.http import create_session
from env_monitor.models import MonitorState

logger = logging.getLogger(__name__)


def run_cycle(
    state: MonitorState,
    config: MonitorConfig,
    session: Session,
    console: Console,
    bell: Bell,
    now: datetime | None = None,
) -> LightningStatus:
    """Run one feed cycle against *state*.

    The two feeds are fetched one after the other, seismic first, and the
    report is redrawn once both have been refreshed.
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)

    refresh_seismic(
        state,
        min_magnitude=config.min_magnitude,
        alert_threshold=config.alert_threshold,
        bell=bell,
        session=session,
        url=config.usgs_feed_url,
        timeout=config.request_timeout,
        now=now.timestamp(),
    )
    refresh_lightning(
        state,
        latitude=config.latitude,
        longitude=config.longitude,
        session=session,
        url=config.forecast_url,
        timeout=config.request_timeout,
    )
    state.last_updated = now
    return render(state, config, console, bell, now=now)


def print_banner(config: MonitorConfig, console: Console) -> None:
    console.print("--- Starting Environmental Monitor ---", highlight=False)
    console.print(
        f"Seismic Filter: M{config.min_magnitude:.1f}+ "
        f"(Alerts >= {config.alert_threshold:.1f})",
        highlight=False,
    )
    console.print(
        f"Lightning Location: {config.latitude:.2f}, {config.longitude:.2f}",
        highlight=False,
    )


def run_monitor(
    config: MonitorConfig,
    console: Console,
    state: MonitorState | None = None,
    session: Session | None = None,
    bell: Bell | None = None,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: int | None = None,
) -> MonitorState:
    """Print the startup banner, then run feed cycles until stopped.

    With *max_cycles* set the loop stops after that many cycles (no trailing
    sleep); otherwise it runs until the process is interrupted.
    """
    if state is None:
        state = MonitorState()
    if session is None:
        session = create_session(config.user_agent)
    if bell is None:
        bell = console_bell(console)

    print_banner(config, console)
    if config.startup_delay_seconds:
        sleep(config.startup_delay_seconds)

    cycles = 0
    while True:
        run_cycle(state, config, session, console, bell)
        cycles += 1
        logger.debug(
            "Cycle %d: %d quakes, %d alerted ids, storm_active=%s",
            cycles,
            len(state.quakes),
            len(state.alerted),
            state.storm_active,
        )
        if max_cycles is not None and cycles >= max_cycles:
            return state
        console.print(
            f"\nWaiting {config.update_interval_seconds} seconds for the next update...",
            highlight=False,
        )
        sleep(config.update_interval_seconds)
