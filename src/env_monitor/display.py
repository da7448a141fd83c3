"""Console report for the current monitor state, rendered with rich."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from rich.console import Console
from rich.text import Text

from env_monitor.alerts import Bell
from env_monitor.config import MonitorConfig
from env_monitor.models import HOURLY_SLOTS, MonitorState, WeatherSnapshot

LightningStatus = Literal["warning", "watch", "clear"]
MagnitudeTier = Literal["severe", "elevated", "normal"]

# WMO codes: thunderstorm, with slight hail, with heavy hail
STORM_CODES = frozenset({95, 96, 99})

SEVERE_MAGNITUDE = 6.0
ELEVATED_MAGNITUDE = 4.0

TIER_STYLES: dict[str, str] = {
    "severe": "red",
    "elevated": "yellow",
    "normal": "green",
}


def magnitude_tier(magnitude: float) -> MagnitudeTier:
    if magnitude >= SEVERE_MAGNITUDE:
        return "severe"
    if magnitude >= ELEVATED_MAGNITUDE:
        return "elevated"
    return "normal"


def classify_lightning(weather: WeatherSnapshot) -> LightningStatus:
    """Pick the lightning banner.

    A storm code now is a warning, whatever the forecast says.  Otherwise a
    storm code in any of the next five hours is a watch.
    """
    if weather.current_code in STORM_CODES:
        return "warning"
    if any(code in STORM_CODES for code in weather.hourly_codes[1:HOURLY_SLOTS]):
        return "watch"
    return "clear"


def update_storm_flag(state: MonitorState, status: LightningStatus, bell: Bell) -> None:
    """Ring the bell on the transition into a warning, not on every warning."""
    if status == "warning":
        if not state.storm_active:
            bell()
            state.storm_active = True
    else:
        state.storm_active = False


def _print_quakes(state: MonitorState, console: Console) -> None:
    for quake in state.quakes:
        style = TIER_STYLES[magnitude_tier(quake.magnitude)]
        line = Text.assemble(
            (f"[  M {quake.magnitude:.1f}  ]{quake.time_ago:<10}", style),
            " ",
            quake.place,
        )
        console.print(line, highlight=False)


def _print_lightning(status: LightningStatus, console: Console) -> None:
    if status == "warning":
        console.print("!!! SEVERE THUNDERSTORM WARNING IN EFFECT !!!", style="red", highlight=False)
        console.print("> Isolate antenna and sensitive equipment immediately.", highlight=False)
    elif status == "watch":
        console.print("--- THUNDERSTORM WATCH ---", style="yellow", highlight=False)
        console.print(
            "> Thunderstorms possible within the next 6 hours. Monitor conditions.",
            highlight=False,
        )
    else:
        console.print("STATUS: All clear.", style="green", highlight=False)


def render(
    state: MonitorState,
    config: MonitorConfig,
    console: Console,
    bell: Bell,
    now: datetime | None = None,
) -> LightningStatus:
    """Redraw the full report and return the lightning status shown.

    The only state touched is the storm-active flag.
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)

    console.clear()
    console.print(
        f"--- GLOBAL SEISMIC MONITOR (Min Mag: {config.min_magnitude:.1f}) ---",
        style="cyan",
        highlight=False,
    )
    console.print(f"Last Updated: {now:%Y-%m-%d %H:%M:%S} UTC\n", highlight=False)
    _print_quakes(state, console)

    console.print("\n--- LIGHTNING PROXIMITY WARNING ---", style="cyan", highlight=False)
    console.print(
        f"Monitoring Location: {config.latitude:.2f}, {config.longitude:.2f}\n",
        highlight=False,
    )

    status = classify_lightning(state.weather)
    _print_lightning(status, console)
    update_storm_flag(state, status, bell)
    return status
