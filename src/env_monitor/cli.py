"""CLI interface using Typer."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from env_monitor import __version__
from env_monitor.config import MonitorConfig, resolve_thresholds
from env_monitor.pipeline import run_monitor

TEST_MODE_WORD = "test"
MAGNITUDE_FLAGS = ("-q", "--min-magnitude")
LOCATION_FLAGS = ("-l", "--location")

app = typer.Typer(
    name="env-monitor",
    help="Console monitor for global earthquakes and local lightning risk.",
    add_completion=False,
)
console = Console()


@dataclass
class MonitorArgs:
    """Settings picked out of the free-form command line words."""

    min_magnitude: float | None = None
    location: tuple[float, float] | None = None
    test_mode: bool = False
    unknown: list[str] = field(default_factory=list)


def _to_number(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_monitor_args(args: list[str]) -> MonitorArgs:
    """Walk the words left to right, the way the classic monitor read argv.

    A flag whose values are missing or not numbers is reported as unknown and
    leaves its setting alone; the words after it are read normally.
    """
    parsed = MonitorArgs()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in MAGNITUDE_FLAGS:
            value = _to_number(args[i + 1]) if i + 1 < len(args) else None
            if value is not None:
                parsed.min_magnitude = value
                i += 2
                continue
        elif arg in LOCATION_FLAGS:
            values = [_to_number(v) for v in args[i + 1 : i + 3]]
            if len(values) == 2 and None not in values:
                parsed.location = (values[0], values[1])
                i += 3
                continue
        elif arg == TEST_MODE_WORD:
            parsed.test_mode = True
            i += 1
            continue
        parsed.unknown.append(arg)
        i += 1
    return parsed


def build_overrides(
    parsed: MonitorArgs,
    interval: int | None = None,
    once: bool = False,
) -> dict[str, Any]:
    """Config fields the user set on the command line.

    Anything left out falls back to ``ENV_MONITOR_*`` variables, then to the
    defaults.
    """
    overrides: dict[str, Any] = {}
    if parsed.min_magnitude is not None:
        minimum, threshold = resolve_thresholds(parsed.min_magnitude, parsed.test_mode)
        overrides["min_magnitude"] = minimum
        overrides["alert_threshold"] = threshold
    elif parsed.test_mode:
        overrides["alert_threshold"] = 0.0
    if parsed.location is not None:
        overrides["latitude"], overrides["longitude"] = parsed.location
    if interval is not None:
        overrides["update_interval_seconds"] = interval
    if once:
        overrides["startup_delay_seconds"] = 0
    return overrides


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"env-monitor {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def monitor(
    extra: Annotated[
        list[str] | None,
        typer.Argument(
            help="-q MAG, -l LAT LON, or 'test' to ring the bell for every quake shown.",
            show_default=False,
        ),
    ] = None,
    interval: Annotated[
        int | None,
        typer.Option("--interval", help="Seconds between updates.", show_default="120"),
    ] = None,
    once: Annotated[
        bool,
        typer.Option("--once", help="Run a single update and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Watch the USGS feed and the local thunderstorm forecast.

    -q MAG sets the minimum magnitude shown and the alert threshold.
    -l LAT LON sets the forecast location.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    parsed = parse_monitor_args(extra or [])
    for arg in parsed.unknown:
        console.print(f"Unknown argument: {arg}", markup=False, highlight=False)

    try:
        config = MonitorConfig(**build_overrides(parsed, interval, once))
    except ValidationError as exc:
        console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from None

    try:
        run_monitor(config, console, max_cycles=1 if once else None)
    except KeyboardInterrupt:
        console.print("\nMonitor stopped.")
        raise typer.Exit() from None
