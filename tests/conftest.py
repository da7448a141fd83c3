"""Shared fixtures for env_monitor tests."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from env_monitor.config import MonitorConfig
from env_monitor.models import Earthquake, MonitorState

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class BellSpy:
    """Counts how many times the monitor rang the bell."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_usgs_feed() -> dict:
    return json.loads((FIXTURES_DIR / "usgs_all_hour.json").read_text())


@pytest.fixture
def sample_forecast() -> dict:
    return json.loads((FIXTURES_DIR / "open_meteo_forecast.json").read_text())


@pytest.fixture
def default_config() -> MonitorConfig:
    """Config with defaults and no startup pause."""
    return MonitorConfig(startup_delay_seconds=0)


@pytest.fixture
def state() -> MonitorState:
    return MonitorState()


@pytest.fixture
def bell() -> BellSpy:
    return BellSpy()


@pytest.fixture
def console() -> Console:
    """Plain-text console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def sample_quakes() -> list[Earthquake]:
    """Pre-built ranked quakes for alert and display tests."""
    return [
        Earthquake(
            magnitude=6.3,
            place="Kermadec Islands region",
            id="us7000l9xy",
            time_ms=1699996400000,
            time_ago="60m ago",
        ),
        Earthquake(
            magnitude=4.6,
            place="80 km SSW of Kaktovik, Alaska",
            id="ak0231abcd",
            time_ms=1699999815000,
            time_ago="3m ago",
        ),
        Earthquake(
            magnitude=2.1,
            place="10 km N of Anza, CA",
            id="ci40600001",
            time_ms=1699999970000,
            time_ago="30s ago",
        ),
    ]
