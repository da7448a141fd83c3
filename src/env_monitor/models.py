"""Data models for the environmental monitor."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime

MAX_QUAKES = 200
MAX_ALERTED_IDS = 50
HOURLY_SLOTS = 6

MAX_PLACE_LENGTH = 255
MAX_ID_LENGTH = 63


@dataclass(frozen=True)
class Earthquake:
    """A single earthquake from the USGS summary feed."""

    magnitude: float
    place: str = ""
    id: str = ""
    time_ms: int = 0
    time_ago: str = ""


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current and near-future WMO weather codes for the monitor location."""

    current_code: int = 0
    hourly_codes: tuple[int, ...] = (0,) * HOURLY_SLOTS  # index 0 = current hour

    def __post_init__(self) -> None:
        codes = tuple(self.hourly_codes[:HOURLY_SLOTS])
        codes += (0,) * (HOURLY_SLOTS - len(codes))
        object.__setattr__(self, "hourly_codes", codes)

    @classmethod
    def clear(cls) -> WeatherSnapshot:
        return cls()


class AlertRing:
    """Bounded, insertion-ordered set of earthquake ids already alerted on.

    When full, adding a new id evicts the oldest one.  Membership checks do
    not refresh an entry's position.
    """

    def __init__(self, capacity: int = MAX_ALERTED_IDS) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._ids: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._ids.maxlen or 0

    def add(self, event_id: str) -> bool:
        """Insert *event_id*; return False if it was already present."""
        if event_id in self._ids:
            return False
        self._ids.append(event_id)
        return True

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"AlertRing({list(self._ids)!r}, capacity={self.capacity})"


@dataclass
class MonitorState:
    """Everything the monitor remembers between feed cycles."""

    quakes: list[Earthquake] = field(default_factory=list)
    alerted: AlertRing = field(default_factory=AlertRing)
    weather: WeatherSnapshot = field(default_factory=WeatherSnapshot.clear)
    storm_active: bool = False
    last_updated: datetime | None = None
