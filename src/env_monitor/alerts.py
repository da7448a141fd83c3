"""Audible alerts for newly seen earthquakes."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from env_monitor.models import Earthquake, MonitorState

logger = logging.getLogger(__name__)

Bell = Callable[[], None]


def console_bell(console: Console) -> Bell:
    """Return a bell that writes the terminal BEL character to *console*."""

    def ring() -> None:
        console.bell()

    return ring


def check_for_quake_alerts(
    state: MonitorState,
    alert_threshold: float,
    bell: Bell,
) -> list[Earthquake]:
    """Ring the bell once for each quake at/above the threshold not yet alerted.

    Alerted ids are remembered in ``state.alerted`` and only forgotten when
    pushed out by newer alerts.  Returns the quakes that rang the bell.
    """
    fired: list[Earthquake] = []
    for quake in state.quakes:
        if quake.magnitude < alert_threshold:
            continue
        if quake.id in state.alerted:
            continue
        bell()
        state.alerted.add(quake.id)
        fired.append(quake)
        logger.debug("New alert: M%.1f %s", quake.magnitude, quake.place)
    return fired
