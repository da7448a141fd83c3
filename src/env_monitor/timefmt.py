"""Relative-age labels for earthquake timestamps."""

from __future__ import annotations

import time


def relative_age(event_time_ms: int, now: float | None = None) -> str:
    """Return a coarse age label such as ``"42s ago"`` or ``"185m ago"``.

    Ages of a minute or more are always shown in whole minutes, never hours.
    """
    if now is None:
        now = time.time()
    diff_s = int(now) - event_time_ms // 1000
    if diff_s < 60:
        return f"{diff_s}s ago"
    return f"{diff_s // 60}m ago"
