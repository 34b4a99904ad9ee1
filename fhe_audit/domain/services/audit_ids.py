"""Audit record id generation.

Ids look like ``audit-<epoch milliseconds>``. Two uploads in the same
millisecond would collide, so the generator never hands out a value
less than or equal to the last one.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

AUDIT_ID_PREFIX = "audit-"


class AuditIdGenerator:
    """Strictly increasing millisecond ids."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            millis = int(self._clock() * 1000)
            if millis <= self._last:
                millis = self._last + 1
            self._last = millis
        return f"{AUDIT_ID_PREFIX}{millis}"


# Shared by every client in the process so ids stay unique process-wide
DEFAULT_ID_GENERATOR = AuditIdGenerator()
