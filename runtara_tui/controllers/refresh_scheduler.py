"""Refresh scheduler - decides when the periodic snapshot fetch runs.

The scheduler owns no I/O. The main loop asks it on every frame tick and
after every user refresh whether a fetch should start, and reports back when
a fetch starts and completes. It guarantees that at most one fetch is in
flight; refresh requests that arrive meanwhile collapse into one owed fetch.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from runtara_tui.constants.defaults import REFRESH_INTERVAL_DEFAULT

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Single-timer scheduler with an in-flight flag and a pending flag."""

    def __init__(
        self,
        interval: float = REFRESH_INTERVAL_DEFAULT,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("refresh interval must be positive")
        self._interval = float(interval)
        self._clock = clock
        # The first poll is due immediately.
        self._next_due = clock()
        self._in_flight = False
        self._pending = False
        self._skipped_ticks = 0
        self._started_count = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def pending(self) -> bool:
        """Whether one more fetch is owed after the current one."""
        return self._pending

    @property
    def skipped_ticks(self) -> int:
        return self._skipped_ticks

    @property
    def started_count(self) -> int:
        return self._started_count

    def remaining(self, now: float | None = None) -> float:
        """Seconds until the next automatic refresh."""
        now = self._clock() if now is None else now
        return max(0.0, self._next_due - now)

    # =========================================================================
    # Triggers
    # =========================================================================

    def poll(self, now: float | None = None) -> bool:
        """Timer check; returns True when a fetch should start now.

        When the deadline has passed the timer re-arms for one full interval.
        A due tick that finds a fetch in flight is skipped.
        """
        now = self._clock() if now is None else now
        if now < self._next_due:
            return False
        self._next_due = now + self._interval
        if self._in_flight:
            self._skipped_ticks += 1
            logger.debug(f"Skipping refresh tick, fetch in flight ({self._skipped_ticks} skipped)")
            return False
        return True

    def request_manual(self, now: float | None = None) -> bool:
        """User-requested refresh; returns True when a fetch should start now.

        The countdown restarts. While a fetch is in flight the request is
        recorded as owed instead, however many times it is repeated.
        """
        now = self._clock() if now is None else now
        self._next_due = now + self._interval
        if self._in_flight:
            self._pending = True
            return False
        return True

    # =========================================================================
    # Fetch lifecycle
    # =========================================================================

    def mark_started(self) -> None:
        if self._in_flight:
            raise RuntimeError("a refresh is already in flight")
        self._in_flight = True
        self._started_count += 1

    def mark_completed(self, now: float | None = None) -> bool:
        """Record completion; returns True when an owed fetch should start."""
        now = self._clock() if now is None else now
        self._in_flight = False
        if self._pending:
            self._pending = False
            self._next_due = now + self._interval
            return True
        return False


__all__ = ["RefreshScheduler"]
