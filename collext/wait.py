"""Wait module – polls a check function on a timer until it succeeds or times out."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from collext.config import get_settings

logger = logging.getLogger(__name__)

PENDING = "pending"
SUCCESS = "success"
TIMEOUT = "timeout"
CANCELLED = "cancelled"
ERROR = "error"


def _noop() -> None:
    pass


class Waiter:
    """Handle for a running :func:`wait_for` poll loop."""

    def __init__(
        self,
        check: Callable[[], Any],
        then: Callable[[], Any],
        on_timeout: Callable[[], Any],
        on_cancel: Callable[[], Any],
        interval: float,
        max_wait: float,
    ) -> None:
        self.check = check
        self.then = then
        self.on_timeout = on_timeout
        self.on_cancel = on_cancel
        self.interval = interval
        self.max_attempts = max_wait / interval

        self.attempts = 0
        self.outcome = PENDING
        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._timer: threading.Timer | None = None

    @property
    def done(self) -> bool:
        """True once the wait has stopped and its callback has returned."""
        return self._finished.is_set()

    def _stopped(self) -> bool:
        return self.outcome != PENDING

    def _settle(self, callback: Callable[[], Any]) -> None:
        try:
            callback()
        finally:
            self._finished.set()

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self, raise_errors: bool = False) -> None:
        with self._lock:
            if self._stopped():
                return
            self.attempts += 1
            timed_out = self.attempts > self.max_attempts
            if timed_out:
                self.outcome = TIMEOUT

        if timed_out:
            logger.debug("Gave up after %d attempt(s)", self.attempts - 1)
            self._settle(self.on_timeout)
            return

        try:
            passed = self.check()
        except Exception:
            with self._lock:
                if not self._stopped():
                    self.outcome = ERROR
            self._finished.set()
            if raise_errors:
                raise
            logger.exception("Check failed on attempt %d; polling stopped", self.attempts)
            return

        with self._lock:
            if self._stopped():
                return
            if passed:
                self.outcome = SUCCESS
            else:
                self._schedule()

        if passed:
            logger.debug("Check passed on attempt %d", self.attempts)
            self._settle(self.then)

    def start(self) -> Waiter:
        self._tick(raise_errors=True)
        return self

    def cancel(self) -> bool:
        """Stop polling.  Returns False if the wait had already finished."""
        with self._lock:
            if self._stopped():
                return False
            if self._timer is not None:
                self._timer.cancel()
            self.outcome = CANCELLED
        logger.debug("Cancelled after %d attempt(s)", self.attempts)
        self._settle(self.on_cancel)
        return True

    def join(self, timeout: float | None = None) -> bool:
        """Block until the wait finishes; return whether it did within *timeout*."""
        return self._finished.wait(timeout)


def wait_for(
    check: Callable[[], Any],
    then: Callable[[], Any] | None = None,
    on_timeout: Callable[[], Any] | None = None,
    on_cancel: Callable[[], Any] | None = None,
    interval: float | None = None,
    max_wait: float | None = None,
) -> Waiter:
    """Call *check* every *interval* seconds until it returns something truthy.

    Usage::

        waiter = wait_for(
            check=lambda: job.finished,
            then=lambda: print("job done"),
        )
        ...
        waiter.cancel()  # stop early

    *check* runs once straight away; if it raises there, the error
    propagates.  *then* runs on success, *on_timeout* once more than
    *max_wait* seconds' worth of attempts have gone by and *on_cancel* when
    :meth:`Waiter.cancel` stops a pending wait.  *interval* and *max_wait*
    default to ``COLLEXT_WAIT_INTERVAL`` and ``COLLEXT_WAIT_MAX``.
    """
    settings = get_settings()
    waiter = Waiter(
        check=check,
        then=then or _noop,
        on_timeout=on_timeout or _noop,
        on_cancel=on_cancel or _noop,
        interval=interval or settings.wait_interval,
        max_wait=max_wait or settings.wait_max,
    )
    return waiter.start()
