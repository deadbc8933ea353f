"""Background thread firing due event reminders at a fixed interval."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from pulse.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

STATUS_RUNNING = "En cours"
STATUS_STOPPED = "Arrêté"

ReminderJob = Callable[[Session, datetime], int]


class NotificationScheduler:
    """Own the reminder thread of one application instance.

    ``job`` receives a fresh session and the current time and returns how many
    reminders it fired. ``start`` and ``stop`` may be called any number of
    times; starting a running scheduler restarts its timer.
    """

    def __init__(
        self,
        job: ReminderJob,
        *,
        session_factory: Callable[[], Session],
        interval_seconds: float = 60.0,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        self._job = job
        self._session_factory = session_factory
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stop_event: threading.Event | None = None
        self.last_run_at: datetime | None = None
        self.last_processed = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            self._stop_locked()
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._loop,
                args=(stop_event,),
                name="notification-scheduler",
                daemon=True,
            )
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        logger.info(
            "Notification scheduler started (every %s seconds)", self.interval_seconds
        )

    def stop(self) -> bool:
        """Stop the timer; return ``True`` when it was running."""

        with self._lock:
            was_running = self._stop_locked()
        if was_running:
            logger.info("Notification scheduler stopped")
        return was_running

    def status(self) -> dict[str, Any]:
        running = self.is_running
        return {
            "status": STATUS_RUNNING if running else STATUS_STOPPED,
            "running": running,
            "interval_seconds": self.interval_seconds,
            "last_run_at": self.last_run_at,
            "last_processed": self.last_processed,
            "timestamp": self._clock(),
        }

    def run_once(self, now: datetime | None = None) -> int:
        """Run one tick synchronously and return the number of reminders fired."""

        current = now or self._clock()
        session = self._session_factory()
        try:
            processed = self._job(session, current)
        finally:
            session.close()
        self.last_run_at = current
        self.last_processed = processed
        if processed:
            logger.info("Scheduler tick fired %d reminder(s)", processed)
        else:
            logger.debug("Scheduler tick found no due reminder")
        return processed

    def _stop_locked(self) -> bool:
        thread, stop_event = self._thread, self._stop_event
        self._thread = None
        self._stop_event = None
        if thread is None or stop_event is None:
            return False
        stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout=self.interval_seconds + 5)
        return True

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval_seconds):
            try:
                self.run_once()
            except Exception:
                logger.exception("Scheduler tick failed")


__all__ = ["NotificationScheduler", "STATUS_RUNNING", "STATUS_STOPPED"]
