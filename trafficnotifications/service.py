"""Notifications page service: owns the log and answers render requests."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .config import NotificationsConfig
from .models import NotificationEvent
from .notification_log import NotificationLog
from .page_state import PageState, build_page_state
from .presenter import EventPresenter
from .telemetry import TelemetryManager

log = logging.getLogger(__name__)

DOTS_CYCLE = ("", ".", "..", "...")


@dataclass(frozen=True)
class ClearAllRequested:
    """Operator confirmed that every logged notification should be removed."""


class NotificationsService:
    """Glue between the detection engine, the log and the rendering layer."""

    def __init__(
        self,
        config: NotificationsConfig,
        presenter: EventPresenter,
        notification_log: Optional[NotificationLog] = None,
        telemetry: Optional[TelemetryManager] = None,
    ) -> None:
        self.config = config
        self.presenter = presenter
        self.log = notification_log if notification_log is not None else NotificationLog()
        self.telemetry = telemetry
        self._lock = threading.Lock()
        self._unread = 0
        self._dots_index = 0

    @property
    def unread_notifications(self) -> int:
        with self._lock:
            return self._unread

    @property
    def dots(self) -> str:
        with self._lock:
            return DOTS_CYCLE[self._dots_index]

    def notify(self, event: NotificationEvent) -> None:
        """Record an event produced by the detection engine."""
        # service lock first, log lock second
        with self._lock:
            self.log.append(event)
            self._unread += 1
        log.info("Notification logged: %s at %s", event.kind, event.timestamp)
        if self.telemetry:
            self.telemetry.record_notification(event.kind)

    def handle(self, command: object) -> None:
        if isinstance(command, ClearAllRequested):
            with self._lock:
                removed = self.log.clear_all()
                self._unread = 0
            log.info("Cleared %d notifications.", removed)
            if self.telemetry:
                self.telemetry.record_clear(removed)
            return
        raise TypeError(f"Unsupported command: {type(command).__name__}")

    def tick(self) -> str:
        """Advance the listening indicator and return the new dots."""
        with self._lock:
            self._dots_index = (self._dots_index + 1) % len(DOTS_CYCLE)
            return DOTS_CYCLE[self._dots_index]

    def render(self) -> PageState:
        """Build the page from one consistent snapshot and mark it as read.

        Only the events in the snapshot are marked read; anything notified
        afterwards stays unread until the next render.
        """
        with self._lock:
            snapshot = self.log.snapshot()
            dots = DOTS_CYCLE[self._dots_index]
            self._unread = 0
        page = build_page_state(self.config, snapshot, self.presenter, dots=dots)
        if self.telemetry:
            self.telemetry.record_render(page.kind.value)
        return page
