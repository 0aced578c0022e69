"""Bounded, thread-safe log of notification events."""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Tuple

from .models import EVENT_TYPES, NotificationEvent

log = logging.getLogger(__name__)

CAP = 30


@dataclass(frozen=True)
class LogSnapshot:
    """Immutable view of the log taken for a single render pass."""

    events: Tuple[NotificationEvent, ...] = ()

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[NotificationEvent]:
        return iter(self.events)

    def is_empty(self) -> bool:
        return not self.events

    def at_or_over_cap(self) -> bool:
        return len(self.events) >= CAP


class NotificationLog:
    """Keeps the most recent notifications in arrival order (oldest first).

    Once more than ``CAP`` events are held, the oldest are dropped.
    Writers and snapshot readers are serialized by a single lock.
    """

    def __init__(self) -> None:
        self._events: Deque[NotificationEvent] = deque(maxlen=CAP)
        self._lock = threading.Lock()

    def append(self, event: NotificationEvent) -> None:
        if not isinstance(event, EVENT_TYPES):
            raise TypeError(f"Not a notification event: {type(event).__name__}")
        with self._lock:
            if len(self._events) == CAP:
                log.debug("Log full; evicting oldest %s", self._events[0].kind)
            self._events.append(event)

    def clear_all(self) -> int:
        """Remove every event and return how many were dropped."""
        with self._lock:
            removed = len(self._events)
            self._events.clear()
        return removed

    def snapshot(self) -> LogSnapshot:
        with self._lock:
            return LogSnapshot(events=tuple(self._events))

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def __iter__(self) -> Iterator[NotificationEvent]:
        return iter(self.snapshot())

    def is_empty(self) -> bool:
        return len(self) == 0

    def at_or_over_cap(self) -> bool:
        return len(self) >= CAP
