from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, List, Optional

from ..core.constants import DEFAULT_EVENT_QUEUE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsumptionEvent:
    """Notificación de un consumo registrado, para los tableros en vivo."""

    employee_id: str
    employee_name: str
    employee_type: Optional[str]
    cafeteria_id: str
    consumption_date: date
    count: int
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_type": self.employee_type,
            "comedor_id": self.cafeteria_id,
            "consumption_date": self.consumption_date.isoformat(),
            "consumption_count": self.count,
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
        }


class ConsumptionEventBroker:
    """In-process publish/subscribe channel.

    Every subscriber owns a bounded queue. ``publish`` never blocks: when a
    subscriber's queue is full the event is dropped for that subscriber only.
    """

    def __init__(self, *, queue_size: int = DEFAULT_EVENT_QUEUE_SIZE):
        self._queue_size = int(queue_size)
        self._lock = threading.Lock()
        self._subscribers: List[queue.Queue] = []

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self) -> queue.Queue:
        q: queue.Queue = queue.Queue(maxsize=self._queue_size)
        with self._lock:
            self._subscribers.append(q)
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            if q in self._subscribers:
                self._subscribers.remove(q)

    def publish(self, event: ConsumptionEvent) -> int:
        """Deliver to every subscriber; returns how many received it."""
        with self._lock:
            targets = list(self._subscribers)

        delivered = 0
        for q in targets:
            try:
                q.put_nowait(event)
                delivered += 1
            except queue.Full:
                logger.warning("Dropping consumption event for a slow subscriber (employee=%s)", event.employee_id)
        return delivered

    def listen(self, *, heartbeat_seconds: float = 15.0) -> Iterator[Optional[ConsumptionEvent]]:
        """Yield events as they arrive, or None every ``heartbeat_seconds`` of silence."""
        q = self.subscribe()
        try:
            while True:
                try:
                    yield q.get(timeout=heartbeat_seconds)
                except queue.Empty:
                    yield None
        finally:
            self.unsubscribe(q)
