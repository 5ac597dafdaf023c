from __future__ import annotations

import threading
from datetime import date
from typing import Iterable, Optional, Sequence

from .model import AttendanceEvent


class MemoryEventRepository:
    def __init__(self, events: Iterable[AttendanceEvent] = ()):
        self._lock = threading.Lock()
        self._events: list[AttendanceEvent] = sorted(events, key=lambda e: e.timestamp)

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        with self._lock:
            items = list(self._events)
        return [
            e
            for e in items
            if start_date <= e.timestamp.date() <= end_date and (user_id is None or e.user_id == user_id)
        ]

    def add(self, event: AttendanceEvent) -> None:
        with self._lock:
            self._events = sorted((*self._events, event), key=lambda e: e.timestamp)
