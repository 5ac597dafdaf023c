from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent


class EventRepository(Protocol):
    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
    ) -> Sequence[AttendanceEvent]:
        """Events whose timestamp falls on a calendar day in [start_date, end_date]."""

        raise NotImplementedError

    def add(self, event: AttendanceEvent) -> None:
        raise NotImplementedError
