from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_local_naive
from ..core.enums import EventType
from ..core.exceptions import NotFoundError
from ..leaves.repository import LeaveRepository
from ..settings.provider import SettingsProvider
from ..users.repository import UserRepository
from .model import AttendanceEvent, DailyAttendanceRecord
from .reconciler import reconcile
from .repository import EventRepository

logger = logging.getLogger(__name__)


class AttendanceEventService:
    def __init__(
        self,
        events: EventRepository,
        users: UserRepository,
        leaves: LeaveRepository,
        settings: SettingsProvider,
    ):
        self._events = events
        self._users = users
        self._leaves = leaves
        self._settings = settings

    def record(
        self,
        user_id: str,
        event_type: EventType,
        *,
        now: Optional[datetime] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> AttendanceEvent:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")

        event = AttendanceEvent(
            event_id=f"evt_{uuid.uuid4().hex[:12]}",
            user_id=user_id,
            timestamp=to_local_naive(now) if now else datetime.now(),
            type=EventType(event_type),
            latitude=latitude,
            longitude=longitude,
        )
        self._events.add(event)

        if self._settings.snapshot().settings.enable_attendance_notifications:
            logger.info(
                "Attendance notification: %s %s at %s; notifying site manager, operations manager and HR",
                user.name,
                event.type.value.replace("-", " "),
                event.timestamp.strftime("%I:%M %p"),
            )
        return event

    def daily_records(self, user_id: str, start: date, end: date) -> list[DailyAttendanceRecord]:
        """Reconciled history for one employee, read straight from the repositories."""
        if not self._users.get_by_id(user_id):
            raise NotFoundError(f"User {user_id} not found")

        snapshot = self._settings.snapshot()
        return reconcile(
            user_id,
            start,
            end,
            self._events.list_between(start_date=start, end_date=end, user_id=user_id),
            self._leaves.list_requests(user_id=user_id),
            snapshot.holidays,
            snapshot.settings,
        )
