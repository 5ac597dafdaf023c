from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from ..common.validators import require_non_empty
from ..core.enums import FINAL_CONFIRMATION_ROLES, Role
from ..core.exceptions import InputValidationError, NotFoundError
from .model import AttendanceSettings, ConfigSnapshot, Holiday

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Holds the live attendance settings, holiday calendar and workflow role.

    Readers never see the live values directly: they take a snapshot, so an
    update made while a batch is running is only visible to later batches.
    """

    def __init__(
        self,
        settings: Optional[AttendanceSettings] = None,
        holidays: Iterable[Holiday] = (),
        *,
        final_confirmation_role: Role = Role.HR,
    ):
        self._lock = threading.Lock()
        self._settings = (settings or AttendanceSettings()).validated()
        self._holidays = self._sorted(holidays)
        self._final_role = self._check_final_role(final_confirmation_role)

    @staticmethod
    def _sorted(holidays: Iterable[Holiday]) -> tuple[Holiday, ...]:
        return tuple(sorted(holidays, key=lambda h: h.date))

    @staticmethod
    def _check_final_role(role: Role) -> Role:
        if role not in FINAL_CONFIRMATION_ROLES:
            raise InputValidationError(f"Role {role.value} cannot give final confirmation")
        return role

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return ConfigSnapshot(
                settings=self._settings,
                holidays=self._holidays,
                final_confirmation_role=self._final_role,
            )

    def update_settings(self, **changes) -> AttendanceSettings:
        with self._lock:
            updated = replace(self._settings, **changes).validated()
            self._settings = updated
        logger.info("Attendance settings updated: %s", sorted(changes))
        return updated

    def set_final_confirmation_role(self, role: Role) -> None:
        with self._lock:
            self._final_role = self._check_final_role(role)
        logger.info("Final confirmation role set to %s", role.value)

    def add_holiday(self, *, holiday_date: date, name: str) -> Holiday:
        name = require_non_empty(name, "Holiday name")
        holiday = Holiday(holiday_id=f"hol_{uuid.uuid4().hex[:12]}", date=holiday_date, name=name)
        with self._lock:
            self._holidays = self._sorted((*self._holidays, holiday))
        return holiday

    def remove_holiday(self, holiday_id: str) -> None:
        with self._lock:
            remaining = tuple(h for h in self._holidays if h.holiday_id != holiday_id)
            if len(remaining) == len(self._holidays):
                raise NotFoundError(f"Holiday {holiday_id} not found")
            self._holidays = remaining
