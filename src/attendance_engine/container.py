from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_event_repository import MemoryEventRepository
from .attendance.reconciler import BatchReconciler
from .attendance.service import AttendanceEventService
from .config import load_attendance_settings, load_final_confirmation_role
from .database.json_store import DataSet, load_dataset
from .leaves.memory_leave_repository import MemoryLeaveRepository
from .leaves.service import LeaveWorkflowService
from .reports.service import AttendanceReportService
from .settings.provider import SettingsProvider
from .users.memory_user_repository import MemoryOrganizationRepository, MemoryUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: MemoryUserRepository
    organizations_repo: MemoryOrganizationRepository
    events_repo: MemoryEventRepository
    leaves_repo: MemoryLeaveRepository
    settings_provider: SettingsProvider

    attendance_service: AttendanceEventService
    leave_service: LeaveWorkflowService
    report_service: AttendanceReportService


def build_container(*, settings, dataset: Optional[DataSet] = None) -> Container:
    """Wire repositories and services from a settings module (or object)."""
    data = dataset if dataset is not None else load_dataset(getattr(settings, "DATA_FILE", ""))

    users_repo = MemoryUserRepository(data.users)
    organizations_repo = MemoryOrganizationRepository(data.organizations)
    events_repo = MemoryEventRepository(data.events)
    leaves_repo = MemoryLeaveRepository(data.leave_requests)
    settings_provider = SettingsProvider(
        load_attendance_settings(settings),
        data.holidays,
        final_confirmation_role=load_final_confirmation_role(settings),
    )

    reconciler = BatchReconciler(max_workers=int(getattr(settings, "REPORT_WORKERS", 0)) or None)

    attendance_service = AttendanceEventService(events_repo, users_repo, leaves_repo, settings_provider)
    leave_service = LeaveWorkflowService(leaves_repo, users_repo, settings_provider)
    report_service = AttendanceReportService(
        users_repo,
        organizations_repo,
        events_repo,
        leaves_repo,
        settings_provider,
        reconciler=reconciler,
    )

    return Container(
        users_repo=users_repo,
        organizations_repo=organizations_repo,
        events_repo=events_repo,
        leaves_repo=leaves_repo,
        settings_provider=settings_provider,
        attendance_service=attendance_service,
        leave_service=leave_service,
        report_service=report_service,
    )
