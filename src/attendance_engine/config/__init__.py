from __future__ import annotations

import os

from ..core.enums import FINAL_CONFIRMATION_ROLES, Role
from ..core.exceptions import ConfigurationError


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "attendance_engine.config.production"

    if env in {"test", "testing"}:
        return "attendance_engine.config.testing"

    return "attendance_engine.config.development"


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def load_attendance_settings(settings):
    """Build validated AttendanceSettings from a settings module."""
    from ..settings.model import AttendanceSettings

    return AttendanceSettings(
        minimum_hours_full_day=float(getattr(settings, "MIN_HOURS_FULL_DAY", 8)),
        minimum_hours_half_day=float(getattr(settings, "MIN_HOURS_HALF_DAY", 4)),
        annual_earned_leaves=int(getattr(settings, "ANNUAL_EARNED_LEAVES", 5)),
        annual_sick_leaves=int(getattr(settings, "ANNUAL_SICK_LEAVES", 12)),
        monthly_floating_leaves=int(getattr(settings, "MONTHLY_FLOATING_LEAVES", 1)),
        enable_attendance_notifications=bool(getattr(settings, "ENABLE_ATTENDANCE_NOTIFICATIONS", False)),
    ).validated()


def load_final_confirmation_role(settings) -> Role:
    raw = str(getattr(settings, "FINAL_CONFIRMATION_ROLE", Role.HR.value)).lower()
    try:
        role = Role(raw)
    except ValueError:
        raise ConfigurationError(f"Unknown final confirmation role: {raw}")
    if role not in FINAL_CONFIRMATION_ROLES:
        raise ConfigurationError(f"Role {raw} cannot give final confirmation")
    return role
