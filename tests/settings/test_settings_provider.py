import types
from datetime import date

import pytest

from attendance_engine.config import get_settings_module, load_attendance_settings, load_final_confirmation_role
from attendance_engine.core.enums import Role
from attendance_engine.core.exceptions import ConfigurationError, InputValidationError, NotFoundError
from attendance_engine.settings.model import AttendanceSettings
from attendance_engine.settings.provider import SettingsProvider


def test_half_day_threshold_must_be_below_full_day():
    with pytest.raises(InputValidationError):
        AttendanceSettings(minimum_hours_full_day=4, minimum_hours_half_day=4).validated()
    with pytest.raises(InputValidationError):
        AttendanceSettings(annual_sick_leaves=-1).validated()


def test_snapshot_is_not_affected_by_later_updates():
    provider = SettingsProvider()
    before = provider.snapshot()

    provider.update_settings(minimum_hours_full_day=9)

    assert before.settings.minimum_hours_full_day == 8
    assert provider.snapshot().settings.minimum_hours_full_day == 9


def test_invalid_update_keeps_previous_settings():
    provider = SettingsProvider()
    with pytest.raises(InputValidationError):
        provider.update_settings(minimum_hours_half_day=10)
    assert provider.snapshot().settings == AttendanceSettings()


def test_holidays_are_kept_sorted_and_removable():
    provider = SettingsProvider()
    later = provider.add_holiday(holiday_date=date(2024, 8, 15), name="Independence Day")
    earlier = provider.add_holiday(holiday_date=date(2024, 1, 26), name="Republic Day")

    assert [h.holiday_id for h in provider.snapshot().holidays] == [earlier.holiday_id, later.holiday_id]

    provider.remove_holiday(later.holiday_id)
    assert provider.snapshot().holiday_dates() == frozenset({date(2024, 1, 26)})
    with pytest.raises(NotFoundError):
        provider.remove_holiday(later.holiday_id)


def test_holiday_needs_a_name():
    with pytest.raises(InputValidationError):
        SettingsProvider().add_holiday(holiday_date=date(2024, 1, 26), name=" ")


def test_final_role_restricted_to_admin_hr_and_ops():
    provider = SettingsProvider()
    provider.set_final_confirmation_role(Role.ADMIN)
    assert provider.snapshot().final_confirmation_role == Role.ADMIN

    with pytest.raises(InputValidationError):
        provider.set_final_confirmation_role(Role.SITE_MANAGER)


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "attendance_engine.config.production"),
        ("test", "attendance_engine.config.testing"),
        ("anything", "attendance_engine.config.development"),
    ],
)
def test_settings_module_selected_by_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_loaded_from_module():
    module = types.SimpleNamespace(MIN_HOURS_FULL_DAY="7.5", MIN_HOURS_HALF_DAY="3", FINAL_CONFIRMATION_ROLE="Admin")

    loaded = load_attendance_settings(module)

    assert loaded.minimum_hours_full_day == 7.5
    assert loaded.annual_earned_leaves == 5
    assert load_final_confirmation_role(module) == Role.ADMIN


@pytest.mark.parametrize("role", ["site_manager", "boss"])
def test_bad_final_role_in_settings(role):
    with pytest.raises(ConfigurationError):
        load_final_confirmation_role(types.SimpleNamespace(FINAL_CONFIRMATION_ROLE=role))
