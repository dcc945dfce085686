"""Tests for the weekly active-hours configuration model."""

from datetime import date, datetime, time

import pytest

from deploy_gates.domain.active_hours import ActiveHours, ActiveHoursPerWeek, Config, Weekday

pytestmark = pytest.mark.unit

BUSINESS_HOURS = ActiveHours(start=time(8, 0), end=time(17, 0))


def test_weekday_values_match_date_weekday():
    # 2024-01-01 was a Monday
    for offset, day in enumerate(Weekday):
        assert Weekday.of(date(2024, 1, 1 + offset)) == day


def test_weekday_field_names():
    assert [day.field_name for day in Weekday] == [
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
    ]


def test_active_hours_allows_overnight_window():
    overnight = ActiveHours(start=time(22, 0), end=time(6, 0))
    assert overnight.crosses_midnight is True
    assert BUSINESS_HOURS.crosses_midnight is False


def test_empty_week_has_seven_unrestricted_days():
    week = ActiveHoursPerWeek()
    slots = list(week)
    assert [day for day, _ in slots] == list(Weekday)
    assert all(hours is None for _, hours in slots)
    assert week.restricted_days == []


@pytest.mark.parametrize("day", list(Weekday))
def test_setting_one_day_leaves_others_unrestricted(day):
    week = ActiveHoursPerWeek().with_day(day, BUSINESS_HOURS)
    for other, hours in week:
        if other == day:
            assert hours == BUSINESS_HOURS
        else:
            assert hours is None


def test_with_day_none_clears_restriction():
    week = ActiveHoursPerWeek.from_days(monday=BUSINESS_HOURS, friday=BUSINESS_HOURS)
    cleared = week.with_day(Weekday.MONDAY, None)
    assert cleared[Weekday.MONDAY] is None
    assert cleared[Weekday.FRIDAY] == BUSINESS_HOURS
    # Source snapshot untouched
    assert week[Weekday.MONDAY] == BUSINESS_HOURS


def test_zero_length_window_is_not_absence():
    zero = ActiveHours(start=time(9, 0), end=time(9, 0))
    week = ActiveHoursPerWeek.from_days(sunday=zero)
    assert week[Weekday.SUNDAY] == zero
    assert week.restricted_days == [Weekday.SUNDAY]


def test_from_days_skips_none_and_rejects_unknown_names():
    week = ActiveHoursPerWeek.from_days(tuesday=None, wednesday=BUSINESS_HOURS)
    assert week.restricted_days == [Weekday.WEDNESDAY]
    with pytest.raises(KeyError):
        ActiveHoursPerWeek.from_days(funday=BUSINESS_HOURS)


def test_week_snapshot_ignores_later_changes_to_source_dict():
    source = {Weekday.MONDAY: BUSINESS_HOURS}
    week = ActiveHoursPerWeek(source)
    source[Weekday.TUESDAY] = BUSINESS_HOURS
    assert week[Weekday.TUESDAY] is None


def test_week_equality_and_hash_are_structural():
    a = ActiveHoursPerWeek.from_days(monday=BUSINESS_HOURS)
    b = ActiveHoursPerWeek({Weekday.MONDAY: ActiveHours(time(8, 0), time(17, 0))})
    assert a == b
    assert hash(a) == hash(b)
    assert a != ActiveHoursPerWeek()


def test_config_active_hours_today_uses_system_time_weekday():
    week = ActiveHoursPerWeek.from_days(wednesday=BUSINESS_HOURS)
    # 2024-01-03 was a Wednesday
    config = Config(system_time=datetime.fromisoformat("2024-01-03T12:00:00+00:00"), active_hours_per_week=week)
    assert config.active_hours_today() == BUSINESS_HOURS

    thursday = Config(system_time=datetime.fromisoformat("2024-01-04T12:00:00+00:00"), active_hours_per_week=week)
    assert thursday.active_hours_today() is None


def test_config_is_frozen():
    config = Config(system_time=datetime.fromisoformat("2024-01-03T12:00:00+00:00"))
    with pytest.raises(AttributeError):
        config.system_time = datetime.fromisoformat("2024-01-04T12:00:00+00:00")
