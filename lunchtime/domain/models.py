"""
Domain models for the lunch window and work day configuration.
"""

from dataclasses import dataclass, field
from datetime import date, time, timedelta
from typing import Dict, List, Mapping, Set

import pendulum
from pendulum import Duration, WeekDay

from .exceptions import InvalidWindowError

DEFAULT_LUNCH_START = time(13, 0)
DEFAULT_LUNCH_END = time(14, 0)


def time_of_day(value: time) -> timedelta:
    """Offset of a wall-clock time from midnight."""
    return timedelta(
        hours=value.hour,
        minutes=value.minute,
        seconds=value.second,
        microseconds=value.microsecond,
    )


def to_duration(delta: timedelta) -> Duration:
    """Convert a plain timedelta into a pendulum Duration."""
    return pendulum.duration(seconds=delta.total_seconds())


def as_date(value: date) -> date:
    """Reduce a date or datetime to a plain calendar date."""
    return date(value.year, value.month, value.day)


@dataclass(frozen=True)
class LunchWindow:
    """
    The daily recurring lunch break, as two wall-clock times.

    Invariant: start must be before end.
    """
    start: time = DEFAULT_LUNCH_START
    end: time = DEFAULT_LUNCH_END

    def __post_init__(self):
        if self.start >= self.end:
            raise InvalidWindowError(
                f"Lunch start {self.start} must be before lunch end {self.end}"
            )

    @property
    def start_offset(self) -> timedelta:
        return time_of_day(self.start)

    @property
    def end_offset(self) -> timedelta:
        return time_of_day(self.end)

    def length(self) -> timedelta:
        """Return the window length as a plain timedelta."""
        return self.end_offset - self.start_offset

    def duration(self) -> Duration:
        """Return the window length."""
        return to_duration(self.length())

    def __str__(self) -> str:
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"


def _default_flags() -> Dict[WeekDay, bool]:
    return {day: day not in (WeekDay.SATURDAY, WeekDay.SUNDAY) for day in WeekDay}


def _coerce_weekday(day) -> WeekDay:
    if isinstance(day, bool):
        raise ValueError(f"Not a weekday: {day!r}")
    try:
        return WeekDay(day)
    except ValueError:
        raise ValueError(f"Not a weekday: {day!r} (expected 0=Monday .. 6=Sunday)") from None


@dataclass
class WeekdayPolicy:
    """
    Which days of the week count as work days.

    Defaults to Monday-Friday. Keys are ``pendulum.WeekDay`` values; plain
    ints (0=Monday, 6=Sunday) are accepted as well.
    """
    flags: Dict[WeekDay, bool] = field(default_factory=_default_flags)

    def set_workday(self, day: WeekDay | int, is_work_day: bool) -> None:
        """Overwrite the flag of a single weekday."""
        self.flags[_coerce_weekday(day)] = bool(is_work_day)

    def set_workdays(self, days: Mapping[WeekDay | int, bool]) -> None:
        """
        Overwrite several weekday flags at once.

        The whole mapping is validated before any flag changes, so a bad key
        leaves the policy untouched.
        """
        updates = {_coerce_weekday(day): bool(flag) for day, flag in days.items()}
        self.flags.update(updates)

    def is_work_weekday(self, day: WeekDay | int) -> bool:
        return self.flags.get(_coerce_weekday(day), False)

    def work_weekdays(self) -> List[WeekDay]:
        return [day for day in WeekDay if self.flags.get(day, False)]

    def copy(self) -> "WeekdayPolicy":
        return WeekdayPolicy(flags=dict(self.flags))


@dataclass
class CalculatorConfig:
    """
    Everything the overlap calculation depends on.

    ``inclusive_end_minute`` keeps the historical rule that a span starting
    and ending inside the window on the same day counts its end minute.
    """
    window: LunchWindow = field(default_factory=LunchWindow)
    weekdays: WeekdayPolicy = field(default_factory=WeekdayPolicy)
    holidays: List[date] = field(default_factory=list)
    inclusive_end_minute: bool = True

    def holiday_dates(self) -> Set[date]:
        """The holidays as plain dates, for membership tests."""
        return {as_date(holiday) for holiday in self.holidays}

    def is_work_day(self, day: date, holiday_dates: Set[date] | None = None) -> bool:
        """
        A day counts if its weekday is flagged and it is not a holiday.

        Pass ``holiday_dates`` when testing many days against the same holidays.
        """
        if holiday_dates is None:
            holiday_dates = self.holiday_dates()
        if not self.weekdays.is_work_weekday(day.weekday()):
            return False
        return as_date(day) not in holiday_dates

    def copy(self) -> "CalculatorConfig":
        return CalculatorConfig(
            window=self.window,
            weekdays=self.weekdays.copy(),
            holidays=list(self.holidays),
            inclusive_end_minute=self.inclusive_end_minute,
        )
