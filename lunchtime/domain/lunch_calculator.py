"""
Core business logic for measuring lunch time inside a span.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no database, no I/O).
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Mapping, Set

from pendulum import Duration, WeekDay

from .date_range import DateRange
from .exceptions import InvalidSpanError
from .models import (
    CalculatorConfig,
    LunchWindow,
    time_of_day,
    to_duration,
)

logger = logging.getLogger(__name__)

ONE_MINUTE = timedelta(minutes=1)


class LunchOverlapCalculator:
    """
    Calculates how much of a span overlaps the daily lunch window.

    Algorithm:
    1. First day: clip the window to the part of the span on that day
    2. Middle days: every work day strictly between first and last day
       contributes one full window
    3. Last day: clip the window to the part of the span up to ``end``
       (only when the span ends on a later day than it starts)

    Weekends and holidays contribute nothing.
    """

    def __init__(self, config: CalculatorConfig | None = None):
        self._config = config.copy() if config is not None else CalculatorConfig()

    # -- configuration -----------------------------------------------------

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def window(self) -> LunchWindow:
        return self._config.window

    @window.setter
    def window(self, window: LunchWindow) -> None:
        self._config.window = window

    def set_window(self, start: time, end: time) -> None:
        """Replace the lunch window; start must be before end."""
        self._config.window = LunchWindow(start=start, end=end)

    @property
    def holidays(self) -> List[date]:
        """
        Dates that never count, whatever their weekday.

        Append to this list directly; times on datetimes are ignored.
        """
        return self._config.holidays

    def set_workday(self, day: WeekDay | int, is_work_day: bool) -> None:
        """Set whether a single day of the week counts as a work day."""
        self._config.weekdays.set_workday(day, is_work_day)

    def set_workdays(self, days: Mapping[WeekDay | int, bool]) -> None:
        """Same as ``set_workday`` for several days at once."""
        self._config.weekdays.set_workdays(days)

    def is_work_day(self, day: date) -> bool:
        return self._config.is_work_day(day)

    # -- calculation -------------------------------------------------------

    def compute_overlap(self, start: datetime, end: datetime) -> Duration:
        """
        Return the time between ``start`` and ``end`` spent on lunch breaks.

        Only the wall-clock date and time of both timestamps are used.

        Raises:
            InvalidSpanError: If ``end`` precedes ``start``
        """
        if end < start:
            raise InvalidSpanError(f"Span end {end} precedes span start {start}")

        if end == start:
            return to_duration(timedelta())

        holiday_dates = self._config.holiday_dates()

        first = self._first_day(start, end, holiday_dates)
        middle = self._middle_days(start, end, holiday_dates)
        last = timedelta()
        if end.date() > start.date():
            last = self._last_day(end, holiday_dates)

        logger.debug(
            "Lunch overlap %s -> %s: first=%s middle=%s last=%s",
            start, end, first, middle, last,
        )
        return to_duration(first + middle + last)

    def _is_work_day(self, day: date, holiday_dates: Set[date]) -> bool:
        return self._config.is_work_day(day, holiday_dates)

    def _first_day(
        self,
        start: datetime,
        end: datetime,
        holiday_dates: Set[date],
    ) -> timedelta:
        lunch_start = self.window.start_offset
        lunch_end = self.window.end_offset
        start_tod = time_of_day(start.time())
        end_tod = time_of_day(end.time())
        same_day = end.date() == start.date()

        # Span misses lunch on the first day entirely
        if (
            not self._is_work_day(start.date(), holiday_dates)
            or start_tod > lunch_end
            or (same_day and end_tod < lunch_start)
        ):
            return timedelta()

        starts_before_lunch = start_tod < lunch_start
        ends_after_lunch = not same_day or end_tod > lunch_end

        if starts_before_lunch and ends_after_lunch:
            return self.window.length()

        if starts_before_lunch:
            return end_tod - lunch_start

        if ends_after_lunch:
            return lunch_end - start_tod

        # Starts and ends inside the window on the same day
        if self._config.inclusive_end_minute:
            return end_tod + ONE_MINUTE - start_tod
        return end_tod - start_tod

    def _last_day(self, end: datetime, holiday_dates: Set[date]) -> timedelta:
        end_tod = time_of_day(end.time())

        if not self._is_work_day(end.date(), holiday_dates) or end_tod < self.window.start_offset:
            return timedelta()

        if end_tod > self.window.end_offset:
            return self.window.length()

        return end_tod - self.window.start_offset

    def _middle_days(
        self,
        start: datetime,
        end: datetime,
        holiday_dates: Set[date],
    ) -> timedelta:
        # No day strictly between the first and the last
        if end.date().toordinal() - start.date().toordinal() < 2:
            return timedelta()

        second_day = start.date() + timedelta(days=1)
        second_to_last_day = end.date() - timedelta(days=1)

        working_days = sum(
            1 for day in DateRange(second_day, second_to_last_day)
            if self._is_work_day(day, holiday_dates)
        )
        return self.window.length() * working_days
