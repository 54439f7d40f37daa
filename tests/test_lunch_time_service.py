"""
Tests for the LunchTimeService orchestration layer.
"""

from datetime import date

import pendulum
import pytest

from lunchtime.domain.exceptions import InvalidSpanError
from lunchtime.domain.lunch_calculator import LunchOverlapCalculator
from lunchtime.services.lunch_time import LunchTimeService


def ts(text: str):
    return pendulum.parse(text).naive()


@pytest.fixture
def service():
    return LunchTimeService(LunchOverlapCalculator())


def test_lunch_time_delegates_to_calculator(service):
    """A single span gives the calculator's answer."""
    result = service.lunch_time(ts("2018-08-10 12:00"), ts("2018-08-10 18:30"))

    assert result.in_minutes() == 60


def test_net_working_time_deducts_lunch(service):
    """09:00-17:30 with a one hour lunch is 7.5 hours of work."""
    result = service.net_working_time(ts("2018-08-10 09:00"), ts("2018-08-10 17:30"))

    assert result.total_seconds() == 7.5 * 3600


def test_net_working_time_on_holiday_keeps_full_span():
    """Nothing is deducted on a holiday."""
    calculator = LunchOverlapCalculator()
    calculator.holidays.append(date(2018, 12, 25))
    service = LunchTimeService(calculator)

    result = service.net_working_time(ts("2018-12-25 09:00"), ts("2018-12-25 17:00"))

    assert result.total_seconds() == 8 * 3600


def test_net_working_time_never_negative(service):
    """The inclusive end minute cannot push net time below zero."""
    result = service.net_working_time(ts("2018-08-10 13:10"), ts("2018-08-10 13:20"))

    assert result.total_seconds() == 0


def test_total_lunch_time_sums_spans(service):
    """A week of time entries."""
    spans = [
        (ts("2018-08-06 09:00"), ts("2018-08-06 17:00")),
        (ts("2018-08-07 09:00"), ts("2018-08-07 13:30")),
        (ts("2018-08-08 13:45"), ts("2018-08-08 18:00")),
        (ts("2018-08-11 09:00"), ts("2018-08-11 17:00")),  # Saturday
    ]

    result = service.total_lunch_time(spans)

    assert result.in_minutes() == 60 + 30 + 15


def test_total_lunch_time_accepts_generator(service):
    """Spans may come from any iterable."""
    start = ts("2018-08-06 12:00")
    spans = ((start.add(days=n), start.add(days=n, hours=3)) for n in range(7))

    assert service.total_lunch_time(spans).in_minutes() == 5 * 60


def test_total_lunch_time_of_nothing(service):
    assert service.total_lunch_time([]).total_seconds() == 0


def test_total_lunch_time_fails_on_invalid_span(service):
    """The first reversed span aborts the sum."""
    spans = [
        (ts("2018-08-06 09:00"), ts("2018-08-06 17:00")),
        (ts("2018-08-07 17:00"), ts("2018-08-07 09:00")),
    ]

    with pytest.raises(InvalidSpanError):
        service.total_lunch_time(spans)
