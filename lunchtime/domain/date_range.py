"""
Lazy iteration over calendar days.
"""

from datetime import date
from typing import Iterator

import pendulum
from pendulum import Date

from .models import as_date


class DateRange:
    """
    Every calendar day from ``start`` to ``end``, both inclusive.

    Times are discarded. Days are produced lazily and each call to ``iter()``
    starts over, so a range can be walked more than once. A range whose end
    precedes its start is empty.
    """

    def __init__(self, start: date, end: date):
        self.start: Date = self._to_pendulum_date(start)
        self.end: Date = self._to_pendulum_date(end)

    @staticmethod
    def _to_pendulum_date(value: date) -> Date:
        value = as_date(value)
        return pendulum.date(value.year, value.month, value.day)

    def __iter__(self) -> Iterator[Date]:
        # Walk ordinals so the last day of the calendar never steps past itself
        for ordinal in range(self.start.toordinal(), self.end.toordinal() + 1):
            yield self._to_pendulum_date(date.fromordinal(ordinal))

    def __len__(self) -> int:
        return max(self.end.toordinal() - self.start.toordinal() + 1, 0)

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"
