"""
Application services built on top of the lunch overlap calculation.

Time tracking usually needs more than a single overlap: worked spans come in
batches, and what gets booked is the span minus its lunch break. The service
keeps that bookkeeping out of the domain calculator and the CLI.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Tuple

import pendulum
from pendulum import Duration

from ..domain.exceptions import InvalidSpanError
from ..domain.lunch_calculator import LunchOverlapCalculator

logger = logging.getLogger(__name__)

Span = Tuple[datetime, datetime]


class LunchTimeService:
    """
    Lunch break bookkeeping for one or more spans.
    """

    def __init__(self, calculator: LunchOverlapCalculator) -> None:
        self._calculator = calculator

    def lunch_time(self, start: datetime, end: datetime) -> Duration:
        """Lunch time inside a single span."""
        return self._calculator.compute_overlap(start, end)

    def net_working_time(self, start: datetime, end: datetime) -> Duration:
        """
        Length of the span with its lunch time taken out.

        Never negative, even where the inclusive end minute makes lunch
        slightly longer than a very short span.
        """
        lunch_seconds = self.lunch_time(start, end).total_seconds()
        span_seconds = (end - start).total_seconds()
        return pendulum.duration(seconds=max(span_seconds - lunch_seconds, 0.0))

    def total_lunch_time(self, spans: Iterable[Span]) -> Duration:
        """
        Sum of the lunch time of every span.

        Raises:
            InvalidSpanError: On the first span whose end precedes its start
        """
        total_seconds = 0.0
        count = 0
        for index, (start, end) in enumerate(spans):
            try:
                total_seconds += self._calculator.compute_overlap(start, end).total_seconds()
            except InvalidSpanError:
                logger.warning("Invalid span at position %d: %s -> %s", index, start, end)
                raise
            count += 1

        logger.debug("Summed lunch time over %d span(s): %.0fs", count, total_seconds)
        return pendulum.duration(seconds=total_seconds)
