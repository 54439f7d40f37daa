"""
Domain layer - Pure business logic without external dependencies.
"""

from .date_range import DateRange
from .exceptions import InvalidSpanError, InvalidWindowError, LunchTimeError
from .lunch_calculator import LunchOverlapCalculator
from .models import CalculatorConfig, LunchWindow, WeekdayPolicy

__all__ = [
    "CalculatorConfig",
    "DateRange",
    "InvalidSpanError",
    "InvalidWindowError",
    "LunchOverlapCalculator",
    "LunchTimeError",
    "LunchWindow",
    "WeekdayPolicy",
]
