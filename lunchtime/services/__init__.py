"""
Services layer - Orchestrates domain logic for callers such as the CLI.
"""

from .lunch_time import LunchTimeService

__all__ = ["LunchTimeService"]
