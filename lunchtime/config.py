"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from datetime import date, time
from pathlib import Path
from typing import Dict, List

import yaml
from pendulum import WeekDay
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.lunch_calculator import LunchOverlapCalculator
from .domain.models import (
    DEFAULT_LUNCH_END,
    DEFAULT_LUNCH_START,
    CalculatorConfig,
    LunchWindow,
    WeekdayPolicy,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "lunchtime.yaml"

WEEKDAY_NAMES = [day.name.lower() for day in WeekDay]


class LunchConfig(BaseModel):
    """Daily lunch window."""
    start: time = DEFAULT_LUNCH_START
    end: time = DEFAULT_LUNCH_END

    @model_validator(mode="after")
    def validate_window_order(self) -> "LunchConfig":
        """Ensure the lunch window opens before it closes."""
        if self.end <= self.start:
            raise ValueError("lunch end must be later than lunch start")
        return self

    def to_window(self) -> LunchWindow:
        return LunchWindow(start=self.start, end=self.end)


class AppConfig(BaseModel):
    """Application configuration."""
    lunch: LunchConfig = Field(default_factory=LunchConfig)
    workdays: Dict[str, bool] = Field(default_factory=dict)  # overrides, e.g. {"saturday": true}
    holidays: List[date] = Field(default_factory=list)
    inclusive_end_minute: bool = True

    @field_validator("workdays")
    @classmethod
    def validate_workdays(cls, value: Dict[str, bool]) -> Dict[str, bool]:
        """Ensure weekday keys are valid day names."""
        normalized: Dict[str, bool] = {}
        for name, flag in value.items():
            key = name.strip().lower()
            if key not in WEEKDAY_NAMES:
                raise ValueError(
                    f"Unknown weekday '{name}'. Use one of: {', '.join(WEEKDAY_NAMES)}"
                )
            normalized[key] = flag
        return normalized

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, value: List[date]) -> List[date]:
        """Drop duplicate holidays while preserving order."""
        seen: set[date] = set()
        deduped: List[date] = []
        for day in value:
            if day not in seen:
                deduped.append(day)
                seen.add(day)
        return deduped

    def weekday_policy(self) -> WeekdayPolicy:
        """Default Monday-Friday policy with the configured overrides applied."""
        policy = WeekdayPolicy()
        policy.set_workdays(
            {WeekDay[name.upper()]: flag for name, flag in self.workdays.items()}
        )
        return policy

    def to_calculator_config(self) -> CalculatorConfig:
        return CalculatorConfig(
            window=self.lunch.to_window(),
            weekdays=self.weekday_policy(),
            holidays=list(self.holidays),
            inclusive_end_minute=self.inclusive_end_minute,
        )

    def build_calculator(self) -> LunchOverlapCalculator:
        """Create a calculator configured from this file."""
        return LunchOverlapCalculator(self.to_calculator_config())

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Path | None = None) -> "AppConfig":
        """
        Load an explicitly given file, or the default file if there is one.

        An explicit path that does not exist is an error; a missing default
        file falls back to the built-in defaults.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        logger.debug("No %s found, using built-in defaults", CONFIG_FILE_NAME)
        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for lunchtime.yaml in current directory
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path
