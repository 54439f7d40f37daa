"""
Tests for YAML configuration loading.
"""

from datetime import date, time

import pytest
from pendulum import WeekDay

from lunchtime import config as config_module
from lunchtime.config import AppConfig, LunchConfig


def _write(tmp_path, text):
    path = tmp_path / "lunchtime.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLunchConfig:
    """Tests for the lunch window section."""

    def test_defaults(self):
        lunch = LunchConfig()

        assert lunch.start == time(13, 0)
        assert lunch.end == time(14, 0)

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError, match="later than lunch start"):
            LunchConfig(start=time(14, 0), end=time(13, 0))


class TestAppConfig:
    """Tests for AppConfig."""

    def test_load_full_file(self, tmp_path):
        """Test loading every supported key."""
        path = _write(
            tmp_path,
            'lunch:\n'
            '  start: "12:30"\n'
            '  end: "13:15"\n'
            'workdays:\n'
            '  Saturday: true\n'
            '  friday: false\n'
            'holidays:\n'
            '  - 2018-12-25\n'
            '  - 2018-12-25\n'
            '  - 2018-12-26\n'
            'inclusive_end_minute: false\n',
        )

        config = AppConfig.load_from_yaml(path)

        assert config.lunch.start == time(12, 30)
        assert config.lunch.end == time(13, 15)
        assert config.workdays == {"saturday": True, "friday": False}
        assert config.holidays == [date(2018, 12, 25), date(2018, 12, 26)]
        assert config.inclusive_end_minute is False

    def test_empty_file_gives_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "lunch: [unclosed\n"))

    def test_root_must_be_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="mapping"):
            AppConfig.load_from_yaml(_write(tmp_path, "- 1\n- 2\n"))

    def test_unknown_weekday_rejected(self):
        with pytest.raises(ValueError, match="Unknown weekday"):
            AppConfig(workdays={"funday": True})

    def test_to_calculator_config(self):
        config = AppConfig(
            workdays={"saturday": True},
            holidays=[date(2018, 12, 25)],
        )

        calculator_config = config.to_calculator_config()

        assert calculator_config.weekdays.is_work_weekday(WeekDay.SATURDAY)
        assert calculator_config.weekdays.is_work_weekday(WeekDay.MONDAY)
        assert not calculator_config.weekdays.is_work_weekday(WeekDay.SUNDAY)
        assert calculator_config.holidays == [date(2018, 12, 25)]
        assert calculator_config.inclusive_end_minute is True

    def test_build_calculator_uses_holidays(self):
        config = AppConfig(holidays=[date(2018, 12, 25)])

        calculator = config.build_calculator()

        assert not calculator.is_work_day(date(2018, 12, 25))
        assert calculator.is_work_day(date(2018, 12, 24))


class TestLoadOrDefault:
    """Tests for resolving the configuration file."""

    def test_explicit_missing_path_is_an_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_or_default(tmp_path / "missing.yaml")

    def test_no_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            config_module, "get_default_config_path", lambda: tmp_path / "lunchtime.yaml"
        )

        assert AppConfig.load_or_default() == AppConfig()

    def test_default_file_is_loaded(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "holidays:\n  - 2018-12-25\n")
        monkeypatch.setattr(config_module, "get_default_config_path", lambda: path)

        assert AppConfig.load_or_default().holidays == [date(2018, 12, 25)]

    def test_default_path_prefers_working_directory(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "")
        monkeypatch.chdir(tmp_path)

        assert config_module.get_default_config_path().resolve() == path.resolve()
