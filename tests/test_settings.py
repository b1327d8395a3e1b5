"""Unit tests for settings.py."""

import dataclasses

import pytest

from pomogauge.errors import ConfigError
from pomogauge.settings import Settings


class TestSettings:
    """Test settings construction."""

    def test_defaults(self):
        settings = Settings.from_minutes()
        assert settings.work_duration_ms == 25 * 60_000
        assert settings.short_break_ms == 5 * 60_000
        assert settings.long_break_ms == 20 * 60_000
        assert settings.cycles_per_set == 4
        assert settings.dark_mode is False

    def test_minutes_to_millis(self):
        """Minutes are converted to milliseconds."""
        settings = Settings.from_minutes(work=50, short_break=10, long_break=30, cycles=2)
        assert settings.work_duration_ms == 3_000_000
        assert settings.short_break_ms == 600_000
        assert settings.long_break_ms == 1_800_000
        assert settings.cycles_per_set == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"work": 0},
            {"short_break": -5},
            {"long_break": 0},
            {"cycles": 0},
            {"cycles": -1},
        ],
    )
    def test_rejects_non_positive(self, kwargs):
        """Zero or negative values are configuration errors."""
        with pytest.raises(ConfigError):
            Settings.from_minutes(**kwargs)

    def test_immutable(self):
        settings = Settings.from_minutes()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.work_duration_ms = 1
