"""
Unit tests for the thermostat logic functions.
Run with: pytest tests/ -v
"""

import logging

import pytest

from thermostat.temperature_logic import (
    get_max_temperature,
    step_temperature,
    classify_energy_usage,
)
from thermostat.config import (
    MAX_LIMIT_PSM_ON,
    MAX_LIMIT_PSM_OFF,
    LOW_USAGE,
    MEDIUM_USAGE,
    HIGH_USAGE,
    parse_log_level,
)


class TestMaxTemperature:
    """Test the mode-dependent ceiling."""

    def test_power_saving_on(self):
        assert get_max_temperature(True) == MAX_LIMIT_PSM_ON == 25

    def test_power_saving_off(self):
        assert get_max_temperature(False) == MAX_LIMIT_PSM_OFF == 32


class TestStepTemperature:
    """Test saturating steps."""

    def test_step_up(self):
        assert step_temperature(20, 1, 10, 25) == 21

    def test_step_down(self):
        assert step_temperature(20, -1, 10, 25) == 19

    def test_step_up_to_maximum(self):
        assert step_temperature(24, 1, 10, 25) == 25

    def test_step_up_at_maximum(self):
        """Test that stepping up at the ceiling is a no-op."""
        assert step_temperature(25, 1, 10, 25) == 25

    def test_step_down_at_minimum(self):
        """Test that stepping down at the floor is a no-op."""
        assert step_temperature(10, -1, 10, 25) == 10

    def test_step_up_above_maximum(self):
        """Test that a value already above the ceiling is not raised."""
        assert step_temperature(30, 1, 10, 25) == 30

    def test_step_down_above_maximum(self):
        """Test that a value above the ceiling can still be lowered."""
        assert step_temperature(30, -1, 10, 25) == 29

    def test_saturation_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="thermostat.temperature_logic"):
            step_temperature(25, 1, 10, 25)
        assert "Already at maximum 25°C" in caplog.text


class TestEnergyUsageClassification:
    """Test energy usage boundaries."""

    @pytest.mark.parametrize(
        "temperature, expected",
        [
            (10, LOW_USAGE),
            (17, LOW_USAGE),
            (18, MEDIUM_USAGE),
            (20, MEDIUM_USAGE),
            (25, MEDIUM_USAGE),
            (26, HIGH_USAGE),
            (32, HIGH_USAGE),
        ],
    )
    def test_boundaries(self, temperature, expected):
        assert classify_energy_usage(temperature) == expected

    def test_labels(self):
        assert (LOW_USAGE, MEDIUM_USAGE, HIGH_USAGE) == (
            "low-usage",
            "medium-usage",
            "high-usage",
        )


class TestLogLevelConfig:
    """Test parsing LOG_LEVEL."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" Warning ", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_valid_levels(self, value, expected):
        assert parse_log_level(value) == expected

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            parse_log_level("loud")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
