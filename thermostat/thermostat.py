"""
Thermostat state.

Holds the current temperature and the power saving flag, and exposes the
operations to step, reset and inspect them.
"""
import logging

from .config import (
    DEFAULT_TEMPERATURE,
    MINIMUM_TEMPERATURE,
    MAX_LIMIT_PSM_ON,
    MAX_LIMIT_PSM_OFF,
)
from .temperature_logic import (
    get_max_temperature,
    step_temperature,
    classify_energy_usage,
)

logger = logging.getLogger(__name__)


class Thermostat:
    """A thermostat with a bounded temperature and a power saving mode.

    Starts at DEFAULT_TEMPERATURE with power saving mode on.
    """

    DEFAULT_TEMPERATURE = DEFAULT_TEMPERATURE
    MINIMUM_TEMPERATURE = MINIMUM_TEMPERATURE
    MAX_LIMIT_PSM_ON = MAX_LIMIT_PSM_ON
    MAX_LIMIT_PSM_OFF = MAX_LIMIT_PSM_OFF

    def __init__(self):
        self.temperature = self.DEFAULT_TEMPERATURE
        self.power_saving_mode = True

    def __repr__(self):
        mode = "on" if self.power_saving_mode else "off"
        return f"Thermostat(temperature={self.temperature}, power_saving_mode={mode})"

    def get_current_temperature(self):
        return self.temperature

    def max_temperature(self):
        """Ceiling for the current power saving mode (25 on, 32 off)."""
        return get_max_temperature(self.power_saving_mode)

    def is_maximum_temperature(self):
        # >= so that a value left above the ceiling by a mode switch counts
        return self.temperature >= self.max_temperature()

    def is_minimum_temperature(self):
        return self.temperature == self.MINIMUM_TEMPERATURE

    def up(self):
        """Raise the temperature by 1°C unless already at the maximum."""
        self.temperature = step_temperature(
            self.temperature, 1, self.MINIMUM_TEMPERATURE, self.max_temperature()
        )

    def down(self):
        """Lower the temperature by 1°C unless already at the minimum."""
        self.temperature = step_temperature(
            self.temperature, -1, self.MINIMUM_TEMPERATURE, self.max_temperature()
        )

    def is_power_saving_mode_on(self):
        return self.power_saving_mode

    def switch_power_saving_mode_off(self):
        """Turn power saving mode off. The temperature is left as is."""
        self.power_saving_mode = False
        logger.info(f"Power saving mode OFF (max {self.max_temperature()}°C)")

    def switch_power_saving_mode_on(self):
        """Turn power saving mode on.

        The temperature is not clamped: if it is above the power saving
        ceiling it stays there, and up() cannot raise it further.
        """
        self.power_saving_mode = True
        if self.temperature > self.max_temperature():
            logger.warning(
                f"Power saving mode ON while at {self.temperature}°C, "
                f"above the {self.max_temperature()}°C limit"
            )
        else:
            logger.info(f"Power saving mode ON (max {self.max_temperature()}°C)")

    def reset_temperature(self):
        """Set the temperature back to DEFAULT_TEMPERATURE, whatever the mode."""
        self.temperature = self.DEFAULT_TEMPERATURE
        logger.info(f"Temperature reset to {self.DEFAULT_TEMPERATURE}°C")

    def energy_usage(self):
        """Return "low-usage", "medium-usage" or "high-usage" for the current temperature."""
        return classify_energy_usage(self.temperature)
