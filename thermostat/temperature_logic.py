"""
Thermostat Logic.

Contains the rules for:
- Picking the maximum temperature for the power saving mode
- Stepping the temperature without leaving its limits
- Classifying energy usage from the temperature
"""
import logging

from .config import (
    MAX_LIMIT_PSM_ON,
    MAX_LIMIT_PSM_OFF,
    LOW_USAGE_LIMIT,
    MEDIUM_USAGE_LIMIT,
    LOW_USAGE,
    MEDIUM_USAGE,
    HIGH_USAGE,
)

logger = logging.getLogger(__name__)


def get_max_temperature(power_saving_mode):
    """Return the temperature ceiling for the given power saving mode."""
    return MAX_LIMIT_PSM_ON if power_saving_mode else MAX_LIMIT_PSM_OFF


def step_temperature(temperature, delta, minimum, maximum):
    """Move the temperature by delta, saturating at the limits.

    A step that would go past a limit leaves the temperature unchanged.
    So does any upward step from a value already at or above the maximum,
    which happens after power saving mode is switched on above its ceiling.

    Args:
        temperature: Current temperature in °C
        delta: Signed step in °C
        minimum: Lowest allowed temperature
        maximum: Highest allowed temperature

    Returns:
        int: the new temperature
    """
    target = temperature + delta

    if delta > 0 and target > maximum:
        logger.debug(f"Already at maximum {maximum}°C, staying at {temperature}°C")
        return temperature
    if delta < 0 and target < minimum:
        logger.debug(f"Already at minimum {minimum}°C, staying at {temperature}°C")
        return temperature
    return target


def classify_energy_usage(temperature):
    """Classify energy usage from the current temperature.

    - below LOW_USAGE_LIMIT (18°C) → "low-usage"
    - LOW_USAGE_LIMIT..MEDIUM_USAGE_LIMIT (18-25°C) inclusive → "medium-usage"
    - above MEDIUM_USAGE_LIMIT → "high-usage"

    Power saving mode plays no part in the classification.
    """
    if temperature < LOW_USAGE_LIMIT:
        return LOW_USAGE
    if temperature <= MEDIUM_USAGE_LIMIT:
        return MEDIUM_USAGE
    return HIGH_USAGE
