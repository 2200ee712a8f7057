"""
Configuration for the Thermostat.

Temperature limits and energy usage thresholds are fixed constants.
Only the logging level is read from environment variables (.env file).
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def parse_log_level(value):
    """Translate a level name like "debug" or "INFO" into a logging level.

    Args:
        value: Level name from the environment

    Returns:
        int: logging level constant

    Raises:
        ValueError: if the name is not a standard logging level
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
    return level


# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

# =============================================================================
# Temperature Limits (°C)
# =============================================================================
DEFAULT_TEMPERATURE = 20
MINIMUM_TEMPERATURE = 10
MAX_LIMIT_PSM_ON = 25  # Ceiling while power saving mode is on
MAX_LIMIT_PSM_OFF = 32  # Ceiling while power saving mode is off

# =============================================================================
# Energy Usage Classification
# =============================================================================
LOW_USAGE_LIMIT = 18  # Below this: low usage
MEDIUM_USAGE_LIMIT = 25  # Up to and including this: medium usage

LOW_USAGE = "low-usage"
MEDIUM_USAGE = "medium-usage"
HIGH_USAGE = "high-usage"
