"""
Thermostat package.
"""
from .config import *
from .temperature_logic import *
from .thermostat import Thermostat
