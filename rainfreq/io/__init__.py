"""Input/Output modules for RainFreq."""

from .load_rainfall import load_rainfall, get_durations, get_duration_rain, get_station

__all__ = [
    "load_rainfall",
    "get_durations",
    "get_duration_rain",
    "get_station",
]
