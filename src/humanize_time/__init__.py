"""Human-readable "time ago" phrases for log timestamps."""
from .clock import Clock, FixedClock, SystemClock
from .local_time import FixedOffset, LocalTimeConverter, NoConversion, SystemLocalTime
from .point import TimePoint
from .utils.time import Timeval

__all__ = [
    "Clock",
    "FixedClock",
    "FixedOffset",
    "LocalTimeConverter",
    "NoConversion",
    "SystemClock",
    "SystemLocalTime",
    "TimePoint",
    "Timeval",
]
