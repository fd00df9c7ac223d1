"""Conversion of log timestamps to local wall-clock seconds."""
from __future__ import annotations

import calendar
import logging
import time
from typing import Protocol

logger = logging.getLogger(__name__)


class LocalTimeConverter(Protocol):
    def to_local(self, seconds: int) -> int: ...


class SystemLocalTime:
    """Shift epoch seconds by the system time zone's UTC offset at that instant.

    The local broken-down time is re-encoded as if it were UTC, so a log
    timestamp written in local time compares directly against the result.
    """

    def to_local(self, seconds: int) -> int:
        try:
            return calendar.timegm(time.localtime(seconds))
        except (OverflowError, OSError, ValueError) as exc:
            logger.warning("Cannot convert %d to local time: %s", seconds, exc)
            return seconds


class FixedOffset:
    """Add a constant offset (seconds east of UTC)."""

    def __init__(self, offset: int) -> None:
        self.offset = offset

    def to_local(self, seconds: int) -> int:
        return seconds + self.offset

    def __repr__(self) -> str:
        return f"FixedOffset({self.offset})"


class NoConversion:
    def to_local(self, seconds: int) -> int:
        return seconds
