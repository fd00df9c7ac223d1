"""Absolute timestamps with microsecond resolution."""
from __future__ import annotations

import math
from datetime import datetime
from typing import NamedTuple

USEC_PER_SEC = 1_000_000


class Timeval(NamedTuple):
    """Seconds and microseconds since the epoch.

    ``microseconds`` is kept in ``[0, 1_000_000)``; negative values live in
    ``seconds`` only.
    """

    seconds: int
    microseconds: int = 0


def timeval_sub(a: Timeval, b: Timeval) -> Timeval:
    """Return ``a - b``, borrowing a second when the microseconds underflow."""
    seconds = a.seconds - b.seconds
    microseconds = a.microseconds - b.microseconds
    if microseconds < 0:
        seconds -= 1
        microseconds += USEC_PER_SEC
    return Timeval(seconds, microseconds)


def from_datetime(dt: datetime) -> Timeval:
    """Convert a datetime to a Timeval. Naive datetimes are taken as local time."""
    return Timeval(math.floor(dt.timestamp()), dt.microsecond)


def from_epoch_ms(epoch_ms: int) -> Timeval:
    """Convert epoch milliseconds (e.g. ``updated_at`` fields) to a Timeval."""
    seconds, millis = divmod(epoch_ms, 1000)
    return Timeval(seconds, millis * 1000)


def from_epoch_ns(epoch_ns: int) -> Timeval:
    seconds, nanos = divmod(epoch_ns, 1_000_000_000)
    return Timeval(seconds, nanos // 1000)
