"""Clock abstraction for an injectable "now"."""
from __future__ import annotations

import time
from typing import Protocol

from .utils.time import Timeval, from_epoch_ns


class Clock(Protocol):
    def now(self) -> Timeval: ...


class SystemClock:
    """Default wall-clock implementation."""

    def now(self) -> Timeval:
        return from_epoch_ns(time.time_ns())


class FixedClock:
    """Clock pinned to a single instant. Handy for tests and replays."""

    def __init__(self, instant: Timeval) -> None:
        self.instant = instant

    def now(self) -> Timeval:
        return self.instant

    def __repr__(self) -> str:
        return f"FixedClock({self.instant!r})"
