"""TimePoint - render a past instant as a "time ago" phrase."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from .clock import Clock, SystemClock
from .local_time import LocalTimeConverter, SystemLocalTime
from .utils.time import Timeval, from_datetime, from_epoch_ms, timeval_sub

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

# Precise phrasing only applies below this many seconds.
PRECISE_LIMIT = 10 * MINUTE


@dataclass(frozen=True)
class TimePoint:
    """A past instant described relative to a reference ("now") instant.

    When ``recent`` is None the clock is read on every render, so repeated
    calls follow real time. ``convert_to_local`` shifts the reference seconds
    through ``converter`` before comparing; ``past`` is never converted.

    Examples (past = 0):
        recent = 45      → coarse "just now",       precise "45 seconds ago"
        recent = 125     → coarse "2 minutes ago",  precise " 2 minutes and  5 seconds ago"
        recent = 90000   → coarse "one day ago",    precise "one day ago"
    """

    past: Timeval
    recent: Timeval | None = None
    convert_to_local: bool = False
    clock: Clock = field(default_factory=SystemClock, compare=False, repr=False)
    converter: LocalTimeConverter = field(
        default_factory=SystemLocalTime, compare=False, repr=False
    )

    @classmethod
    def from_tv(cls, tv: Timeval, **kwargs: object) -> TimePoint:
        return cls(tv, **kwargs)

    @classmethod
    def from_datetime(cls, dt: datetime, **kwargs: object) -> TimePoint:
        return cls(from_datetime(dt), **kwargs)

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int, **kwargs: object) -> TimePoint:
        return cls(from_epoch_ms(epoch_ms), **kwargs)

    def with_recent(self, recent: Timeval | None) -> TimePoint:
        """Return a copy pinned to ``recent`` (None unpins)."""
        return replace(self, recent=recent)

    def with_local(self, convert_to_local: bool = True) -> TimePoint:
        return replace(self, convert_to_local=convert_to_local)

    def _reference(self) -> Timeval:
        now = self.recent if self.recent is not None else self.clock.now()
        if self.convert_to_local:
            now = now._replace(seconds=self.converter.to_local(now.seconds))
        return now

    def coarse_phrase(self) -> str:
        """Bucketed phrase such as "one hour ago" or "over 3 years ago"."""
        delta = self._reference().seconds - self.past.seconds

        if delta < 0:
            return "in the future"
        if delta < MINUTE:
            return "just now"
        if delta < 2 * MINUTE:
            return "one minute ago"
        if delta < HOUR:
            return f"{delta // MINUTE} minutes ago"
        if delta < 2 * HOUR:
            return "one hour ago"
        if delta < DAY:
            return f"{delta // HOUR} hours ago"
        if delta < 2 * DAY:
            return "one day ago"
        if delta < YEAR:
            return f"{delta // DAY} days ago"
        if delta < 2 * YEAR:
            return "over a year ago"
        return f"over {delta // YEAR} years ago"

    def precise_phrase(self) -> str:
        """Second-level phrase for the last ten minutes, coarse otherwise.

        Counts are right-aligned in a two-character field so columns of
        phrases line up: " 5 seconds ago", " 1 minute and  1 second ago".
        """
        diff = timeval_sub(self._reference(), self.past)

        if diff.seconds < 0:
            return self.coarse_phrase()
        if diff.seconds <= 1:
            return "a second ago"
        if diff.seconds < PRECISE_LIMIT:
            if diff.seconds < MINUTE:
                return f"{diff.seconds:2} seconds ago"

            minutes, seconds = divmod(diff.seconds, MINUTE)
            return (
                f"{minutes:2} minute{'s' if minutes > 1 else ''} and "
                f"{seconds:2} second{'' if seconds == 1 else 's'} ago"
            )
        return self.coarse_phrase()

    # Names used by log viewers that render points directly
    as_time_ago = coarse_phrase
    as_precise_time_ago = precise_phrase

    def __str__(self) -> str:
        return self.coarse_phrase()
