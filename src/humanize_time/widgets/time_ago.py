"""TimeAgoLabel - Static widget showing a self-refreshing relative timestamp."""
from __future__ import annotations

from textual.timer import Timer
from textual.widgets import Static

from ..point import TimePoint


class TimeAgoLabel(Static):
    """Display a TimePoint as "3 minutes ago", re-rendered on a timer.

    Shows "-" until a point is set. In precise mode the label reads
    " 2 minutes and  5 seconds ago" for the last ten minutes.

    The current display text is always stored in ``_display_text`` for easy
    introspection in tests.
    """

    DEFAULT_CSS = """
    TimeAgoLabel {
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        point: TimePoint | None = None,
        precise: bool = False,
        refresh_interval: float = 1.0,
        **kwargs: object,
    ) -> None:
        """Initialise the label.

        Args:
            point: Instant to describe; None shows a placeholder.
            precise: Use the second-level phrasing.
            refresh_interval: Seconds between re-renders once mounted.
            **kwargs: Forwarded to :class:`textual.widgets.Static`.
        """
        self._point = point
        self._precise = precise
        self._tick_interval = refresh_interval
        self._display_text: str = self._render_point()
        self._tick_timer: Timer | None = None
        super().__init__(self._display_text, **kwargs)

    def on_mount(self) -> None:
        """Start the refresh timer."""
        self._tick_timer = self.set_interval(self._tick_interval, self.refresh_phrase)

    def on_unmount(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def _render_point(self) -> str:
        if self._point is None:
            return "-"
        if self._precise:
            return self._point.precise_phrase()
        return self._point.coarse_phrase()

    def refresh_phrase(self) -> None:
        """Re-render the phrase; only touches the widget when the text changed."""
        text = self._render_point()
        if text == self._display_text:
            return
        self._display_text = text
        self.update(text)

    def set_point(self, point: TimePoint | None) -> None:
        self._point = point
        self.refresh_phrase()

    def set_precise(self, precise: bool) -> None:
        self._precise = precise
        self.refresh_phrase()
