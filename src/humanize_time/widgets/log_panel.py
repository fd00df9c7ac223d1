"""LogPanel widget - log viewer that prefixes each line with its age."""
from __future__ import annotations

from dataclasses import dataclass

from textual.widgets import RichLog

from ..clock import Clock, SystemClock
from ..local_time import LocalTimeConverter, SystemLocalTime
from ..point import TimePoint
from ..utils.time import Timeval


@dataclass
class LogEntry:
    timestamp: Timeval
    level: str      # "error", "warning", "info", "debug", ...
    message: str


_LEVEL_STYLES: dict[str, str] = {
    "error": "bold red",
    "warning": "bold yellow",
    "info": "bold green",
}


class LogPanel(RichLog):
    """Panel showing log entries as "[3 minutes ago] level: message".

    Default state: shows placeholder text "No log file selected"
    Timestamps are rendered relative to a single "now" read once per refresh,
    so every line of one refresh shares the same reference instant.
    """

    DEFAULT_CSS = """
    LogPanel {
        border-left: solid $accent;
    }
    """

    def __init__(
        self,
        *args,
        precise: bool = False,
        convert_to_local: bool = False,
        clock: Clock | None = None,
        converter: LocalTimeConverter | None = None,
        **kwargs,
    ) -> None:
        kwargs.setdefault("markup", True)
        super().__init__(*args, **kwargs)
        self.precise = precise
        self.convert_to_local = convert_to_local
        self._clock = clock or SystemClock()
        self._converter = converter or SystemLocalTime()

    def on_mount(self) -> None:
        """Show placeholder text when widget is first mounted."""
        self.show_placeholder()

    def _age(self, entry: LogEntry, now: Timeval) -> str:
        point = TimePoint(
            entry.timestamp,
            recent=now,
            convert_to_local=self.convert_to_local,
            converter=self._converter,
        )
        return point.precise_phrase() if self.precise else point.coarse_phrase()

    def _format_entry(self, entry: LogEntry, now: Timeval) -> str:
        """Square brackets around the age are escaped for Rich."""
        age = self._age(entry, now)
        style = _LEVEL_STYLES.get(entry.level)
        if style is None:
            return f"[dim]\\[{age}] {entry.level}: {entry.message}[/dim]"
        return f"[{style}]\\[{age}] {entry.level}:[/{style}] {entry.message}"

    def show_entries(self, entries: list[LogEntry], now: Timeval | None = None) -> None:
        """Clear log and write formatted entries."""
        self.clear()
        if not entries:
            self.write("[dim]No log entries found[/dim]")
            return
        self.append_entries(entries, now)

    def append_entries(self, entries: list[LogEntry], now: Timeval | None = None) -> None:
        """Append new entries without clearing. For live tailing."""
        if now is None:
            now = self._clock.now()
        for entry in entries:
            self.write(self._format_entry(entry, now))

    def show_placeholder(self) -> None:
        """Show placeholder text."""
        self.clear()
        self.write("[dim]No log file selected[/dim]")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.clear()
        self.write(f"[bold red]Error:[/bold red] {message}")
