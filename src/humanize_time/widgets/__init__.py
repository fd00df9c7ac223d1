from .log_panel import LogEntry, LogPanel
from .time_ago import TimeAgoLabel

__all__ = ["LogEntry", "LogPanel", "TimeAgoLabel"]
