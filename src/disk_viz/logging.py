"""Visualizer event log — an audit trail of what the user changed.

Every configuration change, rejected update, redraw and load/save is
recorded as a structured entry, so the front-ends can show what
happened and tests can assert on it without capturing output.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — a bounded buffer with filtering, tailing and clearing.

Levels are an ``IntEnum`` so they compare with ``<``; entries are
frozen dataclasses because a log record should never change after it
is written.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_MAX_ENTRIES = 500


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The part of the visualizer that generated the event
            (``config``, ``scheduler``, ``storage``, ...).

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Bounded log buffer with filtering.

    Redraws log at DEBUG and a front-end may redraw many times per
    second, so only the newest ``max_entries`` records are kept.

    Args:
        min_level: Entries below this level are dropped on arrival.
        max_entries: Oldest entries are discarded beyond this many.

    """

    def __init__(
        self,
        *,
        min_level: LogLevel = LogLevel.DEBUG,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        """Create an empty logger."""
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self._min_level = min_level

    @property
    def entries(self) -> list[LogEntry]:
        """Return all retained log entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log, unless it is below ``min_level``."""
        if level < self._min_level:
            return
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def debug(self, message: str, *, source: str) -> None:
        """Log at DEBUG level."""
        self.log(LogLevel.DEBUG, message, source=source)

    def info(self, message: str, *, source: str) -> None:
        """Log at INFO level."""
        self.log(LogLevel.INFO, message, source=source)

    def warning(self, message: str, *, source: str) -> None:
        """Log at WARNING level."""
        self.log(LogLevel.WARNING, message, source=source)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def tail(self, count: int) -> list[LogEntry]:
        """Return the last ``count`` entries."""
        if count <= 0:
            return []
        return list(self._entries)[-count:]

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
