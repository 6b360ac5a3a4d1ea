"""Audit log for identity directories.

A mock directory is mutated by test setup code, often spread across
fixtures and helpers.  When a lookup returns something surprising, the
first question is "who put that there?"  The audit log answers it:

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, table, key).
- **Logger** — an append-only log with filtering and clearing.

A directory writes an INFO entry for every insertion and a WARNING
entry when an insertion replaces an existing record.
"""

from dataclasses import dataclass
from enum import IntEnum


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
        table: The table touched ("users" or "groups").
        key: The uid or gid of the affected record.

    """

    level: LogLevel
    message: str
    table: str
    key: int

    def __str__(self) -> str:
        """Format as ``[LEVEL] table: message``."""
        return f"[{self.level.name}] {self.table}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        table: str,
        key: int,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            table: Table the event concerns.
            key: uid or gid of the affected record.

        """
        self._entries.append(LogEntry(level=level, message=message, table=table, key=key))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        table: str | None = None,
        key: int | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            table: If set, only return entries for this table.
            key: If set, only return entries for this uid or gid.  Combine
                with ``table`` to follow one record, since a uid and a gid
                may share a number.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if table is not None:
            result = [e for e in result if e.table == table]
        if key is not None:
            result = [e for e in result if e.key == key]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
