"""Session history log.

Append-only. The log keeps every entry for the session; the bounded
display is a view over it, nothing is ever truncated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_DISPLAY_LIMIT = 5


@dataclass(frozen=True)
class HistoryEntry:
    """One line of user history.

    Attributes:
        sequence: Append order, starting at 1.
        text: Display text, e.g. ``Uploaded: demo``.
    """

    sequence: int
    text: str


@dataclass(frozen=True)
class HistoryLog:
    """Immutable append-only sequence of history entries."""

    entries: tuple[HistoryEntry, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, text: str) -> HistoryLog:
        """Return a new log with one more entry at the end."""
        entry = HistoryEntry(sequence=len(self.entries) + 1, text=text)
        return HistoryLog(entries=self.entries + (entry,))

    def recent(self, limit: int = DEFAULT_DISPLAY_LIMIT) -> tuple[HistoryEntry, ...]:
        """Most recent entries, oldest first.

        Args:
            limit: Maximum number of entries to return.

        Returns:
            Up to ``limit`` trailing entries in append order.
        """
        if limit <= 0:
            return ()
        return self.entries[-limit:]
