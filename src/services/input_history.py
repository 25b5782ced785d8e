"""
Input History Module.

Keeps the raw command texts a user has submitted, and hands out pointers
for recalling them with the arrow keys.

This history is independent of the undo/redo ledger: every submission is
recorded, whether or not the command succeeded.
"""

import logging
from typing import List, Optional, Sequence

from src.core.exceptions import HistoryBoundaryError

logger = logging.getLogger(__name__)


class HistoryPointer:
    """
    Bidirectional cursor over a fixed list of history entries.

    A pointer created by ``CommandHistory.snapshot()`` ends with an empty
    placeholder entry and starts positioned on it, i.e. "nothing typed yet".
    """

    def __init__(self, entries: Sequence[str], index: Optional[int] = None) -> None:
        """
        Args:
            entries: The entries to navigate; copied.
            index: Starting position. Defaults to the last entry.
        """
        self._entries: List[str] = list(entries)
        if index is None:
            index = len(self._entries) - 1
        self._index = index

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def has_previous(self) -> bool:
        return self._index - 1 >= 0

    def has_next(self) -> bool:
        return self._index + 1 < len(self._entries)

    def current(self) -> str:
        """
        Returns the entry under the cursor.

        Raises:
            HistoryBoundaryError: If the pointer is empty.
        """
        if not 0 <= self._index < len(self._entries):
            raise HistoryBoundaryError("History pointer is out of range")
        return self._entries[self._index]

    def previous(self) -> str:
        """
        Moves toward the oldest entry.

        Returns:
            str: The entry now under the cursor.

        Raises:
            HistoryBoundaryError: If already at the oldest entry.
        """
        if not self.has_previous():
            raise HistoryBoundaryError("No previous input")
        self._index -= 1
        return self._entries[self._index]

    def next(self) -> str:
        """
        Moves toward the newest entry.

        Returns:
            str: The entry now under the cursor.

        Raises:
            HistoryBoundaryError: If already at the newest entry.
        """
        if not self.has_next():
            raise HistoryBoundaryError("No next input")
        self._index += 1
        return self._entries[self._index]


class CommandHistory:
    """
    Append-only record of submitted command texts, oldest first.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, text: str) -> None:
        """
        Records one submission.

        Args:
            text: The raw text exactly as submitted.
        """
        self._entries.append(text)
        logger.debug(f"History now holds {len(self._entries)} entries")

    def entries(self) -> List[str]:
        """Returns a copy of the entries, oldest first."""
        return list(self._entries)

    def snapshot(self) -> HistoryPointer:
        """
        Creates a fresh pointer positioned after the newest entry.

        Returns:
            HistoryPointer: Pointer over the entries plus a trailing "".
        """
        return HistoryPointer(self._entries + [""])
