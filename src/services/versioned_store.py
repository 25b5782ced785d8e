"""
Versioned Store Module.

Provides the linear undo/redo ledger of store snapshots.

The ledger owns an ordered list of snapshots and a cursor. Committing
while the cursor is behind the newest snapshot discards everything after
the cursor before appending; there is no redo tree.
"""

import logging
from typing import List

from src.core.exceptions import NoNextStateError, NoPreviousStateError
from src.services.entity_store import StoreSnapshot

logger = logging.getLogger(__name__)


class VersionedStore:
    """
    Cursor-addressed sequence of StoreSnapshot objects.

    The cursor always points at a valid snapshot; the snapshot under the
    cursor is the current visible state.
    """

    def __init__(self, initial: StoreSnapshot) -> None:
        """
        Initializes the ledger with its first snapshot.

        Args:
            initial: The state the session starts from.
        """
        self._states: List[StoreSnapshot] = [initial]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._states)

    @property
    def cursor(self) -> int:
        """Index of the current snapshot."""
        return self._cursor

    def current(self) -> StoreSnapshot:
        """Returns the snapshot under the cursor."""
        return self._states[self._cursor]

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._states) - 1

    def commit(self, snapshot: StoreSnapshot) -> None:
        """
        Records a new current state.

        Snapshots after the cursor are discarded before ``snapshot`` is
        appended, and the cursor moves to it.

        Args:
            snapshot: The state after a successful undoable command.
        """
        discarded = len(self._states) - self._cursor - 1
        del self._states[self._cursor + 1 :]
        self._states.append(snapshot)
        self._cursor = len(self._states) - 1
        logger.debug(
            f"Committed state {self._cursor} (discarded {discarded} redo states)"
        )

    def undo(self) -> StoreSnapshot:
        """
        Moves the cursor one snapshot back.

        Returns:
            StoreSnapshot: The snapshot that is now current.

        Raises:
            NoPreviousStateError: If the cursor is at the first snapshot.
        """
        if not self.can_undo():
            raise NoPreviousStateError("Current state pointer at start of ledger")
        self._cursor -= 1
        logger.debug(f"Undo: cursor now at {self._cursor}")
        return self._states[self._cursor]

    def redo(self) -> StoreSnapshot:
        """
        Moves the cursor one snapshot forward.

        Returns:
            StoreSnapshot: The snapshot that is now current.

        Raises:
            NoNextStateError: If the cursor is at the last snapshot.
        """
        if not self.can_redo():
            raise NoNextStateError("Current state pointer at end of ledger")
        self._cursor += 1
        logger.debug(f"Redo: cursor now at {self._cursor}")
        return self._states[self._cursor]
