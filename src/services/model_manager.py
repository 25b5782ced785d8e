"""
Model Manager Module.

Bundles the session-owned state that commands execute against: the entity
store, the versioned ledger over it, and the input history.
"""

import logging
from typing import Optional

from src.services.entity_store import EntityStore, StoreSnapshot
from src.services.input_history import CommandHistory
from src.services.versioned_store import VersionedStore

logger = logging.getLogger(__name__)


class ModelManager:
    """
    Owns one EntityStore, its VersionedStore ledger and the CommandHistory.

    The ledger is seeded with a snapshot of the store as given, so undo
    can never go further back than the state the session started in.
    """

    def __init__(
        self,
        store: Optional[EntityStore] = None,
        history: Optional[CommandHistory] = None,
    ) -> None:
        """
        Args:
            store: Initial store contents. Defaults to an empty store.
            history: Input history. Defaults to an empty history.
        """
        self.store = store if store is not None else EntityStore()
        self.history = history if history is not None else CommandHistory()
        self.ledger = VersionedStore(self.store.snapshot())

    def commit(self) -> StoreSnapshot:
        """
        Records the current store contents as a new ledger state.

        Returns:
            StoreSnapshot: The committed snapshot.
        """
        snapshot = self.store.snapshot()
        self.ledger.commit(snapshot)
        logger.debug(
            f"Committed {len(snapshot.persons)} persons, "
            f"{len(snapshot.meetings)} meetings at state {self.ledger.cursor}"
        )
        return snapshot

    def undo(self) -> None:
        """
        Restores the previous ledger state into the store.

        Raises:
            NoPreviousStateError: If there is nothing to undo.
        """
        self.store.restore(self.ledger.undo())
        logger.debug(f"Store restored to state {self.ledger.cursor}")

    def redo(self) -> None:
        """
        Restores the next ledger state into the store.

        Raises:
            NoNextStateError: If there is nothing to redo.
        """
        self.store.restore(self.ledger.redo())
        logger.debug(f"Store restored to state {self.ledger.cursor}")
