"""
Commands that inspect the session or move through the undo/redo ledger.

None of these are undoable: they never cause a ledger commit.
"""

import logging

from src.commands.base_command import BaseCommand, CommandResult
from src.core.exceptions import NoNextStateError, NoPreviousStateError
from src.services.model_manager import ModelManager

logger = logging.getLogger(__name__)


class ListCommand(BaseCommand):
    """
    Command to list every person and meeting.
    """

    COMMAND_WORD = "list"
    COMMAND_ALIAS = "ls"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all persons and meetings."
    MESSAGE_TEMPLATE = COMMAND_WORD
    MESSAGE_EMPTY = "The address book is empty."

    def execute(self, model: ModelManager) -> CommandResult:
        self._begin()
        store = model.store
        if len(store) == 0:
            return self._success(self.MESSAGE_EMPTY, persons=0, meetings=0)

        lines = [f"Persons ({len(store.persons)}):"]
        lines += [f"  {person}" for person in store.persons]
        lines.append(f"Meetings ({len(store.meetings)}):")
        lines += [f"  #{meeting.id} {meeting}" for meeting in store.meetings]
        return self._success(
            "\n".join(lines),
            persons=len(store.persons),
            meetings=len(store.meetings),
        )


class HistoryCommand(BaseCommand):
    """
    Command to list previously entered command texts, newest first.
    """

    COMMAND_WORD = "history"
    COMMAND_ALIAS = "h"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists previously entered commands."
    MESSAGE_TEMPLATE = COMMAND_WORD
    MESSAGE_SUCCESS = "Entered commands (from most recent to earliest):\n{}"
    MESSAGE_NO_HISTORY = "You have not yet entered any commands."

    def execute(self, model: ModelManager) -> CommandResult:
        self._begin()
        entries = model.history.entries()
        if not entries:
            return self._success(self.MESSAGE_NO_HISTORY)
        return self._success(
            self.MESSAGE_SUCCESS.format("\n".join(reversed(entries))),
            count=len(entries),
        )


class UndoCommand(BaseCommand):
    """
    Command to restore the state before the last undoable command.

    Reaching the start of the ledger is not an error: the result is
    successful and reports that nothing changed.
    """

    COMMAND_WORD = "undo"
    COMMAND_ALIAS = "u"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Undoes the previous undoable command."
    MESSAGE_TEMPLATE = COMMAND_WORD
    MESSAGE_SUCCESS = "Undo success!"
    MESSAGE_FAILURE = "No more commands to undo!"

    def execute(self, model: ModelManager) -> CommandResult:
        self._begin()
        try:
            model.undo()
        except NoPreviousStateError:
            logger.debug("Undo requested at start of ledger")
            return self._success(self.MESSAGE_FAILURE, changed=False)
        logger.info("Undo applied")
        return self._success(self.MESSAGE_SUCCESS, changed=True)


class RedoCommand(BaseCommand):
    """
    Command to reapply the most recently undone command.
    """

    COMMAND_WORD = "redo"
    COMMAND_ALIAS = "r"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Redoes the previously undone command."
    MESSAGE_TEMPLATE = COMMAND_WORD
    MESSAGE_SUCCESS = "Redo success!"
    MESSAGE_FAILURE = "No more commands to redo!"

    def execute(self, model: ModelManager) -> CommandResult:
        self._begin()
        try:
            model.redo()
        except NoNextStateError:
            logger.debug("Redo requested at end of ledger")
            return self._success(self.MESSAGE_FAILURE, changed=False)
        logger.info("Redo applied")
        return self._success(self.MESSAGE_SUCCESS, changed=True)
