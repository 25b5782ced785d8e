"""
Command Coordinator.

Single entry point the front-ends use to run command text: parsing,
execution, ledger commits and input history, plus the suggestion overlay
the command box drives on every keystroke.
"""

import logging
from typing import Optional

from src.commands.base_command import CommandResult
from src.core.exceptions import InvalidArgumentError
from src.services.command_parser import CommandParser
from src.services.input_history import HistoryPointer
from src.services.model_manager import ModelManager
from src.services.suggestion_overlay import Direction, SuggestionOverlay

logger = logging.getLogger(__name__)


class CommandCoordinator:
    """
    Coordinates command execution for one session.

    Manages:
    - Parsing and validating raw command text
    - Executing commands against the session model
    - Committing a ledger snapshot after successful undoable commands
    - Recording every submission in the input history
    - The suggestion overlay state

    Attributes:
        model: The session's ModelManager.
        parser: Parser mapping text to commands.
        suggestions: Overlay state over the command-word catalog.
    """

    def __init__(
        self,
        model: Optional[ModelManager] = None,
        parser: Optional[CommandParser] = None,
    ):
        """
        Initialize the command coordinator.

        Args:
            model: Session model. A fresh empty one is created if omitted.
            parser: Command parser. The default catalog is used if omitted.
        """
        self.model = model if model is not None else ModelManager()
        self.parser = parser if parser is not None else CommandParser()
        self.suggestions = SuggestionOverlay(self.parser.catalog())
        logger.debug("CommandCoordinator initialized")

    def execute(self, raw_text: str) -> CommandResult:
        """
        Parses and runs one command.

        The text is appended to the input history whatever the outcome.

        Args:
            raw_text: The command text as submitted.

        Returns:
            CommandResult: Success message, or failure message with
            ``is_parse_error`` telling parse from execution failures.
        """
        try:
            result = self._run(raw_text)
        finally:
            self.model.history.add(raw_text)

        if result.success:
            logger.info(f"Command succeeded: {result.command_name}")
        elif result.is_parse_error:
            logger.info(f"Invalid command: {raw_text}")
        else:
            logger.warning(f"Command failed: {result.message}")
        return result

    def _run(self, raw_text: str) -> CommandResult:
        try:
            command = self.parser.parse(raw_text)
        except InvalidArgumentError as e:
            return CommandResult.invalid(str(e))

        try:
            command.validate()
        except InvalidArgumentError as e:
            return CommandResult.invalid(str(e), command_name=type(command).__name__)

        logger.debug(f"Executing command: {command.__class__.__name__}")
        result = command.execute(self.model)
        if result.success and command.undoable:
            self.model.commit()
        return result

    def get_history_snapshot(self) -> HistoryPointer:
        """
        Returns a fresh history pointer positioned after the newest entry.
        """
        return self.model.history.snapshot()

    # --------------------------------------------------------------------------
    # Suggestion overlay
    # --------------------------------------------------------------------------

    def update_candidates(self, current_text: str) -> bool:
        """
        Recomputes suggestions for the current input.

        Returns:
            bool: Whether the suggestion overlay is visible.
        """
        return self.suggestions.update_candidates(current_text)

    def move_highlight(self, direction: Direction) -> Optional[str]:
        return self.suggestions.move_highlight(direction)

    def accept_highlighted(self) -> Optional[str]:
        return self.suggestions.accept_highlighted()

    def dismiss_suggestions(self) -> None:
        self.suggestions.dismiss()
