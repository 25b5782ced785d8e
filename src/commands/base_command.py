"""
Base Command Module.

Defines the abstract base class and result type for all commands in the application.

Classes:
    FailureKind: Typed categories of command failure.
    CommandResult: Standardized result object for command execution.
    BaseCommand: Abstract base class implementing the validate/execute contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from src.core.exceptions import InvalidArgumentError
from src.services.model_manager import ModelManager


class FailureKind(Enum):
    """Why a command failed."""

    INVALID_ARGUMENT = "invalid_argument"
    DUPLICATE_ENTITY = "duplicate_entity"
    ILLEGAL_REFERENCE = "illegal_reference"
    ENTITY_NOT_FOUND = "entity_not_found"
    EXECUTION = "execution"


@dataclass
class CommandResult:
    """
    Standardized result object for command execution.

    Attributes:
        success (bool): True if the command executed successfully,
                        False otherwise.
        message (str): A human-readable message describing the result.
        errors (Dict[str, str]): A dictionary of validation errors
                                 (field -> error content).
        command_name (str): The name of the command that generated
                            this result.
        data (Dict[str, Any]): Optional payload, e.g. the id of a created entity.
        failure_kind (FailureKind, optional): Category of failure, None on success.
        is_parse_error (bool): True when the failure happened while parsing or
                               validating arguments rather than executing.
    """

    success: bool
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    command_name: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    failure_kind: Optional[FailureKind] = None
    is_parse_error: bool = False

    @classmethod
    def invalid(cls, message: str, command_name: str = "") -> "CommandResult":
        """
        Builds the result for a parse or validation failure.

        Args:
            message: User-facing explanation, usually including usage.
            command_name: The command being parsed, if known.
        """
        return cls(
            success=False,
            message=message,
            command_name=command_name,
            failure_kind=FailureKind.INVALID_ARGUMENT,
            is_parse_error=True,
        )


class BaseCommand(ABC):
    """
    Abstract base class for all user actions.

    Subclasses declare ``COMMAND_WORD``, ``COMMAND_ALIAS`` and
    ``MESSAGE_USAGE`` and implement ``execute``. Commands whose success
    changes the store set ``undoable = True``; the caller then commits a
    ledger snapshot. A command never commits by itself.

    An instance executes exactly once.
    """

    COMMAND_WORD = ""
    COMMAND_ALIAS = ""
    MESSAGE_USAGE = ""
    undoable = False

    def __init__(self):
        """
        Initializes the command.
        """
        self._is_executed = False

    def validate(self) -> None:
        """
        Checks the command's arguments before execution.

        Raises:
            InvalidArgumentError: If an argument is malformed or missing.
        """

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """
        Performs the action.

        Args:
            model (ModelManager): The session model to operate on.

        Returns:
            CommandResult: Result object describing success or failure.
        """
        pass

    @property
    def is_executed(self) -> bool:
        """
        Checks if the command has been executed.

        Returns:
            bool: True if the command has been executed, False otherwise.
        """
        return self._is_executed

    def _begin(self) -> None:
        """
        Marks the command as executed.

        Raises:
            RuntimeError: If this instance already executed.
        """
        if self._is_executed:
            raise RuntimeError(f"{type(self).__name__} instance already executed")
        self._is_executed = True

    def _success(self, message: str, **data) -> CommandResult:
        return CommandResult(
            success=True,
            message=message,
            command_name=type(self).__name__,
            data=data,
        )

    def _failure(
        self, message: str, kind: FailureKind = FailureKind.EXECUTION
    ) -> CommandResult:
        return CommandResult(
            success=False,
            message=message,
            command_name=type(self).__name__,
            failure_kind=kind,
            is_parse_error=kind is FailureKind.INVALID_ARGUMENT,
        )

    def _invalid(self, error: InvalidArgumentError) -> CommandResult:
        return CommandResult.invalid(str(error), command_name=type(self).__name__)
