"""
Command Parser Service.

Turns raw command text into typed command instances.

Command text has the form ``WORD [PREAMBLE] [prefix/value ...]``. A prefix
is only recognised at the start of the arguments or after whitespace, so
values such as ``d/20/11/2017`` keep their inner slashes.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Type

from src.commands.base_command import BaseCommand
from src.commands.meeting_commands import AddMeetingCommand, DeleteMeetingCommand
from src.commands.person_commands import AddPersonCommand, DeletePersonCommand
from src.commands.session_commands import (
    HistoryCommand,
    ListCommand,
    RedoCommand,
    UndoCommand,
)
from src.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

PREFIX_NAME = "n/"
PREFIX_PHONE = "ph/"
PREFIX_EMAIL = "e/"
PREFIX_DATE = "d/"
PREFIX_TIME = "t/"
PREFIX_LOCATION = "l/"
PREFIX_NOTES = "n/"
PREFIX_PERSON = "p/"

MESSAGE_INVALID_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"

COMMAND_CLASSES: Sequence[Type[BaseCommand]] = (
    AddPersonCommand,
    AddMeetingCommand,
    DeletePersonCommand,
    DeleteMeetingCommand,
    ListCommand,
    HistoryCommand,
    UndoCommand,
    RedoCommand,
)

COMMAND_FORMAT_RE = re.compile(r"^\s*(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)


@dataclass
class ArgumentMultimap:
    """
    Tokenized command arguments.

    Attributes:
        preamble: Text before the first prefix, stripped.
        values: Prefix -> values in order of appearance.
    """

    preamble: str = ""
    values: Dict[str, List[str]] = field(default_factory=dict)

    def get_value(self, prefix: str) -> Optional[str]:
        """Returns the last value given for ``prefix``, or None."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self.values.get(prefix, []))

    def require(self, prefix: str, usage: str) -> str:
        """
        Returns the value for a mandatory prefix.

        Raises:
            InvalidArgumentError: If the prefix is absent.
        """
        value = self.get_value(prefix)
        if value is None:
            raise InvalidArgumentError(MESSAGE_INVALID_FORMAT.format(usage))
        return value


def tokenize(arguments: str, prefixes: Sequence[str]) -> ArgumentMultimap:
    """
    Splits an argument string on the given prefixes.

    Args:
        arguments: Everything after the command word.
        prefixes: Recognised prefixes, e.g. ["d/", "t/"].

    Returns:
        ArgumentMultimap: The preamble and values per prefix.
    """
    if not prefixes:
        return ArgumentMultimap(preamble=arguments.strip())

    alternatives = "|".join(
        re.escape(p) for p in sorted(set(prefixes), key=len, reverse=True)
    )
    prefix_re = re.compile(rf"(?:^|(?<=\s))({alternatives})")
    matches = list(prefix_re.finditer(arguments))

    if not matches:
        return ArgumentMultimap(preamble=arguments.strip())

    result = ArgumentMultimap(preamble=arguments[: matches[0].start()].strip())
    for current, following in zip(matches, matches[1:] + [None]):
        end = following.start() if following else len(arguments)
        value = arguments[current.end() : end].strip()
        result.values.setdefault(current.group(1), []).append(value)
    return result


class CommandParser:
    """
    Maps command words and aliases to command factories.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[str], BaseCommand]] = {}
        for command_class in COMMAND_CLASSES:
            factory = self._factory_for(command_class)
            self._factories[command_class.COMMAND_WORD] = factory
            if command_class.COMMAND_ALIAS:
                self._factories[command_class.COMMAND_ALIAS] = factory

    @staticmethod
    def catalog() -> List[str]:
        """Command words offered as suggestions, in catalog order."""
        return [c.COMMAND_WORD for c in COMMAND_CLASSES]

    @staticmethod
    def templates() -> Dict[str, str]:
        """Command word -> argument template shown beside a suggestion."""
        return {c.COMMAND_WORD: c.MESSAGE_TEMPLATE for c in COMMAND_CLASSES}

    def parse(self, text: str) -> BaseCommand:
        """
        Parses raw command text.

        Args:
            text: The text as typed by the user.

        Returns:
            BaseCommand: A command ready to validate and execute.

        Raises:
            InvalidArgumentError: If the word is unknown or arguments are malformed.
        """
        match = COMMAND_FORMAT_RE.match(text or "")
        if not match:
            raise InvalidArgumentError(MESSAGE_INVALID_FORMAT.format(self._help()))

        word = match.group("word")
        factory = self._factories.get(word)
        if factory is None:
            raise InvalidArgumentError(MESSAGE_UNKNOWN_COMMAND)
        return factory(match.group("arguments"))

    def _help(self) -> str:
        return "\n".join(c.MESSAGE_TEMPLATE for c in COMMAND_CLASSES)

    def _factory_for(self, command_class: Type[BaseCommand]):
        if command_class is AddPersonCommand:
            return self._parse_add_person
        if command_class is AddMeetingCommand:
            return self._parse_add_meeting
        if command_class is DeletePersonCommand:
            return lambda arguments: DeletePersonCommand(
                self._parse_single_id(arguments, DeletePersonCommand.MESSAGE_USAGE)
            )
        if command_class is DeleteMeetingCommand:
            return lambda arguments: DeleteMeetingCommand(
                self._parse_single_id(arguments, DeleteMeetingCommand.MESSAGE_USAGE)
            )
        # Remaining commands take no arguments; trailing text is ignored.
        return lambda arguments: command_class()

    @staticmethod
    def _parse_add_person(arguments: str) -> AddPersonCommand:
        usage = AddPersonCommand.MESSAGE_USAGE
        tokens = tokenize(arguments, [PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL])
        if tokens.preamble:
            raise InvalidArgumentError(MESSAGE_INVALID_FORMAT.format(usage))
        return AddPersonCommand(
            name=tokens.require(PREFIX_NAME, usage),
            phone=tokens.get_value(PREFIX_PHONE) or "",
            email=tokens.get_value(PREFIX_EMAIL) or "",
        )

    @staticmethod
    def _parse_add_meeting(arguments: str) -> AddMeetingCommand:
        usage = AddMeetingCommand.MESSAGE_USAGE
        tokens = tokenize(
            arguments,
            [PREFIX_DATE, PREFIX_TIME, PREFIX_LOCATION, PREFIX_NOTES, PREFIX_PERSON],
        )
        if tokens.preamble:
            raise InvalidArgumentError(MESSAGE_INVALID_FORMAT.format(usage))
        return AddMeetingCommand(
            date=tokens.require(PREFIX_DATE, usage),
            time=tokens.require(PREFIX_TIME, usage),
            location=tokens.require(PREFIX_LOCATION, usage),
            notes=tokens.get_value(PREFIX_NOTES) or "",
            person_ids=tokens.get_all_values(PREFIX_PERSON),
        )

    @staticmethod
    def _parse_single_id(arguments: str, usage: str) -> str:
        value = arguments.strip()
        if not value or len(value.split()) != 1:
            raise InvalidArgumentError(MESSAGE_INVALID_FORMAT.format(usage))
        return value
