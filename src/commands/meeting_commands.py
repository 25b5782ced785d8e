"""
Commands for manipulating Meeting objects.
"""

import logging
from datetime import date, time
from typing import Iterable, Optional, Union

from src.commands.base_command import BaseCommand, CommandResult, FailureKind
from src.core.entities import (
    Meeting,
    parse_identifier,
    parse_meeting_date,
    parse_meeting_time,
)
from src.core.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    IllegalReferenceError,
    InvalidArgumentError,
)
from src.services.model_manager import ModelManager

logger = logging.getLogger(__name__)


class AddMeetingCommand(BaseCommand):
    """
    Command to add a new meeting between existing persons.
    """

    COMMAND_WORD = "addMeeting"
    COMMAND_ALIAS = "am"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a meeting to the address book. "
        "Parameters: d/DATE t/TIME l/LOCATION n/NOTES p/PERSON 1 p/PERSON 2 ...\n"
        f"Example: {COMMAND_WORD} d/20/11/2017 t/1800 l/UTown Starbucks "
        "n/Project Meeting p/1"
    )
    MESSAGE_TEMPLATE = f"{COMMAND_WORD} d/DATE t/TIME l/LOCATION n/NOTES p/PERSON ..."
    MESSAGE_SUCCESS = "New meeting added: {}"
    MESSAGE_DUPLICATE_MEETING = "This meeting already exists in the address book"
    MESSAGE_INVALID_ID = "Please input a valid person id!"
    undoable = True

    def __init__(
        self,
        date: Union[str, date],
        time: Union[str, time],
        location: str,
        notes: str = "",
        person_ids: Iterable[Union[str, int]] = (),
    ):
        """
        Initializes the AddMeetingCommand.

        Args:
            date: Meeting date, as a date or text in an accepted format.
            time: Meeting time, as a time or text in an accepted format.
            location: Where the meeting takes place.
            notes: Free-text notes.
            person_ids: One or more participant ids.
        """
        super().__init__()
        self._date = date
        self._time = time
        self._location = location
        self._notes = notes
        self._person_ids = list(person_ids)
        self._meeting: Optional[Meeting] = None

    @property
    def meeting(self) -> Optional[Meeting]:
        """The meeting built by ``validate``, if it succeeded."""
        return self._meeting

    def validate(self) -> None:
        """
        Builds the meeting value from the raw arguments.

        Raises:
            InvalidArgumentError: On a bad date, time or id, a blank location,
                or when no person id is given.
        """
        if not self._person_ids:
            raise InvalidArgumentError(
                f"At least one person id is required.\n{self.MESSAGE_USAGE}"
            )
        if not str(self._location).strip():
            raise InvalidArgumentError(f"Location cannot be blank.\n{self.MESSAGE_USAGE}")

        meeting_date = (
            self._date if isinstance(self._date, date) else parse_meeting_date(self._date)
        )
        meeting_time = (
            self._time if isinstance(self._time, time) else parse_meeting_time(self._time)
        )
        person_ids = tuple(parse_identifier(p, "person id") for p in self._person_ids)

        self._meeting = Meeting(
            date=meeting_date,
            time=meeting_time,
            location=self._location.strip(),
            notes=self._notes.strip(),
            person_ids=person_ids,
        )

    def execute(self, model: ModelManager) -> CommandResult:
        """
        Adds the meeting to the store.

        Args:
            model (ModelManager): The session model to operate on.

        Returns:
            CommandResult: Success with the rendered meeting, or a failure for
            invalid arguments, a duplicate meeting or an unknown person id.
        """
        self._begin()
        try:
            if self._meeting is None:
                self.validate()
        except InvalidArgumentError as e:
            return self._invalid(e)

        try:
            added = model.store.add(self._meeting)
        except DuplicateEntityError:
            logger.warning(f"Duplicate meeting rejected: {self._meeting}")
            return self._failure(
                self.MESSAGE_DUPLICATE_MEETING, FailureKind.DUPLICATE_ENTITY
            )
        except IllegalReferenceError as e:
            logger.warning(f"Meeting references unknown persons: {e}")
            return self._failure(self.MESSAGE_INVALID_ID, FailureKind.ILLEGAL_REFERENCE)

        self._meeting = added
        logger.info(f"Added meeting {added.id}")
        return self._success(self.MESSAGE_SUCCESS.format(added), id=added.id)


class DeleteMeetingCommand(BaseCommand):
    """
    Command to delete a meeting by id.
    """

    COMMAND_WORD = "deleteMeeting"
    COMMAND_ALIAS = "dm"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the meeting identified by its id.\n"
        "Parameters: ID (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_TEMPLATE = f"{COMMAND_WORD} ID"
    MESSAGE_SUCCESS = "Deleted meeting: {}"
    MESSAGE_INVALID_ID = "The meeting id provided is invalid"
    undoable = True

    def __init__(self, meeting_id: Union[str, int]):
        """
        Initializes the DeleteMeetingCommand.

        Args:
            meeting_id: Id of the meeting to delete.
        """
        super().__init__()
        self._raw_id = meeting_id
        self.meeting_id: Optional[int] = None

    def validate(self) -> None:
        self.meeting_id = parse_identifier(self._raw_id, "meeting id")

    def execute(self, model: ModelManager) -> CommandResult:
        """
        Removes the meeting from the store.

        Args:
            model (ModelManager): The session model to operate on.

        Returns:
            CommandResult: Result object indicating success or fail (e.g. not found).
        """
        self._begin()
        try:
            if self.meeting_id is None:
                self.validate()
        except InvalidArgumentError as e:
            return self._invalid(e)

        try:
            removed = model.store.remove(Meeting, self.meeting_id)
        except EntityNotFoundError:
            logger.warning(f"Meeting not found for deletion: {self.meeting_id}")
            return self._failure(self.MESSAGE_INVALID_ID, FailureKind.ENTITY_NOT_FOUND)

        logger.info(f"Deleted meeting: {self.meeting_id}")
        return self._success(self.MESSAGE_SUCCESS.format(removed), id=removed.id)
