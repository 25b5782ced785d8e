"""
Commands for manipulating Person objects.
"""

import logging
import re
from typing import Optional, Union

from src.commands.base_command import BaseCommand, CommandResult, FailureKind
from src.core.entities import Person, parse_identifier
from src.core.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    IllegalReferenceError,
    InvalidArgumentError,
)
from src.services.model_manager import ModelManager

logger = logging.getLogger(__name__)

PHONE_RE = re.compile(r"^\d{3,}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


class AddPersonCommand(BaseCommand):
    """
    Command to add a new person.
    """

    COMMAND_WORD = "addPerson"
    COMMAND_ALIAS = "ap"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Parameters: n/NAME [ph/PHONE] [e/EMAIL]\n"
        f"Example: {COMMAND_WORD} n/John Doe ph/98765432 e/johnd@example.com"
    )
    MESSAGE_TEMPLATE = f"{COMMAND_WORD} n/NAME ph/PHONE e/EMAIL"
    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
    undoable = True

    def __init__(self, name: str, phone: str = "", email: str = ""):
        """
        Initializes the AddPersonCommand.

        Args:
            name: The person's name.
            phone: Optional phone number, digits only.
            email: Optional email address.
        """
        super().__init__()
        self._person = Person(name=name.strip(), phone=phone.strip(), email=email.strip())

    def validate(self) -> None:
        """
        Raises:
            InvalidArgumentError: On a blank name or a malformed phone/email.
        """
        if not self._person.name:
            raise InvalidArgumentError(f"Name cannot be blank.\n{self.MESSAGE_USAGE}")
        if self._person.phone and not PHONE_RE.match(self._person.phone):
            raise InvalidArgumentError(
                "Phone numbers can only contain digits, and should be at least 3 digits long"
            )
        if self._person.email and not EMAIL_RE.match(self._person.email):
            raise InvalidArgumentError("Emails should be of the format local-part@domain")

    def execute(self, model: ModelManager) -> CommandResult:
        """
        Adds the person to the store.

        Args:
            model (ModelManager): The session model to operate on.

        Returns:
            CommandResult: Result object indicating success or failure.
        """
        self._begin()
        try:
            self.validate()
            added = model.store.add(self._person)
        except InvalidArgumentError as e:
            return self._invalid(e)
        except DuplicateEntityError:
            logger.warning(f"Duplicate person rejected: {self._person.name}")
            return self._failure(
                self.MESSAGE_DUPLICATE_PERSON, FailureKind.DUPLICATE_ENTITY
            )

        self._person = added
        logger.info(f"Added person: {added.name} ({added.id})")
        return self._success(self.MESSAGE_SUCCESS.format(added), id=added.id)


class DeletePersonCommand(BaseCommand):
    """
    Command to delete a person who no meeting references.
    """

    COMMAND_WORD = "deletePerson"
    COMMAND_ALIAS = "dp"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the person identified by their id.\n"
        "Parameters: ID (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_TEMPLATE = f"{COMMAND_WORD} ID"
    MESSAGE_SUCCESS = "Deleted person: {}"
    MESSAGE_INVALID_ID = "The person id provided is invalid"
    MESSAGE_STILL_REFERENCED = "This person still takes part in a meeting"
    undoable = True

    def __init__(self, person_id: Union[str, int]):
        """
        Initializes the DeletePersonCommand.

        Args:
            person_id: Id of the person to delete.
        """
        super().__init__()
        self._raw_id = person_id
        self.person_id: Optional[int] = None

    def validate(self) -> None:
        self.person_id = parse_identifier(self._raw_id, "person id")

    def execute(self, model: ModelManager) -> CommandResult:
        """
        Removes the person from the store.

        Args:
            model (ModelManager): The session model to operate on.

        Returns:
            CommandResult: Failure if the id is unknown or still referenced.
        """
        self._begin()
        try:
            if self.person_id is None:
                self.validate()
            removed = model.store.remove(Person, self.person_id)
        except InvalidArgumentError as e:
            return self._invalid(e)
        except EntityNotFoundError:
            logger.warning(f"Person not found for deletion: {self.person_id}")
            return self._failure(self.MESSAGE_INVALID_ID, FailureKind.ENTITY_NOT_FOUND)
        except IllegalReferenceError as e:
            logger.warning(f"Refusing to delete referenced person: {e}")
            return self._failure(
                self.MESSAGE_STILL_REFERENCED, FailureKind.ILLEGAL_REFERENCE
            )

        logger.info(f"Deleted person: {self.person_id}")
        return self._success(self.MESSAGE_SUCCESS.format(removed), id=removed.id)
