"""
Unit tests for person commands.
"""

import pytest

from src.commands.base_command import FailureKind
from src.commands.meeting_commands import AddMeetingCommand
from src.commands.person_commands import AddPersonCommand, DeletePersonCommand
from src.core.exceptions import InvalidArgumentError


def test_add_person_success(model):
    result = AddPersonCommand("Bob Lee", "98765432", "bob@example.com").execute(model)

    assert result.success is True
    assert result.data == {"id": 2}
    assert [p.name for p in model.store.persons] == ["Alice Tan", "Bob Lee"]


def test_add_person_duplicate(model):
    result = AddPersonCommand("alice tan", "91234567", "alice@example.com").execute(
        model
    )

    assert result.success is False
    assert result.message == AddPersonCommand.MESSAGE_DUPLICATE_PERSON
    assert result.failure_kind is FailureKind.DUPLICATE_ENTITY
    assert len(model.store.persons) == 1


@pytest.mark.parametrize(
    "name,phone,email",
    [("", "", ""), ("Bob", "12", ""), ("Bob", "12ab", ""), ("Bob", "", "not-an-email")],
)
def test_add_person_validate_rejects(name, phone, email):
    with pytest.raises(InvalidArgumentError):
        AddPersonCommand(name, phone, email).validate()


def test_delete_person_success(model):
    AddPersonCommand("Bob Lee").execute(model)

    result = DeletePersonCommand("2").execute(model)

    assert result.success is True
    assert [p.id for p in model.store.persons] == [1]


def test_delete_person_not_found(model):
    result = DeletePersonCommand(9).execute(model)

    assert result.success is False
    assert result.failure_kind is FailureKind.ENTITY_NOT_FOUND


def test_delete_person_still_in_meeting(model):
    AddMeetingCommand("20/11/2017", "1800", "Lab", person_ids=[1]).execute(model)

    result = DeletePersonCommand(1).execute(model)

    assert result.success is False
    assert result.message == DeletePersonCommand.MESSAGE_STILL_REFERENCED
    assert result.failure_kind is FailureKind.ILLEGAL_REFERENCE
    assert len(model.store.persons) == 1
