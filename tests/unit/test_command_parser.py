"""
Unit tests for the command parser and argument tokenizer.
"""

from datetime import date

import pytest

from src.commands.meeting_commands import AddMeetingCommand, DeleteMeetingCommand
from src.commands.person_commands import AddPersonCommand
from src.commands.session_commands import ListCommand, UndoCommand
from src.core.exceptions import InvalidArgumentError
from src.services.command_parser import CommandParser, tokenize


@pytest.fixture
def parser():
    return CommandParser()


def test_tokenize_keeps_slashes_inside_values():
    tokens = tokenize(" d/20/11/2017 t/1800 p/1 p/2", ["d/", "t/", "p/"])

    assert tokens.preamble == ""
    assert tokens.get_value("d/") == "20/11/2017"
    assert tokens.get_value("t/") == "1800"
    assert tokens.get_all_values("p/") == ["1", "2"]


def test_tokenize_longer_prefix_not_confused():
    tokens = tokenize(" n/Bob ph/123 p/1", ["n/", "ph/", "p/"])

    assert tokens.get_value("ph/") == "123"
    assert tokens.get_all_values("p/") == ["1"]


def test_tokenize_preamble_and_missing():
    tokens = tokenize(" 5 extra", ["d/"])
    assert tokens.preamble == "5 extra"
    assert tokens.get_value("d/") is None


def test_parse_add_meeting(parser):
    cmd = parser.parse(
        "addMeeting d/20/11/2017 t/1800 l/UTown Starbucks n/Project Meeting p/1"
    )

    assert isinstance(cmd, AddMeetingCommand)
    cmd.validate()
    assert cmd.meeting.date == date(2017, 11, 20)
    assert cmd.meeting.location == "UTown Starbucks"
    assert cmd.meeting.notes == "Project Meeting"
    assert cmd.meeting.person_ids == (1,)


def test_parse_alias(parser):
    assert isinstance(parser.parse("am d/01/01/2020 t/0900 l/Lab p/1"), AddMeetingCommand)
    assert isinstance(parser.parse("u"), UndoCommand)


def test_parse_add_person(parser):
    cmd = parser.parse("addPerson n/John Doe ph/98765432 e/johnd@example.com")
    assert isinstance(cmd, AddPersonCommand)


def test_parse_delete_meeting(parser):
    cmd = parser.parse("deleteMeeting 2")
    assert isinstance(cmd, DeleteMeetingCommand)
    cmd.validate()
    assert cmd.meeting_id == 2


def test_parse_no_argument_command_ignores_trailing_text(parser):
    assert isinstance(parser.parse("list everything"), ListCommand)


@pytest.mark.parametrize(
    "text",
    [
        "addMeeting t/1800 l/Lab p/1",
        "addMeeting preamble d/01/01/2020 t/1800 l/Lab p/1",
        "addPerson ph/123",
        "deleteMeeting",
        "deletePerson 1 2",
    ],
)
def test_parse_invalid_format(parser, text):
    with pytest.raises(InvalidArgumentError) as e:
        parser.parse(text)
    assert "Invalid command format" in str(e.value)


def test_parse_unknown_command(parser):
    with pytest.raises(InvalidArgumentError, match="Unknown command"):
        parser.parse("fly me to the moon")


def test_parse_blank(parser):
    with pytest.raises(InvalidArgumentError):
        parser.parse("   ")


def test_catalog_and_templates(parser):
    catalog = parser.catalog()
    assert catalog[:2] == ["addPerson", "addMeeting"]
    assert "undo" in catalog
    assert parser.templates()["addMeeting"].startswith("addMeeting d/DATE")
