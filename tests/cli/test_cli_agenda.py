import json
from unittest.mock import patch

import pytest

from src.app.command_coordinator import CommandCoordinator
from src.cli.agenda import format_result, main as agenda_main, run_lines
from src.commands.base_command import CommandResult, FailureKind

SCRIPT = """addPerson n/Alice Tan
addMeeting d/20/11/2017 t/1800 l/UTown Starbucks n/Project Meeting p/1
addMeeting d/20/11/2017 t/1800 l/UTown Starbucks n/Project Meeting p/1

list
"""


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "commands.txt"
    path.write_text(SCRIPT, encoding="utf-8")
    return path


def test_run_lines_counts_failures(capsys):
    import sys

    failures = run_lines(
        CommandCoordinator(), ["addPerson n/Bob", "bogus", "", "exit", "list"], sys.stdout
    )

    out, _ = capsys.readouterr()
    assert failures == 1
    assert "✓ New person added" in out
    assert "✗ Unknown command" in out
    assert "Persons (" not in out


def test_format_result_json():
    result = CommandResult(
        success=False,
        message="bad",
        failure_kind=FailureKind.INVALID_ARGUMENT,
        is_parse_error=True,
    )

    payload = json.loads(format_result(result, as_json=True))

    assert payload["success"] is False
    assert payload["failure_kind"] == "invalid_argument"
    assert payload["parse_error"] is True


def test_script_mode(script_file, capsys):
    with patch("sys.argv", ["agenda.py", "--script", str(script_file)]):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 0

    out, _ = capsys.readouterr()
    assert "New meeting added" in out
    assert "This meeting already exists in the address book" in out
    assert "Meetings (1):" in out


def test_script_mode_strict_fails(script_file):
    with patch("sys.argv", ["agenda.py", "--script", str(script_file), "--strict"]):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 1


def test_script_mode_json(script_file, capsys):
    with patch("sys.argv", ["agenda.py", "-s", str(script_file), "--json"]):
        with pytest.raises(SystemExit):
            agenda_main()

    out, _ = capsys.readouterr()
    lines = [json.loads(line) for line in out.splitlines()]
    assert [line["success"] for line in lines] == [True, True, False, True]
    assert lines[2]["failure_kind"] == "duplicate_entity"


def test_missing_script(tmp_path):
    with patch("sys.argv", ["agenda.py", "--script", str(tmp_path / "nope.txt")]):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 1


def test_interactive_mode(capsys):
    inputs = iter(["addPerson n/Bob", "undo", "quit"])
    with patch("sys.argv", ["agenda.py"]), patch(
        "builtins.input", side_effect=lambda prompt: next(inputs)
    ):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 0

    out, _ = capsys.readouterr()
    assert "Undo success!" in out


def test_interactive_mode_eof(capsys):
    with patch("sys.argv", ["agenda.py"]), patch(
        "builtins.input", side_effect=EOFError
    ):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 0


def test_interactive_unexpected_error_exits_nonzero():
    with patch("sys.argv", ["agenda.py"]), patch(
        "builtins.input", return_value="list"
    ), patch("src.cli.agenda.CommandCoordinator") as mock_coordinator:
        mock_coordinator.return_value.execute.side_effect = RuntimeError("boom")
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 1


def test_interactive_unexpected_error_reraised_when_verbose():
    with patch("sys.argv", ["agenda.py", "--verbose"]), patch(
        "builtins.input", return_value="list"
    ), patch("src.cli.agenda.CommandCoordinator") as mock_coordinator:
        mock_coordinator.return_value.execute.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            agenda_main()


def test_interactive_mode_ctrl_c_ends_cleanly(capsys):
    inputs = iter(["addPerson n/Bob"])

    def fake_input(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise KeyboardInterrupt

    with patch("sys.argv", ["agenda.py"]), patch("builtins.input", side_effect=fake_input):
        with pytest.raises(SystemExit) as e:
            agenda_main()
        assert e.value.code == 0

    out, _ = capsys.readouterr()
    assert "New person added" in out
