"""
Unit tests for the SuggestionOverlay state machine.
"""

import pytest

from src.services.suggestion_overlay import Direction, SuggestionOverlay


@pytest.fixture
def overlay():
    return SuggestionOverlay(["addMeeting", "addPerson", "deleteMeeting", "list"])


def test_starts_hidden(overlay):
    assert not overlay.visible
    assert overlay.candidates == []
    assert not overlay.owns_arrow_keys


def test_prefix_shows_all_matches(overlay):
    assert overlay.update_candidates("add") is True
    assert overlay.candidates == ["addMeeting", "addPerson"]
    assert overlay.highlighted is None


def test_narrowing_and_accept(overlay):
    overlay.update_candidates("add")
    overlay.update_candidates("addM")
    assert overlay.candidates == ["addMeeting"]

    overlay.move_highlight(Direction.DOWN)
    assert overlay.accept_highlighted() == "addMeeting"
    assert not overlay.visible


def test_accepted_text_echo_stays_hidden(overlay):
    overlay.update_candidates("addM")
    overlay.move_highlight(Direction.DOWN)
    accepted = overlay.accept_highlighted()

    assert overlay.update_candidates(accepted) is False
    assert not overlay.visible
    # Only the echo is suppressed; later edits are matched again.
    assert overlay.update_candidates("addMe") is True


def test_case_insensitive_prefix_then_substring(overlay):
    overlay.update_candidates("MEETING")
    assert overlay.candidates == ["addMeeting", "deleteMeeting"]
    overlay.update_candidates("d")
    assert overlay.candidates[:2] == ["deleteMeeting", "addMeeting"]


def test_no_candidates_hides(overlay):
    overlay.update_candidates("add")
    assert overlay.update_candidates("zzz") is False
    assert not overlay.visible


def test_empty_text_hides(overlay):
    overlay.update_candidates("add")
    assert overlay.update_candidates("   ") is False
    assert not overlay.visible


def test_trailing_space_after_word_hides(overlay):
    assert overlay.update_candidates("addMeeting ") is False


def test_highlight_clamped_without_wraparound(overlay):
    overlay.update_candidates("add")
    assert overlay.move_highlight(Direction.DOWN) == "addMeeting"
    assert overlay.move_highlight(Direction.DOWN) == "addPerson"
    assert overlay.move_highlight(Direction.DOWN) == "addPerson"
    assert overlay.move_highlight(Direction.UP) == "addMeeting"
    assert overlay.move_highlight(Direction.UP) == "addMeeting"


def test_up_without_highlight_does_nothing(overlay):
    overlay.update_candidates("add")
    assert overlay.move_highlight(Direction.UP) is None
    assert overlay.highlighted_index is None


def test_highlight_preserved_when_still_valid(overlay):
    overlay.update_candidates("a")
    overlay.move_highlight(Direction.DOWN)
    overlay.move_highlight(Direction.DOWN)
    assert overlay.highlighted == "addPerson"

    overlay.update_candidates("addP")
    assert overlay.highlighted == "addPerson"
    assert overlay.highlighted_index == 0


def test_highlight_cleared_when_no_longer_valid(overlay):
    overlay.update_candidates("add")
    overlay.move_highlight(Direction.DOWN)
    overlay.update_candidates("addP")
    assert overlay.highlighted is None
    assert overlay.visible


def test_fresh_show_has_no_highlight(overlay):
    overlay.update_candidates("add")
    overlay.move_highlight(Direction.DOWN)
    overlay.update_candidates("")
    overlay.update_candidates("add")
    assert overlay.highlighted is None


def test_accept_without_highlight_is_noop(overlay):
    overlay.update_candidates("add")
    assert overlay.accept_highlighted() is None
    assert overlay.visible


def test_dismiss(overlay):
    overlay.update_candidates("add")
    overlay.dismiss()
    assert not overlay.visible
    assert overlay.move_highlight(Direction.DOWN) is None


def test_match_does_not_change_state(overlay):
    assert overlay.match("li") == ["list"]
    assert not overlay.visible
