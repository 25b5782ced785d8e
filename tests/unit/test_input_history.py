"""
Unit tests for CommandHistory and HistoryPointer.
"""

import pytest

from src.core.exceptions import HistoryBoundaryError
from src.services.input_history import CommandHistory, HistoryPointer


@pytest.fixture
def history():
    h = CommandHistory()
    for text in ("a", "b", "c"):
        h.add(text)
    return h


def test_previous_walks_back_to_oldest(history):
    pointer = history.snapshot()
    assert pointer.current() == ""
    assert pointer.previous() == "c"
    assert pointer.previous() == "b"
    assert pointer.previous() == "a"
    assert not pointer.has_previous()
    with pytest.raises(HistoryBoundaryError):
        pointer.previous()


def test_next_moves_forward(history):
    pointer = history.snapshot()
    for _ in range(3):
        pointer.previous()
    assert pointer.next() == "b"
    assert pointer.next() == "c"
    assert pointer.next() == ""
    assert not pointer.has_next()
    with pytest.raises(HistoryBoundaryError):
        pointer.next()


def test_fresh_pointer_has_no_next(history):
    pointer = history.snapshot()
    assert not pointer.has_next()
    assert pointer.has_previous()


def test_snapshot_is_independent_of_later_additions(history):
    pointer = history.snapshot()
    history.add("d")
    assert len(pointer) == 4
    assert pointer.previous() == "c"
    assert history.snapshot().previous() == "d"


def test_empty_history_pointer():
    pointer = CommandHistory().snapshot()
    assert pointer.current() == ""
    assert not pointer.has_previous()
    assert not pointer.has_next()


def test_entries_returns_copy(history):
    entries = history.entries()
    entries.append("x")
    assert history.entries() == ["a", "b", "c"]


def test_pointer_with_explicit_index():
    pointer = HistoryPointer(["x", "y"], index=0)
    assert pointer.current() == "x"
    assert pointer.next() == "y"
