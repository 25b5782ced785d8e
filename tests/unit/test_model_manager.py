"""
Unit tests for the ModelManager session aggregate.
"""

import logging

import pytest

from src.core.entities import Person
from src.core.exceptions import NoNextStateError, NoPreviousStateError
from src.services.model_manager import ModelManager


def test_ledger_seeded_with_initial_store(model):
    assert len(model.ledger) == 1
    assert model.ledger.current() == model.store.snapshot()


def test_commit_undo_redo_move_store(model):
    model.store.add(Person(name="Bob"))
    model.commit()

    model.undo()
    assert [p.name for p in model.store.persons] == ["Alice Tan"]

    model.redo()
    assert [p.name for p in model.store.persons] == ["Alice Tan", "Bob"]


def test_boundaries_raise():
    model = ModelManager()
    with pytest.raises(NoPreviousStateError):
        model.undo()
    with pytest.raises(NoNextStateError):
        model.redo()


def test_ledger_moves_logged_at_debug(model, caplog):
    caplog.set_level(logging.DEBUG, logger="src.services.model_manager")

    model.store.add(Person(name="Bob"))
    model.commit()
    model.undo()
    model.redo()

    messages = [
        r.message for r in caplog.records if r.name == "src.services.model_manager"
    ]
    assert messages[0] == "Committed 2 persons, 0 meetings at state 1"
    assert messages[1:] == ["Store restored to state 0", "Store restored to state 1"]
    assert all(
        r.levelno == logging.DEBUG
        for r in caplog.records
        if r.name == "src.services.model_manager"
    )
