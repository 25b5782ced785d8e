import os
import pathlib
import sys

import pytest

# Ensure project root is in sys.path
repo_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtWidgets import QApplication
except ImportError:
    QApplication = None


@pytest.fixture(scope="session")
def qapp():
    """
    Ensure QApplication is instantiated only once.
    """
    if QApplication is None:
        yield None
        return

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def store():
    """
    Provides an empty entity store for each test.
    """
    from src.services.entity_store import EntityStore

    return EntityStore()


@pytest.fixture
def model():
    """
    Provides a fresh session model whose store holds person 1 (Alice).
    """
    from src.core.entities import Person
    from src.services.entity_store import EntityStore
    from src.services.model_manager import ModelManager

    initial = EntityStore()
    initial.add(Person(name="Alice Tan", phone="91234567", email="alice@example.com"))
    return ModelManager(store=initial)


@pytest.fixture
def coordinator(model):
    """
    Provides a coordinator over the ``model`` fixture.
    """
    from src.app.command_coordinator import CommandCoordinator

    return CommandCoordinator(model)
