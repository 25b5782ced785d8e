import pytest
from PySide6.QtCore import Qt

from src.app.command_coordinator import CommandCoordinator
from src.app.constants import WINDOW_TITLE
from src.app.main_window import MainWindow
from src.core.app_config import AppConfig


@pytest.fixture
def main_window(qtbot):
    window = MainWindow(CommandCoordinator(), AppConfig(history_preview=2))
    qtbot.addWidget(window)
    return window


def _submit(qtbot, window, text):
    window.command_box.command_input.setText(text)
    qtbot.keyClick(window.command_box.command_input, Qt.Key_Return)


def test_init_window(main_window):
    assert main_window.windowTitle() == WINDOW_TITLE
    assert main_window.person_list.count() == 0
    assert main_window.meeting_list.count() == 0


def test_command_result_refreshes_lists(main_window, qtbot):
    _submit(qtbot, main_window, "addPerson n/Alice Tan")
    _submit(qtbot, main_window, "addMeeting d/20/11/2017 t/1800 l/UTown p/1")

    assert main_window.person_list.count() == 1
    assert main_window.meeting_list.count() == 1
    assert "New meeting added" in main_window.result_display.toPlainText()


def test_failure_message_shown(main_window, qtbot):
    _submit(qtbot, main_window, "addMeeting d/20/11/2017 t/1800 l/UTown p/1")

    assert main_window.result_display.toPlainText() == "Please input a valid person id!"
    assert main_window.meeting_list.count() == 0


def test_undo_refreshes_lists(main_window, qtbot):
    _submit(qtbot, main_window, "addPerson n/Alice Tan")
    _submit(qtbot, main_window, "undo")

    assert main_window.person_list.count() == 0


def test_history_preview_limited_newest_first(main_window, qtbot):
    for text in ("list", "history", "undo"):
        _submit(qtbot, main_window, text)

    items = [
        main_window.history_list.item(i).text()
        for i in range(main_window.history_list.count())
    ]
    assert items == ["undo", "history"]
