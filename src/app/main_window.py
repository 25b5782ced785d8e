"""
MainWindow Class.

The main application window: a result pane, person and meeting lists,
recently entered commands, and the command box at the bottom.
"""

import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QListWidget,
    QMainWindow,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from src.app.command_coordinator import CommandCoordinator
from src.app.constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    TITLE_HISTORY,
    TITLE_MEETINGS,
    TITLE_PERSONS,
    WINDOW_TITLE,
)
from src.commands.base_command import CommandResult
from src.core.app_config import AppConfig
from src.gui.widgets.command_box import CommandBox

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Hosts the command box and renders the session state after each command.
    """

    def __init__(
        self,
        coordinator: Optional[CommandCoordinator] = None,
        config: Optional[AppConfig] = None,
    ):
        """
        Args:
            coordinator: Session coordinator. A fresh session if omitted.
            config: Runtime settings. Defaults are used if omitted.
        """
        super().__init__()
        self.coordinator = coordinator or CommandCoordinator()
        self.config = config or AppConfig()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)

        self.result_display = QTextEdit()
        self.result_display.setReadOnly(True)
        layout.addWidget(self.result_display, stretch=1)

        lists_layout = QHBoxLayout()
        self.person_list = self._add_panel(lists_layout, TITLE_PERSONS)
        self.meeting_list = self._add_panel(lists_layout, TITLE_MEETINGS)
        self.history_list = self._add_panel(lists_layout, TITLE_HISTORY)
        layout.addLayout(lists_layout, stretch=2)

        self.command_box = CommandBox(self.coordinator)
        self.command_box.command_executed.connect(self.on_command_result)
        layout.addWidget(self.command_box)

        self.setCentralWidget(central)
        self.refresh_lists()
        self.command_box.command_input.setFocus()
        logger.debug("MainWindow initialized")

    @staticmethod
    def _add_panel(layout: QHBoxLayout, title: str) -> QListWidget:
        box = QGroupBox(title)
        box_layout = QVBoxLayout(box)
        widget = QListWidget()
        box_layout.addWidget(widget)
        layout.addWidget(box)
        return widget

    @Slot(object)
    def on_command_result(self, result: CommandResult) -> None:
        """
        Shows the result message and refreshes the lists.

        Args:
            result: CommandResult from the command box.
        """
        self.result_display.setPlainText(result.message)
        self.refresh_lists()

    def refresh_lists(self) -> None:
        """Re-renders persons, meetings and recent commands from the session."""
        model = self.coordinator.model

        self.person_list.clear()
        for person in model.store.persons:
            self.person_list.addItem(str(person))

        self.meeting_list.clear()
        for meeting in model.store.meetings:
            self.meeting_list.addItem(f"#{meeting.id} {meeting}")

        self.history_list.clear()
        if self.config.history_preview:
            recent = model.history.entries()[-self.config.history_preview :]
            for entry in reversed(recent):
                self.history_list.addItem(entry)
