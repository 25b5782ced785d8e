"""
Command Box Widget Module.

Provides the command input line with its suggestion helper list.

The widget translates key presses into events for two state machines:
the suggestion overlay (owned by the CommandCoordinator) and a history
pointer over previous inputs. While the overlay is visible the arrow keys
move its highlight; otherwise they recall previous inputs.
"""

import logging

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from src.app.command_coordinator import CommandCoordinator
from src.app.constants import COMMAND_PLACEHOLDER, ERROR_PROPERTY, HELPER_MAX_VISIBLE_ROWS
from src.services.suggestion_overlay import Direction

logger = logging.getLogger(__name__)


class CommandBox(QWidget):
    """
    Command input with suggestion helper and input recall.

    Signals:
        command_executed: Emitted with the CommandResult after each submission.
    """

    command_executed = Signal(object)

    def __init__(self, coordinator: CommandCoordinator, parent=None):
        """
        Initializes the CommandBox.

        Args:
            coordinator: Runs submitted commands and holds the overlay state.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.coordinator = coordinator
        self._history = coordinator.get_history_snapshot()
        self._recalling = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.helper_list = QListWidget()
        self.helper_list.setFocusPolicy(Qt.NoFocus)
        self.helper_list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.helper_list.hide()
        layout.addWidget(self.helper_list)

        self.command_input = QLineEdit()
        self.command_input.setPlaceholderText(COMMAND_PLACEHOLDER)
        self.command_input.setProperty(ERROR_PROPERTY, False)
        self.command_input.textChanged.connect(self._on_text_changed)
        self.command_input.installEventFilter(self)
        layout.addWidget(self.command_input)

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------

    def text(self) -> str:
        return self.command_input.text()

    def is_helper_visible(self) -> bool:
        return self.coordinator.suggestions.visible

    def has_error_style(self) -> bool:
        return bool(self.command_input.property(ERROR_PROPERTY))

    # --------------------------------------------------------------------------
    # Event handling
    # --------------------------------------------------------------------------

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """
        Intercepts navigation keys on the input line.

        Tab must be caught here, before Qt uses it to move focus.
        """
        if obj is self.command_input and event.type() == QEvent.KeyPress:
            return self._handle_key(event.key())
        return super().eventFilter(obj, event)

    def _handle_key(self, key) -> bool:
        suggestions = self.coordinator.suggestions

        if key in (Qt.Key_Up, Qt.Key_Down):
            direction = Direction.UP if key == Qt.Key_Up else Direction.DOWN
            if suggestions.owns_arrow_keys:
                self.coordinator.move_highlight(direction)
                self._sync_helper()
            elif direction is Direction.UP:
                self._navigate_to_previous_input()
            else:
                self._navigate_to_next_input()
            return True

        if key == Qt.Key_Tab:
            self._accept_suggestion()
            return True

        if key in (Qt.Key_Return, Qt.Key_Enter):
            if not self._accept_suggestion():
                self.submit()
            return True

        if key == Qt.Key_Escape and suggestions.visible:
            self.coordinator.dismiss_suggestions()
            self._sync_helper()
            return True

        return False

    def _on_text_changed(self, text: str) -> None:
        self._set_error_style(False)
        if self._recalling:
            self.coordinator.dismiss_suggestions()
        else:
            self.coordinator.update_candidates(text)
        self._sync_helper()

    # --------------------------------------------------------------------------
    # Actions
    # --------------------------------------------------------------------------

    def submit(self) -> None:
        """
        Executes the current text and resets input recall.

        On success the input is cleared; on failure the text is kept and
        the input is styled as an error until the next edit.
        """
        text = self.command_input.text()
        self.coordinator.dismiss_suggestions()
        self._sync_helper()

        result = self.coordinator.execute(text)
        self._history = self.coordinator.get_history_snapshot()

        if result.success:
            self.command_input.clear()
        else:
            self._set_error_style(True)
        logger.info(f"Result: {result.message}")
        self.command_executed.emit(result)

    def _accept_suggestion(self) -> bool:
        accepted = self.coordinator.accept_highlighted()
        if accepted is None:
            return False
        self._replace_text(accepted)
        self._sync_helper()
        return True

    def _navigate_to_previous_input(self) -> None:
        if not self._history.has_previous():
            return
        self._recall(self._history.previous())

    def _navigate_to_next_input(self) -> None:
        if not self._history.has_next():
            return
        self._recall(self._history.next())

    def _recall(self, text: str) -> None:
        self._recalling = True
        try:
            self._replace_text(text)
        finally:
            self._recalling = False

    def _replace_text(self, text: str) -> None:
        self.command_input.setText(text)
        self.command_input.setCursorPosition(len(text))

    # --------------------------------------------------------------------------
    # Rendering
    # --------------------------------------------------------------------------

    def _sync_helper(self) -> None:
        suggestions = self.coordinator.suggestions
        if not suggestions.visible:
            self.helper_list.clear()
            self.helper_list.hide()
            return

        templates = self.coordinator.parser.templates()
        self.helper_list.clear()
        for candidate in suggestions.candidates:
            item = QListWidgetItem(candidate)
            item.setData(Qt.UserRole, candidate)
            item.setToolTip(templates.get(candidate, ""))
            self.helper_list.addItem(item)

        index = suggestions.highlighted_index
        self.helper_list.setCurrentRow(-1 if index is None else index)
        rows = min(self.helper_list.count(), HELPER_MAX_VISIBLE_ROWS)
        self.helper_list.setFixedHeight(
            rows * max(self.helper_list.sizeHintForRow(0), 1)
            + 2 * self.helper_list.frameWidth()
        )
        self.helper_list.show()

    def _set_error_style(self, enabled: bool) -> None:
        if self.has_error_style() == enabled:
            return
        self.command_input.setProperty(ERROR_PROPERTY, enabled)
        self.command_input.style().unpolish(self.command_input)
        self.command_input.style().polish(self.command_input)
