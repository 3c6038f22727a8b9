from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QLineEdit, QToolButton, QWidget

from pyoutline.domain.commands import AnyCommand
from pyoutline.domain.models import Indent, Row
from pyoutline.services.ui.keymap import as_qt_key, command_for_key
from pyoutline.utils.constants import INDENT_PX, ROW_PLACEHOLDER

# Returns True when the command was consumed.
CommandHandler = Callable[[str, AnyCommand], bool]


class RowLineEdit(QLineEdit):
    """Line edit that turns outline shortcuts into commands before normal editing."""

    def __init__(self, row_id: str, on_command: CommandHandler, parent: QWidget | None = None):
        super().__init__(parent)
        self.row_id = row_id
        self._on_command = on_command

    def event(self, e: QEvent) -> bool:
        # Tab/Backtab never reach keyPressEvent otherwise: QWidget.event() spends
        # them on focus traversal.
        if e.type() == QEvent.Type.KeyPress and isinstance(e, QKeyEvent):
            if as_qt_key(e.key()) in (Qt.Key.Key_Tab, Qt.Key.Key_Backtab):
                self.keyPressEvent(e)
                return True
        return super().event(e)

    def keyPressEvent(self, e: QKeyEvent) -> None:
        command = command_for_key(e.key(), e.modifiers(), self.text())
        if command is not None and self._on_command(self.row_id, command):
            e.accept()
            return
        super().keyPressEvent(e)


class RowWidget(QWidget):
    """One outline row: completion checkbox, text editor and indent/delete buttons."""

    text_edited = pyqtSignal(str, str)  # row_id, text
    checked_changed = pyqtSignal(str, bool)  # row_id, checked
    indent_requested = pyqtSignal(str, object)  # row_id, Indent
    remove_requested = pyqtSignal(str)  # row_id

    def __init__(self, row: Row, on_command: CommandHandler, parent: QWidget | None = None):
        super().__init__(parent)
        self.row_id = row.id
        self._row: Row | None = None

        self.checkbox = QCheckBox(self)
        self.checkbox.setToolTip("Done")
        self.editor = RowLineEdit(row.id, on_command, self)
        self.editor.setPlaceholderText(ROW_PLACEHOLDER)
        self.editor.setFrame(False)

        self.btn_out = QToolButton(self)
        self.btn_out.setText("◦")
        self.btn_out.setToolTip("Outdent")
        self.btn_in = QToolButton(self)
        self.btn_in.setText("•")
        self.btn_in.setToolTip("Indent")
        self.btn_remove = QToolButton(self)
        self.btn_remove.setText("⌫")
        self.btn_remove.setToolTip("Delete row")

        lay = QHBoxLayout(self)
        lay.setSpacing(8)
        lay.addWidget(self.checkbox)
        lay.addWidget(self.editor, 1)
        for b in (self.btn_out, self.btn_in, self.btn_remove):
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            lay.addWidget(b)

        # user-initiated signals only, so programmatic updates never echo back
        self.editor.textEdited.connect(lambda t: self.text_edited.emit(self.row_id, t))
        self.checkbox.clicked.connect(lambda on: self.checked_changed.emit(self.row_id, on))
        self.btn_out.clicked.connect(lambda: self.indent_requested.emit(self.row_id, Indent.OUT))
        self.btn_in.clicked.connect(lambda: self.indent_requested.emit(self.row_id, Indent.IN))
        self.btn_remove.clicked.connect(lambda: self.remove_requested.emit(self.row_id))

        self.update_row(row)

    @property
    def row(self) -> Row | None:
        return self._row

    def update_row(self, row: Row) -> None:
        if row == self._row:
            return
        self._row = row
        # keep the caret where it is while the user types
        if self.editor.text() != row.text:
            self.editor.setText(row.text)
        self.checkbox.setChecked(row.checked)
        font = self.editor.font()
        font.setStrikeOut(row.checked)
        self.editor.setFont(font)
        self.editor.setStyleSheet("color: gray;" if row.checked else "")
        self.layout().setContentsMargins(12 + row.level * INDENT_PX, 2, 4, 2)
