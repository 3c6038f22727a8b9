from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QLineEdit

from pyoutline.services.ui.ports.focus import IFocusMover


class QtFocusMover(IFocusMover):
    """
    Focus a row's line edit on the next event-loop turn.

    The editor is looked up by id when the timer fires, so a row inserted by the
    same command has its widget by then. The lookup belongs to the view; this
    adapter holds no widgets of its own.
    """

    def __init__(self, lookup: Callable[[str], QLineEdit | None]) -> None:
        self._lookup = lookup

    def focus_row(self, row_id: str) -> None:
        QTimer.singleShot(0, lambda: self.focus_now(row_id))

    def focus_now(self, row_id: str) -> bool:
        edit = self._lookup(row_id)
        if edit is None:
            return False
        edit.setFocus()
        return True
