from __future__ import annotations

from PyQt6.QtCore import Qt

from pyoutline.domain.commands import (
    AnyCommand,
    DeleteBackwardIfEmpty,
    IndentIn,
    IndentOut,
    MoveRow,
    NewRowBelow,
)
from pyoutline.domain.models import Move

_ENTER_KEYS = (Qt.Key.Key_Return, Qt.Key.Key_Enter)
_MOVE_KEYS = {Qt.Key.Key_Up: Move.UP, Qt.Key.Key_Down: Move.DOWN}


def as_qt_key(key: Qt.Key | int) -> Qt.Key | None:
    # QKeyEvent.key() hands back a plain int
    if isinstance(key, Qt.Key):
        return key
    try:
        return Qt.Key(key)
    except ValueError:
        return None


def command_for_key(
    key: Qt.Key | int,
    modifiers: Qt.KeyboardModifier,
    row_text: str,
) -> AnyCommand | None:
    """
    Translate a key press in a row editor into an outline command.

        Enter/Return          -> NewRowBelow
        Tab / Shift+Tab       -> IndentIn / IndentOut
        Backspace (empty row) -> DeleteBackwardIfEmpty
        Alt+Up / Alt+Down     -> MoveRow

    Returns None when the key should keep its normal line-edit behaviour.
    """
    key = as_qt_key(key)
    if key is None:
        return None

    if key in _ENTER_KEYS:
        return NewRowBelow()

    # Qt reports Shift+Tab as Key_Backtab on most platforms
    if key == Qt.Key.Key_Backtab:
        return IndentOut()
    if key == Qt.Key.Key_Tab:
        if modifiers & Qt.KeyboardModifier.ShiftModifier:
            return IndentOut()
        return IndentIn()

    if key == Qt.Key.Key_Backspace and row_text == "":
        return DeleteBackwardIfEmpty()

    if modifiers & Qt.KeyboardModifier.AltModifier and key in _MOVE_KEYS:
        return MoveRow(_MOVE_KEYS[key])

    return None
