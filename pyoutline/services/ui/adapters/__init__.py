from __future__ import annotations

from .qt_focus import QtFocusMover
from .qt_messages import QtMessageService

__all__ = [
    "QtFocusMover",
    "QtMessageService",
]
