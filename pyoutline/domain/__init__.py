"""Domain layer: the outline model, keyboard commands, interfaces and models."""

from .commands import (
    CommandResult,
    DeleteBackwardIfEmpty,
    IndentIn,
    IndentOut,
    MoveRow,
    NewRowBelow,
    apply_command,
)
from .interfaces import IExporter, IFileService, IOutlineStore, ISettingsService
from .models import MAX_LEVEL, Document, Indent, Move, Row

__all__ = [
    "MAX_LEVEL",
    "Row",
    "Document",
    "Indent",
    "Move",
    "CommandResult",
    "NewRowBelow",
    "IndentIn",
    "IndentOut",
    "DeleteBackwardIfEmpty",
    "MoveRow",
    "apply_command",
    "IOutlineStore",
    "IFileService",
    "ISettingsService",
    "IExporter",
]
