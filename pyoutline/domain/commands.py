from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from pyoutline.domain import outline_model as om
from pyoutline.domain.models import Document, Indent, Move
from pyoutline.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a keyboard command.

    `focus` is the id of the row that should receive input next (or None).
    `handled` is False when the command did not apply at all, so the input
    surface should fall back to its default key behaviour.
    """

    document: Document
    focus: str | None = None
    handled: bool = True

    @classmethod
    def unhandled(cls, document: Document) -> CommandResult:
        return cls(document=document, focus=None, handled=False)


class Command(Protocol):
    def resolve(self, document: Document, index: int) -> CommandResult: ...


@dataclass(frozen=True)
class NewRowBelow:
    """Command: open an empty row below the current one, at the same level."""

    def resolve(self, document: Document, index: int) -> CommandResult:
        current = document[index]
        row = om.new_row(level=current.level)
        doc = om.insert_after(document, index, row)
        # insert_after may re-key the row on collision; read the id back.
        return CommandResult(document=doc, focus=doc[index + 1].id)


@dataclass(frozen=True)
class IndentIn:
    def resolve(self, document: Document, index: int) -> CommandResult:
        return CommandResult(
            document=om.reindent(document, index, Indent.IN), focus=document[index].id
        )


@dataclass(frozen=True)
class IndentOut:
    def resolve(self, document: Document, index: int) -> CommandResult:
        return CommandResult(
            document=om.reindent(document, index, Indent.OUT), focus=document[index].id
        )


@dataclass(frozen=True)
class DeleteBackwardIfEmpty:
    """
    Command: remove the row when its text is empty and focus the row above.

    The row above is looked up before removal; a non-empty row is left to the
    input surface (ordinary backspace).
    """

    def resolve(self, document: Document, index: int) -> CommandResult:
        if document[index].text != "":
            return CommandResult.unhandled(document)
        prev_id = document[index - 1].id if index > 0 else None
        return CommandResult(document=om.remove_at(document, index), focus=prev_id)


@dataclass(frozen=True)
class MoveRow:
    """Command: swap the row with its neighbour; selection follows the row."""

    direction: Move

    def resolve(self, document: Document, index: int) -> CommandResult:
        other = index - 1 if self.direction is Move.UP else index + 1
        return CommandResult(
            document=om.swap(document, index, other), focus=document[index].id
        )


AnyCommand = Union[NewRowBelow, IndentIn, IndentOut, DeleteBackwardIfEmpty, MoveRow]


def apply_command(document: Document, command: Command | None, index: int) -> CommandResult:
    """
    Resolve `command` against the row at `index`.

    No command, or an index outside the document, resolves to no operation.
    """
    if command is None or not 0 <= index < len(document):
        return CommandResult.unhandled(document)
    result = command.resolve(document, index)
    log.debug(
        "%s at %d -> changed=%s focus=%s",
        type(command).__name__,
        index,
        result.document is not document,
        result.focus,
    )
    return result
