from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_LEVEL = 8


class Indent(Enum):
    IN = "in"
    OUT = "out"


class Move(Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Row:
    """One outline entry. Immutable: edits produce a replaced copy."""

    id: str
    text: str = ""
    checked: bool = False
    level: int = 0


# Ordered rows; order defines display order and nesting (via level).
Document = tuple[Row, ...]
