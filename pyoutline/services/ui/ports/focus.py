from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFocusMover(Protocol):
    """
    Abstract UI port for moving keyboard focus to a row's editing surface.
    The caller supplies only a row id; an unknown id is ignored.
    """

    def focus_row(self, row_id: str) -> None: ...
