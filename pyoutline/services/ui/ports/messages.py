from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for user-facing messages (export errors, confirmations).
    Keeps the window logic testable without real message boxes.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def confirm(self, parent: Any | None, title: str, text: str) -> bool:
        """Return True if the user accepted (Yes), False otherwise."""
        ...
