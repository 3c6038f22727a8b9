from __future__ import annotations

from .focus import IFocusMover
from .messages import IMessageService

__all__ = [
    "IFocusMover",
    "IMessageService",
]
