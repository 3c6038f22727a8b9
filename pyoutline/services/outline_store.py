from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pyoutline.domain.interfaces import IFileService, IOutlineStore, ISettingsService
from pyoutline.utils.constants import SETTINGS_OUTLINE


@dataclass
class SettingsOutlineStore(IOutlineStore):
    """
    Keeps the serialized outline under a single settings key.

    load() returns None for anything that is not a string; decoding and the
    fallback to a default document are the caller's business.
    """

    settings: ISettingsService
    key: str = SETTINGS_OUTLINE

    def load(self) -> str | None:
        raw = self.settings.get_raw(self.key, None)
        return raw if isinstance(raw, str) else None

    def save(self, serialized: str) -> None:
        self.settings.set_raw(self.key, serialized)


@dataclass
class JsonFileOutlineStore(IOutlineStore):
    """Keeps the serialized outline in a JSON file, written atomically."""

    files: IFileService
    path: Path

    def load(self) -> str | None:
        try:
            return self.files.read_text(self.path)
        except (OSError, UnicodeDecodeError):
            return None

    def save(self, serialized: str) -> None:
        self.files.write_text_atomic(self.path, serialized)

