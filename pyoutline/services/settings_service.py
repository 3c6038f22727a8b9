from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import QByteArray, QSettings

from pyoutline.domain.interfaces import ISettingsService
from pyoutline.utils.constants import (
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_HIDE_COMPLETED,
    SETTINGS_RECENT_EXPORTS,
)

_TRUTHY = {"1", "true", "yes", "on"}


class SettingsService(ISettingsService):
    """Persist small UI bits like geometry, the hide-completed toggle and recent exports."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_hide_completed(self, default: bool = False) -> bool:
        v = self._s.value(SETTINGS_HIDE_COMPLETED)
        if v is None:
            return default
        # INI-backed QSettings hands booleans back as strings
        if isinstance(v, str):
            return v.strip().lower() in _TRUTHY
        return bool(v)

    def set_hide_completed(self, hide: bool) -> None:
        self._s.setValue(SETTINGS_HIDE_COMPLETED, bool(hide))

    def get_recent_exports(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENT_EXPORTS, [])
        if isinstance(v, str):
            # a single-item list round-trips as a bare string
            return [v] if v else []
        return [str(x) for x in v] if isinstance(v, list) else []

    def set_recent_exports(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENT_EXPORTS, list(recent)[:MAX_RECENTS])

    def get_raw(self, key: str, default: object = None) -> object:
        return self._s.value(key, default)

    def set_raw(self, key: str, value: object) -> None:
        self._s.setValue(key, value)
        self._s.sync()
