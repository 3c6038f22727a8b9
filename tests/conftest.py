from __future__ import annotations

import os
from pathlib import Path

import pytest

# Headless Qt for CI; must be set before QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from pyoutline.domain.interfaces import IOutlineStore  # noqa: E402
from pyoutline.domain.models import Row  # noqa: E402
from pyoutline.services.file_service import FileService  # noqa: E402
from pyoutline.services.settings_service import SettingsService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes ---


class MemoryOutlineStore(IOutlineStore):
    """In-process store that records how often it was written."""

    def __init__(self, initial: str | None = None) -> None:
        self.data = initial
        self.saves = 0

    def load(self) -> str | None:
        return self.data

    def save(self, serialized: str) -> None:
        self.data = serialized
        self.saves += 1


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def memory_store() -> MemoryOutlineStore:
    return MemoryOutlineStore()


def make_doc(*entries) -> tuple[Row, ...]:
    """
    Build a document from (text, level) / (text, level, checked) tuples or bare
    strings; ids are "r0", "r1", ... in order.
    """
    rows = []
    for i, entry in enumerate(entries):
        if isinstance(entry, str):
            entry = (entry, 0)
        text, level, *rest = entry
        rows.append(Row(id=f"r{i}", text=text, level=level, checked=bool(rest and rest[0])))
    return tuple(rows)


@pytest.fixture()
def doc_factory():
    return make_doc
