"""Concrete service implementations: persistence, settings, rendering and the editing session."""

from .file_service import FileService
from .outline_renderer import OutlineRenderer
from .outline_session import OutlineSession
from .outline_store import JsonFileOutlineStore, SettingsOutlineStore
from .settings_service import SettingsService

__all__ = [
    "FileService",
    "OutlineRenderer",
    "OutlineSession",
    "JsonFileOutlineStore",
    "SettingsOutlineStore",
    "SettingsService",
]
