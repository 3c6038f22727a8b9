from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Protocol

from pyoutline.domain.models import Document


class IOutlineStore(Protocol):
    """Key-value persistence for the serialized outline document."""

    def load(self) -> str | None: ...
    def save(self, serialized: str) -> None: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_hide_completed(self, default: bool = False) -> bool: ...
    def set_hide_completed(self, hide: bool) -> None: ...
    def get_recent_exports(self) -> list[str]: ...
    def set_recent_exports(self, recent: Iterable[str]) -> None: ...
    def get_raw(self, key: str, default: object = None) -> object: ...
    def set_raw(self, key: str, value: object) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...


class IExporter(ABC):
    """Export strategy interface. Implementations write an outline document to a path."""

    name: str  # e.g. "markdown", "html"
    label: str  # e.g. "Export Markdown…"
    file_ext: str

    @abstractmethod
    def export(self, document: Document, out_path: Path) -> None:
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...
