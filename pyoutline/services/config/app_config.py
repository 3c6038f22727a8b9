from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from platformdirs import user_data_dir, user_log_dir

from pyoutline.domain.interfaces import IAppConfig
from pyoutline.services.config.ini_config_service import IniConfigService
from pyoutline.utils.logging import parse_level

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)

StorageBackend = Literal["settings", "file"]


def _project_root_fallback() -> Path:
    # pyoutline/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter over IniConfigService with typed accessors for the editor's settings.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- editor settings ----

    def storage_backend(self) -> StorageBackend:
        v = (self.ini.get("storage", "backend", "settings") or "").strip().lower()
        return "file" if v == "file" else "settings"

    def storage_path(self) -> Path:
        v = (self.ini.get("storage", "path", None) or "").strip()
        if v:
            return Path(v).expanduser()
        return Path(user_data_dir(IniConfigService.DEFAULT_APP_DIR)) / "outline.json"

    def log_level(self) -> int:
        return parse_level(self.ini.get("logging", "level", None), logging.INFO)

    def log_dir(self) -> Path | None:
        if self.ini.get_bool("logging", "to_file", True) is False:
            return None
        return Path(user_log_dir(IniConfigService.DEFAULT_APP_DIR))

    def hide_completed_default(self) -> bool:
        return bool(self.ini.get_bool("ui", "hide_completed", False))

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
