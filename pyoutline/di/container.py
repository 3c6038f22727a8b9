from __future__ import annotations

from PyQt6.QtCore import QSettings

from pyoutline.domain.interfaces import IFileService, IOutlineStore, ISettingsService
from pyoutline.services.config.app_config import AppConfig, build_app_config
from pyoutline.services.exporters.base import ExporterRegistryInst
from pyoutline.services.exporters.html_exporter import HtmlExporter
from pyoutline.services.exporters.markdown_exporter import MarkdownExporter
from pyoutline.services.file_service import FileService
from pyoutline.services.outline_renderer import OutlineRenderer
from pyoutline.services.outline_session import OutlineSession
from pyoutline.services.outline_store import JsonFileOutlineStore, SettingsOutlineStore
from pyoutline.services.settings_service import SettingsService
from pyoutline.services.ui.adapters.qt_messages import QtMessageService
from pyoutline.services.ui.main_window import MainWindow
from pyoutline.services.ui.ports.messages import IMessageService
from pyoutline.utils.constants import APP_NAME, APP_ORG
from pyoutline.utils.logging import get_logger

log = get_logger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Chooses the outline store from configuration
      - Registers the built-in exporters in its own registry
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        store: IOutlineStore | None = None,
        qsettings: QSettings | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.store: IOutlineStore = store or self._build_store()
        self.messages: IMessageService = messages or QtMessageService()

        self.renderer = OutlineRenderer()
        self.exporters = ExporterRegistryInst()
        self.exporters.register(MarkdownExporter(self.renderer))
        self.exporters.register(HtmlExporter(self.renderer))

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        """Container backed by the per-user settings store for this application."""
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- Internals ----------

    def _build_store(self) -> IOutlineStore:
        if self.config.storage_backend() == "file":
            path = self.config.storage_path()
            log.info("Outline stored in file %s", path)
            return JsonFileOutlineStore(files=self.file_service, path=path)
        log.info("Outline stored in application settings")
        return SettingsOutlineStore(settings=self.settings_service)

    # ---------- Factories ----------

    def build_session(self) -> OutlineSession:
        return OutlineSession(
            self.store,
            settings=self.settings_service,
            hide_completed_default=self.config.hide_completed_default(),
        )

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        return MainWindow(
            session=self.build_session(),
            settings=self.settings_service,
            messages=self.messages,
            exporter_registry=self.exporters,
            app_title=app_title,
        )
