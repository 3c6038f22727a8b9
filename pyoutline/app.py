from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from pyoutline.di.container import Container
from pyoutline.services.config.app_config import build_app_config
from pyoutline.utils.constants import APP_NAME, APP_ORG
from pyoutline.utils.logging import get_logger, setup_logging


def run_app(argv: Sequence[str]) -> int:
    """
    Configures logging, bootstraps Qt, composes the application via the DI
    container and launches the main window.
    """
    config = build_app_config()
    setup_logging(config.log_level(), config.log_dir())
    log = get_logger(__name__)
    log.info("%s %s starting", APP_NAME, config.get_version())
    if config.loaded_from is not None:
        log.info("Configuration loaded from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
