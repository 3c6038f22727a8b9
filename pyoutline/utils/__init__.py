"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_EXPORT,
    HTML_TEMPLATE,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_HIDE_COMPLETED,
    SETTINGS_OUTLINE,
    SETTINGS_RECENT_EXPORTS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_EXPORT",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_HIDE_COMPLETED",
    "SETTINGS_OUTLINE",
    "SETTINGS_RECENT_EXPORTS",
    "MAX_RECENTS",
]
