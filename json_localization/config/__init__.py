"""
Configuration access point for json-localization

    from json_localization.config import get_settings

    root = get_settings().resources_root()
"""

from .settings import (
    DEFAULT_RESOURCES_PATH,
    LocalizationSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "DEFAULT_RESOURCES_PATH",
    "LocalizationSettings",
    "get_settings",
    "reload_settings",
]
