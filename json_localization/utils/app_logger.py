"""
Logging utilities for json-localization

Every module logs through ``logging.getLogger(__name__)``; the package logger
carries a NullHandler, so output is left to the host's logging setup.
"""

import logging


PACKAGE_LOGGER_NAME = "json_localization"


def get_localizer_logger(resource_name: str) -> logging.Logger:
    """Get the logger a localizer for ``resource_name`` reports to."""
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.localizer.{resource_name}")
