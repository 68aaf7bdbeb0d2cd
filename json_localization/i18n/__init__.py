"""
Culture context helpers.

Design goals:
- Culture is chosen per call; a ContextVar carries the request-scoped default
  (set by middleware or the ``ui_culture`` context manager)
- Without a context culture the process-level default applies
"""

from .context import (
    get_current_ui_culture,
    get_default_ui_culture,
    reset_current_ui_culture,
    set_current_ui_culture,
    set_default_ui_culture,
    ui_culture,
)

__all__ = [
    "get_current_ui_culture",
    "get_default_ui_culture",
    "set_current_ui_culture",
    "reset_current_ui_culture",
    "set_default_ui_culture",
    "ui_culture",
]
