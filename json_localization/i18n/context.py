from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from json_localization.utils.culture import normalize_culture

_UI_CULTURE: ContextVar[Optional[str]] = ContextVar("json_localization_ui_culture", default=None)

_default_ui_culture: Optional[str] = None


def set_default_ui_culture(culture: Optional[str]) -> None:
    """Set the process-level culture used when no context culture is set."""
    global _default_ui_culture
    _default_ui_culture = None if culture is None else normalize_culture(culture)


def get_default_ui_culture() -> str:
    if _default_ui_culture is None:
        from json_localization.config.settings import get_settings

        return get_settings().effective_default_culture()
    return _default_ui_culture


def set_current_ui_culture(culture: Optional[str]) -> Token:
    return _UI_CULTURE.set(normalize_culture(culture))


def reset_current_ui_culture(token: Token) -> None:
    _UI_CULTURE.reset(token)


def get_current_ui_culture() -> str:
    culture = _UI_CULTURE.get()
    if culture is None:
        return get_default_ui_culture()
    return culture


@contextmanager
def ui_culture(culture: Optional[str]) -> Iterator[str]:
    token = set_current_ui_culture(culture)
    try:
        yield _UI_CULTURE.get()
    finally:
        reset_current_ui_culture(token)
