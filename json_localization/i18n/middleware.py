from __future__ import annotations

from typing import Iterable, List, Optional

from fastapi import FastAPI, Request

from json_localization.i18n.context import (
    get_default_ui_culture,
    reset_current_ui_culture,
    set_current_ui_culture,
)
from json_localization.exceptions import InvalidArgumentError
from json_localization.utils.culture import culture_hierarchy, normalize_culture, parse_accept_language

QUERY_PARAMETERS = ("culture", "ui-culture")


def select_request_culture(
    request: Request,
    *,
    supported_cultures: Optional[Iterable[str]] = None,
    default_culture: Optional[str] = None,
) -> str:
    """
    Pick the UI culture for a request.

    Order: ``?culture=`` / ``?ui-culture=`` query parameter, then the
    Accept-Language header, then the default. With ``supported_cultures``
    a candidate is accepted when it, or one of its parents, is supported.
    """
    supported: Optional[List[str]] = None
    if supported_cultures is not None:
        supported = [normalize_culture(c) for c in supported_cultures]

    candidates: List[str] = []
    for param in QUERY_PARAMETERS:
        value = request.query_params.get(param)
        if value:
            try:
                candidates.append(normalize_culture(value))
            except InvalidArgumentError:
                continue
    candidates.extend(parse_accept_language(request.headers.get("Accept-Language", "")))

    for candidate in candidates:
        if supported is None:
            return candidate
        for culture in culture_hierarchy(candidate):
            if culture in supported:
                return culture

    if default_culture is not None:
        return normalize_culture(default_culture)
    return get_default_ui_culture()


def install_culture_middleware(
    app: FastAPI,
    *,
    supported_cultures: Optional[Iterable[str]] = None,
    default_culture: Optional[str] = None,
) -> None:
    """
    Install request-scoped UI culture.

    This middleware guarantees:
    - the request culture is available via ContextVar
      (json_localization.i18n.get_current_ui_culture) while the route runs
    - the chosen culture is echoed in the Content-Language header
    """
    supported = list(supported_cultures) if supported_cultures is not None else None

    @app.middleware("http")
    async def _culture_middleware(request: Request, call_next):
        culture = select_request_culture(
            request,
            supported_cultures=supported,
            default_culture=default_culture,
        )
        token = set_current_ui_culture(culture)
        try:
            response = await call_next(request)
        finally:
            reset_current_ui_culture(token)

        if culture and "content-language" not in response.headers:
            response.headers["Content-Language"] = culture
        return response
