"""
Service registration and FastAPI providers for json-localization

``add_json_localization`` wires the localizer factory (singleton) and the
typed localizer view (transient) into a ServiceContainer. The provider
functions expose them to FastAPI routes through ``Depends()``.
"""

import logging
from typing import Annotated, Callable, Optional, Type

from fastapi import Depends

from json_localization.config.settings import DEFAULT_RESOURCES_PATH, LocalizationSettings
from json_localization.dependencies.container import ServiceContainer, get_container
from json_localization.exceptions import InvalidArgumentError
from json_localization.localization.factory import JsonStringLocalizerFactory
from json_localization.localization.typed import TypedStringLocalizer

logger = logging.getLogger(__name__)


def add_json_localization(
    container: ServiceContainer,
    setup_action: Optional[Callable[[LocalizationSettings], None]] = None,
) -> ServiceContainer:
    """
    Add the services required for JSON localization.

    Args:
        container: Container to register into
        setup_action: Optional callback that adjusts a copy of the settings

    Returns:
        The same container, for chaining

    Raises:
        InvalidArgumentError: If container is None
    """
    if container is None:
        raise InvalidArgumentError("container")

    if setup_action is not None:
        options = container.settings.model_copy()
        setup_action(options)
        if not options.resources_path:
            options.resources_path = DEFAULT_RESOURCES_PATH
        container.register_instance(LocalizationSettings, options)
    elif not container.has(LocalizationSettings):
        container.register_instance(LocalizationSettings, container.settings)

    container.try_add_singleton(
        JsonStringLocalizerFactory,
        lambda c: JsonStringLocalizerFactory(c.get(LocalizationSettings)),
    )
    container.try_add_transient(
        TypedStringLocalizer,
        lambda c, resource_type: TypedStringLocalizer(c.get(JsonStringLocalizerFactory), resource_type),
    )
    logger.debug("JSON localization services registered")
    return container


def get_localizer_factory(
    container: ServiceContainer = Depends(get_container)
) -> JsonStringLocalizerFactory:
    """
    FastAPI dependency to get the localizer factory

    Registers the localization services on first use when the host has not
    done so.
    """
    if not container.has(JsonStringLocalizerFactory):
        add_json_localization(container)
    return container.get(JsonStringLocalizerFactory)


def localizer_for(resource_type: Type) -> Callable[..., TypedStringLocalizer]:
    """
    Build a FastAPI dependency that yields the typed localizer of ``resource_type``

    Usage:
        @app.get("/")
        def index(loc: TypedStringLocalizer = Depends(localizer_for(HomeController))):
            return {"title": str(loc["Title"])}
    """
    if resource_type is None:
        raise InvalidArgumentError("resource_type")

    def _dependency(
        container: ServiceContainer = Depends(get_container),
        factory: JsonStringLocalizerFactory = Depends(get_localizer_factory),
    ) -> TypedStringLocalizer:
        return container.get(TypedStringLocalizer, resource_type)

    return _dependency


LocalizerFactoryDep = Annotated[JsonStringLocalizerFactory, Depends(get_localizer_factory)]
