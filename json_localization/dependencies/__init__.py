"""
Dependency injection for json-localization

Main Components:
- container: Service container owned by the host's composition root
- providers: Service registration and FastAPI dependency providers

Usage:
    # In application startup
    from json_localization.config import get_settings
    from json_localization.dependencies import add_json_localization, initialize_container

    container = initialize_container(get_settings())
    add_json_localization(container, lambda options: setattr(options, "resources_path", "i18n"))

    # In FastAPI routes
    from json_localization.dependencies import LocalizerFactoryDep

    def my_route(factory: LocalizerFactoryDep):
        ...
"""

from .container import (
    ServiceContainer,
    container_lifespan,
    get_container,
    initialize_container,
    shutdown_container,
)

from .providers import (
    LocalizerFactoryDep,
    add_json_localization,
    get_localizer_factory,
    localizer_for,
)

__all__ = [
    # Container
    'ServiceContainer',
    'initialize_container',
    'get_container',
    'shutdown_container',
    'container_lifespan',

    # Providers
    'add_json_localization',
    'get_localizer_factory',
    'localizer_for',
    'LocalizerFactoryDep',
]
