"""
Dependency Injection Container for json-localization

The host's composition root creates one container, registers the
localization services into it (see ``add_json_localization``) and resolves
localizers from it instead of reaching for module-level globals.

Features:
- Singleton and transient registrations
- try-add registrations that keep an existing registration
- Lazy, exactly-once creation of singletons
- Thread-safe operation
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar

from json_localization.config.settings import LocalizationSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

ServiceFactory = Callable[..., Any]


@dataclass
class ServiceRegistration:
    """Service registration information"""
    service_type: Type
    instance: Optional[Any] = None
    factory: Optional[ServiceFactory] = None
    singleton: bool = True
    initialized: bool = False


class ServiceContainer:
    """
    Thread-safe dependency injection container

    Factories receive the container, so they can resolve their own
    dependencies and read ``container.settings``.
    """

    def __init__(self, settings: LocalizationSettings):
        """
        Initialize the service container

        Args:
            settings: Localization settings instance
        """
        self.settings = settings
        self._services: Dict[str, ServiceRegistration] = {}
        self._lock = threading.RLock()

    def register_singleton(self, service_type: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a singleton service with a factory function

        Args:
            service_type: The service class/type
            factory: Factory function that creates the service from the container
        """
        self._register(ServiceRegistration(service_type=service_type, factory=factory, singleton=True))
        logger.debug(f"Registered singleton service: {service_type.__name__}")

    def register_transient(self, service_type: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a transient service; every ``get`` calls the factory

        Args:
            service_type: The service class/type
            factory: Factory taking the container plus any type arguments
                passed to ``get``
        """
        self._register(ServiceRegistration(service_type=service_type, factory=factory, singleton=False))
        logger.debug(f"Registered transient service: {service_type.__name__}")

    def register_instance(self, service_type: Type[T], instance: T) -> None:
        """
        Register a service instance directly

        Args:
            service_type: The service class/type
            instance: Pre-created service instance
        """
        self._register(ServiceRegistration(
            service_type=service_type,
            instance=instance,
            singleton=True,
            initialized=True
        ))
        logger.debug(f"Registered service instance: {service_type.__name__}")

    def try_add_singleton(self, service_type: Type[T], factory: Callable[..., T]) -> bool:
        """Register a singleton unless the type is already registered"""
        with self._lock:
            if self.has(service_type):
                return False
            self.register_singleton(service_type, factory)
            return True

    def try_add_transient(self, service_type: Type[T], factory: Callable[..., T]) -> bool:
        """Register a transient unless the type is already registered"""
        with self._lock:
            if self.has(service_type):
                return False
            self.register_transient(service_type, factory)
            return True

    def _register(self, registration: ServiceRegistration) -> None:
        service_name = registration.service_type.__name__
        with self._lock:
            if service_name in self._services:
                logger.warning(f"Service {service_name} is already registered, overriding")
            self._services[service_name] = registration

    def get(self, service_type: Type[T], *type_args: Any) -> T:
        """
        Get a service instance (thread-safe)

        Args:
            service_type: The service class/type to retrieve
            *type_args: Arguments for a transient factory, e.g. the resource
                type of a typed localizer

        Returns:
            Service instance

        Raises:
            ValueError: If service is not registered
            RuntimeError: If service creation fails
        """
        service_name = service_type.__name__

        registration = self._services.get(service_name)
        if registration is None:
            raise ValueError(f"Service {service_name} is not registered")

        if not registration.singleton:
            return self._create(registration, type_args)

        if type_args:
            raise ValueError(f"Singleton service {service_name} does not take type arguments")

        # Return existing instance if available
        if registration.instance is not None:
            return registration.instance

        with self._lock:
            # Double-check pattern - another thread might have created it
            if registration.instance is not None:
                return registration.instance

            registration.instance = self._create(registration, ())
            registration.initialized = True
            return registration.instance

    def _create(self, registration: ServiceRegistration, type_args: tuple) -> Any:
        service_name = registration.service_type.__name__
        if registration.factory is None:
            raise RuntimeError(f"No factory function registered for {service_name}")

        try:
            logger.debug(f"Creating service instance: {service_name}")
            return registration.factory(self, *type_args)
        except Exception as e:
            logger.error(f"Failed to create service {service_name}: {e}")
            raise RuntimeError(f"Service creation failed for {service_name}: {e}") from e

    def has(self, service_type: Type[T]) -> bool:
        """
        Check if a service is registered

        Args:
            service_type: The service class/type to check

        Returns:
            True if service is registered
        """
        return service_type.__name__ in self._services

    def is_created(self, service_type: Type[T]) -> bool:
        """
        Check if a singleton service instance has been created

        Args:
            service_type: The service class/type to check

        Returns:
            True if service instance exists
        """
        registration = self._services.get(service_type.__name__)
        return registration is not None and registration.instance is not None

    def get_service_info(self) -> Dict[str, Dict[str, Any]]:
        """
        Get information about registered services

        Returns:
            Dictionary with service information
        """
        info = {}
        for service_name, registration in self._services.items():
            info[service_name] = {
                'type': registration.service_type.__name__,
                'singleton': registration.singleton,
                'created': registration.instance is not None,
                'initialized': registration.initialized
            }
        return info

    def clear_instances(self) -> None:
        """Drop created singletons, keeping the registrations"""
        with self._lock:
            for registration in self._services.values():
                if registration.factory is not None:
                    registration.instance = None
                    registration.initialized = False


# Process-wide container owned by the host's composition root
_container: Optional[ServiceContainer] = None
_container_lock = threading.Lock()


def get_container() -> ServiceContainer:
    """
    Get the process-wide service container

    Raises:
        RuntimeError: If container is not initialized
    """
    if _container is None:
        raise RuntimeError(
            "Service container not initialized. "
            "Call initialize_container() in your application startup."
        )
    return _container


def initialize_container(settings: LocalizationSettings) -> ServiceContainer:
    """
    Initialize the process-wide service container (thread-safe)

    This should be called once during application startup.

    Args:
        settings: Localization settings instance

    Returns:
        ServiceContainer: The initialized container
    """
    global _container

    with _container_lock:
        if _container is not None:
            logger.warning("Service container already initialized, returning existing instance")
            return _container

        _container = ServiceContainer(settings)
        logger.info("Global service container initialized")
        return _container


def shutdown_container() -> None:
    """
    Drop the process-wide service container

    This should be called during application shutdown.
    """
    global _container

    with _container_lock:
        if _container is not None:
            _container.clear_instances()
            _container = None
            logger.info("Global service container shut down")


@contextmanager
def container_lifespan(settings: LocalizationSettings) -> Iterator[ServiceContainer]:
    """
    Context manager for container lifecycle

    Usage:
        with container_lifespan(settings) as container:
            add_json_localization(container)
    """
    container = initialize_container(settings)
    try:
        yield container
    finally:
        shutdown_container()
