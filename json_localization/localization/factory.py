"""
JSON string localizer factory

Derives resource names from types (or base name + location pairs) and hands
out one localizer per resource name. The factory owns the resource table
cache shared by all of its localizers.
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Callable, Dict, Optional

from json_localization.config.settings import LocalizationSettings, get_settings
from json_localization.exceptions import InvalidArgumentError
from json_localization.localization.localizer import JsonStringLocalizer
from json_localization.resources.table_cache import ResourceTableCache
from json_localization.utils.app_logger import get_localizer_logger

logger = logging.getLogger(__name__)


def entry_point_name() -> str:
    """
    Name of the running application.

    The top-level package of ``__main__`` when started with ``python -m``,
    else the stem of the launched script.
    """
    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    if spec is not None and spec.name:
        return spec.name.split(".")[0]
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).stem
    return ""


def full_type_name(resource_source: type) -> str:
    module = getattr(resource_source, "__module__", None)
    qualname = getattr(resource_source, "__qualname__", resource_source.__name__)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def trim_prefix(name: str, prefix: str) -> str:
    if name.startswith(prefix):
        return name[len(prefix):]
    return name


class JsonStringLocalizerFactory:
    """
    Creates and caches ``JsonStringLocalizer`` instances.

    Concurrent requests for the same resource name receive the same
    instance.
    """

    def __init__(
        self,
        settings: Optional[LocalizationSettings] = None,
        *,
        logger_factory: Optional[Callable[[str], logging.Logger]] = None,
        table_cache: Optional[ResourceTableCache] = None,
    ):
        """
        Args:
            settings: Localization settings (defaults to the global settings)
            logger_factory: Builds the logger for a resource name
            table_cache: Shared table cache (defaults to one rooted at
                ``settings.resources_root()``)
        """
        self.settings = settings or get_settings()
        self._logger_factory = logger_factory or get_localizer_logger
        self._table_cache = table_cache or ResourceTableCache(
            self.settings.resources_root(),
            logger=self._logger_factory(JsonStringLocalizer.__name__),
        )
        self._localizers: Dict[str, JsonStringLocalizer] = {}
        self._lock = threading.Lock()

    @property
    def table_cache(self) -> ResourceTableCache:
        return self._table_cache

    @property
    def root_namespace(self) -> str:
        return self.settings.root_namespace or entry_point_name()

    def create(self, resource_source: type) -> JsonStringLocalizer:
        """
        Get the localizer for a type.

        ``myapp.controllers.home.HomeController`` with root namespace
        ``myapp`` reads ``controllers/home/HomeController.<culture>.json``.

        Raises:
            InvalidArgumentError: If resource_source is None
        """
        if resource_source is None:
            raise InvalidArgumentError("resource_source")

        resource_name = trim_prefix(full_type_name(resource_source), self.root_namespace + ".")
        return self._get_or_create(resource_name)

    def create_from_base_name(self, base_name: str, location: str) -> JsonStringLocalizer:
        """
        Get the localizer for a base name, relative to ``location``.

        Raises:
            InvalidArgumentError: If base_name or location is None
        """
        if base_name is None:
            raise InvalidArgumentError("base_name")
        if location is None:
            raise InvalidArgumentError("location")

        resource_name = trim_prefix(base_name, location + ".")
        return self._get_or_create(resource_name)

    def _get_or_create(self, resource_name: str) -> JsonStringLocalizer:
        localizer = self._localizers.get(resource_name)
        if localizer is not None:
            return localizer

        with self._lock:
            # Double-check pattern - another thread might have created it
            localizer = self._localizers.get(resource_name)
            if localizer is None:
                localizer = JsonStringLocalizer(self._table_cache, resource_name)
                self._localizers[resource_name] = localizer
                logger.debug(f"Created localizer for resource: {resource_name}")
            return localizer
