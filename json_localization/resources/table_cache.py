"""
Resource table cache

Maps a (resource name, culture) pair to the parsed key -> value table of one
JSON file. Tables are loaded lazily, at most once per pair, and kept for the
lifetime of the cache. There is no invalidation.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple, Union

from json_localization.exceptions import InvalidArgumentError, MalformedResourceError, ResourceIOError
from json_localization.utils.culture import INVARIANT_CULTURE, normalize_culture


ResourceTable = Mapping[str, Optional[str]]

_CacheKey = Tuple[str, str]


def parse_resource_table(content: str, path: str) -> ResourceTable:
    """
    Parse resource file content into an immutable table.

    Strings are kept as-is, null stays None, numbers and booleans become
    their string form. Anything else is malformed.

    Raises:
        MalformedResourceError: If the content is not a flat JSON object
    """
    try:
        data = json.loads(content.strip())
    except json.JSONDecodeError as e:
        raise MalformedResourceError(path, str(e)) from e

    if not isinstance(data, dict):
        raise MalformedResourceError(path, f"expected a JSON object, got {type(data).__name__}")

    table: Dict[str, Optional[str]] = {}
    for key, value in data.items():
        if value is None or isinstance(value, str):
            table[key] = value
        elif isinstance(value, (bool, int, float)):
            table[key] = str(value)
        else:
            raise MalformedResourceError(
                path, f"value of '{key}' must be a string, got {type(value).__name__}"
            )
    return MappingProxyType(table)


class ResourceTableCache:
    """
    Write-once cache of resource tables keyed by (resource name, culture).

    ``get`` performs at most one load per key even when many threads ask for
    the same key at once. Loads of different keys run in parallel; only the
    key being loaded is locked while its file is read.
    """

    def __init__(
        self,
        resources_root: Union[str, Path],
        *,
        logger: Optional[logging.Logger] = None,
        reader: Optional[Callable[[Path], bytes]] = None,
    ):
        """
        Args:
            resources_root: Directory resource names are resolved against
            logger: Sink for malformed-resource warnings
            reader: Reads a file's bytes (defaults to ``Path.read_bytes``)
        """
        self.resources_root = Path(resources_root)
        self._logger = logger or logging.getLogger(__name__)
        self._reader = reader or Path.read_bytes
        self._tables: Dict[_CacheKey, Optional[ResourceTable]] = {}
        self._key_locks: Dict[_CacheKey, threading.Lock] = {}
        self._lock = threading.Lock()
        self._searched_locations: Dict[str, str] = {}

    def resource_path(self, resource_name: str, culture: str) -> Path:
        """
        Path of the culture-specific file for a resource.

        ``Controllers.Home`` + ``en-US`` -> ``<root>/Controllers/Home.en-US.json``.
        The invariant culture maps to the culture-less file.
        """
        parts = resource_name.split(".")
        folder = self.resources_root.joinpath(*parts[:-1])
        if culture == INVARIANT_CULTURE:
            return folder / f"{parts[-1]}.json"
        return folder / f"{parts[-1]}.{culture}.json"

    def searched_location(self, resource_name: str) -> Optional[str]:
        """File consulted by the most recent load for ``resource_name``"""
        return self._searched_locations.get(resource_name)

    def is_loaded(self, resource_name: str, culture: str) -> bool:
        return (resource_name, normalize_culture(culture)) in self._tables

    def get(self, resource_name: str, culture: str) -> Optional[ResourceTable]:
        """
        Get the table for a resource in a culture, loading it on first use.

        Returns:
            The table, or None when the file is missing, empty or malformed

        Raises:
            InvalidArgumentError: If resource_name is None or blank
            ResourceIOError: If the file exists but cannot be read
        """
        if resource_name is None or not resource_name.strip():
            raise InvalidArgumentError("resource_name")

        key = (resource_name, normalize_culture(culture))

        # Fast path: dict reads are atomic
        if key in self._tables:
            return self._tables[key]

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Double-check - another thread might have loaded it
            if key in self._tables:
                return self._tables[key]

            table = self._load(*key)
            self._tables[key] = table
            return table

    def _load(self, resource_name: str, culture: str) -> Optional[ResourceTable]:
        path = self.resource_path(resource_name, culture)
        # os.path.exists reports unusable names (e.g. too long) as missing
        if culture != INVARIANT_CULTURE and not os.path.exists(path):
            path = self.resource_path(resource_name, INVARIANT_CULTURE)

        location = str(path)
        self._searched_locations[resource_name] = location

        try:
            raw = self._reader(path)
        except FileNotFoundError:
            self._logger.debug(f"No resource file for {resource_name} ({culture or 'invariant'}): {location}")
            return None
        except OSError as e:
            raise ResourceIOError(location, resource_name, culture) from e

        content = raw.decode("utf-8-sig", errors="replace")
        if not content.strip():
            return None

        try:
            return parse_resource_table(content, location)
        except MalformedResourceError as e:
            self._logger.warning(
                "invalid json content, path: %s, content: %s", location, content, exc_info=e
            )
            return None
