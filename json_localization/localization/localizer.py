"""
JSON string localizer

A localizer is bound to one resource name. The culture of every lookup is
passed explicitly or taken from the culture context, so one instance serves
all cultures and all threads.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from json_localization.exceptions import InvalidArgumentError, ResourceFormatError
from json_localization.i18n.context import get_current_ui_culture
from json_localization.localization.localized_string import LocalizedString
from json_localization.resources.table_cache import ResourceTableCache
from json_localization.utils.culture import culture_hierarchy, normalize_culture


class JsonStringLocalizer:
    """
    Resolves strings for one resource from JSON files.

    Missing keys never raise: the key itself is returned with
    ``resource_not_found=True``.
    """

    def __init__(self, table_cache: ResourceTableCache, resource_name: str):
        if resource_name is None or not resource_name.strip():
            raise InvalidArgumentError("resource_name")
        if table_cache is None:
            raise InvalidArgumentError("table_cache")
        self.resource_name = resource_name
        self._tables = table_cache

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resource_name={self.resource_name!r})"

    def __getitem__(self, key: str) -> LocalizedString:
        return self.lookup(key)

    @property
    def searched_location(self) -> Optional[str]:
        return self._tables.searched_location(self.resource_name)

    def lookup(self, key: str, *, culture: Optional[str] = None) -> LocalizedString:
        """
        Look up ``key`` in the table of the given (or current) culture.

        Raises:
            InvalidArgumentError: If key is None or blank
        """
        value = self._get_string_safely(key, self._resolve_culture(culture))
        return LocalizedString(
            key,
            key if value is None else value,
            resource_not_found=value is None,
            searched_location=self.searched_location,
        )

    def lookup_formatted(self, key: str, *args: Any, culture: Optional[str] = None) -> LocalizedString:
        """
        Look up ``key`` and format it with positional ``args``.

        When the key is missing the key itself is used as the template.

        Raises:
            InvalidArgumentError: If key is None or blank
            ResourceFormatError: If the template does not fit ``args``
        """
        template = self._get_string_safely(key, self._resolve_culture(culture))
        value = _format(key, key if template is None else template, args)
        return LocalizedString(
            key,
            value,
            resource_not_found=template is None,
            searched_location=self.searched_location,
        )

    def get_all_strings(
        self,
        include_parent_cultures: bool,
        *,
        culture: Optional[str] = None,
    ) -> Iterator[LocalizedString]:
        """
        Lazily enumerate every string of the resource.

        With ``include_parent_cultures`` the keys of the culture and all of
        its parents (up to, not including, the invariant culture) are
        merged. Values are still resolved against the starting culture's
        table, so a key only present in a parent comes back not found.

        Raises:
            InvalidArgumentError: When the enumeration reaches a blank key
                stored in a resource file
        """
        current = self._resolve_culture(culture)

        if include_parent_cultures:
            names: Iterable[str] = self._names_from_culture_hierarchy(current)
        else:
            names = self._resource_names(current)

        for name in names:
            value = self._get_string_safely(name, current)
            yield LocalizedString(
                name,
                name if value is None else value,
                resource_not_found=value is None,
                searched_location=self.searched_location,
            )

    def with_culture(self, culture: Optional[str]) -> "JsonStringLocalizer":
        """Culture is chosen per call, so the same localizer is returned."""
        return self

    def _resolve_culture(self, culture: Optional[str]) -> str:
        if culture is None:
            return get_current_ui_culture()
        return normalize_culture(culture)

    def _get_string_safely(self, name: str, culture: str) -> Optional[str]:
        if name is None or not name.strip():
            raise InvalidArgumentError("name")

        resources = self._tables.get(self.resource_name, culture)
        if resources is None:
            return None
        return resources.get(name)

    def _names_from_culture_hierarchy(self, starting_culture: str) -> Iterable[str]:
        names = {}
        for culture in culture_hierarchy(starting_culture):
            names.update(dict.fromkeys(self._resource_names(culture)))
        return names.keys()

    def _resource_names(self, culture: str) -> Iterable[str]:
        resources = self._tables.get(self.resource_name, culture)
        if resources is None:
            return ()
        return list(resources.keys())


def _format(name: str, template: str, args: tuple) -> str:
    try:
        return template.format(*args)
    except (IndexError, KeyError, ValueError, AttributeError) as e:
        raise ResourceFormatError(name, template, str(e)) from e
