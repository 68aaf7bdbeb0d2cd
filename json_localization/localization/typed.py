from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from json_localization.exceptions import InvalidArgumentError
from json_localization.localization.factory import JsonStringLocalizerFactory
from json_localization.localization.localized_string import LocalizedString
from json_localization.localization.localizer import JsonStringLocalizer

T = TypeVar("T")


class TypedStringLocalizer(Generic[T]):
    """Localizer view for a resource type, backed by the factory's singleton."""

    def __init__(self, factory: JsonStringLocalizerFactory, resource_type: Type[T]):
        if factory is None:
            raise InvalidArgumentError("factory")
        if resource_type is None:
            raise InvalidArgumentError("resource_type")
        self.resource_type = resource_type
        self._localizer: JsonStringLocalizer = factory.create(resource_type)

    @property
    def resource_name(self) -> str:
        return self._localizer.resource_name

    def __getitem__(self, key: str) -> LocalizedString:
        return self._localizer.lookup(key)

    def lookup(self, key: str, *, culture: Optional[str] = None) -> LocalizedString:
        return self._localizer.lookup(key, culture=culture)

    def lookup_formatted(self, key: str, *args: Any, culture: Optional[str] = None) -> LocalizedString:
        return self._localizer.lookup_formatted(key, *args, culture=culture)

    def get_all_strings(
        self,
        include_parent_cultures: bool,
        *,
        culture: Optional[str] = None,
    ) -> Iterator[LocalizedString]:
        return self._localizer.get_all_strings(include_parent_cultures, culture=culture)

    def with_culture(self, culture: Optional[str]) -> JsonStringLocalizer:
        return self._localizer.with_culture(culture)
