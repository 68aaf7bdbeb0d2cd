"""
json-localization

String localization from JSON resource files, with per-culture caching and
culture-hierarchy fallback.

    from json_localization import JsonStringLocalizerFactory, LocalizationSettings

    factory = JsonStringLocalizerFactory(LocalizationSettings(resources_path="Resources"))
    localizer = factory.create_from_base_name("myapp.Controllers.Home", "myapp")
    print(localizer.lookup_formatted("Greeting", "World", culture="fr-CA"))
"""

import logging

from json_localization.config.settings import LocalizationSettings, get_settings
from json_localization.exceptions import (
    DomainException,
    InvalidArgumentError,
    MalformedResourceError,
    ResourceFormatError,
    ResourceIOError,
)
from json_localization.localization import (
    JsonStringLocalizer,
    JsonStringLocalizerFactory,
    LocalizedString,
    TypedStringLocalizer,
)
from json_localization.resources import ResourceTableCache

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "LocalizationSettings",
    "get_settings",
    "DomainException",
    "InvalidArgumentError",
    "MalformedResourceError",
    "ResourceFormatError",
    "ResourceIOError",
    "JsonStringLocalizer",
    "JsonStringLocalizerFactory",
    "LocalizedString",
    "TypedStringLocalizer",
    "ResourceTableCache",
]
