"""
String localizers backed by JSON resource files
"""

from .factory import JsonStringLocalizerFactory
from .localized_string import LocalizedString
from .localizer import JsonStringLocalizer
from .typed import TypedStringLocalizer

__all__ = [
    "JsonStringLocalizer",
    "JsonStringLocalizerFactory",
    "LocalizedString",
    "TypedStringLocalizer",
]
