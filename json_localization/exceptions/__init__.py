"""
Localization exception definitions
"""

from .base import DomainException, InvalidArgumentError
from .resource import MalformedResourceError, ResourceFormatError, ResourceIOError


__all__ = [
    # Base
    "DomainException",
    "InvalidArgumentError",

    # Resources
    "MalformedResourceError",
    "ResourceIOError",
    "ResourceFormatError",
]
