"""
Utility functions for json-localization
"""

from .culture import (
    INVARIANT_CULTURE,
    culture_hierarchy,
    normalize_culture,
    parent_culture,
    parse_accept_language,
)

__all__ = [
    "INVARIANT_CULTURE",
    "culture_hierarchy",
    "normalize_culture",
    "parent_culture",
    "parse_accept_language",
]
