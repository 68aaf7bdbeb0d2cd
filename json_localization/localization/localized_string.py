from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LocalizedString:
    """A resolved string plus lookup metadata"""

    name: str
    value: str
    resource_not_found: bool = False
    searched_location: Optional[str] = None

    @property
    def found(self) -> bool:
        return not self.resource_not_found

    def __str__(self) -> str:
        return self.value
