"""
Culture utilities for json-localization

Culture names follow BCP 47 style tags ("en", "en-US", "zh-Hant-TW").
The invariant culture is the empty string.
"""

from __future__ import annotations

import locale
import re
from typing import List, Optional

from json_localization.exceptions import InvalidArgumentError


INVARIANT_CULTURE = ""

_INVARIANT_ALIASES = {"", "c", "posix", "iv", "invariant"}

_TAG_RE = re.compile(r"^[A-Za-z0-9]{1,8}(-[A-Za-z0-9]{1,8})*$")

# Chinese region cultures inherit from their script culture, not from "zh".
_SPECIAL_PARENTS = {
    "zh-CN": "zh-Hans",
    "zh-SG": "zh-Hans",
    "zh-TW": "zh-Hant",
    "zh-HK": "zh-Hant",
    "zh-MO": "zh-Hant",
}


def normalize_culture(name: Optional[str]) -> str:
    """
    Normalize a culture name to its canonical form.

    Supports:
    - underscores and POSIX locale names (en_US.UTF-8 -> en-US)
    - canonical casing (EN-us -> en-US, zh-hant-tw -> zh-Hant-TW)
    - invariant aliases (None, "", "C", "POSIX", "iv") -> ""

    Raises:
        InvalidArgumentError: If the name contains characters that cannot
            appear in a culture tag
    """
    if name is None:
        return INVARIANT_CULTURE

    raw = str(name).strip()
    # POSIX locales: "en_US.UTF-8", "de_DE@euro"
    for sep in (".", "@"):
        if sep in raw:
            raw = raw.split(sep, 1)[0]
    raw = raw.replace("_", "-")

    if raw.lower() in _INVARIANT_ALIASES:
        return INVARIANT_CULTURE

    if not _TAG_RE.match(raw):
        raise InvalidArgumentError("culture", f"Invalid culture name: {name!r}")

    subtags = raw.split("-")
    out = [subtags[0].lower()]
    for subtag in subtags[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            out.append(subtag.title())
        elif (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit()):
            out.append(subtag.upper())
        else:
            out.append(subtag.lower())
    return "-".join(out)


def is_invariant(name: Optional[str]) -> bool:
    return normalize_culture(name) == INVARIANT_CULTURE


def parent_culture(name: Optional[str]) -> str:
    """
    Get the parent of a culture.

    "en-US" -> "en" -> "" (invariant). The invariant culture is its own parent.
    """
    culture = normalize_culture(name)
    if culture == INVARIANT_CULTURE:
        return INVARIANT_CULTURE

    if culture in _SPECIAL_PARENTS:
        return _SPECIAL_PARENTS[culture]

    subtags = culture.split("-")
    if len(subtags) == 1:
        return INVARIANT_CULTURE
    return "-".join(subtags[:-1])


def culture_hierarchy(name: Optional[str]) -> List[str]:
    """
    The culture followed by its parents, excluding the invariant culture.

    "zh-TW" -> ["zh-TW", "zh-Hant", "zh"]
    """
    out: List[str] = []
    current = normalize_culture(name)
    while current != parent_culture(current):
        out.append(current)
        current = parent_culture(current)
    return out


def parse_accept_language(value: Optional[str]) -> List[str]:
    """
    Parse an Accept-Language header into culture names ordered by preference.

    Small parser; respects q= weights (stable for equal weights), drops "*",
    q=0 entries and tags that are not valid culture names.
    """
    if not value:
        return []

    parts = [p.strip() for p in value.split(",") if p.strip()]
    weighted: List[tuple[float, str]] = []
    for part in parts:
        tag = part
        q = 1.0
        if ";" in part:
            tag, params = part.split(";", 1)
            tag = tag.strip()
            params = params.strip()
            if params.startswith("q="):
                try:
                    q = float(params[2:])
                except ValueError:
                    q = 1.0
        if tag == "*" or q <= 0:
            continue
        try:
            culture = normalize_culture(tag)
        except InvalidArgumentError:
            continue
        if culture:
            weighted.append((q, culture))

    weighted.sort(key=lambda item: item[0], reverse=True)
    return [culture for _, culture in weighted]


def get_system_culture() -> str:
    """
    Culture of the operating system locale, or invariant when unavailable.
    """
    try:
        lang, _ = locale.getlocale()
    except ValueError:
        return INVARIANT_CULTURE
    try:
        return normalize_culture(lang)
    except InvalidArgumentError:
        return INVARIANT_CULTURE
