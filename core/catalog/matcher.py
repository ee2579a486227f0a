# -*- coding: utf-8 -*-
"""Free-text matching of player queries against catalog entries.

Both the display name and the query go through the same normalization so
inconsistent source naming still matches:

- deburred (accent marks removed): "dian cecht" -> "Dian Cécht"
- whitespace removed: "fireball" -> "Fire Ball", "snake bite" -> "Snakebite"
- dashes removed: "32 bit" -> "32-bit Coin"
- periods removed: "OD" -> "O.D."
- apostrophes removed: "aries horns" -> "Aries' Horns", "vulsha" -> "Vul'Sha"
- lower-cased

After that a few symbols are spelled out ("8" -> "eight", "&" -> "and") and a
trailing "/r" reads as recipe(s).

The easter egg is handled separately: it only matches on an exact prefix of
at least four characters and only once per session.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List, Optional

from core.catalog.models import CatalogEntry, SearchSession

EASTER_EGG_MIN_QUERY = 4

_STRIP_RE = re.compile(r"[\s\-.']")
_WS_RE = re.compile(r"\s")

# letters that have no canonical decomposition
_DEBURR_EXTRA = {
    "Æ": "Ae", "æ": "ae",
    "Ø": "O", "ø": "o",
    "Œ": "Oe", "œ": "oe",
    "Ð": "D", "ð": "d",
    "Đ": "D", "đ": "d",
    "Þ": "Th", "þ": "th",
    "Ł": "L", "ł": "l",
    "Ħ": "H", "ħ": "h",
    "Ŧ": "T", "ŧ": "t",
    "Ŀ": "L", "ŀ": "l",
    "Ĳ": "IJ", "ĳ": "ij",
    "ß": "ss", "ı": "i", "ĸ": "k", "ſ": "s", "ŉ": "'n",
}
_DEBURR_TABLE = str.maketrans(_DEBURR_EXTRA)


def deburr(text: str) -> str:
    """Remove accent marks and fold Latin ligatures/special letters to ASCII."""
    decomposed = unicodedata.normalize("NFD", str(text or ""))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_DEBURR_TABLE)


def _base_normalize(text: str) -> str:
    return _STRIP_RE.sub("", deburr(text)).lower()


def _spell_symbols(text: str) -> str:
    # single replacement each
    text = text.replace("8", "eight", 1)
    return text.replace("&", "and", 1)


def normalize_name(name: str) -> str:
    """Normalize a catalog display name; a trailing "/r" becomes "recipes"."""
    out = _spell_symbols(_base_normalize(name))
    if out.endswith("/r"):
        out = out[:-2] + "recipes"
    return out


def normalize_query(query: str) -> str:
    """Normalize a query; a trailing "/r" becomes "recipe" (singular, so it is
    contained in a name ending with "recipes")."""
    out = _spell_symbols(_base_normalize(query))
    if out.endswith("/r"):
        out = out[:-2] + "recipe"
    return out


def compact(text: str) -> str:
    """Trim, drop whitespace and lower-case (used for alternate keywords)."""
    return _WS_RE.sub("", str(text or "").strip()).lower()


def _matches_easter_egg(entry: CatalogEntry, query: str, session: Optional[SearchSession]) -> bool:
    if session is not None and session.easter_egg_activated:
        return False
    if len(query) < EASTER_EGG_MIN_QUERY:
        return False
    return query.lower() == entry.name.lower()[: len(query)]


def matches(entry: CatalogEntry, query: Optional[str], session: Optional[SearchSession] = None) -> bool:
    """Return True if query selects entry.

    `session` only matters for the easter egg; without one it behaves as a
    fresh session.
    """
    query = query or ""
    if not query.strip():
        return False

    if entry.is_easter_egg:
        return _matches_easter_egg(entry, query, session)

    if normalize_query(query) in normalize_name(entry.name):
        return True

    # keywords see the deburred, stripped query but not the symbol spelling
    needle = _base_normalize(query)
    return any(needle in compact(kw) for kw in entry.keywords)


def find_first(
    entries: Iterable[CatalogEntry],
    query: Optional[str],
    session: Optional[SearchSession] = None,
) -> Optional[CatalogEntry]:
    """Return the first entry (catalog order) matching query, or None."""
    for entry in entries:
        if matches(entry, query, session):
            return entry
    return None


def filter_entries(
    entries: Iterable[CatalogEntry],
    query: Optional[str],
    session: Optional[SearchSession] = None,
    limit: Optional[int] = None,
) -> List[CatalogEntry]:
    """Return all matching entries in catalog order (no scoring)."""
    out: List[CatalogEntry] = []
    for entry in entries:
        if limit is not None and len(out) >= limit:
            break
        if matches(entry, query, session):
            out.append(entry)
    return out
