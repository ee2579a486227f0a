# -*- coding: utf-8 -*-
"""Flatten the category source lists into searchable catalog entries."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from core.catalog.models import EASTER_EGG_NAME, CatalogEntry, Category, SOURCE_CATEGORIES
from core.catalog.sources import CatalogSources, localized


def _as_text(val: Any) -> str:
    if val is None:
        return ""
    return str(val)


def _locale_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    kw = record.get("keywords")
    if not isinstance(kw, dict):
        return []
    rows = kw.get(locale)
    if isinstance(rows, str):
        return [rows]
    if isinstance(rows, (list, tuple)):
        return [_as_text(x) for x in rows]
    return []


def _creature_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    # unknown creatures can be looked up by number alone
    return [_as_text(record.get("number"))]


def _area_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    return []


def _shard_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    return [_as_text(record.get("type"))]


def _item_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    return [_as_text(record.get("type")), _as_text(record.get("subtype"))] + _locale_keywords(record, locale)


def _misc_keywords(record: Dict[str, Any], locale: str) -> List[str]:
    return _locale_keywords(record, locale)


KEYWORD_EXTRACTORS: Dict[Category, Callable[[Dict[str, Any], str], List[str]]] = {
    Category.CREATURE: _creature_keywords,
    Category.AREA: _area_keywords,
    Category.SHARD: _shard_keywords,
    Category.ITEM: _item_keywords,
    Category.MISC: _misc_keywords,
}


def make_entry(record: Dict[str, Any], index: int, category: Category, locale: str = "en") -> CatalogEntry:
    keywords = tuple(k for k in KEYWORD_EXTRACTORS[category](record, locale) if k)
    return CatalogEntry(
        name=localized(record.get("name"), locale),
        category=category,
        index=index,
        disambiguate=bool(record.get("disambiguate") or False),
        keywords=keywords,
    )


def easter_egg_entry() -> CatalogEntry:
    return CatalogEntry(name=EASTER_EGG_NAME, category=Category.EASTER_EGG)


def build_catalog(sources: CatalogSources, locale: str = "en") -> List[CatalogEntry]:
    """Return the flattened entry list (creatures, areas, shards, items, misc, easter egg).

    Built fresh on every call; entries carry no state of their own.
    """
    out: List[CatalogEntry] = []
    for cat in SOURCE_CATEGORIES:
        for index, record in enumerate(sources.records(cat)):
            out.append(make_entry(record, index, cat, locale))
    out.append(easter_egg_entry())
    return out
