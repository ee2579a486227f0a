# -*- coding: utf-8 -*-
"""Searchable game catalog: flatten, match, resolve."""

from core.catalog.builder import build_catalog
from core.catalog.deeplink import query_from_url, selection_from_url
from core.catalog.geometry import GeoJsonCanvas, SoundEvents
from core.catalog.matcher import filter_entries, find_first, matches, normalize_name, normalize_query
from core.catalog.models import CatalogEntry, Category, SearchSession
from core.catalog.resolver import SelectionResolver
from core.catalog.sources import CatalogSources, SourceError

__all__ = [
    "CatalogEntry",
    "CatalogSources",
    "Category",
    "GeoJsonCanvas",
    "SearchSession",
    "SelectionResolver",
    "SoundEvents",
    "SourceError",
    "build_catalog",
    "filter_entries",
    "find_first",
    "matches",
    "normalize_name",
    "normalize_query",
    "query_from_url",
    "selection_from_url",
]
