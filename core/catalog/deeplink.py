# -*- coding: utf-8 -*-
"""Resolve a selection from a URL (`?q=<query>`)."""

from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qs, urlsplit

from core.catalog.builder import build_catalog
from core.catalog.matcher import find_first
from core.catalog.models import CatalogEntry, SearchSession
from core.catalog.sources import CatalogSources

QUERY_PARAM = "q"


def query_from_url(url: str) -> Optional[str]:
    """Extract the `q` parameter from a full URL or a bare query string."""
    text = str(url or "").strip()
    if not text:
        return None
    if "?" in text or "://" in text or text.startswith("/"):
        qs = urlsplit(text).query
    else:
        qs = text.lstrip("?")
    values = parse_qs(qs, keep_blank_values=False).get(QUERY_PARAM) or []
    return values[0] if values else None


def selection_from_url(
    url: str,
    sources: CatalogSources,
    session: Optional[SearchSession] = None,
    locale: str = "en",
) -> Optional[CatalogEntry]:
    """Return the first catalog entry matching the URL's `q`, or None."""
    term = query_from_url(url)
    if not term:
        return None
    return find_first(build_catalog(sources, locale), term, session)
