# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from core.catalog import (
    CatalogEntry,
    Category,
    GeoJsonCanvas,
    SearchSession,
    SelectionResolver,
    SoundEvents,
    filter_entries,
    find_first,
)
from core.version import versions

from .store import SessionRegistry, SourceStore

logger = logging.getLogger(__name__)

SESSION_COOKIE = "ritualmap_session"

router = APIRouter(prefix="/api/v1")


def get_store(request: Request) -> SourceStore:
    """Resolve the source store from app state (with optional auto-reload)."""

    store: SourceStore = request.app.state.store  # type: ignore[attr-defined]
    auto = bool(getattr(request.app.state, "auto_reload_sources", False))
    if auto:
        try:
            store.load(force=False)
        except Exception:
            # keep serving the last good data on reload errors
            logger.exception("Source reload failed; keeping previous data")
    return store


def get_session(request: Request) -> Tuple[str, SearchSession]:
    registry: SessionRegistry = request.app.state.sessions  # type: ignore[attr-defined]
    return registry.get(request.cookies.get(SESSION_COOKIE))


def _cache_headers(request: Request, *, max_age: int, etag: Optional[str] = None) -> Dict[str, str]:
    if max_age <= 0:
        return {}
    if bool(getattr(request.app.state, "auto_reload_sources", False)):
        return {}
    headers = {"Cache-Control": f"public, max-age={int(max_age)}"}
    if etag:
        headers["ETag"] = str(etag)
    return headers


def _json(
    data: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    session_id: Optional[str] = None,
) -> JSONResponse:
    resp = JSONResponse(content=data, headers=headers or {})
    if session_id:
        resp.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return resp


def _suggestion_limit(request: Request) -> int:
    return int(getattr(request.app.state, "suggestion_limit", 20) or 20)


def _session_state(session: SearchSession) -> Dict[str, Any]:
    return {
        "easter_egg_activated": session.easter_egg_activated,
        "debug_mode": bool(session.meta.get("debug_mode")),
    }


def _find_entry(entries: List[CatalogEntry], category: Category, index: Optional[int]) -> Optional[CatalogEntry]:
    for entry in entries:
        if entry.category is category and entry.index == index:
            return entry
    return None


def _resolve(request: Request, store: SourceStore, entry: CatalogEntry, session: SearchSession) -> Dict[str, Any]:
    canvas = GeoJsonCanvas()
    sounds = SoundEvents()
    resolver = SelectionResolver(
        store.sources(),
        canvas,
        sounds,
        locale=store.locale,
        sound_src=str(getattr(request.app.state, "easter_egg_sound", "/timestop.mp3")),
        sound_volume=float(getattr(request.app.state, "easter_egg_volume", 0.35)),
    )
    payload = resolver.resolve(entry, session)
    return {
        "selection": entry.to_dict(),
        "result": payload,
        "geojson": canvas.to_geojson(),
        "events": sounds.events,
        "session": _session_state(session),
    }


@router.get("/meta")
def meta(request: Request, store: SourceStore = Depends(get_store)):
    m: Dict[str, Any] = {
        "locale": store.locale,
        "counts": store.counts(),
        "suggestion_limit": _suggestion_limit(request),
    }
    m.update(versions())
    etag = f'W/"meta-{int(store.mtime())}"'
    return _json(m, headers=_cache_headers(request, max_age=60, etag=etag))


@router.get("/catalog")
def catalog(request: Request, store: SourceStore = Depends(get_store)):
    """Return the flattened search terms (easter egg excluded)."""
    items = [e.to_dict() for e in store.catalog() if not e.is_easter_egg]
    etag = f'W/"catalog-{int(store.mtime())}-{len(items)}"'
    return _json({"items": items, "count": len(items)}, headers=_cache_headers(request, max_age=300, etag=etag))


@router.get("/search")
def search(
    request: Request,
    q: str = Query(""),
    limit: Optional[int] = Query(None, ge=1, le=2000),
    store: SourceStore = Depends(get_store),
):
    """Return every matching entry, in catalog order."""
    sid, session = get_session(request)
    lim = int(limit or _suggestion_limit(request))
    items = filter_entries(store.catalog(), q, session, limit=lim)
    logger.debug("search q=%r -> %d", q, len(items))
    return _json(
        {"q": q, "items": [e.to_dict() for e in items], "count": len(items), "limit": lim},
        session_id=sid,
    )


@router.get("/select/{category}")
def select(
    category: str,
    request: Request,
    index: Optional[int] = Query(None, ge=0),
    store: SourceStore = Depends(get_store),
):
    """Resolve one selection into map features + the `{type, info}` payload."""
    cat = Category.parse(category)
    if cat is None:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    if cat is not Category.EASTER_EGG and index is None:
        raise HTTPException(status_code=400, detail="index is required")

    sid, session = get_session(request)
    entry = _find_entry(store.catalog(), cat, None if cat is Category.EASTER_EGG else index)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No {cat.value} at index {index}")
    if entry.is_easter_egg and session.easter_egg_activated:
        raise HTTPException(status_code=404, detail="Already activated")

    return _json(_resolve(request, store, entry, session), session_id=sid)


@router.get("/lookup")
def lookup(
    request: Request,
    q: str = Query(...),
    store: SourceStore = Depends(get_store),
):
    """Deep link: resolve the first match for `q`."""
    if not q.strip():
        raise HTTPException(status_code=400, detail="empty query")
    sid, session = get_session(request)
    entry = find_first(store.catalog(), q, session)
    if entry is None:
        return _json(
            {
                "q": q,
                "selection": None,
                "result": None,
                "geojson": None,
                "events": [],
                "session": _session_state(session),
            },
            session_id=sid,
        )
    out = _resolve(request, store, entry, session)
    out["q"] = q
    return _json(out, session_id=sid)
