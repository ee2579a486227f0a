# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .api import router as api_router
from .settings import WebMapSettings
from .store import SessionRegistry, SourceStore
from .ui import render_index_html


def create_app(
    data_dir: Path,
    *,
    locale: str = "en",
    root_path: str = "",
    cors_allow_origins: Optional[Sequence[str]] = None,
    gzip_minimum_size: int = 800,
    auto_reload_sources: bool = False,
    suggestion_limit: int = 20,
    easter_egg_sound: str = "/timestop.mp3",
    easter_egg_volume: float = 0.35,
    static_root_dir: Optional[Path] = None,
) -> FastAPI:
    """FastAPI app factory."""

    settings = WebMapSettings(
        data_dir=Path(data_dir),
        locale=str(locale or "en"),
        root_path=WebMapSettings.normalize_root_path(root_path),
        cors_allow_origins=list(cors_allow_origins) if cors_allow_origins else None,
        gzip_minimum_size=int(gzip_minimum_size or 0),
        suggestion_limit=max(1, int(suggestion_limit or 20)),
    )

    app = FastAPI(
        title="Ritual Map API",
        version="1.0",
        root_path=settings.root_path,
        docs_url="/docs",
        redoc_url=None,
    )

    # static: audio clips / map tiles shipped next to the data
    if static_root_dir is not None:
        app.mount("/static", StaticFiles(directory=str(static_root_dir), check_dir=False), name="static")

    # state
    app.state.settings = settings
    app.state.store = SourceStore(settings.data_dir, locale=settings.locale)
    app.state.sessions = SessionRegistry()
    app.state.auto_reload_sources = bool(auto_reload_sources)
    app.state.suggestion_limit = settings.suggestion_limit
    app.state.easter_egg_sound = str(easter_egg_sound)
    app.state.easter_egg_volume = float(easter_egg_volume)

    # middleware
    if settings.gzip_minimum_size > 0:
        app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # routes
    app.include_router(api_router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        # root_path is already applied by FastAPI; still need it for frontend URL prefixing
        root = request.scope.get("root_path") or ""
        return HTMLResponse(render_index_html(app_root=str(root)))

    return app
