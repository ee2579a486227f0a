# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import threading
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from core.catalog import CatalogEntry, CatalogSources, SearchSession, build_catalog
from core.catalog.models import SOURCE_CATEGORIES
from core.catalog.sources import SourceError, find_source_file

logger = logging.getLogger(__name__)


class SourceStore:
    """Load + hold the category source lists (thread-safe).

    Data source:
      - <data_dir>/demons.yaml, areas.yaml, shards.yaml, items.yaml, misc.yaml
        (.yml / .json accepted)

    The flattened search catalog is rebuilt from the loaded lists on every
    `catalog()` call; only the parsed lists are kept.
    """

    def __init__(self, data_dir: Path, locale: str = "en"):
        self._data_dir = Path(data_dir)
        self._locale = str(locale or "en")
        self._lock = threading.RLock()
        self._mtime: float = -1.0
        self._sources: Optional[CatalogSources] = None
        self.load(force=True)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def locale(self) -> str:
        return self._locale

    def _source_mtime(self) -> float:
        latest = 0.0
        for cat in SOURCE_CATEGORIES:
            path = find_source_file(self._data_dir, cat)
            if path is None:
                continue
            try:
                latest = max(latest, path.stat().st_mtime)
            except FileNotFoundError:
                continue
        return latest

    def load(self, force: bool = False) -> bool:
        """Load source lists if changed.

        Returns True if reload occurred.
        """
        with self._lock:
            if not self._data_dir.is_dir():
                raise SourceError(f"Data directory not found: {self._data_dir}")
            mtime = self._source_mtime()
            if (not force) and self._sources is not None and self._mtime == mtime:
                return False

            sources = CatalogSources.load(self._data_dir)
            self._sources = sources
            self._mtime = mtime
            logger.info("Catalog sources loaded from %s: %s", self._data_dir, sources.counts())
            return True

    def mtime(self) -> float:
        with self._lock:
            return float(self._mtime or 0)

    def sources(self) -> CatalogSources:
        with self._lock:
            if self._sources is None:
                raise SourceError("Catalog sources not loaded")
            return self._sources

    def catalog(self) -> List[CatalogEntry]:
        return build_catalog(self.sources(), self._locale)

    def counts(self) -> Dict[str, int]:
        return self.sources().counts()


class SessionRegistry:
    """Per-client search sessions, keyed by an opaque session id."""

    def __init__(self, max_sessions: int = 10000):
        self._lock = threading.Lock()
        self._sessions: Dict[str, SearchSession] = {}
        self._max = max(1, int(max_sessions))

    def get(self, session_id: Optional[str]) -> Tuple[str, SearchSession]:
        """Return (id, session); unknown or missing ids get a fresh session."""
        with self._lock:
            sid = str(session_id or "").strip()
            if sid and sid in self._sessions:
                return sid, self._sessions[sid]
            if len(self._sessions) >= self._max:
                # drop the oldest session (dicts keep insertion order)
                self._sessions.pop(next(iter(self._sessions)))
            sid = uuid.uuid4().hex
            session = SearchSession()
            self._sessions[sid] = session
            return sid, session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
