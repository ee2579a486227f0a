# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class WebMapSettings:
    """Runtime settings for the WebMap server.

    Notes
    - data_dir holds the five category lists (YAML or JSON).
    - root_path is for reverse-proxy mount (e.g. '/map')
    """

    data_dir: Path
    locale: str = "en"
    root_path: str = ""
    cors_allow_origins: Optional[List[str]] = None
    gzip_minimum_size: int = 800
    suggestion_limit: int = 20

    @staticmethod
    def normalize_root_path(root_path: str) -> str:
        rp = (root_path or "").strip()
        if not rp:
            return ""
        if not rp.startswith("/"):
            rp = "/" + rp
        rp = rp.rstrip("/")
        return rp
