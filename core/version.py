# -*- coding: utf-8 -*-
"""Project / catalog data version helpers (conf/version.json)."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict

_KEYS = ("project_version", "data_version")


def _version_path() -> Path:
    return Path(__file__).resolve().parents[1] / "conf" / "version.json"


@lru_cache(maxsize=1)
def _load_version_file() -> Dict[str, str]:
    path = _version_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: str(data[k]).strip() for k in _KEYS if isinstance(data.get(k), str) and data[k].strip()}


def project_version() -> str:
    return _load_version_file().get("project_version", "unknown")


def data_version() -> str:
    # data dumps without their own stamp follow the code release
    return _load_version_file().get("data_version") or project_version()


def versions() -> Dict[str, str]:
    return {"project_version": project_version(), "data_version": data_version()}
