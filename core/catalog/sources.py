# -*- coding: utf-8 -*-
"""Static category source lists (creatures, areas, shards, items, misc).

Each list is loaded once from a YAML or JSON file and kept in memory. Records
are addressed by their position in their own list; creatures are additionally
addressed by their 1-based `number`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from core.catalog.models import Category, SOURCE_CATEGORIES

logger = logging.getLogger(__name__)


SOURCE_STEMS: Dict[Category, str] = {
    Category.CREATURE: "demons",
    Category.AREA: "areas",
    Category.SHARD: "shards",
    Category.ITEM: "items",
    Category.MISC: "misc",
}

_SOURCE_SUFFIXES = (".yaml", ".yml", ".json")


class SourceError(RuntimeError):
    pass


def localized(value: Any, locale: str = "en") -> str:
    """Pick the locale string out of a `{locale: text}` mapping.

    Plain strings are returned as-is so hand-written data may skip the mapping.
    """
    if isinstance(value, dict):
        text = value.get(locale)
        return str(text) if text is not None else ""
    if value is None:
        return ""
    return str(value)


def find_source_file(data_dir: Path, category: Category) -> Optional[Path]:
    stem = SOURCE_STEMS[category]
    for ext in _SOURCE_SUFFIXES:
        candidate = Path(data_dir) / f"{stem}{ext}"
        if candidate.exists():
            return candidate
    return None


def _read_records(path: Path) -> List[Dict[str, Any]]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"Cannot read source file: {path}") from exc
    try:
        if path.suffix.lower() == ".json":
            doc = json.loads(text)
        else:
            doc = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise SourceError(f"Malformed source file: {path}") from exc

    if doc is None:
        return []
    if not isinstance(doc, list):
        raise SourceError(f"Source file must hold a list of records: {path}")
    out: List[Dict[str, Any]] = []
    for pos, row in enumerate(doc):
        if not isinstance(row, dict):
            raise SourceError(f"{path.name}[{pos}] is not a mapping")
        out.append(row)
    return out


@dataclass(frozen=True)
class CatalogSources:
    creatures: Sequence[Dict[str, Any]] = field(default_factory=tuple)
    areas: Sequence[Dict[str, Any]] = field(default_factory=tuple)
    shards: Sequence[Dict[str, Any]] = field(default_factory=tuple)
    items: Sequence[Dict[str, Any]] = field(default_factory=tuple)
    misc: Sequence[Dict[str, Any]] = field(default_factory=tuple)

    @classmethod
    def load(cls, data_dir: Path) -> "CatalogSources":
        """Load every category list found in data_dir (missing files load as empty)."""
        base = Path(data_dir)
        if not base.is_dir():
            raise SourceError(f"Data directory not found: {base}")

        lists: Dict[Category, List[Dict[str, Any]]] = {}
        for cat in SOURCE_CATEGORIES:
            path = find_source_file(base, cat)
            if path is None:
                logger.warning("No %s source in %s", SOURCE_STEMS[cat], base)
                lists[cat] = []
                continue
            lists[cat] = _read_records(path)
            logger.debug("Loaded %d %s records from %s", len(lists[cat]), cat.value, path)

        return cls(
            creatures=tuple(lists[Category.CREATURE]),
            areas=tuple(lists[Category.AREA]),
            shards=tuple(lists[Category.SHARD]),
            items=tuple(lists[Category.ITEM]),
            misc=tuple(lists[Category.MISC]),
        )

    def records(self, category: Category) -> Sequence[Dict[str, Any]]:
        if category is Category.CREATURE:
            return self.creatures
        if category is Category.AREA:
            return self.areas
        if category is Category.SHARD:
            return self.shards
        if category is Category.ITEM:
            return self.items
        if category is Category.MISC:
            return self.misc
        return ()

    def record(self, category: Category, index: Optional[int]) -> Optional[Dict[str, Any]]:
        """Return the source record at (category, index), or None when out of range."""
        if index is None:
            return None
        rows = self.records(category)
        try:
            pos = int(index)
        except (TypeError, ValueError):
            return None
        if pos < 0 or pos >= len(rows):
            return None
        return rows[pos]

    def creature_by_number(self, number: Any) -> Optional[Dict[str, Any]]:
        """Look up a creature by its 1-based number."""
        try:
            n = int(number)
        except (TypeError, ValueError):
            return None
        if n < 1:
            return None
        return self.record(Category.CREATURE, n - 1)

    def counts(self) -> Dict[str, int]:
        return {cat.value: len(self.records(cat)) for cat in SOURCE_CATEGORIES}
