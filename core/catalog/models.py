# -*- coding: utf-8 -*-
"""Search catalog data model (entries, categories, per-session state)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Category(str, Enum):
    CREATURE = "creature"
    AREA = "area"
    SHARD = "shard"
    ITEM = "item"
    MISC = "misc"
    EASTER_EGG = "easter_egg"

    @classmethod
    def parse(cls, value: Any) -> Optional["Category"]:
        key = str(value or "").strip().lower()
        if not key:
            return None
        # legacy names used by older data dumps / deep links
        key = {"demon": "creature", "easteregg": "easter_egg"}.get(key, key)
        for cat in cls:
            if cat.value == key:
                return cat
        return None


# category order of the flattened catalog
SOURCE_CATEGORIES: Tuple[Category, ...] = (
    Category.CREATURE,
    Category.AREA,
    Category.SHARD,
    Category.ITEM,
    Category.MISC,
)

EASTER_EGG_NAME = "Za Warudo"


@dataclass(frozen=True)
class CatalogEntry:
    """One searchable term.

    `index` is the position inside the entry's own category list, not a global
    id. The easter egg has no source record, so its index is None.
    """

    name: str
    category: Category
    index: Optional[int] = None
    disambiguate: bool = False
    keywords: Tuple[str, ...] = ()

    @property
    def is_easter_egg(self) -> bool:
        return self.category is Category.EASTER_EGG

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.category.value,
            "index": self.index,
            "disambiguate": self.disambiguate,
            "keywords": list(self.keywords),
        }


@dataclass
class SearchSession:
    """Mutable state that outlives a single search request.

    Only the easter egg flag lives here; it is set once by the resolver and
    never reset for the lifetime of the session.
    """

    easter_egg_activated: bool = False
    meta: Dict[str, Any] = field(default_factory=dict)

    def activate_easter_egg(self) -> bool:
        """Mark the easter egg as used. Returns False if it already was."""
        if self.easter_egg_activated:
            return False
        self.easter_egg_activated = True
        return True
