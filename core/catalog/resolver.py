# -*- coding: utf-8 -*-
"""Turn a selected catalog entry into map drawing calls.

The resolver re-selects the source list by category, draws whatever
locations the record carries (rooms, areas, chests, quest givers, creature
drops...) through a `Renderer`, and hands `{type, info}` to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from core.catalog.geometry import Renderer, SoundPlayer
from core.catalog.models import CatalogEntry, Category, SearchSession
from core.catalog.sources import CatalogSources, localized

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]

EASTER_EGG_SOUND = "/timestop.mp3"
EASTER_EGG_VOLUME = 0.35

# the hub town; quest rewards from unknown givers are drawn as this area
HUB_AREA_INDEX = 1

# creature whose rooms are always drawn as markers, even without a quantity
MARKER_OVERRIDE_CREATURE_INDEX = 43

NPC_LOCATIONS: Dict[str, List[int]] = {
    "Lindsay": [20, 27],
    "Susie": [18, 27],
    "Abigail": [18, 26],
    "Dominique": [19, 27],
    "Johannes": [21, 27],
    "Harry": [19, 26],
}

CHEST_LABELS: Dict[str, str] = {
    "CHEST.WOODEN": "Wooden chest",
    "CHEST.GREEN": "Green chest",
    "CHEST.RED": "Red chest",
    "CHEST.BLUE": "Blue chest",
    "HIDDEN.WALL": "Breakable wall",
}


def chest_label(chest_type: Any) -> str:
    return CHEST_LABELS.get(str(chest_type or ""), "Chest")


def creature_ref_number(ref: Any) -> Optional[int]:
    """Extract the creature number from a drop reference.

    Drops are written as a bare number, `[number, rate]` or `{id: number, ...}`.
    """
    if isinstance(ref, (list, tuple)):
        ref = ref[0] if ref else None
    elif isinstance(ref, dict):
        ref = ref.get("id")
    if isinstance(ref, bool) or ref is None:
        return None
    try:
        return int(ref)
    except (TypeError, ValueError):
        return None


def _positive(val: Any) -> bool:
    try:
        return float(val) > 0
    except (TypeError, ValueError):
        return False


class SelectionResolver:
    def __init__(
        self,
        sources: CatalogSources,
        renderer: Renderer,
        sound: Optional[SoundPlayer] = None,
        *,
        locale: str = "en",
        sound_src: str = EASTER_EGG_SOUND,
        sound_volume: float = EASTER_EGG_VOLUME,
    ):
        self.sources = sources
        self.renderer = renderer
        self.sound = sound
        self.locale = locale
        self.sound_src = sound_src
        self.sound_volume = sound_volume
        self._handlers: Dict[Category, Callable[[CatalogEntry, Dict[str, Any]], None]] = {
            Category.CREATURE: self._draw_selected_creature,
            Category.AREA: self._draw_area_record,
            Category.SHARD: self._draw_shard,
            Category.ITEM: self._draw_item,
            Category.MISC: self._draw_item,
        }

    def _name(self, record: Dict[str, Any]) -> str:
        return localized(record.get("name"), self.locale)

    # ----------------- entry point -----------------

    def resolve(
        self,
        entry: CatalogEntry,
        session: SearchSession,
        callback: Optional[Callable[[Payload], None]] = None,
    ) -> Optional[Payload]:
        """Draw the selection and return `{type, info}` (None for the easter egg
        or when the record no longer exists)."""
        self.renderer.clear()

        if entry.is_easter_egg:
            self._activate_easter_egg(session)
            return None

        record = self.sources.record(entry.category, entry.index)
        if record is None:
            logger.warning("No %s record at index %r", entry.category.value, entry.index)
            return None

        self._handlers[entry.category](entry, record)

        payload: Payload = {"type": entry.category.value, "info": record}
        if callback is not None:
            callback(payload)
        self.renderer.zoom_to_bounds()
        return payload

    def _activate_easter_egg(self, session: SearchSession) -> None:
        if self.sound is not None:
            self.sound.play(self.sound_src, self.sound_volume)
        session.activate_easter_egg()
        session.meta["debug_mode"] = True

    # ----------------- shared drawing -----------------

    def _draw_area(self, area_index: Any) -> None:
        area = self.sources.record(Category.AREA, area_index)
        if area is None:
            logger.debug("Area reference out of range: %r", area_index)
            return
        geo = area.get("geo")
        if geo:
            self.renderer.draw_geo(geo, self._name(area))

    def _draw_creature(self, creature: Dict[str, Any], *, force_markers: bool = False, room_markers: bool = True) -> None:
        name = self._name(creature)
        rooms = creature.get("rooms") or []
        if rooms:
            for room in rooms:
                if not isinstance(room, dict):
                    continue
                coords = room.get("coords")
                if force_markers or (creature.get("type") != "boss" and _positive(room.get("quantity"))):
                    self.renderer.draw_marker(coords, name, room.get("marker") if room_markers else None)
                else:
                    self.renderer.draw_room_geo(coords, name)
            return
        for area_index in creature.get("areas") or []:
            self._draw_area(area_index)

    def _draw_drops(self, refs: Sequence[Any]) -> None:
        for ref in refs:
            number = creature_ref_number(ref)
            creature = self.sources.creature_by_number(number) if number is not None else None
            if creature is None:
                logger.warning("Creature reference out of range: %r", ref)
                continue
            self._draw_creature(creature, room_markers=False)

    def _draw_landmark(self, npc: str) -> None:
        self.renderer.draw_marker(NPC_LOCATIONS[npc], npc)

    # ----------------- per category -----------------

    def _draw_selected_creature(self, entry: CatalogEntry, record: Dict[str, Any]) -> None:
        self._draw_creature(record, force_markers=(entry.index == MARKER_OVERRIDE_CREATURE_INDEX))

    def _draw_area_record(self, entry: CatalogEntry, record: Dict[str, Any]) -> None:
        geo = record.get("geo")
        if geo:
            self.renderer.draw_geo(geo, self._name(record))

    def _draw_shard(self, entry: CatalogEntry, record: Dict[str, Any]) -> None:
        if record.get("demons"):
            self._draw_drops(record["demons"])
        elif record.get("alchemy"):
            self._draw_landmark("Johannes")

        name = self._name(record)
        for room in record.get("rooms") or []:
            self.renderer.draw_marker(room, name)

    def _draw_item(self, entry: CatalogEntry, record: Dict[str, Any]) -> None:
        for chest in record.get("chests") or []:
            if not isinstance(chest, dict) or "area" not in chest or "room" not in chest:
                continue
            if chest.get("room"):
                self.renderer.draw_marker(chest["room"], chest_label(chest.get("type")), chest.get("marker"))
            elif chest.get("area") is not None:
                self._draw_area(chest["area"])

        quest = record.get("quest")
        if quest:
            npc = quest.get("npc") if isinstance(quest, dict) else None
            if npc in ("Lindsay", "Susie", "Abigail"):
                self._draw_landmark(npc)
            else:
                self._draw_area(HUB_AREA_INDEX)

        if record.get("shop"):
            self._draw_landmark("Dominique")
        if record.get("alchemy"):
            self._draw_landmark("Johannes")
        if record.get("cook"):
            self._draw_landmark("Johannes")
        if record.get("farm"):
            self._draw_landmark("Harry")

        if record.get("demons"):
            self._draw_drops(record["demons"])

        name = self._name(record)
        for room in record.get("rooms") or []:
            if isinstance(room, dict):
                self.renderer.draw_marker(room.get("coords"), name, room.get("marker"))
