import pytest

from core.catalog import (
    CatalogSources,
    Category,
    GeoJsonCanvas,
    SearchSession,
    SelectionResolver,
    SoundEvents,
    build_catalog,
    find_first,
)
from core.catalog.builder import easter_egg_entry, make_entry
from core.catalog.resolver import chest_label, creature_ref_number


def _resolver(sources):
    canvas = GeoJsonCanvas()
    sounds = SoundEvents()
    return SelectionResolver(sources, canvas, sounds), canvas, sounds


def _entry(sources, category, index):
    return make_entry(sources.record(category, index), index, category)


def _summary(canvas):
    return [(f["properties"]["kind"], f["properties"]["label"]) for f in canvas.features]


def test_creature_rooms_marker_vs_room(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    seen = []
    payload = resolver.resolve(_entry(sources, Category.CREATURE, 0), SearchSession(), seen.append)

    assert _summary(canvas) == [("marker", "Morte"), ("room", "Morte")]
    assert canvas.features[0]["geometry"] == {"type": "Point", "coordinates": [1.5, 1.5]}
    assert canvas.bounds == (1.5, 1.0, 3.0, 2.0)
    assert payload == {"type": "creature", "info": sources.creatures[0]}
    assert seen == [payload]
    assert payload["info"] is sources.creatures[0]


def test_selected_creature_keeps_room_marker_style() -> None:
    sources = CatalogSources(
        creatures=(
            {"number": 1, "name": {"en": "Morte"}, "rooms": [{"coords": [1, 1], "quantity": 2, "marker": "swarm"}]},
        )
    )
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.CREATURE, 0), SearchSession())
    assert canvas.features[0]["properties"]["marker"] == "swarm"


def test_boss_rooms_are_polygons(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.CREATURE, 2), SearchSession())
    assert _summary(canvas) == [("room", "Vepar")]


def test_creature_without_rooms_draws_areas_with_geo(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.CREATURE, 1), SearchSession())
    # area 2 has no geometry
    assert _summary(canvas) == [("region", "Galleon Minerva")]


def test_marker_override_creature() -> None:
    creatures = tuple(
        {"number": n + 1, "name": {"en": f"C{n + 1}"}, "type": "boss", "rooms": [{"coords": [n, 0]}]}
        for n in range(44)
    )
    sources = CatalogSources(creatures=creatures)
    resolver, canvas, _ = _resolver(sources)

    resolver.resolve(_entry(sources, Category.CREATURE, 43), SearchSession())
    assert _summary(canvas) == [("marker", "C44")]

    resolver.resolve(_entry(sources, Category.CREATURE, 42), SearchSession())
    assert _summary(canvas) == [("room", "C43")]


def test_area_selection(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    payload = resolver.resolve(_entry(sources, Category.AREA, 1), SearchSession())
    assert _summary(canvas) == [("region", "Arvantville")]
    assert canvas.bounds == (17.0, 25.0, 23.0, 28.0)
    assert payload["type"] == "area"


def test_shard_drops(sources) -> None:
    resolver, canvas, _ = _resolver(sources)

    resolver.resolve(_entry(sources, Category.SHARD, 0), SearchSession())
    assert _summary(canvas) == [("marker", "Morte"), ("room", "Morte")]
    # drop markers carry no style hint
    assert "marker" not in canvas.features[0]["properties"]

    resolver.resolve(_entry(sources, Category.SHARD, 1), SearchSession())
    assert _summary(canvas) == [("region", "Galleon Minerva")]


def test_alchemy_shard_points_at_alchemist(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.SHARD, 2), SearchSession())
    assert _summary(canvas) == [("marker", "Johannes")]
    assert canvas.features[0]["geometry"]["coordinates"] == [21.5, 27.5]


def test_out_of_range_creature_refs_are_skipped(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    payload = resolver.resolve(_entry(sources, Category.SHARD, 3), SearchSession())
    assert _summary(canvas) == [("marker", "Craftwork")]
    assert payload["type"] == "shard"


def test_item_chests(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.ITEM, 0), SearchSession())
    # third chest lacks `area` and is skipped
    assert _summary(canvas) == [("marker", "Green chest"), ("region", "Arvantville")]
    assert canvas.features[0]["properties"]["marker"] == "green"


def test_chest_in_first_area_without_room(sources) -> None:
    items = ({"name": {"en": "Cloth Tunic"}, "chests": [{"area": 0, "room": None}]},)
    sources = CatalogSources(areas=sources.areas, items=items)
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.ITEM, 0), SearchSession())
    assert _summary(canvas) == [("region", "Galleon Minerva")]


def test_item_quests(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.ITEM, 2), SearchSession())
    assert _summary(canvas) == [("marker", "Lindsay")]

    # unknown quest giver: hub town
    resolver.resolve(_entry(sources, Category.ITEM, 3), SearchSession())
    assert _summary(canvas) == [("region", "Arvantville")]


def test_item_landmarks_drops_and_rooms(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.ITEM, 4), SearchSession())
    assert _summary(canvas) == [
        ("marker", "Dominique"),
        ("marker", "Johannes"),
        ("marker", "Harry"),
        ("room", "Vepar"),
        ("marker", "Rhava Búral"),
    ]
    assert canvas.features[-1]["properties"]["marker"] == "hidden"


def test_cook_and_misc(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    resolver.resolve(_entry(sources, Category.ITEM, 1), SearchSession())
    assert _summary(canvas) == [("marker", "Johannes")]

    payload = resolver.resolve(_entry(sources, Category.MISC, 0), SearchSession())
    assert _summary(canvas) == [("marker", "Warp Room")]
    assert payload["type"] == "misc"


def test_resolve_clears_previous_drawing(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    entry = _entry(sources, Category.CREATURE, 0)
    resolver.resolve(entry, SearchSession())
    resolver.resolve(entry, SearchSession())
    assert len(canvas.features) == 2


def test_stale_entry_resolves_to_nothing(sources) -> None:
    resolver, canvas, _ = _resolver(sources)
    stale = make_entry({"name": {"en": "Gone"}}, 50, Category.ITEM)
    seen = []
    assert resolver.resolve(stale, SearchSession(), seen.append) is None
    assert seen == []
    assert canvas.features == []


def test_easter_egg_activation(sources) -> None:
    resolver, canvas, sounds = _resolver(sources)
    session = SearchSession()
    seen = []

    assert resolver.resolve(easter_egg_entry(), session, seen.append) is None
    assert session.easter_egg_activated is True
    assert session.meta["debug_mode"] is True
    assert sounds.events == [{"event": "sound", "src": "/timestop.mp3", "volume": 0.35}]
    assert seen == []
    assert canvas.features == []


def test_round_trip_first_match_is_stable(sources) -> None:
    session = SearchSession()
    resolver, _, _ = _resolver(sources)

    first = find_first(build_catalog(sources), "fire", session)
    assert first.name == "Fire Ball"
    assert first.category is Category.SHARD
    resolver.resolve(first, session)
    assert find_first(build_catalog(sources), "fire", session) == first

    egg = find_first(build_catalog(sources), "za w", session)
    assert egg is not None and egg.is_easter_egg
    resolver.resolve(egg, session)
    assert find_first(build_catalog(sources), "za w", session) is None


@pytest.mark.parametrize(
    "ref,number",
    [(5, 5), ([7, 0.02], 7), ({"id": 9, "rate": 0.1}, 9), ("11", 11), ([], None), ({}, None), (True, None), ("x", None)],
)
def test_creature_ref_number(ref, number) -> None:
    assert creature_ref_number(ref) == number


def test_chest_label() -> None:
    assert chest_label("CHEST.RED") == "Red chest"
    assert chest_label("HIDDEN.WALL") == "Breakable wall"
    assert chest_label(None) == "Chest"
