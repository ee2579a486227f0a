from pathlib import Path

import pytest

from core.catalog import CatalogSources

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_DATA_DIR = PROJECT_ROOT / "data" / "catalog"


def _name(text):
    return {"en": text}


@pytest.fixture
def sources() -> CatalogSources:
    return CatalogSources(
        creatures=(
            {
                "number": 1,
                "name": _name("Morte"),
                "type": "normal",
                "areas": [0],
                "rooms": [
                    {"coords": [1, 1], "quantity": 3},
                    {"coords": [2, 1], "quantity": 0, "marker": "x"},
                ],
            },
            {"number": 2, "name": _name("Seama"), "type": "normal", "areas": [0, 2]},
            {
                "number": 3,
                "name": _name("Vepar"),
                "type": "boss",
                "areas": [0],
                "rooms": [{"coords": [3, 1], "quantity": 1}],
            },
        ),
        areas=(
            {
                "name": _name("Galleon Minerva"),
                "geo": {"type": "Polygon", "coordinates": [[[0, 0], [4, 0], [4, 2], [0, 2], [0, 0]]]},
            },
            {
                "name": _name("Arvantville"),
                "geo": {"type": "Polygon", "coordinates": [[[17, 25], [23, 25], [23, 28], [17, 28], [17, 25]]]},
            },
            {"name": _name("Livre Ex Machina")},
        ),
        shards=(
            {"name": _name("Flame Cannon"), "type": "Conjure", "demons": [[1, 0.04]]},
            {"name": _name("Welcome Company"), "type": "Conjure", "demons": [{"id": 2, "rate": 0.03}]},
            {"name": _name("Fire Ball"), "type": "Manipulative", "alchemy": True},
            {"name": _name("Craftwork"), "type": "Manipulative", "demons": [[99, 0.1], [0, 0.1]], "rooms": [[5, 5]]},
        ),
        items=(
            {
                "name": _name("32-bit Coin"),
                "type": "Weapon",
                "subtype": "Throwing",
                "chests": [
                    {"area": 0, "room": [2, 2], "type": "CHEST.GREEN", "marker": "green"},
                    {"area": 1, "room": None},
                    {"room": [9, 9]},
                ],
            },
            {
                "name": _name("Fish & Chips"),
                "type": "Consumable",
                "subtype": "Food",
                "cook": True,
                "keywords": {"en": ["fish fry"]},
            },
            {"name": _name("O.D."), "type": "Equipment", "subtype": "Accessory", "quest": {"npc": "Lindsay"}},
            {"name": _name("Mont Blanc/R"), "type": "Recipe", "quest": {"npc": "Johannes"}},
            {
                "name": _name("Rhava Búral"),
                "type": "Weapon",
                "subtype": "Great Sword",
                "shop": True,
                "alchemy": True,
                "farm": True,
                "demons": [3],
                "rooms": [{"coords": [7, 7], "marker": "hidden"}],
            },
        ),
        misc=(
            {
                "name": _name("Warp Room"),
                "keywords": {"en": ["teleport", "fast travel"]},
                "rooms": [{"coords": [21, 20], "marker": "warp"}],
            },
        ),
    )


@pytest.fixture
def sample_data_dir() -> Path:
    return SAMPLE_DATA_DIR
