import pytest

from core.catalog import CatalogEntry, Category, SearchSession, filter_entries, find_first, matches
from core.catalog.builder import easter_egg_entry
from core.catalog.matcher import deburr, normalize_name, normalize_query


def entry(name, keywords=(), category=Category.ITEM):
    return CatalogEntry(name=name, category=category, index=0, keywords=tuple(keywords))


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_blank_query_never_matches(query) -> None:
    assert matches(entry("Fire Ball"), query) is False
    assert matches(entry("Anything", keywords=["x"]), query) is False
    assert matches(easter_egg_entry(), query) is False


@pytest.mark.parametrize(
    "name,query",
    [
        ("Dian Cécht", "dian cecht"),
        ("Rhava Búral", "rhava bural"),
        ("32-bit Coin", "32 bit"),
        ("Tamako-Death", "tamako death"),
        ("O.D.", "od"),
        ("Fire Ball", "fireball"),
        ("Snakebite", "snake bite"),
        ("Aries' Horns", "aries horns"),
        ("Vul'Sha", "vulsha"),
        ("Dragon's Wrath", "DRAGONS WRATH"),
    ],
)
def test_normalization_absorbs_naming_noise(name, query) -> None:
    assert matches(entry(name), query) is True


def test_ampersand_is_spelled_out() -> None:
    assert matches(entry("Fish & Chips"), "fish and chips") is True
    assert matches(entry("Macaroni and Cheese"), "macaroni & cheese") is True


def test_eight_is_spelled_out() -> None:
    assert matches(entry("Eight Bit Coin"), "8-bit") is True
    assert matches(entry("8-bit Coin"), "eight bit") is True


def test_recipe_suffix_asymmetry() -> None:
    assert normalize_name("Something/R") == "somethingrecipes"
    assert normalize_query("something/r") == "somethingrecipe"
    assert matches(entry("Something/r"), "something/r") is True
    assert matches(entry("Mont Blanc/R"), "mont blanc recipe") is True
    assert matches(entry("Mont Blanc/R"), "mont blanc recipes") is True


def test_substring_only_no_fuzzy() -> None:
    assert matches(entry("Fire Ball"), "ball") is True
    assert matches(entry("Fire Ball"), "fire bal") is True
    assert matches(entry("Fire Ball"), "fire balls") is False
    assert matches(entry("Fire Ball"), "fier") is False


def test_keyword_match() -> None:
    direct = entry("Fire Ball", keywords=["fireball"])
    assert matches(direct, "fireball") is True

    via_keyword = entry("Flame Orb", keywords=["fireball"])
    assert matches(via_keyword, "fireball") is True
    assert matches(via_keyword, "orb") is True
    assert matches(via_keyword, "ice") is False


def test_keyword_whitespace_is_ignored() -> None:
    warp = entry("Warp Room", keywords=["  Fast Travel "], category=Category.MISC)
    assert matches(warp, "fasttravel") is True
    assert matches(warp, "fast travel") is True


@pytest.mark.parametrize(
    "keyword,query",
    [
        ("fast travel", "fast-travel"),
        ("Great Sword", "great-sword"),
        ("od", "o.d."),
        ("aries horns", "aries' horns"),
        ("bural", "búral"),
    ],
)
def test_keyword_path_strips_query_punctuation(keyword, query) -> None:
    assert matches(entry("Unrelated", keywords=[keyword]), query) is True


def test_creature_number_keyword() -> None:
    bloodless = entry("Bloodless", keywords=["8"], category=Category.CREATURE)
    assert matches(bloodless, "8") is True
    assert matches(entry("Morte", keywords=["12"], category=Category.CREATURE), "12") is True


def test_keyword_path_skips_symbol_spelling() -> None:
    # "&" is only spelled out on the name path
    item = entry("Platter", keywords=["fish & chips"])
    assert matches(item, "fish&chips") is True
    assert matches(item, "fish and chips") is False


def test_easter_egg_requires_exact_prefix() -> None:
    egg = easter_egg_entry()
    assert matches(egg, "za w") is True
    assert matches(egg, "ZA WARUDO") is True
    assert matches(egg, "za warudo!") is False
    assert matches(egg, "za") is False
    assert matches(egg, "za ") is False
    assert matches(egg, "warudo") is False
    # no normalization on the secret path
    assert matches(egg, "zawa") is False


def test_easter_egg_is_one_shot() -> None:
    egg = easter_egg_entry()
    session = SearchSession()
    assert matches(egg, "za w", session) is True
    session.easter_egg_activated = True
    assert matches(egg, "za w", session) is False


def test_session_does_not_affect_regular_entries() -> None:
    session = SearchSession(easter_egg_activated=True)
    assert matches(entry("Fire Ball"), "fire", session) is True


def test_deburr_folds_special_letters() -> None:
    assert deburr("Cécht") == "Cecht"
    assert deburr("Ærø") == "Aero"
    assert deburr("Straße") == "Strasse"
    assert deburr("Ŧŧ Ŀŀ") == "Tt Ll"
    assert deburr("Ĳssel") == "IJssel"
    assert deburr("ŉ") == "'n"


def test_find_first_and_filter_keep_catalog_order() -> None:
    rows = [
        entry("Fire Ball"),
        entry("Flame Orb", keywords=["fire"]),
        entry("Ice Lance"),
        easter_egg_entry(),
    ]
    assert find_first(rows, "fire") is rows[0]
    assert filter_entries(rows, "fire") == rows[:2]
    assert filter_entries(rows, "fire", limit=1) == rows[:1]
    assert find_first(rows, "thunder") is None
    assert filter_entries(rows, "") == []
