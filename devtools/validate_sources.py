#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Cross-reference checks for the category lists.

Reports data problems the search/map layer silently skips at runtime:
creature references out of range, areas without geometry, chests without
both `area` and `room`, names missing for the locale, duplicate names.

Usage:
  python3 devtools/validate_sources.py [--data-dir PATH] [--locale en] [--enforce]
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.catalog import CatalogSources, Category, SourceError  # noqa: E402
from core.catalog.models import SOURCE_CATEGORIES  # noqa: E402
from core.catalog.resolver import HUB_AREA_INDEX, creature_ref_number  # noqa: E402
from core.catalog.sources import localized  # noqa: E402

console = Console()


def _check_creature_refs(sources: CatalogSources, label: str, refs: Any, out: List[str]) -> None:
    for ref in refs or []:
        number = creature_ref_number(ref)
        if number is None or sources.creature_by_number(number) is None:
            out.append(f"{label}: creature reference {ref!r} out of range")


def _check_area_ref(sources: CatalogSources, label: str, area: Any, out: List[str], *, need_geo: bool = True) -> None:
    rec = sources.record(Category.AREA, area)
    if rec is None:
        out.append(f"{label}: area {area!r} out of range")
    elif need_geo and not rec.get("geo"):
        out.append(f"{label}: area {area!r} has no geo")


def validate_sources(sources: CatalogSources, locale: str = "en") -> Dict[str, List[str]]:
    """Return {"errors": [...], "warnings": [...]}."""
    errors: List[str] = []
    warnings: List[str] = []

    names: Counter = Counter()
    for cat in SOURCE_CATEGORIES:
        for index, rec in enumerate(sources.records(cat)):
            name = localized(rec.get("name"), locale)
            if not name:
                errors.append(f"{cat.value}[{index}]: no '{locale}' name")
            elif not rec.get("disambiguate"):
                names[name] += 1

    for index, rec in enumerate(sources.creatures):
        label = f"creature[{index}] {localized(rec.get('name'), locale)}"
        if rec.get("number") != index + 1:
            warnings.append(f"{label}: number {rec.get('number')!r} != position {index + 1}")
        if not rec.get("rooms"):
            for area in rec.get("areas") or []:
                _check_area_ref(sources, label, area, warnings)

    for index, rec in enumerate(sources.areas):
        if not rec.get("geo"):
            warnings.append(f"area[{index}] {localized(rec.get('name'), locale)}: no geo")

    for index, rec in enumerate(sources.shards):
        label = f"shard[{index}] {localized(rec.get('name'), locale)}"
        _check_creature_refs(sources, label, rec.get("demons"), errors)

    for cat in (Category.ITEM, Category.MISC):
        for index, rec in enumerate(sources.records(cat)):
            label = f"{cat.value}[{index}] {localized(rec.get('name'), locale)}"
            _check_creature_refs(sources, label, rec.get("demons"), errors)
            for chest in rec.get("chests") or []:
                if not isinstance(chest, dict) or "area" not in chest or "room" not in chest:
                    warnings.append(f"{label}: chest {chest!r} lacks area/room (skipped on map)")
                elif not chest.get("room") and chest.get("area") is not None:
                    _check_area_ref(sources, label, chest["area"], warnings)
            if rec.get("quest") and sources.record(Category.AREA, HUB_AREA_INDEX) is None:
                errors.append(f"{label}: quest needs hub area {HUB_AREA_INDEX}")

    for name, n in sorted(names.items()):
        if n > 1:
            warnings.append(f"'{name}' appears {n} times without disambiguate")

    return {"errors": errors, "warnings": warnings}


def main() -> int:
    from core.config import get_config

    cfg = get_config()
    p = argparse.ArgumentParser(description="Validate Ritual Map category lists.")
    p.add_argument("--data-dir", default=str(cfg.data_dir()))
    p.add_argument("--locale", default=cfg.locale())
    p.add_argument("--enforce", action="store_true", help="exit non-zero on errors (CI)")
    p.add_argument("--strict", action="store_true", help="treat warnings as errors (only when --enforce)")
    args = p.parse_args()

    try:
        sources = CatalogSources.load(Path(args.data_dir).expanduser())
    except SourceError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    report = validate_sources(sources, args.locale)
    table = Table(title="Source validation", box=None, header_style="bold cyan")
    table.add_column("Level", justify="center")
    table.add_column("Issue")
    for msg in report["errors"]:
        table.add_row("[red]ERROR[/red]", msg)
    for msg in report["warnings"]:
        table.add_row("[yellow]WARN[/yellow]", msg)
    console.print(table)
    console.print(f"[dim]errors={len(report['errors'])}, warnings={len(report['warnings'])}[/dim]")

    if not args.enforce:
        return 0
    if report["errors"]:
        return 2
    if args.strict and report["warnings"]:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
