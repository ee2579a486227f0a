#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""apps/cli/commands/search.py

Terminal front-end for catalog search.

Notes
- Thin UI layer; matching and resolution live in `core.catalog`.
- `--select` resolves the first match and prints the drawn map features.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.cli_common import load_sources, resolve_locale, setup_logging  # noqa: E402
from core.catalog import (  # noqa: E402
    CatalogEntry,
    GeoJsonCanvas,
    SearchSession,
    SelectionResolver,
    SourceError,
    build_catalog,
    filter_entries,
    query_from_url,
)
from core.config import get_config  # noqa: E402

console = Console()


class ConsoleSound:
    """Sound player for the terminal: there is no audio, just a notice."""

    def play(self, src: str, volume: float) -> None:
        console.print(f"[magenta]♪ {src} (volume {volume:.2f})[/magenta]")


def _matches_table(query: str, rows: List[CatalogEntry]) -> Table:
    table = Table(title=f"Matches for '{query}'", border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Keywords", style="white")
    for pos, entry in enumerate(rows, 1):
        index = "-" if entry.index is None else str(entry.index)
        table.add_row(str(pos), entry.name, entry.category.value, index, ", ".join(entry.keywords))
    return table


def _features_tree(payload: Dict[str, Any], geojson: Dict[str, Any]) -> Tree:
    tree = Tree(f"[bold]{payload['type']}[/bold]")
    for feat in geojson.get("features") or []:
        props = feat.get("properties") or {}
        geom = feat.get("geometry") or {}
        kind = props.get("kind", "?")
        label = props.get("label", "")
        marker = f" ({props['marker']})" if props.get("marker") else ""
        coords = json.dumps(geom.get("coordinates"))
        if len(coords) > 80:
            coords = coords[:77] + "..."
        tree.add(f"[green]{kind}[/green] {label}{marker} [dim]{coords}[/dim]")
    if geojson.get("bbox"):
        tree.add(f"[yellow]bounds[/yellow] {geojson['bbox']}")
    return tree


def main() -> int:
    cfg = get_config()
    p = argparse.ArgumentParser(description="Search the Ritual Map catalog.")
    p.add_argument("query", nargs="*", help="free-text query")
    p.add_argument("--url", default="", help="take the query from a deep link (?q=...)")
    p.add_argument("--data-dir", default="", help="category list directory (default: conf/settings.ini)")
    p.add_argument("--locale", default="", help="display-name locale (default: conf/settings.ini)")
    p.add_argument("--all", action="store_true", help="list every match instead of the first")
    p.add_argument("--limit", type=int, default=cfg.suggestion_limit())
    p.add_argument("--select", action="store_true", help="resolve the first match and show its map features")
    p.add_argument("--json", action="store_true", help="print the selection as JSON")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    setup_logging(args.verbose)

    query = " ".join(args.query).strip()
    if args.url:
        query = (query_from_url(args.url) or "").strip()
    if not query:
        console.print("[red]Usage: ritualmap search <query> | --url 'https://...?q=...'[/red]")
        return 2

    try:
        sources = load_sources(args.data_dir or None)
    except SourceError as e:
        console.print(f"[red]Failed to load catalog: {e}[/red]")
        return 1

    locale = resolve_locale(args.locale)
    session = SearchSession()
    entries = build_catalog(sources, locale)
    limit = max(1, int(args.limit)) if args.all else 1
    rows = filter_entries(entries, query, session, limit=limit)

    if not rows:
        console.print(f"[yellow]No match for '{query}'[/yellow]")
        return 1

    if not args.select:
        if args.json:
            print(json.dumps({"q": query, "items": [e.to_dict() for e in rows]}, ensure_ascii=False, indent=2))
        else:
            console.print(_matches_table(query, rows))
        return 0

    if not args.json:
        console.print(_matches_table(query, rows))

    canvas = GeoJsonCanvas()
    resolver = SelectionResolver(
        sources,
        canvas,
        ConsoleSound(),
        locale=locale,
        sound_src=cfg.easter_egg_sound(),
        sound_volume=cfg.easter_egg_volume(),
    )
    payload = resolver.resolve(rows[0], session)
    if payload is None:
        if session.easter_egg_activated:
            console.print(Panel("[bold magenta]ZA WARUDO![/bold magenta] Time has stopped.", border_style="magenta"))
        return 0

    geojson = canvas.to_geojson()
    if args.json:
        print(json.dumps({"result": payload, "geojson": geojson}, ensure_ascii=False, indent=2))
    else:
        console.print(_features_tree(payload, geojson))
    return 0


if __name__ == "__main__":
    sys.exit(main())
