#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.cli_common import (  # noqa: E402
    CONF_DIR,
    env_hint,
    file_info,
    human_mtime,
    human_size,
)
from core.catalog import CatalogSources, SourceError, build_catalog  # noqa: E402
from core.catalog.models import SOURCE_CATEGORIES  # noqa: E402
from core.catalog.sources import SOURCE_STEMS, find_source_file  # noqa: E402
from core.config import get_config  # noqa: E402
from core.version import versions  # noqa: E402

console = Console()
CONFIG_PATH = CONF_DIR / "settings.ini"


def _status(level: str) -> str:
    if level == "PASS":
        return "[green]PASS[/green]"
    if level == "WARN":
        return "[yellow]WARN[/yellow]"
    return "[red]FAIL[/red]"


def main() -> int:
    p = argparse.ArgumentParser(description="Ritual Map Doctor (config + data health check)")
    p.add_argument("--enforce", action="store_true", help="exit non-zero on failures (CI)")
    p.add_argument("--strict", action="store_true", help="treat WARN as FAIL (only when --enforce)")
    args = p.parse_args()

    cfg = get_config()
    env_name, env_kind = env_hint()
    ver = versions()
    console.print(
        Panel(
            f"[bold cyan]Ritual Map Doctor[/bold cyan]\nEnv: {env_name} ({env_kind})"
            f"\nVersion: {ver['project_version']} | data {ver['data_version']}",
            border_style="cyan",
        )
    )

    table = Table(title="Health Checks", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Details", style="dim")
    table.add_column("Fix Hint", style="green")

    fail = 0
    warn = 0

    # 1) config file (optional)
    if CONFIG_PATH.is_file():
        table.add_row("conf/settings.ini", _status("PASS"), str(CONFIG_PATH), "")
    else:
        table.add_row("conf/settings.ini", _status("WARN"), "missing (defaults in use)", "Copy conf/settings.ini from the repo")
        warn += 1

    # 2) data dir
    data_dir = cfg.data_dir()
    if not data_dir.is_dir():
        table.add_row("DATA_DIR", _status("FAIL"), str(data_dir), "Set [PATHS] DATA_DIR or RITUALMAP_DATA_DIR")
        fail += 1
    else:
        table.add_row("DATA_DIR", _status("PASS"), str(data_dir), "")

        # 3) one file per category
        for cat in SOURCE_CATEGORIES:
            path = find_source_file(data_dir, cat)
            if path is None:
                table.add_row(f"data/{SOURCE_STEMS[cat]}", _status("WARN"), "missing", "Category will be empty")
                warn += 1
                continue
            info = file_info(path)
            table.add_row(
                f"data/{SOURCE_STEMS[cat]}",
                _status("PASS"),
                f"{path.name} | {human_mtime(info['mtime'])} | {human_size(info['size'])}",
                "",
            )

        # 4) parse everything
        try:
            sources = CatalogSources.load(data_dir)
            entries = build_catalog(sources, cfg.locale())
            counts = ", ".join(f"{k}={v}" for k, v in sources.counts().items())
            table.add_row("parse sources", _status("PASS"), f"{len(entries)} terms ({counts})", "")
        except SourceError as e:
            table.add_row("parse sources", _status("FAIL"), str(e), "Fix the YAML/JSON file")
            fail += 1

    console.print(table)
    console.print(f"[dim]Root: {PROJECT_ROOT} | Locale: {cfg.locale()} | Summary: FAIL={fail}, WARN={warn}[/dim]")

    if not args.enforce:
        return 0
    if fail:
        return 2
    if args.strict and warn:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
