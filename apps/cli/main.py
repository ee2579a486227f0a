#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unified CLI dispatcher for Ritual Map."""

from __future__ import annotations

import runpy
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

console = Console()


def _tool_path(tool: dict) -> Path:
    folder = tool.get("folder") or "apps/cli/commands"
    return PROJECT_ROOT / folder / str(tool.get("file"))


def _resolve_tool(alias: Optional[str]) -> Tuple[Optional[Path], List[str]]:
    from apps.cli.registry import get_tools

    key = str(alias or "").strip()
    if not key:
        return None, []

    for tool in get_tools():
        if tool.get("alias") == key or tool.get("file") == key:
            return _tool_path(tool), []

    # unknown alias: treat the whole argv as a search query
    search = next(t for t in get_tools() if t.get("alias") == "search")
    return _tool_path(search), [key]


def print_tools() -> None:
    from apps.cli.registry import get_tools

    table = Table(title="Ritual Map tools", box=None, header_style="bold cyan")
    table.add_column("Alias", style="cyan")
    table.add_column("Type", style="dim")
    table.add_column("Description")
    table.add_column("Usage", style="green")
    for tool in get_tools():
        table.add_row(tool["alias"], tool["type"], tool["desc"], tool["usage"])
    console.print(table)


def main(argv: Optional[List[str]] = None) -> None:
    argv = list(argv) if argv is not None else list(sys.argv[1:])
    alias = argv[0] if argv else None
    path, injected = _resolve_tool(alias)
    if path is None or alias in ("-h", "--help", "help"):
        print_tools()
        return

    argv = injected + argv[1:]
    sys.argv = [str(path)] + argv
    runpy.run_path(str(path), run_name="__main__")


if __name__ == "__main__":
    main()
