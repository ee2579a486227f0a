#!/usr/bin/env python3
"""Ritual Map tool registry."""

TOOLS = [
    # --- CLI 工具 (apps/cli/commands) ---
    {
        "file": "search.py",
        "alias": "search",
        "desc": "Search the catalog (creatures / areas / shards / items / misc)",
        "usage": "ritualmap search <query> [--all] [--select] [--url URL]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "doctor.py",
        "alias": "doctor",
        "desc": "Config + catalog data health check",
        "usage": "ritualmap doctor [--enforce] [--strict]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },

    # --- 开发工具 (devtools/) ---
    {
        "file": "validate_sources.py",
        "alias": "validate",
        "desc": "Cross-reference check of the category lists",
        "usage": "ritualmap validate [--data-dir PATH] [--locale en] [--enforce]",
        "type": "Dev",
        "folder": "devtools"
    },
    {
        "file": "serve_webmap.py",
        "alias": "web",
        "desc": "Start WebMap (FastAPI + Uvicorn)",
        "usage": "ritualmap web [--host 0.0.0.0 --port 8000]",
        "type": "Dev",
        "folder": "devtools"
    },
]


def get_tools():
    return TOOLS
