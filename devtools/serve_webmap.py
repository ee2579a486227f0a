#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Run WebMap server (FastAPI + Uvicorn).

Usage:
  python3 devtools/serve_webmap.py --host 0.0.0.0 --port 8000 --no-open
"""

from __future__ import annotations

import argparse
import os
import socket
import sys
import webbrowser
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import uvicorn  # type: ignore  # noqa: E402

from apps.webmap.app import create_app  # noqa: E402
from core.config import get_config  # noqa: E402


def _detect_lan_ip() -> str:
    """Best-effort LAN IP discovery (no external network required)."""
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        # doesn't need to be reachable; used to pick outbound interface
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "127.0.0.1"


def main() -> None:
    cfg = get_config()
    parser = argparse.ArgumentParser(description="Ritual Map WebMap (FastAPI) server.")
    parser.add_argument("--data-dir", default=str(cfg.data_dir()))
    parser.add_argument("--locale", default=cfg.locale())
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--root-path", default="", help="Reverse proxy mount path, e.g. /map")
    parser.add_argument("--static-dir", default=os.environ.get("RITUALMAP_STATIC_DIR", ""), help="Serve audio/tiles from this dir under /static")
    parser.add_argument("--reload", action="store_true", help="Auto-reload code (development)")
    parser.add_argument("--reload-data", action="store_true", help="Auto-reload category lists when files change")
    parser.add_argument("--no-open", action="store_true", help="Do not open browser")
    parser.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug", "trace"])
    parser.add_argument("--cors-allow-origin", action="append", default=[], help="CORS allow origin (repeatable)")
    args = parser.parse_args()

    data_dir = Path(args.data_dir).expanduser().resolve()
    if not data_dir.is_dir():
        print(f"❌ Data dir not found: {data_dir}")
        sys.exit(2)

    app = create_app(
        data_dir=data_dir,
        locale=str(args.locale),
        root_path=args.root_path,
        cors_allow_origins=(args.cors_allow_origin or None),
        gzip_minimum_size=800,
        auto_reload_sources=bool(args.reload_data),
        suggestion_limit=cfg.suggestion_limit(),
        easter_egg_sound=cfg.easter_egg_sound(),
        easter_egg_volume=cfg.easter_egg_volume(),
        static_root_dir=(Path(args.static_dir).expanduser().resolve() if args.static_dir else None),
    )

    host = str(args.host)
    port = int(args.port)

    # Print useful addresses
    rp = (args.root_path or "").rstrip("/")
    local_url = f"http://127.0.0.1:{port}{rp}/"
    if host == "0.0.0.0":
        lan_url = f"http://{_detect_lan_ip()}:{port}{rp}/"
        print(f"Ritual Map: {lan_url}")
        print(f"Open (local): {local_url}")
        open_url = lan_url
    else:
        open_url = f"http://{host}:{port}{rp}/"
        print(f"Ritual Map: {open_url}")
    print(f"Data: {data_dir}")

    if not args.no_open:
        try:
            webbrowser.open(open_url)
        except webbrowser.Error:
            pass

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=args.log_level,
        reload=bool(args.reload),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
