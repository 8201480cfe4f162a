#!/usr/bin/env python3
"""
Start the joke API on a TCP port.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 8000] [--jokes path/to/jokes.json]
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import uvicorn

from jokes_api.app import create_app
from jokes_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Serve jokes over HTTP")
    ap.add_argument("--host", default=settings.host, help=f"bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"TCP port (default: {settings.port})")
    ap.add_argument("--jokes", help="JSON file with an array of jokes (default: JOKES_FILE or bundled data)")
    ap.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    args = ap.parse_args()

    log_level = args.log_level.lower()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.jokes:
        settings = dataclasses.replace(settings, jokes_file=Path(args.jokes))

    app = create_app(settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=log_level)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
