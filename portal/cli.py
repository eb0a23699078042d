"""Command-line entry point that serves the API with uvicorn."""
from __future__ import annotations

import argparse

import uvicorn

from portal.app import create_app
from portal.core.config import get_settings

UVICORN_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")
LEVEL_ALIASES = {"warn": "warning", "fatal": "critical", "notset": "trace"}


def uvicorn_log_level(level: str) -> str:
    """Map a logging-style level name onto one uvicorn accepts (falls back to info)."""
    name = (level or "").strip().lower()
    name = LEVEL_ALIASES.get(name, name)
    return name if name in UVICORN_LEVELS else "info"


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the citizen portal API")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    args = ap.parse_args(argv)

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=uvicorn_log_level(settings.log_level),
    )


if __name__ == "__main__":
    main()
