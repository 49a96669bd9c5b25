"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from .config import settings
from .core.logging import bootstrap_logging, shutdown_logging


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="cli",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="pubg-api.jsonl",
    )
    # Lazy import keeps logging configured before the client modules load
    from .presentation.cli import APICommand

    try:
        return asyncio.run(APICommand().run(sys.argv[1:] if argv is None else argv))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
