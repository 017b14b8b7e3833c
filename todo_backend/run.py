#!/usr/bin/env python3
"""
Entry point for serving the Todo API.
Supports a production and a development mode.
"""

import logging
import sys
from typing import List, Optional

import uvicorn

from todo_backend.logging_utils import configure_logging
from todo_backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

APP_PATH = "todo_backend.main:app"

USAGE = """
Todo API - Launch Utility

Usage:
  todo-backend [command]

Commands:
  prod       - Run in production mode (default)
  dev        - Run a single reloading process for development
  help       - Show this help message

Environment:
  HOST, PORT, WEB_CONCURRENCY, LOG_LEVEL, ENVIRONMENT,
  TODO_DEFAULT_PAGE_SIZE, TODO_MAX_PAGE_SIZE
""".strip()


def log_startup(settings: Settings, workers: int) -> None:
    """Log a single startup line for process managers."""
    logger.info(
        "Starting on %s:%s (ENVIRONMENT=%s, WORKERS=%s)",
        settings.host,
        settings.port,
        settings.environment,
        workers,
    )


def run_production(settings: Settings) -> None:
    log_startup(settings, settings.workers)
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


def run_development(settings: Settings) -> None:
    logger.info("Running in development mode...")
    log_startup(settings, 1)
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def show_help() -> None:
    print(USAGE)


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    mode = args[0].lower() if args else "prod"

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        if mode == "prod":
            run_production(settings)
        elif mode == "dev":
            run_development(settings)
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
