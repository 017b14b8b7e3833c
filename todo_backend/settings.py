from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    environment: str
    log_level: str
    host: str
    port: int
    workers: int
    default_page_size: int
    max_page_size: int


# Levels understood by both logging and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_int_env(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer env value '%s', using default=%s", value, default)
        return default


def parse_log_level(value: Optional[str], default: str = "INFO") -> str:
    if value is None:
        return default
    normalized = value.strip().upper()
    if normalized not in LOG_LEVELS:
        logger.warning("Invalid LOG_LEVEL value '%s', using default=%s", value, default)
        return default
    return normalized


@lru_cache
def get_settings() -> Settings:
    environment = os.getenv("ENVIRONMENT", "development").lower()
    log_level = parse_log_level(os.getenv("LOG_LEVEL"))
    host = os.getenv("HOST", "0.0.0.0")
    port = parse_int_env(os.getenv("PORT"), 8080)
    workers = max(1, parse_int_env(os.getenv("WEB_CONCURRENCY"), 1))
    max_page_size = max(1, parse_int_env(os.getenv("TODO_MAX_PAGE_SIZE"), 1000))
    default_page_size = parse_int_env(os.getenv("TODO_DEFAULT_PAGE_SIZE"), 100)
    default_page_size = min(max(0, default_page_size), max_page_size)

    return Settings(
        environment=environment,
        log_level=log_level,
        host=host,
        port=port,
        workers=workers,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )
