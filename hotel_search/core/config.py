"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SOURCES: Dict[str, str] = {
    "source_1": "https://xlr8-interview-files.s3.eu-west-2.amazonaws.com/source_1.json",
    "source_2": "https://xlr8-interview-files.s3.eu-west-2.amazonaws.com/source_2.json",
}


@dataclass(frozen=True)
class Settings:
    sources: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SOURCES))
    default_source: str = "source_1"
    fetch_timeout: float = 10.0
    absolute_coordinates: bool = True
    locale: str = "pt"
    currency: str = "EUR"
    port: int = 8080


def parse_sources(raw: str) -> Dict[str, str]:
    """Parse ``name=url`` pairs separated by commas; malformed pairs are skipped."""
    sources: Dict[str, str] = {}
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, sep, location = chunk.partition("=")
        if not sep or not name.strip():
            logger.warning("Ignoring malformed HOTEL_SOURCES entry: %s", chunk)
            continue
        sources[name.strip()] = location.strip()
    return sources


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    sources = dict(DEFAULT_SOURCES)
    sources.update(parse_sources(os.getenv("HOTEL_SOURCES", "")))
    default_source = os.getenv("HOTEL_DEFAULT_SOURCE", "source_1").strip() or "source_1"
    fetch_timeout = float(os.getenv("HOTEL_FETCH_TIMEOUT", "10"))
    absolute_coordinates = os.getenv("HOTEL_ABSOLUTE_COORDINATES", "true").lower() in {"1", "true", "yes"}
    locale = os.getenv("HOTEL_LOCALE", "pt")
    currency = os.getenv("HOTEL_CURRENCY", "EUR").strip().upper()
    port = int(os.getenv("PORT", "8080"))

    if default_source not in sources:
        logger.warning("HOTEL_DEFAULT_SOURCE=%s is not a known source; searches will fail.", default_source)
    if fetch_timeout <= 0:
        logger.warning("HOTEL_FETCH_TIMEOUT must be positive; falling back to 10 seconds.")
        fetch_timeout = 10.0

    return Settings(
        sources=sources,
        default_source=default_source,
        fetch_timeout=fetch_timeout,
        absolute_coordinates=absolute_coordinates,
        locale=locale,
        currency=currency,
        port=port,
    )
