"""Named hotel listing sources and the currently selected one."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from hotel_search.core.config import Settings
from hotel_search.core.errors import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

_NUMERIC_KEY = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and bool(_NUMERIC_KEY.match(key))


def is_absolute_url(location: Any) -> bool:
    if not isinstance(location, str) or any(ch.isspace() for ch in location):
        return False
    try:
        parsed = urlparse(location)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


class SourceRegistry:
    """Mapping of source names to listing URLs, owned by a single search call."""

    def __init__(self, sources: Optional[Mapping[str, str]] = None, selected: Optional[str] = None) -> None:
        self._sources: Dict[str, str] = {}
        self._selected = selected
        if sources:
            self.register_sources(sources)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SourceRegistry":
        return cls(settings.sources, selected=settings.default_source)

    @property
    def sources(self) -> Dict[str, str]:
        return dict(self._sources)

    @property
    def selected(self) -> Optional[str]:
        return self._selected

    def register_sources(self, candidates: Optional[Mapping[Any, Any]]) -> Dict[str, str]:
        """Merge valid entries into the registry and return the accepted ones.

        Entries with a purely numeric key, an empty location or a location that
        is not an absolute URL are skipped. Accepted entries overwrite existing
        ones with the same name.
        """
        if candidates is None:
            raise ValidationError("Sources list is required")

        accepted: Dict[str, str] = {}
        for name, location in candidates.items():
            if is_numeric_key(name) or not location or not is_absolute_url(location):
                logger.warning("Skipping invalid source %r -> %r", name, location)
                continue
            accepted[str(name)] = location

        self._sources.update(accepted)
        return accepted

    def select_source(self, name: str) -> bool:
        """Make ``name`` the active source if it is registered."""
        if name in self._sources:
            self._selected = name
            return True
        logger.warning("Unknown source %r; keeping %r", name, self._selected)
        return False

    def active_location(self) -> str:
        if self._selected is None or self._selected not in self._sources:
            raise ConfigurationError("No source configured")
        return self._sources[self._selected]
