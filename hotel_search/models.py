"""Core data models shared by the hotel search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

# (name, latitude, longitude, price) exactly as served by a source.
RawHotelRecord = Sequence[Any]

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class OrderBy(str, Enum):
    proximity = "proximity"
    price_per_night = "price_per_night"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OrderBy":
        """Resolve a caller supplied criterion, falling back to proximity."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        return _ORDER_ALIASES.get(key, cls.proximity)


_ORDER_ALIASES = {
    "proximity": OrderBy.proximity,
    "price_per_night": OrderBy.price_per_night,
    "price night": OrderBy.price_per_night,
}


@dataclass(frozen=True, slots=True)
class HotelRecord:
    """A hotel with its distance (km) from the search origin."""

    hotel: str
    distance: float
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {"hotel": self.hotel, "km": self.distance, "price": self.price}


@dataclass(frozen=True, slots=True)
class PageResult:
    page: int
    total_pages: int
    items: Tuple[HotelRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SearchOutput:
    """Rendered search answer and the content type it should be served with."""

    body: str
    content_type: str
