"""Utilities for turning raw source records into ordered hotel records."""

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from hotel_search.core.errors import RetrievalError
from hotel_search.core.geo import UNIT_KM, distance_between
from hotel_search.models import HotelRecord, OrderBy, RawHotelRecord

logger = logging.getLogger(__name__)

ITEM_HOTEL = 0
ITEM_LAT = 1
ITEM_LON = 2
ITEM_PRICE = 3


def _safe_price(value: Any) -> float:
    try:
        if value is None:
            return 0.0
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(price) or price < 0:
        return 0.0
    return price


def _coordinate(value: Any, hotel: str) -> float:
    try:
        coordinate = float(value)
    except (TypeError, ValueError) as exc:
        raise RetrievalError(f"Invalid coordinates for hotel {hotel}") from exc
    if not math.isfinite(coordinate):
        raise RetrievalError(f"Invalid coordinates for hotel {hotel}")
    return coordinate


def normalize(raw: RawHotelRecord, origin: Tuple[float, float], absolute: bool = True) -> HotelRecord:
    if not isinstance(raw, (list, tuple)) or len(raw) < 4:
        raise RetrievalError(f"Malformed hotel record: {raw!r}")

    hotel = str(raw[ITEM_HOTEL])
    distance = distance_between(
        origin[0],
        origin[1],
        _coordinate(raw[ITEM_LAT], hotel),
        _coordinate(raw[ITEM_LON], hotel),
        unit=UNIT_KM,
        absolute=absolute,
    )
    return HotelRecord(hotel=hotel, distance=distance, price=_safe_price(raw[ITEM_PRICE]))


def add_distances(
    origin: Tuple[float, float], records: Iterable[RawHotelRecord], absolute: bool = True
) -> List[HotelRecord]:
    return [normalize(raw, origin, absolute=absolute) for raw in records]


def order_hotels(criterion: Optional[str], records: Sequence[HotelRecord]) -> List[HotelRecord]:
    """Stable numeric sort by distance or nightly price."""
    order = OrderBy.parse(criterion)
    if criterion is not None and order.value != criterion:
        logger.debug("Ordering %r resolved to %s", criterion, order.value)

    if order is OrderBy.price_per_night:
        return sorted(records, key=lambda record: record.price)
    return sorted(records, key=lambda record: record.distance)
