"""Pagination and rendering of ordered hotel records."""

import json
import logging
import math
from typing import Any, Dict, Optional, Sequence

from babel.core import UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency

from hotel_search.core.errors import FormattingError, ValidationError
from hotel_search.models import HotelRecord, OrderBy, PageResult

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 20
INLINE_SEPARATOR = " • "
FORMATTER_ERROR = "Formatter error"
_PLAIN_AMOUNT = "#,##0.00"


def paginate(page: Optional[int], limit: Optional[int], data: Sequence[HotelRecord]) -> PageResult:
    """Slice ``data`` into one page.

    ``page`` is zero-based on input and one-based in the result; it is clamped
    to the available pages. An empty dataset still reports a single page.
    """
    limit = DEFAULT_PAGE_LIMIT if limit is None else limit
    if limit <= 0:
        raise ValidationError("Limit must be positive")

    total_pages = max(math.ceil(len(data) / limit), 1)
    page = (page or 0) + 1
    page = min(max(page, 1), total_pages)
    offset = max((page - 1) * limit, 0)

    return PageResult(page=page, total_pages=total_pages, items=tuple(data[offset : offset + limit]))


def present_structured(order: OrderBy, result: PageResult) -> Dict[str, Any]:
    return {
        "orderby": OrderBy.parse(order).value,
        "page": result.page,
        "pages": result.total_pages,
        "data": [record.to_dict() for record in result.items],
    }


def to_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, allow_nan=False)


def format_currency(amount: float, locale: str = "pt", currency: str = "EUR", show_symbol: bool = False) -> str:
    """Format ``amount`` for ``locale``; without a symbol the code is appended instead."""
    try:
        if show_symbol:
            return babel_format_currency(amount, currency, locale=locale)
        formatted = babel_format_currency(amount, currency, format=_PLAIN_AMOUNT, locale=locale)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        logger.error("Currency formatting failed for %r (%s, %s): %s", amount, locale, currency, exc)
        raise FormattingError(FORMATTER_ERROR) from exc
    return f"{formatted} {currency}"


def present_inline(
    records: Sequence[HotelRecord],
    locale: str = "pt",
    currency: str = "EUR",
    separator: str = INLINE_SEPARATOR,
) -> str:
    lines = [
        f"{record.hotel}, {record.distance} KM, {format_currency(record.price, locale, currency)}"
        for record in records
    ]
    return separator + separator.join(lines)
