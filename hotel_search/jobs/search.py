"""Nearby hotel search pipeline and its command line entry point."""

import argparse
import logging
import math
import sys
from typing import Dict, List, Mapping, Optional, Tuple

from hotel_search.core.config import Settings, get_settings
from hotel_search.core.errors import ConfigurationError, SearchError, ValidationError, require
from hotel_search.core.registry import SourceRegistry
from hotel_search.etl import presenter
from hotel_search.etl.transform import add_distances, order_hotels
from hotel_search.models import JSON_CONTENT_TYPE, TEXT_CONTENT_TYPE, OrderBy, SearchOutput
from hotel_search.vendors import hotel_source

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 15


def _parse_origin(latitude: Optional[str], longitude: Optional[str]) -> Tuple[float, float]:
    require("Latitude", latitude)
    require("Longitude", longitude)
    origin = []
    for label, value in (("Latitude", latitude), ("Longitude", longitude)):
        try:
            coordinate = float(value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"{label} must be numeric") from exc
        if not math.isfinite(coordinate):
            raise ValidationError(f"{label} must be numeric")
        origin.append(coordinate)
    return origin[0], origin[1]


def search(
    latitude: Optional[str],
    longitude: Optional[str],
    order_by: Optional[str] = OrderBy.proximity.value,
    page: Optional[int] = 0,
    limit: Optional[int] = DEFAULT_LIMIT,
    as_structured: bool = False,
    select_source: Optional[str] = None,
    add_sources: Optional[Mapping[str, str]] = None,
    *,
    registry: Optional[SourceRegistry] = None,
    settings: Optional[Settings] = None,
) -> SearchOutput:
    """Run one search and return the rendered answer.

    Every call works on its own ``SourceRegistry`` unless one is injected, so
    ``add_sources`` and ``select_source`` never outlive the call.
    """
    settings = settings or get_settings()
    order = OrderBy.parse(order_by)
    origin = _parse_origin(latitude, longitude)

    if registry is None:
        registry = SourceRegistry.from_settings(settings)
    if add_sources:
        registry.register_sources(add_sources)
    if select_source:
        registry.select_source(select_source)

    location = registry.active_location()
    logger.info("Searching hotels near %s,%s via %s ordered by %s", origin[0], origin[1], registry.selected, order.value)

    raw = hotel_source.fetch_listing(location, order.value, timeout=settings.fetch_timeout)
    records = add_distances(origin, raw, absolute=settings.absolute_coordinates)
    ordered = order_hotels(order.value, records)

    if as_structured:
        result = presenter.paginate(page, limit, ordered)
        payload = presenter.present_structured(order, result)
        return SearchOutput(body=presenter.to_json(payload), content_type=JSON_CONTENT_TYPE)

    body = presenter.present_inline(ordered, locale=settings.locale, currency=settings.currency)
    return SearchOutput(body=body, content_type=TEXT_CONTENT_TYPE)


def _parse_source_pair(value: str) -> Tuple[str, str]:
    name, sep, location = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError("expected NAME=URL")
    return name, location


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List hotels near a coordinate")
    parser.add_argument("latitude", help="Origin latitude in decimal degrees")
    parser.add_argument("longitude", help="Origin longitude in decimal degrees")
    parser.add_argument(
        "--order-by",
        dest="order_by",
        default=OrderBy.proximity.value,
        help="proximity (default) or price_per_night",
    )
    parser.add_argument("--page", dest="page", type=int, default=0, help="Zero-based page index")
    parser.add_argument("--limit", dest="limit", type=int, default=DEFAULT_LIMIT, help="Hotels per page")
    parser.add_argument("--json", dest="as_structured", action="store_true", help="Emit a JSON page")
    parser.add_argument("--source", dest="select_source", help="Name of the source to query")
    parser.add_argument(
        "--add-source",
        dest="add_sources",
        action="append",
        type=_parse_source_pair,
        metavar="NAME=URL",
        help="Register an extra source for this search (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)
    add_sources: Optional[Dict[str, str]] = dict(args.add_sources) if args.add_sources else None

    try:
        output = search(
            args.latitude,
            args.longitude,
            order_by=args.order_by,
            page=args.page,
            limit=args.limit,
            as_structured=args.as_structured,
            select_source=args.select_source,
            add_sources=add_sources,
        )
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        raise SystemExit(2) from exc
    except SearchError as exc:
        logger.error("Search failed: %s", exc)
        raise SystemExit(1) from exc

    sys.stdout.write(output.body + "\n")


if __name__ == "__main__":
    main()
