"""Client utilities for remote hotel listing sources."""

import logging
from typing import Any, List, Optional

import requests

from hotel_search.core.errors import RetrievalError, require
from hotel_search.models import RawHotelRecord

logger = logging.getLogger(__name__)
_SESSION = requests.Session()

REQUEST_TIMEOUT = 10
NO_DATA_MESSAGE = "No data found"


def fetch_json(location: str, timeout: float = REQUEST_TIMEOUT) -> Any:
    try:
        response = _SESSION.get(location, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.Timeout as exc:
        logger.error("Timed out after %ss fetching %s", timeout, location)
        raise RetrievalError(f"Timed out fetching {location}") from exc
    except requests.RequestException as exc:
        logger.error("Request to %s failed: %s", location, exc)
        raise RetrievalError(str(exc)) from exc
    except ValueError as exc:
        logger.error("Source %s returned a non-JSON body", location)
        raise RetrievalError(f"Invalid JSON from {location}") from exc


def fetch_listing(location: str, order: Optional[str], timeout: float = REQUEST_TIMEOUT) -> List[RawHotelRecord]:
    """Fetch a source once and unwrap its ``{success, message}`` envelope."""
    require("Order", order)

    logger.info("Fetching hotel listing from %s", location)
    payload = fetch_json(location, timeout=timeout)

    if not isinstance(payload, dict) or not payload.get("success"):
        raise RetrievalError(NO_DATA_MESSAGE)

    listing = payload.get("message")
    if not isinstance(listing, list):
        logger.error("Envelope from %s has no listing: message=%s", location, str(listing)[:200])
        raise RetrievalError(f"Malformed listing from {location}")

    logger.info("Fetched %d hotels", len(listing))
    return listing
