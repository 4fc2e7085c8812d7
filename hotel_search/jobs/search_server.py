"""HTTP entrypoint that answers nearby hotel searches."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping

from flask import Flask, Response, jsonify, request

from hotel_search.core.config import get_settings
from hotel_search.core.errors import RetrievalError, SearchError, ValidationError
from hotel_search.jobs.search import DEFAULT_LIMIT, search

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

_TRUTHY = {"1", "true", "yes", "json"}

# ---------- Routes ----------


@app.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "sources": sorted(settings.sources),
                "default_source": settings.default_source,
            }
        ),
        200,
    )


@app.get("/search")
def search_query() -> Any:
    """Search with query-string parameters: latitude, longitude, orderby, page, limit, json, source."""
    args = request.args
    params: Dict[str, Any] = {
        "latitude": args.get("latitude"),
        "longitude": args.get("longitude"),
        "orderby": args.get("orderby"),
        "page": args.get("page"),
        "limit": args.get("limit"),
        "json": _is_truthy(args.get("json", "")),
        "source": args.get("source"),
    }
    return _run_search(params)


@app.post("/search")
def search_body() -> Any:
    """Search with a JSON body; also accepts ``add_sources`` as a name -> URL object."""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "body must be a JSON object"}), 400
    add_sources = payload.get("add_sources")
    if add_sources is not None and not isinstance(add_sources, Mapping):
        return jsonify({"error": "add_sources must be an object"}), 400
    return _run_search({**payload, "json": _is_truthy(payload.get("json", False))})


# ---------- Internals ----------


def _is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in _TRUTHY
    return bool(value)


def _optional_int(value: Any, name: str) -> Any:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be numeric") from exc


def _run_search(params: Dict[str, Any]) -> Any:
    try:
        page = _optional_int(params.get("page"), "page")
        limit = _optional_int(params.get("limit"), "limit")
        output = search(
            params.get("latitude"),
            params.get("longitude"),
            order_by=params.get("orderby"),
            page=page or 0,
            limit=DEFAULT_LIMIT if limit is None else limit,
            as_structured=params["json"],
            select_source=params.get("source"),
            add_sources=params.get("add_sources"),
        )
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    except RetrievalError as exc:
        logger.warning("Retrieval failed: %s", exc)
        return jsonify({"error": str(exc)}), 502
    except SearchError as exc:
        logger.error("Search failed: %s", exc)
        return jsonify({"error": str(exc)}), 500

    return Response(output.body, status=200, content_type=output.content_type)


def main() -> None:
    port = int(os.getenv("PORT") or get_settings().port)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
