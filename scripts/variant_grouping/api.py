"""
HTTP API for the variant detector.

Endpoints:
  GET  /api/health
  POST /api/variants/parse    {"description": "..."}
  POST /api/variants/detect   {"descriptions": ["...", "..."]}
  POST /api/variants/group    {"items": [{"sku": "...", "description": "...", "price": 0, "stock": 0}]}
"""

import logging
import math

from flask import Flask, jsonify, request

from . import __version__
from .detector import detect_common_pattern
from .grouping import CatalogItem, build_catalog_entries, to_product_payload
from .patterns import parse_description

log = logging.getLogger(__name__)


class PayloadError(ValueError):
    """Request body did not have the expected shape."""


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise PayloadError("Expected a JSON object body")
    return data


def _string_list(data: dict, name: str) -> list:
    values = data.get(name)
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise PayloadError(f"'{name}' must be a list of strings")
    return values


def _catalog_item(raw) -> CatalogItem:
    if not isinstance(raw, dict) or not isinstance(raw.get("description", ""), str):
        raise PayloadError("Each item needs a string 'description'")
    try:
        price = float(raw.get("price") or 0)
        stock = int(raw.get("stock") or 0)
    except (TypeError, ValueError, OverflowError):
        raise PayloadError(f"Invalid price/stock for item {raw.get('sku', '')!r}")
    if not math.isfinite(price):
        raise PayloadError(f"Invalid price/stock for item {raw.get('sku', '')!r}")
    return CatalogItem(
        sku=str(raw.get("sku", "")),
        description=raw.get("description", ""),
        price=price,
        stock=stock,
        brand=str(raw.get("brand", "")),
        supplier=str(raw.get("supplier", "")),
    )


def create_app() -> Flask:
    app = Flask(__name__)

    @app.errorhandler(PayloadError)
    def bad_payload(err):
        log.info(f"Rejected request to {request.path}: {err}")
        return jsonify({"ok": False, "error": str(err)}), 400

    @app.route("/api/health")
    def health():
        return jsonify({"status": "healthy", "version": __version__})

    @app.route("/api/variants/parse", methods=["POST"])
    def parse():
        description = _json_body().get("description", "")
        if not isinstance(description, str):
            raise PayloadError("'description' must be a string")
        return jsonify(parse_description(description).to_dict())

    @app.route("/api/variants/detect", methods=["POST"])
    def detect():
        descriptions = _string_list(_json_body(), "descriptions")
        return jsonify(detect_common_pattern(descriptions).to_dict())

    @app.route("/api/variants/group", methods=["POST"])
    def group():
        raw_items = _json_body().get("items")
        if not isinstance(raw_items, list):
            raise PayloadError("'items' must be a list")
        items = [_catalog_item(raw) for raw in raw_items]
        entries = build_catalog_entries(items)
        log.info(f"Grouped {len(items)} items into {len(entries)} products")
        return jsonify([to_product_payload(e) for e in entries])

    return app
