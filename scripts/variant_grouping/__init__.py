"""
Catalog Variant Grouping Module

Detects variant families in supplier part descriptions: shared base name,
option name (Size, Color, ...) and per-item option value, so several
supplier SKUs can be published as one product with variants.

Usage:
    python scripts/run_variant_grouping.py --input itlCanada.csv --dry-run
    python scripts/run_variant_grouping.py --detect "JACKET - BLACK (S)" "JACKET - BLACK (M)"
"""

__version__ = "1.0.0"

from .patterns import ParsedVariant, VariantParser, VARIANT_PATTERNS, parse_description
from .classifier import guess_option_name
from .detector import CommonPattern, detect_common_pattern
from .grouping import (
    CatalogItem,
    SingleProduct,
    VariantFamily,
    build_catalog_entries,
    group_items,
    to_product_payload,
)

__all__ = [
    "ParsedVariant",
    "VariantParser",
    "VARIANT_PATTERNS",
    "parse_description",
    "guess_option_name",
    "CommonPattern",
    "detect_common_pattern",
    "CatalogItem",
    "SingleProduct",
    "VariantFamily",
    "build_catalog_entries",
    "group_items",
    "to_product_payload",
]
