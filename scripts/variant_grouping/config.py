"""
Runtime configuration, read from the environment (and .env at the workspace root).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

WORKSPACE = Path(__file__).resolve().parent.parent.parent

load_dotenv(WORKSPACE / ".env")

# ── Feed ──────────────────────────────────────────────────────────────────────
FEED_PATH = os.getenv("VARIANT_FEED_PATH", "")
OUTPUT_DIR = Path(os.getenv("VARIANT_OUTPUT_DIR", "outputs/variant_grouping"))

SKU_COLUMN = os.getenv("VARIANT_SKU_COLUMN", "Part no")
DESCRIPTION_COLUMNS = [
    c.strip()
    for c in os.getenv("VARIANT_DESCRIPTION_COLUMNS", "DescriptionEN,DescriptionFR").split(",")
    if c.strip()
]
PRICE_COLUMN = os.getenv("VARIANT_PRICE_COLUMN", "Retail")
STOCK_COLUMN = os.getenv("VARIANT_STOCK_COLUMN", "qty")
BRAND_COLUMN = os.getenv("VARIANT_BRAND_COLUMN", "OEM")
UPC_COLUMNS = ["UPC 1", "UPC 2"]
ALT_SKU_COLUMNS = ["Part no without hyphen"]
SUPPLIER_NAME = os.getenv("VARIANT_SUPPLIER_NAME", "ITL")

# ── Logging / API ─────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("VARIANT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
API_HOST = os.getenv("VARIANT_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("VARIANT_API_PORT", "5001"))


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
