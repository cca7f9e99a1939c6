"""
Catalog Feed Analyzer

Loads a supplier catalog CSV and reports which records form variant
families and which stay standalone products.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from . import config
from .grouping import (
    CatalogEntry,
    CatalogItem,
    SingleProduct,
    VariantFamily,
    build_catalog_entries,
    search_items,
)
from .patterns import VariantParser

log = logging.getLogger(__name__)


@dataclass
class FeedColumns:
    """Column names of the catalog CSV."""
    sku: str = config.SKU_COLUMN
    descriptions: List[str] = field(default_factory=lambda: list(config.DESCRIPTION_COLUMNS))
    price: str = config.PRICE_COLUMN
    stock: str = config.STOCK_COLUMN
    brand: str = config.BRAND_COLUMN
    upcs: List[str] = field(default_factory=lambda: list(config.UPC_COLUMNS))
    alt_skus: List[str] = field(default_factory=lambda: list(config.ALT_SKU_COLUMNS))


@dataclass
class AnalysisResult:
    """Grouping result for a loaded feed."""
    total_items: int
    matched_items: int
    entries: List[CatalogEntry]
    families: List[VariantFamily]
    singles: List[SingleProduct]
    option_names: Dict[str, int]
    patterns: Dict[str, int]
    query: Optional[str] = None

    @property
    def grouped_item_count(self) -> int:
        return sum(len(f.variants) for f in self.families)


class FeedAnalyzer:
    """
    Reads a catalog CSV into CatalogItems and groups them into variant families.
    """

    def __init__(self, columns: Optional[FeedColumns] = None, parser: Optional[VariantParser] = None):
        self.columns = columns or FeedColumns()
        self.parser = parser or VariantParser()
        self.items: List[CatalogItem] = []

    def load_csv(self, filepath) -> int:
        """
        Load catalog rows from CSV. Returns the number of items loaded.

        Raises FileNotFoundError for a missing file and ValueError when the
        SKU column or every description column is absent.
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Feed file not found: {path}")

        log.info(f"Loading feed from: {path}")
        df = pd.read_csv(path, dtype=str, skip_blank_lines=True, on_bad_lines="skip").fillna("")
        df.columns = [str(c).strip() for c in df.columns]

        cols = self.columns
        if cols.sku not in df.columns:
            raise ValueError(f"Missing SKU column '{cols.sku}'")
        description_cols = [c for c in cols.descriptions if c in df.columns]
        if not description_cols:
            raise ValueError(f"Missing description columns: {', '.join(cols.descriptions)}")

        prices = self._numeric(df, cols.price)
        stocks = self._numeric(df, cols.stock).astype(int)

        self.items = []
        for index, row in df.iterrows():
            description = ""
            for col in description_cols:
                description = row[col].strip()
                if description:
                    break

            # Every description and alternate part number stays searchable
            aliases = [
                row[col].strip()
                for col in description_cols + cols.alt_skus
                if col in df.columns and row[col].strip() and row[col].strip() != description
            ]

            upc = ""
            for col in cols.upcs:
                if col in df.columns and row[col].strip():
                    upc = row[col].strip()
                    break

            self.items.append(CatalogItem(
                sku=row[cols.sku].strip(),
                description=description,
                price=float(prices[index]),
                stock=int(stocks[index]),
                brand=row[cols.brand].strip() if cols.brand in df.columns else "",
                upc=upc,
                supplier=config.SUPPLIER_NAME,
                aliases=aliases,
                raw=row.to_dict(),
            ))

        missing = sum(1 for item in self.items if not item.description)
        if missing:
            log.warning(f"{missing} rows have no description in {', '.join(description_cols)}")
        log.info(f"Parsed {len(self.items)} records.")
        return len(self.items)

    @staticmethod
    def _numeric(df: pd.DataFrame, column: str) -> pd.Series:
        if column not in df.columns:
            return pd.Series(0.0, index=df.index)
        values = pd.to_numeric(df[column].str.strip(), errors="coerce")
        # "inf" and overflowing numbers are as unusable as text
        return values.replace([math.inf, -math.inf], math.nan).fillna(0.0)

    def analyze(self, query: Optional[str] = None) -> AnalysisResult:
        """Group the loaded items (optionally filtered by a search query)."""
        items = search_items(self.items, query)
        if query:
            log.info(f"Query '{query}' matched {len(items)} of {len(self.items)} items")

        entries = build_catalog_entries(items)
        families = [e for e in entries if isinstance(e, VariantFamily)]
        singles = [e for e in entries if isinstance(e, SingleProduct)]

        option_names = Counter(e.option_name for e in entries)
        patterns = Counter(
            self.parser.matched_pattern(item.description) or "none"
            for item in items
        )

        # Largest families first
        families.sort(key=lambda f: -len(f.variants))

        return AnalysisResult(
            total_items=len(self.items),
            matched_items=len(items),
            entries=entries,
            families=families,
            singles=singles,
            option_names=dict(option_names),
            patterns=dict(patterns),
            query=query,
        )

    def generate_report(self, result: AnalysisResult) -> str:
        """Generate human-readable analysis report."""
        lines = [
            "# Catalog Variant Grouping Analysis",
            "",
            "## Overview",
            "",
            f"- **Total Items**: {result.total_items:,}",
        ]
        if result.query:
            lines.append(f"- **Query**: `{result.query}` ({result.matched_items:,} matches)")
        lines.extend([
            f"- **Variant Families**: {len(result.families):,} ({result.grouped_item_count:,} items)",
            f"- **Single Products**: {len(result.singles):,}",
            "",
            "## Option Names",
            "",
        ])
        for name, count in sorted(result.option_names.items(), key=lambda x: -x[1]):
            lines.append(f"- {name}: {count}")

        lines.extend(["", "## Matched Patterns", ""])
        for name, count in sorted(result.patterns.items(), key=lambda x: -x[1]):
            lines.append(f"- {name}: {count}")

        lines.extend(["", "## Variant Families (Top 20)", ""])
        for i, family in enumerate(result.families[:20], 1):
            lines.append(f"**{i}. {family.title}** ({len(family.variants)} variants)")
            lines.append(f"   - Option: {family.option_name}")
            lines.append(f"   - Values: {', '.join(family.option_values[:5])}" +
                         ("..." if len(family.option_values) > 5 else ""))
            lines.append(f"   - SKUs: {', '.join(family.sku_list[:3])}" +
                         ("..." if len(family.sku_list) > 3 else ""))
            lines.append("")

        return "\n".join(lines)
