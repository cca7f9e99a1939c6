"""
Storefront Output Generator

Writes grouped catalog entries as product-creation payloads (JSON) and as a
one-row-per-variant CSV for review before publishing.
"""

import csv
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .grouping import CatalogEntry, VariantFamily, to_product_payload


VARIANT_COLUMNS = [
    "Handle",
    "Title",
    "Kind",
    "Option1 Name",
    "Option1 Value",
    "Variant SKU",
    "Variant Price",
    "Variant Inventory Qty",
]


@dataclass
class GeneratorConfig:
    """Configuration for output generation."""
    output_dir: Path
    families_only: bool = False  # Skip standalone products


def make_handle(title: str) -> str:
    """URL handle from a product title: "PRIORITY GTX JACKET" -> "priority-gtx-jacket"."""
    handle = re.sub(r'[^a-z0-9]+', '-', title.lower())
    return handle.strip('-')


class ProductPayloadGenerator:
    """
    Generates payload and review files for grouped catalog entries.
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

    def _selected(self, entries: List[CatalogEntry]) -> List[CatalogEntry]:
        if self.config.families_only:
            return [e for e in entries if isinstance(e, VariantFamily)]
        return list(entries)

    def write_payloads(
        self,
        entries: List[CatalogEntry],
        output_filename: str = "product_payloads.json",
    ) -> Tuple[Path, int]:
        """Write product-creation payloads. Returns (output_path, product_count)."""
        payloads = [to_product_payload(e) for e in self._selected(entries)]

        output_path = self.config.output_dir / output_filename
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(payloads, f, indent=2, ensure_ascii=False)

        return output_path, len(payloads)

    def write_variants_csv(
        self,
        entries: List[CatalogEntry],
        output_filename: str = "variants.csv",
    ) -> Tuple[Path, int]:
        """Write one row per variant. Returns (output_path, row_count)."""
        rows: List[Dict] = []
        for entry in self._selected(entries):
            handle = make_handle(entry.title)
            for i, variant in enumerate(entry.variants):
                rows.append({
                    "Handle": handle,
                    "Title": entry.title if i == 0 else "",  # Only on the first row
                    "Kind": entry.kind,
                    "Option1 Name": entry.option_name,
                    "Option1 Value": variant.option_value,
                    "Variant SKU": variant.sku,
                    "Variant Price": f"{variant.price:.2f}",
                    "Variant Inventory Qty": str(variant.stock),
                })

        output_path = self.config.output_dir / output_filename
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=VARIANT_COLUMNS)
            writer.writeheader()
            writer.writerows(rows)

        return output_path, len(rows)
