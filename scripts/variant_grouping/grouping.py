"""
Variant Family Grouping

Groups catalog records by the base name parsed from their description and
turns each group into either a standalone product or a variant family.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from .patterns import ParsedVariant, parse_description

T = TypeVar("T")


def get_description(item: Any) -> str:
    """Description of a record, whether it is a mapping or an object."""
    if isinstance(item, dict):
        value = item.get("description", "")
    else:
        value = getattr(item, "description", "")
    return value or ""


def group_items(
    items: List[T],
    key: Callable[[Any], str] = get_description,
) -> Dict[str, List[T]]:
    """
    Group items by the parsed base name of their description.

    Groups appear in first-seen order and items keep input order within
    their group. No case or whitespace folding beyond the parser's own trim.
    """
    groups: Dict[str, List[T]] = {}

    for item in items:
        base_name = parse_description(key(item)).base_name
        if base_name not in groups:
            groups[base_name] = []
        groups[base_name].append(item)

    return groups


SEARCH_FIELDS = ["sku", "description", "brand", "aliases"]


def _field(item: Any, name: str):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def search_text(item: Any) -> str:
    """Lowercased text searched for an item: SKU, description, brand and aliases."""
    parts = []
    for name in SEARCH_FIELDS:
        value = _field(item, name)
        if isinstance(value, (list, tuple)):
            parts.extend(str(v) for v in value if v)
        elif value:
            parts.append(str(value))
    return " ".join(parts).lower()


def search_items(items: List[T], query: Optional[str]) -> List[T]:
    """Keep items whose search text contains every query token (case-insensitive)."""
    tokens = (query or "").lower().split()
    if not tokens:
        return list(items)

    return [item for item in items if all(token in search_text(item) for token in tokens)]


# ============================================================================
# CATALOG RECORDS
# ============================================================================

@dataclass
class CatalogItem:
    """A normalized supplier/feed record."""
    sku: str
    description: str
    price: float = 0.0
    stock: int = 0
    brand: str = ""
    upc: str = ""
    supplier: str = ""
    aliases: List[str] = field(default_factory=list)  # Other-language descriptions, alternate part numbers
    raw: Dict = field(default_factory=dict)


@dataclass
class VariantOption:
    """One purchasable SKU inside a variant family."""
    sku: str
    option_value: str
    price: float = 0.0
    stock: int = 0


@dataclass
class SingleProduct:
    """A record with no siblings; published as a product on its own."""
    item: CatalogItem
    parsed: ParsedVariant
    kind: str = "single"

    @property
    def title(self) -> str:
        return self.item.description

    @property
    def option_name(self) -> str:
        return self.parsed.option_name

    @property
    def variants(self) -> List[VariantOption]:
        return [VariantOption(
            sku=self.item.sku,
            option_value=self.parsed.option_value,
            price=self.item.price,
            stock=self.item.stock,
        )]


@dataclass
class VariantFamily:
    """Records sharing a base name, merged into one product with variants."""
    title: str
    option_name: str
    items: List[CatalogItem] = field(default_factory=list)
    variants: List[VariantOption] = field(default_factory=list)
    kind: str = "family"

    @property
    def sku_list(self) -> List[str]:
        return [v.sku for v in self.variants if v.sku]

    @property
    def option_values(self) -> List[str]:
        return [v.option_value for v in self.variants]


CatalogEntry = Union[SingleProduct, VariantFamily]


def build_catalog_entries(items: List[CatalogItem]) -> List[CatalogEntry]:
    """
    Group catalog items into single products and variant families.

    A family takes its option name from the first member's parse; each
    variant keeps the option value parsed from its own description.
    """
    entries: List[CatalogEntry] = []

    for base_name, members in group_items(items).items():
        if len(members) == 1:
            only = members[0]
            entries.append(SingleProduct(item=only, parsed=parse_description(only.description)))
            continue

        variants = []
        for member in members:
            parsed = parse_description(member.description)
            variants.append(VariantOption(
                sku=member.sku,
                option_value=parsed.option_value,
                price=member.price,
                stock=member.stock,
            ))

        entries.append(VariantFamily(
            title=base_name,
            option_name=parse_description(members[0].description).option_name,
            items=members,
            variants=variants,
        ))

    return entries


def to_product_payload(entry: CatalogEntry) -> Dict:
    """Shape consumed by the storefront product-creation step."""
    return {
        "title": entry.title,
        "optionName": entry.option_name,
        "variants": [
            {
                "sku": v.sku,
                "optionValue": v.option_value,
                "price": v.price,
                "stock": v.stock,
            }
            for v in entry.variants
        ],
    }
