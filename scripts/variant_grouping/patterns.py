"""
Pattern Matching Engine for Variant Descriptions

Splits a single supplier description into a base product name and the
variant-specific fragment (size, colour, or a combined option value).
"""

import re
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Optional


DEFAULT_OPTION_VALUE = "Default"
DEFAULT_OPTION_NAME = "Title"

DASH_SEPARATOR = " - "
PARENTHETICAL_MAX_LENGTH = 20

_WRAPPED_IN_PARENS = re.compile(r'^\([^)]+\)$')
_TRAILING_PARENTHETICAL = re.compile(r'\s*\(([^)]+)\)\Z')
_TIRE_SIZE = re.compile(r'^\d{3}/\d{2}.?\d{2}$', re.ASCII)


@dataclass
class ParsedVariant:
    """One description split into base name and option."""
    base_name: str
    option_value: str = DEFAULT_OPTION_VALUE
    option_name: str = DEFAULT_OPTION_NAME

    def to_dict(self) -> Dict[str, str]:
        return {
            "baseName": self.base_name,
            "optionValue": self.option_value,
            "optionName": self.option_name,
        }

    def copy(self, **changes) -> "ParsedVariant":
        values = asdict(self)
        values.update(changes)
        return ParsedVariant(**values)


# ============================================================================
# MATCHERS - each returns a ParsedVariant or None
# ============================================================================

def match_dash_suffix(description: str) -> Optional[ParsedVariant]:
    """
    Name - Variant: "PRIORITY GTX JACKET - BLACK/GREY (S)".

    Splits on the last " - ". A suffix that is only a parenthetical, e.g.
    "JACKET - (XL)", is read as a size.
    """
    dash_index = description.rfind(DASH_SEPARATOR)
    if dash_index <= 0:
        return None

    base_name = description[:dash_index].strip()
    option_value = description[dash_index + len(DASH_SEPARATOR):].strip()
    if not option_value:
        return None

    option_name = "Variant"
    if _WRAPPED_IN_PARENS.match(option_value):
        inner = option_value.replace("(", "").replace(")", "").strip()
        if inner:
            option_name = "Size"
            option_value = inner

    return ParsedVariant(base_name, option_value, option_name)


def match_trailing_parenthetical(description: str) -> Optional[ParsedVariant]:
    """
    Trailing marker: "LENS GRAND PRIX (SMOKED)", "TIRE (110/90-19)".

    Short content is taken as a size. Longer content only counts when it
    is a tire size once padding is removed.
    """
    m = _TRAILING_PARENTHETICAL.search(description)
    if not m:
        return None

    content = m.group(1)
    # Padding is not part of the value: blank content is no match, and the
    # tire-size shape is tested on the trimmed text so padded tire sizes count.
    value = content.strip()
    if not value:
        return None

    if len(content) < PARENTHETICAL_MAX_LENGTH:
        option_name = "Size"
    elif _TIRE_SIZE.match(value):
        option_name = "Tire Size"
    else:
        return None

    return ParsedVariant(description[:m.start()].strip(), value, option_name)


@dataclass
class VariantPattern:
    """A named matcher in the parser's priority table."""
    name: str
    matcher: Callable[[str], Optional[ParsedVariant]]
    priority: int = 100  # Higher = checked first

    def match(self, description: str) -> Optional[ParsedVariant]:
        return self.matcher(description)


# ============================================================================
# VARIANT PATTERNS - Ordered by priority (highest first)
# ============================================================================

VARIANT_PATTERNS: List[VariantPattern] = [
    # Supplier convention: differentiator after a dash
    VariantPattern(
        name="dash_suffix",
        matcher=match_dash_suffix,
        priority=200,
    ),

    # Fallback: size or tire size in trailing parentheses
    VariantPattern(
        name="trailing_parenthetical",
        matcher=match_trailing_parenthetical,
        priority=100,
    ),
]


class VariantParser:
    """
    Applies variant patterns in priority order; the first match wins.
    """

    def __init__(self, patterns: Optional[List[VariantPattern]] = None):
        self.patterns = sorted(
            patterns or VARIANT_PATTERNS,
            key=lambda p: -p.priority
        )

    def parse(self, description: Optional[str]) -> ParsedVariant:
        """Parse one description. Never raises; unmatched input is a plain title."""
        if not description:
            return ParsedVariant(base_name="")

        for pattern in self.patterns:
            result = pattern.match(description)
            if result:
                return result

        return ParsedVariant(base_name=description)

    def matched_pattern(self, description: Optional[str]) -> Optional[str]:
        """Name of the pattern that would parse this description, if any."""
        if not description:
            return None
        for pattern in self.patterns:
            if pattern.match(description):
                return pattern.name
        return None


_default_parser = VariantParser()


def parse_description(description: Optional[str]) -> ParsedVariant:
    """Parse with the default pattern table."""
    return _default_parser.parse(description)
