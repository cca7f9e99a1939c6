"""
Option Name Classifier

Labels a batch of option values as "Size", "Color" or the generic "Option".
Classification is all-or-nothing: one value that does not fit rules the
category out for the whole batch.
"""

import re
from typing import Iterable, List


# S, M, L, XS, XL, XXS, XXL, XXXL, 2XS, 2XL, 3XL ...
LETTER_SIZE_RE = re.compile(r'M|X{0,3}[SL]|[1-5]X[SL]', re.IGNORECASE | re.ASCII)

# 32, 10.5, 9-5, 110/90, 12cm, 16oz, 30"
NUMERIC_SIZE_RE = re.compile(
    r'\d+(?:[.,/-]\d+)?(?:cm|mm|in|"|\'|oz|lbs)?',
    re.IGNORECASE | re.ASCII,
)

COLOR_NAMES: List[str] = [
    "black", "white", "red", "blue", "green", "yellow", "orange", "purple",
    "grey", "gray", "silver", "gold", "chrome", "beige", "tan", "brown", "pink",
]


def is_size_value(value: str) -> bool:
    return bool(LETTER_SIZE_RE.fullmatch(value) or NUMERIC_SIZE_RE.fullmatch(value))


def is_color_value(value: str) -> bool:
    lowered = value.lower()
    return any(color in lowered for color in COLOR_NAMES)


def guess_option_name(values: Iterable[str]) -> str:
    """Guess the option label shared by every value."""
    values = list(values)

    if all(is_size_value(v) for v in values):
        return "Size"

    if all(is_color_value(v) for v in values):
        return "Color"

    return "Option"
