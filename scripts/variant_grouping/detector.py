"""
Common Pattern Detector

Finds the shared base name across a hand-picked list of variant
descriptions and extracts the per-item option value from what differs.

    detect_common_pattern([
        "JACKET PRIORITY GTX BLACK/IRON GREY M",
        "JACKET PRIORITY GTX BLACK/IRON GREY L",
    ])
    -> option_name "Size", common_base_name "JACKET PRIORITY GTX BLACK/IRON GREY",
       option values ["M", "L"]
"""

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, List, Sequence

from .classifier import guess_option_name
from .patterns import DEFAULT_OPTION_VALUE, ParsedVariant, parse_description

log = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 3
FALLBACK_OPTION_NAME = "Option"

_ALNUM = re.compile(r'[a-zA-Z0-9]')
_LAST_SEPARATOR = re.compile(r'[^a-zA-Z0-9][a-zA-Z0-9]*\Z')
_EDGE_PUNCTUATION = re.compile(r'^[^a-zA-Z0-9]+|[^a-zA-Z0-9]+\Z')


@dataclass
class CommonPattern:
    """Structure shared by a list of variant descriptions."""
    option_name: str
    common_base_name: str
    variants: List[ParsedVariant] = field(default_factory=list)

    @property
    def option_values(self) -> List[str]:
        return [v.option_value for v in self.variants]

    def to_dict(self) -> Dict:
        return {
            "optionName": self.option_name,
            "commonBaseName": self.common_base_name,
            "variants": [v.to_dict() for v in self.variants],
        }


def _common_prefix(a: str, b: str) -> str:
    i = 0
    limit = min(len(a), len(b))
    while i < limit and a[i] == b[i]:
        i += 1
    return a[:i]


def longest_common_prefix(strings: Sequence[str]) -> str:
    """Character-exact, case-sensitive prefix shared by every string."""
    if not strings:
        return ""
    return reduce(_common_prefix, strings[1:], strings[0])


def correct_token_boundary(prefix: str, strings: Sequence[str]) -> str:
    """
    Back the prefix off to a separator when it ends mid-token.

    "Size 11" / "Size 12" share "Size 1"; the "1" belongs to the differing
    token, so the prefix becomes "Size ". With no separator to fall back to
    the prefix is dropped entirely.
    """
    if not prefix or not _ALNUM.match(prefix[-1]):
        return prefix

    end = len(prefix)
    cuts_token = any(len(s) > end and _ALNUM.match(s[end]) for s in strings)
    if not cuts_token:
        return prefix

    m = _LAST_SEPARATOR.search(prefix)
    if m:
        return prefix[:m.start() + 1]  # keep the separator
    return ""


def strip_edge_punctuation(text: str) -> str:
    """Drop leading/trailing runs of non-alphanumerics ("- Red" -> "Red")."""
    return _EDGE_PUNCTUATION.sub("", text)


def detect_common_pattern(descriptions: Sequence[str]) -> CommonPattern:
    """
    Detect base name, option name and option values for a set of variants.

    Uses the longest common prefix as the base name. When the prefix is too
    short to be a real product name, each description is parsed on its own
    and the option name is kept only if every parse agrees on it.
    """
    descriptions = [d or "" for d in descriptions]

    if not descriptions:
        return CommonPattern(option_name=FALLBACK_OPTION_NAME, common_base_name="")

    if len(descriptions) == 1:
        parsed = parse_description(descriptions[0])
        return CommonPattern(
            option_name=parsed.option_name,
            common_base_name=parsed.base_name,
            variants=[parsed],
        )

    prefix = correct_token_boundary(longest_common_prefix(descriptions), descriptions)

    if len(prefix) < MIN_PREFIX_LENGTH:
        log.debug("Common prefix %r too short, parsing %d descriptions individually",
                  prefix, len(descriptions))
        return _detect_individually(descriptions)

    base_name = strip_edge_punctuation(prefix.strip())
    values = []
    for desc in descriptions:
        value = strip_edge_punctuation(desc[len(prefix):].strip())
        values.append(value or DEFAULT_OPTION_VALUE)

    option_name = guess_option_name(values)

    return CommonPattern(
        option_name=option_name,
        common_base_name=base_name,
        variants=[ParsedVariant(base_name, value, option_name) for value in values],
    )


def _detect_individually(descriptions: Sequence[str]) -> CommonPattern:
    parsed = [parse_description(d) for d in descriptions]

    names = {p.option_name for p in parsed}
    consensus = names.pop() if len(names) == 1 else FALLBACK_OPTION_NAME

    return CommonPattern(
        option_name=consensus,
        common_base_name=parsed[0].base_name,
        variants=[p.copy(option_name=consensus) for p in parsed],
    )
