"""
Input normalization for symptom matching.

canonical text: lowercased input with one conversational prefix removed, trimmed (for display)
comparison key: canonical text with whitespace, hyphens and underscores removed (for matching)
"""

import re
from typing import NamedTuple

# Checked in this order; only the first one found is removed
CONVERSATIONAL_PREFIXES = (
    "i have",
    "i am having",
    "i feel",
    "i am feeling",
    "experiencing",
    "suffering from",
)

_SEPARATORS = re.compile(r"[\s_-]+")


class NormalizedInput(NamedTuple):
    canonical: str
    key: str


def strip_prefix(text: str) -> str:
    """Remove the first occurrence of the first matching prefix, wherever it appears."""
    for prefix in CONVERSATIONAL_PREFIXES:
        if prefix in text:
            return text.replace(prefix, "", 1)
    return text


def canonicalize(raw: str) -> str:
    return strip_prefix(raw.lower()).strip()


def comparison_key(text: str) -> str:
    """Lowercase and drop every run of whitespace, hyphens and underscores."""
    return _SEPARATORS.sub("", text.lower()).strip()


def normalize(raw: str) -> NormalizedInput:
    canonical = canonicalize(raw)
    return NormalizedInput(canonical, comparison_key(canonical))
