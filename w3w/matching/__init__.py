"""Three-word-address pattern recognition (no network).

Available rules:
- find_possible_3wa: extract address-shaped substrings from text
- is_possible_3wa: whole string is shaped like an address
- did_you_mean: whole string is almost an address (wrong separator)
"""

from .charsets import EXCLUDED, LOOSE_SEPARATORS, SEPARATORS
from .patterns import (
    DEFAULT_MATCHER,
    AddressPatternMatcher,
    did_you_mean,
    find_possible_3wa,
    is_possible_3wa,
)

__all__ = [
    "AddressPatternMatcher",
    "DEFAULT_MATCHER",
    "find_possible_3wa",
    "is_possible_3wa",
    "did_you_mean",
    "SEPARATORS",
    "EXCLUDED",
    "LOOSE_SEPARATORS",
]
