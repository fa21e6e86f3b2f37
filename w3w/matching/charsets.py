"""Character classes shared by the three-word-address rules.

A three-word address is three words joined by a separator. The tables
below decide, per code point, which of three roles a character plays:

- separator: the full stop of the address (``.`` and its equivalents in
  other scripts)
- word: any character that is neither excluded nor a separator
- other: digits, ASCII punctuation, a few symbols and all whitespace

The tables are frozen at import and never mutated.
"""

from __future__ import annotations

from enum import Enum

# ASCII full stop plus the full stops used by the non-Latin languages.
SEPARATORS: frozenset[str] = frozenset(
    "."
    "｡"  # halfwidth ideographic full stop
    "。"  # ideographic full stop
    "･"  # halfwidth katakana middle dot
    "・"  # katakana middle dot
    "︒"  # presentation form for vertical ideographic full stop
    "។"  # khmer sign khan
    "։"  # armenian full stop
    "။"  # myanmar sign section
    "۔"  # arabic full stop
    "።"  # ethiopic full stop
    "।"  # devanagari danda
)

EXCLUDED: frozenset[str] = frozenset(
    "0123456789"
    "`~!@#$%^&*()+-_=[{]}\\|'<>.,?/;:"
    "£§º©®"
)

# Characters a user is likely to type instead of the real separator.
LOOSE_SEPARATORS: frozenset[str] = SEPARATORS | frozenset(
    ":^_ ,\\/+'&;|-\u3000"
)

# Joins the sub-tokens of a multi-word position ("new york").
INNER_SPACES: frozenset[str] = frozenset(" \u00a0")

MAX_INNER_TOKENS = 3
MAX_LOOSE_RUN = 2


class CharRole(Enum):
    WORD = "word"
    SEPARATOR = "separator"
    OTHER = "other"


def char_role(ch: str) -> CharRole:
    if ch in SEPARATORS:
        return CharRole.SEPARATOR
    if ch in EXCLUDED or ch.isspace():
        return CharRole.OTHER
    return CharRole.WORD


def is_word_char(ch: str) -> bool:
    return char_role(ch) is CharRole.WORD
