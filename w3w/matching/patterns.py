"""Local recognition of strings shaped like three-word addresses.

Three independent rules, none of which touch the network:

- ``find_candidates``: every ``word.word.word`` embedded in free text
- ``is_full_match``: the whole string is an address, optionally prefixed
  by slashes (``///filled.count.soap``)
- ``is_likely_typo``: the whole string is three words joined by a
  plausible wrong separator (``filled-count-soap``)

The input is first cut into maximal runs of word / non-word characters
and every rule then walks those runs once, so matching time is linear in
the input length whatever the input looks like.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import List, Tuple

from .charsets import (
    INNER_SPACES,
    LOOSE_SEPARATORS,
    MAX_INNER_TOKENS,
    MAX_LOOSE_RUN,
    SEPARATORS,
    is_word_char,
)

Run = Tuple[bool, str]


def split_runs(text: str) -> List[Run]:
    """Cut text into alternating ``(is_word, chunk)`` runs."""
    return [(is_word, "".join(chars)) for is_word, chars in groupby(text, key=is_word_char)]


@dataclass(frozen=True)
class AddressPatternMatcher:
    """Stateless classifier for three-word-address shaped text.

    Attributes:
        separators: Characters accepted between the three words.
        loose_separators: Characters accepted by the typo rule.
        inner_spaces: Characters joining sub-tokens of a multi-word position.
    """

    separators: frozenset[str] = SEPARATORS
    loose_separators: frozenset[str] = LOOSE_SEPARATORS
    inner_spaces: frozenset[str] = INNER_SPACES

    def _is_separator(self, run: Run) -> bool:
        is_word, chunk = run
        return not is_word and len(chunk) == 1 and chunk in self.separators

    def _is_loose_separator(self, run: Run) -> bool:
        is_word, chunk = run
        return (
            not is_word
            and 1 <= len(chunk) <= MAX_LOOSE_RUN
            and all(ch in self.loose_separators for ch in chunk)
        )

    def find_candidates(self, text: str) -> List[str]:
        """Return every non-overlapping ``word.word.word`` substring, in order.

        Words are maximal runs, so a hit always starts at the beginning of
        a run; after a hit the scan resumes right after its third word.
        Multi-word positions are not recognised here.
        """
        runs = split_runs(text)
        found: List[str] = []
        i = 0
        while i + 4 < len(runs):
            if (
                runs[i][0]
                and self._is_separator(runs[i + 1])
                and self._is_separator(runs[i + 3])
            ):
                found.append("".join(chunk for _, chunk in runs[i : i + 5]))
                i += 5
            else:
                i += 1
        return found

    def is_full_match(self, text: str) -> bool:
        """Check the whole string is a three-word address.

        Any number of leading slashes is ignored. Each of the three
        positions may hold up to three extra sub-tokens separated by a
        single space or no-break space ("new york.some place.here").
        """
        runs = split_runs(text.lstrip("/"))
        if not runs or not runs[0][0] or not runs[-1][0]:
            return False

        separators_seen = 0
        inner_tokens = 0
        for is_word, chunk in runs:
            if is_word:
                continue
            if len(chunk) != 1:
                return False
            if chunk in self.separators:
                separators_seen += 1
                inner_tokens = 0
                if separators_seen > 2:
                    return False
            elif chunk in self.inner_spaces:
                inner_tokens += 1
                if inner_tokens > MAX_INNER_TOKENS:
                    return False
            else:
                return False
        return separators_seen == 2

    def is_likely_typo(self, text: str) -> bool:
        """Check the string is three words joined by 1-2 loose separator characters.

        A single leading slash is tolerated.
        """
        if text.startswith("/"):
            text = text[1:]
        runs = split_runs(text)
        if len(runs) != 5 or not runs[0][0]:
            return False
        return self._is_loose_separator(runs[1]) and self._is_loose_separator(runs[3])


DEFAULT_MATCHER = AddressPatternMatcher()


def find_possible_3wa(text: str) -> List[str]:
    return DEFAULT_MATCHER.find_candidates(text)


def is_possible_3wa(text: str) -> bool:
    return DEFAULT_MATCHER.is_full_match(text)


def did_you_mean(text: str) -> bool:
    return DEFAULT_MATCHER.is_likely_typo(text)
