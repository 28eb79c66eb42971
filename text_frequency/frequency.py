from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from text_frequency.types import RankedEntry

LOGGER = logging.getLogger(__name__)

WORD_SEPARATOR = " "


@dataclass(frozen=True)
class FrequencyCounts:
    """Word and letter tables built from one canonical text."""

    words: Counter[str] = field(default_factory=Counter)
    letters: Counter[str] = field(default_factory=Counter)
    total_words: int = 0
    total_letters: int = 0


def count_frequencies(canonical: str) -> FrequencyCounts:
    """Count words and letters in canonical text.

    ``total_words`` is the length of a plain split on single spaces, so runs
    of separators contribute empty segments to it even though empty segments
    never reach the word table. ``total_letters`` is one more than the number
    of characters in the text, matching the split-on-empty-string count the
    reports have always used.
    """

    words: Counter[str] = Counter()
    letters: Counter[str] = Counter()

    segments = canonical.split(WORD_SEPARATOR) if canonical else []
    for segment in segments:
        if not segment:
            continue
        words[segment] += 1
        letters.update(segment)

    LOGGER.debug(
        "Counted %d unique words and %d unique letters",
        len(words),
        len(letters),
    )
    return FrequencyCounts(
        words=words,
        letters=letters,
        total_words=len(segments),
        total_letters=len(canonical) + 1,
    )


def percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100.0 * count / total


def rank(table: Counter[str], top: int, total: int) -> List[RankedEntry]:
    """Order a frequency table by count and attach percentages.

    ``top`` of 0 keeps every entry. Entries with equal counts stay in the
    order they were first seen.
    """

    if top < 0:
        raise ValueError(f"top must be zero or positive, got {top}.")

    ranked = table.most_common(top or None)
    return [
        {"value": value, "count": count, "percentage": percentage(count, total)}
        for value, count in ranked
    ]
