from __future__ import annotations

from typing import TypedDict


class RankedEntry(TypedDict):
    """A word or letter with its count and share of the total."""

    value: str
    count: int
    percentage: float


class ReportInfo(TypedDict):
    file: str
    top: int
    total_row_characters: int
    total_words: int
    total_letters: int
    total_unique_words: int
    total_unique_letters: int
