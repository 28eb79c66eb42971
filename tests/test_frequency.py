from __future__ import annotations

from collections import Counter

import pytest
from text_frequency import count_frequencies, rank


def test_count_frequencies_builds_word_and_letter_tables() -> None:
    counts = count_frequencies("hi hi hi")

    assert counts.words == Counter({"hi": 3})
    assert counts.letters == Counter({"h": 3, "i": 3})
    assert counts.total_words == 3
    assert counts.total_letters == 9


def test_empty_segments_count_towards_total_only() -> None:
    counts = count_frequencies("a  b")

    assert counts.words == Counter({"a": 1, "b": 1})
    assert counts.total_words == 3
    assert sum(counts.words.values()) == 2
    assert sum(counts.letters.values()) == 2


def test_empty_text_has_no_words() -> None:
    counts = count_frequencies("")

    assert counts.words == Counter()
    assert counts.letters == Counter()
    assert counts.total_words == 0
    assert counts.total_letters == 1


def test_word_table_sums_to_non_empty_token_count() -> None:
    canonical = "the cat and the hat and the bat"
    counts = count_frequencies(canonical)

    assert sum(counts.words.values()) == len([token for token in canonical.split(" ") if token])
    assert counts.words["the"] == 3


def test_rank_orders_by_count_descending() -> None:
    table = Counter({"a": 1, "b": 5, "c": 3, "d": 3})
    ranked = rank(table, top=0, total=12)

    counts = [entry["count"] for entry in ranked]
    assert counts == sorted(counts, reverse=True)
    assert {entry["value"] for entry in ranked} == {"a", "b", "c", "d"}
    assert ranked[0] == {"value": "b", "count": 5, "percentage": pytest.approx(100 * 5 / 12)}


def test_rank_ties_keep_first_seen_order() -> None:
    table = Counter("zyx")
    assert [entry["value"] for entry in rank(table, top=0, total=3)] == ["z", "y", "x"]


def test_rank_truncates_to_top() -> None:
    table = Counter({"a": 4, "b": 3, "c": 2, "d": 1})

    assert [entry["value"] for entry in rank(table, top=2, total=10)] == ["a", "b"]
    assert len(rank(table, top=10, total=10)) == 4
    assert sum(entry["percentage"] for entry in rank(table, top=2, total=10)) <= 100.0


def test_rank_full_table_percentages_sum_to_hundred() -> None:
    counts = count_frequencies("one two two three three three")
    ranked = rank(counts.words, top=0, total=counts.total_words)

    assert sum(entry["percentage"] for entry in ranked) == pytest.approx(100.0)


def test_rank_zero_total_gives_zero_percentage() -> None:
    assert rank(Counter({"a": 1}), top=0, total=0) == [
        {"value": "a", "count": 1, "percentage": 0.0}
    ]


def test_rank_rejects_negative_top() -> None:
    with pytest.raises(ValueError):
        rank(Counter({"a": 1}), top=-1, total=1)
