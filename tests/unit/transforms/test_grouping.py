"""Unit tests for group-by helpers."""

from __future__ import annotations

from transforms.grouping import group_and_reduce, group_by


def test_group_by_preserves_first_seen_key_order() -> None:
    """Keys should appear in first-seen order with per-group input order."""
    words = ["bee", "ant", "bat", "cow", "ape"]

    groups = group_by(words, lambda word: word[0])

    assert list(groups.items()) == [
        ("b", ["bee", "bat"]),
        ("a", ["ant", "ape"]),
        ("c", ["cow"]),
    ]


def test_group_and_reduce_applies_reducer_per_group() -> None:
    """Reducer should run once per group."""
    totals = group_and_reduce([1, 2, 3, 4, 5], lambda value: value % 2, sum)

    assert totals == {1: 9, 0: 6}


def test_group_by_empty_input_returns_empty_mapping() -> None:
    """Empty input should produce no groups."""
    assert group_by([], lambda value: value) == {}
