"""Tests for ScoreTally."""
from __future__ import annotations

import pytest

from tick_minigame import ScoreTally, SummaryRow, UsageError


class TestRecord:
    def test_empty(self) -> None:
        tally = ScoreTally()
        assert tally.summarize() == ()
        assert tally.total() == 0
        assert len(tally) == 0

    def test_record_returns_running_count(self) -> None:
        tally = ScoreTally()
        assert tally.record("apple") == 1
        assert tally.record("apple") == 2
        assert tally.record("can") == 1
        assert tally.count("apple") == 2
        assert tally.count("missing") == 0
        assert tally.total() == 3

    def test_tags_in_first_seen_order(self) -> None:
        tally = ScoreTally()
        for tag in ["can", "apple", "can", "gem"]:
            tally.record(tag)
        assert tally.tags() == ["can", "apple", "gem"]


class TestSummarize:
    def test_sorted_by_descending_count(self) -> None:
        tally = ScoreTally()
        for tag in ["gem", "apple", "apple", "can", "can", "can"]:
            tally.record(tag)
        assert tally.summarize() == (
            SummaryRow("can", 3),
            SummaryRow("apple", 2),
            SummaryRow("gem", 1),
        )

    def test_ties_keep_first_seen_order(self) -> None:
        tally = ScoreTally()
        for tag in ["bottle", "apple", "gem", "apple", "bottle"]:
            tally.record(tag)
        summary = tally.summarize()
        assert [row.tag for row in summary] == ["bottle", "apple", "gem"]
        assert [row.count for row in summary] == [2, 2, 1]

    def test_summary_is_immutable_snapshot(self) -> None:
        tally = ScoreTally()
        tally.record("apple")
        summary = tally.summarize()
        tally.record("apple")
        assert summary == (SummaryRow("apple", 1),)
        assert isinstance(summary, tuple)

    def test_non_string_tags(self) -> None:
        tally = ScoreTally()
        tally.record(7)
        tally.record(("sprite", 2))
        tally.record(7)
        assert tally.summarize() == (SummaryRow(7, 2), SummaryRow(("sprite", 2), 1))


class TestFreeze:
    def test_record_after_freeze_raises(self) -> None:
        tally = ScoreTally()
        tally.record("apple")
        tally.freeze()
        assert tally.frozen is True
        with pytest.raises(UsageError, match="frozen"):
            tally.record("apple")
        assert tally.count("apple") == 1

    def test_summarize_after_freeze(self) -> None:
        tally = ScoreTally()
        tally.record("can")
        tally.freeze()
        assert tally.summarize() == (SummaryRow("can", 1),)
