"""Per-tag score tally."""
from __future__ import annotations

from tick_minigame.types import AssetTag, OrderedSummary, SummaryRow, UsageError


class ScoreTally:
    """Counts collected items per asset tag, remembering first-seen order."""

    def __init__(self) -> None:
        # dict preserves insertion order, which is the tie-break order.
        self._counts: dict[AssetTag, int] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def record(self, tag: AssetTag) -> int:
        """Count one collected item. Returns the new count for *tag*."""
        if self._frozen:
            raise UsageError(f"Cannot record {tag!r}: tally is frozen")
        count = self._counts.get(tag, 0) + 1
        self._counts[tag] = count
        return count

    def freeze(self) -> None:
        """Make the tally read-only. Called once the round is over."""
        self._frozen = True

    def count(self, tag: AssetTag) -> int:
        return self._counts.get(tag, 0)

    def total(self) -> int:
        return sum(self._counts.values())

    def tags(self) -> list[AssetTag]:
        """Tags in first-seen order."""
        return list(self._counts)

    def summarize(self) -> OrderedSummary:
        """Rows sorted by descending count; equal counts keep first-seen order."""
        rows = [SummaryRow(tag, n) for tag, n in self._counts.items()]
        rows.sort(key=lambda row: -row.count)
        return tuple(rows)

    def __len__(self) -> int:
        return len(self._counts)
