from __future__ import annotations

from typing import Protocol, Sequence

from contact_dedupe.models import ContactRecord, MatchResult


class PairScorer(Protocol):
    """Score two contacts on the 0..1000 composite scale."""

    def score(self, left: ContactRecord, right: ContactRecord) -> int:
        ...


class MatchPipeline(Protocol):
    """Score every unordered pair and keep those at or above the threshold."""

    def run(self, records: Sequence[ContactRecord], threshold: int) -> list[MatchResult]:
        ...
