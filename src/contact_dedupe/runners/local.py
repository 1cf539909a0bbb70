from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import Executor, ThreadPoolExecutor

from contact_dedupe.interfaces import PairScorer
from contact_dedupe.models import ContactRecord, MatchResult
from contact_dedupe.steps.pairs import chunk_rows, enumerate_pairs, pair_count
from contact_dedupe.steps.scoring import WeightedRecordScorer

logger = logging.getLogger(__name__)

# Chunks per worker; more than one lets fast workers pick up slack.
_CHUNKS_PER_WORKER = 4


def default_worker_count() -> int:
    return os.cpu_count() or 1


class ParallelMatcher:
    """All-pairs matcher that fans row slices out over an executor.

    Pass ``executor`` to control scheduling (e.g. a single-worker pool in
    tests) and ``workers`` to say how many workers it runs, which sets the
    chunk count. Without an executor, a thread pool of ``workers`` threads
    (default: one per CPU) is created per run.
    """

    def __init__(
        self,
        scorer: PairScorer | None = None,
        executor: Executor | None = None,
        chunk_size: int | None = None,
        workers: int | None = None,
    ) -> None:
        if chunk_size is not None and chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if workers is not None and workers < 1:
            raise ValueError("workers must be >= 1")
        self._scorer = scorer if scorer is not None else WeightedRecordScorer()
        self._executor = executor
        self._workers = workers
        self._chunk_size = chunk_size

    def run(self, records: Sequence[ContactRecord], threshold: int) -> list[MatchResult]:
        records = list(records)
        if len(records) < 2:
            return []

        workers = self._workers or default_worker_count()
        if self._executor is not None:
            return self._run_on(self._executor, records, threshold, workers)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="contact-dedupe") as executor:
            return self._run_on(executor, records, threshold, workers)

    def _run_on(
        self,
        executor: Executor,
        records: list[ContactRecord],
        threshold: int,
        workers: int,
    ) -> list[MatchResult]:
        chunks = chunk_rows(len(records), self._chunk_count(len(records), workers))
        logger.debug(
            "Scoring %d records (%d pairs) with %d workers in %d chunks",
            len(records),
            pair_count(len(records)),
            workers,
            len(chunks),
        )

        futures = [executor.submit(_score_rows, self._scorer, records, rows, threshold) for rows in chunks]
        results: list[MatchResult] = []
        for future in futures:
            results.extend(future.result())

        logger.info("Found %d matches at threshold %d", len(results), threshold)
        return results

    def _chunk_count(self, size: int, workers: int) -> int:
        if self._chunk_size is None:
            return max(1, workers * _CHUNKS_PER_WORKER)
        return max(1, -(-pair_count(size) // self._chunk_size))


def _score_rows(
    scorer: PairScorer,
    records: Sequence[ContactRecord],
    rows: range,
    threshold: int,
) -> list[MatchResult]:
    matches: list[MatchResult] = []
    for i, j in enumerate_pairs(len(records), rows):
        left = records[i]
        right = records[j]
        score = scorer.score(left, right)
        if score >= threshold:
            matches.append(MatchResult(id_a=left.id, id_b=right.id, score=score))
    return matches