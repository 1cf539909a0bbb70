from __future__ import annotations

from contact_dedupe.datasets.profiles import CONTACT_SCHEMA
from contact_dedupe.models import ContactRecord
from contact_dedupe.schema import ContactSchema
from contact_dedupe.steps.similarity import similarity

MAX_SCORE = 1000


class WeightedRecordScorer:
    """Composite 0..1000 score from per-field similarities and schema weights."""

    def __init__(self, schema: ContactSchema = CONTACT_SCHEMA, scale: int = MAX_SCORE) -> None:
        if schema.total_weight <= 0:
            raise ValueError("schema must assign a positive total weight")
        self._schema = schema
        self._scale = scale
        self._weighted_tags = [(tag, schema.weight_for(tag)) for tag in schema.tags]
        self._total_weight = schema.total_weight

    @property
    def schema(self) -> ContactSchema:
        return self._schema

    def score(self, left: ContactRecord, right: ContactRecord) -> int:
        total = 0.0
        for tag, weight in self._weighted_tags:
            total += similarity(self._schema.value_for(left, tag), self._schema.value_for(right, tag)) * weight
        # int() truncates toward zero; the sum is never negative.
        return int((total * self._scale) / self._total_weight)


_DEFAULT_SCORER = WeightedRecordScorer()


def score_pair(left: ContactRecord, right: ContactRecord) -> int:
    return _DEFAULT_SCORER.score(left, right)
