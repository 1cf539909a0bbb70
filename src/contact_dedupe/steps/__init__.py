from contact_dedupe.steps.distance import grapheme_distance, graphemes
from contact_dedupe.steps.pairs import chunk_rows, enumerate_pairs, pair_count
from contact_dedupe.steps.scoring import MAX_SCORE, WeightedRecordScorer, score_pair
from contact_dedupe.steps.similarity import similarity

__all__ = [
    "MAX_SCORE",
    "WeightedRecordScorer",
    "chunk_rows",
    "enumerate_pairs",
    "grapheme_distance",
    "graphemes",
    "pair_count",
    "score_pair",
    "similarity",
]
