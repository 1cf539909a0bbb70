from __future__ import annotations

from contact_dedupe.steps.distance import grapheme_distance


def similarity(left: str, right: str) -> float:
    """Edit-distance similarity in [0.0, 1.0].

    Two empty values count as a perfect match; exactly one empty value is a
    non-match. The denominator is the longer code-point length while the
    distance is measured in grapheme clusters, so published scores stay
    reproducible.
    """
    if not left and not right:
        return 1.0
    if not left or not right:
        return 0.0
    distance = grapheme_distance(left, right)
    return 1.0 - distance / max(len(left), len(right))
