from __future__ import annotations

import regex

# Extended grapheme cluster (UAX #29).
_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters."""
    return _GRAPHEME.findall(text)


def grapheme_distance(left: str, right: str) -> int:
    """Levenshtein distance counted in grapheme clusters rather than code points.

    A base letter with a combining accent, or a multi-codepoint emoji, is one
    unit: inserting, deleting or replacing it costs 1.
    """
    if left == right:
        return 0

    left_units = graphemes(left)
    right_units = graphemes(right)
    if not left_units:
        return len(right_units)
    if not right_units:
        return len(left_units)

    prev = list(range(len(right_units) + 1))
    for i, u1 in enumerate(left_units, start=1):
        curr = [i]
        for j, u2 in enumerate(right_units, start=1):
            cost = 0 if u1 == u2 else 1
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]
