import pytest

from contact_dedupe.steps import grapheme_distance, graphemes


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("kitten", "sitting", 3),
        ("", "", 0),
        ("abc", "abc", 0),
        ("hello", "helo", 1),
        ("saturday", "sunday", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("a", "abcdef", 5),
        ("abcdef", "a", 5),
    ],
)
def test_grapheme_distance_ascii(left: str, right: str, expected: int) -> None:
    assert grapheme_distance(left, right) == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("café", "cafe", 1),
        ("über", "uber", 1),
        ("\U0001F31F", "⭐", 1),
        ("cafe\u0301", "cafe", 1),
        ("café", "cafe\u0301", 1),
        ("\U0001F1FA\U0001F1F8", "\U0001F1EC\U0001F1E7", 1),
        ("\U0001F468\u200d\U0001F469\u200d\U0001F467", "", 1),
    ],
)
def test_grapheme_distance_counts_clusters(left: str, right: str, expected: int) -> None:
    assert grapheme_distance(left, right) == expected


def test_graphemes_groups_combining_marks() -> None:
    assert graphemes("Jose\u0301") == ["J", "o", "s", "e\u0301"]
    assert graphemes("") == []


@pytest.mark.parametrize("text", ["", "x", "Renée", "\U0001F44D\U0001F3FD ok", "123 Main St"])
def test_grapheme_distance_to_self_is_zero(text: str) -> None:
    assert grapheme_distance(text, text) == 0
    assert grapheme_distance("", text) == len(graphemes(text))


@pytest.mark.parametrize(
    ("left", "right"),
    [("kitten", "sitting"), ("Müller", "Mueller"), ("", "abc"), ("\U0001F31F a", "b ⭐")],
)
def test_grapheme_distance_is_symmetric(left: str, right: str) -> None:
    assert grapheme_distance(left, right) == grapheme_distance(right, left)
