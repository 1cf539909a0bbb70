from dataclasses import replace

import pytest

from conftest import make_contact
from contact_dedupe.datasets import CONTACT_SCHEMA
from contact_dedupe.models import ContactRecord
from contact_dedupe.schema import ContactSchema, FieldTag
from contact_dedupe.steps import WeightedRecordScorer, score_pair


def test_identical_contacts_score_maximum(john: ContactRecord) -> None:
    assert score_pair(john, replace(john, id=2)) == 1000


def test_similar_contacts_score(john: ContactRecord, jon: ContactRecord) -> None:
    assert score_pair(john, jon) == 906


def test_different_contacts_score(john: ContactRecord, jane: ContactRecord) -> None:
    assert score_pair(john, jane) == 336


def test_all_empty_contacts_score_maximum() -> None:
    assert score_pair(make_contact(1), make_contact(2)) == 1000


def test_empty_contact_only_matches_on_shared_blanks() -> None:
    normal = make_contact(1, "John", "Doe", "john@example.com", "", "123 Main St")
    # only the blank postal code agrees: 2 / 11 truncated
    assert score_pair(normal, make_contact(2)) == 181


def test_accented_contacts_stay_close() -> None:
    accented = make_contact(1, "José", "García", "jose@example.com", "12345", "123 Café St")
    plain = make_contact(2, "Jose", "Garcia", "jose@example.com", "12345", "123 Cafe St")
    assert score_pair(accented, plain) == 907


def test_score_is_symmetric_and_bounded(john: ContactRecord, jon: ContactRecord, jane: ContactRecord) -> None:
    for left, right in [(john, jon), (john, jane), (jon, jane)]:
        assert score_pair(left, right) == score_pair(right, left)
        assert 0 <= score_pair(left, right) <= 1000


def test_scorer_uses_schema_weights(john: ContactRecord, jane: ContactRecord) -> None:
    email_only = ContactSchema.from_mapping(
        columns=CONTACT_SCHEMA.tag_to_column,
        weights={FieldTag.EMAIL: 1.0},
    )
    scorer = WeightedRecordScorer(schema=email_only)
    assert scorer.score(john, replace(jane, email=john.email)) == 1000
    assert scorer.score(john, jane) == 812


def test_scorer_rejects_zero_total_weight() -> None:
    no_weights = ContactSchema.from_mapping(columns=CONTACT_SCHEMA.tag_to_column, weights={})
    with pytest.raises(ValueError):
        WeightedRecordScorer(schema=no_weights)
