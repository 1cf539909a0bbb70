import pytest

from contact_dedupe.datasets import ReferenceDatasetGenerator


def test_generator_is_reproducible() -> None:
    first = ReferenceDatasetGenerator(seed=42).generate(size=50)
    second = ReferenceDatasetGenerator(seed=42).generate(size=50)

    assert first == second
    assert [record.id for record in first] == list(range(1, 51))


def test_generator_injects_near_duplicates() -> None:
    records = ReferenceDatasetGenerator(seed=1).generate(size=100, duplicate_rate=0.5)

    postal_codes = [record.postal_code for record in records]
    assert len(set(postal_codes)) < len(postal_codes)


def test_generator_edge_cases() -> None:
    assert ReferenceDatasetGenerator().generate(size=0) == []
    assert len(ReferenceDatasetGenerator().generate(size=1, duplicate_rate=0.9)) == 1
    with pytest.raises(ValueError):
        ReferenceDatasetGenerator().generate(size=-1)
    with pytest.raises(ValueError):
        ReferenceDatasetGenerator().generate(size=10, duplicate_rate=1.0)
