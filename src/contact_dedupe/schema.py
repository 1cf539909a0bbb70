from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping

from contact_dedupe.models import ContactRecord


class FieldTag(StrEnum):
    GIVEN_NAME = "GIVEN_NAME"
    FAMILY_NAME = "FAMILY_NAME"
    EMAIL = "EMAIL"
    POSTAL_CODE = "POSTAL_CODE"
    ADDRESS = "ADDRESS"


_TAG_ATTRIBUTES = {
    FieldTag.GIVEN_NAME: "given_name",
    FieldTag.FAMILY_NAME: "family_name",
    FieldTag.EMAIL: "email",
    FieldTag.POSTAL_CODE: "postal_code",
    FieldTag.ADDRESS: "address",
}


@dataclass(frozen=True)
class ContactSchema:
    """Maps source-table columns and scoring weights to semantic field tags."""

    tag_to_column: Mapping[FieldTag, str]
    tag_to_weight: Mapping[FieldTag, float]
    id_column: str = "contactID"

    @classmethod
    def from_mapping(
        cls,
        columns: Mapping[FieldTag, str],
        weights: Mapping[FieldTag, float],
        id_column: str = "contactID",
    ) -> "ContactSchema":
        return cls(tag_to_column=dict(columns), tag_to_weight=dict(weights), id_column=id_column)

    @property
    def tags(self) -> tuple[FieldTag, ...]:
        return tuple(self.tag_to_weight)

    @property
    def total_weight(self) -> float:
        return sum(self.tag_to_weight.values())

    def column_for(self, tag: FieldTag) -> str:
        return self.tag_to_column[tag]

    def weight_for(self, tag: FieldTag) -> float:
        return self.tag_to_weight.get(tag, 0.0)

    def value_for(self, record: ContactRecord, tag: FieldTag) -> str:
        return getattr(record, _TAG_ATTRIBUTES[tag])

    def record_from_row(self, row: Mapping[str, str | None], record_id: int) -> ContactRecord:
        values = {
            _TAG_ATTRIBUTES[tag]: row.get(column) or "" for tag, column in self.tag_to_column.items()
        }
        return ContactRecord(id=record_id, **values)

    def row_from_record(self, record: ContactRecord) -> dict[str, object]:
        row: dict[str, object] = {self.id_column: record.id}
        for tag, column in self.tag_to_column.items():
            row[column] = self.value_for(record, tag)
        return row

    def required_columns(self) -> list[str]:
        return [self.id_column, *self.tag_to_column.values()]
