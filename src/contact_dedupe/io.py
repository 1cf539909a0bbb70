from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from contact_dedupe.datasets.profiles import CONTACT_SCHEMA, OUTPUT_COLUMNS
from contact_dedupe.models import ContactRecord, MatchResult
from contact_dedupe.schema import ContactSchema

logger = logging.getLogger(__name__)


class ContactFileError(ValueError):
    """Raised when a contact table cannot be turned into records."""


def read_contacts_csv(path: Path, schema: ContactSchema = CONTACT_SCHEMA) -> list[ContactRecord]:
    records: list[ContactRecord] = []
    with path.open("r", newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        missing = [column for column in schema.required_columns() if column not in (reader.fieldnames or [])]
        if missing:
            raise ContactFileError(f"{path}: missing column(s) {', '.join(missing)}")

        for row in reader:
            if None in row or None in row.values():
                raise ContactFileError(
                    f"{path}, line {reader.line_num}: expected {len(reader.fieldnames)} fields per row"
                )
            raw_id = (row.get(schema.id_column) or "").strip()
            try:
                record_id = int(raw_id)
            except ValueError:
                raise ContactFileError(
                    f"{path}, line {reader.line_num}: {schema.id_column} must be an integer, got {raw_id!r}"
                ) from None
            records.append(schema.record_from_row(row, record_id))

    logger.debug("Read %d contacts from %s", len(records), path)
    return records


def write_contacts_csv(
    path: Path,
    records: Sequence[ContactRecord],
    schema: ContactSchema = CONTACT_SCHEMA,
) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=schema.required_columns())
        writer.writeheader()
        for record in records:
            writer.writerow(schema.row_from_record(record))
    logger.debug("Wrote %d contacts to %s", len(records), path)


def write_matches_csv(path: Path, results: Sequence[MatchResult]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(OUTPUT_COLUMNS)
        for result in results:
            writer.writerow([result.id_a, result.id_b, result.score])
    logger.debug("Wrote %d matches to %s", len(results), path)
