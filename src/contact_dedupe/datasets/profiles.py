from __future__ import annotations

from contact_dedupe.schema import ContactSchema, FieldTag

# Column layout of the contact export this tool consumes.
CONTACT_COLUMNS = [
    "contactID",
    "name",
    "name1",
    "email",
    "postalZip",
    "address",
]

OUTPUT_COLUMNS = ["ContactID1", "ContactID2", "SimilarityScore"]


CONTACT_SCHEMA = ContactSchema.from_mapping(
    columns={
        FieldTag.GIVEN_NAME: "name",
        FieldTag.FAMILY_NAME: "name1",
        FieldTag.EMAIL: "email",
        FieldTag.POSTAL_CODE: "postalZip",
        FieldTag.ADDRESS: "address",
    },
    weights={
        FieldTag.GIVEN_NAME: 2.0,
        FieldTag.FAMILY_NAME: 2.0,
        FieldTag.EMAIL: 3.0,
        FieldTag.POSTAL_CODE: 2.0,
        FieldTag.ADDRESS: 2.0,
    },
    id_column="contactID",
)
