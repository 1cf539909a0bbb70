from contact_dedupe.datasets.profiles import CONTACT_COLUMNS, CONTACT_SCHEMA, OUTPUT_COLUMNS
from contact_dedupe.datasets.reference import ReferenceDatasetGenerator

__all__ = ["CONTACT_COLUMNS", "CONTACT_SCHEMA", "OUTPUT_COLUMNS", "ReferenceDatasetGenerator"]
