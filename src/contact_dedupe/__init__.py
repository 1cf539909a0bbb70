"""Duplicate contact detection by weighted edit-distance scoring."""

from contact_dedupe.models import ContactRecord, MatchResult
from contact_dedupe.runners import ParallelMatcher
from contact_dedupe.schema import ContactSchema, FieldTag

__all__ = ["ContactRecord", "ContactSchema", "FieldTag", "MatchResult", "ParallelMatcher"]
