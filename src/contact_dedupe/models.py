from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContactRecord:
    """One contact row as loaded from the input table."""

    id: int
    given_name: str = ""
    family_name: str = ""
    email: str = ""
    postal_code: str = ""
    address: str = ""


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Likely-duplicate pair; id_a comes from the earlier input row."""

    id_a: int
    id_b: int
    score: int

    def sort_key(self) -> tuple[int, int]:
        return (self.id_a, self.id_b)
