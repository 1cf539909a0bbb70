from __future__ import annotations

import random
from dataclasses import replace

from contact_dedupe.models import ContactRecord

_GIVEN_NAMES = [
    "John",
    "Jane",
    "José",
    "Zoë",
    "Maya",
    "Daniel",
    "Chris",
    "Olivia",
    "Noah",
    "Renée",
]
_FAMILY_NAMES = [
    "Doe",
    "Smith",
    "García",
    "Müller",
    "Taylor",
    "Wilson",
    "Martin",
    "Brown",
]
_STREETS = [
    "Main Street",
    "Oak Avenue",
    "Maple Road",
    "Station Road",
    "Elm Street",
    "Café Lane",
]
_DOMAINS = ["gmail.com", "outlook.com", "yahoo.com", "example.com"]
_NICKNAMES = {
    "John": "Jon",
    "Daniel": "Dan",
    "Chris": "Christopher",
    "Olivia": "Liv",
}
_ACCENTS = str.maketrans("éëüíá", "eeuia")


class ReferenceDatasetGenerator:
    """Generate synthetic contacts (with intentional dupes) for tests and benchmarks."""

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def generate(self, size: int, duplicate_rate: float = 0.15) -> list[ContactRecord]:
        if size < 0:
            raise ValueError("size must be >= 0")
        if not 0.0 <= duplicate_rate < 1.0:
            raise ValueError("duplicate_rate must be in [0, 1)")
        if size == 0:
            return []

        unique_count = int(size * (1.0 - duplicate_rate))
        unique_count = max(1, min(unique_count, size))

        records = [self._profile(i) for i in range(unique_count)]
        while len(records) < size:
            source = self._rng.choice(records[:unique_count])
            records.append(self._perturb(source))

        self._rng.shuffle(records)
        return [replace(record, id=idx) for idx, record in enumerate(records, start=1)]

    def _profile(self, idx: int) -> ContactRecord:
        given_name = self._rng.choice(_GIVEN_NAMES)
        family_name = self._rng.choice(_FAMILY_NAMES)
        local = f"{given_name}.{family_name}{idx % 97}".lower().translate(_ACCENTS)
        return ContactRecord(
            id=0,
            given_name=given_name,
            family_name=family_name,
            email=f"{local}@{self._rng.choice(_DOMAINS)}",
            postal_code=f"{10000 + (idx % 89999)}",
            address=f"{1 + (idx % 180)} {self._rng.choice(_STREETS)}",
        )

    def _perturb(self, source: ContactRecord) -> ContactRecord:
        mutation = self._rng.choice(["email", "name", "address", "accents", "mixed"])
        record = source

        if mutation in {"email", "mixed"}:
            record = replace(record, email=self._email_variant(record.email))
        if mutation in {"name", "mixed"}:
            record = replace(record, given_name=self._name_variant(record.given_name))
        if mutation in {"address", "mixed"}:
            record = replace(record, address=self._address_variant(record.address))
        if mutation == "accents":
            record = replace(
                record,
                given_name=record.given_name.translate(_ACCENTS),
                family_name=record.family_name.translate(_ACCENTS),
                address=record.address.translate(_ACCENTS),
            )
        return record

    def _email_variant(self, email: str) -> str:
        local, _, domain = email.partition("@")
        if not domain:
            return email
        variant = self._rng.choice(["plus", "case", "drop"])
        if variant == "plus":
            return f"{local}+{self._rng.choice(['news', 'shop', 'vip'])}@{domain}"
        if variant == "drop":
            return ""
        return f"{local.capitalize()}@{domain}"

    def _name_variant(self, name: str) -> str:
        if name in _NICKNAMES:
            return _NICKNAMES[name]
        if len(name) > 3:
            cut = self._rng.randrange(1, len(name))
            return name[:cut] + name[cut + 1 :]
        return name.upper()

    def _address_variant(self, address: str) -> str:
        if "Street" in address:
            return address.replace("Street", "St")
        if "Road" in address:
            return address.replace("Road", "Rd")
        if "Avenue" in address:
            return address.replace("Avenue", "Ave")
        return f"{address}, Flat 2"
