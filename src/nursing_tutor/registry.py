"""In-memory reference registries.

Every catalog (medications, lab values, NANDA diagnoses, protocols, cases)
is served through the same small contract:

- ``get(id)``: exact key lookup, ``None`` when the id is unknown
- ``search(query)``: case-insensitive substring match over a fixed set of
  human-readable fields, in catalog order (not relevance-ranked)
- ``get_by_category(category)``: case-insensitive *exact* match against the
  category field or its Korean counterpart

Registries are built once from the literal catalogs in ``nursing_tutor.data``
and are read-only afterwards. ``get_database()`` hands every caller the same
process-wide ``NursingDatabase`` instead of rebuilding the catalogs per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from operator import attrgetter
from typing import Generic, TypeVar

from pydantic import BaseModel

from nursing_tutor.data.clinical_cases import CLINICAL_CASES
from nursing_tutor.data.clinical_protocols import CLINICAL_PROTOCOLS
from nursing_tutor.data.lab_values import LAB_VALUES
from nursing_tutor.data.medications import MEDICATIONS
from nursing_tutor.data.nursing_diagnoses import NURSING_DIAGNOSES
from nursing_tutor.diagnosis import suggest_diagnoses
from nursing_tutor.lab_interpretation import critical_alerts, interpret_lab_value
from nursing_tutor.models import (
    ClinicalCase,
    ClinicalProtocol,
    LabValue,
    Medication,
    NursingDiagnosis,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Registry(Generic[RecordT]):
    """A read-only keyed catalog of records.

    Args:
        name: Human-readable registry name (used in logs).
        records: The records, in catalog order.
        key_field: Attribute holding each record's unique identifier.
        search_fields: Attributes (dotted paths allowed) matched by search().
        category_fields: Attributes compared by get_by_category().
    """

    def __init__(
        self,
        name: str,
        records: Iterable[RecordT],
        *,
        key_field: str = "id",
        search_fields: Sequence[str],
        category_fields: Sequence[str],
    ) -> None:
        self.name = name
        self._records: dict[str, RecordT] = {}
        get_key = attrgetter(key_field)
        for record in records:
            key = get_key(record)
            if key in self._records:
                raise ValueError(f"Duplicate id {key!r} in {name} registry")
            self._records[key] = record
        self._search_getters = [attrgetter(f) for f in search_fields]
        self._category_getters = [attrgetter(f) for f in category_fields]
        logger.debug("Loaded %d records into %s registry", len(self._records), name)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def get(self, record_id: str) -> RecordT | None:
        return self._records.get(record_id)

    def all(self) -> list[RecordT]:
        return list(self._records.values())

    def search(self, query: str) -> list[RecordT]:
        term = query.lower()
        return [
            record
            for record in self._records.values()
            if any(term in str(getter(record)).lower() for getter in self._search_getters)
        ]

    def get_by_category(self, category: str) -> list[RecordT]:
        wanted = category.lower()
        return [
            record
            for record in self._records.values()
            if any(str(getter(record)).lower() == wanted for getter in self._category_getters)
        ]


class NursingDatabase:
    """All five reference registries plus the lookups built on top of them."""

    def __init__(self) -> None:
        self.medications: Registry[Medication] = Registry(
            "medication",
            (Medication.model_validate(m) for m in MEDICATIONS),
            search_fields=("name", "name_korean", "category", "category_korean"),
            category_fields=("category", "category_korean"),
        )
        self.lab_values: Registry[LabValue] = Registry(
            "lab value",
            (LabValue.model_validate(lab) for lab in LAB_VALUES),
            search_fields=("name", "name_korean", "category"),
            category_fields=("category",),
        )
        self.diagnoses: Registry[NursingDiagnosis] = Registry(
            "nursing diagnosis",
            (NursingDiagnosis.model_validate(d) for d in NURSING_DIAGNOSES),
            key_field="code",
            search_fields=("label", "label_korean", "domain", "domain_korean", "definition"),
            category_fields=("domain", "domain_korean"),
        )
        self.protocols: Registry[ClinicalProtocol] = Registry(
            "clinical protocol",
            (ClinicalProtocol.model_validate(p) for p in CLINICAL_PROTOCOLS),
            search_fields=("name", "name_korean", "category", "category_korean"),
            category_fields=("category", "category_korean"),
        )
        self.cases: Registry[ClinicalCase] = Registry(
            "clinical case",
            (ClinicalCase.model_validate(c) for c in CLINICAL_CASES),
            search_fields=("title", "title_korean", "patient.diagnosis", "category"),
            category_fields=("category",),
        )

    # Convenience wrappers so tools only need the one database object.

    def suggest_diagnoses(self, symptoms: Sequence[str]) -> list[NursingDiagnosis]:
        return suggest_diagnoses(self.diagnoses.all(), symptoms)

    def interpret_lab_value(self, lab_id: str, value: float, gender: str | None = None) -> str:
        return interpret_lab_value(self.lab_values.get(lab_id), value, gender)

    def critical_alerts(self, lab_id: str, value: float) -> list[str]:
        return critical_alerts(self.lab_values.get(lab_id), value)


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_database: NursingDatabase | None = None


def get_database() -> NursingDatabase:
    """Return the shared NursingDatabase, building it on first use."""
    global _database  # noqa: PLW0603
    if _database is None:
        _database = NursingDatabase()
        logger.info("Reference registries initialized")
    return _database
