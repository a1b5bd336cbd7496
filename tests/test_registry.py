"""Tests for the reference registries.

These run against the real catalogs loaded by get_database(), so they
also catch data entry mistakes (duplicate ids, missing fields).
"""

from __future__ import annotations

import pytest

from nursing_tutor.registry import NursingDatabase, Registry, get_database


@pytest.fixture(scope="module")
def db() -> NursingDatabase:
    return get_database()


# --- get ---


def test_get_known_id_is_stable(db: NursingDatabase) -> None:
    """Looking up the same id twice returns equal records."""
    assert db.medications.get("morphine") == db.medications.get("morphine")
    assert db.medications.get("morphine").name_korean == "모르핀"


def test_get_unknown_id_returns_none(db: NursingDatabase) -> None:
    """Unknown ids are a miss, never an exception."""
    assert db.medications.get("aspirin-xr") is None
    assert db.lab_values.get("") is None
    assert db.diagnoses.get("99999") is None
    assert db.protocols.get("nope") is None
    assert db.cases.get("nope") is None


def test_diagnoses_are_keyed_by_code(db: NursingDatabase) -> None:
    """NANDA diagnoses use the taxonomy code as their key."""
    acute_pain = db.diagnoses.get("00132")
    assert acute_pain is not None
    assert acute_pain.label_korean == "급성 통증"


def test_duplicate_ids_rejected() -> None:
    """A catalog with a repeated id cannot be loaded."""
    records = [get_database().medications.get("morphine")] * 2
    with pytest.raises(ValueError, match="Duplicate id"):
        Registry("medication", records, search_fields=("name",), category_fields=("category",))


# --- search ---


def test_search_korean_name(db: NursingDatabase) -> None:
    """medications.search('모르핀') includes the morphine record."""
    ids = [m.id for m in db.medications.search("모르핀")]
    assert "morphine" in ids


def test_search_is_case_insensitive(db: NursingDatabase) -> None:
    """Upper and lower case queries find the same records."""
    assert db.medications.search("MORPHINE") == db.medications.search("morphine")


def test_search_results_match_get(db: NursingDatabase) -> None:
    """Every search hit is the same object get() returns for its id."""
    for lab in db.lab_values.search("cbc"):
        assert db.lab_values.get(lab.id) is lab


def test_search_keeps_catalog_order(db: NursingDatabase) -> None:
    """Matches come back in insertion order, not ranked."""
    everything = db.lab_values.all()
    cbc = db.lab_values.search("CBC")
    assert cbc == [lab for lab in everything if lab in cbc]


def test_empty_query_matches_everything(db: NursingDatabase) -> None:
    """An empty string is a substring of every field."""
    assert len(db.protocols.search("")) == len(db.protocols)


def test_search_case_by_patient_diagnosis(db: NursingDatabase) -> None:
    """Clinical cases are searchable through the embedded patient diagnosis."""
    case = db.cases.get("neutropenia")
    assert case in db.cases.search(case.patient.diagnosis)


# --- get_by_category ---


def test_category_matches_either_language(db: NursingDatabase) -> None:
    """Categories match the source or localized name, case-insensitively."""
    english = db.protocols.get_by_category("emergency")
    korean = db.protocols.get_by_category("응급")
    assert [p.id for p in english] == ["cpr"]
    assert english == korean


def test_category_is_exact_not_substring(db: NursingDatabase) -> None:
    """A partial category name matches nothing."""
    assert db.lab_values.get_by_category("CB") == []
    assert len(db.lab_values.get_by_category("cbc")) == 3


# --- catalog invariants ---


def test_protocol_steps_are_numbered_in_order(db: NursingDatabase) -> None:
    """Procedure steps run 1..N without gaps."""
    for protocol in db.protocols.all():
        assert [s.step for s in protocol.procedure] == list(range(1, len(protocol.procedure) + 1))


def test_risk_diagnoses_keep_characteristics_separate(db: NursingDatabase) -> None:
    """Risk-type diagnoses carry risk factors instead of characteristics."""
    for diagnosis in db.diagnoses.all():
        if diagnosis.is_risk_type:
            assert not diagnosis.defining_characteristics
            assert not diagnosis.related_factors


def test_get_database_is_a_singleton() -> None:
    """The registries are built once per process."""
    assert get_database() is get_database()
