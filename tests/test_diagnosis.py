"""Tests for keyword-based NANDA diagnosis suggestion."""

from __future__ import annotations

from nursing_tutor.diagnosis import MAX_SUGGESTIONS, score_diagnosis, suggest_diagnoses
from nursing_tutor.models import NursingDiagnosis
from nursing_tutor.registry import get_database


def _diagnosis(code: str, **fields: object) -> NursingDiagnosis:
    base: dict[str, object] = {
        "code": code,
        "label": code,
        "label_korean": code,
        "domain": "Test",
        "domain_korean": "테스트",
        "class_name": "Test",
        "class_korean": "테스트",
        "definition": "",
        "nursing_interventions": {"priority": [], "suggested": []},
        "expected_outcomes": [],
        "evaluation_criteria": [],
    }
    base.update(fields)
    return NursingDiagnosis.model_validate(base)


def test_acute_pain_ranks_first() -> None:
    """Pain and anxiety symptoms put Acute Pain at the top."""
    results = get_database().suggest_diagnoses(["통증", "불안"])
    assert results[0].code == "00132"
    assert 0 < len(results) <= MAX_SUGGESTIONS


def test_zero_score_diagnoses_dropped() -> None:
    """Symptoms matching nothing produce no suggestions."""
    assert get_database().suggest_diagnoses(["존재하지않는증상"]) == []


def test_weights_per_category() -> None:
    """Characteristics score 2, related and risk factors 1 each."""
    d = _diagnosis(
        "A",
        defining_characteristics=["심한 통증", "통증 호소"],
        related_factors=["수술 후 통증"],
    )
    assert score_diagnosis(d, ["통증"]) == 5

    risk = _diagnosis("R", risk_factors=["통증으로 인한 움직임 제한"])
    assert score_diagnosis(risk, ["통증"]) == 1


def test_symptom_must_be_inside_phrase() -> None:
    """The symptom is looked for inside catalog phrases, not the reverse."""
    d = _diagnosis("A", defining_characteristics=["통증"])
    assert score_diagnosis(d, ["급성 통증 호소"]) == 0


def test_case_is_normalized_on_both_sides() -> None:
    """Mixed-case symptoms still match lowercase-insensitive phrases."""
    d = _diagnosis("A", defining_characteristics=["Dyspnea on exertion"])
    assert score_diagnosis(d, ["DYSPNEA"]) == 2


def test_ties_keep_catalog_order_and_limit() -> None:
    """Equal scores stay in input order and only the top N are kept."""
    catalog = [_diagnosis(str(i), defining_characteristics=["피로"]) for i in range(8)]
    catalog.insert(3, _diagnosis("best", defining_characteristics=["피로", "심한 피로"]))

    results = suggest_diagnoses(catalog, ["피로"])
    assert [d.code for d in results] == ["best", "0", "1", "2", "3"]
