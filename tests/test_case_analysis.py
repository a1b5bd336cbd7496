"""Tests for the clinical case aggregator."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from nursing_tutor.case_analysis import (
    INTERVENTION_RULES,
    RISK_RULES,
    UNMAPPED_SYMPTOM,
    CaseTag,
    PatientInfo,
    analyze_case,
    apply_rules,
    derive_tags,
    format_case_analysis,
)


def _patient(**overrides: object) -> PatientInfo:
    data: dict[str, object] = {"age": 54, "gender": "female", "diagnosis": "유방암"}
    data.update(overrides)
    return PatientInfo.model_validate(data)


# --- tagging ---


def test_symptom_and_diagnosis_tags() -> None:
    """Symptoms, a cancer diagnosis, age and context all become tags."""
    tags = derive_tags(_patient(age=70), ["통증", "구토"], "oncology")
    assert tags >= {
        CaseTag.ALWAYS,
        CaseTag.PAIN,
        CaseTag.NAUSEA_VOMITING,
        CaseTag.FLUID_LOSS,
        CaseTag.MALIGNANCY,
        CaseTag.ELDERLY,
        CaseTag.ONCOLOGY_CONTEXT,
    }


def test_english_cancer_and_pain() -> None:
    """'cancer' and 'pain' are recognized in any case."""
    tags = derive_tags(_patient(diagnosis="Lung Cancer"), ["Pain"], "general")
    assert {CaseTag.MALIGNANCY, CaseTag.PAIN} <= tags


def test_age_threshold_is_exclusive() -> None:
    """65-year-olds are not tagged elderly; 66-year-olds are."""
    assert CaseTag.ELDERLY not in derive_tags(_patient(age=65), [], "general")
    assert CaseTag.ELDERLY in derive_tags(_patient(age=66), [], "general")


def test_every_matching_rule_contributes() -> None:
    """Rules are not first-match: all triggered rules add items in order."""
    tags = {CaseTag.ALWAYS, CaseTag.PAIN, CaseTag.FATIGUE, CaseTag.ONCOLOGY_CONTEXT}
    items = apply_rules(INTERVENTION_RULES, tags)
    assert items.index("통증 척도를 이용한 정기적 통증 평가") < items.index("활동과 휴식의 균형 유지")
    assert "화학요법 부작용 모니터링" in items


def test_rule_with_several_triggers_fires_once() -> None:
    """Fatigue and dyspnea together still add the fall risk only once."""
    risks = apply_rules(RISK_RULES, {CaseTag.FATIGUE, CaseTag.DYSPNEA})
    assert risks.count("낙상 위험") == 1


# --- analyze_case ---


def test_pain_case_attaches_morphine() -> None:
    """Pain brings in the analgesic reference and pain outcome."""
    analysis = analyze_case(_patient(diagnosis="골절"), ["통증"])
    assert [m.id for m in analysis.medications] == ["morphine"]
    assert "통증 점수 3점 이하로 감소" in analysis.expected_outcomes
    assert analysis.nursing_diagnoses[0].code == "00132"


def test_cancer_case_labs_and_chemotherapy() -> None:
    """A malignancy adds the chemotherapy agent and hematology/hepatic labs."""
    analysis = analyze_case(_patient(), ["피로"])
    assert "cyclophosphamide" in [m.id for m in analysis.medications]
    assert [lab.id for lab in analysis.lab_values] == ["hemoglobin", "wbc", "platelet", "alt"]


def test_fluid_loss_adds_electrolytes() -> None:
    """Vomiting or diarrhea adds electrolyte and renal labs."""
    analysis = analyze_case(_patient(diagnosis="장염"), ["설사"])
    assert [lab.id for lab in analysis.lab_values] == [
        "hemoglobin", "wbc", "sodium", "potassium", "bun", "creatinine",
    ]
    assert "탈수 및 전해질 불균형 위험" in analysis.risk_factors


def test_unmapped_input_degrades_gracefully() -> None:
    """Unknown symptoms and diagnoses fall back to generic text."""
    analysis = analyze_case(_patient(diagnosis="희귀질환", age=30), ["어지러움"])
    assert analysis.symptom_analysis == [f"어지러움: {UNMAPPED_SYMPTOM}"]
    assert analysis.medications == []
    assert analysis.risk_factors == []
    assert "환자 안전 및 낙상 예방" in analysis.nursing_priorities


def test_clinical_trial_context() -> None:
    """The clinical trial context adds protocol monitoring."""
    analysis = analyze_case(_patient(), ["피로"], context="clinical_trial")
    assert "프로토콜 준수 모니터링" in analysis.recommended_interventions


def test_patient_info_rejects_bad_gender() -> None:
    """Gender is limited to male/female."""
    with pytest.raises(ValidationError):
        _patient(gender="unknown")


# --- formatting ---


def test_format_section_order() -> None:
    """Sections render in the fixed order, ending with the timestamp."""
    analysis = analyze_case(
        _patient(stage="II", genetic_markers=["BRCA1"]), ["통증", "구토"], "oncology"
    )
    text = format_case_analysis(analysis, generated_at=datetime(2024, 3, 1, 9, 30))

    headings = [
        "## 👤 환자 정보",
        "## 🔍 증상 분석",
        "## 🏥 간호진단 (NANDA)",
        "## 🎯 간호 우선순위",
        "## 🏥 권장 간호중재",
        "## 💊 관련 약물",
        "## 🔬 모니터링 검사",
        "## 📊 모니터링 지표",
        "## 📚 환자 교육",
        "## 🎯 기대 결과",
        "## ⚠️ 위험 요인",
    ]
    positions = [text.index(h) for h in headings]
    assert positions == sorted(positions)
    assert "유전자 마커: BRCA1" in text
    assert text.endswith("*분석 완료 시간: 2024-03-01 09:30:00*")


def test_format_without_risks() -> None:
    """A case with no risk rules says so explicitly."""
    analysis = analyze_case(_patient(diagnosis="감기", age=20), ["기침"])
    assert "- 특이 위험 요인 없음" in format_case_analysis(analysis)


@pytest.mark.parametrize(
    ("gender", "expected"),
    [("female", "12.0-16.0 g/dL"), ("male", "13.5-17.5 g/dL")],
)
def test_lab_ranges_follow_patient_gender(gender: str, expected: str) -> None:
    """Gendered lab ranges are shown for the patient's own gender."""
    analysis = analyze_case(_patient(gender=gender), ["피로"])
    text = format_case_analysis(analysis)
    hemoglobin = text[text.index("### 헤모글로빈"):]
    assert hemoglobin.splitlines()[1] == f"- **정상범위**: {expected}"
