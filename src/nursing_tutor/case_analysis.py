"""Clinical case aggregator.

Given a patient, a symptom list and a care context, the aggregator:

1. ranks NANDA diagnoses for the symptoms (``nursing_tutor.diagnosis``)
2. attaches reference medications and lab values by rule
3. derives priorities, interventions, monitoring parameters, education,
   expected outcomes and risk factors from static rule tables

The inputs are first reduced to a set of ``CaseTag`` values. Every rule
table is a list of ``Rule(triggers, items)``; a rule contributes its items
when any of its triggers is present. All matching rules contribute, in
table order, so several rules can add to the same list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal, NamedTuple

from pydantic import BaseModel, Field

from nursing_tutor.lab_interpretation import select_range
from nursing_tutor.models import LabValue, Medication, NursingDiagnosis
from nursing_tutor.registry import NursingDatabase, get_database

logger = logging.getLogger(__name__)

CareContext = Literal["oncology", "general", "clinical_trial"]


class PatientInfo(BaseModel):
    age: int = Field(description="Patient age in years")
    gender: Literal["male", "female"]
    diagnosis: str = Field(description="Medical diagnosis, e.g. '유방암'")
    stage: str | None = Field(default=None, description="Disease stage")
    treatment_protocol: str | None = Field(default=None, description="Current treatment protocol")
    genetic_markers: list[str] | None = Field(default=None, description="Genetic markers")


class CaseTag(str, Enum):
    ALWAYS = "always"
    PAIN = "pain"
    NAUSEA_VOMITING = "nausea_vomiting"
    FLUID_LOSS = "fluid_loss"
    FATIGUE = "fatigue"
    DYSPNEA = "dyspnea"
    MALIGNANCY = "malignancy"
    ELDERLY = "elderly"
    ONCOLOGY_CONTEXT = "oncology_context"
    CLINICAL_TRIAL_CONTEXT = "clinical_trial_context"


class Rule(NamedTuple):
    triggers: frozenset[CaseTag]
    items: tuple[str, ...]


def _rule(*triggers: CaseTag, items: tuple[str, ...]) -> Rule:
    return Rule(frozenset(triggers), items)


# Symptom token -> tags it implies. Tokens are compared after strip/lower.
SYMPTOM_TAGS: dict[str, tuple[CaseTag, ...]] = {
    "통증": (CaseTag.PAIN,),
    "pain": (CaseTag.PAIN,),
    "오심": (CaseTag.NAUSEA_VOMITING,),
    "구토": (CaseTag.NAUSEA_VOMITING, CaseTag.FLUID_LOSS),
    "설사": (CaseTag.FLUID_LOSS,),
    "피로": (CaseTag.FATIGUE,),
    "호흡곤란": (CaseTag.DYSPNEA,),
}

MALIGNANCY_KEYWORDS = ("암", "cancer")
ELDERLY_AGE = 65

CONTEXT_TAGS: dict[str, CaseTag] = {
    "oncology": CaseTag.ONCOLOGY_CONTEXT,
    "clinical_trial": CaseTag.CLINICAL_TRIAL_CONTEXT,
}

SYMPTOM_ANALYSIS: dict[str, str] = {
    "피로": "에너지 부족, 활동 능력 저하와 관련된 증상",
    "오심": "위장관 불편감, 식욕 부진과 관련된 증상",
    "구토": "위장관 자극, 탈수 위험과 관련된 증상",
    "통증": "신체적 불편감, 삶의 질 저하와 관련된 증상",
    "호흡곤란": "산소 공급 부족, 활동 제한과 관련된 증상",
    "발열": "감염 또는 염증 반응과 관련된 증상",
    "설사": "수분 및 전해질 불균형 위험과 관련된 증상",
    "변비": "장 기능 저하, 불편감과 관련된 증상",
}
UNMAPPED_SYMPTOM = "추가 평가가 필요한 증상"

# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

MEDICATION_RULES: list[Rule] = [
    _rule(CaseTag.PAIN, items=("morphine",)),
    _rule(CaseTag.MALIGNANCY, items=("cyclophosphamide",)),
]

LAB_RULES: list[Rule] = [
    _rule(CaseTag.ALWAYS, items=("hemoglobin", "wbc")),
    _rule(CaseTag.FLUID_LOSS, items=("sodium", "potassium", "bun", "creatinine")),
    _rule(CaseTag.MALIGNANCY, items=("platelet", "alt")),
]

PRIORITY_RULES: list[Rule] = [
    _rule(CaseTag.DYSPNEA, items=("기도 확보 및 호흡 양상 모니터링",)),
    _rule(CaseTag.PAIN, items=("통증 관리 및 완화",)),
    _rule(CaseTag.FLUID_LOSS, items=("수분 및 전해질 균형 유지",)),
    _rule(CaseTag.FATIGUE, items=("에너지 보존 및 활동 조절",)),
    _rule(CaseTag.MALIGNANCY, items=("감염 예방 및 면역 상태 모니터링",)),
    _rule(CaseTag.ALWAYS, items=("환자 안전 및 낙상 예방", "심리적 지지 및 가족 교육")),
]

INTERVENTION_RULES: list[Rule] = [
    _rule(CaseTag.PAIN, items=("통증 척도를 이용한 정기적 통증 평가", "약물적/비약물적 통증 완화 방법 적용")),
    _rule(CaseTag.NAUSEA_VOMITING, items=("소량씩 자주 식사하도록 격려", "항구토제 투여 및 효과 관찰")),
    _rule(CaseTag.FATIGUE, items=("활동과 휴식의 균형 유지", "에너지 보존 기법 교육")),
    _rule(
        CaseTag.ONCOLOGY_CONTEXT,
        items=("화학요법 부작용 모니터링", "감염 징후 관찰 및 예방", "영양 상태 평가 및 관리"),
    ),
    _rule(
        CaseTag.CLINICAL_TRIAL_CONTEXT,
        items=("프로토콜 준수 모니터링", "이상 반응 관찰 및 보고", "연구 관련 교육 제공"),
    ),
]

MONITORING_RULES: list[Rule] = [
    _rule(CaseTag.ALWAYS, items=("활력징후 (혈압, 맥박, 호흡, 체온)",)),
    _rule(CaseTag.FLUID_LOSS, items=("수분 섭취량 및 배설량", "전해질 수치 (Na, K, Cl)")),
    _rule(CaseTag.DYSPNEA, items=("산소포화도 및 호흡양상", "동맥혈 가스 분석")),
    _rule(
        CaseTag.MALIGNANCY,
        items=("혈액검사 (WBC, RBC, Platelet)", "간 기능 검사", "신장 기능 검사"),
    ),
    _rule(CaseTag.ALWAYS, items=("통증 점수 (0-10 척도)", "의식 수준 및 신경학적 상태")),
]

EDUCATION_RULES: list[Rule] = [
    _rule(CaseTag.FATIGUE, items=("적절한 휴식과 수면의 중요성", "점진적 활동 증가 방법")),
    _rule(CaseTag.NAUSEA_VOMITING, items=("식사 요령 (소량씩, 자주)", "수분 섭취 방법")),
    _rule(
        CaseTag.MALIGNANCY,
        items=("감염 예방 수칙", "치료 중 주의사항", "부작용 발생 시 대처 방법"),
    ),
    _rule(CaseTag.ALWAYS, items=("응급 상황 시 연락처", "정기 검진 및 추적 관찰의 중요성")),
]

OUTCOME_RULES: list[Rule] = [
    _rule(CaseTag.PAIN, items=("통증 점수 3점 이하로 감소",)),
    _rule(CaseTag.FATIGUE, items=("일상 활동 수행 능력 향상",)),
    _rule(CaseTag.NAUSEA_VOMITING, items=("정상적인 식사 섭취 가능",)),
    _rule(CaseTag.ALWAYS, items=("환자 안전 사고 없음", "치료 계획 준수", "감염 징후 없음")),
]

RISK_RULES: list[Rule] = [
    _rule(CaseTag.ELDERLY, items=("고령으로 인한 합병증 위험",)),
    _rule(CaseTag.FATIGUE, CaseTag.DYSPNEA, items=("낙상 위험",)),
    _rule(CaseTag.FLUID_LOSS, items=("탈수 및 전해질 불균형 위험",)),
    _rule(CaseTag.MALIGNANCY, items=("면역 억제로 인한 감염 위험", "영양 불량 위험")),
]


def derive_tags(patient: PatientInfo, symptoms: list[str], context: str) -> set[CaseTag]:
    """Reduce the raw case inputs to the tags the rule tables key on."""
    tags = {CaseTag.ALWAYS}
    for symptom in symptoms:
        tags.update(SYMPTOM_TAGS.get(symptom.strip().lower(), ()))
    diagnosis = patient.diagnosis.lower()
    if any(keyword in diagnosis for keyword in MALIGNANCY_KEYWORDS):
        tags.add(CaseTag.MALIGNANCY)
    if patient.age > ELDERLY_AGE:
        tags.add(CaseTag.ELDERLY)
    if context in CONTEXT_TAGS:
        tags.add(CONTEXT_TAGS[context])
    return tags


def apply_rules(rules: list[Rule], tags: set[CaseTag]) -> list[str]:
    """Concatenate the items of every rule whose triggers intersect ``tags``."""
    items: list[str] = []
    for rule in rules:
        if rule.triggers & tags:
            items.extend(rule.items)
    return items


def summarize_patient(patient: PatientInfo) -> str:
    gender = "남성" if patient.gender == "male" else "여성"
    lines = [f"{patient.age}세 {gender} 환자", f"진단: {patient.diagnosis}"]
    if patient.stage:
        lines.append(f"병기: {patient.stage}")
    if patient.treatment_protocol:
        lines.append(f"치료 프로토콜: {patient.treatment_protocol}")
    if patient.genetic_markers:
        lines.append(f"유전자 마커: {', '.join(patient.genetic_markers)}")
    return "\n".join(lines)


def analyze_symptoms(symptoms: list[str]) -> list[str]:
    return [f"{s}: {SYMPTOM_ANALYSIS.get(s.strip(), UNMAPPED_SYMPTOM)}" for s in symptoms]


@dataclass
class CaseAnalysis:
    patient_summary: str
    symptom_analysis: list[str]
    nursing_diagnoses: list[NursingDiagnosis]
    nursing_priorities: list[str]
    recommended_interventions: list[str]
    medications: list[Medication]
    lab_values: list[LabValue]
    monitoring_parameters: list[str]
    patient_education: list[str]
    expected_outcomes: list[str]
    risk_factors: list[str]
    tags: set[CaseTag] = field(default_factory=set)
    gender: str | None = None


def analyze_case(
    patient: PatientInfo,
    symptoms: list[str],
    context: str = "general",
    db: NursingDatabase | None = None,
) -> CaseAnalysis:
    """Aggregate everything the case analysis document shows.

    Unknown symptoms and diagnoses never raise; they simply trigger fewer
    rules and fall back to generic symptom text.
    """
    db = db or get_database()
    tags = derive_tags(patient, symptoms, context)
    logger.debug("Case tags: %s", sorted(t.value for t in tags))

    medications = [
        med
        for med_id in apply_rules(MEDICATION_RULES, tags)
        if (med := db.medications.get(med_id)) is not None
    ]
    labs = [
        lab
        for lab_id in apply_rules(LAB_RULES, tags)
        if (lab := db.lab_values.get(lab_id)) is not None
    ]

    return CaseAnalysis(
        patient_summary=summarize_patient(patient),
        symptom_analysis=analyze_symptoms(symptoms),
        nursing_diagnoses=db.suggest_diagnoses(symptoms),
        nursing_priorities=apply_rules(PRIORITY_RULES, tags),
        recommended_interventions=apply_rules(INTERVENTION_RULES, tags),
        medications=medications,
        lab_values=labs,
        monitoring_parameters=apply_rules(MONITORING_RULES, tags),
        patient_education=apply_rules(EDUCATION_RULES, tags),
        expected_outcomes=apply_rules(OUTCOME_RULES, tags),
        risk_factors=apply_rules(RISK_RULES, tags),
        tags=tags,
        gender=patient.gender,
    )


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items]


def format_case_analysis(analysis: CaseAnalysis, generated_at: datetime | None = None) -> str:
    """Render a CaseAnalysis as a markdown document."""
    generated_at = generated_at or datetime.now()
    lines = ["# 📋 임상 사례 분석", "", "## 👤 환자 정보", analysis.patient_summary, ""]

    lines.append("## 🔍 증상 분석")
    lines.extend(_bullets(analysis.symptom_analysis))
    lines.append("")

    if analysis.nursing_diagnoses:
        lines.append("## 🏥 간호진단 (NANDA)")
        for i, diag in enumerate(analysis.nursing_diagnoses, start=1):
            lines.append(f"### {i}. [{diag.code}] {diag.label_korean}")
            lines.append(f"**정의**: {diag.definition}")
            lines.append("**우선순위 중재**:")
            lines.extend(_bullets(diag.nursing_interventions.priority[:3]))
            lines.append("")

    lines.append("## 🎯 간호 우선순위")
    lines.extend(f"{i}. {p}" for i, p in enumerate(analysis.nursing_priorities, start=1))
    lines.append("")

    lines.append("## 🏥 권장 간호중재")
    lines.extend(_bullets(analysis.recommended_interventions))
    lines.append("")

    if analysis.medications:
        lines.append("## 💊 관련 약물")
        for med in analysis.medications:
            lines.append(f"### {med.name_korean} ({med.name})")
            lines.append(f"- **용법**: {med.dosage.adult}")
            lines.append(f"- **주요 부작용**: {', '.join(med.side_effects.common[:3])}")
            lines.append(f"- **간호 고려사항**: {med.nursing_considerations[0]}")
            lines.append("")

    if analysis.lab_values:
        lines.append("## 🔬 모니터링 검사")
        for lab in analysis.lab_values:
            lines.append(f"### {lab.name_korean}")
            lines.append(f"- **정상범위**: {select_range(lab, analysis.gender) or ''}")
            lines.append(f"- **간호 고려사항**: {lab.nursing_considerations[0]}")
            lines.append("")

    lines.append("## 📊 모니터링 지표")
    lines.extend(_bullets(analysis.monitoring_parameters))
    lines.append("")
    lines.append("## 📚 환자 교육")
    lines.extend(_bullets(analysis.patient_education))
    lines.append("")
    lines.append("## 🎯 기대 결과")
    lines.extend(_bullets(analysis.expected_outcomes))
    lines.append("")
    lines.append("## ⚠️ 위험 요인")
    lines.extend(_bullets(analysis.risk_factors) or ["- 특이 위험 요인 없음"])
    lines.append("")
    lines.append("---")
    lines.append(f"*분석 완료 시간: {generated_at:%Y-%m-%d %H:%M:%S}*")

    return "\n".join(lines)
