"""Nursing knowledge lookup tool.

A topic that names a reference domain is answered from that registry:

- 약물 / medication / drug      -> medication registry
- 검사 / lab / 수치            -> lab value registry
- 간호진단 / diagnosis / nanda -> NANDA diagnosis registry
- 프로토콜 / protocol / 술기   -> clinical protocol registry

The routing keyword is removed before searching, so "모르핀 약물" looks up
"모르핀". Any other topic is answered from the knowledge topic store,
which always returns something.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field

from nursing_tutor.knowledge import get_knowledge_store
from nursing_tutor.models import ClinicalProtocol, KnowledgeContent, LabValue, Medication, NursingDiagnosis
from nursing_tutor.registry import get_database

logger = logging.getLogger(__name__)


class KnowledgeArgs(BaseModel):
    topic: str = Field(description="Topic to look up, e.g. '종양간호' or '모르핀 약물'")
    level: Literal["basic", "intermediate", "advanced"] = "basic"
    specialty: str | None = Field(default=None, description="oncology, genetics, clinical_trial or nursing")


# ---------------------------------------------------------------------------
# Registry formatters
# ---------------------------------------------------------------------------


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items]


def format_medications(medications: list[Medication]) -> str:
    lines = ["# 💊 약물 정보 검색 결과", ""]
    for med in medications:
        lines += [
            f"## {med.name_korean} ({med.name})",
            "",
            f"**분류**: {med.category_korean}",
            f"**일반명**: {med.generic_name}",
            "",
            "### 적응증",
            *_bullets(med.indications),
            "",
            "### 용법용량",
            f"- 성인: {med.dosage.adult}",
        ]
        if med.dosage.pediatric:
            lines.append(f"- 소아: {med.dosage.pediatric}")
        if med.dosage.geriatric:
            lines.append(f"- 노인: {med.dosage.geriatric}")
        lines += [
            "",
            "### 투여경로",
            ", ".join(med.route),
            "",
            "### 부작용",
            "**흔한 부작용**:",
            *_bullets(med.side_effects.common),
            "",
            "**심각한 부작용**:",
            *_bullets(med.side_effects.serious),
            "",
            "### 간호 고려사항",
            *_bullets(med.nursing_considerations),
            "",
            "### 환자 교육",
            *_bullets(med.patient_education),
            "",
            "---",
            "",
        ]
    return "\n".join(lines)


def format_lab_values(labs: list[LabValue]) -> str:
    lines = ["# 🔬 검사 수치 정보", ""]
    for lab in labs:
        adult = lab.normal_range.adult
        lines += [
            f"## {lab.name_korean} ({lab.name})",
            "",
            f"**분류**: {lab.category}",
            f"**단위**: {lab.unit}",
            "",
            "### 정상 범위",
        ]
        if adult.general:
            lines.append(f"- 성인: {adult.general}")
        else:
            if adult.male:
                lines.append(f"- 남성: {adult.male}")
            if adult.female:
                lines.append(f"- 여성: {adult.female}")
        lines += ["", "### 위험 수치"]
        if lab.critical_values.low:
            lines.append(f"- 낮음: {lab.critical_values.low}")
        if lab.critical_values.high:
            lines.append(f"- 높음: {lab.critical_values.high}")
        lines += [
            "",
            "### 임상적 의의",
            "**증가 시**:",
            *_bullets(lab.clinical_significance.increased),
            "",
            "**감소 시**:",
            *_bullets(lab.clinical_significance.decreased),
            "",
            "### 간호 고려사항",
            *_bullets(lab.nursing_considerations),
            "",
            f"**검체**: {lab.specimen}",
            f"**공복 필요**: {'예' if lab.fasting_required else '아니오'}",
            "",
            "---",
            "",
        ]
    return "\n".join(lines)


def format_diagnoses(diagnoses: list[NursingDiagnosis]) -> str:
    lines = ["# 🏥 NANDA 간호진단", ""]
    for diag in diagnoses:
        lines += [
            f"## [{diag.code}] {diag.label_korean}",
            f"*{diag.label}*",
            "",
            f"**영역**: {diag.domain_korean} ({diag.domain})",
            f"**과**: {diag.class_korean} ({diag.class_name})",
            "",
            "### 정의",
            diag.definition,
            "",
        ]
        # Risk diagnoses carry risk factors in place of characteristics.
        if diag.is_risk_type:
            lines += ["### 위험 요인", *_bullets(diag.risk_factors or [])]
        else:
            lines += [
                "### 특성",
                *_bullets(diag.defining_characteristics),
                "",
                "### 관련 요인",
                *_bullets(diag.related_factors),
            ]
        lines += [
            "",
            "### 간호중재",
            "**우선순위 중재**:",
            *_bullets(diag.nursing_interventions.priority),
            "",
            "**추가 중재**:",
            *_bullets(diag.nursing_interventions.suggested),
            "",
            "### 기대 결과",
            *_bullets(diag.expected_outcomes),
            "",
            "---",
            "",
        ]
    return "\n".join(lines)


def format_protocols(protocols: list[ClinicalProtocol]) -> str:
    lines = ["# 📋 임상 프로토콜", ""]
    for protocol in protocols:
        lines += [
            f"## {protocol.name_korean} ({protocol.name})",
            "",
            f"**분류**: {protocol.category_korean}",
            f"**목적**: {protocol.purpose}",
            "",
            "### 적응증",
            *_bullets(protocol.indications),
            "",
            "### 금기사항",
            *_bullets(protocol.contraindications),
            "",
            "### 필요 장비",
            *_bullets(protocol.equipment),
            "",
            "### 절차",
        ]
        for step in protocol.procedure:
            lines += [f"**{step.step}단계**: {step.action}", f"   *근거*: {step.rationale}", ""]
        lines += [
            "### 합병증",
            *_bullets(protocol.complications),
            "",
            "### 간호 고려사항",
            *_bullets(protocol.nursing_considerations),
            "",
            "### 기록사항",
            *_bullets(protocol.documentation),
            "",
            "---",
            "",
        ]
    return "\n".join(lines)


def format_knowledge(knowledge: KnowledgeContent, level: str) -> str:
    lines = [f"# {knowledge.title}", ""]
    if level == "basic":
        lines += ["## 🎯 기본 개념", knowledge.basic_definition or "", ""]
        lines += ["## 💡 핵심 포인트", *_bullets(knowledge.key_points), ""]
    elif level == "intermediate":
        lines += ["## 📚 상세 설명", knowledge.detailed_explanation or "", ""]
        lines += ["## 🔍 임상 적용", *_bullets(knowledge.clinical_applications), ""]
    else:
        lines += ["## 🧬 고급 개념", knowledge.advanced_concepts or "", ""]
        lines += ["## 🔬 최신 연구", knowledge.recent_research or "", ""]
        lines += ["## 📊 임상 증거", knowledge.clinical_evidence or "", ""]

    if knowledge.specialty_focus:
        lines += ["## 🏥 전문 분야", knowledge.specialty_focus]
        lines += _bullets(knowledge.specialized_applications)
        if knowledge.specialty_considerations:
            lines.append(f"*{knowledge.specialty_considerations}*")
        lines.append("")

    lines.append("## 📝 학습 포인트")
    lines += _bullets(knowledge.learning_objectives) or ["추가 학습 자료 준비 중"]
    lines += ["", "## 🔗 관련 개념"]
    lines += [f"- [[{c}]]" for c in knowledge.related_concepts] or ["관련 개념 매핑 중"]
    lines.append("")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

# (keywords, registry attribute, formatter, not-found noun)
ROUTES: list[tuple[tuple[str, ...], str, Callable[[list], str], str]] = [
    (("약물", "medication", "drug"), "medications", format_medications, "약물 정보"),
    (("검사", "lab", "수치"), "lab_values", format_lab_values, "검사 정보"),
    (("간호진단", "diagnosis", "nanda"), "diagnoses", format_diagnoses, "간호진단"),
    (("프로토콜", "protocol", "술기"), "protocols", format_protocols, "프로토콜"),
]


def strip_keyword(topic: str, keyword: str) -> str:
    """Remove ``keyword`` (case-insensitively) from ``topic``."""
    lowered = topic.lower()
    index = lowered.find(keyword)
    if index < 0:
        return topic.strip()
    return (topic[:index] + topic[index + len(keyword):]).strip()


async def get_nursing_knowledge(topic: str, level: str = "basic", specialty: str | None = None) -> str:
    """Explain a nursing topic at the requested level (basic, intermediate, advanced).

    Topics mentioning medications (약물/drug), lab values (검사/lab/수치),
    NANDA diagnoses (간호진단/diagnosis) or procedures (프로토콜/protocol/술기)
    are looked up in the matching reference catalog instead.

    Args:
        topic: What to explain, e.g. "종양간호", "모르핀 약물", "헤모글로빈 검사".
        level: "basic", "intermediate" or "advanced".
        specialty: Optional focus such as "oncology", "genetics" or "clinical_trial".

    Returns:
        A markdown document about the topic.
    """
    lowered = topic.lower()
    db = get_database()
    for keywords, registry_name, formatter, noun in ROUTES:
        keyword = next((k for k in keywords if k in lowered), None)
        if keyword is None:
            continue
        query = strip_keyword(topic, keyword)
        results = getattr(db, registry_name).search(query)
        logger.debug("Routed %r to %s registry (%d hits)", topic, registry_name, len(results))
        if not results:
            return f'❌ "{topic}"에 대한 {noun}를 찾을 수 없습니다.'
        return formatter(results)

    knowledge = get_knowledge_store().search(topic, level, specialty)
    return format_knowledge(knowledge, level)
