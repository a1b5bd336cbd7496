"""Care plan composer.

Each supported diagnosis label maps to one ``DiagnosisTemplate`` carrying
its metadata (category, definition, factors, priority tier) and the canned
goal/intervention/rationale/evaluation/timeframe text.

The two kinds of lookup miss behave differently:

- metadata for an unknown label falls back to a generic "individual
  assessment" placeholder at medium priority
- goals, interventions, rationale and evaluation criteria simply get no
  contribution from an unknown label
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Literal

logger = logging.getLogger(__name__)

Priority = Literal["high", "medium", "low"]
PRIORITY_ORDER: tuple[str, ...] = ("high", "medium", "low")

NEXT_EVALUATION_DELAY = timedelta(hours=24)
UNMAPPED_TIMEFRAME = "개별 평가 필요"


@dataclass(frozen=True)
class DiagnosisTemplate:
    category: str
    definition: str
    risk_factors: tuple[str, ...]
    related_factors: tuple[str, ...]
    priority: Priority
    goal: str | None = None
    interventions: tuple[str, ...] = ()
    rationale: str | None = None
    evaluation: str | None = None
    timeframe: str | None = None


UNMAPPED_DIAGNOSIS = DiagnosisTemplate(
    category="기타",
    definition="추가 평가가 필요한 간호진단",
    risk_factors=("개별 평가 필요",),
    related_factors=("개별 평가 필요",),
    priority="medium",
)

CARE_PLAN_TEMPLATES: dict[str, DiagnosisTemplate] = {
    "급성 통증": DiagnosisTemplate(
        category="신체적 간호진단",
        definition="조직 손상이나 염증으로 인한 불쾌한 감각적, 정서적 경험",
        risk_factors=("수술", "외상", "염증", "질병 과정"),
        related_factors=("조직 손상", "염증 반응", "근육 긴장"),
        priority="high",
        goal="통증 점수 3점 이하로 감소",
        interventions=(
            "통증 척도를 이용한 정기적 통증 평가",
            "처방된 진통제 투여 및 효과 관찰",
            "비약물적 통증 완화 방법 적용",
        ),
        rationale="적절한 통증 관리는 환자의 편안함을 증진시키고 치료 협조도를 높인다",
        evaluation="통증 점수 감소, 편안함 표현, 활동 참여도 증가",
        timeframe="단기 목표: 24시간 이내, 장기 목표: 1주일 이내",
    ),
    "감염 위험성": DiagnosisTemplate(
        category="안전 관련 간호진단",
        definition="병원체 침입으로 인한 감염 발생 가능성",
        risk_factors=("면역 저하", "침습적 처치", "영양 불량"),
        related_factors=("면역 체계 저하", "방어 기전 손상"),
        priority="high",
        goal="감염 징후 없이 치료 기간 경과",
        interventions=("손 위생 철저히 시행", "무균술 적용", "감염 징후 관찰 및 보고"),
        rationale="감염 예방은 환자의 회복을 촉진하고 합병증을 예방한다",
        evaluation="정상 체온 유지, 감염 징후 없음, 백혈구 수치 정상",
        timeframe="지속적 모니터링, 치료 기간 전반",
    ),
    "피로": DiagnosisTemplate(
        category="활동/휴식 간호진단",
        definition="신체적, 정신적 에너지 부족으로 인한 피로감",
        risk_factors=("질병 과정", "치료 부작용", "수면 부족"),
        related_factors=("에너지 소모 증가", "산소 공급 부족"),
        priority="medium",
        goal="일상 활동 수행 능력 향상",
        interventions=("활동과 휴식의 균형 유지", "에너지 보존 기법 교육", "점진적 활동 증가 격려"),
        rationale="에너지 관리는 환자의 기능적 능력을 향상시키고 삶의 질을 개선한다",
        evaluation="활동 내성 증가, 피로감 감소, 수면 패턴 개선",
        timeframe="단기 목표: 3일 이내, 장기 목표: 2주 이내",
    ),
    "영양 부족": DiagnosisTemplate(
        category="영양/대사 간호진단",
        definition="신체 요구량보다 적은 영양소 섭취",
        risk_factors=("식욕 부진", "소화 장애", "치료 부작용"),
        related_factors=("섭취 부족", "흡수 장애"),
        priority="medium",
        goal="적절한 영양 섭취 및 체중 유지",
        interventions=("영양 상태 평가", "선호 식품 확인 및 제공", "소량씩 자주 식사 격려"),
        rationale="적절한 영양 공급은 조직 치유와 면역 기능을 지원한다",
        evaluation="체중 유지 또는 증가, 식욕 개선, 영양 지표 정상",
        timeframe="단기 목표: 1주일 이내, 장기 목표: 1개월 이내",
    ),
    "낙상 위험성": DiagnosisTemplate(
        category="안전 관련 간호진단",
        definition="낙상으로 인한 신체적 손상 위험",
        risk_factors=("고령", "약물 부작용", "환경적 요인"),
        related_factors=("신체 기능 저하", "인지 장애"),
        priority="high",
        goal="낙상 사고 없이 안전한 환경 유지",
        interventions=("낙상 위험 평가", "안전한 환경 조성", "이동 시 보조 및 감시"),
        rationale="낙상 예방은 환자 안전을 보장하고 추가 손상을 방지한다",
        evaluation="낙상 사고 없음, 안전한 이동, 환경 인식 향상",
        timeframe="즉시 시작, 지속적 유지",
    ),
}


def lookup_template(label: str) -> DiagnosisTemplate:
    return CARE_PLAN_TEMPLATES.get(label, UNMAPPED_DIAGNOSIS)


@dataclass
class DiagnosisAnalysis:
    diagnosis: str
    category: str
    definition: str
    risk_factors: list[str]
    related_factors: list[str]
    priority_level: str


@dataclass
class CarePlan:
    diagnosis_analysis: list[DiagnosisAnalysis]
    goals: list[str]
    interventions: list[str]
    rationale: list[str]
    evaluation_criteria: list[str]
    timeframe: list[tuple[str, str]]
    priority_ranking: list[tuple[str, str]] = field(default_factory=list)


def rank_priorities(labels: list[str]) -> list[tuple[str, str]]:
    """Order labels high -> medium -> low, keeping input order within a tier."""
    tiers = [(label, lookup_template(label).priority) for label in labels]
    return sorted(tiers, key=lambda pair: PRIORITY_ORDER.index(pair[1]))


def compose_care_plan(
    nursing_diagnosis: list[str],
    patient_goals: list[str] | None = None,
    interventions_needed: list[str] | None = None,
) -> CarePlan:
    """Merge the per-label templates for ``nursing_diagnosis`` into a CarePlan.

    Caller-supplied goals or interventions replace the template-derived
    ones when non-empty.
    """
    templates = [(label, lookup_template(label)) for label in nursing_diagnosis]
    unmapped = [label for label in nursing_diagnosis if label not in CARE_PLAN_TEMPLATES]
    if unmapped:
        logger.debug("No care plan template for %s", unmapped)

    analysis = [
        DiagnosisAnalysis(
            diagnosis=label,
            category=t.category,
            definition=t.definition,
            risk_factors=list(t.risk_factors),
            related_factors=list(t.related_factors),
            priority_level=t.priority,
        )
        for label, t in templates
    ]

    default_goals = [t.goal for _, t in templates if t.goal]
    default_interventions = [i for _, t in templates for i in t.interventions]

    return CarePlan(
        diagnosis_analysis=analysis,
        goals=list(patient_goals) if patient_goals else default_goals,
        interventions=list(interventions_needed) if interventions_needed else default_interventions,
        rationale=[t.rationale for _, t in templates if t.rationale],
        evaluation_criteria=[t.evaluation for _, t in templates if t.evaluation],
        timeframe=[(label, t.timeframe or UNMAPPED_TIMEFRAME) for label, t in templates],
        priority_ranking=rank_priorities(nursing_diagnosis),
    )


def _numbered(items: list[str]) -> list[str]:
    return [f"{i}. {item}" for i, item in enumerate(items, start=1)]


def format_care_plan(plan: CarePlan, generated_at: datetime | None = None) -> str:
    """Render a CarePlan. Section order is fixed: analysis, goals,
    interventions, rationale, evaluation, timeframe, priority ranking."""
    generated_at = generated_at or datetime.now()
    next_evaluation = generated_at + NEXT_EVALUATION_DELAY

    lines = ["# 📋 간호계획서", "", "## 📊 간호진단 분석"]
    for i, d in enumerate(plan.diagnosis_analysis, start=1):
        lines.extend(
            [
                f"### {i}. {d.diagnosis}",
                f"- **범주**: {d.category}",
                f"- **정의**: {d.definition}",
                f"- **위험요인**: {', '.join(d.risk_factors)}",
                f"- **관련요인**: {', '.join(d.related_factors)}",
                f"- **우선순위**: {d.priority_level}",
                "",
            ]
        )

    lines.append("## 🎯 환자 목표")
    lines.extend(_numbered(plan.goals))
    lines.extend(["", "## 🏥 간호중재"])
    lines.extend(_numbered(plan.interventions))
    lines.extend(["", "## 📝 근거/이론적 배경"])
    lines.extend(_numbered(plan.rationale))
    lines.extend(["", "## 📏 평가 기준"])
    lines.extend(_numbered(plan.evaluation_criteria))
    lines.extend(["", "## ⏰ 시간계획"])
    lines.extend(f"- **{label}**: {timeframe}" for label, timeframe in plan.timeframe)
    lines.extend(["", "## 🎯 우선순위 순서"])
    lines.extend(
        f"{i}. {label} ({priority})"
        for i, (label, priority) in enumerate(plan.priority_ranking, start=1)
    )
    lines.extend(
        [
            "",
            "---",
            f"*간호계획 작성 시간: {generated_at:%Y-%m-%d %H:%M:%S}*",
            f"*다음 평가 예정: {next_evaluation:%Y-%m-%d %H:%M:%S}*",
        ]
    )
    return "\n".join(lines)
