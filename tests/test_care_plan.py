"""Tests for the care plan composer."""

from __future__ import annotations

from datetime import datetime

from nursing_tutor.care_plan import (
    UNMAPPED_TIMEFRAME,
    compose_care_plan,
    format_care_plan,
    rank_priorities,
)


def test_acute_pain_plan_is_complete() -> None:
    """Every section is filled and acute pain ranks as high priority."""
    plan = compose_care_plan(["급성 통증"])
    assert plan.goals
    assert plan.interventions
    assert plan.rationale
    assert plan.evaluation_criteria
    assert plan.priority_ranking == [("급성 통증", "high")]


def test_caller_goals_and_interventions_win() -> None:
    """Non-empty caller lists replace the template ones verbatim."""
    plan = compose_care_plan(["피로"], patient_goals=["하루 30분 걷기"], interventions_needed=["산책 동행"])
    assert plan.goals == ["하루 30분 걷기"]
    assert plan.interventions == ["산책 동행"]


def test_empty_caller_lists_fall_back_to_templates() -> None:
    """Empty goal and intervention lists count as not given."""
    plan = compose_care_plan(["피로"], patient_goals=[], interventions_needed=[])
    assert plan.goals == ["일상 활동 수행 능력 향상"]
    assert len(plan.interventions) == 3


def test_unmapped_label_asymmetry() -> None:
    """Unmapped labels get placeholder metadata but add no goals or interventions."""
    plan = compose_care_plan(["영적 고뇌"])
    assert plan.diagnosis_analysis[0].category == "기타"
    assert plan.diagnosis_analysis[0].priority_level == "medium"
    assert plan.goals == []
    assert plan.interventions == []
    assert plan.rationale == []
    assert plan.evaluation_criteria == []
    assert plan.timeframe == [("영적 고뇌", UNMAPPED_TIMEFRAME)]


def test_priority_ranking_is_stable() -> None:
    """High before medium, input order kept within a tier."""
    ranking = rank_priorities(["피로", "낙상 위험성", "영적 고뇌", "급성 통증"])
    assert ranking == [
        ("낙상 위험성", "high"),
        ("급성 통증", "high"),
        ("피로", "medium"),
        ("영적 고뇌", "medium"),
    ]


def test_format_section_order_and_footer() -> None:
    """The document follows analysis, goals, interventions, rationale,
    evaluation, timeframe, priorities, then the evaluation footer."""
    plan = compose_care_plan(["피로", "급성 통증"])
    text = format_care_plan(plan, generated_at=datetime(2024, 5, 1, 8, 0))

    headings = [
        "## 📊 간호진단 분석",
        "## 🎯 환자 목표",
        "## 🏥 간호중재",
        "## 📝 근거/이론적 배경",
        "## 📏 평가 기준",
        "## ⏰ 시간계획",
        "## 🎯 우선순위 순서",
    ]
    positions = [text.index(h) for h in headings]
    assert positions == sorted(positions)
    assert "1. 급성 통증 (high)\n2. 피로 (medium)" in text
    assert "*다음 평가 예정: 2024-05-02 08:00:00*" in text
