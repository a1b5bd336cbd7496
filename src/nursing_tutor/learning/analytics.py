"""Learning analytics over a learner's completed sessions.

Sessions are grouped by module ("area"). Each area is judged on several
metrics independently, so the same area can show up as both a strength
and a weakness when different metrics point in different directions.
"""

from __future__ import annotations

import logging
from collections import Counter
from statistics import mean

from nursing_tutor.learning.models import AreaPerformance, LearningAnalytics, ProgressRecord, StudyPattern
from nursing_tutor.learning.progress import MODULE_TOPICS, ProgressTracker

logger = logging.getLogger(__name__)

TOTAL_TOPIC_COUNT = sum(len(topics) for topics in MODULE_TOPICS.values())

# Expected minutes per session, by area.
EXPECTED_TIME: dict[str, int] = {
    "fundamentals": 120,
    "adult_nursing": 150,
    "oncology": 180,
    "pediatric": 140,
    "maternal": 130,
    "mental_health": 140,
    "community": 110,
    "gene_therapy": 200,
    "clinical_trial": 160,
}
DEFAULT_EXPECTED_TIME = 120

# (completed area, area that should follow, suggestion)
NEXT_STEP_CHAIN: list[tuple[str, str, str]] = [
    ("fundamentals", "adult_nursing", "성인간호학 학습 시작"),
    ("adult_nursing", "oncology", "종양간호학 전문 영역 진입"),
    ("oncology", "gene_therapy", "유전자 치료 간호 고급 과정 시작"),
    ("gene_therapy", "clinical_trial", "임상시험 간호 전문 과정 진입"),
]


def default_analytics() -> LearningAnalytics:
    return LearningAnalytics(
        overall_progress=0,
        strengths=["학습 시작 준비 완료"],
        weaknesses=["학습 데이터 부족"],
        recommendations=["기본간호학부터 체계적 학습 시작"],
        next_steps=["간호학 기초 개념 학습"],
    )


def expected_time(area: str) -> int:
    return EXPECTED_TIME.get(area, DEFAULT_EXPECTED_TIME)


def area_performance(records: list[ProgressRecord]) -> dict[str, AreaPerformance]:
    """Per-area averages over completed sessions.

    Attempts for an area are sessions per distinct topic, so a topic
    studied three times counts as three attempts.
    """
    by_area: dict[str, list[ProgressRecord]] = {}
    for record in records:
        if not record.is_open:
            by_area.setdefault(record.module_name, []).append(record)

    performance: dict[str, AreaPerformance] = {}
    for area, area_records in by_area.items():
        scores = [r.score for r in area_records if r.score is not None]
        performance[area] = AreaPerformance(
            area=area,
            avg_score=mean(scores) if scores else 0,
            avg_time_spent=mean(r.time_spent for r in area_records),
            avg_attempts=len(area_records) / len({r.topic for r in area_records}),
            avg_confidence=mean(r.confidence_level for r in area_records),
            expected_time=expected_time(area),
            record_count=len(area_records),
        )
    return performance


def identify_strengths(performance: dict[str, AreaPerformance]) -> list[str]:
    strengths: list[str] = []
    for area, p in performance.items():
        if p.avg_score > 85:
            strengths.append(f"{area} 영역에서 우수한 성과")
        if p.avg_time_spent < p.expected_time:
            strengths.append(f"{area} 영역에서 빠른 학습 속도")
        if p.avg_confidence > 4:
            strengths.append(f"{area} 영역에 대한 높은 자신감")
    return strengths or ["학습 데이터 분석 중"]


def identify_weaknesses(performance: dict[str, AreaPerformance]) -> list[str]:
    weaknesses: list[str] = []
    for area, p in performance.items():
        if p.avg_score < 70:
            weaknesses.append(f"{area} 영역에서 추가 학습 필요")
        if p.avg_time_spent > p.expected_time * 1.5:
            weaknesses.append(f"{area} 영역에서 학습 시간 과다 소요")
        if p.avg_confidence < 3:
            weaknesses.append(f"{area} 영역에 대한 자신감 부족")
        if p.avg_attempts > 2:
            weaknesses.append(f"{area} 영역에서 반복 학습 필요")
    return weaknesses or ["전반적으로 양호한 학습 진행"]


def recommend(performance: dict[str, AreaPerformance]) -> list[str]:
    recommendations: list[str] = []
    for area, p in performance.items():
        if p.avg_score < 70:
            recommendations.append(f"{area} 영역의 기본 개념 복습 권장")
        if p.avg_time_spent > p.expected_time * 1.5:
            recommendations.append(f"{area} 영역에서 학습 전략 조정 필요")
        if p.avg_confidence < 3:
            recommendations.append(f"{area} 영역에서 추가 연습 문제 풀이 권장")
    return recommendations or ["현재 학습 패턴을 유지하면서 점진적 발전 도모"]


def next_steps(records: list[ProgressRecord]) -> list[str]:
    completed = {r.module_name for r in records if not r.is_open}
    current = {r.module_name for r in records if r.is_open}
    steps = [
        suggestion
        for done, following, suggestion in NEXT_STEP_CHAIN
        if done in completed and following not in current
    ]
    return steps or ["현재 학습 영역 심화 과정 진행"]


def study_patterns(records: list[ProgressRecord]) -> list[StudyPattern]:
    avg_time = mean(r.time_spent for r in records)
    if avg_time < 30:
        time_preference = "짧은 학습 세션 선호"
    elif avg_time < 60:
        time_preference = "중간 길이 학습 세션 선호"
    else:
        time_preference = "긴 학습 세션 선호"

    avg_difficulty = mean(r.difficulty_rating for r in records)
    if avg_difficulty < 2.5:
        difficulty_preference = "기초 수준 선호"
    elif avg_difficulty < 3.5:
        difficulty_preference = "중급 수준 선호"
    else:
        difficulty_preference = "고급 수준 선호"

    preferred_areas = [area for area, _ in Counter(r.module_name for r in records).most_common(3)]

    return [
        StudyPattern("time_preference", {"preference": time_preference, "avg_time_spent": avg_time}, 0.8),
        StudyPattern("content_preference", {"preferred_areas": preferred_areas}, 0.7),
        StudyPattern(
            "difficulty_preference",
            {"preference": difficulty_preference, "avg_difficulty": avg_difficulty},
            0.6,
        ),
    ]


class LearningAnalyticsEngine:
    def __init__(self, tracker: ProgressTracker) -> None:
        self._tracker = tracker

    def area_performance(self, learner_id: str) -> dict[str, AreaPerformance]:
        return area_performance(self._tracker.records(learner_id))

    def analyze(self, learner_id: str) -> LearningAnalytics:
        """Strengths, weaknesses and next steps for a learner.

        A learner with no sessions gets fixed starter guidance.
        """
        records = self._tracker.records(learner_id)
        if not records:
            return default_analytics()

        completed_topics = {(r.module_name, r.topic) for r in records if not r.is_open}
        performance = area_performance(records)
        return LearningAnalytics(
            overall_progress=round(len(completed_topics) / TOTAL_TOPIC_COUNT * 100),
            strengths=identify_strengths(performance),
            weaknesses=identify_weaknesses(performance),
            recommendations=recommend(performance),
            next_steps=next_steps(records),
            study_patterns=study_patterns(records),
        )
