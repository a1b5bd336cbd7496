"""Progress tracker.

Each (learner, module, topic) moves through ``not started -> in progress
-> completed``. Sessions are logged as ProgressRecords; completing a
session recomputes the module's ModuleProgress and folds the session into
today's DailyActivity.

Module progress is ``completed topics / topics in the module catalog``.
The completed set only ever grows, so progress never decreases. Modules
with no topic catalog stay at 0%.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import date, datetime, time, timedelta
from statistics import mean

from nursing_tutor.learning.models import (
    DailyActivity,
    Milestone,
    ModuleProgress,
    ProgressRecord,
    ProgressSummary,
    RecentActivity,
    WeeklySummary,
)

logger = logging.getLogger(__name__)

MODULE_TOPICS: dict[str, list[str]] = {
    "fundamentals": [
        "간호철학", "간호과정", "의사소통", "환자안전", "감염관리",
        "기본간호술", "활력징후", "약물관리", "상처관리", "영양관리",
    ],
    "adult_nursing": [
        "심혈관계", "호흡기계", "소화기계", "신경계", "내분비계",
        "근골격계", "비뇨기계", "생식기계", "혈액계", "면역계",
    ],
    "oncology": [
        "암생물학", "화학요법", "방사선치료", "수술간호", "면역치료",
        "표적치료", "통증관리", "증상관리", "완화간호", "가족지지",
    ],
    "gene_therapy": [
        "유전학기초", "분자생물학", "유전자편집", "벡터시스템", "세포치료",
        "유전상담", "윤리적고려", "안전관리", "모니터링", "부작용관리",
    ],
    "clinical_trial": [
        "연구설계", "프로토콜", "동의과정", "데이터수집", "안전성모니터링",
        "규제준수", "품질관리", "이상반응", "통계분석", "보고서작성",
    ],
}

MODULE_ESTIMATE = timedelta(days=30)
TREND_WINDOW = 10
TREND_THRESHOLD = 5
MASTERED_SCORE = 80
MASTERED_CONFIDENCE = 4


def module_topics(module_name: str) -> list[str]:
    return list(MODULE_TOPICS.get(module_name, []))


def _add_unique(items: list[str], value: str) -> None:
    if value not in items:
        items.append(value)


class ProgressTracker:
    """In-memory session log and derived progress per learner.

    Args:
        clock: Returns "now"; injectable so streaks and weekly windows can
            be tested without waiting for real days to pass.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._records: dict[str, list[ProgressRecord]] = {}
        self._modules: dict[str, dict[str, ModuleProgress]] = {}
        self._activities: dict[str, list[DailyActivity]] = {}
        self._milestones: dict[str, list[Milestone]] = {}
        self._summaries: dict[str, list[WeeklySummary]] = {}

    # -- read access --------------------------------------------------------

    def records(self, learner_id: str) -> list[ProgressRecord]:
        return list(self._records.get(learner_id, []))

    def module_progress(self, learner_id: str, module_name: str) -> ModuleProgress | None:
        return self._modules.get(learner_id, {}).get(module_name)

    def all_module_progress(self, learner_id: str) -> list[ModuleProgress]:
        return list(self._modules.get(learner_id, {}).values())

    def daily_activities(self, learner_id: str) -> list[DailyActivity]:
        return list(self._activities.get(learner_id, []))

    def milestones(self, learner_id: str) -> list[Milestone]:
        return list(self._milestones.get(learner_id, []))

    def weekly_summaries(self, learner_id: str) -> list[WeeklySummary]:
        return list(self._summaries.get(learner_id, []))

    # -- sessions -----------------------------------------------------------

    def start_session(self, learner_id: str, module_name: str, topic: str) -> ProgressRecord:
        """Open a new session record.

        A second start for the same (module, topic) before completion opens
        another record; the earlier one is left open.
        """
        record = ProgressRecord(
            learner_id=learner_id,
            module_name=module_name,
            topic=topic,
            start_time=self._clock(),
        )
        self._records.setdefault(learner_id, []).append(record)

        progress = self._get_or_create_module(learner_id, module_name)
        if topic not in progress.topics_completed:
            _add_unique(progress.topics_in_progress, topic)
        if topic in progress.topics_remaining:
            progress.topics_remaining.remove(topic)
        progress.last_activity = record.start_time

        logger.debug("Learner %s started %s/%s", learner_id, module_name, topic)
        return record

    def complete_session(
        self,
        learner_id: str,
        module_name: str,
        topic: str,
        *,
        score: float | None = None,
        difficulty_rating: int = 3,
        confidence_level: int = 3,
        notes: str | None = None,
        resources_used: Iterable[str] = (),
        challenges_faced: Iterable[str] = (),
        achievements: Iterable[str] = (),
    ) -> ProgressRecord | None:
        """Close the most recent open session for (module, topic).

        Returns None when there is no open session to complete.
        """
        record = next(
            (
                r
                for r in reversed(self._records.get(learner_id, []))
                if r.module_name == module_name and r.topic == topic and r.is_open
            ),
            None,
        )
        if record is None:
            logger.debug("No open session for %s %s/%s", learner_id, module_name, topic)
            return None

        record.end_time = self._clock()
        record.time_spent = round((record.end_time - record.start_time).total_seconds() / 60)
        record.completion_percentage = 100
        record.score = score
        record.difficulty_rating = difficulty_rating
        record.confidence_level = confidence_level
        record.notes = notes
        record.resources_used = list(resources_used)
        record.challenges_faced = list(challenges_faced)
        record.achievements = list(achievements)

        self._complete_topic(learner_id, record)
        self._add_to_daily_activity(learner_id, record)
        return record

    def _get_or_create_module(self, learner_id: str, module_name: str) -> ModuleProgress:
        modules = self._modules.setdefault(learner_id, {})
        if module_name not in modules:
            now = self._clock()
            modules[module_name] = ModuleProgress(
                module_name=module_name,
                start_date=now,
                estimated_completion=now + MODULE_ESTIMATE,
                last_activity=now,
                topics_remaining=module_topics(module_name),
            )
        return modules[module_name]

    def _complete_topic(self, learner_id: str, record: ProgressRecord) -> None:
        progress = self._get_or_create_module(learner_id, record.module_name)
        _add_unique(progress.topics_completed, record.topic)
        if record.topic in progress.topics_in_progress:
            progress.topics_in_progress.remove(record.topic)
        if record.topic in progress.topics_remaining:
            progress.topics_remaining.remove(record.topic)

        catalog = MODULE_TOPICS.get(record.module_name, [])
        if catalog:
            done = sum(1 for t in progress.topics_completed if t in catalog)
            progress.current_progress = round(done / len(catalog) * 100)
        progress.mastery_level = self._mastery_level(learner_id, record.module_name)
        progress.time_spent += record.time_spent
        progress.last_activity = record.end_time or self._clock()

    def _mastery_level(self, learner_id: str, module_name: str) -> int:
        """0.4 * avg score/100 + 0.3 * avg confidence/5 + 0.3 * completion rate, as 0-100."""
        done = [
            r
            for r in self._records.get(learner_id, [])
            if r.module_name == module_name and not r.is_open
        ]
        if not done:
            return 0
        avg_score = mean(r.score or 0 for r in done)
        avg_confidence = mean(r.confidence_level for r in done)
        completion_rate = sum(1 for r in done if r.completion_percentage == 100) / len(done)
        return round((avg_score / 100 * 0.4 + avg_confidence / 5 * 0.3 + completion_rate * 0.3) * 100)

    # -- daily activity -----------------------------------------------------

    def _find_activity(self, learner_id: str, day: date) -> DailyActivity | None:
        return next((a for a in self._activities.get(learner_id, []) if a.date == day), None)

    def _add_to_daily_activity(self, learner_id: str, record: ProgressRecord) -> None:
        day = self._clock().date()
        activity = self._find_activity(learner_id, day)
        if activity is None:
            activity = DailyActivity(date=day)
            self._activities.setdefault(learner_id, []).append(activity)
        activity.study_duration += record.time_spent
        _add_unique(activity.modules_studied, record.module_name)
        _add_unique(activity.concepts_learned, record.topic)
        if record.notes:
            activity.notes_created += 1

    def record_daily_reflection(
        self,
        learner_id: str,
        *,
        mood_rating: int,
        energy_level: int,
        focus_level: int,
        reflection_notes: str,
        questions_answered: int | None = None,
        correct_answers: int | None = None,
    ) -> bool:
        """Attach a reflection to today's activity; False if nothing was studied today."""
        activity = self._find_activity(learner_id, self._clock().date())
        if activity is None:
            return False
        activity.mood_rating = mood_rating
        activity.energy_level = energy_level
        activity.focus_level = focus_level
        activity.reflection_notes = reflection_notes
        if questions_answered is not None:
            activity.questions_answered = questions_answered
        if correct_answers is not None:
            activity.correct_answers = correct_answers
        return True

    # -- milestones ---------------------------------------------------------

    def create_milestone(
        self,
        learner_id: str,
        *,
        title: str,
        description: str,
        category: str,
        target_date: datetime,
        success_criteria: Iterable[str] = (),
    ) -> Milestone:
        milestone = Milestone(
            id=uuid.uuid4().hex[:12],
            title=title,
            description=description,
            category=category,
            target_date=target_date,
            success_criteria=list(success_criteria),
        )
        self._milestones.setdefault(learner_id, []).append(milestone)
        return milestone

    def update_milestone(self, learner_id: str, milestone_id: str, **updates) -> bool:
        milestone = next(
            (m for m in self._milestones.get(learner_id, []) if m.id == milestone_id), None
        )
        if milestone is None:
            return False
        for key, value in updates.items():
            if not hasattr(milestone, key):
                raise TypeError(f"Milestone has no field {key!r}")
            setattr(milestone, key, value)
        if updates.get("completion_percentage") == 100 and milestone.completion_date is None:
            milestone.completion_date = self._clock()
        return True

    # -- aggregates ---------------------------------------------------------

    def study_streak(self, learner_id: str) -> int:
        """Consecutive days with study time, counting back from today."""
        studied = {a.date for a in self._activities.get(learner_id, []) if a.study_duration > 0}
        today = self._clock().date()
        streak = 0
        while today - timedelta(days=streak) in studied:
            streak += 1
        return streak

    def performance_trend(self, learner_id: str) -> str:
        """Compare the newer and older halves of the last ten scored sessions."""
        scored = sorted(
            (r for r in self._records.get(learner_id, []) if r.score is not None and not r.is_open),
            key=lambda r: r.start_time,
            reverse=True,
        )[:TREND_WINDOW]
        if len(scored) < 3:
            return "insufficient_data"

        half = len(scored) // 2
        newer = mean(r.score for r in scored[:half])
        older = mean(r.score for r in scored[half:])
        difference = newer - older
        if difference > TREND_THRESHOLD:
            return "improving"
        if difference < -TREND_THRESHOLD:
            return "declining"
        return "stable"

    def overall_progress(self, learner_id: str) -> int:
        modules = self.all_module_progress(learner_id)
        if not modules:
            return 0
        return round(mean(m.current_progress for m in modules))

    def recent_activity(self, learner_id: str) -> RecentActivity:
        since = (self._clock() - timedelta(days=7)).date()
        recent = sorted(
            (a for a in self._activities.get(learner_id, []) if a.date >= since),
            key=lambda a: a.date,
            reverse=True,
        )
        return RecentActivity(
            recent_sessions=recent[:7],
            total_study_time=sum(a.study_duration for a in recent),
            concepts_learned=sum(len(a.concepts_learned) for a in recent),
            average_mood=mean(a.mood_rating for a in recent) if recent else 0,
        )

    def progress_summary(self, learner_id: str) -> ProgressSummary:
        modules = self.all_module_progress(learner_id)
        milestones = self._milestones.get(learner_id, [])
        now = self._clock()
        return ProgressSummary(
            overall_progress=self.overall_progress(learner_id),
            active_modules=[m for m in modules if 0 < m.current_progress < 100],
            completed_modules=[m for m in modules if m.current_progress == 100],
            recent_activity=self.recent_activity(learner_id),
            upcoming_milestones=[m for m in milestones if m.completion_date is None and m.target_date > now],
            completed_milestones=[m for m in milestones if m.completion_date is not None],
            study_streak=self.study_streak(learner_id),
            performance_trend=self.performance_trend(learner_id),
        )

    def weekly_summary(self, learner_id: str) -> WeeklySummary:
        """Summarize the last seven days and keep the summary in history."""
        now = self._clock()
        week_start = datetime.combine((now - timedelta(days=7)).date(), time.min)
        week_end = datetime.combine(now.date(), time.max)

        def in_week(moment: datetime) -> bool:
            return week_start <= moment <= week_end

        activities = [
            a for a in self._activities.get(learner_id, [])
            if in_week(datetime.combine(a.date, time.min))
        ]
        records = [r for r in self._records.get(learner_id, []) if in_week(r.start_time)]
        milestones = self._milestones.get(learner_id, [])
        scored = [r.score for r in records if r.score is not None]

        summary = WeeklySummary(
            week_start=week_start,
            week_end=week_end,
            total_study_time=sum(a.study_duration for a in activities),
            modules_completed=sum(
                1
                for m in self.all_module_progress(learner_id)
                if m.current_progress == 100 and in_week(m.last_activity)
            ),
            concepts_mastered=sum(
                1
                for r in records
                if r.completion_percentage == 100
                and (r.score or 0) >= MASTERED_SCORE
                and r.confidence_level >= MASTERED_CONFIDENCE
            ),
            average_score=round(mean(scored)) if scored else 0,
            improvement_areas=improvement_areas(records),
            achievements=achievements(records),
            goals_achieved=[
                m.title for m in milestones if m.completion_date and in_week(m.completion_date)
            ],
            goals_missed=[
                m.title for m in milestones if in_week(m.target_date) and m.completion_date is None
            ],
            next_week_goals=next_week_goals(records),
        )
        self._summaries.setdefault(learner_id, []).append(summary)
        return summary


def improvement_areas(records: list[ProgressRecord]) -> list[str]:
    """Modules with low scores, then topics rated hard or low-confidence."""
    areas: list[str] = []
    for r in records:
        if (r.score or 0) < 70:
            _add_unique(areas, r.module_name)
    for r in records:
        if r.difficulty_rating >= 4:
            _add_unique(areas, r.topic)
    for r in records:
        if r.confidence_level <= 2:
            _add_unique(areas, r.topic)
    return areas


def achievements(records: list[ProgressRecord]) -> list[str]:
    result: list[str] = []
    high_scores = sum(1 for r in records if (r.score or 0) >= 90)
    if high_scores:
        result.append(f"{high_scores}개 주제에서 우수한 성과")
    if len({r.start_time.date() for r in records}) >= 5:
        result.append("꾸준한 학습 습관 유지")
    if any(r.difficulty_rating >= 4 and (r.score or 0) >= 80 for r in records):
        result.append("어려운 내용 성공적 학습")
    return result


def next_week_goals(records: list[ProgressRecord]) -> list[str]:
    goals = [f"{module} 모듈 진행" for module in dict.fromkeys(r.module_name for r in records)]
    goals.extend(f"{area} 영역 집중 학습" for area in improvement_areas(records)[:2])
    goals.append("주 5일 이상 학습 유지")
    return goals


TREND_LABELS: dict[str, str] = {
    "improving": "📈 향상 중",
    "declining": "📉 하락 중",
    "stable": "➡️ 안정적",
    "insufficient_data": "데이터 부족",
}


def format_progress_report(learner_id: str, summary: ProgressSummary) -> str:
    """Render a ProgressSummary as the learner-facing markdown report."""
    lines = [
        f"# 📊 학습 진도 보고서: {learner_id}",
        "",
        f"**전체 진도**: {summary.overall_progress}%",
        f"**연속 학습**: {summary.study_streak}일",
        f"**성과 추세**: {TREND_LABELS.get(summary.performance_trend, summary.performance_trend)}",
        "",
        "## 📚 진행 중인 모듈",
    ]
    lines += [
        f"- {m.module_name}: {m.current_progress}% (숙련도 {m.mastery_level})"
        for m in summary.active_modules
    ] or ["- 없음"]

    lines += ["", "## ✅ 완료한 모듈"]
    lines += [f"- {m.module_name}" for m in summary.completed_modules] or ["- 없음"]

    recent = summary.recent_activity
    lines += [
        "",
        "## 🗓️ 최근 7일",
        f"- 학습 시간: {recent.total_study_time}분",
        f"- 학습한 개념: {recent.concepts_learned}개",
        f"- 학습일: {len(recent.recent_sessions)}일",
    ]

    if summary.upcoming_milestones:
        lines += ["", "## 🎯 다가오는 마일스톤"]
        lines += [
            f"- {m.title} ({m.target_date:%Y-%m-%d}, {m.completion_percentage}%)"
            for m in summary.upcoming_milestones
        ]
    if summary.completed_milestones:
        lines += ["", "## 🏆 달성한 마일스톤"]
        lines += [f"- {m.title}" for m in summary.completed_milestones]

    lines.append("")
    return "\n".join(lines)
