"""Tests for the learner progress subsystem.

A FakeClock stands in for datetime.now so streaks, session lengths and
weekly windows are deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from nursing_tutor.learning import LearningService
from nursing_tutor.learning.analytics import LearningAnalyticsEngine, TOTAL_TOPIC_COUNT
from nursing_tutor.learning.models import AreaPerformance, ProgressRecord
from nursing_tutor.learning.path_engine import MIN_SESSIONS_PER_WEEK, build_pacing, build_sequence
from nursing_tutor.learning.profiles import LearnerNotFoundError, ProfileManager
from nursing_tutor.learning.progress import MODULE_TOPICS, ProgressTracker, format_progress_report


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 10, 9, 0))


@pytest.fixture
def tracker(clock: FakeClock) -> ProgressTracker:
    return ProgressTracker(clock=clock)


def _study(
    tracker: ProgressTracker,
    clock: FakeClock,
    topic: str,
    module: str = "oncology",
    minutes: int = 30,
    **data: object,
) -> ProgressRecord | None:
    tracker.start_session("kim", module, topic)
    clock.advance(minutes=minutes)
    return tracker.complete_session("kim", module, topic, **data)


# ---------------------------------------------------------------------------
# Progress tracker
# ---------------------------------------------------------------------------


class TestSessions:
    def test_time_spent_in_whole_minutes(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """time_spent is end - start in minutes."""
        record = _study(tracker, clock, "화학요법", minutes=45)
        assert record.time_spent == 45
        assert record.end_time - record.start_time == timedelta(minutes=45)
        assert record.completion_percentage == 100

    def test_complete_without_open_session(self, tracker: ProgressTracker) -> None:
        """Completing a session that was never started returns None."""
        assert tracker.complete_session("kim", "oncology", "화학요법") is None

    def test_most_recent_open_record_is_completed(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """With duplicate open sessions the newest closes and the older stays open."""
        first = tracker.start_session("kim", "oncology", "화학요법")
        clock.advance(minutes=5)
        second = tracker.start_session("kim", "oncology", "화학요법")
        clock.advance(minutes=20)

        completed = tracker.complete_session("kim", "oncology", "화학요법", score=80)

        assert completed is second
        assert first.is_open
        assert second.time_spent == 20

    def test_progress_is_monotonic(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Repeated and unknown topics never lower module progress."""
        seen = []
        for topic in ["화학요법", "화학요법", "없는주제", "통증관리", "화학요법"]:
            _study(tracker, clock, topic)
            seen.append(tracker.module_progress("kim", "oncology").current_progress)
        assert seen == sorted(seen)
        assert seen[-1] == 20

    def test_module_without_catalog_stays_at_zero(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Topics in a module with no catalog never raise its progress."""
        _study(tracker, clock, "anything", module="pediatric")
        progress = tracker.module_progress("kim", "pediatric")
        assert progress.current_progress == 0
        assert progress.topics_completed == ["anything"]

    def test_topic_sets_move_on_completion(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """A topic moves from remaining to in-progress to completed."""
        tracker.start_session("kim", "oncology", "화학요법")
        progress = tracker.module_progress("kim", "oncology")
        assert "화학요법" in progress.topics_in_progress
        assert "화학요법" not in progress.topics_remaining

        tracker.complete_session("kim", "oncology", "화학요법")
        assert progress.topics_completed == ["화학요법"]
        assert progress.topics_in_progress == []
        assert len(progress.topics_remaining) == len(MODULE_TOPICS["oncology"]) - 1

    def test_mastery_level(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Perfect score and confidence on a completed session is full mastery."""
        _study(tracker, clock, "화학요법", score=100, confidence_level=5)
        assert tracker.module_progress("kim", "oncology").mastery_level == 100


class TestDailyActivity:
    def test_streak_counts_back_from_today(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Today, yesterday and the day before, with a gap before that, is 3."""
        for days_ago in (5, 2, 1, 0):
            clock.now = datetime(2024, 6, 10, 9, 0) - timedelta(days=days_ago)
            _study(tracker, clock, f"topic-{days_ago}")
        assert tracker.study_streak("kim") == 3

    def test_streak_is_zero_without_study_today(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """The streak breaks when nothing was studied today."""
        _study(tracker, clock, "화학요법")
        clock.advance(days=2)
        assert tracker.study_streak("kim") == 0

    def test_daily_activity_accumulates(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Two sessions on one day add up in a single activity."""
        _study(tracker, clock, "화학요법", minutes=30, notes="메모")
        _study(tracker, clock, "통증관리", minutes=15)
        [activity] = tracker.daily_activities("kim")
        assert activity.study_duration == 45
        assert activity.concepts_learned == ["화학요법", "통증관리"]
        assert activity.notes_created == 1

    def test_reflection_needs_activity_today(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """A reflection attaches only to a day with study activity."""
        reflection = {"mood_rating": 4, "energy_level": 3, "focus_level": 5, "reflection_notes": "좋음"}
        assert tracker.record_daily_reflection("kim", **reflection) is False
        _study(tracker, clock, "화학요법")
        assert tracker.record_daily_reflection("kim", **reflection) is True
        assert tracker.daily_activities("kim")[0].mood_rating == 4


class TestAggregates:
    def test_trend_improving(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Later scores more than 5 points above earlier ones is improving."""
        for i, score in enumerate([60, 60, 60, 80, 80, 80]):
            _study(tracker, clock, f"t{i}", score=score)
        assert tracker.performance_trend("kim") == "improving"

    def test_trend_declining_and_stable(self, clock: FakeClock) -> None:
        """Falling scores are declining; small differences are stable."""
        declining = ProgressTracker(clock=clock)
        for i, score in enumerate([90, 90, 70, 70]):
            _study(declining, clock, f"t{i}", score=score)
        assert declining.performance_trend("kim") == "declining"

        stable = ProgressTracker(clock=clock)
        for i, score in enumerate([80, 82, 81]):
            _study(stable, clock, f"t{i}", score=score)
        assert stable.performance_trend("kim") == "stable"

    def test_trend_needs_three_scores(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Fewer than three scored sessions is insufficient data."""
        _study(tracker, clock, "a", score=90)
        _study(tracker, clock, "b", score=50)
        _study(tracker, clock, "c")  # unscored
        assert tracker.performance_trend("kim") == "insufficient_data"

    def test_milestone_completion_date(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Reaching 100% stamps the completion date."""
        milestone = tracker.create_milestone(
            "kim",
            title="종양간호 기초",
            description="",
            category="knowledge",
            target_date=clock.now + timedelta(days=30),
        )
        assert tracker.update_milestone("kim", milestone.id, completion_percentage=50)
        assert milestone.completion_date is None
        assert tracker.update_milestone("kim", milestone.id, completion_percentage=100)
        assert milestone.completion_date == clock.now
        assert tracker.update_milestone("kim", "missing", completion_percentage=100) is False

    def test_weekly_summary(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """The weekly summary totals time, scores, weak areas and achievements."""
        _study(tracker, clock, "화학요법", score=95, difficulty_rating=4)
        _study(tracker, clock, "통증관리", score=65, confidence_level=2)

        summary = tracker.weekly_summary("kim")

        assert summary.total_study_time == 60
        assert summary.average_score == 80
        assert summary.improvement_areas == ["oncology", "화학요법", "통증관리"]
        assert "1개 주제에서 우수한 성과" in summary.achievements
        assert "어려운 내용 성공적 학습" in summary.achievements
        assert summary.next_week_goals[0] == "oncology 모듈 진행"
        assert tracker.weekly_summaries("kim") == [summary]

    def test_progress_report(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """The progress report shows the streak and active module progress."""
        _study(tracker, clock, "화학요법", score=90)
        report = format_progress_report("kim", tracker.progress_summary("kim"))
        assert "**연속 학습**: 1일" in report
        assert "- oncology: 10%" in report


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------


class TestAnalytics:
    def test_default_for_new_learner(self, tracker: ProgressTracker) -> None:
        """A learner with no sessions gets starter guidance."""
        analytics = LearningAnalyticsEngine(tracker).analyze("nobody")
        assert analytics.overall_progress == 0
        assert analytics.weaknesses == ["학습 데이터 부족"]

    def test_area_can_be_strength_and_weakness(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """A high score with low confidence shows up on both lists."""
        _study(tracker, clock, "화학요법", score=95, confidence_level=2)
        analytics = LearningAnalyticsEngine(tracker).analyze("kim")
        assert "oncology 영역에서 우수한 성과" in analytics.strengths
        assert "oncology 영역에 대한 자신감 부족" in analytics.weaknesses

    def test_overall_progress_counts_distinct_topics(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Overall progress counts each completed topic once."""
        for topic in ["화학요법", "화학요법", "통증관리", "면역치료", "표적치료", "완화간호"]:
            _study(tracker, clock, topic, score=80)
        analytics = LearningAnalyticsEngine(tracker).analyze("kim")
        assert analytics.overall_progress == round(5 / TOTAL_TOPIC_COUNT * 100)

    def test_repeated_topics_count_as_attempts(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Three sessions on one topic is three attempts, a weakness."""
        for _ in range(3):
            _study(tracker, clock, "화학요법", score=80)
        engine = LearningAnalyticsEngine(tracker)
        assert engine.area_performance("kim")["oncology"].avg_attempts == 3
        assert "oncology 영역에서 반복 학습 필요" in engine.analyze("kim").weaknesses

    def test_study_patterns(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Session length, modules and difficulty become study patterns."""
        _study(tracker, clock, "화학요법", minutes=30, difficulty_rating=4)
        time_pref, content_pref, difficulty_pref = LearningAnalyticsEngine(tracker).analyze("kim").study_patterns
        assert time_pref.pattern_data["preference"] == "중간 길이 학습 세션 선호"
        assert content_pref.pattern_data["preferred_areas"] == ["oncology"]
        assert difficulty_pref.pattern_data["preference"] == "고급 수준 선호"

    def test_next_step_chain(self, tracker: ProgressTracker, clock: FakeClock) -> None:
        """Finishing fundamentals work suggests adult nursing next."""
        _study(tracker, clock, "간호과정", module="fundamentals", score=80)
        assert LearningAnalyticsEngine(tracker).analyze("kim").next_steps == ["성인간호학 학습 시작"]


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


class TestProfiles:
    def test_defaults_and_explicit_id(self) -> None:
        """Omitted sections get defaults and the given id is kept."""
        manager = ProfileManager()
        profile = manager.create_profile({"personal_info": {"id": "lee", "name": "이간호"}})
        assert profile.id == "lee"
        assert profile.personal_info.name == "이간호"
        assert profile.career_goals.target_specialty == ["oncology"]
        assert profile.learning_preferences.study_schedule.weekly_hours == 20
        assert manager.get_profile("lee") is profile

    def test_current_status_is_not_taken_from_input(self) -> None:
        """New profiles start with empty status and a generated id."""
        profile = ProfileManager().create_profile({"current_status": {"overall_progress": 99}})
        assert profile.current_status.overall_progress == 0
        assert len(profile.id) == 12

    def test_update_deep_merges(self) -> None:
        """Nested updates change only the named fields."""
        manager = ProfileManager()
        manager.create_profile({"personal_info": {"id": "lee"}})
        updated = manager.update_profile(
            "lee", {"learning_preferences": {"study_schedule": {"weekly_hours": 10}}}
        )
        schedule = updated.learning_preferences.study_schedule
        assert schedule.weekly_hours == 10
        assert schedule.session_duration == 60

    def test_update_rejects_unknown_fields(self) -> None:
        """Updating a field the profile does not have is a TypeError."""
        manager = ProfileManager()
        manager.create_profile({"personal_info": {"id": "lee"}})
        with pytest.raises(TypeError):
            manager.update_profile("lee", {"hobbies": ["hiking"]})

    def test_unknown_learner(self) -> None:
        """Operations that need a profile raise LearnerNotFoundError."""
        manager = ProfileManager()
        with pytest.raises(LearnerNotFoundError) as excinfo:
            manager.update_profile("ghost", {})
        assert str(excinfo.value) == "Unknown learner: ghost"
        assert isinstance(excinfo.value, KeyError)

    def test_learning_style_assessment(self) -> None:
        """Scores become percentages and the highest is dominant."""
        style = ProfileManager().assess_learning_style(
            [
                {"style": "visual", "score": 6},
                {"style": "kinesthetic", "score": 3},
                {"style": "auditory", "score": 1},
                {"style": "telepathic", "score": 50},
            ]
        )
        assert style.visual.preference_score == 60
        assert style.kinesthetic.preference_score == 30
        assert style.reading_writing.preference_score == 0
        assert style.dominant_style == "visual"

    def test_learning_style_without_answers(self) -> None:
        """No answers gives every style a zero score."""
        style = ProfileManager().assess_learning_style([])
        assert all(s.preference_score == 0 for s in style.scores().values())

    def test_personalized_recommendations(self) -> None:
        """Experience and collaboration preferences shape recommendations."""
        manager = ProfileManager()
        profile = manager.create_profile(
            {"background": {"healthcare_experience": 3}, "learning_preferences": {"interaction_type": "collaborative"}}
        )
        recommendations = manager.personalized_recommendations(profile)
        assert "스터디 그룹 참여" in recommendations.learning_strategies
        assert recommendations.study_schedule.optimal_session_duration == 75
        assert "옵시디언 노트 앱" in recommendations.tools_and_resources


# ---------------------------------------------------------------------------
# Learning paths
# ---------------------------------------------------------------------------


class TestPaths:
    def test_path_generation_is_idempotent(self, clock: FakeClock) -> None:
        """Generating a path twice returns the same path."""
        service = LearningService(clock=clock)
        service.ensure_profile("kim")
        first = service.paths.generate_path("kim")
        again = service.paths.generate_path("kim")
        assert again is first
        assert again.recommended_sequence == ["fundamentals", "adult_nursing", "oncology"]
        assert again.current_position == 0

    def test_unknown_learner_has_no_path(self, clock: FakeClock) -> None:
        """A path needs an existing profile."""
        service = LearningService(clock=clock)
        with pytest.raises(LearnerNotFoundError):
            service.paths.generate_path("ghost")

    def test_sequence_personalization(self) -> None:
        """Experienced nurses skip fundamentals; specialties are appended."""
        profile = ProfileManager().create_profile(
            {
                "background": {"nursing_experience": 3},
                "career_goals": {"target_specialty": ["oncology", "gene_therapy"]},
            }
        )
        assert build_sequence(profile) == ["adult_nursing", "oncology", "gene_therapy"]

    def test_challenging_front_loads_advanced_modules(self) -> None:
        """Challenging learners get advanced modules moved up."""
        profile = ProfileManager().create_profile(
            {"learning_preferences": {"difficulty_preference": "challenging"}}
        )
        base = ["a", "b", "c", "d", "advanced_x", "e"]
        assert build_sequence(profile, base) == ["a", "b", "c", "advanced_x", "d", "e", "oncology"]

    def test_pacing_caps_sessions(self, clock: FakeClock) -> None:
        """Sessions per week come from minutes and are capped at seven."""
        manager = ProfileManager()
        busy = manager.create_profile()
        light = manager.create_profile({"learning_preferences": {"study_schedule": {"weekly_hours": 2}}})
        assert build_pacing(busy, clock()).sessions_per_week == 7
        assert build_pacing(light, clock()).sessions_per_week == 2

    def test_all_matching_adaptation_rules_fire(self, clock: FakeClock) -> None:
        """Low score, slow pace and low confidence each add an adjustment."""
        service = LearningService(clock=clock)
        service.ensure_profile("kim")
        path = service.paths.generate_path("kim")
        path.pacing_recommendations.sessions_per_week = MIN_SESSIONS_PER_WEEK

        struggling = AreaPerformance(
            area="oncology",
            avg_score=55,
            avg_time_spent=400,
            avg_attempts=1,
            avg_confidence=2,
            expected_time=180,
            record_count=4,
        )
        service.paths.adapt("kim", struggling)

        triggers = [a.trigger_condition for a in path.adaptive_adjustments]
        assert triggers == ["low_performance", "slow_progress", "low_confidence"]
        assert path.pacing_recommendations.sessions_per_week == MIN_SESSIONS_PER_WEEK
        assert path.difficulty_adjustments[0].adjusted_difficulty == 2
        assert path.support_resources[-1].type == "practice"

        service.paths.adapt("kim", struggling)
        assert len(path.adaptive_adjustments) == 6

    def test_checkpoints_and_intensive_periods(self, clock: FakeClock) -> None:
        """Checkpoints every third module and at the end; intensive blocks for gene therapy."""
        service = LearningService(clock=clock)
        service.profiles.create_profile(
            {"personal_info": {"id": "kim"}, "career_goals": {"target_specialty": ["gene_therapy"]}}
        )
        path = service.paths.generate_path("kim")

        assert path.recommended_sequence == ["fundamentals", "adult_nursing", "gene_therapy"]
        assert [(c.id, c.type) for c in path.checkpoints] == [
            ("checkpoint_0", "knowledge_check"),
            ("checkpoint_2", "milestone"),
        ]
        [period] = path.pacing_recommendations.intensive_periods
        assert period.start_date == clock.now + timedelta(days=60)
        assert period.focus_areas == ["gene_therapy"]
        assert path.pacing_recommendations.review_intervals == [1, 3, 7, 14, 30]

    def test_recommendations_for_new_learner(self, clock: FakeClock) -> None:
        """A new learner gets strategy, content and schedule advice."""
        service = LearningService(clock=clock)
        service.ensure_profile("kim")
        types = [r.type for r in service.paths.recommendations("kim")]
        assert types == ["strategy", "content", "schedule"]

    def test_cursor_only_advances_on_current_complete_module(self, clock: FakeClock) -> None:
        """Only a finished current module moves the path forward."""
        service = LearningService(clock=clock)
        service.ensure_profile("kim")
        service.paths.generate_path("kim")
        assert service.paths.update_progress("kim", "adult_nursing", 100) is False
        assert service.paths.update_progress("kim", "fundamentals", 90) is False
        assert service.paths.update_progress("kim", "fundamentals", 100) is True
        assert service.paths.next_module("kim") == "adult_nursing"
        assert service.paths.get_path("kim").completion_percentage == 33


class TestLearningService:
    def test_finishing_a_module_advances_the_path(self, clock: FakeClock) -> None:
        """Completing every topic of the current module moves the cursor on."""
        service = LearningService(clock=clock)
        service.profiles.create_profile({"personal_info": {"id": "park"}, "background": {"nursing_experience": 2}})

        outcome = None
        for topic in MODULE_TOPICS["adult_nursing"]:
            service.start_session("park", "adult_nursing", topic)
            clock.advance(minutes=40)
            outcome = service.complete_session("park", "adult_nursing", topic, score=90, confidence_level=4)

        assert outcome.module_progress.current_progress == 100
        assert outcome.path_advanced
        assert outcome.next_module == "oncology"
        profile = service.profiles.get_profile("park")
        assert profile.current_status.completed_modules == ["adult_nursing"]
        assert profile.current_status.active_modules == []

    def test_start_registers_new_learner(self, clock: FakeClock) -> None:
        """Starting a session creates the profile and path."""
        service = LearningService(clock=clock)
        service.start_session("new", "oncology", "화학요법")
        assert service.profiles.get_profile("new") is not None
        assert service.paths.get_path("new") is not None

    def test_low_scores_trigger_adaptation(self, clock: FakeClock) -> None:
        """A failing score lowers the path difficulty."""
        service = LearningService(clock=clock)
        service.start_session("kim", "fundamentals", "간호과정")
        clock.advance(minutes=30)
        outcome = service.complete_session("kim", "fundamentals", "간호과정", score=50)
        assert [a.trigger_condition for a in outcome.adjustments] == ["low_performance"]
