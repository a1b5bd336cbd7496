"""State held by the learner progress subsystem.

These are plain mutable dataclasses: profiles, session records, module
progress and learning paths are updated in place over a learner's
lifetime and live only in process memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any

# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@dataclass
class LanguageProficiency:
    native_language: str = "Korean"
    english_level: str = "intermediate"
    medical_terminology: int = 3
    korean_level: str | None = None


@dataclass
class TimeSlot:
    day: str
    start_time: str
    end_time: str
    effectiveness_rating: int


@dataclass
class StudySchedule:
    preferred_time_slots: list[TimeSlot] = field(default_factory=list)
    session_duration: int = 60  # minutes
    break_intervals: int = 15  # minutes
    weekly_hours: int = 20
    flexibility: str = "flexible"


@dataclass
class StyleScore:
    preference_score: int
    effective_materials: list[str] = field(default_factory=list)
    recommended_tools: list[str] = field(default_factory=list)


@dataclass
class LearningStyle:
    visual: StyleScore
    auditory: StyleScore
    kinesthetic: StyleScore
    reading_writing: StyleScore

    def scores(self) -> dict[str, StyleScore]:
        return {
            "visual": self.visual,
            "auditory": self.auditory,
            "kinesthetic": self.kinesthetic,
            "reading_writing": self.reading_writing,
        }

    @property
    def dominant_style(self) -> str:
        # max() keeps the first of equal scores, so ties resolve in field order.
        return max(self.scores().items(), key=lambda item: item[1].preference_score)[0]


@dataclass
class PersonalInfo:
    id: str
    name: str = ""
    email: str = ""
    created_at: datetime = field(default_factory=datetime.now)
    last_active: datetime = field(default_factory=datetime.now)


@dataclass
class Background:
    education_level: str = "bachelor"
    previous_major: str = ""
    healthcare_experience: int = 0  # years
    nursing_experience: int = 0  # years
    language_proficiency: LanguageProficiency = field(default_factory=LanguageProficiency)


@dataclass
class LearningPreferences:
    preferred_learning_style: list[LearningStyle] = field(default_factory=list)
    study_schedule: StudySchedule = field(default_factory=StudySchedule)
    difficulty_preference: str = "gradual"
    interaction_type: str = "self_paced"


@dataclass
class CareerGoals:
    target_specialty: list[str] = field(default_factory=lambda: ["oncology"])
    work_setting: str = "hospital"
    timeline: datetime = field(default_factory=lambda: datetime.now() + timedelta(days=365))
    certification_goals: list[str] = field(default_factory=list)


@dataclass
class CurrentStatus:
    overall_progress: int = 0
    active_modules: list[str] = field(default_factory=list)
    completed_modules: list[str] = field(default_factory=list)
    struggling_areas: list[str] = field(default_factory=list)
    strength_areas: list[str] = field(default_factory=list)


@dataclass
class LearnerProfile:
    personal_info: PersonalInfo
    background: Background = field(default_factory=Background)
    learning_preferences: LearningPreferences = field(default_factory=LearningPreferences)
    career_goals: CareerGoals = field(default_factory=CareerGoals)
    current_status: CurrentStatus = field(default_factory=CurrentStatus)

    @property
    def id(self) -> str:
        return self.personal_info.id


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------


@dataclass
class ProgressRecord:
    learner_id: str
    module_name: str
    topic: str
    start_time: datetime
    end_time: datetime | None = None
    completion_percentage: int = 0
    time_spent: int = 0  # minutes, set on completion
    score: float | None = None
    difficulty_rating: int = 3  # 1-5
    confidence_level: int = 3  # 1-5
    notes: str | None = None
    resources_used: list[str] = field(default_factory=list)
    challenges_faced: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.end_time is None


@dataclass
class ModuleProgress:
    module_name: str
    start_date: datetime
    estimated_completion: datetime
    last_activity: datetime
    current_progress: int = 0
    time_spent: int = 0
    difficulty_rating: int = 3
    mastery_level: int = 0
    topics_completed: list[str] = field(default_factory=list)
    topics_in_progress: list[str] = field(default_factory=list)
    topics_remaining: list[str] = field(default_factory=list)


@dataclass
class DailyActivity:
    date: date
    study_duration: int = 0  # minutes
    modules_studied: list[str] = field(default_factory=list)
    concepts_learned: list[str] = field(default_factory=list)
    questions_answered: int = 0
    correct_answers: int = 0
    notes_created: int = 0
    reflection_notes: str = ""
    mood_rating: int = 3
    energy_level: int = 3
    focus_level: int = 3


@dataclass
class Milestone:
    id: str
    title: str
    description: str
    category: str  # knowledge | skill | competency | certification
    target_date: datetime
    completion_date: datetime | None = None
    completion_percentage: int = 0
    success_criteria: list[str] = field(default_factory=list)
    evidence: list[str] = field(default_factory=list)
    reflection: str = ""
    next_steps: list[str] = field(default_factory=list)


@dataclass
class WeeklySummary:
    week_start: datetime
    week_end: datetime
    total_study_time: int
    modules_completed: int
    concepts_mastered: int
    average_score: int
    improvement_areas: list[str]
    achievements: list[str]
    goals_achieved: list[str]
    goals_missed: list[str]
    next_week_goals: list[str]


@dataclass
class RecentActivity:
    recent_sessions: list[DailyActivity]
    total_study_time: int
    concepts_learned: int
    average_mood: float


@dataclass
class ProgressSummary:
    overall_progress: int
    active_modules: list[ModuleProgress]
    completed_modules: list[ModuleProgress]
    recent_activity: RecentActivity
    upcoming_milestones: list[Milestone]
    completed_milestones: list[Milestone]
    study_streak: int
    performance_trend: str


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------


@dataclass
class AreaPerformance:
    area: str
    avg_score: float
    avg_time_spent: float
    avg_attempts: float
    avg_confidence: float
    expected_time: int
    record_count: int


@dataclass
class StudyPattern:
    pattern_type: str  # time_preference | content_preference | difficulty_preference
    pattern_data: dict[str, Any]
    confidence_score: float


@dataclass
class LearningAnalytics:
    overall_progress: int
    strengths: list[str]
    weaknesses: list[str]
    recommendations: list[str]
    next_steps: list[str]
    study_patterns: list[StudyPattern] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Learning path
# ---------------------------------------------------------------------------


@dataclass
class DifficultyAdjustment:
    module: str | None
    original_difficulty: int
    adjusted_difficulty: int
    reason: str
    adjustment_date: datetime


@dataclass
class IntensivePeriod:
    start_date: datetime
    end_date: datetime
    focus_areas: list[str]
    additional_resources: list[str]


@dataclass
class PacingRecommendations:
    sessions_per_week: int
    session_duration: int
    break_frequency: int
    review_intervals: list[int]  # days
    intensive_periods: list[IntensivePeriod] = field(default_factory=list)


@dataclass
class SupportResource:
    type: str  # video | text | interactive | assessment | practice
    title: str
    url: str
    difficulty_level: int
    estimated_duration: int  # minutes
    learning_objectives: list[str]
    recommended_for: list[str]


@dataclass
class Checkpoint:
    id: str
    position: int
    title: str
    type: str  # knowledge_check | milestone
    requirements: list[str]
    success_criteria: list[str]
    remediation_resources: list[str]


@dataclass
class AdaptiveAdjustment:
    adjustment_id: str
    trigger_condition: str
    adjustment_type: str  # difficulty | pacing | resources
    adjustment_details: dict[str, Any]
    applied_date: datetime


@dataclass
class LearningPath:
    learner_id: str
    path_id: str
    recommended_sequence: list[str]
    pacing_recommendations: PacingRecommendations
    current_position: int = 0
    difficulty_adjustments: list[DifficultyAdjustment] = field(default_factory=list)
    support_resources: list[SupportResource] = field(default_factory=list)
    checkpoints: list[Checkpoint] = field(default_factory=list)
    adaptive_adjustments: list[AdaptiveAdjustment] = field(default_factory=list)

    @property
    def current_module(self) -> str | None:
        if self.current_position >= len(self.recommended_sequence):
            return None
        return self.recommended_sequence[self.current_position]

    @property
    def completion_percentage(self) -> int:
        if not self.recommended_sequence:
            return 0
        return round(self.current_position / len(self.recommended_sequence) * 100)


@dataclass
class LearningRecommendation:
    type: str  # content | strategy | resource | schedule
    priority: str  # high | medium | low
    title: str
    description: str
    rationale: str
    action_items: list[str]
    expected_outcomes: list[str]
    timeline: str
