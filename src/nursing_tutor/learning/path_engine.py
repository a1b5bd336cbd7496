"""Personalized learning paths.

A path is generated once per learner from their profile and then only
moves forward: ``current_position`` advances when the module under the
cursor is reported 100% complete.

Adaptation rules look at an area's performance numbers. Every rule whose
trigger holds is applied (not just the first), and each firing is
appended to the path's adjustment history.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from nursing_tutor.learning.analytics import LearningAnalyticsEngine
from nursing_tutor.learning.models import (
    AdaptiveAdjustment,
    AreaPerformance,
    Checkpoint,
    DifficultyAdjustment,
    IntensivePeriod,
    LearnerProfile,
    LearningPath,
    LearningRecommendation,
    PacingRecommendations,
    SupportResource,
)
from nursing_tutor.learning.profiles import STRONG_PREFERENCE, ProfileManager
from nursing_tutor.learning.progress import ProgressTracker

logger = logging.getLogger(__name__)

BASE_SEQUENCE: list[str] = ["fundamentals", "adult_nursing"]

# Specialties append their module after the base sequence, in this order.
SPECIALTY_MODULES: dict[str, list[str]] = {
    "oncology": ["oncology"],
    "gene_therapy": ["gene_therapy"],
    "clinical_trial": ["clinical_trial"],
}

# "challenging" learners get these modules moved up to this index.
FRONT_LOAD_KEYWORDS = ("advanced", "complex")
FRONT_LOAD_INDEX = 3

MAX_SESSIONS_PER_WEEK = 7
MIN_SESSIONS_PER_WEEK = 3
REVIEW_INTERVALS = [1, 3, 7, 14, 30]
INTENSIVE_SPECIALTIES = ("gene_therapy", "clinical_trial")
INTENSIVE_START = timedelta(days=60)
INTENSIVE_END = timedelta(days=90)
CHECKPOINT_EVERY = 3


def build_sequence(profile: LearnerProfile, base: list[str] | None = None) -> list[str]:
    sequence = list(BASE_SEQUENCE if base is None else base)

    # Working nurses skip the fundamentals module.
    if profile.background.nursing_experience > 0:
        sequence = [m for m in sequence if m != "fundamentals"]

    for specialty in profile.career_goals.target_specialty:
        for module in SPECIALTY_MODULES.get(specialty, []):
            if module not in sequence:
                sequence.append(module)

    if profile.learning_preferences.difficulty_preference == "challenging":
        harder = [m for m in sequence if any(k in m for k in FRONT_LOAD_KEYWORDS)]
        rest = [m for m in sequence if m not in harder]
        sequence = rest[:FRONT_LOAD_INDEX] + harder + rest[FRONT_LOAD_INDEX:]

    return sequence


def build_pacing(profile: LearnerProfile, now: datetime) -> PacingRecommendations:
    schedule = profile.learning_preferences.study_schedule
    sessions = round(schedule.weekly_hours * 60 / schedule.session_duration) if schedule.session_duration else 1
    return PacingRecommendations(
        sessions_per_week=max(1, min(sessions, MAX_SESSIONS_PER_WEEK)),
        session_duration=schedule.session_duration,
        break_frequency=schedule.break_intervals,
        review_intervals=list(REVIEW_INTERVALS),
        intensive_periods=[
            IntensivePeriod(
                start_date=now + INTENSIVE_START,
                end_date=now + INTENSIVE_END,
                focus_areas=[specialty],
                additional_resources=["Expert mentorship", "Specialized workshops", "Industry conferences"],
            )
            for specialty in profile.career_goals.target_specialty
            if specialty in INTENSIVE_SPECIALTIES
        ],
    )


def build_support_resources(profile: LearnerProfile) -> list[SupportResource]:
    resources: list[SupportResource] = []
    for style in profile.learning_preferences.preferred_learning_style:
        if style.visual.preference_score > STRONG_PREFERENCE:
            resources.append(
                SupportResource(
                    type="video",
                    title="Visual Learning Resources",
                    url="/resources/visual-learning",
                    difficulty_level=2,
                    estimated_duration=45,
                    learning_objectives=["Visual concept understanding"],
                    recommended_for=["visual_learners"],
                )
            )
        if style.kinesthetic.preference_score > STRONG_PREFERENCE:
            resources.append(
                SupportResource(
                    type="interactive",
                    title="Interactive Simulations",
                    url="/resources/simulations",
                    difficulty_level=3,
                    estimated_duration=60,
                    learning_objectives=["Hands-on practice"],
                    recommended_for=["kinesthetic_learners"],
                )
            )
    for specialty in profile.career_goals.target_specialty:
        resources.append(
            SupportResource(
                type="text",
                title=f"{specialty} Specialized Resources",
                url=f"/resources/{specialty}",
                difficulty_level=4,
                estimated_duration=90,
                learning_objectives=[f"{specialty} competency"],
                recommended_for=[specialty],
            )
        )
    return resources


def build_checkpoints(sequence: list[str]) -> list[Checkpoint]:
    """A checkpoint at every third module and always at the last one."""
    last = len(sequence) - 1
    return [
        Checkpoint(
            id=f"checkpoint_{index}",
            position=index,
            title=f"Checkpoint: {module}",
            type="milestone" if index == last else "knowledge_check",
            requirements=[f"Complete {module} module"],
            success_criteria=["Score 80% or higher", "Demonstrate practical application"],
            remediation_resources=["Review materials", "Additional practice"],
        )
        for index, module in enumerate(sequence)
        if index % CHECKPOINT_EVERY == 0 or index == last
    ]


# ---------------------------------------------------------------------------
# Adaptation rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AdaptationRule:
    name: str
    adjustment_type: str
    reason: str
    expected_outcome: str
    trigger: Callable[[AreaPerformance], bool]
    apply: Callable[[LearningPath, datetime], None]


def _lower_difficulty(path: LearningPath, now: datetime) -> None:
    path.difficulty_adjustments.append(
        DifficultyAdjustment(
            module=path.current_module,
            original_difficulty=3,
            adjusted_difficulty=2,
            reason="Performance below threshold",
            adjustment_date=now,
        )
    )


def _slow_down(path: LearningPath, now: datetime) -> None:
    pacing = path.pacing_recommendations
    pacing.sessions_per_week = max(pacing.sessions_per_week - 1, MIN_SESSIONS_PER_WEEK)


def _add_practice(path: LearningPath, now: datetime) -> None:
    path.support_resources.append(
        SupportResource(
            type="practice",
            title="Additional Practice Exercises",
            url="/practice/confidence-building",
            difficulty_level=2,
            estimated_duration=30,
            learning_objectives=["Build confidence through practice"],
            recommended_for=["low_confidence"],
        )
    )


ADAPTATION_RULES: list[AdaptationRule] = [
    AdaptationRule(
        name="low_performance",
        adjustment_type="difficulty",
        reason="Performance below expected threshold",
        expected_outcome="Improved understanding and scores",
        trigger=lambda p: p.avg_score < 70,
        apply=_lower_difficulty,
    ),
    AdaptationRule(
        name="slow_progress",
        adjustment_type="pacing",
        reason="Learning pace slower than optimal",
        expected_outcome="Better time management and efficiency",
        trigger=lambda p: p.avg_time_spent > p.expected_time * 1.5,
        apply=_slow_down,
    ),
    AdaptationRule(
        name="low_confidence",
        adjustment_type="resources",
        reason="Confidence level needs improvement",
        expected_outcome="Increased confidence and self-efficacy",
        trigger=lambda p: p.avg_confidence < 3,
        apply=_add_practice,
    ),
]


class PathEngine:
    def __init__(
        self,
        profiles: ProfileManager,
        tracker: ProgressTracker,
        analytics: LearningAnalyticsEngine,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._profiles = profiles
        self._tracker = tracker
        self._analytics = analytics
        self._clock = clock
        self._paths: dict[str, LearningPath] = {}

    def get_path(self, learner_id: str) -> LearningPath | None:
        return self._paths.get(learner_id)

    def generate_path(self, learner_id: str) -> LearningPath:
        """Build the learner's path, or return the one already built.

        Raises LearnerNotFoundError if the learner has no profile.
        """
        existing = self._paths.get(learner_id)
        if existing is not None:
            return existing

        profile = self._profiles.require_profile(learner_id)
        sequence = build_sequence(profile)
        path = LearningPath(
            learner_id=learner_id,
            path_id=f"path_{uuid.uuid4().hex[:12]}",
            recommended_sequence=sequence,
            pacing_recommendations=build_pacing(profile, self._clock()),
            support_resources=build_support_resources(profile),
            checkpoints=build_checkpoints(sequence),
        )
        self._paths[learner_id] = path
        logger.info("Generated learning path for %s: %s", learner_id, " -> ".join(sequence))
        return path

    def adapt(self, learner_id: str, performance: AreaPerformance) -> LearningPath | None:
        """Apply every adaptation rule whose trigger holds for ``performance``."""
        path = self._paths.get(learner_id)
        if path is None:
            return None

        for rule in ADAPTATION_RULES:
            if not rule.trigger(performance):
                continue
            now = self._clock()
            rule.apply(path, now)
            path.adaptive_adjustments.append(
                AdaptiveAdjustment(
                    adjustment_id=f"adj_{uuid.uuid4().hex[:12]}",
                    trigger_condition=rule.name,
                    adjustment_type=rule.adjustment_type,
                    adjustment_details={
                        "rule_id": rule.name,
                        "area": performance.area,
                        "adjustment_reason": rule.reason,
                        "expected_outcome": rule.expected_outcome,
                    },
                    applied_date=now,
                )
            )
            logger.info("Adaptive adjustment %s applied for %s (%s)", rule.name, learner_id, performance.area)
        return path

    def update_progress(self, learner_id: str, module: str, progress: int) -> bool:
        """Advance the cursor if ``module`` is the current one and is complete."""
        path = self._paths.get(learner_id)
        if path is None or path.current_module != module or progress != 100:
            return False
        path.current_position += 1
        logger.info("Learner %s finished %s, next: %s", learner_id, module, path.current_module)
        return True

    def next_module(self, learner_id: str) -> str | None:
        path = self._paths.get(learner_id)
        return path.current_module if path else None

    def recommendations(self, learner_id: str) -> list[LearningRecommendation]:
        analytics = self._analytics.analyze(learner_id)
        streak = self._tracker.study_streak(learner_id)
        recommendations: list[LearningRecommendation] = []

        if analytics.overall_progress < 50:
            recommendations.append(
                LearningRecommendation(
                    type="strategy",
                    priority="high",
                    title="Study Strategy Optimization",
                    description="Adjust study methods to improve learning efficiency",
                    rationale="Current progress rate suggests need for strategy adjustment",
                    action_items=[
                        "Try different learning techniques",
                        "Increase study session frequency",
                        "Seek additional support resources",
                    ],
                    expected_outcomes=["Improved comprehension", "Faster progress"],
                    timeline="2-3 weeks",
                )
            )

        for weakness in analytics.weaknesses:
            recommendations.append(
                LearningRecommendation(
                    type="content",
                    priority="medium",
                    title=f"Focus on {weakness}",
                    description=f"Additional study needed in {weakness} area",
                    rationale="Identified as area needing improvement",
                    action_items=[
                        f"Review {weakness} fundamentals",
                        "Complete additional practice",
                        "Seek specialized resources",
                    ],
                    expected_outcomes=["Improved understanding", "Better performance"],
                    timeline="1-2 weeks",
                )
            )

        if streak < 3:
            recommendations.append(
                LearningRecommendation(
                    type="schedule",
                    priority="high",
                    title="Consistency Improvement",
                    description="Establish more consistent study routine",
                    rationale="Regular study habits are crucial for retention",
                    action_items=["Set daily study reminders", "Create study schedule", "Track daily progress"],
                    expected_outcomes=["Better retention", "Steady progress"],
                    timeline="1 week",
                )
            )
        return recommendations
