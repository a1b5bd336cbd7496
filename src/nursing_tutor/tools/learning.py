"""Learner progress tools.

These let the tutor agent log study sessions and report a learner's
progress. Learners are registered on their first session.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from nursing_tutor.learning import LearnerNotFoundError, get_learning_service
from nursing_tutor.learning.progress import format_progress_report

logger = logging.getLogger(__name__)


class StartSessionArgs(BaseModel):
    learner_id: str
    module_name: str = Field(description="e.g. fundamentals, adult_nursing, oncology")
    topic: str = Field(description="Topic within the module, e.g. '화학요법'")


class CompleteSessionArgs(BaseModel):
    learner_id: str
    module_name: str
    topic: str
    score: float | None = Field(default=None, ge=0, le=100)
    difficulty_rating: int = Field(default=3, ge=1, le=5)
    confidence_level: int = Field(default=3, ge=1, le=5)
    notes: str | None = None


class LearningProgressArgs(BaseModel):
    learner_id: str


async def start_study_session(learner_id: str, module_name: str, topic: str) -> str:
    """Start a study session for a learner on a module topic.

    Args:
        learner_id: The learner's ID. Unknown learners are registered.
        module_name: fundamentals, adult_nursing, oncology, gene_therapy or clinical_trial.
        topic: The topic being studied.

    Returns:
        Confirmation with the learner's current module on their learning path.
    """
    logger.info("Starting session for %s: %s/%s", learner_id, module_name, topic)
    service = get_learning_service()
    record = service.start_session(learner_id, module_name, topic)
    path = service.paths.get_path(learner_id)

    lines = [
        "📖 학습 세션을 시작했습니다.",
        f"- 학습자: {learner_id}",
        f"- 모듈: {module_name}",
        f"- 주제: {topic}",
        f"- 시작 시간: {record.start_time:%Y-%m-%d %H:%M}",
    ]
    if path is not None:
        lines.append(f"- 학습 경로: {' → '.join(path.recommended_sequence)}")
        lines.append(f"- 현재 모듈: {path.current_module or '모든 모듈 완료'}")
    return "\n".join(lines)


async def complete_study_session(
    learner_id: str,
    module_name: str,
    topic: str,
    score: float | None = None,
    difficulty_rating: int = 3,
    confidence_level: int = 3,
    notes: str | None = None,
) -> str:
    """Finish the learner's open study session and record how it went.

    Args:
        learner_id: The learner's ID.
        module_name: Module of the session being finished.
        topic: Topic of the session being finished.
        score: Optional quiz score (0-100).
        difficulty_rating: How hard it felt, 1-5.
        confidence_level: How confident the learner feels, 1-5.
        notes: Optional free-text notes.

    Returns:
        Session result with module progress and any learning path changes.
    """
    logger.info("Completing session for %s: %s/%s", learner_id, module_name, topic)
    outcome = get_learning_service().complete_session(
        learner_id,
        module_name,
        topic,
        score=score,
        difficulty_rating=difficulty_rating,
        confidence_level=confidence_level,
        notes=notes,
    )
    if outcome is None:
        return f'❌ "{module_name}/{topic}"에 대해 진행 중인 학습 세션이 없습니다. 먼저 세션을 시작하세요.'

    record = outcome.record
    lines = [
        "✅ 학습 세션을 완료했습니다.",
        f"- 주제: {module_name}/{topic}",
        f"- 학습 시간: {record.time_spent}분",
    ]
    if record.score is not None:
        lines.append(f"- 점수: {record.score:g}")
    if outcome.module_progress is not None:
        lines.append(f"- 모듈 진도: {outcome.module_progress.current_progress}%")
        lines.append(f"- 숙련도: {outcome.module_progress.mastery_level}")
    if outcome.path_advanced:
        lines.append(f"- 🎉 {module_name} 모듈 완료! 다음 모듈: {outcome.next_module or '모든 모듈 완료'}")
    if outcome.adjustments:
        lines.append("")
        lines.append("**학습 경로 조정**:")
        lines += [f"- {a.adjustment_details['adjustment_reason']}" for a in outcome.adjustments]
    return "\n".join(lines)


async def get_learning_progress(learner_id: str) -> str:
    """Report a learner's progress, strengths, weaknesses and recommendations.

    Args:
        learner_id: The learner's ID.

    Returns:
        A progress report with analytics and next steps.
    """
    logger.info("Progress report for %s", learner_id)
    service = get_learning_service()
    try:
        service.profiles.require_profile(learner_id)
    except LearnerNotFoundError:
        return f'❌ 학습자 "{learner_id}"를 찾을 수 없습니다. 먼저 학습 세션을 시작하세요.'

    summary = service.tracker.progress_summary(learner_id)
    analytics = service.analytics.analyze(learner_id)

    lines = [format_progress_report(learner_id, summary), "## 💪 강점"]
    lines += [f"- {s}" for s in analytics.strengths]
    lines += ["", "## 🔧 보완할 점"]
    lines += [f"- {w}" for w in analytics.weaknesses]
    lines += ["", "## 💡 추천"]
    lines += [f"- {r}" for r in analytics.recommendations]
    lines += ["", "## ➡️ 다음 단계"]
    lines += [f"- {step}" for step in analytics.next_steps]
    next_module = service.paths.next_module(learner_id)
    if next_module:
        lines += ["", f"**다음 학습 모듈**: {next_module}"]
    return "\n".join(lines)
