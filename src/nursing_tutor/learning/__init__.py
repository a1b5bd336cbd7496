"""Learner progress subsystem.

- profiles.py:    learner profiles, learning style assessment, recommendations
- progress.py:    study sessions, module progress, daily activity, milestones
- analytics.py:   strengths/weaknesses and next steps from session history
- path_engine.py: personalized module sequence with adaptive adjustments

``LearningService`` wires the four together over one shared tracker. All
state is in process memory; ``get_learning_service()`` returns the
process-wide instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from nursing_tutor.learning.analytics import LearningAnalyticsEngine
from nursing_tutor.learning.models import AdaptiveAdjustment, LearnerProfile, ModuleProgress, ProgressRecord
from nursing_tutor.learning.path_engine import PathEngine
from nursing_tutor.learning.profiles import LearnerNotFoundError, ProfileManager
from nursing_tutor.learning.progress import ProgressTracker

logger = logging.getLogger(__name__)

__all__ = ["LearnerNotFoundError", "LearningService", "SessionOutcome", "get_learning_service"]


@dataclass
class SessionOutcome:
    record: ProgressRecord
    module_progress: ModuleProgress | None
    path_advanced: bool = False
    next_module: str | None = None
    adjustments: list[AdaptiveAdjustment] = field(default_factory=list)


class LearningService:
    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self.profiles = ProfileManager()
        self.tracker = ProgressTracker(clock=clock)
        self.analytics = LearningAnalyticsEngine(self.tracker)
        self.paths = PathEngine(self.profiles, self.tracker, self.analytics, clock=clock)

    def ensure_profile(self, learner_id: str, name: str = "") -> LearnerProfile:
        profile = self.profiles.get_profile(learner_id)
        if profile is None:
            profile = self.profiles.create_profile({"personal_info": {"id": learner_id, "name": name}})
        return profile

    def start_session(self, learner_id: str, module_name: str, topic: str) -> ProgressRecord:
        """Open a session, registering the learner and their path on first use."""
        profile = self.ensure_profile(learner_id)
        self.paths.generate_path(learner_id)
        record = self.tracker.start_session(learner_id, module_name, topic)
        _add_once(profile.current_status.active_modules, module_name)
        return record

    def complete_session(self, learner_id: str, module_name: str, topic: str, **data) -> SessionOutcome | None:
        """Close a session and propagate it to the profile and learning path.

        Returns None when there was no open session for (module, topic).
        """
        record = self.tracker.complete_session(learner_id, module_name, topic, **data)
        if record is None:
            return None

        progress = self.tracker.module_progress(learner_id, module_name)
        profile = self.profiles.get_profile(learner_id)
        if profile is not None and progress is not None and progress.current_progress == 100:
            status = profile.current_status
            if module_name in status.active_modules:
                status.active_modules.remove(module_name)
            _add_once(status.completed_modules, module_name)
        if profile is not None:
            profile.current_status.overall_progress = self.tracker.overall_progress(learner_id)

        advanced = self.paths.update_progress(
            learner_id, module_name, progress.current_progress if progress else 0
        )

        adjustments: list[AdaptiveAdjustment] = []
        performance = self.analytics.area_performance(learner_id).get(module_name)
        path = self.paths.get_path(learner_id)
        if performance is not None and path is not None:
            before = len(path.adaptive_adjustments)
            self.paths.adapt(learner_id, performance)
            adjustments = path.adaptive_adjustments[before:]

        return SessionOutcome(
            record=record,
            module_progress=progress,
            path_advanced=advanced,
            next_module=self.paths.next_module(learner_id),
            adjustments=adjustments,
        )


def _add_once(items: list[str], value: str) -> None:
    if value not in items:
        items.append(value)


_service: LearningService | None = None


def get_learning_service() -> LearningService:
    """Return the shared LearningService, creating it on first use."""
    global _service  # noqa: PLW0603
    if _service is None:
        _service = LearningService()
    return _service
