"""Nursing care plan tool."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from nursing_tutor.care_plan import compose_care_plan, format_care_plan

logger = logging.getLogger(__name__)


class CarePlanArgs(BaseModel):
    nursing_diagnosis: list[str] = Field(description="Nursing diagnosis labels, e.g. ['급성 통증']")
    patient_goals: list[str] | None = None
    interventions_needed: list[str] | None = None


async def generate_care_plan(
    nursing_diagnosis: list[str],
    patient_goals: list[str] | None = None,
    interventions_needed: list[str] | None = None,
) -> str:
    """Write a nursing care plan for one or more nursing diagnoses.

    Args:
        nursing_diagnosis: Labels such as "급성 통증", "감염 위험성", "피로".
        patient_goals: Optional goals; replaces the standard goals when given.
        interventions_needed: Optional interventions; replaces the standard ones when given.

    Returns:
        A care plan with analysis, goals, interventions, rationale,
        evaluation criteria, timeframe and priority order.
    """
    logger.info("Generating care plan for %s", nursing_diagnosis)
    plan = compose_care_plan(nursing_diagnosis, patient_goals, interventions_needed)
    return format_care_plan(plan)
