"""Clinical case analysis tool."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from nursing_tutor.case_analysis import PatientInfo, analyze_case, format_case_analysis

logger = logging.getLogger(__name__)


class ClinicalCaseArgs(BaseModel):
    patient_info: PatientInfo
    symptoms: list[str] = Field(description="Presenting symptoms, e.g. ['통증', '오심']")
    context: Literal["oncology", "general", "clinical_trial"] = "general"


async def analyze_clinical_case(
    patient_info: PatientInfo | dict[str, Any],
    symptoms: list[str],
    context: str = "general",
) -> str:
    """Analyze a clinical case and suggest nursing diagnoses, priorities and interventions.

    Combines NANDA diagnosis suggestions for the symptoms with related
    medications, lab values to check, monitoring, patient education,
    expected outcomes and risk factors.

    Args:
        patient_info: age, gender ("male"/"female"), diagnosis, and optionally
            stage, treatment_protocol, genetic_markers.
        symptoms: Symptom list, e.g. ["통증", "오심", "피로"].
        context: "oncology", "general" or "clinical_trial".

    Returns:
        A markdown case analysis.
    """
    if isinstance(patient_info, dict):
        patient_info = PatientInfo.model_validate(patient_info)
    logger.info("Analyzing case: %s, %d symptom(s), context=%s", patient_info.diagnosis, len(symptoms), context)
    return format_case_analysis(analyze_case(patient_info, symptoms, context))
