"""Pydantic models for the reference catalogs.

Catalog records are immutable once loaded: every model is frozen, so a
record handed out by a registry can be shared between tool calls without
anyone mutating it underneath another caller.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Medications
# ---------------------------------------------------------------------------


class Dosage(CatalogModel):
    adult: str
    pediatric: str | None = None
    geriatric: str | None = None


class SideEffects(CatalogModel):
    common: list[str] = Field(default_factory=list)
    serious: list[str] = Field(default_factory=list)


class Medication(CatalogModel):
    id: str
    name: str
    name_korean: str
    generic_name: str
    category: str
    category_korean: str
    indications: list[str]
    contraindications: list[str]
    dosage: Dosage
    route: list[str]
    side_effects: SideEffects
    nursing_considerations: list[str]
    patient_education: list[str]
    interactions: list[str]
    monitoring_parameters: list[str]


# ---------------------------------------------------------------------------
# Lab values
# ---------------------------------------------------------------------------


class AdultRange(CatalogModel):
    male: str | None = None
    female: str | None = None
    general: str | None = None


class NormalRange(CatalogModel):
    adult: AdultRange
    pediatric: str | None = None
    geriatric: str | None = None


class CriticalValues(CatalogModel):
    low: str | None = None
    high: str | None = None


class ClinicalSignificance(CatalogModel):
    increased: list[str]
    decreased: list[str]


class LabValue(CatalogModel):
    id: str
    name: str
    name_korean: str
    category: str
    normal_range: NormalRange
    unit: str
    critical_values: CriticalValues
    clinical_significance: ClinicalSignificance
    nursing_considerations: list[str]
    specimen: str
    fasting_required: bool


# ---------------------------------------------------------------------------
# NANDA nursing diagnoses
# ---------------------------------------------------------------------------


class NursingInterventions(CatalogModel):
    priority: list[str]
    suggested: list[str]


class NursingDiagnosis(CatalogModel):
    code: str
    label: str
    label_korean: str
    domain: str
    domain_korean: str
    class_name: str
    class_korean: str
    definition: str
    defining_characteristics: list[str] = Field(default_factory=list)
    related_factors: list[str] = Field(default_factory=list)
    risk_factors: list[str] | None = None
    associated_conditions: list[str] | None = None
    nursing_interventions: NursingInterventions
    expected_outcomes: list[str]
    evaluation_criteria: list[str]

    @property
    def id(self) -> str:
        return self.code

    @property
    def is_risk_type(self) -> bool:
        return bool(self.risk_factors)

    @model_validator(mode="after")
    def _check_characteristic_split(self) -> NursingDiagnosis:
        # Risk diagnoses describe risk factors only; actual diagnoses never do.
        if self.risk_factors and (self.defining_characteristics or self.related_factors):
            raise ValueError(
                f"Diagnosis {self.code} mixes risk factors with defining "
                "characteristics/related factors"
            )
        return self


# ---------------------------------------------------------------------------
# Clinical protocols
# ---------------------------------------------------------------------------


class ProcedureStep(CatalogModel):
    step: int
    action: str
    rationale: str


class ClinicalProtocol(CatalogModel):
    id: str
    name: str
    name_korean: str
    category: str
    category_korean: str
    purpose: str
    indications: list[str]
    contraindications: list[str]
    equipment: list[str]
    procedure: list[ProcedureStep]
    complications: list[str]
    nursing_considerations: list[str]
    documentation: list[str]
    references: list[str]

    @model_validator(mode="after")
    def _check_step_numbering(self) -> ClinicalProtocol:
        numbers = [s.step for s in self.procedure]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"Protocol {self.id} steps must be numbered 1..N, got {numbers}")
        return self


# ---------------------------------------------------------------------------
# Clinical cases
# ---------------------------------------------------------------------------


class CasePatient(CatalogModel):
    age: int
    gender: Literal["male", "female"]
    diagnosis: str
    medical_history: list[str]
    current_medications: list[str]


class VitalSigns(CatalogModel):
    bp: str
    hr: int
    rr: int
    temp: float
    spo2: int
    pain: int


class LabResult(CatalogModel):
    value: str | float
    unit: str
    interpretation: str


class ClinicalCase(CatalogModel):
    id: str
    title: str
    title_korean: str
    category: str
    patient: CasePatient
    presenting_symptoms: list[str]
    vital_signs: VitalSigns
    lab_results: dict[str, LabResult]
    clinical_scenario: str
    nursing_assessment: list[str]
    nursing_diagnoses: list[str]
    expected_interventions: list[str]
    critical_thinking: list[str]


# ---------------------------------------------------------------------------
# Knowledge topics and research literature
# ---------------------------------------------------------------------------


class KnowledgeContent(CatalogModel):
    """Explanatory content for one topic at one level.

    Fields not used at the requested level may still be filled in (the
    synthesized fallback fills every field), they are just not rendered.
    """

    title: str
    basic_definition: str | None = None
    key_points: list[str] = Field(default_factory=list)
    detailed_explanation: str | None = None
    clinical_applications: list[str] = Field(default_factory=list)
    advanced_concepts: str | None = None
    recent_research: str | None = None
    clinical_evidence: str | None = None
    learning_objectives: list[str] = Field(default_factory=list)
    related_concepts: list[str] = Field(default_factory=list)
    specialty_focus: str | None = None
    specialized_applications: list[str] = Field(default_factory=list)
    specialty_considerations: str | None = None


class Study(CatalogModel):
    title: str
    authors: list[str]
    year: int
    journal: str
    evidence_level: str
    summary: str
    key_findings: list[str]
