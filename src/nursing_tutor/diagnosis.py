"""Keyword-based NANDA diagnosis suggestion.

Scoring is purely literal: a symptom scores against a diagnosis when the
symptom text appears inside one of the diagnosis' catalog phrases.

- +2 for every defining characteristic containing the symptom
- +1 for every related factor containing the symptom
- +1 for every risk factor containing the symptom

The three categories are checked independently, so one symptom can score
in all of them. Both sides are lowercased before comparison.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from nursing_tutor.models import NursingDiagnosis

DEFINING_CHARACTERISTIC_WEIGHT = 2
RELATED_FACTOR_WEIGHT = 1
RISK_FACTOR_WEIGHT = 1

MAX_SUGGESTIONS = 5


def _count_matches(symptom: str, phrases: Iterable[str]) -> int:
    return sum(1 for phrase in phrases if symptom in phrase.lower())


def score_diagnosis(diagnosis: NursingDiagnosis, symptoms: Sequence[str]) -> int:
    """Total keyword score of one diagnosis against all symptoms."""
    score = 0
    for raw in symptoms:
        symptom = raw.lower()
        score += DEFINING_CHARACTERISTIC_WEIGHT * _count_matches(
            symptom, diagnosis.defining_characteristics
        )
        score += RELATED_FACTOR_WEIGHT * _count_matches(symptom, diagnosis.related_factors)
        score += RISK_FACTOR_WEIGHT * _count_matches(symptom, diagnosis.risk_factors or [])
    return score


def suggest_diagnoses(
    diagnoses: Iterable[NursingDiagnosis],
    symptoms: Sequence[str],
    limit: int = MAX_SUGGESTIONS,
) -> list[NursingDiagnosis]:
    """Rank diagnoses by keyword score, highest first.

    Zero-score diagnoses are dropped. Ties keep catalog order (the sort is
    stable). At most ``limit`` diagnoses are returned.
    """
    scored = [(score_diagnosis(d, symptoms), d) for d in diagnoses]
    ranked = sorted((pair for pair in scored if pair[0] > 0), key=lambda pair: -pair[0])
    return [diagnosis for _, diagnosis in ranked[:limit]]
