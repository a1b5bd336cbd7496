"""Research evidence tool."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel

from nursing_tutor.research import build_research_summary, format_research_summary

logger = logging.getLogger(__name__)


class ResearchArgs(BaseModel):
    research_area: Literal["clinical_trial", "genetics", "oncology"]
    query: str
    evidence_level: Literal["systematic_review", "rct", "case_study"] | None = None


async def research_assistant(research_area: str, query: str, evidence_level: str | None = None) -> str:
    """Summarize nursing research evidence for a question.

    Args:
        research_area: "clinical_trial", "genetics" or "oncology".
        query: Research question or keywords, e.g. "CAR-T 간호".
        evidence_level: Optional filter: "systematic_review", "rct" or "case_study".

    Returns:
        A research summary with key findings, implications and matching studies.
    """
    logger.info("Research lookup in %s: %r (evidence=%s)", research_area, query, evidence_level or "all")
    return format_research_summary(build_research_summary(research_area, query, evidence_level))
