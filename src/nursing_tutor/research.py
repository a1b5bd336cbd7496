"""Research evidence lookup.

Studies are filtered by evidence level (when given), then kept if any
space-separated word of the query occurs in the study's title or summary.
The first five matches are returned in catalog order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal

from nursing_tutor.data.research_studies import (
    AREA_SUMMARIES,
    CLINICAL_IMPLICATIONS,
    FUTURE_RESEARCH,
    KEY_FINDINGS,
    NURSING_CONSIDERATIONS,
    RECOMMENDATIONS,
    RESEARCH_STUDIES,
)
from nursing_tutor.models import Study

logger = logging.getLogger(__name__)

ResearchArea = Literal["clinical_trial", "genetics", "oncology"]
EvidenceLevel = Literal["systematic_review", "rct", "case_study"]

MAX_STUDIES = 5
NEXT_UPDATE_DELAY = timedelta(days=7)

FALLBACK_FINDINGS = ["연구 결과 분석 중", "추가 데이터 수집 필요"]
FALLBACK_IMPLICATIONS = ["실무 적용 방안 검토 필요", "추가 연구 진행 중"]
FALLBACK_CONSIDERATIONS = ["개별 환자 맞춤형 간호 계획 수립", "지속적인 모니터링 및 평가"]
FALLBACK_RECOMMENDATIONS = ["전문성 강화 프로그램 개발", "실무 가이드라인 마련"]
FALLBACK_FUTURE_RESEARCH = ["신기술 적용 연구", "환자 중심 간호 모델 개발"]


def _default_study(area: str) -> Study:
    return Study(
        title=f"{area} 분야 연구 동향",
        authors=["Research Team"],
        year=2024,
        journal="Nursing Research",
        evidence_level="systematic_review",
        summary=f"{area} 분야의 최신 연구 동향",
        key_findings=["새로운 치료법 개발", "간호 실무 개선"],
    )


def studies_for_area(area: str) -> list[Study]:
    raw = RESEARCH_STUDIES.get(area)
    if raw is None:
        return [_default_study(area)]
    return [Study.model_validate(s) for s in raw]


def find_studies(area: str, query: str, evidence_level: str | None = None) -> list[Study]:
    studies = studies_for_area(area)
    if evidence_level:
        studies = [s for s in studies if s.evidence_level == evidence_level]
    keywords = query.lower().split(" ")
    matched = [
        s
        for s in studies
        if any(k in f"{s.title} {s.summary}".lower() for k in keywords)
    ]
    return matched[:MAX_STUDIES]


@dataclass
class ResearchSummary:
    research_area: str
    query: str
    evidence_level: str
    summary: str
    key_findings: list[str]
    clinical_implications: list[str]
    nursing_considerations: list[str]
    recent_studies: list[Study]
    recommendations: list[str]
    future_research: list[str]


def build_research_summary(
    research_area: str, query: str, evidence_level: str | None = None
) -> ResearchSummary:
    studies = find_studies(research_area, query, evidence_level)
    logger.debug("%d studies matched %r in %s", len(studies), query, research_area)

    template = AREA_SUMMARIES.get(research_area)
    if template is None:
        summary = (
            f'{research_area} 분야의 "{query}" 관련 연구 결과를 종합하면, '
            "간호 실무의 지속적인 발전과 개선이 필요합니다."
        )
    else:
        summary = template.format(query=query)

    return ResearchSummary(
        research_area=research_area,
        query=query,
        evidence_level=evidence_level or "all",
        summary=summary,
        key_findings=KEY_FINDINGS.get(research_area, FALLBACK_FINDINGS),
        clinical_implications=CLINICAL_IMPLICATIONS.get(research_area, FALLBACK_IMPLICATIONS),
        nursing_considerations=NURSING_CONSIDERATIONS.get(research_area, FALLBACK_CONSIDERATIONS),
        recent_studies=studies,
        recommendations=RECOMMENDATIONS.get(research_area, FALLBACK_RECOMMENDATIONS),
        future_research=FUTURE_RESEARCH.get(research_area, FALLBACK_FUTURE_RESEARCH),
    )


def format_research_summary(research: ResearchSummary, generated_at: datetime | None = None) -> str:
    generated_at = generated_at or datetime.now()
    lines = [
        "# 🔬 연구 보조 결과",
        "",
        "## 📊 검색 정보",
        f"- **연구 영역**: {research.research_area}",
        f"- **검색 쿼리**: {research.query}",
        f"- **근거 수준**: {research.evidence_level}",
        "",
        "## 📝 연구 요약",
        research.summary,
        "",
        "## 🔍 주요 연구 결과",
    ]
    lines.extend(f"- {f}" for f in research.key_findings)
    lines.extend(["", "## 🏥 임상적 의미"])
    lines.extend(f"- {c}" for c in research.clinical_implications)
    lines.extend(["", "## 👩‍⚕️ 간호 고려사항"])
    lines.extend(f"- {c}" for c in research.nursing_considerations)
    lines.extend(["", "## 📚 관련 연구 문헌"])
    if not research.recent_studies:
        lines.append("검색어와 일치하는 연구 문헌이 없습니다.")
    for i, study in enumerate(research.recent_studies, start=1):
        lines.extend(
            [
                f"### {i}. {study.title}",
                f"- **저자**: {', '.join(study.authors)}",
                f"- **발행년도**: {study.year}",
                f"- **저널**: {study.journal}",
                f"- **근거 수준**: {study.evidence_level}",
                f"- **요약**: {study.summary}",
                "",
            ]
        )
    lines.extend(["", "## 💡 권장사항"])
    lines.extend(f"- {r}" for r in research.recommendations)
    lines.extend(["", "## 🔮 향후 연구 방향"])
    lines.extend(f"- {r}" for r in research.future_research)
    lines.extend(
        [
            "",
            "---",
            f"*검색 완료 시간: {generated_at:%Y-%m-%d %H:%M:%S}*",
            f"*다음 업데이트: {generated_at + NEXT_UPDATE_DELAY:%Y-%m-%d}*",
        ]
    )
    return "\n".join(lines)
