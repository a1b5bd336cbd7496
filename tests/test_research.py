"""Tests for the research evidence lookup."""

from __future__ import annotations

from datetime import datetime

from nursing_tutor.research import (
    FALLBACK_FINDINGS,
    MAX_STUDIES,
    build_research_summary,
    find_studies,
    format_research_summary,
)


def test_any_query_word_matches() -> None:
    """A study matches when any query word is in its title or summary."""
    studies = find_studies("oncology", "CAR-T 존재하지않는단어")
    assert [s.title for s in studies] == ["CAR-T Cell Therapy: Nursing Care Considerations"]


def test_match_is_case_insensitive() -> None:
    """Lowercase queries match mixed-case titles."""
    assert find_studies("genetics", "crispr")[0].title.startswith("CRISPR-Cas9")


def test_evidence_level_filter() -> None:
    """Only studies at the requested evidence level are kept."""
    studies = find_studies("clinical_trial", "nursing", evidence_level="rct")
    assert studies
    assert all(s.evidence_level == "rct" for s in studies)


def test_at_most_five_studies() -> None:
    """An empty query word matches everything but the list is capped."""
    assert len(find_studies("oncology", "")) <= MAX_STUDIES


def test_unknown_area_uses_placeholders() -> None:
    """An area without a catalog gets a synthetic study and generic findings."""
    summary = build_research_summary("pediatrics", "pediatrics")
    assert summary.key_findings == FALLBACK_FINDINGS
    assert summary.recent_studies[0].title == "pediatrics 분야 연구 동향"
    assert summary.evidence_level == "all"


def test_format_with_no_matches() -> None:
    """No matching studies is said explicitly, and the footer dates are set."""
    summary = build_research_summary("oncology", "존재하지않는단어")
    text = format_research_summary(summary, generated_at=datetime(2024, 1, 1, 12, 0))
    assert "검색어와 일치하는 연구 문헌이 없습니다." in text
    assert "*다음 업데이트: 2024-01-08*" in text
    assert "존재하지않는단어" in text
