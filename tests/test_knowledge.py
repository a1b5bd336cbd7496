"""Tests for the knowledge topic store and the get_nursing_knowledge tool."""

from __future__ import annotations

import pytest

from nursing_tutor.knowledge import KnowledgeStore, get_knowledge_store
from nursing_tutor.tools.knowledge import get_nursing_knowledge, strip_keyword

# --- KnowledgeStore ---


def test_known_topic_at_each_level() -> None:
    """Catalog topics are found regardless of level."""
    store = get_knowledge_store()
    for level in ("basic", "intermediate", "advanced"):
        assert store.has_entry("종양간호", level)
    assert store.search("종양간호", "basic").title == "종양간호학 기초"


def test_unknown_topic_is_synthesized() -> None:
    """A missing topic gets generic content naming the topic."""
    content = get_knowledge_store().search("욕창", "basic")
    assert content.title == "욕창 (basic)"
    assert "욕창" in content.basic_definition


def test_topic_lookup_is_lowercased() -> None:
    """Keys are built from the lowercased topic."""
    store = KnowledgeStore({"copd_basic": {"title": "COPD"}})
    assert store.search("COPD", "basic").title == "COPD"


def test_specialty_adds_focus_fields() -> None:
    """A known specialty augments the content."""
    content = get_knowledge_store().search("종양간호", "basic", "oncology")
    assert content.specialty_focus
    assert "화학요법 관련 실무 적용" in content.specialized_applications


def test_unknown_specialty_leaves_content_untouched() -> None:
    """An unrecognized specialty adds no specialty fields."""
    store = get_knowledge_store()
    assert store.search("종양간호", "basic", "astrology") == store.search("종양간호", "basic")


# --- routing helpers ---


def test_strip_keyword_case_insensitive() -> None:
    """The routing keyword is removed wherever it appears."""
    assert strip_keyword("Morphine DRUG", "drug") == "Morphine"
    assert strip_keyword("모르핀 약물", "약물") == "모르핀"


# --- get_nursing_knowledge ---


@pytest.mark.asyncio
async def test_basic_level_sections() -> None:
    """Basic content shows the definition, key points, learning points and links."""
    result = await get_nursing_knowledge("종양간호", "basic")
    assert result.startswith("# 종양간호학 기초")
    assert "## 🎯 기본 개념" in result
    assert "## 💡 핵심 포인트" in result
    assert "## 📝 학습 포인트" in result
    assert "- [[약리학]]" in result
    assert "## 🧬 고급 개념" not in result


@pytest.mark.asyncio
async def test_advanced_level_sections() -> None:
    """Advanced content shows concepts, research and evidence."""
    result = await get_nursing_knowledge("종양간호", "advanced")
    assert "## 🧬 고급 개념" in result
    assert "## 🔬 최신 연구" in result
    assert "## 📊 임상 증거" in result
    assert "## 🎯 기본 개념" not in result


@pytest.mark.asyncio
async def test_specialty_section_rendered() -> None:
    """A known specialty adds the specialty section to the answer."""
    result = await get_nursing_knowledge("종양간호", "intermediate", "oncology")
    assert "## 🏥 전문 분야" in result


@pytest.mark.asyncio
async def test_medication_route() -> None:
    """A topic mentioning 약물 searches the medication registry."""
    result = await get_nursing_knowledge("모르핀 약물")
    assert result.startswith("# 💊 약물 정보 검색 결과")
    assert "## 모르핀 (Morphine)" in result
    assert "### 환자 교육" in result


@pytest.mark.asyncio
async def test_lab_route_shows_gendered_ranges() -> None:
    """Labs without a general range list the male and female ranges."""
    result = await get_nursing_knowledge("헤모글로빈 검사")
    assert result.startswith("# 🔬 검사 수치 정보")
    assert "- 남성: 13.5-17.5 g/dL" in result
    assert "- 여성: 12.0-16.0 g/dL" in result
    assert "**공복 필요**: 아니오" in result


@pytest.mark.asyncio
async def test_diagnosis_route_is_case_insensitive() -> None:
    """'NANDA' routes to the diagnosis registry like 'nanda'."""
    result = await get_nursing_knowledge("Acute Pain NANDA")
    assert result.startswith("# 🏥 NANDA 간호진단")
    assert "## [00132] 급성 통증" in result
    assert "### 특성" in result


@pytest.mark.asyncio
async def test_risk_diagnosis_shows_risk_factors() -> None:
    """Risk-type diagnoses render risk factors instead of characteristics."""
    result = await get_nursing_knowledge("감염 위험성 간호진단")
    assert "### 위험 요인" in result
    assert "### 특성" not in result


@pytest.mark.asyncio
async def test_protocol_steps_in_order() -> None:
    """Procedure steps render numbered and in order."""
    result = await get_nursing_knowledge("심폐소생술 프로토콜")
    assert result.startswith("# 📋 임상 프로토콜")
    first = result.index("**1단계**")
    second = result.index("**2단계**")
    assert first < second
    assert "*근거*" in result


@pytest.mark.asyncio
async def test_registry_miss_message() -> None:
    """A registry route with no hits says so."""
    result = await get_nursing_knowledge("존재하지않는약 약물")
    assert result == '❌ "존재하지않는약 약물"에 대한 약물 정보를 찾을 수 없습니다.'


@pytest.mark.asyncio
async def test_unknown_topic_never_empty() -> None:
    """Topics outside every catalog still get an answer."""
    result = await get_nursing_knowledge("욕창 예방", "intermediate")
    assert "## 📚 상세 설명" in result
    assert "욕창 예방" in result
