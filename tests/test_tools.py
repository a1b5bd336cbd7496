"""Tests for the tool functions and the tool table.

Tools run against the bundled reference data. Filesystem and learner
state are isolated per test: the vault path is patched to tmp_path and
the learning tools get a fresh LearningService.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from nursing_tutor.config import NOTES_FALLBACK_DIR, OBSIDIAN_VAULT_PATH
from nursing_tutor.learning import LearningService
from nursing_tutor.notes import FALLBACK_WARNING, SavedNote, compose_note, save_note
from nursing_tutor.tools import TOOLS, UnknownToolError, call_tool, get_tool
from nursing_tutor.tools.care_plan import generate_care_plan
from nursing_tutor.tools.clinical_case import analyze_clinical_case
from nursing_tutor.tools.learning import complete_study_session, get_learning_progress, start_study_session
from nursing_tutor.tools.obsidian import format_saved_note, obsidian_integration
from nursing_tutor.tools.research import research_assistant


@pytest.fixture
def service() -> Iterator[LearningService]:
    fresh = LearningService()
    with patch("nursing_tutor.tools.learning.get_learning_service", return_value=fresh):
        yield fresh


# --- analyze_clinical_case ---


@pytest.mark.asyncio
async def test_analyze_clinical_case_accepts_dict() -> None:
    """Plain dict patient info is validated into PatientInfo."""
    result = await analyze_clinical_case(
        {"age": 58, "gender": "female", "diagnosis": "유방암", "stage": "II"},
        ["통증", "피로"],
        "oncology",
    )
    assert result.startswith("# 📋 임상 사례 분석")
    assert "58세" in result
    assert "## 💊 관련 약물" in result
    assert "모르핀" in result


@pytest.mark.asyncio
async def test_analyze_clinical_case_rejects_bad_gender() -> None:
    """Patient info outside the allowed genders is rejected."""
    with pytest.raises(ValidationError):
        await analyze_clinical_case({"age": 40, "gender": "unknown", "diagnosis": "폐렴"}, [])


# --- generate_care_plan ---


@pytest.mark.asyncio
async def test_generate_care_plan() -> None:
    """Care plans rank diagnoses by priority."""
    result = await generate_care_plan(["급성 통증", "피로"])
    assert result.startswith("# 📋 간호계획서")
    assert "1. 급성 통증 (high)" in result
    assert "2. 피로 (medium)" in result


@pytest.mark.asyncio
async def test_generate_care_plan_with_learner_goals() -> None:
    """Learner-supplied goals replace the standard ones."""
    result = await generate_care_plan(["피로"], patient_goals=["하루 30분 걷기"])
    assert "1. 하루 30분 걷기" in result
    assert "일상 활동 수행 능력 향상" not in result


# --- research_assistant ---


@pytest.mark.asyncio
async def test_research_assistant() -> None:
    """Matching studies are listed by title."""
    result = await research_assistant("oncology", "CAR-T")
    assert result.startswith("# 🔬 연구 보조 결과")
    assert "CAR-T Cell Therapy: Nursing Care Considerations" in result


@pytest.mark.asyncio
async def test_research_assistant_without_matches() -> None:
    """A query with no matching studies says so."""
    result = await research_assistant("genetics", "존재하지않는단어", "rct")
    assert "검색어와 일치하는 연구 문헌이 없습니다." in result


# --- obsidian_integration ---


@pytest.mark.asyncio
async def test_obsidian_writes_into_vault(tmp_path: Path) -> None:
    """Notes land in the vault with merged tags in the reply."""
    vault = tmp_path / "vault"
    with patch("nursing_tutor.tools.obsidian.OBSIDIAN_VAULT_PATH", vault):
        result = await obsidian_integration("concept", "항암화학요법의 골수억제", ["oncology"])

    [written] = list(vault.iterdir())
    assert "항암화학요법의 골수억제" in written.read_text(encoding="utf-8")
    assert f"**파일명**: {written.name}" in result
    assert "**연결된 태그**: #oncology #nursing #concept" in result
    assert "옵시디언 볼트에 저장되었습니다" in result
    assert "⚠️" not in result


@pytest.mark.asyncio
async def test_obsidian_reports_fallback(tmp_path: Path) -> None:
    """A fallback save is reported with the warning and the fallback path."""
    note = compose_note("daily", "오늘의 학습")
    saved = SavedNote(note=note, path=tmp_path / note.filename, used_fallback=True, warning=FALLBACK_WARNING)
    with patch("nursing_tutor.tools.obsidian.save_note", return_value=saved) as mock_save:
        result = await obsidian_integration("daily", "오늘의 학습")

    mock_save.assert_called_once()
    assert f"⚠️ **주의**: {FALLBACK_WARNING}" in result
    assert str(tmp_path / note.filename) in result
    assert "옵시디언 볼트로 복사하세요" in result


@pytest.mark.asyncio
async def test_obsidian_saves_in_worker_thread(tmp_path: Path) -> None:
    """The note is written through asyncio.to_thread, not on the event loop."""
    note = compose_note("concept", "X")
    saved = SavedNote(note=note, path=tmp_path / note.filename)
    to_thread = AsyncMock(return_value=saved)
    with patch("nursing_tutor.tools.obsidian.asyncio.to_thread", new=to_thread):
        await obsidian_integration("concept", "X")

    fn, written, vault, fallback = to_thread.await_args.args
    assert fn is save_note
    assert written.note_type == "concept"
    assert (vault, fallback) == (OBSIDIAN_VAULT_PATH, NOTES_FALLBACK_DIR)


def test_format_saved_note_shows_preview() -> None:
    """The reply shows the preview and the fixed tags."""
    note = compose_note("case_study", "65세 폐암 환자")
    result = format_saved_note(SavedNote(note=note, path=Path("/vault") / note.filename))
    assert note.preview in result
    assert "#nursing #case_study" in result


# --- learning tools ---


@pytest.mark.asyncio
async def test_study_session_flow(service: LearningService) -> None:
    """Start, complete and report on a session for a new learner."""
    started = await start_study_session("kim", "oncology", "화학요법")
    assert started.startswith("📖 학습 세션을 시작했습니다.")
    assert "- 학습 경로: fundamentals → adult_nursing → oncology" in started
    assert "- 현재 모듈: fundamentals" in started

    completed = await complete_study_session("kim", "oncology", "화학요법", score=92, confidence_level=4)
    assert completed.startswith("✅ 학습 세션을 완료했습니다.")
    assert "- 점수: 92" in completed
    assert "- 모듈 진도: 10%" in completed

    report = await get_learning_progress("kim")
    assert report.startswith("# 📊 학습 진도 보고서: kim")
    assert "## 💪 강점" in report
    assert "oncology 영역에서 우수한 성과" in report
    assert "**다음 학습 모듈**: fundamentals" in report


@pytest.mark.asyncio
async def test_complete_without_start(service: LearningService) -> None:
    """Completing a session that was never started is reported."""
    result = await complete_study_session("kim", "oncology", "화학요법")
    assert result.startswith('❌ "oncology/화학요법"에 대해 진행 중인 학습 세션이 없습니다.')


@pytest.mark.asyncio
async def test_low_score_reports_path_adjustment(service: LearningService) -> None:
    """A low score shows the learning path adjustment."""
    await start_study_session("kim", "fundamentals", "간호과정")
    result = await complete_study_session("kim", "fundamentals", "간호과정", score=40)
    assert "**학습 경로 조정**:" in result
    assert "- Performance below expected threshold" in result


@pytest.mark.asyncio
async def test_progress_for_unknown_learner(service: LearningService) -> None:
    """Asking for an unknown learner's progress is reported."""
    result = await get_learning_progress("ghost")
    assert result.startswith('❌ 학습자 "ghost"를 찾을 수 없습니다.')


# --- tool table ---


def test_tool_table() -> None:
    """The tool table lists every tool under its function name."""
    assert set(TOOLS) == {
        "get_nursing_knowledge",
        "analyze_clinical_case",
        "generate_care_plan",
        "obsidian_integration",
        "research_assistant",
        "start_study_session",
        "complete_study_session",
        "get_learning_progress",
    }
    for name, spec in TOOLS.items():
        assert spec.fn.__name__ == name
        assert spec.fn.__doc__


def test_get_tool_unknown() -> None:
    """Unknown names raise UnknownToolError with the detail text."""
    with pytest.raises(UnknownToolError) as excinfo:
        get_tool("delete_everything")
    assert excinfo.value.detail == "Unknown tool: delete_everything"


@pytest.mark.asyncio
async def test_call_tool_validates_arguments() -> None:
    """Arguments are checked against the tool's model before it runs."""
    with pytest.raises(ValidationError):
        await call_tool("research_assistant", {"research_area": "astrology", "query": "x"})


@pytest.mark.asyncio
async def test_call_tool_unknown_before_validation() -> None:
    """The tool name is checked before the arguments."""
    with pytest.raises(UnknownToolError):
        await call_tool("nope", {"bad": "args"})


@pytest.mark.asyncio
async def test_call_tool_passes_nested_models() -> None:
    """Nested argument models reach the tool as models, not dicts."""
    received: dict[str, Any] = {}

    async def capture(**kwargs: Any) -> str:
        received.update(kwargs)
        return "ok"

    spec = TOOLS["analyze_clinical_case"]
    with patch.dict(TOOLS, {"analyze_clinical_case": spec._replace(fn=capture)}):
        result = await call_tool(
            "analyze_clinical_case",
            {"patient_info": {"age": 70, "gender": "male", "diagnosis": "폐암"}, "symptoms": ["기침"]},
        )

    assert result == "ok"
    assert received["patient_info"].age == 70
    assert received["context"] == "general"


@pytest.mark.asyncio
async def test_call_tool_runs_care_plan() -> None:
    """call_tool validates and runs a real tool."""
    result = await call_tool("generate_care_plan", {"nursing_diagnosis": ["감염 위험성"]})
    assert "감염 위험성" in result
