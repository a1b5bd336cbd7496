"""Tests for note composition and saving.

The file writer is replaced with a mock wherever a write failure has to be
simulated; successful writes go to pytest's tmp_path.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nursing_tutor.notes import (
    FALLBACK_WARNING,
    LocalFileWriter,
    compose_note,
    parse_front_matter,
    save_note,
)

NOW = datetime(2024, 3, 15, 10, 0, 0)


# --- compose_note ---


def test_front_matter_round_trip() -> None:
    """Parsing a composed note recovers its tags and type."""
    note = compose_note("concept", "X", ["tag1"], now=NOW)
    meta = parse_front_matter(note.content)
    assert {"tag1", "nursing", "concept"} <= set(meta["tags"])
    assert meta["type"] == "concept"
    assert meta["status"] == "active"


def test_front_matter_keeps_yaml_special_tags() -> None:
    """Tags with commas, colons or hashes survive the round trip intact."""
    tags = ["pain, acute", "a: b", "#종양"]
    meta = parse_front_matter(compose_note("concept", "X", tags, now=NOW).content)
    assert meta["tags"] == [*tags, "nursing", "concept"]


def test_front_matter_timestamps_stay_text() -> None:
    """Timestamps and fixed fields are read back as plain strings."""
    meta = parse_front_matter(compose_note("daily", "X", now=NOW).content)
    assert meta["created"] == "2024-03-15T10:00:00"
    assert meta["priority"] == "medium"


def test_tags_are_not_duplicated() -> None:
    """Caller tags already containing the fixed tags are merged once."""
    note = compose_note("daily", "X", ["nursing", "daily", "oncology"], now=NOW)
    assert parse_front_matter(note.content)["tags"] == ["nursing", "daily", "oncology"]


def test_filename_has_date_and_type() -> None:
    """Filenames carry the date, note type and a random suffix."""
    note = compose_note("case_study", "X", now=NOW)
    assert re.fullmatch(r"2024-03-15-case_study-[0-9a-f]{9}\.md", note.filename)


def test_content_is_embedded_verbatim() -> None:
    """The caller's text appears unchanged in the body."""
    body = "## 내 메모\n- 항암제 **취급** 주의"
    assert body in compose_note("concept", body, now=NOW).content


def test_review_schedule_dates() -> None:
    """Reviews are planned one day, one week and one month out."""
    content = compose_note("daily", "X", now=NOW).content
    assert "1일 후 (2024-03-16)" in content
    assert "1주 후 (2024-03-22)" in content
    assert "1개월 후 (2024-04-14)" in content


def test_type_specific_sections() -> None:
    """Case study notes get their own sections and checklist."""
    content = compose_note("case_study", "X", now=NOW).content
    assert "## 📋 사례 요약" in content
    assert "- [[간호진단]]" in content
    assert "- [ ] 사례 분석 완료" in content


def test_preview_truncates_long_content() -> None:
    """Previews stop at 200 characters and add an ellipsis."""
    note = compose_note("concept", "가" * 250, now=NOW)
    assert note.preview == f"[개념 정리] {'가' * 200}..."
    assert compose_note("concept", "짧음", now=NOW).preview == "[개념 정리] 짧음"


def test_parse_front_matter_without_header() -> None:
    """A document without front matter parses to an empty dict."""
    assert parse_front_matter("# just a heading") == {}


# --- save_note ---


def test_save_to_vault(tmp_path: Path) -> None:
    """A writable vault receives the note, creating folders as needed."""
    vault = tmp_path / "vault" / "nested"
    note = compose_note("daily", "오늘 배운 것", now=NOW)

    saved = save_note(note, vault, tmp_path / "fallback")

    assert saved.path == vault / note.filename
    assert not saved.used_fallback
    assert saved.path.read_text(encoding="utf-8") == note.content


def test_permission_error_falls_back(tmp_path: Path) -> None:
    """A PermissionError retries once under the fallback directory."""
    note = compose_note("daily", "X", now=NOW)
    writer = MagicMock()
    writer.write.side_effect = [PermissionError("read-only vault"), None]

    saved = save_note(note, tmp_path / "vault", tmp_path / "fallback", writer=writer)

    assert saved.used_fallback
    assert saved.path == tmp_path / "fallback" / note.filename
    assert saved.warning == FALLBACK_WARNING
    assert writer.write.call_count == 2
    writer.write.assert_called_with(tmp_path / "fallback" / note.filename, note.content)


def test_other_os_errors_propagate(tmp_path: Path) -> None:
    """Only permission problems trigger the fallback."""
    writer = MagicMock()
    writer.write.side_effect = OSError("disk full")
    note = compose_note("daily", "X", now=NOW)

    with pytest.raises(OSError, match="disk full"):
        save_note(note, tmp_path / "vault", tmp_path / "fallback", writer=writer)
    writer.write.assert_called_once()


def test_fallback_failure_propagates(tmp_path: Path) -> None:
    """If the fallback is not writable either, the error reaches the caller."""
    writer = MagicMock()
    writer.write.side_effect = PermissionError("nope")
    note = compose_note("daily", "X", now=NOW)

    with pytest.raises(PermissionError):
        save_note(note, tmp_path / "vault", tmp_path / "fallback", writer=writer)


def test_local_writer_writes_utf8(tmp_path: Path) -> None:
    """The local writer creates directories and writes UTF-8."""
    path = tmp_path / "a" / "b.md"
    LocalFileWriter().write(path, "간호")
    assert path.read_text(encoding="utf-8") == "간호"
