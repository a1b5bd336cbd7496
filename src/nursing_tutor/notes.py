"""Study note composition and persistence.

``compose_note`` is a pure formatter: it builds the markdown document
(front matter, templated sections, review schedule) and a suggested
filename, but never touches the filesystem.

``save_note`` hands the document to a ``FileWriter``. When the vault
directory is not writable (``PermissionError``) the note is written once
more under the fallback directory and the result says so. Any other
``OSError`` propagates: a note is either saved somewhere or not at all.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Literal, Protocol

import yaml

logger = logging.getLogger(__name__)

NoteType = Literal["daily", "concept", "case_study"]

DOMAIN_TAG = "nursing"
PREVIEW_LENGTH = 200
FALLBACK_WARNING = "원래 위치에 권한 문제로 임시 폴더에 저장되었습니다."

NOTE_TITLES: dict[str, str] = {
    "daily": "일일 학습 노트",
    "concept": "개념 정리 노트",
    "case_study": "사례 연구 노트",
}

NOTE_TYPE_KOREAN: dict[str, str] = {
    "daily": "일일 학습",
    "concept": "개념 정리",
    "case_study": "사례 연구",
}

NOTE_TEMPLATES: dict[str, str] = {
    "daily": """## 📅 오늘의 학습 목표
- [ ] 목표 1
- [ ] 목표 2
- [ ] 목표 3

## 📚 학습한 내용
(위 내용 참조)

## 🤔 어려웠던 점
-

## 💡 새로 알게 된 것
-

## 🔄 복습이 필요한 부분
- """,
    "concept": """## 📖 개념 정의
(위 내용 참조)

## 🔍 세부 내용
### 주요 특징
-

### 임상 적용
-

### 주의사항
-

## 🧪 실습 포인트
-

## ❓ 추가 질문
- """,
    "case_study": """## 📋 사례 요약
(위 내용 참조)

## 🔍 분석 과정
### 1. 문제 파악
-

### 2. 간호진단
-

### 3. 계획 수립
-

### 4. 중재 실행
-

### 5. 평가
-

## 📊 학습 성과
-

## 🎯 적용 계획
- """,
}

RELATED_CONCEPTS: dict[str, list[str]] = {
    "daily": ["간호과정", "환자안전", "간호윤리"],
    "concept": ["기본간호학", "성인간호학", "임상실습"],
    "case_study": ["간호진단", "간호계획", "간호평가"],
}

LEARNING_CHECKLISTS: dict[str, list[str]] = {
    "daily": ["오늘의 학습 목표 달성", "핵심 개념 정리", "실습 적용 방법 이해", "복습 계획 수립"],
    "concept": [
        "개념 정의 완전 이해",
        "임상 적용 사례 파악",
        "관련 개념과의 연결성 파악",
        "실습에서 활용 방법 계획",
    ],
    "case_study": [
        "사례 분석 완료",
        "간호진단 적절성 검토",
        "간호계획 실현 가능성 검토",
        "유사 사례 적용 방법 계획",
    ],
}

# (offset, label, activity)
REVIEW_SCHEDULE: list[tuple[timedelta, str, str]] = [
    (timedelta(days=1), "1일 후", "핵심 개념 재확인"),
    (timedelta(days=7), "1주 후", "실습 적용 및 응용"),
    (timedelta(days=30), "1개월 후", "종합 정리 및 심화 학습"),
]


@dataclass
class Note:
    filename: str
    note_type: str
    content: str
    preview: str
    tags: list[str] = field(default_factory=list)


def merge_tags(tags: list[str], note_type: str) -> list[str]:
    """Caller tags plus the domain tag and note type, first occurrence wins."""
    return list(dict.fromkeys([*tags, DOMAIN_TAG, note_type]))


def build_front_matter(note_type: str, tags: list[str], now: datetime) -> str:
    stamp = now.isoformat(timespec="seconds")
    header = yaml.safe_dump(
        {
            "tags": merge_tags(tags, note_type),
            "type": note_type,
            "created": stamp,
            "modified": stamp,
            "status": "active",
            "priority": "medium",
        },
        allow_unicode=True,
        sort_keys=False,
    )
    return f"---\n{header}---"


def parse_front_matter(document: str) -> dict[str, Any]:
    """Read the ``---`` delimited YAML header of a note back into a dict.

    A document without front matter yields an empty dict.
    """
    lines = document.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}

    header: list[str] = []
    for line in lines[1:]:
        if line.strip() == "---":
            break
        header.append(line)
    meta = yaml.safe_load("\n".join(header))
    return meta if isinstance(meta, dict) else {}


def build_review_plan(now: datetime) -> list[str]:
    return [
        f"- **{label} ({(now + offset):%Y-%m-%d})**: {activity}"
        for offset, label, activity in REVIEW_SCHEDULE
    ]


def build_preview(content: str, note_type: str) -> str:
    label = NOTE_TYPE_KOREAN.get(note_type, "학습 노트")
    ellipsis = "..." if len(content) > PREVIEW_LENGTH else ""
    return f"[{label}] {content[:PREVIEW_LENGTH]}{ellipsis}"


def make_filename(note_type: str, now: datetime) -> str:
    return f"{now:%Y-%m-%d}-{note_type}-{uuid.uuid4().hex[:9]}.md"


def compose_note(
    note_type: str, content: str, tags: list[str] | None = None, now: datetime | None = None
) -> Note:
    """Build the full markdown document for a study note."""
    now = now or datetime.now()
    tags = tags or []

    concepts = RELATED_CONCEPTS.get(note_type)
    checklist = LEARNING_CHECKLISTS.get(note_type)

    lines = [
        build_front_matter(note_type, tags, now),
        "",
        f"# {NOTE_TITLES.get(note_type, '학습 노트')}",
        "",
        content,
        "",
        NOTE_TEMPLATES.get(note_type, ""),
        "",
        "## 🔗 연관 개념",
        *([f"- [[{c}]]" for c in concepts] if concepts else ["- [[간호학 기초]]"]),
        "",
        "## 📝 학습 메모",
        *([f"- [ ] {item}" for item in checklist] if checklist else ["- [ ] 학습 내용 복습"]),
        "",
        "## 🎯 복습 계획",
        *build_review_plan(now),
        "",
        "---",
        f"*생성일: {now:%Y-%m-%d %H:%M:%S}*",
        f"*마지막 수정: {now:%Y-%m-%d %H:%M:%S}*",
        "",
    ]

    return Note(
        filename=make_filename(note_type, now),
        note_type=note_type,
        content="\n".join(lines),
        preview=build_preview(content, note_type),
        tags=list(tags),
    )


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class FileWriter(Protocol):
    def write(self, path: Path, content: str) -> None: ...


class LocalFileWriter:
    """Writes UTF-8 text, creating parent directories as needed."""

    def write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@dataclass
class SavedNote:
    note: Note
    path: Path
    used_fallback: bool = False
    warning: str | None = None


def save_note(
    note: Note,
    vault_dir: Path,
    fallback_dir: Path,
    writer: FileWriter | None = None,
) -> SavedNote:
    writer = writer or LocalFileWriter()
    path = vault_dir / note.filename
    try:
        writer.write(path, note.content)
    except PermissionError as e:
        fallback_path = fallback_dir / note.filename
        logger.warning("Cannot write note to %s (%s), using %s", path, e, fallback_path)
        writer.write(fallback_path, note.content)
        return SavedNote(note=note, path=fallback_path, used_fallback=True, warning=FALLBACK_WARNING)

    logger.info("Saved note %s", path)
    return SavedNote(note=note, path=path)
