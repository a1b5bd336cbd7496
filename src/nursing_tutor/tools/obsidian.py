"""Obsidian note tool.

Composes a study note and writes it into the Obsidian vault configured by
``OBSIDIAN_VAULT_PATH``. A vault that cannot be written to sends the note
to ``NOTES_FALLBACK_DIR`` instead, and the reply tells the learner where
it ended up.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Literal

from pydantic import BaseModel, Field

from nursing_tutor.config import NOTES_FALLBACK_DIR, OBSIDIAN_VAULT_PATH
from nursing_tutor.notes import SavedNote, compose_note, merge_tags, save_note

logger = logging.getLogger(__name__)


class ObsidianArgs(BaseModel):
    note_type: Literal["daily", "concept", "case_study"]
    content: str = Field(description="Note body, stored verbatim")
    tags: list[str] | None = None


def format_saved_note(saved: SavedNote) -> str:
    note = saved.note
    lines = [
        "✅ 옵시디언 노트가 생성되었습니다!",
        "",
        f"**파일명**: {note.filename}",
        f"**위치**: {saved.path}",
    ]
    if saved.used_fallback:
        lines.append(f"⚠️ **주의**: {saved.warning}")
    lines += [
        "",
        "**미리보기**:",
        note.preview,
        "",
        f"**연결된 태그**: {' '.join('#' + tag for tag in merge_tags(note.tags, note.note_type))}",
        "",
    ]
    if saved.used_fallback:
        lines.append("노트를 옵시디언에서 열려면 위 경로의 파일을 옵시디언 볼트로 복사하세요.")
    else:
        lines.append("노트가 성공적으로 생성되어 옵시디언 볼트에 저장되었습니다.")
    return "\n".join(lines)


async def obsidian_integration(note_type: str, content: str, tags: list[str] | None = None) -> str:
    """Create a study note in the learner's Obsidian vault.

    Args:
        note_type: "daily" (study log), "concept" (concept summary) or
            "case_study" (case analysis).
        content: The note body written by the learner.
        tags: Extra tags; "nursing" and the note type are always added.

    Returns:
        Confirmation with the filename, saved location, preview and tags.
    """
    logger.info("Creating %s note (%d chars)", note_type, len(content))
    note = compose_note(note_type, content, tags)
    # Blocking file I/O, kept off the event loop.
    saved = await asyncio.to_thread(save_note, note, OBSIDIAN_VAULT_PATH, NOTES_FALLBACK_DIR)
    return format_saved_note(saved)
