"""Knowledge topic store.

Content is looked up by ``"{topic.lower()}_{level}"``. A topic without an
entry never fails: a generic explanation mentioning the topic is
synthesized instead. Passing a known specialty adds specialty-focused
fields; an unknown specialty leaves the content untouched.
"""

from __future__ import annotations

import logging
from typing import Literal

from nursing_tutor.data.knowledge_topics import KNOWLEDGE_TOPICS, SPECIALTY_KEYWORDS
from nursing_tutor.models import KnowledgeContent

logger = logging.getLogger(__name__)

Level = Literal["basic", "intermediate", "advanced"]
LEVELS: tuple[str, ...] = ("basic", "intermediate", "advanced")


def default_knowledge(topic: str, level: str) -> KnowledgeContent:
    """Placeholder content for a topic the catalog does not cover."""
    return KnowledgeContent(
        title=f"{topic} ({level})",
        basic_definition=f"{topic}에 대한 기본 정보를 제공합니다.",
        key_points=[f"{topic}의 기본 개념", f"{topic}의 중요성", f"{topic}의 실무 적용"],
        detailed_explanation=f"{topic}에 대한 상세한 설명입니다.",
        clinical_applications=[f"{topic}의 임상 적용", f"{topic}의 실무 활용"],
        advanced_concepts=f"{topic}의 고급 개념과 최신 동향입니다.",
        recent_research=f"{topic} 분야의 최신 연구 동향입니다.",
        clinical_evidence=f"{topic}에 대한 임상 근거입니다.",
        learning_objectives=[f"{topic} 기본 개념 이해", f"{topic} 실무 적용 능력 개발"],
        related_concepts=["간호학", "의학", "보건학"],
    )


def apply_specialty(content: KnowledgeContent, specialty: str) -> KnowledgeContent:
    keywords = SPECIALTY_KEYWORDS.get(specialty, [])
    if not keywords:
        return content
    return content.model_copy(
        update={
            "specialty_focus": f"{specialty} 전문 분야에 특화된 내용",
            "specialized_applications": [f"{k} 관련 실무 적용" for k in keywords],
            "specialty_considerations": f"{specialty} 분야의 특별한 고려사항들",
        }
    )


class KnowledgeStore:
    def __init__(self, entries: dict[str, dict] | None = None) -> None:
        source = KNOWLEDGE_TOPICS if entries is None else entries
        self._entries = {key: KnowledgeContent.model_validate(v) for key, v in source.items()}

    def has_entry(self, topic: str, level: str) -> bool:
        return f"{topic.lower()}_{level}" in self._entries

    def search(self, topic: str, level: str, specialty: str | None = None) -> KnowledgeContent:
        content = self._entries.get(f"{topic.lower()}_{level}")
        if content is None:
            logger.debug("No knowledge entry for %r at %s level, synthesizing", topic, level)
            content = default_knowledge(topic, level)
        if specialty:
            content = apply_specialty(content, specialty)
        return content


_store: KnowledgeStore | None = None


def get_knowledge_store() -> KnowledgeStore:
    """Return the shared KnowledgeStore, building it on first use."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = KnowledgeStore()
    return _store
