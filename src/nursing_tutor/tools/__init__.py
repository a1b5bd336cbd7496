"""Nursing tutor tools.

Each module in this package contains "tools": async functions the tutor
agent (or the HTTP API) can call by name. Every tool returns a markdown
text block, and its docstring is the description the agent reads.

Tools are organized by domain:
- knowledge.py:     nursing knowledge, medications, labs, NANDA, protocols
- clinical_case.py: clinical case analysis
- care_plan.py:     nursing care plans
- obsidian.py:      study notes in an Obsidian vault
- research.py:      research evidence summaries
- learning.py:      study sessions and learner progress

``TOOLS`` maps each tool name to its function and argument model.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any, NamedTuple

from pydantic import BaseModel

from nursing_tutor.tools.care_plan import CarePlanArgs, generate_care_plan
from nursing_tutor.tools.clinical_case import ClinicalCaseArgs, analyze_clinical_case
from nursing_tutor.tools.knowledge import KnowledgeArgs, get_nursing_knowledge
from nursing_tutor.tools.learning import (
    CompleteSessionArgs,
    LearningProgressArgs,
    StartSessionArgs,
    complete_study_session,
    get_learning_progress,
    start_study_session,
)
from nursing_tutor.tools.obsidian import ObsidianArgs, obsidian_integration
from nursing_tutor.tools.research import ResearchArgs, research_assistant

logger = logging.getLogger(__name__)

ToolFunction = Callable[..., Coroutine[Any, Any, str]]


class ToolSpec(NamedTuple):
    fn: ToolFunction
    args_model: type[BaseModel]


class UnknownToolError(Exception):
    """Raised when a tool name is not in the tool table."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.detail = f"Unknown tool: {name}"
        super().__init__(self.detail)


TOOLS: dict[str, ToolSpec] = {
    spec.fn.__name__: spec
    for spec in [
        ToolSpec(get_nursing_knowledge, KnowledgeArgs),
        ToolSpec(analyze_clinical_case, ClinicalCaseArgs),
        ToolSpec(generate_care_plan, CarePlanArgs),
        ToolSpec(obsidian_integration, ObsidianArgs),
        ToolSpec(research_assistant, ResearchArgs),
        ToolSpec(start_study_session, StartSessionArgs),
        ToolSpec(complete_study_session, CompleteSessionArgs),
        ToolSpec(get_learning_progress, LearningProgressArgs),
    ]
}


def get_tool(name: str) -> ToolSpec:
    spec = TOOLS.get(name)
    if spec is None:
        logger.warning("Rejected call to unknown tool %r", name)
        raise UnknownToolError(name)
    return spec


async def call_tool(name: str, arguments: dict[str, Any]) -> str:
    """Validate ``arguments`` against the tool's model and run it.

    Raises UnknownToolError for an unknown name (before any validation)
    and pydantic.ValidationError for bad arguments.
    """
    spec = get_tool(name)
    args = spec.args_model.model_validate(arguments)
    # dict(model) keeps nested models such as PatientInfo intact.
    return await spec.fn(**dict(args))
