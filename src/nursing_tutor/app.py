"""FastAPI server: the HTTP entry point for the nursing tutor.

Endpoints:

- GET  /health        Simple check that the server is running
- GET  /tools         Names and descriptions of the callable tools
- POST /tools/{name}  Call one tool with a JSON argument object
- POST /chat          Send a message to the tutor agent

Run locally with:
    uvicorn nursing_tutor.app:app --reload
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, ValidationError

from nursing_tutor.agent import run_agent
from nursing_tutor.config import LOG_LEVEL
from nursing_tutor.tools import TOOLS, UnknownToolError, call_tool

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Nursing Education Tutor",
    description="Nursing reference lookups, case analysis, care plans and study tracking",
    version="0.1.0",
)


class ChatRequest(BaseModel):
    """What the client sends to the /chat endpoint."""

    message: str


class ChatResponse(BaseModel):
    response: str


class ToolInfo(BaseModel):
    name: str
    description: str


class ToolResult(BaseModel):
    tool: str
    result: str


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint. Returns 200 if the server is running."""
    return {"status": "ok"}


@app.get("/tools", response_model=list[ToolInfo])
async def list_tools() -> list[ToolInfo]:
    return [
        ToolInfo(name=name, description=(spec.fn.__doc__ or name).strip().splitlines()[0])
        for name, spec in TOOLS.items()
    ]


@app.post("/tools/{name}", response_model=ToolResult)
async def invoke_tool(name: str, arguments: dict[str, Any] = Body(default_factory=dict)) -> ToolResult:
    """Run a tool by name. Unknown names are 404, invalid arguments 422."""
    try:
        result = await call_tool(name, arguments)
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=e.detail) from e
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    return ToolResult(tool=name, result=result)


@app.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest) -> ChatResponse:
    """Send a message through the tutor agent."""
    return ChatResponse(response=await run_agent(request.message))
