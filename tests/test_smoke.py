"""Smoke tests: verify the package is wired up correctly.

They ensure that:
1. All modules can be imported without errors
2. The FastAPI app starts up properly
3. Configuration loads with default values

This is the first thing CI runs, so if these fail, nothing else will work.
"""

from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient


def test_imports() -> None:
    """Verify all modules can be imported without crashing."""
    import nursing_tutor  # noqa: F401
    import nursing_tutor.agent  # noqa: F401
    import nursing_tutor.app  # noqa: F401
    import nursing_tutor.config  # noqa: F401
    import nursing_tutor.learning  # noqa: F401
    import nursing_tutor.tools  # noqa: F401
    import nursing_tutor.tools.care_plan  # noqa: F401
    import nursing_tutor.tools.clinical_case  # noqa: F401
    import nursing_tutor.tools.knowledge  # noqa: F401
    import nursing_tutor.tools.learning  # noqa: F401
    import nursing_tutor.tools.obsidian  # noqa: F401
    import nursing_tutor.tools.research  # noqa: F401


def test_config_defaults() -> None:
    """Config should load with usable values even without a .env file."""
    from nursing_tutor.config import ANTHROPIC_MODEL, NOTES_FALLBACK_DIR, OBSIDIAN_VAULT_PATH

    assert ANTHROPIC_MODEL
    assert isinstance(OBSIDIAN_VAULT_PATH, Path)
    assert isinstance(NOTES_FALLBACK_DIR, Path)


def test_agent_wraps_every_tool() -> None:
    """Every tool in the table is exposed to the agent."""
    from nursing_tutor.agent import _build_tools
    from nursing_tutor.tools import TOOLS

    tools = _build_tools()
    assert [t.name for t in tools] == list(TOOLS)


def test_health_endpoint() -> None:
    """The /health endpoint should return 200 OK."""
    from nursing_tutor.app import app

    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chat_endpoint_placeholder() -> None:
    """Without an API key /chat echoes the message in a placeholder reply."""
    from nursing_tutor.app import app

    client = TestClient(app)
    with patch("nursing_tutor.agent.ANTHROPIC_API_KEY", ""):
        response = client.post("/chat", json={"message": "Hello"})
    assert response.status_code == 200
    data = response.json()
    assert "response" in data
    assert "Hello" in data["response"]
