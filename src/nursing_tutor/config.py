"""Configuration for the nursing tutor.

Loads settings from environment variables (via a .env file or the system
environment). Every setting has a default so the package imports cleanly
in CI and in tests, where no .env file exists.
"""

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists (it won't exist in CI or Docker; that's fine)
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)

# --- LLM ---
# Without a key the tutor agent answers with a placeholder instead of Claude.
ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "")
ANTHROPIC_MODEL: str = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")

# --- Obsidian notes ---
# Notes go to the vault first. If the vault is not writable they are saved
# under the fallback directory and the tool says so.
OBSIDIAN_VAULT_PATH: Path = Path(
    os.getenv("OBSIDIAN_VAULT_PATH", str(Path.home() / "Documents" / "NursingTutorVault"))
).expanduser()
NOTES_FALLBACK_DIR: Path = Path(
    os.getenv("NOTES_FALLBACK_DIR", str(Path(tempfile.gettempdir()) / "nursing-tutor-notes"))
).expanduser()

# --- Server ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Where the Streamlit console finds the FastAPI backend
AGENT_BACKEND_URL: str = os.getenv("AGENT_BACKEND_URL", "http://localhost:8000")
