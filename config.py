"""
Centralized configuration for snippet_injector.

Loads environment variables from .env and provides validated paths and settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_path_var(var_name: str, default: str | None = None) -> Path | None:
    """Retrieve a path from environment variables, resolving to absolute."""
    value = os.getenv(var_name, default)
    if not value:
        return None
    return Path(value).expanduser().resolve()


# -- Paths -------------------------------------------------------------------


STATE_DIR = Path(os.getenv("SNIPPET_INJECTOR_STATE_DIR", str(Path.home() / ".snippet_injector")))
LOG_DIR = STATE_DIR / "logs"

# Defaults for the injection run, overridable per invocation
CODESNIPPET_ROOT = get_path_var("SNIPPET_INJECTOR_CODESNIPPET_ROOT", "src/samples/java")
SOURCES_ROOT = get_path_var("SNIPPET_INJECTOR_SOURCES_ROOT", "src/main/java")
README_PATH = get_path_var("SNIPPET_INJECTOR_README", "README.md")

# -- Settings -----------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes")
FILE_LOGS = os.getenv("SNIPPET_INJECTOR_FILE_LOGS", "true").lower() in ("true", "1", "yes")


def validate_config() -> None:
    """Validate that critical paths exist or can be created."""
    for path_var in [STATE_DIR, LOG_DIR]:
        if not path_var.exists():
            try:
                path_var.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                print(f"Warning: Could not create {path_var}: {e}")
