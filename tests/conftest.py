"""
Shared test fixtures for snippet_injector.

Provides common setup: temporary project trees with codesnippet
definitions, Javadoc sources and a README.
"""

import logging
from pathlib import Path

import pytest

SAMPLE_JAVA = (
    "public class ClientSamples {\n"
    "    public void create() {\n"
    "        // BEGIN: com.example.client.create\n"
    "        Client client = new ClientBuilder()\n"
    "            .endpoint(\"https://example.com\")\n"
    "            .build();\n"
    "        // END: com.example.client.create\n"
    "    }\n"
    "}\n"
)

SOURCE_JAVA = (
    "/**\n"
    " * Client for the example service.\n"
    " *\n"
    " * <!-- src_embed com.example.client.create -->\n"
    " * stale content\n"
    " * <!-- end com.example.client.create -->\n"
    " */\n"
    "public class Client {\n"
    "}\n"
)

README = (
    "# Example\n"
    "\n"
    "```java com.example.client.create\n"
    "```\n"
)


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Create a temporary project with samples, sources and a README."""
    samples = tmp_path / "samples"
    sources = tmp_path / "src"
    samples.mkdir()
    sources.mkdir()
    (samples / "ClientSamples.java").write_text(SAMPLE_JAVA)
    (sources / "Client.java").write_text(SOURCE_JAVA)
    (tmp_path / "README.md").write_text(README)
    return tmp_path


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point state and logs at a temporary directory."""
    import config as settings

    state_dir = tmp_path / "state"
    monkeypatch.setenv("SNIPPET_INJECTOR_STATE_DIR", str(state_dir))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(settings, "STATE_DIR", state_dir)
    monkeypatch.setattr(settings, "LOG_DIR", state_dir / "logs")
    monkeypatch.setattr(settings, "FILE_LOGS", False)
    yield state_dir
    logging.getLogger("snippet_injector").handlers.clear()
