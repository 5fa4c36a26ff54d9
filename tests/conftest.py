"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import httpx
import pytest

from readmegen.core.models.generation import GenerationConfig
from readmegen.core.services.generation import GenerationClient

TEST_ENDPOINT = "https://api.test/openai/v1/chat/completions"


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A small project directory."""
    root = tmp_path / "demo"
    (root / "pkg").mkdir(parents=True)
    (root / "pkg" / "__init__.py").write_text("")
    (root / "pkg" / "models.py").write_text("")
    (root / "app.py").write_text("print('hi')\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root


@pytest.fixture
def config() -> GenerationConfig:
    return GenerationConfig(api_key="gsk_test_key_123", model="test-model", auto_open=False,
                            endpoint=TEST_ENDPOINT)


def completion_body(content: str) -> dict:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def make_client():
    """Build a GenerationClient backed by an httpx.MockTransport.

    The returned list collects every request the transport saw.
    """

    def _make(handler):
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        http = httpx.Client(transport=httpx.MockTransport(_record))
        return GenerationClient(http_client=http, system_prompt="SYSTEM"), seen

    return _make


@pytest.fixture
def ok_client(make_client):
    """A client whose endpoint always answers with a fixed README."""
    return make_client(
        lambda request: httpx.Response(200, json=completion_body("\n# Demo\n\nGenerated.\n  "))
    )


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
