"""Shared test fixtures and configuration."""

import json
import tempfile
from pathlib import Path

import pytest

from commitgen.config import (
    ENV_ENDPOINT,
    ENV_MAX_BYTES,
    ENV_MODEL,
    ENV_REVIEW_MODEL,
    ENV_TIMEOUT,
)


class FakeClient:
    """Stand-in for OllamaClient that replays canned responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def generate(self, endpoint, request, deadline=None):
        self.calls.append((endpoint, request, deadline))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".commitgen"
    mocker.patch("commitgen.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def clean_env(monkeypatch):
    """Remove commitgen environment variables."""
    for name in (ENV_MODEL, ENV_REVIEW_MODEL, ENV_ENDPOINT, ENV_MAX_BYTES, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_client():
    """Factory for FakeClient instances."""
    return FakeClient


@pytest.fixture
def sample_diff():
    """Sample staged diff as produced by git diff --staged -U0 -M."""
    return """diff --git a/auth/login.py b/auth/login.py
index 1234567..abcdefg 100644
--- a/auth/login.py
+++ b/auth/login.py
@@ -10,0 +11,2 @@ def login(user):
+    audit.publish("login", user.id)
+    return session
"""


@pytest.fixture
def sample_parts_json():
    """Valid commit parts JSON as returned by the model."""
    return json.dumps({
        "commit_type": "feat",
        "description": "add login audit hook",
        "summary": "logs auth events",
        "body": "adds publisher",
    })


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
