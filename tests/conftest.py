"""
Shared test fixtures and configuration.
"""

import io
import urllib.error
from pathlib import Path

import pytest

GUIDELINES = "# Guidelines\n\n1. Think before coding.\n2. Keep it simple.\n"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty working directory with a clean env."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for var in (
        "GUIDEDIST_LOG_LEVEL", "GUIDEDIST_LOG_FILE", "GUIDEDIST_LOG_FILE_LEVEL",
        "http_proxy", "https_proxy", "all_proxy", "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY",
    ):
        monkeypatch.delenv(var, raising=False)
    return workdir


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A canonical guideline file on disk."""
    path = tmp_path / "canonical" / "CLAUDE.md"
    path.parent.mkdir()
    path.write_text(GUIDELINES, encoding="utf-8")
    return path


@pytest.fixture
def source_uri(source_file: Path) -> str:
    """file:// URI of the canonical guideline file."""
    return source_file.as_uri()


@pytest.fixture
def missing_uri(tmp_path: Path) -> str:
    """file:// URI that points nowhere."""
    return (tmp_path / "nowhere" / "CLAUDE.md").as_uri()


class FakeResponse(io.BytesIO):
    """Stand-in for the object urlopen returns."""

    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch):
    """Patch urlopen; returns a dict to set ``body``/``status``/``error``.

    Requests made are recorded under ``requests``.
    """
    state: dict = {"body": GUIDELINES.encode("utf-8"), "status": 200, "error": None, "requests": []}

    def fake_urlopen(req, timeout=None):
        state["requests"].append({"url": req.full_url, "headers": dict(req.header_items()), "timeout": timeout})
        if state["error"] is not None:
            raise state["error"]
        if state["status"] >= 400:
            raise urllib.error.HTTPError(req.full_url, state["status"], "Error", {}, None)
        return FakeResponse(state["body"], state["status"])

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    return state


@pytest.fixture
def guidelines() -> str:
    """Text of the canonical guideline document."""
    return GUIDELINES
