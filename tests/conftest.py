from __future__ import annotations

import os

import pytest

from proofing.service.config import CONFIG_FILE_ENV, get_settings
from proofing.service.pipeline import CheckerService


class DummyMatch:
    """Mirrors the attributes of ``language_tool_python.Match`` used by the checker."""

    def __init__(
        self,
        offset: int,
        error_length: int,
        replacements: list[str] | None = None,
        message: str = "Possible spelling mistake",
        rule_id: str = "TEST_RULE",
    ) -> None:
        self.offset = offset
        self.errorLength = error_length
        self.replacements = list(replacements or [])
        self.message = message
        self.ruleId = rule_id


class DummyTool:
    def __init__(self, matches: list[DummyMatch] | None = None, error: Exception | None = None) -> None:
        self._matches = matches or []
        self._error = error
        self.captured_texts: list[str] = []
        self.closed = False

    def check(self, text: str) -> list[DummyMatch]:
        self.captured_texts.append(text)
        if self._error is not None:
            raise self._error
        return self._matches

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings independent of the developer's environment and files."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("PROOFING_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "proofing.yaml"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    CheckerService.reset()


@pytest.fixture
def make_match():
    return DummyMatch


@pytest.fixture
def make_tool():
    return DummyTool
