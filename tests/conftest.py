"""Shared fixtures for RulesKit tests."""

from __future__ import annotations

import pytest


class RecordingLogger:
    """Logger port collecting every line it receives."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str, str]] = []

    def log(self, preamble: str, message: str) -> None:
        self.lines.append(("log", preamble, message))

    def error(self, preamble: str, message: str) -> None:
        self.lines.append(("error", preamble, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, _, message in self.lines]


@pytest.fixture
def logger() -> RecordingLogger:
    """Create a recording logger."""
    return RecordingLogger()


@pytest.fixture(autouse=True)
def enable_hooks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RULESKIT=0 from leaking into tests."""
    monkeypatch.delenv("RULESKIT", raising=False)
