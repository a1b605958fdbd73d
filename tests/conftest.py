"""Pytest configuration: isolated settings and a recording command runner."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from core.domain.models import Invocation

_ENV_KEYS = (
    "PROJECT_NAME",
    "DATABASE_NAME",
    "DATABASE_USER",
    "API_PORT",
    "DB_PORT",
    "COMPOSE_FILE",
    "COMPOSE_COMMAND",
    "DOCKER_COMMAND",
    "DB_SERVICE",
    "SHELL_PROGRAM",
)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """No stray .env or DOCKER_MANAGE_* variable leaks into a test."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in _ENV_KEYS:
        monkeypatch.delenv(f"DOCKER_MANAGE_{key}", raising=False)


class RecordingRunner:
    """`CommandRunner` fake: records invocations, optionally fails one."""

    def __init__(self) -> None:
        self.invocations: list[Invocation] = []
        self.captured: list[Invocation] = []
        self.capture_output = ""
        self.fail_on: tuple[str, ...] | None = None
        self.fail_code = 1
        self.capture_error: Exception | None = None

    def run(self, invocation: Invocation) -> None:
        self.invocations.append(invocation)
        if self.fail_on is not None and tuple(invocation.argv[-len(self.fail_on):]) == self.fail_on:
            raise subprocess.CalledProcessError(self.fail_code, invocation.argv)

    def capture(self, invocation: Invocation) -> str:
        self.captured.append(invocation)
        if self.capture_error is not None:
            raise self.capture_error
        return self.capture_output

    @property
    def argvs(self) -> list[list[str]]:
        return [i.argv for i in self.invocations]


@pytest.fixture
def recorder() -> RecordingRunner:
    return RecordingRunner()
