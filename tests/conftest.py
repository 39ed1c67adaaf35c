"""Shared fixtures for the steam-deploy test suite."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from steam_deploy.api.exceptions import ProcessError
from steam_deploy.models import ActionConfig
from steam_deploy.utils.output import WorkflowReporter

SHARED_SECRET = base64.b64encode(bytes(range(20))).decode("ascii")
FIXED_TIME = 1_700_000_000


class RecordingReporter(WorkflowReporter):
    """Reporter that keeps console lines in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def _write(self, text: str) -> None:
        self.lines.append(text)

    def commands(self, name: str) -> list[str]:
        prefix = f"::{name}"
        return [line for line in self.lines if line.startswith(prefix)]


class FakeRunner:
    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[list[str]] = []

    async def run(self, args: list[str]) -> int:
        self.calls.append(list(args))
        if self.exit_code != 0:
            raise ProcessError(f"steamcmd failed with exit code {self.exit_code}", self.exit_code)
        return 0


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def action_config(tmp_path: Path) -> ActionConfig:
    steam_dir = tmp_path / "steam"
    (steam_dir / "config").mkdir(parents=True)
    (steam_dir / "logs").mkdir()
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return ActionConfig(
        steam_dir=steam_dir,
        runner_temp=tmp_path / "temp",
        workspace=workspace,
    )
