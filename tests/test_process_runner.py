from __future__ import annotations

import asyncio
import sys

import pytest

from steam_deploy.api.exceptions import ProcessError
from steam_deploy.core.process_runner import ProcessRunner


def _run(runner: ProcessRunner, args: list[str]) -> int:
    return asyncio.run(runner.run(args))


def test_zero_exit() -> None:
    assert _run(ProcessRunner(sys.executable), ["-c", "pass"]) == 0


def test_non_zero_exit_carries_code() -> None:
    with pytest.raises(ProcessError) as excinfo:
        _run(ProcessRunner(sys.executable), ["-c", "raise SystemExit(3)"])

    assert excinfo.value.exit_code == 3


def test_missing_executable() -> None:
    with pytest.raises(ProcessError) as excinfo:
        _run(ProcessRunner("/nonexistent/steamcmd"), ["+quit"])

    assert excinfo.value.exit_code is None


def test_argument_with_null_byte() -> None:
    with pytest.raises(ProcessError, match="Failed to start"):
        _run(ProcessRunner(sys.executable), ["-c", "pass", "bad\x00arg"])
