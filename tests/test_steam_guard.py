from __future__ import annotations

import base64
import textwrap
from pathlib import Path

import pytest

from steam_deploy.api.exceptions import ConfigError
from steam_deploy.constants import GUARD_CODE_ALPHABET
from steam_deploy.core.steam_guard import generate_auth_code, write_session_config

from conftest import FIXED_TIME, SHARED_SECRET


def test_code_shape() -> None:
    code = generate_auth_code(SHARED_SECRET, timestamp=FIXED_TIME)

    assert len(code) == 5
    assert all(ch in GUARD_CODE_ALPHABET for ch in code)


@pytest.mark.parametrize("timestamp, expected", [
    (0, "YFG53"),
    (FIXED_TIME, "7MQGM"),
    (1_234_567_890, "P48QM"),
])
def test_known_codes(timestamp: int, expected: str) -> None:
    assert generate_auth_code(SHARED_SECRET, timestamp=timestamp) == expected


def test_same_step_gives_same_code() -> None:
    step_start = FIXED_TIME - FIXED_TIME % 30

    assert generate_auth_code(SHARED_SECRET, timestamp=step_start) == generate_auth_code(
        SHARED_SECRET, timestamp=step_start + 29
    )


def test_time_offset_moves_to_next_step() -> None:
    step_start = FIXED_TIME - FIXED_TIME % 30

    assert generate_auth_code(SHARED_SECRET, timestamp=step_start, time_offset=30) == generate_auth_code(
        SHARED_SECRET, timestamp=step_start + 30
    )


def test_hex_and_base64_secrets_are_equivalent() -> None:
    hex_secret = bytes(range(20)).hex()

    assert generate_auth_code(hex_secret, timestamp=FIXED_TIME) == generate_auth_code(
        SHARED_SECRET, timestamp=FIXED_TIME
    )


def test_invalid_secret_is_config_error() -> None:
    with pytest.raises(ConfigError):
        generate_auth_code("not a secret!", timestamp=FIXED_TIME)


def test_session_config_written_verbatim(tmp_path: Path) -> None:
    payload = b'"InstallConfigStore"\x00\x01\xff'
    target = tmp_path / "steam" / "config" / "config.vdf"

    overwritten = write_session_config(base64.b64encode(payload).decode(), target)

    assert overwritten is False
    assert target.read_bytes() == payload


def test_session_config_reports_overwrite(tmp_path: Path) -> None:
    target = tmp_path / "config.vdf"
    target.write_bytes(b"old")

    overwritten = write_session_config(base64.b64encode(b"new").decode(), target)

    assert overwritten is True
    assert target.read_bytes() == b"new"


def test_session_config_rejects_bad_base64(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        write_session_config("%%%", tmp_path / "config.vdf")


def test_session_config_accepts_wrapped_base64(tmp_path: Path) -> None:
    payload = bytes(range(256)) * 2
    wrapped = "\n".join(textwrap.wrap(base64.b64encode(payload).decode(), 76)) + "\n"
    target = tmp_path / "config.vdf"

    write_session_config(wrapped, target)

    assert target.read_bytes() == payload
