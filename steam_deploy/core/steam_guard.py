# steam_deploy/core/steam_guard.py
"""Steam Guard authentication helpers"""

import base64
import binascii
import hashlib
import hmac
import logging
import re
import struct
import time
from pathlib import Path
from typing import Optional

from ..api.exceptions import ConfigError, FileSystemError
from ..constants import GUARD_CODE_ALPHABET, GUARD_CODE_LENGTH, GUARD_CODE_PERIOD
from ..utils.file_utils import LocalFileSystem

logger = logging.getLogger(__name__)

_HEX_SECRET = re.compile(r"^[0-9a-fA-F]{40}$")


def decode_shared_secret(shared_secret: str) -> bytes:
    """
    Decode a shared secret into raw key bytes

    Args:
        shared_secret: Base64 secret, or 40 hex characters

    Returns:
        HMAC key bytes
    """
    if _HEX_SECRET.match(shared_secret):
        return bytes.fromhex(shared_secret)
    try:
        return base64.b64decode(shared_secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigError("shared_secret is not valid base64") from e


def generate_auth_code(shared_secret: str,
                       timestamp: Optional[float] = None,
                       time_offset: int = 0) -> str:
    """
    Generate a Steam Guard mobile authenticator code

    Args:
        shared_secret: Account shared secret
        timestamp: Unix time to generate the code for (defaults to now)
        time_offset: Seconds to add to the timestamp

    Returns:
        Five character code, stable within one 30 second step
    """
    if timestamp is None:
        timestamp = time.time()

    key = decode_shared_secret(shared_secret)
    counter = (int(timestamp) + time_offset) // GUARD_CODE_PERIOD
    digest = hmac.new(key, struct.pack(">Q", counter), hashlib.sha1).digest()

    start = digest[19] & 0x0F
    full_code = struct.unpack(">I", digest[start:start + 4])[0] & 0x7FFFFFFF

    chars = []
    for _ in range(GUARD_CODE_LENGTH):
        chars.append(GUARD_CODE_ALPHABET[full_code % len(GUARD_CODE_ALPHABET)])
        full_code //= len(GUARD_CODE_ALPHABET)
    return "".join(chars)


def decode_session_config(config_blob: str) -> bytes:
    # base64 tools wrap output at 76 columns
    compact = "".join(config_blob.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigError("config is not valid base64") from e


def write_session_config(config_blob: str,
                         config_path: Path,
                         file_system: Optional[LocalFileSystem] = None) -> bool:
    """
    Persist a base64 session blob for password-less login

    Args:
        config_blob: Base64 encoded config.vdf contents
        config_path: Destination of config.vdf
        file_system: File access implementation

    Returns:
        True if an existing file was overwritten
    """
    fs = file_system or LocalFileSystem()
    content = decode_session_config(config_blob)
    config_path = Path(config_path)

    overwritten = fs.exists(config_path)
    try:
        fs.ensure_directory(config_path.parent)
        fs.write_bytes(config_path, content)
        fs.check_readable(config_path)
    except OSError as e:
        raise FileSystemError(f"Failed to write session config {config_path}: {e}", config_path) from e

    logger.debug("Wrote session config (%d bytes) to %s", len(content), config_path)
    return overwritten
