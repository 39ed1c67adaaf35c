"""Steam Deploy - Publish Steam app builds and workshop items from CI.

This tool drives steamcmd: it logs in with a Steam Guard code or a stored
session, generates build manifests from action inputs, runs the upload and
echoes steamcmd's logs into the CI console when something goes wrong.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.publisher import Publisher, publish

# Data models
from .models import ActionConfig, PublishRequest, PublishResult, LogCollectionResult
from .constants import PublishMode, AuthMode

# Exceptions
from .api.exceptions import (
    SteamDeployError,
    ConfigError,
    MissingInputError,
    FileSystemError,
    ManifestError,
    ProcessError,
)

# Building blocks
from .core import ArgumentBuilder, LogCollector, ManifestEngine, ProcessRunner, generate_auth_code

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Publisher",

    # Core API functions
    "publish",
    "generate_auth_code",

    # Data models
    "ActionConfig",
    "PublishRequest",
    "PublishResult",
    "LogCollectionResult",
    "PublishMode",
    "AuthMode",

    # Building blocks
    "ArgumentBuilder",
    "LogCollector",
    "ManifestEngine",
    "ProcessRunner",

    # Exceptions
    "SteamDeployError",
    "ConfigError",
    "MissingInputError",
    "FileSystemError",
    "ManifestError",
    "ProcessError",
]
