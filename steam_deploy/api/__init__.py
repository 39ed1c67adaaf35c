# steam_deploy/api/__init__.py
"""API layer for steam-deploy"""

from .exceptions import (
    SteamDeployError,
    ConfigError,
    MissingInputError,
    FileSystemError,
    ManifestError,
    ProcessError,
)
from .publisher import Publisher, publish

__all__ = [
    # Main classes
    "Publisher",

    # Convenience functions
    "publish",

    # Exceptions
    "SteamDeployError",
    "ConfigError",
    "MissingInputError",
    "FileSystemError",
    "ManifestError",
    "ProcessError",
]
