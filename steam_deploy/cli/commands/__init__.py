# steam_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import publish
from . import manifest

__all__ = [
    "publish",
    "manifest",
]
