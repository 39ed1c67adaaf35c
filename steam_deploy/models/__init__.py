"""Data models for steam-deploy"""

from .config import ActionConfig
from .request import PublishRequest, split_lines
from .result import PublishResult, LogCollectionResult, LogReadError

__all__ = [
    # Config models
    "ActionConfig",

    # Request models
    "PublishRequest",
    "split_lines",

    # Result models
    "PublishResult",
    "LogCollectionResult",
    "LogReadError",
]
