"""Business logic services for steam-deploy"""

from .config_service import ConfigService
from .publish_service import PublishService

__all__ = [
    "ConfigService",
    "PublishService",
]
