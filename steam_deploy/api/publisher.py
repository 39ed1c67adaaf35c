"""Publisher API for publishing operations"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core import ManifestEngine
from ..models import ActionConfig, PublishRequest, PublishResult
from ..services import PublishService
from ..utils.async_utils import run_async
from ..utils.output import WorkflowReporter


class Publisher:
    """Publisher class for publishing operations"""

    def __init__(self,
                 config: Optional[ActionConfig] = None,
                 reporter: Optional[WorkflowReporter] = None):
        """
        Initialize publisher

        Args:
            config: Environment-derived settings (read from the environment if omitted)
            reporter: CI console writer
        """
        self.config = config or ActionConfig.from_env()
        self.reporter = reporter or WorkflowReporter()
        self.service = PublishService(self.config, self.reporter)

    def publish(self, request: PublishRequest) -> PublishResult:
        """
        Publish a build or workshop item

        Args:
            request: Publish request

        Returns:
            PublishResult: Publishing result
        """
        return run_async(self.service.publish(request))

    def publish_inputs(self, inputs: Dict[str, Any]) -> PublishResult:
        """
        Publish from raw action inputs

        Args:
            inputs: Mapping of input names to values

        Returns:
            PublishResult: Publishing result
        """
        return self.publish(PublishRequest.from_inputs(inputs))

    def generate_build_manifest(self, request: PublishRequest) -> Path:
        """Write the app build manifest for request without publishing"""
        return self._manifest_engine().generate_build_manifest(
            request.app_id,
            request.content_root or str(self.config.workspace or Path.cwd()),
            description=request.description,
            set_live=request.set_live,
            file_exclusions=request.depot_file_exclusions,
            install_scripts=request.install_scripts,
            depots=request.depots,
        )

    def generate_workshop_manifest(self, request: PublishRequest) -> Path:
        """Write the workshop item manifest for request without publishing"""
        return self._manifest_engine().generate_workshop_manifest(
            request.app_id,
            request.workshop_item_id,
            request.content_root or str(self.config.workspace or Path.cwd()),
            description=request.description,
        )

    def _manifest_engine(self) -> ManifestEngine:
        return ManifestEngine(self.config.scratch_dir, self.service.file_system)


def publish(request: Union[PublishRequest, Dict[str, Any], None] = None, **inputs) -> PublishResult:
    """
    Publish (convenience function)

    Args:
        request: Publish request, or a mapping of input names
        **inputs: Input values (alternative to request)
            - config_override: ActionConfig to use instead of the environment

    Returns:
        PublishResult: Publishing result
    """
    config = inputs.pop('config_override', None)

    if request is None:
        request = PublishRequest.from_inputs(inputs)
    elif isinstance(request, dict):
        request = PublishRequest.from_inputs(request)

    publisher = Publisher(config)
    return publisher.publish(request)
