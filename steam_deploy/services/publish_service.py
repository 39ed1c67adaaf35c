# steam_deploy/services/publish_service.py
"""Publish service implementation"""

import logging
import time
from typing import Optional

from ..api.exceptions import SteamDeployError
from ..core import ArgumentBuilder, LogCollector, ProcessRunner
from ..models import ActionConfig, PublishRequest, PublishResult
from ..utils.file_utils import LocalFileSystem
from ..utils.output import WorkflowReporter

logger = logging.getLogger(__name__)


class PublishService:
    """Publishing service implementation"""

    def __init__(self,
                 config: ActionConfig,
                 reporter: Optional[WorkflowReporter] = None,
                 runner: Optional[ProcessRunner] = None,
                 file_system: Optional[LocalFileSystem] = None):
        """
        Initialize publish service

        Args:
            config: Environment-derived settings
            reporter: CI console writer
            runner: Process runner (defaults to the configured steamcmd)
            file_system: File access implementation
        """
        self.config = config
        self.reporter = reporter or WorkflowReporter()
        self.runner = runner or ProcessRunner(config.steamcmd)
        self.file_system = file_system or LocalFileSystem()

    async def publish(self, request: PublishRequest) -> PublishResult:
        """
        Publish workflow: build arguments, run client, print logs

        Args:
            request: Publish request

        Returns:
            PublishResult: Publishing result
        """
        start_time = time.time()
        print_logs = self.config.debug
        result = PublishResult(success=False, mode=request.mode)

        for secret in request.secrets():
            self.reporter.add_mask(secret)

        builder = ArgumentBuilder(self.config, self.file_system, self.reporter)

        try:
            # 1. Assemble arguments, generating manifests if needed
            args = builder.build(request)
            result.manifest_path = builder.manifest_path

            # 2. Run the client
            result.exit_code = await self.runner.run(args)
            result.success = True

        except SteamDeployError as e:
            print_logs = True
            result.error = str(e)
            result.error_code = e.error_code
            result.exit_code = getattr(e, 'exit_code', None)
            self.reporter.error(str(e))
            logger.debug("Publish failed", exc_info=True)

        # 3. Print logs on failure or when debugging
        if print_logs:
            result.logs = await self._collect_logs()

        result.duration = time.time() - start_time
        return result

    async def _collect_logs(self):
        logs_dir = self.config.logs_dir
        if logs_dir is None:
            self.reporter.error("Failed to read logs: STEAM_DIR is not defined.")
            return None

        collector = LogCollector(self.reporter, self.file_system)
        return await collector.collect(logs_dir, recursive=True)
