# steam_deploy/core/argument_builder.py
"""Assembly of the steamcmd argument vector"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from .manifest_engine import ManifestEngine
from .steam_guard import generate_auth_code, write_session_config
from ..api.exceptions import ConfigError, FileSystemError, MissingInputError
from ..constants import (
    CMD_LOGIN,
    CMD_QUIT,
    CMD_RUN_APP_BUILD,
    CMD_SET_GUARD_CODE,
    CMD_WORKSHOP_BUILD_ITEM,
    SHUTDOWN_ON_FAILED_COMMAND,
    AuthMode,
    PublishMode,
)
from ..models.config import ActionConfig
from ..models.request import PublishRequest
from ..utils.file_utils import LocalFileSystem
from ..utils.output import WorkflowReporter

logger = logging.getLogger(__name__)


class ArgumentBuilder:
    """Builds the full ordered argument list for one steamcmd invocation

    After ``build`` returns, ``mode`` and ``manifest_path`` describe the
    selected publishing mode and the manifest handed to the client.
    """

    def __init__(self,
                 config: ActionConfig,
                 file_system: Optional[LocalFileSystem] = None,
                 reporter: Optional[WorkflowReporter] = None,
                 clock: Callable[[], float] = time.time):
        self.config = config
        self.file_system = file_system or LocalFileSystem()
        self.reporter = reporter or WorkflowReporter()
        self.clock = clock
        self.manifest_engine = ManifestEngine(config.scratch_dir, self.file_system)

        self.mode: Optional[PublishMode] = None
        self.manifest_path: Optional[Path] = None

    def build(self, request: PublishRequest) -> List[str]:
        """
        Build arguments for request

        Args:
            request: Publish request

        Returns:
            Argument vector, without the executable

        Raises:
            ConfigError: Missing input or no authentication strategy
            FileSystemError: Unreadable manifest, or failed file write
        """
        if self.config.steam_dir is None:
            raise ConfigError("STEAM_DIR is not defined.")

        args = list(SHUTDOWN_ON_FAILED_COMMAND)
        args.extend(self._login_args(request))

        self.mode = request.mode
        self.manifest_path = self._resolve_manifest(request)

        if self.mode in (PublishMode.BUILD_FROM_MANIFEST, PublishMode.BUILD_FROM_PARAMETERS):
            args.extend([CMD_RUN_APP_BUILD, str(self.manifest_path), CMD_QUIT])
        else:
            args.extend([CMD_WORKSHOP_BUILD_ITEM, str(self.manifest_path), CMD_QUIT])

        logger.info("Selected publish mode: %s", self.mode.value)
        return args

    def _login_args(self, request: PublishRequest) -> List[str]:
        if not request.username:
            raise MissingInputError("username")

        args = [CMD_LOGIN, request.username]

        if request.auth_mode is AuthMode.SESSION_FILE:
            config_path = self.config.session_config_path
            overwritten = write_session_config(request.config, config_path, self.file_system)
            if overwritten:
                self.reporter.warning(
                    "Steam user config.vdf file already exists! The existing file will be overwritten."
                )
            return args

        if not request.password:
            raise ConfigError(
                "No authentication available: supply either config, or password and shared_secret"
            )
        if not request.shared_secret:
            raise MissingInputError("shared_secret")

        code = generate_auth_code(request.shared_secret, timestamp=self.clock())
        self.reporter.add_mask(code)
        args.extend([request.password, CMD_SET_GUARD_CODE, code])
        return args

    def _resolve_manifest(self, request: PublishRequest) -> Path:
        mode = request.mode

        if mode is PublishMode.BUILD_FROM_MANIFEST:
            return self._check_readable(request.app_build)

        if mode is PublishMode.WORKSHOP_FROM_MANIFEST:
            return self._check_readable(request.workshop_item)

        if not request.app_id:
            raise MissingInputError("app_id")

        content_root = request.content_root or self._default_content_root()

        if mode is PublishMode.WORKSHOP_FROM_PARAMETERS:
            return self.manifest_engine.generate_workshop_manifest(
                request.app_id,
                request.workshop_item_id,
                content_root,
                description=request.description,
            )

        return self.manifest_engine.generate_build_manifest(
            request.app_id,
            content_root,
            description=request.description,
            set_live=request.set_live,
            file_exclusions=request.depot_file_exclusions,
            install_scripts=request.install_scripts,
            depots=request.depots,
        )

    def _default_content_root(self) -> str:
        if self.config.workspace is None:
            raise MissingInputError("content_root")
        return str(self.config.workspace)

    def _check_readable(self, path: str) -> Path:
        path = Path(path)
        try:
            self.file_system.check_readable(path)
        except OSError as e:
            raise FileSystemError(f"Cannot read manifest {path}: {e}", path) from e
        return path
