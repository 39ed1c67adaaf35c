"""Configuration data models"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..constants import (
    DEFAULT_STEAMCMD,
    ENV_RUNNER_DEBUG,
    ENV_RUNNER_TEMP,
    ENV_STEAM_DIR,
    ENV_STEAMCMD,
    ENV_WORKSPACE,
    LOGS_DIR,
    SCRATCH_DIR_NAME,
    SESSION_CONFIG_DIR,
    SESSION_CONFIG_FILE,
)


@dataclass
class ActionConfig:
    """Environment-derived settings shared by every component

    Attributes:
        steam_dir: Base directory of the client's persistent state
        runner_temp: Temp directory holding the manifest scratch directory
        workspace: Default content root
        steamcmd: Client executable name or path
        debug: Print client logs even when the run succeeds
    """

    steam_dir: Optional[Path] = None
    runner_temp: Optional[Path] = None
    workspace: Optional[Path] = None
    steamcmd: str = DEFAULT_STEAMCMD
    debug: bool = False

    def __post_init__(self):
        if self.steam_dir is not None:
            self.steam_dir = Path(self.steam_dir)
        if self.runner_temp is not None:
            self.runner_temp = Path(self.runner_temp)
        if self.workspace is not None:
            self.workspace = Path(self.workspace)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ActionConfig':
        """Create from process environment"""
        env = os.environ if environ is None else environ

        def path_or_none(name: str) -> Optional[Path]:
            value = env.get(name)
            return Path(value) if value else None

        return cls(
            steam_dir=path_or_none(ENV_STEAM_DIR),
            runner_temp=path_or_none(ENV_RUNNER_TEMP),
            workspace=path_or_none(ENV_WORKSPACE),
            steamcmd=env.get(ENV_STEAMCMD) or DEFAULT_STEAMCMD,
            debug=env.get(ENV_RUNNER_DEBUG) == "1",
        )

    @property
    def scratch_dir(self) -> Path:
        """Directory receiving generated manifests"""
        base = self.runner_temp if self.runner_temp is not None else Path.cwd()
        return base / SCRATCH_DIR_NAME

    @property
    def session_config_path(self) -> Optional[Path]:
        if self.steam_dir is None:
            return None
        return self.steam_dir / SESSION_CONFIG_DIR / SESSION_CONFIG_FILE

    @property
    def logs_dir(self) -> Optional[Path]:
        if self.steam_dir is None:
            return None
        return self.steam_dir / LOGS_DIR
