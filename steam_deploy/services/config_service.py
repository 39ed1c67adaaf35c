# steam_deploy/services/config_service.py
"""Action input resolution"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import ENV_INPUT_PREFIX, INPUT_NAMES


def input_env_name(name: str) -> str:
    """Environment variable the CI platform binds an input to"""
    return ENV_INPUT_PREFIX + name.replace(" ", "_").upper()


class ConfigService:
    """Merges action inputs from an optional YAML file and explicit values"""

    def __init__(self, inputs_file: Optional[Path] = None):
        """Initialize config service

        Args:
            inputs_file: YAML mapping of input names to values
        """
        self.inputs_file = Path(inputs_file) if inputs_file else None

    def load_inputs_file(self) -> Dict[str, Any]:
        """Load inputs from file

        Returns:
            Mapping of known input names to values
        """
        if self.inputs_file is None:
            return {}

        if not self.inputs_file.exists():
            raise ConfigError(f"Inputs file not found: {self.inputs_file}")

        with open(self.inputs_file, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid inputs file {self.inputs_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Inputs file must contain a mapping: {self.inputs_file}")

        unknown = sorted(set(data) - set(INPUT_NAMES))
        if unknown:
            raise ConfigError(f"Unknown inputs in {self.inputs_file}: {', '.join(unknown)}")

        return {key: self._normalize(value) for key, value in data.items()}

    def resolve(self, explicit: Mapping[str, Any]) -> Dict[str, Any]:
        """Resolve inputs, explicit non-empty values win over the file

        Args:
            explicit: Values from the command line or environment

        Returns:
            Merged inputs
        """
        merged = self.load_inputs_file()
        for key, value in explicit.items():
            if value is not None and value != "":
                merged[key] = value
        return merged

    @staticmethod
    def _normalize(value: Any) -> Any:
        if value is None or isinstance(value, list):
            return value
        return str(value)
