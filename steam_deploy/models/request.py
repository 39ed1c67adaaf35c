"""Publish request model"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from ..constants import AuthMode, LIST_INPUTS, PublishMode


def split_lines(value: Any) -> List[str]:
    """Flatten a multi-line input into a list of non-blank entries

    Entries are kept as written, only blank lines are dropped.

    Args:
        value: Newline separated string, a sequence, or None

    Returns:
        Entries in input order
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = [item[:-1] if item.endswith("\r") else item for item in value.split("\n")]
    else:
        items = [str(item) for item in value]
    return [item for item in items if item.strip()]


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


@dataclass
class PublishRequest:
    """All user-supplied parameters of a publish run"""

    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    shared_secret: Optional[str] = field(default=None, repr=False)
    config: Optional[str] = field(default=None, repr=False)

    app_build: Optional[str] = None
    workshop_item: Optional[str] = None

    app_id: Optional[str] = None
    content_root: Optional[str] = None
    description: Optional[str] = None
    workshop_item_id: Optional[str] = None
    set_live: Optional[str] = None
    depot_file_exclusions: List[str] = field(default_factory=list)
    install_scripts: List[str] = field(default_factory=list)
    depots: List[str] = field(default_factory=list)

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, Any]) -> 'PublishRequest':
        """Create from raw action inputs

        Empty strings count as absent and list inputs are split on newlines.
        Unknown keys are ignored.
        """
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in inputs:
                continue
            value = inputs[f.name]
            if f.name in LIST_INPUTS:
                kwargs[f.name] = split_lines(value)
            else:
                kwargs[f.name] = _blank_to_none(value)
        return cls(**kwargs)

    @property
    def mode(self) -> PublishMode:
        """Effective publishing mode, first match wins"""
        if self.app_build:
            return PublishMode.BUILD_FROM_MANIFEST
        if self.workshop_item:
            return PublishMode.WORKSHOP_FROM_MANIFEST
        if self.workshop_item_id:
            return PublishMode.WORKSHOP_FROM_PARAMETERS
        return PublishMode.BUILD_FROM_PARAMETERS

    @property
    def auth_mode(self) -> AuthMode:
        if self.config:
            return AuthMode.SESSION_FILE
        return AuthMode.CREDENTIALS

    def secrets(self) -> List[str]:
        """Secret values that must never reach the console"""
        return [s for s in (self.password, self.shared_secret, self.config) if s]
