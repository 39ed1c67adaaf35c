"""Operation result models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..constants import PublishMode


@dataclass
class LogReadError:
    """A log file that could not be read"""
    path: Path
    message: str


@dataclass
class LogCollectionResult:
    """Outcome of echoing a log directory"""

    directory: Path
    files: List[Path] = field(default_factory=list)
    errors: List[LogReadError] = field(default_factory=list)
    directory_error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.directory_error is None and not self.errors


@dataclass
class PublishResult:
    """Publish operation result"""

    success: bool
    mode: Optional[PublishMode] = None
    manifest_path: Optional[Path] = None
    exit_code: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    logs: Optional[LogCollectionResult] = None
    duration: float = 0.0

    @property
    def logs_printed(self) -> bool:
        return self.logs is not None
