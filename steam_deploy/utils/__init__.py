"""Utility functions for steam-deploy"""

from .file_utils import LocalFileSystem, get_relative_name
from .output import WorkflowReporter, escape_data, escape_property
from .async_utils import run_async

__all__ = [
    "LocalFileSystem",
    "get_relative_name",
    "WorkflowReporter",
    "escape_data",
    "escape_property",
    "run_async",
]
