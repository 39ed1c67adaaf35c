"""Core functionality for steam-deploy"""

from .vdf_writer import VdfDocument, VdfNode, escape
from .manifest_engine import ManifestEngine
from .steam_guard import generate_auth_code, write_session_config
from .argument_builder import ArgumentBuilder
from .log_collector import LogCollector
from .process_runner import ProcessRunner

__all__ = [
    "VdfDocument",
    "VdfNode",
    "escape",
    "ManifestEngine",
    "generate_auth_code",
    "write_session_config",
    "ArgumentBuilder",
    "LogCollector",
    "ProcessRunner",
]
