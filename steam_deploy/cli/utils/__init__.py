"""CLI utility functions"""

from .output import (
    format_publish_result,
    print_manifest_written,
    print_error,
)

__all__ = [
    "format_publish_result",
    "print_manifest_written",
    "print_error",
]
