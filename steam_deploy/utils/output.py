# steam_deploy/utils/output.py
"""CI console output using GitHub workflow commands"""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console


def escape_data(message: str) -> str:
    """Escape a workflow command message"""
    return (
        str(message)
        .replace("%", "%25")
        .replace("\r", "%0D")
        .replace("\n", "%0A")
    )


def escape_property(value: str) -> str:
    """Escape a workflow command property value"""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class WorkflowReporter:
    """Writes severity-tagged messages and log groups to the CI console

    Info lines are printed verbatim. Warnings, errors and debug lines use
    workflow commands so the log viewer can highlight and fold them.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True, highlight=False)

    def _write(self, text: str) -> None:
        # bypass rich rendering, which strips control characters
        stream = self.console.file
        stream.write(text + "\n")
        stream.flush()

    def _command(self, command: str, message: str = "", title: Optional[str] = None) -> None:
        props = f" title={escape_property(title)}" if title else ""
        self._write(f"::{command}{props}::{escape_data(message)}")

    def info(self, message: str) -> None:
        self._write(message)

    def debug(self, message: str) -> None:
        self._command("debug", message)

    def warning(self, message: str, title: Optional[str] = None) -> None:
        self._command("warning", message, title)

    def error(self, message: str, title: Optional[str] = None) -> None:
        self._command("error", message, title)

    def add_mask(self, value: str) -> None:
        """Hide value from all subsequent console output"""
        if value:
            self._command("add-mask", value)

    def start_group(self, name: str) -> None:
        self._command("group", name)

    def end_group(self) -> None:
        self._command("endgroup")

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        """Wrap output in a collapsible group"""
        self.start_group(name)
        try:
            yield
        finally:
            self.end_group()
