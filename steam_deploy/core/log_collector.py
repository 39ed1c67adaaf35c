# steam_deploy/core/log_collector.py
"""Echo client log files into the CI console"""

import logging
from pathlib import Path
from typing import Optional

from ..models.result import LogCollectionResult, LogReadError
from ..utils.file_utils import LocalFileSystem, get_relative_name
from ..utils.output import WorkflowReporter

logger = logging.getLogger(__name__)


class LogCollector:
    """Prints every log file of a directory inside its own collapsible group"""

    def __init__(self,
                 reporter: WorkflowReporter,
                 file_system: Optional[LocalFileSystem] = None):
        self.reporter = reporter
        self.file_system = file_system or LocalFileSystem()

    async def collect(self, directory: Path, recursive: bool = True) -> LogCollectionResult:
        """
        Print log files found in directory

        Failures are reported to the console and recorded in the result,
        never raised.

        Args:
            directory: Logs directory
            recursive: Descend into subdirectories

        Returns:
            LogCollectionResult
        """
        directory = Path(directory)
        result = LogCollectionResult(directory=directory)
        self.reporter.info(str(directory))

        try:
            files = self.file_system.list_files(directory, recursive=recursive)
        except OSError as e:
            result.directory_error = str(e)
            self.reporter.error(f"Failed to read logs in {directory}!\n{e}")
            return result

        for path in files:
            try:
                content = await self.file_system.read_text(path)
            except OSError as e:
                result.errors.append(LogReadError(path=path, message=str(e)))
                self.reporter.error(f"Failed to read log: {path}\n{e}")
                continue

            with self.reporter.group(get_relative_name(directory, path)):
                self.reporter.info(content)
            result.files.append(path)

        logger.debug("Printed %d log file(s) from %s", len(result.files), directory)
        return result
