# steam_deploy/core/process_runner.py
"""External client invocation"""

import asyncio
import logging
from typing import List

from ..api.exceptions import ProcessError

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Runs the client to completion with the given arguments

    Output is inherited so the client writes straight to the CI console.
    """

    def __init__(self, executable: str):
        self.executable = executable

    async def run(self, args: List[str]) -> int:
        """
        Run executable

        Args:
            args: Argument vector

        Returns:
            Exit code (always 0)

        Raises:
            ProcessError: Process could not start or exited non-zero
        """
        # args carry credentials, only their count is logged
        logger.debug("Running %s with %d argument(s)", self.executable, len(args))

        try:
            process = await asyncio.create_subprocess_exec(self.executable, *args)
        except (OSError, ValueError) as e:
            raise ProcessError(f"Failed to start {self.executable}: {e}") from e

        exit_code = await process.wait()
        if exit_code != 0:
            raise ProcessError(
                f"The process '{self.executable}' failed with exit code {exit_code}",
                exit_code
            )
        return exit_code
