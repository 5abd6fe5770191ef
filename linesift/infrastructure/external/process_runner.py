"""
Process runner for the external search engine.

This module provides the asyncio-based collaborator that locates the
engine binary, spawns it with a discrete argument vector (never through
a shell) and captures its output.
"""

import asyncio
import os
import shutil
from typing import List, Optional

from ...core.entities import ProcessOutput
from ...core.interfaces import ProcessRunnerInterface
from ...shared.exceptions import ProcessSpawnFailedError, SearchTimeoutError


class AsyncProcessRunner(ProcessRunnerInterface):
    """
    Runs the engine as an asyncio subprocess.

    Each call owns its own child process and buffers, so concurrent
    searches share nothing.
    """

    def resolve_executable(self, executable: str) -> Optional[str]:
        """
        Resolve an executable name or path.

        Args:
            executable: Bare name looked up on PATH, or a path

        Returns:
            Optional[str]: Runnable path, or None
        """
        if os.path.dirname(executable):
            if os.path.isfile(executable) and os.access(executable, os.X_OK):
                return executable
            return None
        return shutil.which(executable)

    async def run(
        self,
        executable: str,
        args: List[str],
        timeout: Optional[float] = None
    ) -> ProcessOutput:
        """
        Spawn the executable and wait for it to exit.

        Args:
            executable: Executable name or path
            args: Argument tokens
            timeout: Optional limit in seconds; None waits indefinitely

        Returns:
            ProcessOutput: Captured stdout, stderr and exit status

        Raises:
            ProcessSpawnFailedError: If the executable is missing or
                cannot be started
            SearchTimeoutError: If the timeout elapsed; the child is
                killed before raising
        """
        resolved = self.resolve_executable(executable)
        if resolved is None:
            raise ProcessSpawnFailedError(
                f"Search engine executable not found: {executable}",
                executable=executable
            )

        try:
            process = await asyncio.create_subprocess_exec(
                resolved,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise ProcessSpawnFailedError(
                f"Failed to start search engine {resolved}: {e.strerror or e}",
                executable=resolved,
                errno=e.errno
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=timeout
            )
        except asyncio.TimeoutError:
            await self._kill(process)
            raise SearchTimeoutError(
                f"Search did not finish within {timeout} seconds",
                executable=resolved,
                timeout_seconds=timeout
            )
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        return ProcessOutput(
            stdout=stdout,
            stderr=stderr,
            returncode=process.returncode
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        # Reap the child so it does not linger as a zombie
        await process.wait()
