"""
Client interface definitions for external process interactions.

This module defines the abstract interface that process runners
must follow so the search service never depends on how the engine
binary is located or spawned.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import ProcessOutput


class ProcessRunnerInterface(ABC):
    """Interface for running the external search engine."""

    @abstractmethod
    async def run(
        self,
        executable: str,
        args: List[str],
        timeout: Optional[float] = None
    ) -> ProcessOutput:
        """
        Spawn the executable and capture its output.

        A non-zero exit status is reported in the returned output,
        not raised.

        Args:
            executable: Executable name or path
            args: Discrete argument tokens, passed without a shell
            timeout: Optional limit in seconds; None waits indefinitely

        Returns:
            ProcessOutput: Captured stdout, stderr and exit status

        Raises:
            ProcessSpawnFailedError: If the process could not be started
            SearchTimeoutError: If the timeout elapsed
        """
        pass

    @abstractmethod
    def resolve_executable(self, executable: str) -> Optional[str]:
        """
        Resolve an executable name to a runnable path.

        Args:
            executable: Executable name or path

        Returns:
            Optional[str]: Resolved path, or None if not found
        """
        pass
