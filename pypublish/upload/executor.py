"""
Command executor abstraction.

Production code runs real processes through SubprocessCommandExecutor; tests
substitute an in-memory implementation of CommandExecutor.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .exceptions import CommandExecutionError, CommandFailedError, CommandTimeoutError
from .models import SubprocessResult


logger = logging.getLogger(__name__)


class CommandExecutor(ABC):
    """Abstract interface for running an external command."""

    @abstractmethod
    def run(self, name: str, args: Sequence[str], timeout: Optional[float] = None) -> SubprocessResult:
        """
        Run a command and collect its combined stdout/stderr.

        Returns:
            SubprocessResult: raw output and the failure, if any
        """
        pass


class SubprocessCommandExecutor(CommandExecutor):
    """Runs commands as real child processes."""

    def run(self, name: str, args: Sequence[str], timeout: Optional[float] = None) -> SubprocessResult:
        command = [name, *args]

        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=timeout,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"{name} timed out after {timeout}s")
            return SubprocessResult(
                output=e.output or b"",
                error=CommandTimeoutError(
                    f"{name} timed out after {timeout}s",
                    command=name,
                    timeout=timeout
                )
            )
        except OSError as e:
            logger.error(f"Failed to start {name}: {e}")
            return SubprocessResult(
                error=CommandExecutionError(f"failed to start {name}: {e}", command=name)
            )

        if completed.returncode != 0:
            return SubprocessResult(
                output=completed.stdout or b"",
                error=CommandFailedError(
                    f"exit status {completed.returncode}",
                    command=name,
                    returncode=completed.returncode
                )
            )

        return SubprocessResult(output=completed.stdout or b"")
