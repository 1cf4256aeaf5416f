"""Base interface for running external processes."""

import typing as t
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished process."""

    returncode: int
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class BaseProcessRunner(ABC):
    """Abstract base class for process execution.

    Lets the downloader be tested with a stand-in that never spawns the
    real tool.
    """

    @abstractmethod
    def run(
        self, command: t.Sequence[str], *, capture_stderr: bool = False
    ) -> ProcessResult:
        """Run a command to completion with stdin and stdout suppressed.

        Args:
            command: Program followed by its arguments
            capture_stderr: Return stderr as text instead of discarding it

        Returns:
            The exit status and, if requested, the captured stderr.

        Raises:
            OSError: If the process cannot be spawned.
        """
        pass
