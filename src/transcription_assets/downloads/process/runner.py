"""Process runner backed by the subprocess module."""

import subprocess
import typing as t

from .base import BaseProcessRunner, ProcessResult


class SubprocessRunner(BaseProcessRunner):
    """Runs commands with subprocess.run and waits without a timeout."""

    def run(
        self, command: t.Sequence[str], *, capture_stderr: bool = False
    ) -> ProcessResult:
        completed = subprocess.run(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE if capture_stderr else subprocess.DEVNULL,
            check=False,
        )
        stderr = ""
        if capture_stderr and completed.stderr:
            stderr = completed.stderr.decode("utf-8", errors="replace")
        return ProcessResult(returncode=completed.returncode, stderr=stderr)
