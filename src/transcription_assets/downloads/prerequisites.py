"""Checks run before every download attempt."""

import typing as t
from pathlib import Path

from ..domain.exceptions import (
    RootMissingError,
    RootNotConfiguredError,
    ToolUnavailableError,
)
from ..infrastructure.logging import get_logger
from .handlers.base import BaseLinkHandler
from .process.base import BaseProcessRunner

if t.TYPE_CHECKING:
    import loguru


class PrerequisiteChecker:
    """Validates the download root and the external tool.

    Nothing is cached between calls: the root may be removed and the tool
    uninstalled while the application is running.
    """

    def __init__(
        self,
        runner: BaseProcessRunner,
        *,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        self._runner = runner
        self._logger = logger or get_logger(__name__)

    def check(self, root: Path | None, handler: BaseLinkHandler) -> Path:
        """Run all checks and return the validated root.

        The root is checked first so a missing configuration never spawns
        a process.

        Raises:
            RootNotConfiguredError: If no root is set.
            RootMissingError: If the root is not an existing directory.
            ToolUnavailableError: If the tool cannot be run.
        """
        validated_root = self.verify_root(root)
        self.verify_tool(handler)
        return validated_root

    def verify_root(self, root: Path | None) -> Path:
        if root is None:
            raise RootNotConfiguredError()
        if not root.is_dir():
            raise RootMissingError(root)
        return root

    def verify_tool(self, handler: BaseLinkHandler) -> None:
        """Run the handler's probe command with all output discarded."""
        command = handler.probe_command()
        try:
            result = self._runner.run(command)
        except OSError as exc:
            self._logger.debug(f"Probe {command} could not start: {exc}")
            raise ToolUnavailableError(handler.tool, "cannot be found") from exc

        if not result.succeeded:
            self._logger.debug(f"Probe {command} exited with {result.returncode}")
            raise ToolUnavailableError(handler.tool, "failed")
