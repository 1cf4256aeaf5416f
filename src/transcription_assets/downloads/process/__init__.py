"""Process execution for external download tools."""

from .base import BaseProcessRunner, ProcessResult
from .runner import SubprocessRunner

__all__ = ["BaseProcessRunner", "ProcessResult", "SubprocessRunner"]
