"""Errors raised while setting up and running a two-command pipeline."""

from __future__ import annotations

import os
import sys
from typing import TextIO

EXIT_FAILURE = 1
EXIT_COMMAND_NOT_FOUND = 127


class PipexError(Exception):
    """Base error carrying the exit status the program ends with."""

    exit_status: int = EXIT_FAILURE

    def __init__(self, message: str, exit_status: int | None = None) -> None:
        super().__init__(message)
        if exit_status is not None:
            self.exit_status = exit_status

    def report(self, stream: TextIO | None = None) -> None:
        """Write the error message and a newline to ``stream`` (stderr by default)."""
        target = sys.stderr if stream is None else stream
        target.write(f"{self}\n")


class UsageError(PipexError):
    """The command line does not hold exactly four arguments."""

    def __init__(self, message: str = "Error: Wrong number of arguments") -> None:
        super().__init__(message, EXIT_FAILURE)


class FileOpenError(PipexError):
    """The input or output file could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}", EXIT_FAILURE)

    @classmethod
    def from_os_error(cls, path: str, error: OSError) -> FileOpenError:
        """Build the error from the ``OSError`` that opening ``path`` raised."""
        reason = os.strerror(error.errno) if error.errno else str(error)
        return cls(path, reason)


class CommandNotFoundError(PipexError):
    """A command is empty, cannot be found, or cannot be executed."""

    def __init__(
        self,
        command: str,
        *,
        quoted: bool = False,
        reason: str | None = None,
    ) -> None:
        self.command = command
        if reason:
            message = f"{command}: {reason}"
        elif quoted:
            message = f"'{command}': Comand not found"
        else:
            message = f"{command}: Comand not found"
        super().__init__(message, EXIT_COMMAND_NOT_FOUND)