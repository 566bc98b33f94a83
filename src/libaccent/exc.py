"""Provide exceptions used by libaccent.

libaccent.exc
~~~~~~~~~~~~~

Only transport failures are exceptions. Output that does not match what a
strategy expects is not an error: the strategy reports it as not applicable.
"""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Sequence


class LibAccentException(Exception):
    """Base exception for all libaccent errors."""


class CommandError(LibAccentException):
    """Raised when an external settings command could not deliver output."""

    def __init__(self, cmd: Sequence[str], message: str) -> None:
        self.cmd = list(cmd)
        super().__init__(message)


class CommandNotFound(CommandError):
    """Raised when a program is missing from ``PATH`` or cannot be started.

    >>> err = CommandNotFound(["gsettings", "get"])
    >>> err.program
    'gsettings'
    >>> str(err)
    'Could not start gsettings'
    """

    def __init__(self, cmd: Sequence[str], reason: str | None = None) -> None:
        program = cmd[0] if cmd else ""
        message = f"Could not start {program}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(cmd, message)

    @property
    def program(self) -> str:
        """Name of the program that failed to launch."""
        return self.cmd[0] if self.cmd else ""


class CommandFailed(CommandError):
    """Raised when a program ran but exited with a non-zero status.

    >>> err = CommandFailed(["gsettings", "get"], returncode=1, stderr="No such schema")
    >>> err.returncode
    1
    >>> str(err)
    'Exit code: 1, Stderr: No such schema'
    """

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(cmd, f"Exit code: {returncode}, Stderr: {stderr}")
