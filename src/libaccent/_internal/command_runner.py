"""Command runner protocol for settings probes."""

from __future__ import annotations

import dataclasses
import typing as t
from typing import Protocol

if t.TYPE_CHECKING:
    from collections.abc import Sequence


@dataclasses.dataclass(frozen=True)
class CommandResult:
    """Output of an external command that exited successfully.

    Attributes
    ----------
    cmd : list[str]
        The command that was executed (for debugging)
    stdout : str
        Everything the command wrote to standard output, decoded as UTF-8
    stderr : str
        Everything the command wrote to standard error, decoded as UTF-8
    returncode : int
        Command return code

    Examples
    --------
    >>> result = CommandResult(cmd=["gsettings"], stdout="'Yaru'\\n")
    >>> result.returncode
    0
    >>> result.stdout.strip()
    "'Yaru'"
    """

    cmd: list[str]
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


class CommandRunner(Protocol):
    """Protocol for anything able to run a settings command.

    Implementations suspend the caller until the process terminates and return
    a :class:`CommandResult` only when the exit code is 0.

    Raises
    ------
    :exc:`libaccent.exc.CommandNotFound`
        When the program is missing or could not be started.
    :exc:`libaccent.exc.CommandFailed`
        When the program exited with a non-zero status.

    Examples
    --------
    >>> from libaccent.common_async import SubprocessCommandRunner
    >>> runner = SubprocessCommandRunner()
    >>> assert hasattr(runner, 'run')
    """

    async def run(self, program: str, args: Sequence[str]) -> CommandResult:
        """Execute ``program`` with ``args``.

        Parameters
        ----------
        program : str
            Name or path of the binary
        args : Sequence[str]
            Arguments passed verbatim

        Returns
        -------
        CommandResult
            Object with cmd, stdout, stderr, returncode attributes
        """
        ...
