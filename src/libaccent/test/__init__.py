"""Helpers for testing libaccent and code that depends on it."""

from __future__ import annotations

import logging
import typing as t

from libaccent import exc
from libaccent._internal.command_runner import CommandResult

if t.TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    Response = t.Union[str, CommandResult, exc.CommandError]

logger = logging.getLogger(__name__)


class ScriptedCommandRunner:
    """Command runner that answers from a table instead of spawning processes.

    Keys are full argv tuples (program first). Values are either stdout text,
    a ready :class:`CommandResult`, or a :exc:`~libaccent.exc.CommandError` to
    raise. Commands missing from the table behave like a missing program.

    Every call is recorded in :attr:`calls`.

    Examples
    --------
    >>> import asyncio
    >>> runner = ScriptedCommandRunner({("gsettings", "get", "a", "b"): "'x'"})
    >>> asyncio.run(runner.run("gsettings", ["get", "a", "b"])).stdout
    "'x'"
    >>> asyncio.run(runner.run("dbus-send", []))
    Traceback (most recent call last):
    ...
    libaccent.exc.CommandNotFound: Could not start dbus-send
    >>> runner.calls
    [['gsettings', 'get', 'a', 'b'], ['dbus-send']]
    """

    def __init__(self, responses: Mapping[tuple[str, ...], Response] | None = None) -> None:
        self.responses: dict[tuple[str, ...], Response] = dict(responses or {})
        self.calls: list[list[str]] = []

    def set_response(self, cmd: Sequence[str], response: Response) -> None:
        """Add or replace the answer for ``cmd``."""
        self.responses[tuple(cmd)] = response

    def count(self, program: str) -> int:
        """Return how many calls were made to ``program``."""
        return sum(1 for cmd in self.calls if cmd[0] == program)

    async def run(self, program: str, args: Sequence[str]) -> CommandResult:
        cmd = [program, *args]
        self.calls.append(cmd)
        logger.debug(f"scripted run: {cmd}")

        response = self.responses.get(tuple(cmd))
        if response is None:
            raise exc.CommandNotFound(cmd)
        if isinstance(response, exc.CommandError):
            raise response
        if isinstance(response, CommandResult):
            return response
        return CommandResult(cmd=cmd, stdout=response)
