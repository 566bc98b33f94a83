"""Run settings commands through :py:mod:`asyncio.subprocess`.

libaccent.common_async
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import typing as t

from . import exc
from ._internal.command_runner import CommandResult

if t.TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Default :class:`~libaccent._internal.command_runner.CommandRunner`.

    Output of both streams is read until EOF and the process is waited for on
    every path, so nothing is left open whether the command succeeds or fails.

    Examples
    --------
    A missing program is a launch failure:

    >>> import asyncio
    >>> runner = SubprocessCommandRunner()
    >>> asyncio.run(runner.run("libaccent-no-such-program", []))
    Traceback (most recent call last):
    ...
    libaccent.exc.CommandNotFound: Could not start libaccent-no-such-program
    """

    async def run(self, program: str, args: Sequence[str]) -> CommandResult:
        """Run ``program`` and return its output once it has exited."""
        cmd = [program, *(str(a) for a in args)]

        program_bin = shutil.which(program)
        if not program_bin:
            raise exc.CommandNotFound(cmd)

        try:
            process = await asyncio.create_subprocess_exec(
                program_bin,
                *cmd[1:],
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise exc.CommandNotFound(cmd, reason=str(e)) from e
        except Exception:
            logger.exception(f"Exception for {' '.join(cmd)}")
            raise

        try:
            stdout_bytes, stderr_bytes = await process.communicate()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
            await process.wait()
            raise

        returncode = process.returncode if process.returncode is not None else 0
        stdout = stdout_bytes.decode("utf-8", errors="backslashreplace")
        stderr = stderr_bytes.decode("utf-8", errors="backslashreplace")

        logger.debug(
            "stdout for {cmd}: {stdout!r}".format(
                cmd=" ".join(cmd),
                stdout=stdout,
            ),
        )

        if returncode != 0:
            raise exc.CommandFailed(cmd, returncode=returncode, stderr=stderr)

        return CommandResult(
            cmd=cmd,
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
        )
