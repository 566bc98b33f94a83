"""Detect the desktop accent color by trying each strategy in turn.

libaccent.detector
~~~~~~~~~~~~~~~~~~

:class:`AccentColorDetector` remembers which strategy worked, so later calls
skip the ones that did not. The memo lives as long as the detector; the
module level :func:`detect_accent_color` uses one detector per process.

Concurrent first calls are not de-duplicated: each may run the full discovery
sequence before either records its result.
"""

from __future__ import annotations

import asyncio
import enum
import logging
import typing as t

from .common_async import SubprocessCommandRunner
from .strategies import DEFAULT_STRATEGIES, ProbeStatus

if t.TYPE_CHECKING:
    from collections.abc import Sequence

    from ._internal.command_runner import CommandRunner
    from .colors import AccentColor
    from .strategies import Strategy

logger = logging.getLogger(__name__)


class DetectionStatus(enum.Enum):
    """Lifecycle of a detector's memo."""

    UNKNOWN = "unknown"
    RESOLVED = "resolved"
    EXHAUSTED = "exhausted"


class AccentColorDetector:
    """Find the accent color using the first strategy that applies.

    Parameters
    ----------
    strategies : Sequence[Strategy], optional
        Strategies in the order they are tried. Defaults to
        :data:`~libaccent.strategies.DEFAULT_STRATEGIES`.
    runner : CommandRunner, optional
        Runs the strategies' commands. Defaults to
        :class:`~libaccent.common_async.SubprocessCommandRunner`.

    Examples
    --------
    >>> import asyncio
    >>> from libaccent.strategies import ThemeNameStrategy
    >>> from libaccent.test import ScriptedCommandRunner
    >>> theme = ThemeNameStrategy()
    >>> runner = ScriptedCommandRunner({
    ...     (theme.program, *theme.args): "'Yaru-blue'\\n",
    ... })
    >>> detector = AccentColorDetector(runner=runner)
    >>> asyncio.run(detector.detect())
    '#0073e5'
    >>> detector.state
    <DetectionStatus.RESOLVED: 'resolved'>
    >>> detector.resolved_strategy
    ThemeNameStrategy()
    """

    def __init__(
        self,
        strategies: Sequence[Strategy] | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.strategies: tuple[Strategy, ...] = tuple(
            DEFAULT_STRATEGIES if strategies is None else strategies,
        )
        self.runner: CommandRunner = (
            runner if runner is not None else SubprocessCommandRunner()
        )
        self._state = DetectionStatus.UNKNOWN
        self._resolved_index: int | None = None

    @property
    def state(self) -> DetectionStatus:
        return self._state

    @property
    def resolved_index(self) -> int | None:
        """Index of the memoized strategy, when :attr:`state` is RESOLVED."""
        return self._resolved_index

    @property
    def resolved_strategy(self) -> Strategy | None:
        if self._resolved_index is None:
            return None
        return self.strategies[self._resolved_index]

    async def detect(self) -> AccentColor | None:
        """Return the accent color as ``#rrggbb``, or None.

        Before a strategy has succeeded, failing commands only mean the
        strategy does not apply. Once a strategy is memoized, it is the only
        one run, and its command errors propagate.

        Raises
        ------
        :exc:`libaccent.exc.CommandError`
            Only in the RESOLVED state, when the memoized strategy's command
            cannot be run.
        """
        if self._state is DetectionStatus.EXHAUSTED:
            return None

        if self._state is DetectionStatus.RESOLVED:
            strategy = self.resolved_strategy
            assert strategy is not None
            return await strategy.probe(self.runner)

        return await self._discover()

    async def _discover(self) -> AccentColor | None:
        for index, strategy in enumerate(self.strategies):
            result = await strategy.try_probe(self.runner)

            if result.status is ProbeStatus.OK:
                self._state = DetectionStatus.RESOLVED
                self._resolved_index = index
                logger.debug(f"accent color from {strategy.name}: {result.color}")
                return result.color

            if result.status is ProbeStatus.FAILED:
                # not an error: most systems only support one strategy
                logger.debug(f"{strategy.name} unavailable: {result.error}")
            else:
                logger.debug(f"{strategy.name} does not apply")

        self._state = DetectionStatus.EXHAUSTED
        logger.debug("no accent color strategy applies")
        return None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(state={self._state.value}, "
            f"resolved_index={self._resolved_index})"
        )


_default_detector: AccentColorDetector | None = None


def get_default_detector() -> AccentColorDetector:
    """Return the process-wide detector, creating it on first use."""
    global _default_detector
    if _default_detector is None:
        _default_detector = AccentColorDetector()
    return _default_detector


async def detect_accent_color() -> AccentColor | None:
    """Return the desktop accent color as ``#rrggbb``, or None.

    Results are memoized for the lifetime of the process, see
    :class:`AccentColorDetector`.
    """
    return await get_default_detector().detect()


def detect_accent_color_sync() -> AccentColor | None:
    """Blocking form of :func:`detect_accent_color`.

    Must not be called while an event loop is running in this thread.
    """
    return asyncio.run(detect_accent_color())
