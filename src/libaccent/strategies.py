"""Strategies that read the accent color from one desktop settings source.

libaccent.strategies
~~~~~~~~~~~~~~~~~~~~

Each strategy pairs a fixed command with a rule that turns the command's
output into an :data:`~libaccent.colors.AccentColor`. A strategy has three
possible outcomes, captured by :class:`ProbeResult`:

- a color was found,
- the source answered but has nothing usable (not applicable),
- the command could not deliver output at all (transport failure).
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import re
import typing as t
from abc import ABC, abstractmethod

from . import constants, exc
from .colors import (
    CUSTOM_ACCENT_COLORS,
    YARU_DEFAULT_COLOR,
    YARU_VARIANT_COLORS,
    rgb_to_hex,
)

if t.TYPE_CHECKING:
    from ._internal.command_runner import CommandRunner
    from .colors import AccentColor

logger = logging.getLogger(__name__)


class ProbeStatus(enum.Enum):
    """Outcome of a single probe."""

    OK = "ok"
    NOT_APPLICABLE = "not_applicable"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True)
class ProbeResult:
    """Result of :meth:`Strategy.try_probe`.

    >>> ProbeResult.found("#0073e5").ok
    True
    >>> ProbeResult.not_applicable().color is None
    True
    """

    status: ProbeStatus
    color: AccentColor | None = None
    error: exc.CommandError | None = None

    @classmethod
    def found(cls, color: AccentColor) -> ProbeResult:
        return cls(status=ProbeStatus.OK, color=color)

    @classmethod
    def not_applicable(cls) -> ProbeResult:
        return cls(status=ProbeStatus.NOT_APPLICABLE)

    @classmethod
    def failed(cls, error: exc.CommandError) -> ProbeResult:
        return cls(status=ProbeStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.OK


class Strategy(ABC):
    """Query one settings source for the accent color.

    Subclasses set :attr:`name`, :attr:`program` and :attr:`args` and
    implement :meth:`parse`. Strategies keep no state between calls.
    """

    name: t.ClassVar[str]
    program: t.ClassVar[str]
    args: t.ClassVar[tuple[str, ...]]

    @abstractmethod
    def parse(self, output: str) -> AccentColor | None:
        """Return the color described by ``output``, or None if unusable."""

    async def probe(self, runner: CommandRunner) -> AccentColor | None:
        """Run the query and parse it.

        Raises
        ------
        :exc:`libaccent.exc.CommandError`
            When the command is missing or exits with a non-zero status.
        """
        result = await runner.run(self.program, self.args)
        color = self.parse(result.stdout)
        if color is None:
            logger.debug(f"{self.name}: unusable output {result.stdout.strip()!r}")
        return color

    async def try_probe(self, runner: CommandRunner) -> ProbeResult:
        """Like :meth:`probe`, with transport failures captured in the result."""
        try:
            color = await self.probe(runner)
        except exc.CommandError as e:
            return ProbeResult.failed(e)
        if color is None:
            return ProbeResult.not_applicable()
        return ProbeResult.found(color)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PortalStrategy(Strategy):
    """Read ``accent-color`` from the XDG desktop settings portal.

    The portal replies with three ``double`` values, one per RGB channel.

    >>> PortalStrategy().parse(
    ...     "   variant       variant          struct {\\n"
    ...     "            double 0.92\\n"
    ...     "            double 0.33\\n"
    ...     "            double 0.13\\n"
    ...     "         }\\n"
    ... )
    '#ea5421'
    """

    name = "xdg-desktop-portal"
    program = constants.DBUS_SEND_BIN
    args = (
        "--print-reply=literal",
        "--type=method_call",
        f"--dest={constants.PORTAL_DESTINATION}",
        constants.PORTAL_OBJECT_PATH,
        constants.PORTAL_READ_ONE,
        f"string:{constants.PORTAL_NAMESPACE}",
        f"string:{constants.PORTAL_ACCENT_KEY}",
    )

    DOUBLE_RE = re.compile(r"double\s+([0-9]+(?:[,.][0-9]+)?)")

    def parse(self, output: str) -> AccentColor | None:
        matches = self.DOUBLE_RE.findall(output.strip())
        if len(matches) != 3:
            return None

        channels = [float(match.replace(",", ".")) for match in matches]

        # the portal treats out-of-range channels as an unset accent color
        return rgb_to_hex(channels)


class ThemeNameStrategy(Strategy):
    """Map Ubuntu's Yaru ``gtk-theme`` variants to their accent colors.

    >>> strategy = ThemeNameStrategy()
    >>> strategy.parse("'Yaru-purple-dark'\\n")
    '#7764d8'
    >>> strategy.parse("'Yaru'")
    '#e95420'
    >>> strategy.parse("'Adwaita'") is None
    True
    """

    name = "ubuntu-yaru"
    program = constants.GSETTINGS_BIN
    args = ("get", constants.GNOME_INTERFACE_SCHEMA, constants.GTK_THEME_KEY)

    THEME_RE = re.compile(
        r"^'Yaru(?:-(bark|sage|olive|viridian|prussiangreen|blue|purple|magenta|red))?"
        r"(?:-dark)?'$",
    )

    def parse(self, output: str) -> AccentColor | None:
        match = self.THEME_RE.match(output.strip())
        if match is None:
            return None

        variant = match.group(1)
        if variant is None:
            return YARU_DEFAULT_COLOR
        return YARU_VARIANT_COLORS.get(variant)


class ExtensionStrategy(Strategy):
    """Read the "Custom Accent Colors" GNOME Shell extension setting.

    >>> ExtensionStrategy().parse("'brown'")
    '#865e3c'
    """

    name = "custom-accent-colors"
    program = constants.GSETTINGS_BIN
    args = (
        "get",
        constants.CUSTOM_ACCENT_COLORS_SCHEMA,
        constants.CUSTOM_ACCENT_COLORS_KEY,
    )

    NAME_RE = re.compile(r"^'(green|yellow|orange|red|pink|purple|brown)'$")

    def parse(self, output: str) -> AccentColor | None:
        match = self.NAME_RE.match(output.strip())
        if match is None:
            return None
        return CUSTOM_ACCENT_COLORS.get(match.group(1))


#: Strategies in the order they are tried.
DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    PortalStrategy(),
    ThemeNameStrategy(),
    ExtensionStrategy(),
)
