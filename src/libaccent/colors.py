"""Accent color values and lookup tables.

libaccent.colors
~~~~~~~~~~~~~~~~

An accent color is a lowercase ``#rrggbb`` string.
"""

from __future__ import annotations

import math
import re
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

AccentColor = str

ACCENT_COLOR_RE = re.compile(r"^#[0-9a-f]{6}$")

#: Ubuntu ships its accent colors as Yaru theme variants. The orange default
#: is the bare ``Yaru`` theme.
YARU_DEFAULT_COLOR: AccentColor = "#e95420"

YARU_VARIANT_COLORS: Mapping[str, AccentColor] = {
    "bark": "#787859",
    "sage": "#657b69",
    "olive": "#4b8501",
    "viridian": "#03875b",
    "prussiangreen": "#308280",
    "blue": "#0073e5",
    "purple": "#7764d8",
    "magenta": "#b34bc3",
    "red": "#da3450",
}

#: Colors offered by the "Custom Accent Colors" GNOME Shell extension.
CUSTOM_ACCENT_COLORS: Mapping[str, AccentColor] = {
    "green": "#2ec27e",
    "yellow": "#f5c211",
    "orange": "#e66100",
    "red": "#c01c28",
    "pink": "#dc8add",
    "purple": "#813d9c",
    "brown": "#865e3c",
}


def is_accent_color(value: object) -> bool:
    """Return True if ``value`` is a lowercase ``#rrggbb`` string.

    >>> is_accent_color("#0073e5")
    True
    >>> is_accent_color("#0073E5")
    False
    >>> is_accent_color("#0073e5ff")
    False
    """
    return isinstance(value, str) and ACCENT_COLOR_RE.match(value) is not None


def channel_to_hex(value: float) -> str:
    """Scale a channel in ``[0.0, 1.0]`` to a two digit hex byte.

    >>> channel_to_hex(0.92)
    'ea'
    >>> channel_to_hex(0.0)
    '00'
    >>> channel_to_hex(1.0)
    'ff'
    """
    return f"{math.floor(value * 255):02x}"


def rgb_to_hex(channels: Sequence[float]) -> AccentColor | None:
    """Return ``#rrggbb`` for fractional RGB channels.

    Returns None when there are not exactly three channels or when any channel
    lies outside ``[0.0, 1.0]``. No clamping is done.

    >>> rgb_to_hex([0.92, 0.33, 0.13])
    '#ea5421'
    >>> rgb_to_hex([0.5, 1.5, 0.5]) is None
    True
    """
    if len(channels) != 3:
        return None
    if any(not 0.0 <= value <= 1.0 for value in channels):
        return None
    return "#" + "".join(channel_to_hex(value) for value in channels)
