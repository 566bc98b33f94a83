"""libaccent, detect the desktop accent color on Linux."""

from .__about__ import (
    __author__,
    __copyright__,
    __description__,
    __email__,
    __license__,
    __package_name__,
    __title__,
    __version__,
)
from .detector import (
    AccentColorDetector,
    DetectionStatus,
    detect_accent_color,
    detect_accent_color_sync,
)

__all__ = (
    "AccentColorDetector",
    "DetectionStatus",
    "__author__",
    "__copyright__",
    "__description__",
    "__email__",
    "__license__",
    "__package_name__",
    "__title__",
    "__version__",
    "detect_accent_color",
    "detect_accent_color_sync",
)
