"""Print the desktop accent color: ``python -m libaccent``."""

from __future__ import annotations

import sys

from libaccent.detector import detect_accent_color_sync


def main() -> int:
    color = detect_accent_color_sync()
    if color is None:
        return 1
    print(color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
