"""Metadata package for libaccent."""

from __future__ import annotations

__title__ = "libaccent"
__package_name__ = "libaccent"
__version__ = "0.1.0"
__description__ = "Detect the desktop accent color on Linux"
__email__ = "maintainers@libaccent.invalid"
__author__ = "libaccent contributors"
__github__ = "https://github.com/libaccent/libaccent"
__docs__ = "https://github.com/libaccent/libaccent#readme"
__tracker__ = "https://github.com/libaccent/libaccent/issues"
__pypi__ = "https://pypi.org/project/libaccent/"
__license__ = "MIT"
__copyright__ = "Copyright 2026- libaccent contributors"
