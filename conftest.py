"""Conftest.py (root-level).

We keep this in root so pytest's pytester plugin is available to tests/, and so
conftest.py is not included in the wheel.

See "pytest_plugins in non-top-level conftest files" in
https://docs.pytest.org/en/stable/deprecations.html
"""

from __future__ import annotations

pytest_plugins = ["pytester"]
