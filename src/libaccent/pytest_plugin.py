"""libaccent pytest plugin."""

from __future__ import annotations

import pytest

from libaccent.detector import AccentColorDetector
from libaccent.test import ScriptedCommandRunner


@pytest.fixture
def scripted_runner() -> ScriptedCommandRunner:
    """Return an empty :class:`libaccent.test.ScriptedCommandRunner`.

    Every command fails to launch until answers are added with
    :meth:`~libaccent.test.ScriptedCommandRunner.set_response`.
    """
    return ScriptedCommandRunner()


@pytest.fixture
def accent_detector(scripted_runner: ScriptedCommandRunner) -> AccentColorDetector:
    """Return a fresh :class:`libaccent.AccentColorDetector`.

    Uses the default strategies wired to :func:`scripted_runner`, so no
    process is spawned.
    """
    return AccentColorDetector(runner=scripted_runner)
