"""Helpers for libaccent tests."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from libaccent.strategies import Strategy


def argv(strategy: Strategy) -> tuple[str, ...]:
    """Return the full command line a strategy runs."""
    return (strategy.program, *strategy.args)


def portal_reply(*values: str) -> str:
    """Build ``dbus-send --print-reply=literal`` output for RGB doubles."""
    lines = ["   variant       variant          struct {"]
    lines += [f"            double {value}" for value in values]
    lines.append("         }")
    return "\n".join(lines) + "\n"
