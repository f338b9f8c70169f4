"""Shared pytest fixtures and configuration for the recol test suite.

Guidelines
----------
* Tests never touch the real process stdin/stdout; streams are
  ``io.StringIO`` objects passed to :func:`recol.cli.app.main`.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from recol.cli.app import main

RunRecol = Callable[..., tuple[int, str]]


@pytest.fixture
def run_recol() -> RunRecol:
    """Return a helper that runs ``main`` on *text* and captures stdout."""

    def _run(argv: list[str], text: str = "") -> tuple[int, str]:
        stdout = io.StringIO()
        code = main(argv, stdin=io.StringIO(text), stdout=stdout)
        return code, stdout.getvalue()

    return _run
