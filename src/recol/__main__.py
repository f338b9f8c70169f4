"""Allow ``python -m recol`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m recol`` behaves identically to the ``recol`` console
script.
"""

from __future__ import annotations

from recol.cli.app import cli

if __name__ == "__main__":
    cli()
