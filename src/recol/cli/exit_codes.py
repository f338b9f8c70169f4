"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — input fully processed, or help displayed."""

USAGE_ERROR: int = 1
"""Unknown option, missing option argument, or other bad command line."""

GENERAL_ERROR: int = 1
"""A known RecolError was caught. User-facing message was displayed."""

MISSING_COLUMN_SPEC: int = 2
"""The required column-spec argument was absent or empty."""

UNEXPECTED_ERROR: int = 3
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

BROKEN_PIPE: int = 141
"""Downstream reader went away.  Follows POSIX convention (128 + SIGPIPE=13)."""
