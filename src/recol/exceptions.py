"""Custom exception hierarchy for recol.

All exceptions that cross layer boundaries must inherit from
:class:`RecolError`.  Raw stream exceptions (``OSError``,
``UnicodeError``) must NEVER propagate beyond the infrastructure
layer — they are caught there and re-raised as a typed subclass
defined here.

Hierarchy
---------
RecolError
├── UsageError
│   ├── UnknownOptionError
│   ├── MissingOptionArgumentError
│   └── MissingColumnSpecError
└── StreamIOError
    ├── InputReadError
    ├── OutputWriteError
    └── OutputClosedError
"""

from __future__ import annotations


class RecolError(Exception):
    """Base exception for all recol errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        usage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

        self.usage: str | None = usage
        """Optional short usage text written after the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(RecolError):
    """Raised when the command line cannot be interpreted."""


class UnknownOptionError(UsageError):
    """Raised when an unrecognized flag is given."""


class MissingOptionArgumentError(UsageError):
    """Raised when a flag that takes a value is given none."""


class MissingColumnSpecError(UsageError):
    """Raised when the column-spec argument is absent or empty."""


# --- Streams ---------------------------------------------------------------

class StreamIOError(RecolError):
    """Raised on an unrecoverable failure of the standard streams."""


class InputReadError(StreamIOError):
    """Raised when standard input cannot be read or decoded."""


class OutputWriteError(StreamIOError):
    """Raised when standard output cannot be written or encoded."""


class OutputClosedError(StreamIOError):
    """Raised when the downstream end of the output pipe has gone away."""
