"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete stream
wrappers, so it can be driven by plain lists in tests.
"""

from __future__ import annotations

from typing import Protocol


class LineSink(Protocol):
    """Contract for output destinations.

    Any object that implements :meth:`write_line` and :meth:`flush`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def write_line(self, text: str) -> None:
        """Write *text* followed by exactly one line terminator.

        The whole line must be handed to the underlying stream in one
        write so that a partially written line is never observed.

        Raises
        ------
        OutputWriteError
            When the destination rejects the data.
        OutputClosedError
            When the destination has been closed by the reader.
        """
        ...  # pragma: no cover

    def flush(self) -> None:
        """Push any buffered output to the destination."""
        ...  # pragma: no cover
