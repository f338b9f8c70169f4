"""Text-stream adapters for standard input and standard output.

:class:`TextLineSource` yields input lines without their terminator and
:class:`TextLineSink` satisfies :class:`~recol.core.protocols.LineSink`.
Both map stream failures to :class:`~recol.exceptions.StreamIOError`
subclasses so nothing raw escapes this layer.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from recol.exceptions import InputReadError, OutputClosedError, OutputWriteError

LINE_TERMINATOR: str = "\n"


def configure_standard_streams() -> tuple[TextIO, TextIO]:
    """Prepare ``sys.stdin`` / ``sys.stdout`` for byte-faithful line I/O.

    * ``errors="surrogateescape"`` lets undecodable bytes pass through.
    * ``newline="\\n"`` disables newline translation both ways.
    * ``line_buffering=True`` on stdout flushes each line as one unit.

    Streams that cannot be reconfigured (e.g. replaced by a test
    harness) are returned unchanged.
    """
    stdin: TextIO = sys.stdin
    stdout: TextIO = sys.stdout

    reconfigure_in = getattr(stdin, "reconfigure", None)
    if reconfigure_in is not None:
        reconfigure_in(errors="surrogateescape", newline=LINE_TERMINATOR)

    reconfigure_out = getattr(stdout, "reconfigure", None)
    if reconfigure_out is not None:
        reconfigure_out(
            errors="surrogateescape",
            newline=LINE_TERMINATOR,
            line_buffering=True,
        )

    return stdin, stdout


class TextLineSource:
    """Iterate over the lines of a text stream, terminators removed.

    A final line without a terminator is yielded like any other.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream: TextIO = stream

    def __iter__(self) -> Iterator[str]:
        try:
            for raw in self._stream:
                if raw.endswith(LINE_TERMINATOR):
                    yield raw[: -len(LINE_TERMINATOR)]
                else:
                    yield raw
        except (OSError, UnicodeError) as exc:
            raise InputReadError(f"cannot read standard input: {exc}") from exc


class TextLineSink:
    """Write whole lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream: TextIO = stream

    def write_line(self, text: str) -> None:
        """Write *text* and its terminator with a single ``write()`` call."""
        try:
            self._stream.write(text + LINE_TERMINATOR)
        except BrokenPipeError as exc:
            raise OutputClosedError("standard output was closed") from exc
        except (OSError, UnicodeError) as exc:
            raise OutputWriteError(f"cannot write standard output: {exc}") from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except BrokenPipeError as exc:
            raise OutputClosedError("standard output was closed") from exc
        except OSError as exc:
            raise OutputWriteError(f"cannot write standard output: {exc}") from exc
