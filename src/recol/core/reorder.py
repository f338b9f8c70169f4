"""Core reorder service — turns input lines into output lines.

The service holds one immutable :class:`~recol.core.models.ReorderConfig`
and applies it to every line independently.  It reads from any iterable
of strings and writes to any :class:`~recol.core.protocols.LineSink`,
keeping the core free of direct stream access.

Guarantees
----------
* Exactly one output line per input line.
* No state carried from one line to the next.
* No exception for out-of-range or malformed column references.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from recol.core.fields import split_fields
from recol.core.models import ColumnRef, ColumnSpec, ReorderConfig
from recol.core.protocols import LineSink


def select_field(fields: Sequence[str], index: int) -> str:
    """Return the 1-based field *index*, or ``""`` when out of range."""
    if 1 <= index <= len(fields):
        return fields[index - 1]
    return ""


def render_tokens(fields: Sequence[str], spec: ColumnSpec) -> list[str]:
    """Produce one output token per spec item, in spec order."""
    return [
        select_field(fields, item.index) if isinstance(item, ColumnRef) else item.text
        for item in spec
    ]


class ReorderService:
    """Stateless per-line column reordering.

    Parameters
    ----------
    config:
        The run configuration, shared read-only by every line.
    """

    def __init__(self, config: ReorderConfig) -> None:
        self._config: ReorderConfig = config

    @property
    def config(self) -> ReorderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reorder_line(self, line: str) -> str:
        """Return the output line for *line*, without a terminator.

        *line* must not carry its own line terminator.
        """
        fields = split_fields(line, self._config.input_delimiter)
        tokens = render_tokens(fields, self._config.column_spec)
        return self._config.output_delimiter.join(tokens)

    def run(self, lines: Iterable[str], sink: LineSink) -> int:
        """Reorder every line of *lines* into *sink*.

        Returns
        -------
        int
            The number of lines written.

        Raises
        ------
        StreamIOError
            Propagated unchanged from the line source or *sink*.
        """
        count = 0
        for line in lines:
            sink.write_line(self.reorder_line(line))
            count += 1
        sink.flush()
        return count
