"""Domain models for recol.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They are built once at startup and
shared read-only by every processed line.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

DEFAULT_OUTPUT_DELIMITER: str = "\t"
"""Separator placed between output tokens when ``-o`` is not given."""


# ---------------------------------------------------------------------------
# Column-spec items
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ColumnRef:
    """A reference to one field of the current line."""

    index: int
    """1-based field position.  Values ``<= 0`` never match a field."""


@dataclass(frozen=True, slots=True)
class Literal:
    """A fixed string emitted verbatim on every line."""

    text: str
    """Text after the ``str:`` prefix.  May be empty."""


Item = Union[ColumnRef, Literal]


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """Immutable, ordered collection of :data:`Item` entries.

    The tuple guarantees immutability.  A parsed spec always holds at
    least one item.
    """

    items: tuple[Item, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ReorderConfig:
    """Everything needed to turn one input line into one output line."""

    column_spec: ColumnSpec

    input_delimiter: str | None = None
    """Literal field separator, or ``None`` for blank-run splitting."""

    output_delimiter: str = DEFAULT_OUTPUT_DELIMITER
