"""Core / service layer — pure line transformations.

Rules
-----
* No ``print()`` calls.
* No direct access to ``sys.stdin`` / ``sys.stdout``.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from recol.core.column_spec import parse_column_spec
from recol.core.fields import split_fields
from recol.core.models import ColumnRef, ColumnSpec, Literal, ReorderConfig
from recol.core.protocols import LineSink
from recol.core.reorder import ReorderService

__all__: list[str] = [
    "ColumnRef",
    "ColumnSpec",
    "LineSink",
    "Literal",
    "ReorderConfig",
    "ReorderService",
    "parse_column_spec",
    "split_fields",
]
