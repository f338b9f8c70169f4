"""Infrastructure layer — the process standard streams.

Every raw ``OSError`` or codec error raised by a stream must be caught
here and re-raised as a :class:`~recol.exceptions.StreamIOError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from recol.infra.streams import TextLineSink, TextLineSource, configure_standard_streams

__all__: list[str] = [
    "TextLineSink",
    "TextLineSource",
    "configure_standard_streams",
]
