"""Splitting of a single input line into fields."""

from __future__ import annotations

import re

BLANKS: str = " \t\n"
"""Blanks (space, tab, newline) separate fields when no input delimiter is given."""

_BLANK_RUN = re.compile(f"[{BLANKS}]+")


def split_on_blanks(line: str) -> list[str]:
    """Split *line* on runs of blanks, ignoring leading and trailing ones.

    Only space, tab and newline count as blanks.  ``str.split()`` is not
    used because it also breaks on ``\\r``, form feeds and Unicode
    spaces, which are ordinary field content here.
    """
    stripped = line.strip(BLANKS)
    if not stripped:
        return []
    return _BLANK_RUN.split(stripped)


def split_fields(line: str, delimiter: str | None) -> list[str]:
    """Split *line* into its ordered fields.

    * ``None``: blank-run splitting (see :func:`split_on_blanks`).
    * ``""``: every character is its own field.
    * anything else: strict split on the literal delimiter; repeated
      delimiters produce empty fields and nothing is trimmed.
    """
    if delimiter is None:
        return split_on_blanks(line)
    if delimiter == "":
        return list(line)
    return line.split(delimiter)
