"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
help output and plain column processing keep working even when Rich is
not installed.  Everything rendered here goes to standard error;
standard output carries data only.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` class, or ``None`` if Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console instance targeting stderr, if possible."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal stderr renderer with plain-text fallback."""

	def print_labelled(self, label: str, message: str = "", *, style: str = "bold") -> None:
		"""Print ``label message`` with *label* styled.

		*message* is user or OS supplied text and is never parsed as
		Rich markup.
		"""
		rich_console = get_rich_console()
		if rich_console is None:
			print(f"{label} {message}".rstrip(" "), file=sys.stderr)
			return

		from rich.text import Text

		line = Text(label, style=style)
		if message:
			line.append(" ")
			line.append(message)
		rich_console.print(line, soft_wrap=True, highlight=False)

	def write(self, text: str) -> None:
		"""Write *text* to stderr verbatim, bypassing styling and wrapping."""
		sys.stderr.write(text)
		sys.stderr.flush()


console = _ConsoleProxy()
