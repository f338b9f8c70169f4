"""recol — reorder delimited text columns read from standard input.

Built for shell pipelines, with a small layered architecture.
"""

from recol.version import __version__

__all__: list[str] = ["__version__"]
