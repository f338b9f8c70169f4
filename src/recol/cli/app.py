"""CLI application entry point for recol.

This module is the **sole error boundary** for the entire application.
It catches :class:`~recol.exceptions.RecolError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
standard error and returning well-defined exit codes.

Architecture notes
------------------
* No line processing lives here; all work is delegated to the core
  service and the infrastructure stream adapters.
* Standard output carries data and requested help only; every
  diagnostic goes to standard error through the console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import re
import sys
from typing import NoReturn, TextIO

from recol.cli import exit_codes
from recol.cli.console import console
from recol.cli.help_text import DESCRIPTION, PROG, USAGE, full_help_epilog
from recol.core.column_spec import parse_column_spec
from recol.core.models import DEFAULT_OUTPUT_DELIMITER, ReorderConfig
from recol.core.reorder import ReorderService
from recol.exceptions import (
    MissingColumnSpecError,
    MissingOptionArgumentError,
    OutputClosedError,
    RecolError,
    UnknownOptionError,
    UsageError,
)
from recol.infra.streams import TextLineSink, TextLineSource, configure_standard_streams
from recol.version import __version__

_HELP_HINT: str = f"Run '{PROG} -h' for the list of options."

_MISSING_VALUE = re.compile(r"argument (?P<option>\S+): expected one argument")

_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")

_VALUE_FLAGS: str = "io"
_HELP_FLAGS: str = "hH"
_END_OF_OPTIONS: str = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ShortHelpAction(argparse.Action):
    """``-h``: print usage and options to stdout, then exit 0."""

    def __init__(self, option_strings: list[str], dest: str = argparse.SUPPRESS,
                 default: str = argparse.SUPPRESS, help: str | None = None) -> None:
        super().__init__(option_strings=option_strings, dest=dest,
                         default=default, nargs=0, help=help)

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace,
                 values: object, option_string: str | None = None) -> None:
        parser.print_help(sys.stdout)
        parser.exit(exit_codes.SUCCESS)


class _FullHelpAction(_ShortHelpAction):
    """``-H``: print usage, options and examples to stdout, then exit 0."""

    def __call__(self, parser: argparse.ArgumentParser, namespace: argparse.Namespace,
                 values: object, option_string: str | None = None) -> None:
        sys.stdout.write(f"{parser.prog} {__version__}\n\n")
        parser.print_help(sys.stdout)
        sys.stdout.write("\n" + full_help_epilog(parser.prog))
        parser.exit(exit_codes.SUCCESS)


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises typed errors instead of exiting."""

    def error(self, message: str) -> NoReturn:
        usage = self.format_usage()

        if message.startswith("unrecognized arguments:"):
            offending = message.partition(":")[2].strip()
            raise UnknownOptionError(
                f"unknown option: {offending}", hint=_HELP_HINT, usage=usage,
            )

        missing = _MISSING_VALUE.match(message)
        if missing is not None:
            raise MissingOptionArgumentError(
                f"option {missing.group('option')} requires an argument", usage=usage,
            )

        raise UsageError(message, usage=usage)

    def normalize_args(self, argv: list[str]) -> list[str]:
        """Scan *argv* left to right the way getopt does.

        * ``-i``/``-o`` followed by a separate value are joined into the
          attached form (``-o->``) when the value starts with ``-``, so it is
          never mistaken for an option.
        * The first help flag stops the scan; argparse then prints help.
        * An unknown flag met before any help flag is an error at once.

        A lone ``-``, negative numbers, and everything after ``--`` are
        operands.
        """
        result: list[str] = []
        pending = list(argv)
        while pending:
            arg = pending.pop(0)
            if arg == _END_OF_OPTIONS:
                result.append(arg)
                result.extend(pending)
                break
            if len(arg) < 2 or arg[0] != "-" or _NEGATIVE_NUMBER.match(arg):
                result.append(arg)
                continue

            flag = arg[1]
            if flag in _HELP_FLAGS:
                result.append(arg)
                result.extend(pending)
                break
            if flag not in _VALUE_FLAGS:
                self.error(f"unrecognized arguments: {arg}")
            if len(arg) == 2 and pending and pending[0].startswith("-"):
                arg += pending.pop(0)
            result.append(arg)
        return result


def _build_parser() -> _ArgumentParser:
    """Construct the argument parser.

    The CLI supports:
    * ``recol [-i delim] [-o delim] col1[,col2,...]`` — reorder stdin
    * ``recol -h`` — short help
    * ``recol -H`` — full help with examples
    """
    parser = _ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description=DESCRIPTION,
        add_help=False,
    )
    parser.add_argument(
        "-i",
        dest="input_delimiter",
        metavar="input_delimiter",
        default=None,
        help="input field separator (default: runs of blanks: space, tab, newline)",
    )
    parser.add_argument(
        "-o",
        dest="output_delimiter",
        metavar="output_delimiter",
        default=DEFAULT_OUTPUT_DELIMITER,
        help="output field separator (default: a tab)",
    )
    parser.add_argument(
        "-h",
        action=_ShortHelpAction,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-H",
        action=_FullHelpAction,
        help="show this help message with examples and exit",
    )
    parser.add_argument(
        "operands",
        nargs="*",
        metavar="col1[,col2,...]",
        help="comma-separated field numbers (from 1) and str:TEXT literals",
    )
    return parser


def _build_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ReorderConfig:
    """Turn parsed arguments into the immutable run configuration.

    Only the first operand is used; any further operands are ignored.
    """
    operands: list[str] = args.operands or []
    raw_spec = operands[0] if operands else ""
    if not raw_spec:
        raise MissingColumnSpecError(
            "missing column specification",
            usage=parser.format_usage(),
        )

    return ReorderConfig(
        column_spec=parse_column_spec(raw_spec),
        input_delimiter=args.input_delimiter,
        output_delimiter=args.output_delimiter,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the recol CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Explicit text streams.  When ``None``, the process standard
        streams are reconfigured and used.  Accepting them enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_intermixed_args(parser.normalize_args(argv))
    config = _build_config(args, parser)

    if stdin is None or stdout is None:
        default_in, default_out = configure_standard_streams()
        stdin = default_in if stdin is None else stdin
        stdout = default_out if stdout is None else stdout

    service = ReorderService(config)
    service.run(TextLineSource(stdin), TextLineSink(stdout))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _exit_code_for(exc: RecolError) -> int:
    """Map a known error to its process exit code."""
    if isinstance(exc, OutputClosedError):
        return exit_codes.BROKEN_PIPE
    if isinstance(exc, MissingColumnSpecError):
        return exit_codes.MISSING_COLUMN_SPEC
    if isinstance(exc, UsageError):
        return exit_codes.USAGE_ERROR
    return exit_codes.GENERAL_ERROR


def _report(exc: RecolError) -> None:
    """Render *exc* (message, hint, usage) on standard error."""
    console.print_labelled("Error:", str(exc), style="bold red")
    if exc.hint:
        console.print_labelled("Hint:", exc.hint, style="yellow")
    if exc.usage:
        console.write(exc.usage)


def _discard_stdout() -> None:
    """Point the stdout file descriptor at the null device.

    Called once the reader has gone away, so the final flush during
    interpreter shutdown cannot raise a second ``BrokenPipeError``.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OutputClosedError as exc:
        _discard_stdout()
        sys.exit(_exit_code_for(exc))
    except RecolError as exc:
        _report(exc)
        sys.exit(_exit_code_for(exc))
    except KeyboardInterrupt:
        console.print_labelled("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labelled(
            "Unexpected error.",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
