"""Static help text shown by ``-h`` and ``-H``."""

from __future__ import annotations

PROG: str = "recol"

USAGE: str = "%(prog)s [-i input_delimiter] [-o output_delimiter] [-h|-H] col1[,col2,...]"

DESCRIPTION: str = (
    "Reorder the columns of delimited text read from standard input. "
    "Each input line is split into fields and the requested fields, "
    "interleaved with any literal strings, are printed joined by the "
    "output delimiter."
)

COLUMN_SPEC_REFERENCE: str = """\
column spec:
  A comma-separated list of items, printed in the order given.
    N           field N of the line, counting from 1; may be repeated
    str:TEXT    the literal TEXT (may be empty, may contain ':')
  Fields that do not exist on a line print as empty strings.
  Without -i, fields are separated by runs of blanks (space, tab,
  newline), and leading and trailing blanks are ignored. With -i, the
  line is split on exactly that string and empty fields are kept. A
  delimiter starting with '-' may be given separately: -o '->'."""

EXAMPLES: str = """\
examples:
  Swap the first two whitespace-separated columns:
    $ printf 'a b\\n' | %(prog)s 2,1
    b\ta

  Repeat a column:
    $ printf 'a b\\n' | %(prog)s 1,1,2
    a\ta\tb

  Read commas, write pipes:
    $ printf 'x,y,z\\n' | %(prog)s -i , -o '|' 1,3
    x|z

  Insert literal text between columns:
    $ printf 'alice 42\\n' | %(prog)s -o ' ' 'str:name=,1,str:age=,2'
    name= alice age= 42

  Tabulate keys extracted by jq, most frequent first:
    $ jq -r '.[] | [.user, .status] | @tsv' log.json \\
        | %(prog)s -i "$(printf '\\t')" 2,1 | sort | uniq -c | sort -rn"""


def full_help_epilog(prog: str = PROG) -> str:
    """Return the text appended to the short help by ``-H``."""
    return "\n".join(
        (
            COLUMN_SPEC_REFERENCE,
            "",
            EXAMPLES % {"prog": prog},
            "",
        )
    )
