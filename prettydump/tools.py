#
# Prettydump Print, Format & Log Wrappers
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys

from typing import Any, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .formatter import Formatter
from .layout import indent
from .options import PrettyOptions, get_options

logger = logging.getLogger("prettydump")


# Classes --------------------------------------------------------------------------------------------------------------

class PrettyError(Exception):
    """
    Exception carrying a pretty-formatted message, see errorf().
    """


# Methods --------------------------------------------------------------------------------------------------------------

def sprint(*values: Any, opts: PrettyOptions | None = None) -> str:
    """
    Pretty-print every operand and join them by spaces.

    Unlike the other wrappers the output prefix is not applied.

    Examples:
        >>> sprint([1, 2], "x")
        'list[int]{1, 2} x'
    """
    return " ".join(format(w, "") for w in _wrap(values, force=True, opts=opts))


def sprintln(*values: Any, opts: PrettyOptions | None = None) -> str:
    """Pretty-print every operand, join them by spaces, end with a newline and apply the output prefix."""
    opts = opts or get_options()
    text = " ".join(format(w, "") for w in _wrap(values, force=True, opts=opts)) + "\n"
    return indent(text, opts.prefix)


def sprintf(template: str, *values: Any, opts: PrettyOptions | None = None) -> str:
    """
    Format a str.format() template and apply the output prefix.

    Replacement fields with the '#' spec pretty-print their operand, other fields format
    it as usual.

    Examples:
        >>> sprintf("{} items: {:#}", 2, ["a", "b"])
        '2 items: list[str]{"a", "b"}'
    """
    opts = opts or get_options()
    text = template.format(*_wrap(values, force=False, opts=opts))
    return indent(text, opts.prefix)


def pprint(*values: Any, file: TextIO | None = None, opts: PrettyOptions | None = None) -> int:
    """
    Pretty-print operands joined by spaces to file, stdout by default.

    Returns:
        Number of characters written.
    """
    opts = opts or get_options()
    return _emit(indent(sprint(*values, opts=opts), opts.prefix), file)


def println(*values: Any, file: TextIO | None = None, opts: PrettyOptions | None = None) -> int:
    """Like pprint() with a trailing newline; returns the number of characters written."""
    return _emit(sprintln(*values, opts=opts), file)


def printf(template: str, *values: Any, file: TextIO | None = None, opts: PrettyOptions | None = None) -> int:
    """Write sprintf(template, *values) to file, stdout by default; returns the number of characters written."""
    return _emit(sprintf(template, *values, opts=opts), file)


def fprintf(file: TextIO, template: str, *values: Any, opts: PrettyOptions | None = None) -> int:
    """Write sprintf(template, *values) to file; returns the number of characters written."""
    return _emit(sprintf(template, *values, opts=opts), file)


def log(*values: Any, level: int = logging.INFO, opts: PrettyOptions | None = None) -> None:
    """Log pretty-printed operands joined by spaces through the 'prettydump' logger."""
    opts = opts or get_options()
    logger.log(level, "%s", indent(sprint(*values, opts=opts), opts.prefix))


def logln(*values: Any, level: int = logging.INFO, opts: PrettyOptions | None = None) -> None:
    """Like log(), formatted as by sprintln(); the final newline is left to the log handler."""
    logger.log(level, "%s", sprintln(*values, opts=opts).removesuffix("\n"))


def logf(template: str, *values: Any, level: int = logging.INFO, opts: PrettyOptions | None = None) -> None:
    """Log sprintf(template, *values) through the 'prettydump' logger."""
    logger.log(level, "%s", sprintf(template, *values, opts=opts))


def errorf(template: str, *values: Any, opts: PrettyOptions | None = None) -> PrettyError:
    """
    Build an exception whose message is sprintf(template, *values).

    Examples:
        >>> str(errorf("unexpected value: {:#}", [1]))
        'unexpected value: list[int]{1}'
    """
    return PrettyError(sprintf(template, *values, opts=opts))


# Private Methods ------------------------------------------------------------------------------------------------------

def _wrap(values: tuple, force: bool, opts: PrettyOptions | None) -> list[Formatter]:
    return [Formatter(v, force=force, quote=False, opts=opts) for v in values]


def _emit(text: str, file: TextIO | None) -> int:
    file = sys.stdout if file is None else file
    file.write(text)
    return len(text)
