"""
Entry points: render a value to a stream or a string, or wrap it for str.format().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io

from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .layout import TextSink
from .options import PrettyOptions, get_options
from .printer import Printer
from .utils import safe_repr


# Classes --------------------------------------------------------------------------------------------------------------

class Formatter:
    """
    Wrapper pretty-printing a value in str.format() templates and f-strings.

    The '#' format spec pretty-prints the value; any other spec formats it as usual.
    With force=True the value is pretty-printed regardless of the format spec.

    Examples:
        >>> "{:#}".format(Formatter({"a": 1}))
        'dict[str, int]{"a": 1}'
        >>> "{:>5}".format(Formatter(42))
        '   42'
    """
    __slots__ = ("value", "force", "quote", "opts")

    def __init__(self, value: Any, *, force: bool = False, quote: bool = True, opts: PrettyOptions | None = None):
        self.value = value
        self.force = force
        self.quote = quote
        self.opts = opts

    def __format__(self, format_spec: str) -> str:
        if self.force or format_spec == "#":
            return pformat(self.value, quote=self.quote, opts=self.opts)
        return format(self.value, format_spec)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Formatter({safe_repr(self.value)})"


# Methods --------------------------------------------------------------------------------------------------------------

def render(
        value: Any,
        output: TextSink,
        *,
        show_type: bool = True,
        quote: bool = True,
        opts: PrettyOptions | None = None,
) -> None:
    """
    Write the pretty rendering of a value to a text stream.

    Args:
        value: Any Python value.
        output: Object with a write(str) method.
        show_type: Prefix the top-level value with its type name.
        quote: Quote top-level strings.
        opts: Rendering options, the current default options if None.

    Raises:
        Any exception raised by output.write().
    """
    opts = opts or get_options()
    printer = Printer.create(output, opts)
    printer.print_value(value, show_type, quote)
    printer.tw.flush()


def pformat(
        value: Any,
        *,
        show_type: bool = True,
        quote: bool = True,
        opts: PrettyOptions | None = None,
) -> str:
    """
    Return the pretty rendering of a value.

    Examples:
        >>> pformat([1, 2, 3])
        'list[int]{1, 2, 3}'
        >>> pformat({"a": "x"}, opts=PrettyOptions(humanize=True))
        'a:  x\\n'
    """
    buf = io.StringIO()
    render(value, buf, show_type=show_type, quote=quote, opts=opts)
    return buf.getvalue()
