"""
Text layout: elastic tab stops and line indentation.

TabWriter aligns tab-separated cells into space-padded columns on flush, IndentWriter
prefixes every line passing through it. Both wrap any object with a write(str) method.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io

from typing import Protocol


# Classes --------------------------------------------------------------------------------------------------------------

class TextSink(Protocol):
    def write(self, text: str, /) -> int: ...


class TabWriter:
    """
    Buffering writer aligning tab-terminated cells on flush.

    Args:
        output: Destination of aligned text.
        minwidth: Minimal cell width including padding.
        padding: Spaces added to the widest cell of a column.

    Examples:
        >>> buf = io.StringIO()
        >>> tw = TabWriter(buf, minwidth=4)
        >>> tw.write("a:\\t1\\nlong:\\t2\\n")
        >>> tw.flush()
        >>> buf.getvalue()
        'a:    1\\nlong: 2\\n'
    """

    def __init__(self, output: TextSink, minwidth: int = 4, padding: int = 1) -> None:
        self.output = output
        self.minwidth = minwidth
        self.padding = padding
        self._buffer: list[str] = []

    def write(self, text: str) -> int:
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Align the buffered text and forward it to the output."""
        if not self._buffer:
            return
        text = "".join(self._buffer)
        self._buffer.clear()
        self.output.write(align_cells(text, self.minwidth, self.padding))


class IndentWriter:
    """
    Writer prefixing every line, blank lines included, before forwarding it.

    The prefix is written lazily when the first character of a line arrives, so text
    ending in a newline leaves no dangling prefix.
    """

    def __init__(self, output: TextSink, prefix: str = "\t") -> None:
        self.output = output
        self.prefix = prefix
        self._bol = True

    def write(self, text: str) -> int:
        parts = []
        segments = text.split("\n")
        for i, segment in enumerate(segments):
            last = i == len(segments) - 1
            if not segment and last:
                break
            if self._bol:
                parts.append(self.prefix)
            parts.append(segment)
            if not last:
                parts.append("\n")
            self._bol = not last
        if parts:
            self.output.write("".join(parts))
        return len(text)


# Methods --------------------------------------------------------------------------------------------------------------

def align_cells(text: str, minwidth: int, padding: int = 1) -> str:
    """
    Align tab-terminated cells into columns.

    Each line is split at tabs; every tab-terminated segment is a cell, the text after the
    last tab is not part of any column. A column block is a run of consecutive lines having
    a cell in that column; its width is the larger of minwidth and the widest cell plus
    padding. Padding that would only precede the end of a line is dropped.

    Examples:
        >>> align_cells("\\tx\\n\\tyy\\n", 4)
        '    x\\n    yy\\n'
    """
    rows = [line.split("\t") for line in text.split("\n")]
    widths = [[0] * (len(row) - 1) for row in rows]

    columns = max(len(row) - 1 for row in rows)
    for col in range(columns):
        start = None
        for i in range(len(rows) + 1):
            has_cell = i < len(rows) and len(rows[i]) - 1 > col
            if has_cell and start is None:
                start = i
            elif not has_cell and start is not None:
                width = max([minwidth] + [len(rows[k][col]) + padding for k in range(start, i)])
                for k in range(start, i):
                    widths[k][col] = width
                start = None

    lines = []
    for row, row_widths in zip(rows, widths):
        cells = [cell.ljust(width) for cell, width in zip(row, row_widths)]
        trailing = row[-1]
        if not trailing:
            while cells and not row[len(cells) - 1]:
                cells.pop()
            if cells:
                cells[-1] = row[len(cells) - 1]
        lines.append("".join(cells) + trailing)
    return "\n".join(lines)


def indent(text: str, prefix: str) -> str:
    """
    Prepend prefix to every line of text, blank lines included.

    Examples:
        >>> indent("a\\n\\nb\\n", "> ")
        '> a\\n> \\n> b\\n'
        >>> indent("", "> ")
        ''
    """
    buf = io.StringIO()
    IndentWriter(buf, prefix).write(text)
    return buf.getvalue()
