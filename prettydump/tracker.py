"""
Line tracker for humanized output.

Humanized output drops the structural brackets, so the renderer decides on newlines and
indentation from what has been written so far: the text of the pending output line and
the number of closing brackets suppressed since the last real content.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class LineTracker:
    """
    Layout state of one render call.

    Attributes:
        line: Text written since the last newline.
        closed: Consecutive closing brackets suppressed since the last content write.
    """
    __slots__ = ("line", "closed")

    def __init__(self) -> None:
        self.line = ""
        self.closed = 0

    def __repr__(self) -> str:
        return f"LineTracker(line={self.line!r}, closed={self.closed})"

    def feed(self, text: str) -> None:
        """
        Record written content.

        Non-empty text resets the bracket counter. Text containing newlines replaces the
        pending line with its trailing segment, other text extends it.
        """
        if not text:
            return
        self.closed = 0
        _, newline, tail = text.rpartition("\n")
        self.line = tail if newline else self.line + text

    def close_bracket(self) -> None:
        """Record a suppressed closing bracket."""
        self.closed += 1

    def indent_needed(self, humanize: bool) -> bool:
        """
        True if a nested block must start on a new indented line.

        Always true for structured output. In humanized output only after a 'key:' header,
        otherwise the block starts at the current position.
        """
        if not humanize:
            return True
        return ":" in self.line

    def newline_needed(self, blank_lines: bool) -> bool:
        """
        True if an item of a humanized block must be terminated by a newline.

        Items ending in nested blocks have already ended their last line, so a newline is
        needed only when no closing bracket was just suppressed. With blank_lines, exactly
        two suppressed brackets (the end of a sibling composite item) also get one, which
        leaves a blank line between such items.
        """
        return self.closed == 0 or (blank_lines and self.closed == 2)
