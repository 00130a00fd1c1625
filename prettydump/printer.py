"""
Recursive structural walker.

Printer renders one value by structural kind, recursing into maps, sequences, records,
interfaces and references. Recursion is bounded by DEPTH_LIMIT and by the set of
composite values on the active path, both degrading to sentinel text instead of raising.

Depth grows by one per nesting level: a map, sequence or record reached directly as a
child, or the value behind an unwrapped interface or reference.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field, replace
from typing import Any, Final

# Local ----------------------------------------------------------------------------------------------------------------
from .kinds import SCALAR_KINDS, Kind, TypeInfo, can_inline, label_type, resolve
from .layout import IndentWriter, TabWriter, TextSink
from .literals import (
    function_literal,
    handle_literal,
    quote_string,
    scalar_literal,
    string_literal,
    typed_literal,
)
from .options import PrettyOptions
from .records import is_zero, record_fields
from .tags import FieldDirective, is_empty_value
from .tracker import LineTracker

# Constants ------------------------------------------------------------------------------------------------------------

DEPTH_LIMIT: Final = 10
DEPTH_EXCEEDED: Final = "!(DEPTH EXCEEDED)"
CYCLIC_REFERENCE: Final = "{(CYCLIC REFERENCE)}"

_COMPOSITE_KINDS = (Kind.MAP, Kind.SEQUENCE, Kind.RECORD)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class RenderContext:
    """
    State shared by all printers of one top-level render call.

    Attributes:
        opts: Options snapshot taken at the start of the call.
        tracker: Humanized layout state.
        visiting: Composite values on the active path, (id, type) mapped to the depth
            they were entered at.
    """
    opts: PrettyOptions
    tracker: LineTracker = field(default_factory=LineTracker)
    visiting: dict[tuple[int, type], int] = field(default_factory=dict)


@dataclass
class Printer:
    """
    Writer of one indentation scope at one depth.

    Printers of the same scope share their TabWriter; indent() opens a nested scope
    whose lines pass through an IndentWriter into a fresh TabWriter flushed at
    the end of the scope.
    """
    ctx: RenderContext
    writer: TextSink
    tw: TabWriter
    depth: int = 0

    @classmethod
    def create(cls, output: TextSink, opts: PrettyOptions) -> "Printer":
        """Top-level printer over output; flush printer.tw when done."""
        tw = TabWriter(output, minwidth=opts.indent, padding=1)
        return cls(ctx=RenderContext(opts), writer=tw, tw=tw)

    def indent(self) -> "Printer":
        """Printer of a nested scope, one indentation step deeper."""
        tw = TabWriter(self.writer, minwidth=self.ctx.opts.indent, padding=1)
        return replace(self, writer=IndentWriter(tw, "\t"), tw=tw)

    def deeper(self) -> "Printer":
        """Printer of the same scope one depth level further."""
        return replace(self, depth=self.depth + 1)

    def print_value(self, value: Any, show_type: bool = True, quote: bool = True, declared: TypeInfo | None = None):
        """
        Render a value.

        Args:
            value: Any Python value.
            show_type: Prefix the rendering with its type name (structured output only).
            quote: Quote strings.
            declared: Declared type of the position the value is reached through.
        """
        if self.depth > DEPTH_LIMIT:
            self.write(DEPTH_EXCEEDED)
            return

        opts = self.ctx.opts
        if opts.humanize:
            show_type = False
            quote = False

        info = resolve(value, declared, fully_qualified=opts.fully_qualified)
        kind = info.kind

        if kind in _COMPOSITE_KINDS and value is not None:
            key = (id(value), type(value))
            if key in self.ctx.visiting:
                self.write(info.name + CYCLIC_REFERENCE)
                return
            self.ctx.visiting[key] = self.depth
            try:
                self._print_composite(value, info, show_type)
            finally:
                del self.ctx.visiting[key]
            return

        if kind in SCALAR_KINDS:
            self._print_inline(value, info, show_type)
        elif kind is Kind.STRING:
            text = string_literal(value, quote, opts.humanize)
            if show_type and quote:
                text = typed_literal(info.name, text)
            self.write(text)
        elif kind in (Kind.MAP, Kind.SEQUENCE):
            self.write(f"{info.name}(nil)" if show_type else "nil")
        elif kind is Kind.ANY:
            self._print_interface(value, info, show_type)
        elif kind is Kind.REFERENCE:
            self._print_reference(value, info)
        elif kind is Kind.CHANNEL:
            handle = handle_literal(value)
            self.write(f"({info.name})({handle})" if show_type else handle)
        elif kind is Kind.FUNCTION:
            self.write(function_literal(value, fully_qualified=opts.fully_qualified))
        else:
            self.write("nil")

    def write(self, text: str) -> None:
        """Write content, tracking the pending line in humanized output."""
        if self.ctx.opts.humanize:
            self.ctx.tracker.feed(text)
        self.writer.write(text)

    def open_bracket(self) -> None:
        if not self.ctx.opts.humanize:
            self.writer.write("{")

    def close_bracket(self) -> None:
        if self.ctx.opts.humanize:
            self.ctx.tracker.close_bracket()
        else:
            self.writer.write("}")

    # Private Methods --------------------------------------------------------------------------------------------------

    def _print_inline(self, value: Any, info: TypeInfo, show_type: bool) -> None:
        literal = scalar_literal(value, info)
        if show_type and not self.ctx.opts.humanize:
            self.write(typed_literal(info.name, literal))
        elif self.ctx.opts.humanize and literal and not literal.strip():
            self.write(quote_string(literal))
        else:
            self.write(literal)

    def _print_composite(self, value: Any, info: TypeInfo, show_type: bool) -> None:
        humanize = self.ctx.opts.humanize
        if show_type and not humanize:
            self.write(info.name)
        self.open_bracket()

        if info.kind is Kind.RECORD:
            fields = record_fields(value, self.ctx.opts.include_private, self.ctx.opts.fully_qualified)
            nonempty = not is_zero(value, self.ctx.opts.include_private, DEPTH_LIMIT - self.depth)
        else:
            fields = None
            nonempty = len(value) > 0

        if nonempty or humanize:
            expand = not can_inline(info, humanize)
            pp = self
            if expand and self.ctx.tracker.indent_needed(humanize):
                self.write("\n")
                pp = self.indent()
            if info.kind is Kind.MAP:
                pp._print_entries(value, info, expand)
            elif info.kind is Kind.SEQUENCE:
                pp._print_elements(value, info, expand)
            else:
                pp._print_fields(fields, expand)
            if expand:
                pp.tw.flush()

        self.close_bracket()

    def _print_entries(self, value: Any, info: TypeInfo, expand: bool) -> None:
        show_elem_type = info.value.kind is Kind.ANY
        items = list(value.items())
        for i, (key, item) in enumerate(items):
            self.print_value(key, False, True, declared=info.key)
            self.write(":\t" if expand else ": ")
            self._child(item, info.value).print_value(item, show_elem_type, True, declared=info.value)
            self._separate(i, len(items), expand)

    def _print_elements(self, value: Any, info: TypeInfo, expand: bool) -> None:
        show_elem_type = info.elem.kind is Kind.ANY
        items = list(value)
        for i, item in enumerate(items):
            self._child(item, info.elem).print_value(item, show_elem_type, True, declared=info.elem)
            self._separate(i, len(items), expand)

    def _print_fields(self, fields: list, expand: bool) -> None:
        humanize = self.ctx.opts.humanize
        for i, f in enumerate(fields):
            name = f.name
            if humanize:
                directive = FieldDirective.from_tag(f.tag)
                if directive.skip:
                    continue
                if directive.omitempty and is_empty_value(f.value):
                    continue
                name = directive.name or name
            self.write(name)
            self.write(":\t" if expand else ": ")
            self._child(f.value, f.info).print_value(f.value, label_type(f.info), True, declared=f.info)
            self._separate(i, len(fields), expand)

    def _print_interface(self, value: Any, info: TypeInfo, show_type: bool) -> None:
        if value is None:
            if info.named and not self.ctx.opts.humanize:
                self.write(f"{info.name}(nil)")
            else:
                self.write("nil")
            return
        self.deeper().print_value(value, show_type, True)

    def _print_reference(self, value: Any, info: TypeInfo) -> None:
        humanize = self.ctx.opts.humanize
        if value is None:
            self.write("nil" if humanize else f"({info.name})(nil)")
            return
        pp = self.deeper()
        if not humanize:
            pp.write("&")
        pp.print_value(value, True, True, declared=info.target)

    def _child(self, value: Any, declared: TypeInfo) -> "Printer":
        """Printer of a child position: composites nest one level deeper, indirections deepen on unwrap."""
        if value is None:
            return self
        info = resolve(value, declared, fully_qualified=self.ctx.opts.fully_qualified)
        return self.deeper() if info.kind in _COMPOSITE_KINDS else self

    def _separate(self, i: int, count: int, expand: bool) -> None:
        if self.ctx.opts.humanize:
            if self.ctx.tracker.newline_needed(self.ctx.opts.newline_after_items):
                self.write("\n")
        elif expand:
            self.write(",\n")
        elif i < count - 1:
            self.write(", ")
