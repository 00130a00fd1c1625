"""
Rendering options for prettydump.

Options are an immutable PrettyOptions value. Every top-level render call takes an
explicit `opts=` argument or, when omitted, a snapshot of the process-wide default
managed by configure() / get_options() and the getter/setter pairs below.

The default is shared by all threads. Updates are serialized, and each render call
reads the default exactly once, so a concurrent render sees either the old or the
new snapshot. Callers that need isolation between threads pass `opts=` explicitly.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import threading

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .utils import class_name

# Classes --------------------------------------------------------------------------------------------------------------

Preset = Literal["compact", "debug", "default", "human"]


@dataclass(frozen=True)
class PrettyOptions:
    """
    Rendering configuration.

    Attributes:
        indent: Width of one indentation step and minimal width of aligned columns.
        humanize: Render for end users: no type names, quotes or brackets, field tags honoured.
        prefix: Text prepended once to every line of the final output by the print/format
            wrappers in prettydump.tools. The core renderer never applies it.
        newline_after_items: In humanize mode, separate sibling composite items by a blank line.
        include_private: Render record attributes whose names start with an underscore.
        fully_qualified: Use 'module.Name' for user-defined type names.

    Raises:
        TypeError: If an attribute has the wrong type.
        ValueError: If indent is not positive.
    """
    indent: int = 4
    humanize: bool = False
    prefix: str = ""
    newline_after_items: bool = False
    include_private: bool = False
    fully_qualified: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError(f"indent must be an int, but got {class_name(self.indent)}")
        if self.indent <= 0:
            raise ValueError(f"indent must be positive, but got {self.indent}")
        if not isinstance(self.prefix, str):
            raise TypeError(f"prefix must be a str, but got {class_name(self.prefix)}")
        for name in ("humanize", "newline_after_items", "include_private", "fully_qualified"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool, but got {class_name(value)}")

    @classmethod
    def compact(cls) -> "PrettyOptions":
        """Narrow two-space indentation."""
        return cls(indent=2)

    @classmethod
    def debug(cls) -> "PrettyOptions":
        """Structured output with private attributes and module-qualified type names."""
        return cls(include_private=True, fully_qualified=True)

    @classmethod
    def human(cls) -> "PrettyOptions":
        """Humanized output with a blank line between sibling items."""
        return cls(humanize=True, newline_after_items=True)

    @classmethod
    def from_preset(cls, preset: Preset) -> "PrettyOptions":
        """
        Return the options of a named preset.

        Raises:
            ValueError: If preset is unknown.
        """
        factories = {
            "compact": cls.compact,
            "debug": cls.debug,
            "default": cls,
            "human": cls.human,
        }
        if preset not in factories:
            valid = ", ".join(f"'{name}'" for name in factories)
            raise ValueError(f"Unknown preset: {preset!r}. Expected: {valid}")
        return factories[preset]()

    def merge(self, **kwargs: Any) -> "PrettyOptions":
        """
        Return a copy with the given attributes replaced.

        Raises:
            TypeError: If an unknown attribute name is passed.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"Unknown PrettyOptions attribute(s): {', '.join(unknown)}")
        return replace(self, **kwargs)


# Module State ---------------------------------------------------------------------------------------------------------

_lock = threading.Lock()
_options = PrettyOptions()


# Methods --------------------------------------------------------------------------------------------------------------

def get_options() -> PrettyOptions:
    """Return the current process-wide default options."""
    return _options


def set_options(opts: PrettyOptions) -> None:
    """Replace the process-wide default options."""
    global _options
    if not isinstance(opts, PrettyOptions):
        raise TypeError(f"opts must be a PrettyOptions instance, but got {class_name(opts)}")
    with _lock:
        _options = opts


def configure(
        preset: Preset | None = None,
        *,
        indent: int | UnsetType = UNSET,
        humanize: bool | UnsetType = UNSET,
        prefix: str | UnsetType = UNSET,
        newline_after_items: bool | UnsetType = UNSET,
        include_private: bool | UnsetType = UNSET,
        fully_qualified: bool | UnsetType = UNSET,
) -> PrettyOptions:
    """
    Update the process-wide default options.

    A preset replaces the current default, then explicitly passed attributes are merged
    on top. Without a preset the current default is the base, so calls are incremental.

    Returns:
        The new default options.

    Examples:
        >>> configure(preset="human").humanize
        True
        >>> configure(indent=2).humanize
        True
    """
    global _options
    changes = {
        "indent": indent,
        "humanize": humanize,
        "prefix": prefix,
        "newline_after_items": newline_after_items,
        "include_private": include_private,
        "fully_qualified": fully_qualified,
    }
    changes = {k: v for k, v in changes.items() if v is not UNSET}
    with _lock:
        base = _options if preset is None else PrettyOptions.from_preset(preset)
        _options = base.merge(**changes)
        return _options


def reset() -> PrettyOptions:
    """Restore the built-in default options."""
    set_options(PrettyOptions())
    return _options


@contextmanager
def using(opts: PrettyOptions | None = None, **kwargs: Any) -> Iterator[PrettyOptions]:
    """
    Temporarily replace the process-wide default options.

    Examples:
        >>> with using(humanize=True) as opts:
        ...     opts.humanize
        True
        >>> humanize()
        False
    """
    previous = get_options()
    new = (opts or previous).merge(**kwargs)
    set_options(new)
    try:
        yield new
    finally:
        set_options(previous)


def indent_width() -> int:
    """Return the step-wise indent of structure representations (4 by default)."""
    return _options.indent


def set_indent_width(indent: int) -> None:
    """Set the step-wise indent; 2 or 4 spaces are recommended."""
    configure(indent=indent)


def humanize() -> bool:
    """Return True if humanized output is active."""
    return _options.humanize


def set_humanize(flag: bool) -> None:
    """
    Switch humanized output on or off.

    Humanized output drops type names, quotes and brackets so the text can be shown to users.
    Field tags rename fields ('Full Name'), hide them ('-') or omit them when empty
    ('name,omitempty'); unlike JSON, False and 0 are never considered empty.
    """
    configure(humanize=flag)


def output_prefix() -> str:
    """Return the overall text prefix of the print/format wrappers."""
    return _options.prefix


def set_output_prefix(prefix: str) -> None:
    """Set the overall text prefix of the print/format wrappers."""
    configure(prefix=prefix)


def newline_after_items() -> bool:
    """Return True if humanized output separates items by a blank line."""
    return _options.newline_after_items


def set_newline_after_items(flag: bool) -> None:
    """Insert a blank line between sibling composite items in humanized output."""
    configure(newline_after_items=flag)
