"""
Field tags: per-field rename and omit directives for humanized output.

A tag is a string such as "Full Name,omitempty": an optional display name followed by
comma-separated options. A tag of exactly "-" hides the field. Tags are attached to
dataclass fields via `field(metadata={"pretty": ...})` or to any record class via a
`__pretty_tags__` mapping of attribute name to tag.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import functools
import logging

from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .kinds import Kind, kind_of

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

TAG_KEY = "pretty"

# Backslash and quote characters are reserved, other punctuation is allowed in a display name
_TAG_PUNCTUATION = frozenset("!#$%&()*+-./:<=>?@[]^_{|}~ ")


# Classes --------------------------------------------------------------------------------------------------------------

class TagOptions(str):
    """
    Comma-separated options following the name in a tag, without the leading comma.
    """

    def contains(self, option: str) -> bool:
        """
        Report whether the options contain a particular flag.

        The flag must be delimited by the string boundaries or commas.

        Examples:
            >>> TagOptions("omitempty,inline").contains("omitempty")
            True
            >>> TagOptions("omitemptyx").contains("omitempty")
            False
        """
        if not self:
            return False
        return option in self.split(",")


@dataclass(frozen=True)
class FieldDirective:
    """
    Parsed field tag.

    Attributes:
        name: Override display name, empty to keep the declared name.
        omitempty: Omit the field when its value is empty.
        skip: Never render the field.
    """
    name: str = ""
    omitempty: bool = False
    skip: bool = False

    @classmethod
    def from_tag(cls, tag: str | None) -> "FieldDirective":
        """
        Parse a field tag.

        An override name with characters outside letters, digits, space and the allowed
        punctuation is ignored and the declared field name is kept.

        Examples:
            >>> FieldDirective.from_tag("Full Name,omitempty")
            FieldDirective(name='Full Name', omitempty=True, skip=False)
            >>> FieldDirective.from_tag("-")
            FieldDirective(name='', omitempty=False, skip=True)
        """
        return _parse_directive(tag or "")


# Methods --------------------------------------------------------------------------------------------------------------

def parse_tag(tag: str) -> tuple[str, TagOptions]:
    """
    Split a tag into its name and comma-separated options at the first comma.

    Examples:
        >>> parse_tag("name,omitempty")
        ('name', 'omitempty')
        >>> parse_tag("name")
        ('name', '')
    """
    name, _, options = tag.partition(",")
    return name, TagOptions(options)


def is_valid_tag(name: str) -> bool:
    """
    True if name can be used as a display name.

    Letters, digits, space and the punctuation !#$%&()*+-./:<=>?@[]^_{|}~ are allowed.
    """
    if not name:
        return False
    return all(c in _TAG_PUNCTUATION or c.isalpha() or c.isdigit() for c in name)


def is_empty_value(value: Any) -> bool:
    """
    Emptiness as understood by the omitempty option.

    Zero-length strings, sequences and maps and None are empty. Unlike JSON encoders,
    booleans and numbers are never empty, neither are records.
    """
    if value is None:
        return True
    if kind_of(type(value)) in (Kind.STRING, Kind.SEQUENCE, Kind.MAP):
        try:
            return len(value) == 0
        except TypeError:
            return False
    return False


# Private Methods ------------------------------------------------------------------------------------------------------

@functools.lru_cache(maxsize=256)
def _parse_directive(tag: str) -> FieldDirective:
    if not tag:
        return FieldDirective()
    if tag == "-":
        return FieldDirective(skip=True)
    name, options = parse_tag(tag)
    if name and not is_valid_tag(name):
        logger.debug("Ignoring invalid display name %r in field tag %r", name, tag)
        name = ""
    return FieldDirective(name=name, omitempty=options.contains("omitempty"))
