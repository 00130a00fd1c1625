"""
Record introspection: ordered fields, declared field types, field tags and zero values.

A record is a dataclass instance, a named tuple, or an instance of a user class
holding attributes in __slots__ or __dict__.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import ctypes
import dataclasses
import functools
import logging

from dataclasses import dataclass
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .kinds import (
    ANY,
    Kind,
    TypeInfo,
    field_infos,
    is_namedtuple,
    kind_of,
    record_field_types,
    slot_names,
)
from .tags import TAG_KEY

__all__ = [
    'RecordField',
    'field_infos',
    'field_tags',
    'is_zero',
    'record_field_types',
    'record_fields',
]

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class RecordField:
    """
    One field of one record value.

    Attributes:
        name: Attribute name.
        info: Declared type, ANY when not annotated.
        value: Current value.
        tag: Field tag, empty if none.
    """
    name: str
    info: TypeInfo
    value: Any
    tag: str = ""


# Methods --------------------------------------------------------------------------------------------------------------

def record_fields(value: Any, include_private: bool = False, fully_qualified: bool = False) -> list[RecordField]:
    """
    Return the fields of a record value in declaration order.

    Dataclass fields and named tuple fields come first, then attributes stored in
    __slots__ along the MRO, then remaining instance __dict__ entries. Unset slots are
    skipped.

    Args:
        value: Record instance.
        include_private: Include attributes whose names start with an underscore.
        fully_qualified: Use 'module.Name' in declared type names.

    Returns:
        List of RecordField.
    """
    cls = type(value)
    infos = field_infos(cls, fully_qualified)
    tags = field_tags(cls)

    result = []
    seen = set()
    for name, field_value in _iter_attributes(value):
        if name in seen:
            continue
        seen.add(name)
        if name.startswith("_") and not include_private:
            continue
        result.append(RecordField(name, infos.get(name, ANY), field_value, tags.get(name, "")))
    return result


@functools.lru_cache(maxsize=512)
def field_tags(cls: type) -> frozendict:
    """
    Field tags of a record class keyed by attribute name.

    Tags come from `__pretty_tags__` mappings along the MRO and from the "pretty" key of
    dataclass field metadata, the latter taking precedence.
    """
    tags = {}
    for klass in reversed(cls.__mro__):
        tags.update(vars(klass).get("__pretty_tags__", {}))
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            if TAG_KEY in f.metadata:
                tags[f.name] = f.metadata[TAG_KEY]

    result = {}
    for name, tag in tags.items():
        if not isinstance(tag, str):
            logger.debug("Ignoring non-string tag of field %s.%s: %r", cls.__name__, name, tag)
            continue
        result[name] = tag
    return frozendict(result)


def is_zero(value: Any, include_private: bool = False, max_depth: int = 10) -> bool:
    """
    True if value is the zero value of its type.

    None, False, numeric zero, null addresses, empty strings and empty containers are zero.
    A record is zero when all its fields are: a field declared as a reference or an
    interface is zero only when it holds None, other fields are tested by value.

    Records nested deeper than max_depth, or reachable from themselves, are never zero.
    """
    return _is_zero(value, include_private, set(), max_depth)


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_zero(value: Any, include_private: bool, active: set[int], depth: int) -> bool:
    if value is None:
        return True
    if depth < 0:
        return False
    kind = kind_of(type(value))
    if kind in (Kind.BOOL, Kind.INTEGER, Kind.UNSIGNED, Kind.FLOAT, Kind.COMPLEX):
        scalar = value.value if isinstance(value, ctypes._SimpleCData) else value
        return not scalar
    if kind is Kind.ADDRESS:
        return not ctypes.cast(value, ctypes.c_void_p).value
    if kind in (Kind.STRING, Kind.SEQUENCE, Kind.MAP):
        try:
            return len(value) == 0
        except TypeError:
            return False
    if kind is Kind.RECORD:
        if id(value) in active:
            return False
        active.add(id(value))
        try:
            return all(_is_zero_field(f, include_private, active, depth) for f in record_fields(value, include_private))
        finally:
            active.discard(id(value))
    return False


def _is_zero_field(f: RecordField, include_private: bool, active: set[int], depth: int) -> bool:
    if f.info.kind in (Kind.REFERENCE, Kind.ANY):
        return f.value is None
    return _is_zero(f.value, include_private, active, depth - 1)


def _iter_attributes(value: Any):
    cls = type(value)
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(value):
            try:
                yield f.name, getattr(value, f.name)
            except AttributeError:
                continue
    if is_namedtuple(cls):
        yield from zip(cls._fields, value)
    for name in slot_names(cls):
        try:
            yield name, getattr(value, name)
        except AttributeError:
            continue
    try:
        attributes = vars(value)
    except TypeError:
        return
    yield from list(attributes.items())
