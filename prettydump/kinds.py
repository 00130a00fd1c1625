"""
Structural classification of Python values and annotations.

Every value reaching the renderer is mapped once onto a closed set of structural kinds
(Kind) described by an immutable TypeInfo. Annotations give the declared side
(describe), live values the runtime side (describe_value), and resolve() decides which
one the walker uses. The inlining policy (can_expand, can_inline, label_type) works on
TypeInfo only, one level deep.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections.abc as abc
import ctypes
import datetime
import enum
import functools
import inspect
import io
import ipaddress
import numbers
import pathlib
import queue
import re
import socket
import types
import uuid

from dataclasses import dataclass, is_dataclass
from dataclasses import fields as dataclass_fields
from enum import Enum, unique
from typing import (
    Annotated,
    Any,
    ClassVar,
    Final,
    ForwardRef,
    Iterable,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name, safe_str


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(str, Enum):
    """
    Closed set of structural kinds the renderer dispatches on.
    """
    BOOL = "bool"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    SEQUENCE = "sequence"
    MAP = "map"
    RECORD = "record"
    ANY = "any"
    REFERENCE = "reference"
    CHANNEL = "channel"
    FUNCTION = "function"
    ADDRESS = "address"
    OPAQUE = "opaque"
    INVALID = "invalid"


@dataclass(frozen=True)
class TypeInfo:
    """
    Static type descriptor.

    Attributes:
        kind: Structural kind.
        name: Display name, e.g. 'int', 'list[str]', 'Person | None'.
        origin: The class (or annotation) the descriptor was built from, None if unknown.
        args: Type arguments: (element,) for sequences, (key, value) for maps,
            (target,) for references. Empty for bare containers.
    """
    kind: Kind
    name: str
    origin: Any = None
    args: tuple["TypeInfo", ...] = ()

    @property
    def elem(self) -> "TypeInfo":
        """Element type of a sequence, ANY if unknown."""
        return self.args[0] if self.args else ANY

    @property
    def key(self) -> "TypeInfo":
        """Key type of a map, ANY if unknown."""
        return self.args[0] if self.args else ANY

    @property
    def value(self) -> "TypeInfo":
        """Value type of a map, ANY if unknown."""
        return self.args[1] if len(self.args) > 1 else ANY

    @property
    def target(self) -> "TypeInfo":
        """Referent type of a reference, ANY if unknown."""
        return self.args[0] if self.args else ANY

    @property
    def named(self) -> bool:
        """True for an interface declared by a concrete abstract class or protocol."""
        # typing.Any is a class since 3.11
        return self.kind is Kind.ANY and isinstance(self.origin, type) and self.origin not in (object, Any)


ANY: Final = TypeInfo(Kind.ANY, "Any", Any)
INVALID: Final = TypeInfo(Kind.INVALID, "None", type(None))

# Constants ------------------------------------------------------------------------------------------------------------

SCALAR_KINDS: Final = frozenset({
    Kind.BOOL, Kind.INTEGER, Kind.UNSIGNED, Kind.FLOAT, Kind.COMPLEX, Kind.OPAQUE, Kind.ADDRESS,
})

_CTYPES_KINDS = {
    **dict.fromkeys("bhilq", Kind.INTEGER),
    **dict.fromkeys("BHILQ", Kind.UNSIGNED),
    **dict.fromkeys("fdg", Kind.FLOAT),
    "?": Kind.BOOL,
    "P": Kind.ADDRESS,
}

_OPAQUE_TYPES = (
    numbers.Number,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    pathlib.PurePath,
    re.Pattern,
    re.Match,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    BaseException,
)

_CHANNEL_TYPES = (
    abc.Iterator,
    abc.AsyncIterator,
    io.IOBase,
    queue.Queue,
    queue.SimpleQueue,
    socket.socket,
    types.ModuleType,
)

_FUNCTION_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
)

_UNION_ORIGINS = (Union, types.UnionType)


# Methods --------------------------------------------------------------------------------------------------------------

@functools.lru_cache(maxsize=1024)
def kind_of(cls: type) -> Kind:
    """
    Classify a class onto its structural kind.

    Abstract classes, protocols and `object` itself are interfaces (ANY); user classes
    holding instance attributes are records; every leaf the renderer does not take apart
    is OPAQUE.

    Examples:
        >>> kind_of(bool)
        <Kind.BOOL: 'bool'>
        >>> kind_of(dict)
        <Kind.MAP: 'map'>
    """
    if cls is type(None):
        return Kind.INVALID
    if cls is object:
        return Kind.ANY
    if issubclass(cls, bool):
        return Kind.BOOL
    if issubclass(cls, Enum):
        return Kind.OPAQUE
    if issubclass(cls, ctypes._SimpleCData):
        return _CTYPES_KINDS.get(getattr(cls, "_type_", ""), Kind.OPAQUE)
    if issubclass(cls, ctypes._Pointer):
        return Kind.ADDRESS
    if issubclass(cls, int):
        return Kind.INTEGER
    if issubclass(cls, float):
        return Kind.FLOAT
    if issubclass(cls, complex):
        return Kind.COMPLEX
    if issubclass(cls, (str, bytes, bytearray)):
        return Kind.STRING
    if is_dataclass(cls) or is_namedtuple(cls):
        return Kind.RECORD
    if issubclass(cls, abc.Mapping):
        return Kind.MAP
    if issubclass(cls, (abc.Sequence, abc.Set, array.array)):
        return Kind.SEQUENCE
    if issubclass(cls, _OPAQUE_TYPES):
        return Kind.OPAQUE
    if issubclass(cls, _CHANNEL_TYPES):
        return Kind.CHANNEL
    if issubclass(cls, _FUNCTION_TYPES):
        return Kind.FUNCTION
    if inspect.isabstract(cls) or getattr(cls, "_is_protocol", False):
        return Kind.ANY
    if cls.__module__ != "builtins" and (has_instance_dict(cls) or slot_names(cls)):
        return Kind.RECORD
    return Kind.OPAQUE


def describe(annotation: Any, fully_qualified: bool = False) -> TypeInfo:
    """
    Describe a declared type given as a class or a typing annotation.

    Supports classes, parameterized generics, unions and Optional, Annotated, Literal,
    ClassVar, NewType, TypeVar and forward references. Unresolvable annotations are
    interfaces (ANY).

    Examples:
        >>> describe(list[int]).elem.kind
        <Kind.INTEGER: 'integer'>
        >>> describe(int | None).kind
        <Kind.REFERENCE: 'reference'>
    """
    if annotation is None or annotation is type(None):
        return INVALID
    if annotation is Any:
        return ANY
    if isinstance(annotation, (str, ForwardRef, TypeVar)):
        return TypeInfo(Kind.ANY, type_name(annotation))

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated or origin is ClassVar or origin is Final:
        return describe(args[0], fully_qualified) if args else ANY
    if origin is Literal:
        literal_types = {type(a) for a in args}
        if len(literal_types) == 1:
            return describe(literal_types.pop(), fully_qualified)
        return TypeInfo(Kind.ANY, type_name(annotation, fully_qualified), annotation)
    if origin in _UNION_ORIGINS:
        return _describe_union(annotation, args, fully_qualified)
    if origin is abc.Callable:
        return TypeInfo(Kind.FUNCTION, type_name(annotation, fully_qualified), origin)
    if origin is not None:
        return _describe_generic(annotation, origin, args, fully_qualified)

    if isinstance(annotation, type):
        return _describe_class(annotation, fully_qualified)
    if hasattr(annotation, "__supertype__"):
        info = describe(annotation.__supertype__, fully_qualified)
        return TypeInfo(info.kind, annotation.__name__, info.origin, info.args)
    return TypeInfo(Kind.ANY, safe_str(annotation))


def describe_value(value: Any, fully_qualified: bool = False) -> TypeInfo:
    """
    Describe the runtime type of a value.

    Bare containers are refined one level by inferring a common element (or key and value)
    type from their contents: the single shared non-None type, else ANY.

    Examples:
        >>> describe_value([1, 2]).name
        'list[int]'
        >>> describe_value({"a": 1}).name
        'dict[str, int]'
        >>> describe_value([1, "a"]).name
        'list'
    """
    if value is None:
        return INVALID
    info = _describe_class(type(value), fully_qualified)

    if info.kind is Kind.ANY:
        return TypeInfo(Kind.OPAQUE, info.name, info.origin)
    if info.kind is Kind.SEQUENCE:
        elem = _common_type(value, fully_qualified)
        if elem.kind is Kind.ANY:
            return info
        if info.origin is tuple:
            return TypeInfo(Kind.SEQUENCE, f"{info.name}[{elem.name}, ...]", info.origin, (elem,))
        return TypeInfo(Kind.SEQUENCE, f"{info.name}[{elem.name}]", info.origin, (elem,))
    if info.kind is Kind.MAP:
        try:
            key = _common_type(value.keys(), fully_qualified)
            val = _common_type(value.values(), fully_qualified)
        except Exception:
            return info
        if key.kind is Kind.ANY and val.kind is Kind.ANY:
            return info
        return TypeInfo(Kind.MAP, f"{info.name}[{key.name}, {val.name}]", info.origin, (key, val))
    return info


def resolve(value: Any, declared: TypeInfo | None, fully_qualified: bool = False) -> TypeInfo:
    """
    Return the TypeInfo the renderer uses for a value reached through a declared type.

    Interface and reference declarations are kept, the renderer unwraps them. None in a
    declared sequence or map is an absent nilable container, any other None is invalid.
    A declaration describing a different class than the value's own, or a bare container
    declaration, yields the runtime description.
    """
    if declared is None:
        return describe_value(value, fully_qualified)
    if declared.kind in (Kind.ANY, Kind.REFERENCE):
        return declared
    if value is None:
        if declared.kind in (Kind.SEQUENCE, Kind.MAP):
            return declared
        return INVALID
    if type(value) is not declared.origin:
        return describe_value(value, fully_qualified)
    if declared.kind in (Kind.SEQUENCE, Kind.MAP) and not declared.args:
        return describe_value(value, fully_qualified)
    return declared


def can_expand(info: TypeInfo) -> bool:
    """True for composite and indirection kinds, which never fit a single line by type alone."""
    return info.kind in (Kind.MAP, Kind.RECORD, Kind.ANY, Kind.SEQUENCE, Kind.REFERENCE)


def can_inline(info: TypeInfo, humanize: bool = False) -> bool:
    """
    Decide whether a value of this type renders on a single line.

    Looks one level deep only: a map, sequence or record is inline when none of its
    element, value or field types is expandable. Humanized output never inlines.
    """
    if humanize:
        return False
    kind = info.kind
    if kind is Kind.MAP:
        return not can_expand(info.value)
    if kind is Kind.SEQUENCE:
        return not can_expand(info.elem)
    if kind is Kind.RECORD:
        field_types = record_field_types(info.origin) if isinstance(info.origin, type) else None
        if field_types is None:
            return False
        return not any(can_expand(field_info) for _, field_info in field_types)
    if kind in (Kind.ANY, Kind.REFERENCE, Kind.CHANNEL, Kind.FUNCTION, Kind.ADDRESS):
        return False
    return True


def label_type(info: TypeInfo) -> bool:
    """A record field shows its value's type when declared as an interface or a record."""
    return info.kind in (Kind.ANY, Kind.RECORD)


def type_name(annotation: Any, fully_qualified: bool = False) -> str:
    """
    Display name of a class or typing annotation.

    Examples:
        >>> type_name(dict[str, int])
        'dict[str, int]'
        >>> type_name(int | None)
        'int | None'
    """
    if annotation is None or annotation is type(None):
        return "None"
    if annotation is Any:
        return "Any"
    if annotation is Ellipsis:
        return "..."
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, ForwardRef):
        return annotation.__forward_arg__
    if isinstance(annotation, TypeVar):
        return annotation.__name__
    if isinstance(annotation, (list, tuple)):
        return "[" + ", ".join(type_name(a, fully_qualified) for a in annotation) + "]"

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin in _UNION_ORIGINS:
        return " | ".join(type_name(a, fully_qualified) for a in args)
    if origin is Annotated:
        return type_name(args[0], fully_qualified)
    if origin is Literal:
        return f"Literal[{', '.join(repr(a) for a in args)}]"
    if origin is not None:
        if isinstance(origin, type):
            base = class_name(origin, fully_qualified=fully_qualified)
        else:
            base = getattr(annotation, "_name", None) or safe_str(origin)
        if not args:
            return base
        return f"{base}[{', '.join(type_name(a, fully_qualified) for a in args)}]"

    if isinstance(annotation, type):
        return class_name(annotation, fully_qualified=fully_qualified)
    if hasattr(annotation, "__supertype__"):
        return annotation.__name__
    return safe_str(annotation)


def is_namedtuple(cls: type) -> bool:
    """True for classes created by collections.namedtuple() or typing.NamedTuple."""
    return isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields")


def has_instance_dict(cls: type) -> bool:
    """True if instances of cls carry a __dict__."""
    return bool(getattr(cls, "__dictoffset__", 0))


def slot_names(cls: type) -> tuple[str, ...]:
    """Attribute names declared by __slots__ along the MRO, base classes first."""
    names = []
    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            names.append(name)
    return tuple(names)


@functools.lru_cache(maxsize=512)
def field_infos(cls: type, fully_qualified: bool = False) -> frozendict:
    """Declared TypeInfo of every annotated attribute of a class, keyed by name."""
    return frozendict({name: describe(hint, fully_qualified) for name, hint in _type_hints(cls).items()})


@functools.lru_cache(maxsize=512)
def record_field_types(cls: type, fully_qualified: bool = False) -> tuple[tuple[str, TypeInfo], ...] | None:
    """
    Static (name, TypeInfo) pairs of a record class.

    Returns None when the attribute set of the class is open, that is when its instances
    carry a __dict__ and the class is neither a dataclass nor a named tuple.
    """
    infos = field_infos(cls, fully_qualified)
    if is_dataclass(cls):
        names = [f.name for f in dataclass_fields(cls)]
    elif is_namedtuple(cls):
        names = list(cls._fields)
    elif not has_instance_dict(cls):
        names = list(slot_names(cls))
    else:
        return None
    return tuple((name, infos.get(name, ANY)) for name in names)


# Private Methods ------------------------------------------------------------------------------------------------------

def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except Exception:
        # Unresolvable forward references: fall back to raw annotations
        hints = {}
        for klass in reversed(cls.__mro__):
            try:
                hints.update(inspect.get_annotations(klass))
            except Exception:
                continue
        return hints


@functools.lru_cache(maxsize=1024)
def _describe_class(cls: type, fully_qualified: bool) -> TypeInfo:
    return TypeInfo(kind_of(cls), class_name(cls, fully_qualified=fully_qualified), cls)


def _describe_union(annotation: Any, args: tuple, fully_qualified: bool) -> TypeInfo:
    members = [a for a in args if a is not type(None)]
    name = type_name(annotation, fully_qualified)
    if len(members) == len(args):
        return TypeInfo(Kind.ANY, name, annotation)
    if len(members) == 1:
        target = describe(members[0], fully_qualified)
    else:
        target = TypeInfo(Kind.ANY, " | ".join(type_name(m, fully_qualified) for m in members))
    return TypeInfo(Kind.REFERENCE, name, annotation, (target,))


def _describe_generic(annotation: Any, origin: Any, args: tuple, fully_qualified: bool) -> TypeInfo:
    name = type_name(annotation, fully_qualified)
    if not isinstance(origin, type):
        return TypeInfo(Kind.ANY, name, annotation)

    kind = kind_of(origin)
    if kind is Kind.SEQUENCE:
        if len(args) == 2 and args[1] is Ellipsis:
            elem = describe(args[0], fully_qualified)
        else:
            elems = {describe(a, fully_qualified) for a in args}
            elem = elems.pop() if len(elems) == 1 else ANY
        return TypeInfo(kind, name, origin, (elem,))
    if kind is Kind.MAP:
        if len(args) != 2:
            return TypeInfo(kind, name, origin)
        return TypeInfo(kind, name, origin, (describe(args[0], fully_qualified), describe(args[1], fully_qualified)))
    return TypeInfo(kind, name, origin)


def _common_type(items: Iterable[Any], fully_qualified: bool) -> TypeInfo:
    found = set()
    try:
        for item in items:
            if item is None:
                continue
            found.add(type(item))
            if len(found) > 1:
                return ANY
    except Exception:
        return ANY
    if not found:
        return ANY
    return describe(found.pop(), fully_qualified)
